"""
Utility functions for exporters
"""

import os
import logging
from pathlib import Path
from typing import Any

from .exceptions import FileExportError, PathValidationError, InvalidViewError
from ..core.coordinate import Coordinate
from ..core.flatten import FlattenedView

logger = logging.getLogger(__name__)

# Constants
MAX_FILENAME_LENGTH = 255
RESERVED_NAMES = {'CON', 'PRN', 'AUX', 'NUL', 'COM1', 'COM2', 'COM3', 'COM4',
                  'COM5', 'COM6', 'COM7', 'COM8', 'COM9', 'LPT1', 'LPT2',
                  'LPT3', 'LPT4', 'LPT5', 'LPT6', 'LPT7', 'LPT8', 'LPT9'}


def validate_file_path(file_path: Any, must_exist: bool = False) -> Path:
    """
    Validate and sanitize file path for export operations

    Args:
        file_path: Path to validate (str or Path)
        must_exist: Whether parent directory must exist

    Returns:
        Resolved Path object

    Raises:
        PathValidationError: If path is invalid or unsafe

    Examples:
        >>> validate_file_path("grid.svg")  # doctest: +SKIP
        PosixPath('/current/dir/grid.svg')
        >>> validate_file_path("")  # doctest: +SKIP
        PathValidationError: File path must be a non-empty string
    """
    if isinstance(file_path, Path):
        file_path = str(file_path)
    if not file_path or not isinstance(file_path, str):
        raise PathValidationError(f"File path must be a non-empty string, got: {type(file_path)}")

    filename = os.path.basename(file_path)
    if len(filename) > MAX_FILENAME_LENGTH:
        raise PathValidationError(
            f"Filename too long ({len(filename)} chars). Maximum is {MAX_FILENAME_LENGTH}"
        )

    try:
        path = Path(file_path).resolve()
    except (ValueError, OSError) as e:
        raise PathValidationError(f"Invalid file path: {e}") from e

    if must_exist:
        parent = path.parent
        if not parent.exists():
            raise PathValidationError(f"Parent directory does not exist: {parent}")
        if not parent.is_dir():
            raise PathValidationError(f"Parent path is not a directory: {parent}")

    if path.stem.upper() in RESERVED_NAMES:
        raise PathValidationError(f"Reserved filename: {filename}")

    return path


def validate_view(view: Any) -> FlattenedView:
    """
    Check that a flattened view is consistent before exporting it

    Args:
        view: Object to validate

    Returns:
        The same view

    Raises:
        InvalidViewError: If the view is not a FlattenedView or is inconsistent
    """
    if not isinstance(view, FlattenedView):
        raise InvalidViewError(f"Expected a FlattenedView, got: {type(view)}")

    if view.has_path:
        if view.cost is None:
            raise InvalidViewError("View has a path but no cost")
        if len(view.path) != view.cost + 1:
            raise InvalidViewError(
                f"Path length {len(view.path)} does not match cost {view.cost}"
            )

    for edge in view.edges:
        if not isinstance(edge.start, Coordinate) or not isinstance(edge.end, Coordinate):
            raise InvalidViewError(f"Edge endpoints must be coordinates: {edge}")

    return view


def write_text(path: Path, content: str) -> None:
    """Write UTF-8 text, wrapping OS errors."""
    try:
        path.write_text(content, encoding='utf-8')
    except (OSError, IOError) as e:
        logger.error(f"Failed to write file: {e}")
        raise FileExportError(f"Failed to write file '{path}': {e}") from e
