"""
Export a flattened graph to JSON format
"""

import json
import logging
from typing import List, Optional

from .types import CoordinateDict, GraphJsonDict
from .exceptions import FileExportError, PathValidationError
from .utils import validate_file_path, validate_view, write_text
from ..core.coordinate import Coordinate
from ..core.flatten import FlattenedView

logger = logging.getLogger(__name__)


def _coordinate_record(coordinate: Coordinate) -> CoordinateDict:
    return {'x': coordinate.x, 'y': coordinate.y}


def view_to_dict(view: FlattenedView) -> GraphJsonDict:
    """
    Build the JSON records of a view

    Edges are written as two-element arrays of coordinates. The 'path' key is
    only present when the search found a path.
    """
    nodes: List[CoordinateDict] = [_coordinate_record(node.coordinate) for node in view.nodes]
    edges = [
        [_coordinate_record(edge.start), _coordinate_record(edge.end)]
        for edge in view.edges
    ]

    data: GraphJsonDict = {'nodes': nodes, 'edges': edges}
    if view.path is not None:
        data['path'] = [_coordinate_record(coordinate) for coordinate in view.path]
    return data


def export_to_json(
    view: FlattenedView,
    file_path: Optional[str] = None,
    indent: Optional[int] = None
) -> str:
    """
    Export a flattened graph to JSON format

    Output is compact unless an indent is given.

    Args:
        view: Flattened graph, optionally carrying a path
        file_path: Optional path to save JSON file. If None, only returns JSON string
        indent: Number of spaces for indentation (default: compact)

    Returns:
        JSON string representation of the view

    Raises:
        InvalidViewError: If the view is inconsistent
        PathValidationError: If file_path is invalid or unsafe
        FileExportError: If serialization or the file write fails

    Examples:
        >>> from gridpath import build_grid_graph, flatten_graph
        >>> export_to_json(flatten_graph(build_grid_graph(1, 1)))
        '{"nodes":[{"x":0,"y":0}],"edges":[]}'
    """
    try:
        validated_view = validate_view(view)
    except Exception as e:
        logger.error(f"View validation failed: {e}")
        raise

    try:
        separators = (',', ':') if indent is None else None
        json_str = json.dumps(view_to_dict(validated_view), indent=indent, separators=separators)
    except (TypeError, ValueError) as e:
        logger.error(f"JSON serialization failed: {e}")
        raise FileExportError(f"Failed to serialize graph to JSON: {e}") from e

    if file_path:
        try:
            validated_path = validate_file_path(file_path)
        except PathValidationError:
            logger.error(f"Invalid JSON output path: {file_path}")
            raise

        write_text(validated_path, json_str)
        logger.info(f"JSON exported to: {validated_path}")

    return json_str
