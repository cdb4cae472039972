"""
Export a flattened graph to an SVG image
"""

import logging
from pathlib import Path
from typing import List, NamedTuple, Optional, Tuple

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .exceptions import FileExportError, PathValidationError
from .utils import validate_file_path, validate_view, write_text
from ..core.coordinate import Coordinate
from ..core.flatten import FlattenedView

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
DEFAULT_TEMPLATE = "grid.svg"

PATH_EDGE_STYLE = "stroke:rgb(0, 255, 0); stroke-width:2"
EDGE_STYLE = "stroke:rgb(0, 0, 0); stroke-width:1"
START_STYLE = "stroke: rgb(255, 0, 0); fill: rgb(255, 0, 0)"
GOAL_STYLE = "stroke: rgb(0, 0, 255); fill: rgb(0, 0, 255)"


class Line(NamedTuple):
    x1: int
    y1: int
    x2: int
    y2: int
    style: str


class Circle(NamedTuple):
    cx: int
    cy: int
    r: int
    style: Optional[str] = None


class CanvasTransform(NamedTuple):
    """Maps grid coordinates to pixel positions: offset + scale * coordinate."""
    scale: int

    @property
    def offset(self) -> int:
        return self.scale // 2

    def x(self, coordinate: Coordinate) -> int:
        return self.offset + self.scale * coordinate.x

    def y(self, coordinate: Coordinate) -> int:
        return self.offset + self.scale * coordinate.y


def build_primitives(
    view: FlattenedView,
    scale: int,
    start: Coordinate,
    goal: Coordinate
) -> Tuple[List[Line], List[Circle]]:
    """
    Turn a view into drawable lines and circles

    Edges on the path are green and thicker. The start node is red, the goal
    node blue, both drawn larger than ordinary nodes.
    """
    transform = CanvasTransform(scale)

    lines = [
        Line(
            x1=transform.x(edge.start),
            y1=transform.y(edge.start),
            x2=transform.x(edge.end),
            y2=transform.y(edge.end),
            style=PATH_EDGE_STYLE if edge.on_path else EDGE_STYLE
        )
        for edge in view.edges
    ]

    circles = []
    for node in view.nodes:
        coordinate = node.coordinate
        cx, cy = transform.x(coordinate), transform.y(coordinate)
        if coordinate == start:
            circles.append(Circle(cx, cy, scale // 10, START_STYLE))
        elif coordinate == goal:
            circles.append(Circle(cx, cy, scale // 10, GOAL_STYLE))
        else:
            circles.append(Circle(cx, cy, scale // 15))

    return lines, circles


def export_to_svg(
    view: FlattenedView,
    scale: int,
    start: Coordinate,
    goal: Coordinate,
    width: int,
    height: int,
    file_path: Optional[str] = None,
    template_name: Optional[str] = None
) -> str:
    """
    Render a flattened graph as SVG using a Jinja2 template

    The canvas is (width * scale + scale) by (height * scale + scale) pixels.
    Lines are drawn first so nodes stay visible on top of them.

    Args:
        view: Flattened graph, optionally carrying path markings
        scale: Pixels per grid cell, must be positive
        start: Start coordinate (red marker)
        goal: Goal coordinate (blue marker)
        width: Grid width in cells
        height: Grid height in cells
        file_path: Optional path to save the SVG file
        template_name: Optional custom template name (default: "grid.svg")

    Returns:
        SVG document as a string

    Raises:
        ValueError: If scale is not positive
        InvalidViewError: If the view is inconsistent
        PathValidationError: If file_path is invalid or unsafe
        FileExportError: If the template cannot be loaded or rendered, or the write fails
    """
    if scale <= 0:
        raise ValueError(f"scale must be positive, got {scale}")

    try:
        validated_view = validate_view(view)
    except Exception as e:
        logger.error(f"View validation failed: {e}")
        raise

    if not TEMPLATE_DIR.exists():
        logger.error(f"Template directory not found: {TEMPLATE_DIR}")
        raise FileExportError(f"Template directory not found: {TEMPLATE_DIR}")

    env = Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=select_autoescape(['svg', 'xml']),
        trim_blocks=True,
        lstrip_blocks=True
    )

    template_file = template_name or DEFAULT_TEMPLATE
    try:
        template = env.get_template(template_file)
    except Exception as e:
        logger.error(f"Failed to load template '{template_file}': {e}")
        raise FileExportError(f"Failed to load template '{template_file}': {e}") from e

    lines, circles = build_primitives(validated_view, scale, start, goal)

    try:
        svg_content = template.render(
            width=max(0, width) * scale + scale,
            height=max(0, height) * scale + scale,
            lines=lines,
            circles=circles
        )
    except Exception as e:
        logger.error(f"Template rendering failed: {e}")
        raise FileExportError(f"Failed to render template: {e}") from e

    if file_path:
        try:
            validated_path = validate_file_path(file_path)
        except PathValidationError:
            logger.error(f"Invalid SVG output path: {file_path}")
            raise

        write_text(validated_path, svg_content)
        logger.info(f"SVG exported to: {validated_path}")

    return svg_content
