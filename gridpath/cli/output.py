"""
Output formatting and printing utilities for CLI
"""

from typing import Optional

from ..core.flatten import FlattenedView


def format_path(view: FlattenedView, limit: int = 8) -> str:
    """
    Short human-readable form of the path

    Args:
        view: Flattened view carrying the path
        limit: Maximum number of cells shown before eliding the middle

    Returns:
        e.g. "(0, 0) -> (1, 0) -> ... -> (2, 2)", or "no path"
    """
    if view.path is None:
        return "no path"

    cells = [f"({c.x}, {c.y})" for c in view.path]
    if len(cells) > limit:
        head = cells[:limit // 2]
        tail = cells[-(limit // 2):]
        cells = head + ['...'] + tail
    return ' -> '.join(cells)


def print_summary(view: FlattenedView, width: int, height: int, heuristic: Optional[str] = None) -> None:
    """
    Print a short report of the run

    Args:
        view: Flattened view of the graph
        width: Grid width
        height: Grid height
        heuristic: Heuristic used for the search
    """
    print(f"Grid {width}x{height}: {len(view.nodes)} nodes, {len(view.edges)} edges")
    if view.has_path:
        suffix = f" ({heuristic})" if heuristic else ""
        print(f"Path cost {view.cost}{suffix}: {format_path(view)}")
    else:
        print("No path found")


def print_separator(width: int = 70, char: str = '=') -> None:
    """
    Print a separator line

    Args:
        width: Width of the separator
        char: Character to use for separator
    """
    print(char * width)
