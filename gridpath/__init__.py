"""
Grid Path Finder
Shortest paths on rectangular grids, exported as JSON, SVG and tables
"""

from importlib.metadata import version, PackageNotFoundError

from .core.config import GridConfig
from .core.coordinate import Coordinate
from .core.graph import GridGraph, build_grid_graph
from .core.astar import SearchResult, find_path
from .core.flatten import FlattenedView, OnPathPolicy, flatten_graph

try:
    __version__ = version("gridpath")
except PackageNotFoundError:
    # Package not installed (development mode)
    __version__ = "0.0.0.dev"

__all__ = [
    "GridConfig",
    "Coordinate",
    "GridGraph",
    "build_grid_graph",
    "SearchResult",
    "find_path",
    "FlattenedView",
    "OnPathPolicy",
    "flatten_graph",
]
