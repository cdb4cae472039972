"""
Grid graph construction, A* search and graph flattening.
"""

from .coordinate import Coordinate, HEURISTICS, get_heuristic
from .graph import GridGraph, build_grid_graph
from .astar import SearchResult, find_path
from .flatten import FlatEdge, FlatNode, FlattenedView, OnPathPolicy, flatten_graph
from .config import GridConfig

__all__ = [
    'Coordinate',
    'HEURISTICS',
    'get_heuristic',
    'GridGraph',
    'build_grid_graph',
    'SearchResult',
    'find_path',
    'FlatEdge',
    'FlatNode',
    'FlattenedView',
    'OnPathPolicy',
    'flatten_graph',
    'GridConfig',
]
