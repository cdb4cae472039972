"""
Grid graph for shortest-path search.

Nodes live in a fixed table and are addressed by their integer index.
Nodes and edges are only ever added while the grid is being built.
"""

import logging
from typing import Iterator, List, Optional, Tuple

from .coordinate import Coordinate

logger = logging.getLogger(__name__)


class GridGraph:
    """
    Undirected graph with a Coordinate payload on every node.

    Adjacency lists keep edge insertion order, which makes every traversal
    over the graph reproducible.
    """

    def __init__(self):
        self._coordinates: List[Coordinate] = []
        self._adjacency: List[List[Tuple[int, int]]] = []
        self._edge_count = 0

    def add_node(self, coordinate: Coordinate) -> int:
        """Append a node and return its index."""
        self._coordinates.append(coordinate)
        self._adjacency.append([])
        return len(self._coordinates) - 1

    def add_edge(self, a: int, b: int, weight: int = 1) -> None:
        """Connect two existing nodes in both directions."""
        self._check_index(a)
        self._check_index(b)
        self._adjacency[a].append((b, weight))
        self._adjacency[b].append((a, weight))
        self._edge_count += 1

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._coordinates):
            raise IndexError(f"Node index {index} out of range (0..{len(self._coordinates) - 1})")

    def coordinate(self, index: int) -> Coordinate:
        return self._coordinates[index]

    def edges(self, index: int) -> List[Tuple[int, int]]:
        """(neighbor index, weight) pairs of a node, in insertion order."""
        return list(self._adjacency[index])

    def neighbors(self, index: int) -> Iterator[int]:
        for neighbor, _ in self._adjacency[index]:
            yield neighbor

    def degree(self, index: int) -> int:
        return len(self._adjacency[index])

    def node_indices(self) -> range:
        """Node indices in creation order."""
        return range(len(self._coordinates))

    def find_node(self, coordinate: Coordinate) -> Optional[int]:
        """Return the first node carrying the coordinate, or None."""
        for index, node_coordinate in enumerate(self._coordinates):
            if node_coordinate == coordinate:
                return index
        return None

    @property
    def node_count(self) -> int:
        return len(self._coordinates)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    @property
    def is_empty(self) -> bool:
        return not self._coordinates

    def __len__(self) -> int:
        return len(self._coordinates)

    def __contains__(self, coordinate: object) -> bool:
        return coordinate in self._coordinates

    def __repr__(self) -> str:
        return f"GridGraph(nodes={self.node_count}, edges={self.edge_count})"


def build_grid_graph(width: int, height: int) -> GridGraph:
    """
    Build a 4-neighbor grid graph of width x height cells

    Cells are created row by row, left to right. Each new cell is linked to
    the cell above it and to the cell on its left, so every edge is added
    exactly once, when its second endpoint is created.

    Args:
        width: Number of columns (non-positive values give an empty graph)
        height: Number of rows (non-positive values give an empty graph)

    Returns:
        GridGraph with width * height nodes and unit edge weights
    """
    width = max(0, width)
    height = max(0, height)

    graph = GridGraph()
    if width == 0 or height == 0:
        logger.debug(f"Empty grid requested ({width}x{height})")
        return graph

    # Last node created in each column
    previous_row: List[Optional[int]] = [None] * width

    for y in range(height):
        left = None
        for x in range(width):
            current = graph.add_node(Coordinate(x, y))

            above = previous_row[x]
            if above is not None:
                graph.add_edge(current, above, 1)
            if left is not None:
                graph.add_edge(current, left, 1)

            left = current
            previous_row[x] = current

    logger.debug(f"Built {width}x{height} grid: {graph.node_count} nodes, {graph.edge_count} edges")
    return graph
