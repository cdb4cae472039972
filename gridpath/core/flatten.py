"""
Flatten a GridGraph into the node/edge lists handed to the exporters
"""

import logging
from collections import deque
from enum import Enum
from typing import List, Optional, Set, Tuple
from dataclasses import dataclass, field

from .astar import SearchResult
from .coordinate import Coordinate
from .graph import GridGraph

logger = logging.getLogger(__name__)


class OnPathPolicy(str, Enum):
    """
    Rule deciding whether an edge is drawn as part of the path

    ENDPOINTS: both endpoints are path nodes, even if they are not
        consecutive in the path
    CONSECUTIVE: the endpoints follow each other in the path
    """
    ENDPOINTS = 'endpoints'
    CONSECUTIVE = 'consecutive'


@dataclass(frozen=True)
class FlatNode:
    coordinate: Coordinate
    on_path: bool = False


@dataclass(frozen=True)
class FlatEdge:
    """Undirected edge, oriented the way the traversal first reached it."""
    start: Coordinate
    end: Coordinate
    on_path: bool = False


@dataclass(frozen=True)
class FlattenedView:
    """Deterministic, read-only snapshot of a graph and its search result."""
    nodes: List[FlatNode] = field(default_factory=list)
    edges: List[FlatEdge] = field(default_factory=list)
    path: Optional[List[Coordinate]] = None
    cost: Optional[int] = None

    @property
    def has_path(self) -> bool:
        return self.path is not None

    @property
    def on_path_edges(self) -> List[FlatEdge]:
        return [edge for edge in self.edges if edge.on_path]


def _path_steps(path: List[int]) -> Set[Tuple[int, int]]:
    """Consecutive index pairs of a path, in both directions."""
    steps = set()
    for a, b in zip(path, path[1:]):
        steps.add((a, b))
        steps.add((b, a))
    return steps


def flatten_graph(
    graph: GridGraph,
    result: Optional[SearchResult] = None,
    policy: OnPathPolicy = OnPathPolicy.ENDPOINTS
) -> FlattenedView:
    """
    Traverse the graph breadth-first and collect nodes and unique edges

    The traversal starts from the first node created. Each undirected edge is
    emitted once: a (node, neighbor) pair is skipped when (neighbor, node)
    has already been emitted.

    Args:
        graph: Graph to flatten
        result: Optional search result used to mark path nodes and edges
        policy: Rule used to mark edges as on-path

    Returns:
        FlattenedView; empty lists when the graph has no nodes
    """
    policy = OnPathPolicy(policy)

    if graph.is_empty:
        return FlattenedView()

    path_nodes = set(result.path) if result is not None else set()
    path_steps = _path_steps(result.path) if result is not None else set()

    def edge_on_path(a: int, b: int) -> bool:
        if result is None:
            return False
        if policy is OnPathPolicy.CONSECUTIVE:
            return (a, b) in path_steps
        return a in path_nodes and b in path_nodes

    nodes: List[FlatNode] = []
    edges: List[FlatEdge] = []
    emitted: Set[Tuple[Coordinate, Coordinate]] = set()

    root = graph.node_indices()[0]
    visited = {root}
    queue = deque([root])

    while queue:
        current = queue.popleft()
        coordinate = graph.coordinate(current)
        nodes.append(FlatNode(coordinate, current in path_nodes))

        for neighbor in graph.neighbors(current):
            neighbor_coordinate = graph.coordinate(neighbor)
            if (neighbor_coordinate, coordinate) not in emitted:
                emitted.add((coordinate, neighbor_coordinate))
                edges.append(FlatEdge(coordinate, neighbor_coordinate, edge_on_path(current, neighbor)))

            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)

    if len(nodes) < graph.node_count:
        logger.warning(f"Graph is disconnected: {graph.node_count - len(nodes)} nodes not reachable from {nodes[0].coordinate}")

    logger.debug(f"Flattened graph: {len(nodes)} nodes, {len(edges)} edges")

    return FlattenedView(
        nodes=nodes,
        edges=edges,
        path=result.coordinates(graph) if result is not None else None,
        cost=result.cost if result is not None else None
    )
