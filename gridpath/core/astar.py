"""
A* shortest-path search over a GridGraph.

Cost function:
- Edge weight of every hop (1 on a built grid)
- Heuristic estimate from the node to the goal (see coordinate.HEURISTICS)

Ties on f-cost are broken by the smaller heuristic estimate, then by push
order, so the returned path is the same on every run.
"""

import heapq
import logging
from typing import Dict, List, Optional, Union
from dataclasses import dataclass, field

from .coordinate import Coordinate, Heuristic, get_heuristic
from .graph import GridGraph

logger = logging.getLogger(__name__)


@dataclass(order=True)
class Node:
    """Entry of the A* open set."""
    f_cost: int = field(compare=True)  # f = g + h
    h_cost: int = field(compare=True)  # Heuristic to goal
    sequence: int = field(compare=True)  # Push order
    g_cost: int = field(compare=False)  # Cost from start
    index: int = field(compare=False)
    parent: Optional['Node'] = field(default=None, compare=False)


@dataclass(frozen=True)
class SearchResult:
    """Total cost and node indices of a path, start and goal included."""
    cost: int
    path: List[int]

    def coordinates(self, graph: GridGraph) -> List[Coordinate]:
        return [graph.coordinate(index) for index in self.path]

    def __len__(self) -> int:
        return len(self.path)


def reconstruct_path(node: Node) -> List[int]:
    """Reconstruct path from goal node by following parent pointers."""
    path = []
    current = node

    while current is not None:
        path.append(current.index)
        current = current.parent

    path.reverse()
    return path


def find_path(
    graph: GridGraph,
    start: Coordinate,
    goal: Coordinate,
    heuristic: Union[str, Heuristic] = 'euclidean'
) -> Optional[SearchResult]:
    """
    Find a shortest path from start to goal using A*

    Args:
        graph: Graph to search, left untouched
        start: Coordinate of the start cell
        goal: Coordinate of the goal cell
        heuristic: Name from coordinate.HEURISTICS or a callable (goal, node) -> int

    Returns:
        SearchResult, or None if start is not in the graph or goal is unreachable

    Raises:
        ValueError: If the heuristic name is unknown
    """
    estimate = get_heuristic(heuristic)

    start_index = graph.find_node(start)
    if start_index is None:
        logger.debug(f"Start {start} is not part of the graph")
        return None

    sequence = 0
    h_start = estimate(goal, start)
    open_set = [Node(f_cost=h_start, h_cost=h_start, sequence=sequence, g_cost=0, index=start_index)]
    closed_set = set()

    # Track best g_cost to each node
    best_g_cost: Dict[int, int] = {start_index: 0}

    while open_set:
        current = heapq.heappop(open_set)

        # Goal reached
        if graph.coordinate(current.index) == goal:
            path = reconstruct_path(current)
            logger.debug(
                f"Path {start} -> {goal} found: cost {current.g_cost}, "
                f"{len(closed_set)} nodes expanded"
            )
            return SearchResult(cost=current.g_cost, path=path)

        # Already visited
        if current.index in closed_set:
            continue

        closed_set.add(current.index)

        for neighbor, weight in graph.edges(current.index):
            if neighbor in closed_set:
                continue

            g_cost = current.g_cost + weight

            # Skip if we've found a better path to this node
            if neighbor in best_g_cost and g_cost >= best_g_cost[neighbor]:
                continue

            best_g_cost[neighbor] = g_cost
            h_cost = estimate(goal, graph.coordinate(neighbor))
            sequence += 1

            heapq.heappush(open_set, Node(
                f_cost=g_cost + h_cost,
                h_cost=h_cost,
                sequence=sequence,
                g_cost=g_cost,
                index=neighbor,
                parent=current
            ))

    logger.debug(f"No path {start} -> {goal} ({len(closed_set)} nodes expanded)")
    return None
