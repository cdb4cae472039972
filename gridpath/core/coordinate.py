"""
Grid coordinates and distance estimates used by the path finder
"""

import math
from typing import Callable, Dict, Union
from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    """A cell position on the grid."""
    x: int
    y: int

    def __add__(self, other: 'Coordinate') -> 'Coordinate':
        if not isinstance(other, Coordinate):
            return NotImplemented
        return Coordinate(self.x + other.x, self.y + other.y)

    def as_dict(self) -> Dict[str, int]:
        """Serializable form, matching the input file format."""
        return {'x': self.x, 'y': self.y}


def euclidean_distance(a: Coordinate, b: Coordinate) -> int:
    """Straight-line distance, truncated toward zero."""
    return int(math.sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2))


def manhattan_distance(a: Coordinate, b: Coordinate) -> int:
    """Calculate Manhattan distance between two cells."""
    return abs(a.x - b.x) + abs(a.y - b.y)


def legacy_distance(goal: Coordinate, node: Coordinate) -> int:
    """
    Distance estimate of the first release of the tool.

    The second term only depends on the goal, so the estimate can exceed the
    real hop count and the search may return a longer path. Only use it to
    reproduce old outputs.
    """
    return int(math.sqrt((goal.y - node.y) ** 2 + (goal.x - goal.y) ** 2))


Heuristic = Callable[[Coordinate, Coordinate], int]

HEURISTICS: Dict[str, Heuristic] = {
    'euclidean': euclidean_distance,
    'manhattan': manhattan_distance,
    'legacy': legacy_distance,
}


def get_heuristic(heuristic: Union[str, Heuristic]) -> Heuristic:
    """
    Resolve a heuristic by registry name

    Args:
        heuristic: Name from HEURISTICS, or a callable taking (goal, node)

    Returns:
        Callable computing the estimate

    Raises:
        ValueError: If the name is not registered
    """
    if callable(heuristic):
        return heuristic
    try:
        return HEURISTICS[heuristic]
    except KeyError:
        raise ValueError(
            f"Unknown heuristic '{heuristic}'. Available: {', '.join(sorted(HEURISTICS))}"
        ) from None
