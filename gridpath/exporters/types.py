"""
Serialization records for the JSON output
"""

from typing import TypedDict, List, NotRequired


class CoordinateDict(TypedDict):
    """A single grid cell"""
    x: int
    y: int


class GraphJsonDict(TypedDict):
    """Structure of the exported graph"""
    nodes: List[CoordinateDict]
    edges: List[List[CoordinateDict]]
    path: NotRequired[List[CoordinateDict]]
