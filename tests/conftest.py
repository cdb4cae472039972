"""
Shared pytest fixtures for testing
"""

import json

import pytest

from gridpath.core.coordinate import Coordinate
from gridpath.core.graph import build_grid_graph
from gridpath.core.astar import find_path
from gridpath.core.flatten import flatten_graph


@pytest.fixture
def grid_3x3():
    """3x3 grid graph"""
    return build_grid_graph(3, 3)


@pytest.fixture
def result_3x3(grid_3x3):
    """Path from the top-left to the bottom-right corner of the 3x3 grid"""
    return find_path(grid_3x3, Coordinate(0, 0), Coordinate(2, 2))


@pytest.fixture
def view_3x3(grid_3x3, result_3x3):
    """Flattened 3x3 grid with its path marked"""
    return flatten_graph(grid_3x3, result_3x3)


@pytest.fixture
def empty_view():
    """Flattened zero-area grid"""
    return flatten_graph(build_grid_graph(0, 5))


@pytest.fixture
def sample_config_dict():
    """Configuration in the flat input format"""
    return {
        'start': {'x': 0, 'y': 0},
        'goal': {'x': 2, 'y': 2},
        'width': 3,
        'height': 3,
        'scale': 20,
    }


@pytest.fixture
def config_file(tmp_path, sample_config_dict):
    """Configuration written to a JSON file"""
    path = tmp_path / 'grid.json'
    path.write_text(json.dumps(sample_config_dict), encoding='utf-8')
    return path


# Helper functions for tests

def assert_valid_path(coordinates, start, goal):
    """
    Assert that a coordinate sequence is a walk of unit steps from start to goal

    Args:
        coordinates: Path as a list of Coordinate
        start: Expected first coordinate
        goal: Expected last coordinate
    """
    assert coordinates[0] == start, f"Path starts at {coordinates[0]}, expected {start}"
    assert coordinates[-1] == goal, f"Path ends at {coordinates[-1]}, expected {goal}"
    assert len(set(coordinates)) == len(coordinates), "Path visits a cell twice"

    for a, b in zip(coordinates, coordinates[1:]):
        step = abs(a.x - b.x) + abs(a.y - b.y)
        assert step == 1, f"Step {a} -> {b} is not a single grid move"


@pytest.fixture
def path_checker():
    """Expose assert_valid_path to tests"""
    return assert_valid_path
