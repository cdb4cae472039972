"""
Tests for A* search, including property-based tests using Hypothesis
"""

import pytest
from hypothesis import given, strategies as st, settings, assume

from gridpath.core.coordinate import Coordinate
from gridpath.core.graph import GridGraph, build_grid_graph
from gridpath.core.astar import SearchResult, find_path, reconstruct_path, Node


@st.composite
def grid_and_two_cells(draw):
    """Grid dimensions plus two cells inside the grid"""
    width = draw(st.integers(min_value=1, max_value=9))
    height = draw(st.integers(min_value=1, max_value=9))
    start = Coordinate(draw(st.integers(0, width - 1)), draw(st.integers(0, height - 1)))
    goal = Coordinate(draw(st.integers(0, width - 1)), draw(st.integers(0, height - 1)))
    return width, height, start, goal


class TestFindPath:
    """Unit tests for find_path"""

    def test_3x3_corner_to_corner(self, grid_3x3, path_checker):
        """Test the reference scenario: cost 4, five cells"""
        result = find_path(grid_3x3, Coordinate(0, 0), Coordinate(2, 2))

        assert result is not None
        assert result.cost == 4
        assert len(result.path) == 5
        path_checker(result.coordinates(grid_3x3), Coordinate(0, 0), Coordinate(2, 2))

    def test_start_equals_goal(self):
        """Test that a path to the start cell is the start cell alone"""
        graph = build_grid_graph(1, 1)
        result = find_path(graph, Coordinate(0, 0), Coordinate(0, 0))

        assert result == SearchResult(cost=0, path=[0])

    def test_start_outside_grid(self, grid_3x3):
        """Test that an unknown start gives no result"""
        assert find_path(grid_3x3, Coordinate(3, 0), Coordinate(1, 1)) is None
        assert find_path(grid_3x3, Coordinate(-1, 0), Coordinate(1, 1)) is None

    def test_goal_outside_grid(self, grid_3x3):
        """Test that an unreachable goal gives no result"""
        assert find_path(grid_3x3, Coordinate(0, 0), Coordinate(7, 7)) is None

    def test_empty_graph(self):
        """Test that a zero-area grid gives no result"""
        graph = build_grid_graph(0, 3)
        assert find_path(graph, Coordinate(0, 0), Coordinate(0, 0)) is None

    def test_disconnected_goal(self):
        """Test that a goal in another component gives no result"""
        graph = GridGraph()
        a = graph.add_node(Coordinate(0, 0))
        b = graph.add_node(Coordinate(1, 0))
        graph.add_node(Coordinate(5, 5))
        graph.add_edge(a, b)

        assert find_path(graph, Coordinate(0, 0), Coordinate(5, 5)) is None

    def test_uses_edge_weights(self):
        """Test that the cheaper of two routes is chosen on a weighted graph"""
        graph = GridGraph()
        s = graph.add_node(Coordinate(0, 0))
        m = graph.add_node(Coordinate(1, 0))
        g = graph.add_node(Coordinate(2, 0))
        graph.add_edge(s, g, 5)
        graph.add_edge(s, m, 1)
        graph.add_edge(m, g, 1)

        result = find_path(graph, Coordinate(0, 0), Coordinate(2, 0))
        assert result.cost == 2
        assert result.path == [s, m, g]

    def test_deterministic(self):
        """Test that repeated searches return the same path"""
        graph = build_grid_graph(6, 6)
        first = find_path(graph, Coordinate(0, 0), Coordinate(5, 5))
        second = find_path(graph, Coordinate(0, 0), Coordinate(5, 5))

        assert first == second

    def test_graph_not_modified(self, grid_3x3):
        """Test that the search leaves the graph untouched"""
        before = [grid_3x3.edges(i) for i in grid_3x3.node_indices()]
        find_path(grid_3x3, Coordinate(0, 0), Coordinate(2, 2))
        after = [grid_3x3.edges(i) for i in grid_3x3.node_indices()]

        assert before == after

    def test_unknown_heuristic(self, grid_3x3):
        with pytest.raises(ValueError):
            find_path(grid_3x3, Coordinate(0, 0), Coordinate(2, 2), heuristic='nope')

    def test_legacy_heuristic_finds_a_path(self, path_checker):
        """Test that the historical heuristic still reaches the goal"""
        graph = build_grid_graph(5, 5)
        result = find_path(graph, Coordinate(0, 0), Coordinate(4, 1), heuristic='legacy')

        assert result is not None
        assert len(result.path) == result.cost + 1
        path_checker(result.coordinates(graph), Coordinate(0, 0), Coordinate(4, 1))

    def test_reconstruct_path(self):
        """Test that parent pointers are followed back to the start"""
        root = Node(f_cost=0, h_cost=0, sequence=0, g_cost=0, index=3)
        middle = Node(f_cost=0, h_cost=0, sequence=1, g_cost=1, index=7, parent=root)
        leaf = Node(f_cost=0, h_cost=0, sequence=2, g_cost=2, index=1, parent=middle)

        assert reconstruct_path(leaf) == [3, 7, 1]


class TestFindPathProperties:
    """Property-based tests for optimality on the full grid"""

    @given(grid_and_two_cells(), st.sampled_from(['euclidean', 'manhattan']))
    @settings(max_examples=150)
    def test_cost_is_manhattan_distance(self, case, heuristic):
        """Property: on an open grid the cost equals the Manhattan distance"""
        width, height, start, goal = case
        graph = build_grid_graph(width, height)

        result = find_path(graph, start, goal, heuristic=heuristic)

        assert result is not None
        assert result.cost == abs(start.x - goal.x) + abs(start.y - goal.y)
        assert len(result.path) == result.cost + 1

    @given(grid_and_two_cells())
    @settings(max_examples=100)
    def test_path_is_a_simple_unit_walk(self, case):
        """Property: consecutive cells differ by one unit in x or y, no repeats"""
        width, height, start, goal = case
        graph = build_grid_graph(width, height)

        coordinates = find_path(graph, start, goal).coordinates(graph)

        assert coordinates[0] == start
        assert coordinates[-1] == goal
        assert len(set(coordinates)) == len(coordinates)
        for a, b in zip(coordinates, coordinates[1:]):
            assert abs(a.x - b.x) + abs(a.y - b.y) == 1

    @given(
        width=st.integers(min_value=1, max_value=6),
        height=st.integers(min_value=1, max_value=6),
        x=st.integers(min_value=-5, max_value=12),
        y=st.integers(min_value=-5, max_value=12),
    )
    @settings(max_examples=100)
    def test_start_out_of_bounds_has_no_result(self, width, height, x, y):
        """Property: a start outside [0, W) x [0, H) gives no result"""
        assume(not (0 <= x < width and 0 <= y < height))
        graph = build_grid_graph(width, height)

        assert find_path(graph, Coordinate(x, y), Coordinate(0, 0)) is None
