"""
Export a flattened graph to Polars DataFrames
"""

import logging
from typing import List, Dict, Any

import polars as pl

from .exceptions import ExporterError
from .utils import validate_view
from ..core.flatten import FlattenedView

logger = logging.getLogger(__name__)

EDGE_SCHEMA = {
    'x1': pl.Int64,
    'y1': pl.Int64,
    'x2': pl.Int64,
    'y2': pl.Int64,
    'on_path': pl.Boolean,
}

NODE_SCHEMA = {
    'order': pl.Int64,
    'x': pl.Int64,
    'y': pl.Int64,
    'on_path': pl.Boolean,
}


def export_edges_to_dataframe(view: FlattenedView) -> pl.DataFrame:
    """
    Export the edge list to a Polars DataFrame, one row per undirected edge

    Rows keep the traversal order of the view. An empty graph gives an empty
    DataFrame with the same schema.

    Args:
        view: Flattened graph

    Returns:
        DataFrame with columns x1, y1, x2, y2, on_path

    Raises:
        InvalidViewError: If the view is inconsistent
        ExporterError: If the DataFrame cannot be created

    Examples:
        >>> from gridpath import build_grid_graph, flatten_graph
        >>> df = export_edges_to_dataframe(flatten_graph(build_grid_graph(3, 3)))
        >>> df.height
        12
    """
    try:
        validated_view = validate_view(view)
    except Exception as e:
        logger.error(f"View validation failed: {e}")
        raise

    rows: List[Dict[str, Any]] = [
        {
            'x1': edge.start.x,
            'y1': edge.start.y,
            'x2': edge.end.x,
            'y2': edge.end.y,
            'on_path': edge.on_path,
        }
        for edge in validated_view.edges
    ]

    try:
        df = pl.DataFrame(rows, schema=EDGE_SCHEMA)
    except Exception as e:
        logger.error(f"Failed to create Polars DataFrame: {e}")
        raise ExporterError(f"Failed to create edge DataFrame: {e}") from e

    logger.info(f"Created DataFrame with {len(df)} edge rows")
    return df


def export_nodes_to_dataframe(view: FlattenedView) -> pl.DataFrame:
    """
    Export the node list to a Polars DataFrame

    'order' is the position of the node in the breadth-first traversal.
    """
    try:
        validated_view = validate_view(view)
    except Exception as e:
        logger.error(f"View validation failed: {e}")
        raise

    rows: List[Dict[str, Any]] = [
        {
            'order': order,
            'x': node.coordinate.x,
            'y': node.coordinate.y,
            'on_path': node.on_path,
        }
        for order, node in enumerate(validated_view.nodes)
    ]

    try:
        df = pl.DataFrame(rows, schema=NODE_SCHEMA)
    except Exception as e:
        logger.error(f"Failed to create Polars DataFrame: {e}")
        raise ExporterError(f"Failed to create node DataFrame: {e}") from e

    logger.info(f"Created DataFrame with {len(df)} node rows")
    return df
