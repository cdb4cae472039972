"""
Export functionality for flattened grid graphs

This module provides multiple export formats for a graph and its path:
- JSON: nodes, edges and path as coordinate records
- SVG: vector image of the grid with the path highlighted
- DataFrame: Polars tables of nodes and edges (written as CSV by the CLI)
"""

from .json_export import export_to_json
from .svg_export import export_to_svg
from .dataframe_export import export_edges_to_dataframe, export_nodes_to_dataframe

# Export exceptions for error handling
from .exceptions import (
    ExporterError,
    InvalidViewError,
    FileExportError,
    PathValidationError
)

# Export types for type hints
from .types import (
    CoordinateDict,
    GraphJsonDict
)

__all__ = [
    # Export functions
    "export_to_json",
    "export_to_svg",
    "export_edges_to_dataframe",
    "export_nodes_to_dataframe",
    # Exceptions
    "ExporterError",
    "InvalidViewError",
    "FileExportError",
    "PathValidationError",
    # Types
    "CoordinateDict",
    "GraphJsonDict",
]
