#!/usr/bin/env python
"""
Simple CLI for grid path finding
Usage: python pathfind.py -i grid.json [-j out.json] [-s out.svg] [--csv edges.csv]
"""

import sys
import logging
from pathlib import Path
from typing import List, Optional, Tuple

from gridpath import GridConfig
from gridpath.core.astar import SearchResult, find_path
from gridpath.core.flatten import FlattenedView, flatten_graph
from gridpath.core.graph import GridGraph, build_grid_graph
from gridpath.cli import (
    setup_argument_parser,
    parse_arguments,
    requested_outputs,
    print_summary,
    print_separator
)
from gridpath.exporters import (
    ExporterError,
    export_to_json,
    export_to_svg,
    export_edges_to_dataframe
)
from gridpath.exporters.utils import validate_file_path

logger = logging.getLogger(__name__)


def setup_logging(log_level: str = 'INFO', log_file: Optional[Path] = None) -> None:
    """
    Configure logging to the console and, optionally, a file

    Args:
        log_level: Console logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional path of a log file receiving DEBUG output
    """
    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, log_level.upper()))
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


def run(config: GridConfig) -> Tuple[GridGraph, Optional[SearchResult], FlattenedView]:
    """
    Build the grid, search it and flatten it for export

    Args:
        config: Validated configuration

    Returns:
        (graph, search result or None, flattened view)
    """
    graph = build_grid_graph(config.width, config.height)
    logger.info(f"Built {config.width}x{config.height} grid with {graph.node_count} nodes and {graph.edge_count} edges")

    result = find_path(graph, config.start, config.goal, heuristic=config.heuristic)
    if result is None:
        logger.warning(f"No path from {config.start} to {config.goal}")
    else:
        logger.info(f"Path from {config.start} to {config.goal} costs {result.cost}")

    view = flatten_graph(graph, result, policy=config.on_path_policy)
    return graph, result, view


def write_outputs(config: GridConfig, view: FlattenedView, outputs: dict) -> List[Path]:
    """
    Write every requested output file

    Args:
        config: Configuration (scale, start, goal, dimensions for the SVG)
        view: Flattened graph
        outputs: Mapping of format ('json', 'svg', 'csv') to file path

    Returns:
        Resolved paths of the written files
    """
    written = []

    if outputs.get('json'):
        export_to_json(view, outputs['json'])
        written.append(validate_file_path(outputs['json']))

    if outputs.get('svg'):
        export_to_svg(
            view,
            scale=config.scale,
            start=config.start,
            goal=config.goal,
            width=config.width,
            height=config.height,
            file_path=outputs['svg']
        )
        written.append(validate_file_path(outputs['svg']))

    if outputs.get('csv'):
        csv_path = validate_file_path(outputs['csv'])
        df = export_edges_to_dataframe(view)
        try:
            df.write_csv(str(csv_path))
        except OSError as e:
            logger.error(f"Failed to write CSV file: {e}")
            raise ExporterError(f"Failed to write file '{csv_path}': {e}") from e
        logger.info(f"CSV exported to: {csv_path}")
        written.append(csv_path)

    return written


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the path finding CLI"""
    parser = setup_argument_parser()
    args = parse_arguments(parser, argv)

    try:
        setup_logging(args.log_level, Path(args.log_file) if args.log_file else None)
    except OSError as e:
        print(f"❌ Cannot open log file: {e}", file=sys.stderr)
        return 1

    # Load configuration; a malformed input aborts before any work is done
    try:
        config = GridConfig.from_file(args.input)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        print(f"❌ {e}", file=sys.stderr)
        return 1

    _, _, view = run(config)

    outputs = {fmt: getattr(args, fmt) for fmt in requested_outputs(args)}
    try:
        written = write_outputs(config, view, outputs)
    except ExporterError as e:
        logger.error(f"Export failed: {e}")
        print(f"❌ Export failed: {e}", file=sys.stderr)
        return 1

    print_separator()
    print_summary(view, config.width, config.height, config.heuristic)
    for path in written:
        print(f"📄 Saved: {path}")
    print_separator()

    return 0


if __name__ == '__main__':
    sys.exit(main())
