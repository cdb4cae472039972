"""
Command-line argument parser configuration
"""

import argparse
from typing import List, Optional


def setup_argument_parser() -> argparse.ArgumentParser:
    """
    Configure and return the argument parser

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog='gridpath',
        description='Find a shortest path on a grid and export it as JSON, SVG or CSV',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  gridpath -i grid.json -j result.json               # JSON only
  gridpath -i grid.json -s result.svg                # SVG image only
  gridpath -i grid.yaml -j out.json -s out.svg       # Both outputs
  gridpath -i grid.json --csv edges.csv              # Edge table as CSV
  gridpath -i grid.json -s out.svg --log-level DEBUG # Show search details
        """
    )

    parser.add_argument(
        '--input', '-i',
        required=True,
        help='Path to the input configuration (JSON or YAML)'
    )

    parser.add_argument(
        '--json', '-j',
        help='JSON file to write results to'
    )

    parser.add_argument(
        '--svg', '-s',
        help='SVG file to write results to'
    )

    parser.add_argument(
        '--csv',
        help='CSV file to write the edge table to'
    )

    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default='INFO',
        help='Set logging level (default: INFO)'
    )

    parser.add_argument(
        '--log-file',
        help='Also write logs (at DEBUG level) to this file'
    )

    return parser


def requested_outputs(args: argparse.Namespace) -> List[str]:
    """Output formats asked for on the command line, in write order."""
    return [fmt for fmt in ('json', 'svg', 'csv') if getattr(args, fmt, None)]


def parse_arguments(
    parser: argparse.ArgumentParser,
    argv: Optional[List[str]] = None
) -> argparse.Namespace:
    """
    Parse arguments and require at least one output file

    Exits with status 2 (argparse convention) when no output is given.
    """
    args = parser.parse_args(argv)
    if not requested_outputs(args):
        parser.error('at least one of --json, --svg or --csv is required')
    return args
