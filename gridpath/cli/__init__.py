"""
CLI utilities for pathfind.py
"""

from .argument_parser import setup_argument_parser, parse_arguments, requested_outputs
from .output import print_summary, format_path, print_separator

__all__ = [
    'setup_argument_parser',
    'parse_arguments',
    'requested_outputs',
    'print_summary',
    'format_path',
    'print_separator'
]
