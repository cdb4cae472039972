"""
Entry point for gridpath CLI
"""
import sys

from pathfind import main

if __name__ == '__main__':
    sys.exit(main())
