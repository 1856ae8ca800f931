"""
Main entry point for running rowgrid as a module.

Usage:
    python -m rowgrid [options]
"""

from .demo import main

if __name__ == "__main__":
    import sys

    sys.exit(main())
