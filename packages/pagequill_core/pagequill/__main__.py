"""
Entry point for running pagequill as a module.

Usage:
    python -m pagequill render cv.md --output cv.pdf
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
