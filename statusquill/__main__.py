"""
Entry point for running StatusQuill as a module.

Usage:
    python -m statusquill render lines.json --output report.pdf
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
