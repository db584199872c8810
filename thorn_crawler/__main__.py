"""
Main entry point for the thorn_crawler package.

Allows running the crawler as: python -m thorn_crawler
"""

import sys

from thorn_crawler.cli import main

if __name__ == "__main__":
    sys.exit(main())
