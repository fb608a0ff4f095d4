#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Allow ``python -m textdiff``."""

import sys

from textdiff.cli import main

if __name__ == "__main__":
    sys.exit(main())
