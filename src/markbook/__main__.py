#!/usr/bin/env python3
#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Run the markbook command line with ``python -m markbook``.

    python -m markbook book.md --format chat
"""

import sys

from markbook.cli import main

if __name__ == "__main__":
    sys.exit(main())
