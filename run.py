#!/usr/bin/env python3
"""
Run the valuation demonstration scenarios.
"""

import sys

from realestate.reporting.cli import main


if __name__ == "__main__":
    sys.exit(main())
