#!/usr/bin/env python3
"""
Main entry point for the Label Track Converter.

This module serves as the primary entry point for the console script.
"""

import sys
from labeltrack_converter.cli import main


if __name__ == "__main__":
    sys.exit(main())
