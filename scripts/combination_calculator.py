#!/usr/bin/env python3
"""Print the sheet variant combination report.

Shows how many distinct size/color/height variants the option catalogs
allow, to help size performance tests.

Usage:
    python scripts/combination_calculator.py
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from perfkit.catalog.combinations import display_combination_info


if __name__ == "__main__":
    display_combination_info()
