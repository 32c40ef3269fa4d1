#!/usr/bin/env python
"""Binary for the 'filter_lines' app"""

import sys
from infset.scripts.filter_lines import FilterLinesApp

if __name__ == "__main__":
    sys.exit(FilterLinesApp().run())
