"""
Entry point for the Tally CLI when run as a module.

    python -m tally.cli
"""

import sys

from . import main

if __name__ == '__main__':
    sys.exit(main())
