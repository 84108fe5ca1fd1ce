"""
Module execution entry point.

Allows running with: python -m merkletx_cli
"""

import sys
from merkletx_cli.main import main

if __name__ == "__main__":
    sys.exit(main())
