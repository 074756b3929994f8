"""
Module execution entry point.

Allows running with: python -m vcbridge_cli
"""

import sys
from vcbridge_cli.main import main

if __name__ == "__main__":
    sys.exit(main())
