"""
Superposition CLI entry point.

Usage:
    python -m superposition.cli demo
    python -m superposition.cli combine add --left 1 2 3 --right 4 5 --right-mode all
    python -m superposition.cli compare eq --left 1 2 3 4 --right 3 4 5 6
    python -m superposition.cli prime 29
"""

import sys
from .main import main

if __name__ == "__main__":
    sys.exit(main())
