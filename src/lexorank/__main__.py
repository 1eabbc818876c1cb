"""Allow running lexorank as a module: python -m lexorank."""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
