"""Allow ``python -m docsnav``."""

import sys

from docsnav.cli import main

if __name__ == "__main__":
    sys.exit(main())
