"""Module entry-point for ``python -m unity_lisp``."""

import sys

from unity_lisp.cli import main

if __name__ == "__main__":
    sys.exit(main())
