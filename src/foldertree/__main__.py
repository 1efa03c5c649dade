"""Module entrypoint for ``python -m foldertree``.

All argument parsing and runtime setup happen in ``foldertree.cli``.
"""

import sys

from foldertree.cli import main

if __name__ == "__main__":
    sys.exit(main())
