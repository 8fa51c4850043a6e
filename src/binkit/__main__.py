"""Allow ``python -m binkit``."""

import sys

from binkit.cli import main


if __name__ == "__main__":
    sys.exit(main())
