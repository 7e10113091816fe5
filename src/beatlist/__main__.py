"""Allow ``python -m beatlist``."""

import sys

from beatlist.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
