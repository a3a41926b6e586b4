"""Package entry point for ``python -m kioku``.

Delegates to the CLI's main() and exits with its return code.
"""

import sys

from kioku.cli import main

if __name__ == "__main__":
    sys.exit(main())
