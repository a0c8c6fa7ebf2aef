"""``python -m topup`` のエントリポイント."""

import sys

from topup.cli import main

if __name__ == "__main__":
    sys.exit(main())
