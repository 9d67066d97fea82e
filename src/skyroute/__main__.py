"""Main entry point for the SkyRoute package when run as a module.

This module enables running SkyRoute directly using 'python -m skyroute'.
"""

import sys

from . import cli


def main():
    """Main entry point for the package."""
    sys.exit(cli.main())


if __name__ == "__main__":
    main()
