"""Entry point for running minievent as a module.

This file allows the self-check to be run with: python -m minievent
"""

import sys

from minievent.app import main

if __name__ == "__main__":
    sys.exit(main())
