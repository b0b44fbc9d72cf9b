"""
Main entry point for the calendar invite application.
"""

import sys
from icsinvite.cli import main

if __name__ == "__main__":
    # Pass command line arguments to main
    sys.exit(main())
