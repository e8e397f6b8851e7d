"""Run the mlexport test suite from a single entrypoint.

Run with:

    python tests/main.py
"""
import sys
from pathlib import Path

import pytest


def main(argv=None):
    """Run pytest on this directory; returns the pytest exit code."""
    if argv is None:
        argv = ["-v", str(Path(__file__).parent)]
    return pytest.main(argv)


if __name__ == "__main__":
    sys.exit(main())
