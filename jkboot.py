#!/usr/bin/env python
"""
Main entry point for running jkboot from a source checkout.
"""

import sys
import runpy
from pathlib import Path


def patch_path():
    """
    Prepends the location of the jkboot package to `sys.path`.

    We prepend, because otherwise this file is recognized as the `jkboot` module
    and not `src/jkboot`.
    """
    base_dir = Path(__file__).parent.absolute()
    # Include the sibling directory 'src' of this script in the python search
    # path, this allows loading of the jkboot package
    sys.path.insert(0, str(base_dir / "src"))


if __name__ == "__main__":
    patch_path()
    runpy.run_module("jkboot")
