#!/usr/bin/env python3
"""
This script serves as the executable entry point for the run-image application.

It puts the project root on the Python path so the `run_image` package can be
imported without installation, then runs `run_image.main.main`. Run it from the
directory holding `rootfs_img`, next to a `../linux` kernel checkout.
"""

import sys
from pathlib import Path

# The script is in `bin/`, so the project root is two levels up.
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from run_image.main import main

if __name__ == "__main__":
    main()
