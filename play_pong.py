#!/usr/bin/env python3
"""
Main script to launch Pongo with PyGame graphical interface
"""

import importlib.util
import sys

try:
    from pongo.gui.game_app import main

except ImportError as e:
    print(f"Import error: {e}")
    print()
    print("Checking dependencies:")
    for package in ("pygame", "pydantic"):
        if importlib.util.find_spec(package) is not None:
            print(f"✓ {package} is installed")
        else:
            print(f"✗ {package} is not installed - pip install {package}")
    sys.exit(1)

if __name__ == "__main__":
    print("=== PONGO ===")
    print("Pong, one paddle, one ball")
    print()

    sys.exit(main(sys.argv[1:]))
