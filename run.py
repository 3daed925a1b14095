"""
Entry Point Script (Bootstrap)
==============================
Starts the knob demo from a source checkout without installing the package.

Why is this file needed?
------------------------
1. It is located outside the 'src' package to act as a convenient runner.
2. It modifies 'sys.path' so imports like 'from rotaryknob.model ...' resolve.

Usage:
    $ python run.py [--no-style] [--debug]
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from rotaryknob.app.main import main

if __name__ == "__main__":
    sys.exit(main())
