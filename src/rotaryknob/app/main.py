"""
Run with: python -m rotaryknob
"""
from __future__ import annotations

import argparse
import logging
import sys

from rotaryknob.app.application import create_app
from rotaryknob.app.ui.main_window import DemoWindow
from rotaryknob.config import DARK_STYLESHEET_PATH
from rotaryknob.logging_config import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="rotaryknob", description="Rotary knob demo.")
    parser.add_argument("--no-style", action="store_true", help="Do not load the dark stylesheet.")
    parser.add_argument("--debug", action="store_true", help="Log at DEBUG level.")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the demo."""
    args = parse_args(argv)
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    app = create_app(stylesheet=None if args.no_style else DARK_STYLESHEET_PATH)
    win = DemoWindow()
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
