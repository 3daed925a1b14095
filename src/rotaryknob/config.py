"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths, dial defaults and
the colour palette of the knob.

Why is this file needed?
------------------------
1. Abstraction: It prevents hardcoded paths and magic numbers scattered
   throughout the model and the Qt host.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find assets (stylesheets) when the app is frozen into an .exe.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    DARK_STYLESHEET_PATH (str): Absolute path to the demo's dark stylesheet.
"""
import sys
import os
from pathlib import Path


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/rotaryknob/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


# Global Constants
ASSETS_PATH: str = get_resource_path("assets")
DARK_STYLESHEET_PATH: str = os.path.join(ASSETS_PATH, "css", "dark.qss")

# Dial defaults
DEFAULT_DIAMETER: float = 100.0
DEFAULT_PADDING: float = 2.0
MIN_RADIUS: float = 10.0
INDICATOR_RADIUS: float = 5.0
INDICATOR_INSET: float = 5.0
DEFAULT_TICK_SPACING: float = 10.0
FULL_TURN: float = 360.0

# Rendering
DISABLED_OPACITY: float = 0.4
FOCUSED_OUTLINE_WIDTH: float = 2.0
OUTLINE_WIDTH: float = 1.0
TICK_WIDTH: float = 1.0
LABEL_FORMAT: str = "{:.1f}°"

# Palette (RGB)
ACCENT_COLOR: tuple[int, int, int] = (0x03, 0x9E, 0xD3)
BODY_LIGHT_COLOR: tuple[int, int, int] = (237, 237, 237)
BODY_DARK_COLOR: tuple[int, int, int] = (207, 207, 207)
OUTLINE_COLOR: tuple[int, int, int] = (208, 208, 208)
TICK_COLOR: tuple[int, int, int] = (153, 153, 153)
INDICATOR_COLOR: tuple[int, int, int] = (102, 102, 102)
LABEL_COLOR: tuple[int, int, int] = (51, 51, 51)
