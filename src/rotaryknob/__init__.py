"""A rotary knob control with a Qt host and demo."""
__version__ = "0.1.0"
