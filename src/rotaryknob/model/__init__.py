"""
The MODEL layer contains the knob's state, rotation rules and paint routine.
It has NO knowledge of the GUI toolkit (Qt); hosts plug in through the
`KnobHost` and `DrawingSurface` protocols.
"""
from rotaryknob.model.knob import Key, KnobHost, RotaryKnob
from rotaryknob.model.rotation import RotationRange, normalize_rotation, tick_directions
from rotaryknob.model.surface import Color, DrawingSurface, LabelFont
from rotaryknob.model.vectors import dot, length, normalize

__all__ = [
    "Color",
    "DrawingSurface",
    "Key",
    "KnobHost",
    "LabelFont",
    "RotaryKnob",
    "RotationRange",
    "dot",
    "length",
    "normalize",
    "normalize_rotation",
    "tick_directions",
]
