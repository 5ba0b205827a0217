"""Enumerated parameter values understood by the V-8HD.

Member values are the protocol values sent on the wire.
"""

from __future__ import annotations

from enum import IntEnum


class ButtonState(IntEnum):
    """State of a switch or button."""

    OFF = 0x00
    ON = 0x01


class TransitionType(IntEnum):
    """Video transition type."""

    MIX = 0x00
    WIPE = 0x01


class InputSource(IntEnum):
    """Video sources selectable for PinP and DSK."""

    HDMI1 = 0x00
    HDMI2 = 0x01
    HDMI3 = 0x02
    HDMI4 = 0x03
    HDMI5 = 0x04
    HDMI6 = 0x05
    HDMI7 = 0x06
    HDMI8 = 0x07
    STILL1 = 0x08
    STILL2 = 0x09
    STILL3 = 0x0A
    STILL4 = 0x0B
    STILL5 = 0x0C
    STILL6 = 0x0D
    STILL7 = 0x0E
    STILL8 = 0x0F


class SplitVfxType(IntEnum):
    """SPLIT/VFX effect types (owner's manual p. 106)."""

    SPLIT_V = 0x00
    SPLIT_H = 0x01
    PART_MOSAIC = 0x02
    BACKGROUND_MOSAIC = 0x03
    FULL_MOSAIC = 0x04
    WAVE = 0x05
    RGB_REPLACE = 0x06
    COLOR_PASS = 0x07
    NEGATIVE = 0x08
    COLORIZE = 0x09
    POSTERIZE = 0x0A
    SILHOUETTE = 0x0B
    EMBOSS = 0x0C
    FIND_EDGES = 0x0D
    MONOCOLOR = 0x0E
    HUE_OFFSET = 0x0F
    SATURATION_OFFSET = 0x10
    VALUE_OFFSET = 0x11
