"""Control Change numbers for the V-8HD MIDI implementation.

Each controllable parameter on the switcher is addressed by a single
Control Change number. The eight audio inputs occupy two runs of eight
consecutive numbers (levels and mutes), addressed from the first slot.
"""

from __future__ import annotations

from enum import IntEnum


class ControlChange(IntEnum):
    """Control Change numbers, one per device parameter."""

    VIDEO_FADER = 0x0A
    TRANSITION_TYPE = 0x0B
    MIX_WIPE_TIME = 0x0C
    PINP1_TIME = 0x0D
    PINP2_TIME = 0x0E
    DSK_TIME = 0x0F
    PINP1_SOURCE = 0x10
    PINP1_POSITION_H = 0x11
    PINP1_POSITION_V = 0x12
    PINP1_SIZE = 0x13
    PINP1_VIEW_ZOOM = 0x14
    PINP2_SOURCE = 0x15
    PINP2_POSITION_H = 0x16
    PINP2_POSITION_V = 0x17
    PINP2_SIZE = 0x18
    PINP2_VIEW_ZOOM = 0x19
    DSK_SOURCE = 0x1A
    DSK_LEVEL = 0x1B
    DSK_GAIN = 0x1C
    DSK_MIX_LEVEL = 0x1D
    SPLIT_VFX_A_SW = 0x1E
    SPLIT_VFX_A_TYPE = 0x1F
    SPLIT_VFX_B_SW = 0x20
    SPLIT_VFX_B_TYPE = 0x21
    OUTPUT_FADE_CCW = 0x22
    OUTPUT_FADE_CW = 0x23
    AUDIO_LEVEL_INPUT_1 = 0x24
    AUDIO_LEVEL_INPUT_2 = 0x25
    AUDIO_LEVEL_INPUT_3 = 0x26
    AUDIO_LEVEL_INPUT_4 = 0x27
    AUDIO_LEVEL_INPUT_5 = 0x28
    AUDIO_LEVEL_INPUT_6 = 0x29
    AUDIO_LEVEL_INPUT_7 = 0x2A
    AUDIO_LEVEL_INPUT_8 = 0x2B
    AUDIO_LEVEL_AUDIO_IN = 0x2C
    AUDIO_OUTPUT_LEVEL = 0x2D
    CUT_BUTTON = 0x34
    AUTO_BUTTON = 0x35
    H_CUT_I = 0x36
    H_AUTO_TAKE_I = 0x37
    AUDIO_MUTE_INPUT_1 = 0x38
    AUDIO_MUTE_INPUT_2 = 0x39
    AUDIO_MUTE_INPUT_3 = 0x3A
    AUDIO_MUTE_INPUT_4 = 0x3B
    AUDIO_MUTE_INPUT_5 = 0x3C
    AUDIO_MUTE_INPUT_6 = 0x3D
    AUDIO_MUTE_INPUT_7 = 0x3E
    AUDIO_MUTE_INPUT_8 = 0x3F
    AUDIO_MUTE_AUDIO_IN = 0x40
    AUDIO_MUTE_OUTPUT = 0x41


AUDIO_INPUT_COUNT = 8
