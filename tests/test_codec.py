"""Tests for the parameter codec."""

import math

import pytest

from roland_v8hd.exceptions import ValidationError
from roland_v8hd.models.enums import ButtonState, InputSource, SplitVfxType, TransitionType
from roland_v8hd.protocol.codec import (
    PARAMETERS,
    POSITION_SCALE,
    TIME_SCALE,
    ZOOM_SCALE,
    Bounded,
    decode,
    describe,
    encode,
    encode_bounded,
    encode_channel_offset,
    encode_direct,
    encode_enum,
    encode_toggle_with_identity,
    round_half_up,
)
from roland_v8hd.protocol.commands import ControlChange
from roland_v8hd.protocol.message import ControlChangeMessage

TIME_PARAMETERS = ["mix_wipe_time", "pinp1_time", "pinp2_time", "dsk_time"]
POSITION_PARAMETERS = [
    "pinp1_position_h",
    "pinp1_position_v",
    "pinp2_position_h",
    "pinp2_position_v",
]
ZOOM_PARAMETERS = ["pinp1_view_zoom", "pinp2_view_zoom"]


def test_round_half_up():
    """Halves round up, unlike Python's round()."""
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(2.4999) == 2
    assert round_half_up(0.0) == 0


@pytest.mark.parametrize("name", TIME_PARAMETERS)
def test_time_endpoints(name):
    """Times map 0.0 s to 0 and 4.0 s to 40."""
    assert encode(name, 0.0)[1] == 0
    assert encode(name, 4.0)[1] == 40
    assert encode(name, 0)[1] == 0


def test_time_is_monotonic():
    """Quantised time never decreases as the input grows."""
    values = [encode("mix_wipe_time", i / 100)[1] for i in range(0, 401)]
    assert values == sorted(values)
    assert values[0] == 0 and values[-1] == 40


def test_time_rounds_half_up():
    """0.25 s is sent as 3, not 2."""
    assert encode("dsk_time", 0.25)[1] == 3
    assert encode("dsk_time", 1.5)[1] == 15


@pytest.mark.parametrize("name", POSITION_PARAMETERS)
def test_position_endpoints(name):
    """Positions map -50/0/50 % to 10/60/110."""
    assert encode(name, -50)[1] == 10
    assert encode(name, 0)[1] == 60
    assert encode(name, 50)[1] == 110


def test_position_example():
    assert encode("pinp1_position_h", -25) == (ControlChange.PINP1_POSITION_H, 35)


@pytest.mark.parametrize("name", ZOOM_PARAMETERS)
def test_zoom_endpoints(name):
    """Zoom maps 100 % to 10 and 1000 % to 100."""
    assert encode(name, 100)[1] == 10
    assert encode(name, 1000)[1] == 100
    assert encode(name, 550)[1] == 55


def test_encode_bounded_rejects_out_of_range():
    """Bounds are inclusive; anything outside raises."""
    assert encode_bounded(4.0, 0.0, 4.0, TIME_SCALE) == 40
    with pytest.raises(ValidationError):
        encode_bounded(4.1, 0.0, 4.0, TIME_SCALE)
    with pytest.raises(ValidationError):
        encode_bounded(-0.1, 0.0, 4.0, TIME_SCALE)
    with pytest.raises(ValidationError):
        encode_bounded(50.5, -50, 50, POSITION_SCALE)
    with pytest.raises(ValidationError):
        encode_bounded(99, 100, 1000, ZOOM_SCALE)


def test_encode_bounded_rejects_non_numbers():
    with pytest.raises(ValidationError):
        encode_bounded(math.nan, 0.0, 4.0, TIME_SCALE)
    with pytest.raises(ValidationError):
        encode_bounded("1.5", 0.0, 4.0, TIME_SCALE)
    with pytest.raises(ValidationError):
        encode_bounded(True, 0.0, 4.0, TIME_SCALE)


def test_encode_direct():
    """Direct parameters pass through unchanged inside their bounds."""
    assert encode_direct(0, 0, 127) == 0
    assert encode_direct(127, 0, 127) == 127
    for bad in (-1, 128):
        with pytest.raises(ValidationError):
            encode_direct(bad, 0, 127)
    with pytest.raises(ValidationError):
        encode_direct(12.5, 0, 127)


@pytest.mark.parametrize("name,low,high", [
    ("video_fader", 0, 127),
    ("dsk_level", 0, 127),
    ("dsk_gain", 0, 127),
    ("dsk_mix_level", 0, 127),
    ("output_fade_ccw", 0, 63),
    ("output_fade_cw", 0, 63),
    ("audio_in_level", 0, 127),
    ("audio_output_level", 0, 127),
    ("pinp1_size", 10, 100),
    ("pinp2_size", 10, 100),
])
def test_direct_parameter_bounds(name, low, high):
    assert encode(name, low)[1] == low
    assert encode(name, high)[1] == high
    with pytest.raises(ValidationError):
        encode(name, low - 1)
    with pytest.raises(ValidationError):
        encode(name, high + 1)


def test_encode_enum():
    """Members and matching integers are accepted, others rejected."""
    assert encode_enum(TransitionType.WIPE, TransitionType) == 1
    assert encode_enum(7, InputSource) == InputSource.HDMI8
    assert encode("split_vfx_a_type", SplitVfxType.VALUE_OFFSET)[1] == 0x11
    with pytest.raises(ValidationError):
        encode_enum(2, TransitionType)
    with pytest.raises(ValidationError):
        encode("dsk_source", 16)


def test_encode_channel_offset():
    """Inputs 1-8 map injectively onto base..base+7."""
    controls = [encode_channel_offset(ControlChange.AUDIO_LEVEL_INPUT_1, c) for c in range(1, 9)]
    assert controls == [ControlChange.AUDIO_LEVEL_INPUT_1 + c - 1 for c in range(1, 9)]
    assert len(set(controls)) == 8
    for bad in (0, 9):
        with pytest.raises(ValidationError):
            encode_channel_offset(ControlChange.AUDIO_LEVEL_INPUT_1, bad)


def test_audio_input_level_needs_channel():
    assert encode("audio_input_level", 100, channel=3) == (ControlChange.AUDIO_LEVEL_INPUT_3, 100)
    with pytest.raises(ValidationError):
        encode("audio_input_level", 100)
    with pytest.raises(ValidationError):
        encode("audio_input_level", 128, channel=3)


def test_encode_toggle_with_identity():
    assert encode_toggle_with_identity(ButtonState.ON, 9) == 9
    assert encode_toggle_with_identity(ButtonState.OFF, 9) == 0
    with pytest.raises(ValidationError):
        encode_toggle_with_identity(2, 9)


@pytest.mark.parametrize("channel", range(1, 9))
def test_input_mute_sends_input_number(channel):
    """Muting input n sends n; unmuting sends 0."""
    control, value = encode("audio_input_mute", ButtonState.ON, channel=channel)
    assert control == ControlChange.AUDIO_MUTE_INPUT_1 + channel - 1
    assert value == channel
    assert encode("audio_input_mute", ButtonState.OFF, channel=channel)[1] == 0


def test_fixed_mute_values():
    """AUDIO IN mute sends 9 and OUTPUT mute sends 16 when ON."""
    assert encode("audio_in_mute", ButtonState.ON) == (ControlChange.AUDIO_MUTE_AUDIO_IN, 9)
    assert encode("audio_output_mute", ButtonState.ON) == (ControlChange.AUDIO_MUTE_OUTPUT, 16)
    assert encode("audio_in_mute", ButtonState.OFF)[1] == 0
    assert encode("audio_output_mute", ButtonState.OFF)[1] == 0


def test_triggers_send_one():
    assert encode("h_cut") == (ControlChange.H_CUT_I, 1)
    assert encode("h_auto_take") == (ControlChange.H_AUTO_TAKE_I, 1)


def test_unknown_parameter():
    with pytest.raises(ValidationError):
        encode("brightness", 10)


def test_validation_error_context():
    """Errors name the parameter, value and range."""
    with pytest.raises(ValidationError) as excinfo:
        encode("mix_wipe_time", 4.1)
    err = excinfo.value
    assert err.parameter == "mix_wipe_time"
    assert err.value == 4.1
    assert (err.minimum, err.maximum) == (0.0, 4.0)
    assert "mix_wipe_time" in str(err) and "4.1" in str(err)
    assert isinstance(err, ValueError)


def test_every_control_has_a_parameter():
    """Each control number is reachable from exactly one parameter slot."""
    reachable = set()
    for param in PARAMETERS.values():
        if param.channels:
            reachable.update(param.control + c for c in range(param.channels))
        else:
            reachable.add(param.control)
    assert reachable == {cc.value for cc in ControlChange}


def test_decode():
    """Decoding recovers the engineering-unit value."""
    assert decode(ControlChange.MIX_WIPE_TIME, 15).value == 1.5
    assert decode(ControlChange.PINP1_POSITION_H, 35).value == -25
    assert decode(ControlChange.PINP2_VIEW_ZOOM, 100).value == 1000
    assert decode(ControlChange.TRANSITION_TYPE, 1).value is TransitionType.WIPE
    muted = decode(ControlChange.AUDIO_MUTE_INPUT_4, 4)
    assert muted.parameter == "audio_input_mute"
    assert muted.channel == 4
    assert muted.value is ButtonState.ON
    assert decode(0x50, 0) is None


def test_describe():
    msg = ControlChangeMessage(channel=0, control=ControlChange.AUDIO_LEVEL_INPUT_2, value=90)
    assert describe(msg) == "audio_input_level[2]=90"
    assert describe(ControlChangeMessage(0, 0x50, 1)) == "unknown control 0x50=1"


def test_channel_on_unchannelled_parameter():
    """An input number on a parameter without inputs is rejected."""
    with pytest.raises(ValidationError):
        encode("video_fader", 10, channel=99)
    with pytest.raises(ValidationError):
        encode("audio_in_mute", ButtonState.ON, channel=1)


@pytest.mark.parametrize("value", [True, False, 1.0, "1", None])
def test_encode_enum_rejects_non_integers(value):
    """bool, float and other non-integers are not enumeration values."""
    with pytest.raises(ValidationError):
        encode_enum(value, ButtonState)
    with pytest.raises(ValidationError):
        encode("cut_button", value)


def test_bounded_limits_decode_to_themselves():
    """Each bounded parameter's limits survive encode and decode."""
    for param in PARAMETERS.values():
        transform = param.transform
        if not isinstance(transform, Bounded):
            continue
        for limit in (transform.minimum, transform.maximum):
            control, value = param.encode(limit)
            assert decode(control, value).value == limit
