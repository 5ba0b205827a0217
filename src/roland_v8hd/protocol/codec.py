"""Parameter codec: semantic values to Control Change values and back.

Every device parameter is described by a :class:`Parameter` entry in
:data:`PARAMETERS`, pairing its Control Change number with one of a
small set of transforms:

- :class:`Direct` - integer passed through after a range check
  (fader and level knobs, PinP size).
- :class:`Bounded` - real value linearly quantised by a :class:`Scale`
  (transition times, PinP position and zoom).
- :class:`Enumerated` - closed enumeration sent as its member value.
- :class:`Toggle` - OFF sends 0, ON sends a parameter-specific value.
- :class:`Constant` - fire-and-forget triggers with a fixed value.

Parameters with ``channels`` set are repeated once per audio input;
the input number selects the control via :func:`encode_channel_offset`.

All encoding is pure and atomic: either a valid ``(control, value)``
pair is returned or :class:`~roland_v8hd.exceptions.ValidationError`
is raised.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from enum import IntEnum

from ..exceptions import ValidationError
from ..models.enums import ButtonState, InputSource, SplitVfxType, TransitionType
from .commands import AUDIO_INPUT_COUNT, ControlChange
from .message import DATA_MAX, ControlChangeMessage


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (0.5 -> 1, 2.5 -> 3)."""
    return math.floor(value + 0.5)


def _require_real(parameter: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(parameter, value, reason="must be a number")


def _require_integer(parameter: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(parameter, value, reason="must be an integer")


def check_range(parameter: str, value, minimum, maximum) -> None:
    """Raise ValidationError unless ``minimum <= value <= maximum``.

    NaN fails the comparison and is rejected as well.
    """
    if not minimum <= value <= maximum:
        raise ValidationError(parameter, value, minimum, maximum)


@dataclass(frozen=True)
class Scale:
    """Linear map ``round((value + offset) / divisor * multiplier) + bias``."""

    offset: float = 0
    divisor: float = 1
    multiplier: float = 1
    bias: int = 0

    def apply(self, value: float) -> int:
        return round_half_up((value + self.offset) / self.divisor * self.multiplier) + self.bias

    def invert(self, protocol_value: int) -> float:
        return (protocol_value - self.bias) / self.multiplier * self.divisor - self.offset


# 0.0-4.0 s -> 0-40
TIME_SCALE = Scale(multiplier=10)
# -50..50 % -> 10-110
POSITION_SCALE = Scale(offset=50, bias=10)
# 100-1000 % -> 10-100
ZOOM_SCALE = Scale(offset=-100, divisor=900, multiplier=90, bias=10)


def encode_bounded(
    value: float,
    minimum: float,
    maximum: float,
    scale: Scale,
    parameter: str = "value",
) -> int:
    """Validate a real value against its bounds and quantise it."""
    _require_real(parameter, value)
    check_range(parameter, value, minimum, maximum)
    return scale.apply(value)


def encode_direct(value: int, minimum: int, maximum: int, parameter: str = "value") -> int:
    """Validate an integer against its bounds and return it unchanged."""
    _require_integer(parameter, value)
    check_range(parameter, value, minimum, maximum)
    return int(value)


def encode_enum(value, enum_cls: type[IntEnum], parameter: str = "value") -> int:
    """Return the protocol value of an enumeration member.

    Plain integers are accepted when they name a member of ``enum_cls``.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            parameter, value, reason=f"is not a valid {enum_cls.__name__}"
        )
    try:
        return int(enum_cls(value))
    except ValueError:
        raise ValidationError(
            parameter, value, reason=f"is not a valid {enum_cls.__name__}"
        ) from None


def encode_channel_offset(
    base: int,
    channel: int,
    minimum: int = 1,
    maximum: int = AUDIO_INPUT_COUNT,
    parameter: str = "input",
) -> ControlChange:
    """Select one of a run of repeated controls starting at ``base``.

    Input 1 maps to ``base`` and input 8 to ``base + 7``.
    """
    _require_integer(parameter, channel)
    check_range(parameter, channel, minimum, maximum)
    return ControlChange(base + (channel - minimum))


def encode_toggle_with_identity(state, identity: int, parameter: str = "state") -> int:
    """Encode a toggle whose ON value is ``identity`` rather than 1.

    OFF always encodes as 0.
    """
    if encode_enum(state, ButtonState, parameter) == ButtonState.ON:
        return identity
    return 0


class Transform:
    """Strategy turning one semantic value into a protocol value."""

    def encode(self, parameter: str, value, channel: int | None = None) -> int:
        raise NotImplementedError

    def decode(self, protocol_value: int, channel: int | None = None):
        raise NotImplementedError


@dataclass(frozen=True)
class Direct(Transform):
    minimum: int = 0
    maximum: int = DATA_MAX

    def encode(self, parameter: str, value, channel: int | None = None) -> int:
        return encode_direct(value, self.minimum, self.maximum, parameter)

    def decode(self, protocol_value: int, channel: int | None = None) -> int:
        return protocol_value


@dataclass(frozen=True)
class Bounded(Transform):
    minimum: float
    maximum: float
    scale: Scale

    def encode(self, parameter: str, value, channel: int | None = None) -> int:
        return encode_bounded(value, self.minimum, self.maximum, self.scale, parameter)

    def decode(self, protocol_value: int, channel: int | None = None) -> float:
        return self.scale.invert(protocol_value)


@dataclass(frozen=True)
class Enumerated(Transform):
    enum_cls: type[IntEnum]

    def encode(self, parameter: str, value, channel: int | None = None) -> int:
        return encode_enum(value, self.enum_cls, parameter)

    def decode(self, protocol_value: int, channel: int | None = None) -> IntEnum | int:
        try:
            return self.enum_cls(protocol_value)
        except ValueError:
            return protocol_value


@dataclass(frozen=True)
class Toggle(Transform):
    """ON sends ``identity``; ``None`` means the audio input number."""

    identity: int | None = None

    def _identity(self, channel: int | None) -> int:
        if self.identity is not None:
            return self.identity
        if channel is None:
            raise ValueError("Toggle without a fixed identity needs a channel")
        return channel

    def encode(self, parameter: str, value, channel: int | None = None) -> int:
        return encode_toggle_with_identity(value, self._identity(channel), parameter)

    def decode(self, protocol_value: int, channel: int | None = None) -> ButtonState:
        if protocol_value == 0:
            return ButtonState.OFF
        return ButtonState.ON


@dataclass(frozen=True)
class Constant(Transform):
    value: int = 0x01

    def encode(self, parameter: str, value=None, channel: int | None = None) -> int:
        return self.value

    def decode(self, protocol_value: int, channel: int | None = None) -> int:
        return protocol_value


@dataclass(frozen=True)
class Parameter:
    """A named device parameter and the transform used to encode it."""

    name: str
    control: ControlChange
    transform: Transform
    channels: int = 0

    def control_for(self, channel: int | None = None) -> ControlChange:
        if not self.channels:
            if channel is not None:
                raise ValidationError(self.name, channel, reason="takes no input number")
            return self.control
        if channel is None:
            raise ValidationError(
                self.name, channel, reason=f"needs an input number 1..{self.channels}"
            )
        return encode_channel_offset(self.control, channel, 1, self.channels)

    def encode(self, value=None, channel: int | None = None) -> tuple[ControlChange, int]:
        control = self.control_for(channel)
        return control, self.transform.encode(self.name, value, channel)


_PARAMETER_LIST = [
    Parameter("video_fader", ControlChange.VIDEO_FADER, Direct(0, 127)),
    Parameter("transition_type", ControlChange.TRANSITION_TYPE, Enumerated(TransitionType)),
    Parameter("mix_wipe_time", ControlChange.MIX_WIPE_TIME, Bounded(0.0, 4.0, TIME_SCALE)),
    Parameter("pinp1_time", ControlChange.PINP1_TIME, Bounded(0.0, 4.0, TIME_SCALE)),
    Parameter("pinp2_time", ControlChange.PINP2_TIME, Bounded(0.0, 4.0, TIME_SCALE)),
    Parameter("dsk_time", ControlChange.DSK_TIME, Bounded(0.0, 4.0, TIME_SCALE)),
    Parameter("pinp1_source", ControlChange.PINP1_SOURCE, Enumerated(InputSource)),
    Parameter("pinp1_position_h", ControlChange.PINP1_POSITION_H, Bounded(-50, 50, POSITION_SCALE)),
    Parameter("pinp1_position_v", ControlChange.PINP1_POSITION_V, Bounded(-50, 50, POSITION_SCALE)),
    Parameter("pinp1_size", ControlChange.PINP1_SIZE, Direct(10, 100)),
    Parameter("pinp1_view_zoom", ControlChange.PINP1_VIEW_ZOOM, Bounded(100, 1000, ZOOM_SCALE)),
    Parameter("pinp2_source", ControlChange.PINP2_SOURCE, Enumerated(InputSource)),
    Parameter("pinp2_position_h", ControlChange.PINP2_POSITION_H, Bounded(-50, 50, POSITION_SCALE)),
    Parameter("pinp2_position_v", ControlChange.PINP2_POSITION_V, Bounded(-50, 50, POSITION_SCALE)),
    Parameter("pinp2_size", ControlChange.PINP2_SIZE, Direct(10, 100)),
    Parameter("pinp2_view_zoom", ControlChange.PINP2_VIEW_ZOOM, Bounded(100, 1000, ZOOM_SCALE)),
    Parameter("dsk_source", ControlChange.DSK_SOURCE, Enumerated(InputSource)),
    Parameter("dsk_level", ControlChange.DSK_LEVEL, Direct(0, 127)),
    Parameter("dsk_gain", ControlChange.DSK_GAIN, Direct(0, 127)),
    Parameter("dsk_mix_level", ControlChange.DSK_MIX_LEVEL, Direct(0, 127)),
    Parameter("split_vfx_a_switch", ControlChange.SPLIT_VFX_A_SW, Enumerated(ButtonState)),
    Parameter("split_vfx_a_type", ControlChange.SPLIT_VFX_A_TYPE, Enumerated(SplitVfxType)),
    Parameter("split_vfx_b_switch", ControlChange.SPLIT_VFX_B_SW, Enumerated(ButtonState)),
    Parameter("split_vfx_b_type", ControlChange.SPLIT_VFX_B_TYPE, Enumerated(SplitVfxType)),
    Parameter("output_fade_ccw", ControlChange.OUTPUT_FADE_CCW, Direct(0, 63)),
    Parameter("output_fade_cw", ControlChange.OUTPUT_FADE_CW, Direct(0, 63)),
    Parameter(
        "audio_input_level",
        ControlChange.AUDIO_LEVEL_INPUT_1,
        Direct(0, 127),
        channels=AUDIO_INPUT_COUNT,
    ),
    Parameter("audio_in_level", ControlChange.AUDIO_LEVEL_AUDIO_IN, Direct(0, 127)),
    Parameter("audio_output_level", ControlChange.AUDIO_OUTPUT_LEVEL, Direct(0, 127)),
    Parameter("cut_button", ControlChange.CUT_BUTTON, Enumerated(ButtonState)),
    Parameter("auto_button", ControlChange.AUTO_BUTTON, Enumerated(ButtonState)),
    Parameter("h_cut", ControlChange.H_CUT_I, Constant(0x01)),
    Parameter("h_auto_take", ControlChange.H_AUTO_TAKE_I, Constant(0x01)),
    Parameter(
        "audio_input_mute",
        ControlChange.AUDIO_MUTE_INPUT_1,
        Toggle(),
        channels=AUDIO_INPUT_COUNT,
    ),
    # The device expects these exact ON values for the two fixed mutes.
    Parameter("audio_in_mute", ControlChange.AUDIO_MUTE_AUDIO_IN, Toggle(0x09)),
    Parameter("audio_output_mute", ControlChange.AUDIO_MUTE_OUTPUT, Toggle(0x10)),
]

PARAMETERS: dict[str, Parameter] = {p.name: p for p in _PARAMETER_LIST}


def _build_control_index() -> dict[int, tuple[Parameter, int | None]]:
    index: dict[int, tuple[Parameter, int | None]] = {}
    for param in _PARAMETER_LIST:
        if param.channels:
            for channel in range(1, param.channels + 1):
                index[param.control + channel - 1] = (param, channel)
        else:
            index[param.control] = (param, None)
    return index


_CONTROL_INDEX = _build_control_index()


def get_parameter(name: str) -> Parameter:
    """Look up a parameter by name.

    Raises:
        ValidationError: If no parameter has that name.
    """
    try:
        return PARAMETERS[name]
    except KeyError:
        raise ValidationError(
            "parameter", name, reason=f"is unknown. Valid: {sorted(PARAMETERS)}"
        ) from None


def encode(name: str, value=None, channel: int | None = None) -> tuple[ControlChange, int]:
    """Encode a semantic value for the named parameter.

    Args:
        name: Parameter name, a key of :data:`PARAMETERS`.
        value: Semantic value in the parameter's units.
        channel: Audio input number (1-8) for per-input parameters.

    Returns:
        ``(control, protocol_value)`` ready for transmission.

    Raises:
        ValidationError: If the name, value or channel is invalid.
    """
    return get_parameter(name).encode(value, channel)


@dataclass(frozen=True)
class DecodedValue:
    """Semantic reading of a Control Change unit."""

    parameter: str
    value: object
    channel: int | None = None

    def __str__(self) -> str:
        if self.channel is None:
            return f"{self.parameter}={self.value!r}"
        return f"{self.parameter}[{self.channel}]={self.value!r}"


def decode(control: int, protocol_value: int) -> DecodedValue | None:
    """Map a control/value pair back to its parameter and semantic value.

    Returns ``None`` for controls the device does not define.
    """
    entry = _CONTROL_INDEX.get(control)
    if entry is None:
        return None
    param, channel = entry
    return DecodedValue(
        parameter=param.name,
        value=param.transform.decode(protocol_value, channel),
        channel=channel,
    )


def describe(message: ControlChangeMessage) -> str:
    """Human-readable description of a parsed message, for logging."""
    decoded = decode(message.control, message.value)
    if decoded is None:
        return f"unknown control 0x{message.control:02X}={message.value}"
    return str(decoded)
