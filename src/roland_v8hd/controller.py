"""High-level control of the Roland V-8HD video switcher.

:class:`RolandV8HD` exposes one setter per device parameter. Each setter
encodes its argument first and only then hands the result to the
:class:`~roland_v8hd.transport.midi_connection.MIDIConnection` it was
given, so an invalid value never reaches the device.
"""

from __future__ import annotations

from .models.enums import ButtonState, InputSource, SplitVfxType, TransitionType
from .protocol.codec import encode
from .transport.midi_connection import DEVICE_NAME_MATCHES, MIDIConnection


class RolandV8HD:
    """Semantic command set for one V-8HD session.

    The controller does not open or own discovery; pass it an opened
    :class:`MIDIConnection`, or use :func:`connect`.
    """

    def __init__(self, connection: MIDIConnection) -> None:
        self._connection = connection

    @property
    def connection(self) -> MIDIConnection:
        return self._connection

    def _send(self, name: str, value=None, channel: int | None = None) -> bytes:
        control, protocol_value = encode(name, value, channel)
        return self._connection.transmit(control, protocol_value)

    def close(self) -> None:
        """Close the underlying MIDI session."""
        self._connection.close()

    # ─── Video transitions ────────────────────────────────────────────

    def set_video_fader(self, position: int) -> bytes:
        """Set the video fader position (0-127, bottom to top)."""
        return self._send("video_fader", position)

    def set_transition_type(self, transition: TransitionType) -> bytes:
        return self._send("transition_type", transition)

    def set_mix_wipe_time(self, seconds: float) -> bytes:
        """Set the MIX/WIPE transition time.

        Args:
            seconds: 0.0-4.0, sent in 0.1 s steps.
        """
        return self._send("mix_wipe_time", seconds)

    def set_pinp1_time(self, seconds: float) -> bytes:
        return self._send("pinp1_time", seconds)

    def set_pinp2_time(self, seconds: float) -> bytes:
        return self._send("pinp2_time", seconds)

    def set_dsk_time(self, seconds: float) -> bytes:
        return self._send("dsk_time", seconds)

    # ─── PinP ─────────────────────────────────────────────────────────

    def set_pinp1_source(self, source: InputSource) -> bytes:
        return self._send("pinp1_source", source)

    def set_pinp1_position_h(self, percent: float) -> bytes:
        """Set the PinP 1 horizontal position (-50 to 50 %)."""
        return self._send("pinp1_position_h", percent)

    def set_pinp1_position_v(self, percent: float) -> bytes:
        """Set the PinP 1 vertical position (-50 to 50 %)."""
        return self._send("pinp1_position_v", percent)

    def set_pinp1_size(self, percent: int) -> bytes:
        """Set the PinP 1 size (10-100 %)."""
        return self._send("pinp1_size", percent)

    def set_pinp1_view_zoom(self, percent: float) -> bytes:
        """Set the PinP 1 view zoom (100-1000 %)."""
        return self._send("pinp1_view_zoom", percent)

    def set_pinp2_source(self, source: InputSource) -> bytes:
        return self._send("pinp2_source", source)

    def set_pinp2_position_h(self, percent: float) -> bytes:
        return self._send("pinp2_position_h", percent)

    def set_pinp2_position_v(self, percent: float) -> bytes:
        return self._send("pinp2_position_v", percent)

    def set_pinp2_size(self, percent: int) -> bytes:
        return self._send("pinp2_size", percent)

    def set_pinp2_view_zoom(self, percent: float) -> bytes:
        return self._send("pinp2_view_zoom", percent)

    # ─── DSK ──────────────────────────────────────────────────────────

    def set_dsk_source(self, source: InputSource) -> bytes:
        return self._send("dsk_source", source)

    def set_dsk_level(self, level: int) -> bytes:
        return self._send("dsk_level", level)

    def set_dsk_gain(self, gain: int) -> bytes:
        """Set the DSK gain (0-127; the device scales it to 0-255)."""
        return self._send("dsk_gain", gain)

    def set_dsk_mix_level(self, level: int) -> bytes:
        """Set the DSK mix level (0-127; the device scales it to 0-255)."""
        return self._send("dsk_mix_level", level)

    # ─── SPLIT/VFX ────────────────────────────────────────────────────

    def set_split_vfx_a_switch(self, state: ButtonState = ButtonState.ON) -> bytes:
        return self._send("split_vfx_a_switch", state)

    def set_split_vfx_a_type(self, effect: SplitVfxType) -> bytes:
        return self._send("split_vfx_a_type", effect)

    def set_split_vfx_b_switch(self, state: ButtonState = ButtonState.ON) -> bytes:
        return self._send("split_vfx_b_switch", state)

    def set_split_vfx_b_type(self, effect: SplitVfxType) -> bytes:
        return self._send("split_vfx_b_type", effect)

    # ─── Output fade ──────────────────────────────────────────────────

    def set_output_fade_ccw(self, value: int) -> bytes:
        """Turn the OUTPUT FADE knob counter-clockwise (0-63)."""
        return self._send("output_fade_ccw", value)

    def set_output_fade_cw(self, value: int) -> bytes:
        """Turn the OUTPUT FADE knob clockwise (0-63)."""
        return self._send("output_fade_cw", value)

    # ─── Audio ────────────────────────────────────────────────────────

    def set_audio_input_level(self, input: int, level: int) -> bytes:
        """Set the level of one audio input.

        Args:
            input: Input number 1-8.
            level: 0-127.
        """
        return self._send("audio_input_level", level, channel=input)

    def set_audio_in_level(self, level: int) -> bytes:
        return self._send("audio_in_level", level)

    def set_audio_output_level(self, level: int) -> bytes:
        return self._send("audio_output_level", level)

    def set_audio_input_mute(self, input: int, state: ButtonState) -> bytes:
        """Mute or unmute one audio input.

        The device expects the input number itself as the ON value.
        """
        return self._send("audio_input_mute", state, channel=input)

    def set_audio_in_mute(self, state: ButtonState) -> bytes:
        return self._send("audio_in_mute", state)

    def set_audio_output_mute(self, state: ButtonState) -> bytes:
        return self._send("audio_output_mute", state)

    # ─── Buttons and triggers ─────────────────────────────────────────

    def set_cut_button(self, state: ButtonState = ButtonState.ON) -> bytes:
        return self._send("cut_button", state)

    def set_auto_button(self, state: ButtonState = ButtonState.ON) -> bytes:
        return self._send("auto_button", state)

    def trigger_h_cut(self) -> bytes:
        """Perform an immediate cut (H CUT I)."""
        return self._send("h_cut")

    def trigger_h_auto_take(self) -> bytes:
        """Perform an auto transition with the current settings (H AUTO TAKE I)."""
        return self._send("h_auto_take")


def connect(
    matches: tuple[str, ...] = DEVICE_NAME_MATCHES,
    backend=None,
) -> RolandV8HD:
    """Discover the switcher, open it, and return a controller for it.

    Raises:
        DeviceNotFoundError: If no matching MIDI output exists.
        TransportError: If the port cannot be opened.
    """
    connection = MIDIConnection(matches=matches, backend=backend)
    connection.discover_and_open()
    return RolandV8HD(connection)
