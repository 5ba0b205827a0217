"""Control Change message builder and parser.

Every command sent to the switcher is one three-byte MIDI Control Change::

    +-----------------+------------+-----------+
    | Status          | Control    | Value     |
    | 0xB0 | channel  | 0x00-0x7F  | 0x00-0x7F |
    +-----------------+------------+-----------+

The V-8HD listens on a single fixed channel, so the status byte is
always 0xB0.
"""

from __future__ import annotations

from dataclasses import dataclass

CONTROL_CHANGE = 0xB0
MIDI_CHANNEL = 0
MESSAGE_SIZE = 3
DATA_MAX = 0x7F


@dataclass(frozen=True)
class ControlChangeMessage:
    """A parsed Control Change unit."""

    channel: int
    control: int
    value: int

    def to_bytes(self) -> bytes:
        return build_control_change(self.control, self.value, self.channel)

    def __repr__(self) -> str:
        return (
            f"ControlChangeMessage(channel={self.channel}, "
            f"control=0x{self.control:02X}, value={self.value})"
        )


def build_control_change(control: int, value: int, channel: int = MIDI_CHANNEL) -> bytes:
    """Build the three-byte Control Change unit for a control/value pair.

    Args:
        control: Control Change number (0-127).
        value: Protocol value (0-127).
        channel: MIDI channel (0-15).

    Raises:
        ValueError: If any field does not fit its 4- or 7-bit slot.
    """
    if not 0 <= channel <= 0x0F:
        raise ValueError(f"MIDI channel must be 0-15, got {channel}")
    if not 0 <= control <= DATA_MAX:
        raise ValueError(f"Control number must be 0-127, got {control}")
    if not 0 <= value <= DATA_MAX:
        raise ValueError(f"Control value must be 0-127, got {value}")
    return bytes([CONTROL_CHANGE | channel, control, value])


def parse_control_change(data: bytes) -> ControlChangeMessage | None:
    """Parse a three-byte unit back into a ControlChangeMessage.

    Returns:
        The parsed message, or ``None`` if the bytes are not a
        well-formed Control Change.
    """
    if len(data) != MESSAGE_SIZE:
        return None

    status, control, value = data
    if status & 0xF0 != CONTROL_CHANGE:
        return None
    if control > DATA_MAX or value > DATA_MAX:
        return None

    return ControlChangeMessage(channel=status & 0x0F, control=control, value=value)
