"""MIDI control adapter for the Roland V-8HD video switcher."""

from .controller import RolandV8HD, connect
from .exceptions import (
    DeviceNotFoundError,
    NotOpenError,
    SessionError,
    TransportError,
    V8HDError,
    ValidationError,
)
from .models.enums import ButtonState, InputSource, SplitVfxType, TransitionType
from .transport.midi_connection import MIDIConnection, SessionState

__version__ = "0.1.0"
