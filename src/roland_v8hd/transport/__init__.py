"""MIDI transport and device session."""

from .midi_connection import DEVICE_NAME_MATCHES, MIDIConnection, SessionState
