"""MIDI output session for the Roland V-8HD.

Uses ``mido`` (normally on top of ``python-rtmidi``). The switcher shows
up as a MIDI output whose name contains "Roland" or "V-8HD"; the first
such output in enumeration order is used.

A session moves through ``UNOPENED -> OPEN -> CLOSED`` exactly once.
It is not thread-safe; callers sharing one across threads must
serialise access themselves.
"""

from __future__ import annotations

import logging
from enum import Enum

import mido

from ..exceptions import (
    DeviceNotFoundError,
    NotOpenError,
    SessionError,
    TransportError,
)
from ..protocol.codec import describe, encode_direct
from ..protocol.message import DATA_MAX, MIDI_CHANNEL, build_control_change, parse_control_change

logger = logging.getLogger(__name__)

DEVICE_NAME_MATCHES = ("Roland", "V-8HD")


class SessionState(Enum):
    UNOPENED = "unopened"
    OPEN = "open"
    CLOSED = "closed"


def _resolve_backend(backend):
    """Return an object providing ``get_output_names`` and ``open_output``.

    ``None`` selects mido's default backend, a string is loaded with
    :class:`mido.Backend`, anything else is used as given.
    """
    if backend is None:
        return mido
    if isinstance(backend, str):
        return mido.Backend(backend, load=True)
    return backend


class MIDIConnection:
    """Owns the single MIDI output bound to the switcher.

    Usage::

        conn = MIDIConnection()
        conn.discover_and_open()
        conn.transmit(0x0C, 15)
        conn.close()
    """

    def __init__(
        self,
        matches: tuple[str, ...] = DEVICE_NAME_MATCHES,
        backend=None,
        channel: int = MIDI_CHANNEL,
    ) -> None:
        self._matches = tuple(matches)
        self._backend = _resolve_backend(backend)
        self._channel = channel
        self._port = None
        self._port_name = ""
        self._state = SessionState.UNOPENED

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def connected(self) -> bool:
        return self._state is SessionState.OPEN

    @property
    def port_name(self) -> str:
        return self._port_name

    def available_ports(self) -> list[str]:
        """Names of all MIDI outputs the backend currently reports."""
        return list(self._backend.get_output_names())

    def discover_and_open(self, matches: tuple[str, ...] | None = None) -> str:
        """Find the switcher among the MIDI outputs and open it.

        Args:
            matches: Name substrings to look for; defaults to the ones
                given at construction. Matching is case-sensitive.

        Returns:
            The name of the opened port.

        Raises:
            SessionError: If this session has already been opened or closed.
            DeviceNotFoundError: If no output name contains a match.
            TransportError: If the backend fails to list or open ports.
        """
        if self._state is not SessionState.UNOPENED:
            raise SessionError(
                f"Session is {self._state.value}; discover_and_open may only be called once"
            )
        if matches is not None:
            self._matches = tuple(matches)

        try:
            names = self.available_ports()
        except Exception as e:
            self._state = SessionState.CLOSED
            raise TransportError(f"Could not list MIDI outputs: {e}") from e

        for index, name in enumerate(names):
            logger.debug("MIDI output %d: %s", index, name)
            if not any(match in name for match in self._matches):
                continue

            try:
                port = self._backend.open_output(name)
            except Exception as e:
                self._state = SessionState.CLOSED
                raise TransportError(f"Could not open MIDI output {name!r}: {e}") from e

            self._port = port
            self._port_name = name
            self._state = SessionState.OPEN
            logger.info("Connected to Roland V-8HD on port %d: %s", index, name)
            return name

        self._state = SessionState.CLOSED
        raise DeviceNotFoundError(self._matches, names)

    def transmit(self, control: int, value: int) -> bytes:
        """Send one Control Change to the switcher.

        Args:
            control: Control Change number.
            value: Protocol value (0-127).

        Returns:
            The three bytes handed to the backend.

        Raises:
            ValidationError: If control or value is not an integer in 0-127.
            NotOpenError: If the session is not open.
            TransportError: If the backend rejects the message.
        """
        if self._state is not SessionState.OPEN:
            raise NotOpenError(f"Cannot transmit: session is {self._state.value}")

        encode_direct(control, 0, DATA_MAX, "control")
        encode_direct(value, 0, DATA_MAX, "value")
        data = build_control_change(control, value, self._channel)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("TX %s (%s)", data.hex(" "), describe(parse_control_change(data)))

        try:
            self._port.send(mido.Message.from_bytes(data))
        except Exception as e:
            raise TransportError(f"Failed to send {data.hex(' ')} to {self._port_name!r}: {e}") from e
        return data

    def close(self) -> None:
        """Release the MIDI output. Safe to call more than once."""
        if self._state is SessionState.CLOSED:
            return

        port = self._port
        try:
            if port is not None:
                port.close()
        except Exception as e:
            logger.warning("Error closing MIDI output %r: %s", self._port_name, e)
        finally:
            self._port = None
            self._state = SessionState.CLOSED
            if port is not None:
                logger.info("Disconnected from %s", self._port_name)
