"""Exception hierarchy for the V-8HD adapter.

Each class also derives from the builtin that code outside this package
would naturally catch for the same situation (``ValueError`` for bad
input, ``ConnectionError`` when the device is missing, and so on).
"""

from __future__ import annotations


class V8HDError(Exception):
    """Base class for all adapter errors."""


class ValidationError(V8HDError, ValueError):
    """A semantic value fell outside its parameter's domain.

    Nothing is transmitted when this is raised.
    """

    def __init__(
        self,
        parameter: str,
        value: object,
        minimum: object = None,
        maximum: object = None,
        reason: str = "",
    ) -> None:
        self.parameter = parameter
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        if not reason:
            reason = f"must be between {minimum} and {maximum}"
        super().__init__(f"{parameter}: {value!r} {reason}")


class SessionError(V8HDError, RuntimeError):
    """A session lifecycle rule was broken."""


class NotOpenError(SessionError):
    """Transmit attempted on a session that is not open."""


class DeviceNotFoundError(V8HDError, ConnectionError):
    """No MIDI output matched the device name substrings."""

    def __init__(self, matches: tuple[str, ...], available: list[str]) -> None:
        self.matches = tuple(matches)
        self.available = list(available)
        listing = ", ".join(self.available) if self.available else "(none)"
        super().__init__(
            f"Roland V-8HD not found (looked for {' or '.join(map(repr, self.matches))}). "
            f"Available MIDI outputs: {listing}"
        )


class TransportError(V8HDError, IOError):
    """The MIDI backend failed to open a port or send a message."""
