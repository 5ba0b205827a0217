"""Protocol layer: Control Change numbers, message building, and the parameter codec."""

from .commands import ControlChange
from .message import ControlChangeMessage, build_control_change, parse_control_change
from .codec import PARAMETERS, decode, encode
