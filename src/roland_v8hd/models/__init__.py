"""Closed value sets used by the semantic setters."""

from .enums import ButtonState, InputSource, SplitVfxType, TransitionType
