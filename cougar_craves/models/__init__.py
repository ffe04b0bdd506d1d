"""Database models for Cougar Craves."""

from .base import Base, local_now
from .preference import ChoiceKind, PreferenceRecord, INSTRUCTIONS_MAX_LENGTH

__all__ = [
    "Base",
    "local_now",
    "ChoiceKind",
    "PreferenceRecord",
    "INSTRUCTIONS_MAX_LENGTH",
]
