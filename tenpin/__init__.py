"""Single-player ten-pin bowling scoring."""

from .exceptions import DomainException, InvalidRoll, OutOfRange
from .models import BowlingGame, Frame, Player

__all__ = [
    "BowlingGame",
    "DomainException",
    "Frame",
    "InvalidRoll",
    "OutOfRange",
    "Player",
]
