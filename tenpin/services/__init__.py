"""Internal services (pure helpers, no I/O)."""

from .validation import validate_frame_index, validate_rolls

__all__ = [
    "validate_frame_index",
    "validate_rolls",
]
