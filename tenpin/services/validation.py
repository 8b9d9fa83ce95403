import logging
from typing import Any, Tuple

from ..constants import FIRST_FRAME, LAST_FRAME, PIN_COUNT
from ..exceptions import InvalidRoll, OutOfRange

logger = logging.getLogger(__name__)


def validate_frame_index(index: Any) -> int:
    """Return ``index`` as an int, raising ``OutOfRange`` unless it is 0-9."""

    # Reject booleans explicitly (bool is a subclass of int in Python)
    if isinstance(index, bool) or not isinstance(index, int):
        logger.debug("Rejected frame index %r", index)
        raise OutOfRange(index)
    if not FIRST_FRAME <= index <= LAST_FRAME:
        logger.debug("Rejected frame index %r", index)
        raise OutOfRange(index)
    return index


def _coerce_roll(frame: int, label: str, value: Any) -> int:
    if isinstance(value, bool):
        raise InvalidRoll(
            f"Frame {frame + 1} {label} roll must be an integer (not a boolean).",
            frame=frame,
        )
    try:
        pins = int(value)
    except (TypeError, ValueError, OverflowError):
        raise InvalidRoll(
            f"Frame {frame + 1} {label} roll must be an integer.", frame=frame
        )
    if not isinstance(value, (int, str)) and pins != value:
        raise InvalidRoll(
            f"Frame {frame + 1} {label} roll must be a whole number.", frame=frame
        )
    if not 0 <= pins <= PIN_COUNT:
        raise InvalidRoll(
            f"Frame {frame + 1} {label} roll must be between 0 and {PIN_COUNT}"
            f" (got {pins}).",
            frame=frame,
        )
    return pins


def _check_tenth_frame(first: int, second: int, third: int) -> None:
    frame = LAST_FRAME
    if first < PIN_COUNT:
        if first + second > PIN_COUNT:
            raise InvalidRoll(
                f"Frame {frame + 1} rolls {first} and {second} knock down more"
                f" than {PIN_COUNT} pins without a strike.",
                frame=frame,
            )
        if first + second < PIN_COUNT and third:
            raise InvalidRoll(
                f"Frame {frame + 1} is open; no bonus roll is allowed.",
                frame=frame,
            )
    elif second < PIN_COUNT and second + third > PIN_COUNT:
        raise InvalidRoll(
            f"Frame {frame + 1} bonus rolls {second} and {third} knock down more"
            f" than {PIN_COUNT} pins.",
            frame=frame,
        )


def validate_rolls(
    index: Any,
    first: Any,
    second: Any,
    third: Any = 0,
    *,
    strict_tenth_frame: bool = False,
) -> Tuple[int, int, int]:
    """Validate the rolls recorded for one frame.

    Rules:
    - ``index`` must be a frame index 0-9 (``OutOfRange`` otherwise)
    - every roll must be an integer between 0 and 10 (booleans are rejected);
      numeric strings such as ``"5"`` are coerced, fractional and non-finite
      numbers are rejected
    - ``index`` is never coerced: it must already be an ``int``, so ``"3"``
      is rejected even though a roll of ``"3"`` is accepted
    - frames 1-9 may not knock down more than 10 pins across both rolls
    - the tenth frame only gets the per-roll check unless
      ``strict_tenth_frame`` is set, in which case roll combinations that
      cannot happen on a real lane are rejected as well

    Returns the normalized ``(first, second, third)`` tuple.
    """

    frame = validate_frame_index(index)
    try:
        rolls = (
            _coerce_roll(frame, "first", first),
            _coerce_roll(frame, "second", second),
            _coerce_roll(frame, "third", third),
        )
        a, b, c = rolls
        if frame < LAST_FRAME:
            if a + b > PIN_COUNT:
                raise InvalidRoll(
                    f"Frame {frame + 1} rolls {a} and {b} knock down more than"
                    f" {PIN_COUNT} pins.",
                    frame=frame,
                )
        elif strict_tenth_frame:
            _check_tenth_frame(a, b, c)
    except InvalidRoll as exc:
        logger.debug("Rejected rolls for frame %d: %s", frame, exc.detail)
        raise
    return rolls
