"""Ten-pin bowling scoring engine.

Frames are scored with lookahead: a strike earns the next two rolls as a
bonus, a spare the next one. The tenth frame carries its own bonus rolls in
its second and third slots.
"""
from typing import Dict, List, Sequence

from ..config import _canon_flag, strict_tenth_frame_enabled
from ..constants import FRAME_COUNT, LAST_FRAME, PIN_COUNT
from ..exceptions import InvalidRoll
from ..frame import Frame
from ..services.validation import validate_frame_index, validate_rolls

STRIKE = "strike"
SPARE = "spare"
OPEN = "open"


def classify_frame(frame: Frame) -> str:
    if frame.is_strike:
        return STRIKE
    if frame.is_spare:
        return SPARE
    return OPEN


def _strike_bonus(frames: Sequence[Frame], index: int) -> int:
    if index == LAST_FRAME:
        return frames[index].second_roll + frames[index].third_roll
    nxt = frames[index + 1]
    if not nxt.is_strike:
        return nxt.first_roll + nxt.second_roll
    # back-to-back strikes; the tenth frame holds its own follow-up roll
    if index + 1 == LAST_FRAME:
        return PIN_COUNT + nxt.second_roll
    return PIN_COUNT + frames[index + 2].first_roll


def _spare_bonus(frames: Sequence[Frame], index: int) -> int:
    if index == LAST_FRAME:
        return frames[index].third_roll
    return frames[index + 1].first_roll


def score_frame(frames: Sequence[Frame], index: int) -> int:
    """Points contributed by frame ``index``, bonuses included."""
    index = validate_frame_index(index)
    f = frames[index]
    if f.is_strike:
        return PIN_COUNT + _strike_bonus(frames, index)
    if f.is_spare:
        return PIN_COUNT + _spare_bonus(frames, index)
    return f.first_roll + f.second_roll


def frame_scores(frames: Sequence[Frame]) -> List[int]:
    return [score_frame(frames, i) for i in range(FRAME_COUNT)]


def running_totals(frames: Sequence[Frame]) -> List[int]:
    totals: List[int] = []
    cumulative = 0
    for s in frame_scores(frames):
        cumulative += s
        totals.append(cumulative)
    return totals


def calculate_score(frames: Sequence[Frame]) -> int:
    return sum(frame_scores(frames))


def init_state(config: Dict) -> Dict:
    strict = config.get("strictTenthFrame")
    if strict is None:
        strict = strict_tenth_frame_enabled()
    elif isinstance(strict, str):
        strict = _canon_flag(strict)
    return {
        "config": config,
        "frames": [[0, 0, 0] for _ in range(FRAME_COUNT)],
        "strict_tenth_frame": bool(strict),
    }


def apply(event: Dict, state: Dict) -> Dict:
    if event.get("type") != "FRAME":
        raise ValueError("invalid bowling event")
    rolls = event.get("rolls")
    if not isinstance(rolls, (list, tuple)) or not 2 <= len(rolls) <= 3:
        raise ValueError("rolls must hold two or three values")
    index = validate_frame_index(event.get("frame"))
    if len(rolls) == 3 and index < LAST_FRAME and rolls[2]:
        raise InvalidRoll("only the tenth frame takes a third roll", frame=index)
    state["frames"][index] = list(
        validate_rolls(
            index,
            *rolls,
            strict_tenth_frame=state.get("strict_tenth_frame", False),
        )
    )
    return state


def summary(state: Dict) -> Dict:
    frames = [Frame.from_rolls(r) for r in state["frames"]]
    scores = frame_scores(frames)
    return {
        "frames": state["frames"],
        "kinds": [classify_frame(f) for f in frames],
        "scores": scores,
        "runningTotals": running_totals(frames),
        "total": sum(scores),
    }
