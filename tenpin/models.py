import logging
from dataclasses import replace
from typing import List, Optional, Tuple

from .config import strict_tenth_frame_enabled
from .constants import FRAME_COUNT
from .frame import Frame
from .schemas import FrameOut, ScoreSummary
from .scoring import bowling
from .services.validation import validate_frame_index, validate_rolls

logger = logging.getLogger(__name__)


class Player:
    """One bowler and the ten frames they own.

    Frames start zeroed and are filled in with :meth:`record_frame`; all rolls
    of a frame are recorded together. Scoring only reads the frames.
    """

    def __init__(self, name: str, *, strict_tenth_frame: Optional[bool] = None) -> None:
        self._name = name
        self._frames: List[Frame] = [Frame() for _ in range(FRAME_COUNT)]
        if strict_tenth_frame is None:
            strict_tenth_frame = strict_tenth_frame_enabled()
        self.strict_tenth_frame = strict_tenth_frame

    @property
    def name(self) -> str:
        return self._name

    @property
    def frames(self) -> Tuple[Frame, ...]:
        return tuple(replace(f) for f in self._frames)

    def get_frame(self, index: int) -> Frame:
        return replace(self._frames[validate_frame_index(index)])

    def record_frame(
        self, index: int, first_roll: int, second_roll: int, third_roll: int = 0
    ) -> Frame:
        first, second, third = validate_rolls(
            index,
            first_roll,
            second_roll,
            third_roll,
            strict_tenth_frame=self.strict_tenth_frame,
        )
        frame = self._frames[index]
        frame.first_roll = first
        frame.second_roll = second
        frame.third_roll = third
        logger.debug(
            "%s frame %d recorded as %s (%d, %d, %d)",
            self._name,
            index,
            bowling.classify_frame(frame),
            first,
            second,
            third,
        )
        return replace(frame)

    def score_frame(self, index: int) -> int:
        return bowling.score_frame(self._frames, index)

    def frame_scores(self) -> List[int]:
        return bowling.frame_scores(self._frames)

    def running_totals(self) -> List[int]:
        return bowling.running_totals(self._frames)

    def calculate_score(self) -> int:
        return bowling.calculate_score(self._frames)

    def summary(self) -> ScoreSummary:
        scores = self.frame_scores()
        totals = self.running_totals()
        return ScoreSummary(
            player=self._name,
            frames=[
                FrameOut(
                    index=i,
                    rolls=f.rolls(),
                    kind=bowling.classify_frame(f),
                    score=scores[i],
                    running_total=totals[i],
                )
                for i, f in enumerate(self._frames)
            ],
            total=totals[-1],
        )

    def __repr__(self) -> str:
        return f"Player(name={self._name!r})"


class BowlingGame:
    """A single-player game."""

    def __init__(self, player_name: str, *, strict_tenth_frame: Optional[bool] = None) -> None:
        self._player = Player(player_name, strict_tenth_frame=strict_tenth_frame)

    @property
    def player(self) -> Player:
        return self._player
