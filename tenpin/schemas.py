from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .constants import FRAME_COUNT, LAST_FRAME, PIN_COUNT
from .exceptions import ProblemDetail

FrameKind = Literal["strike", "spare", "open"]


class FrameIn(BaseModel):
    frame: int = Field(..., ge=0, le=LAST_FRAME)
    rolls: List[int] = Field(..., min_length=2, max_length=3)

    model_config = ConfigDict(extra="forbid")

    @field_validator("rolls")
    @classmethod
    def _validate_rolls(cls, value: List[int]) -> List[int]:
        for pins in value:
            if not 0 <= pins <= PIN_COUNT:
                raise ValueError(f"rolls must be between 0 and {PIN_COUNT}")
        return value

    @model_validator(mode="after")
    def _third_roll_only_in_tenth(self) -> "FrameIn":
        if self.frame < LAST_FRAME and len(self.rolls) == 3 and self.rolls[2]:
            raise ValueError("only the tenth frame takes a third roll")
        return self

    def to_event(self) -> dict:
        return {"type": "FRAME", "frame": self.frame, "rolls": list(self.rolls)}


class FrameOut(BaseModel):
    index: int
    rolls: List[int]
    kind: FrameKind
    score: int
    running_total: int


class ScoreSummary(BaseModel):
    player: str
    frames: List[FrameOut] = Field(..., min_length=FRAME_COUNT, max_length=FRAME_COUNT)
    total: int


class ScenarioResult(BaseModel):
    name: str
    expected: int
    actual: Optional[int] = None
    passed: bool
    error: Optional[ProblemDetail] = None


class ScenarioReport(BaseModel):
    results: List[ScenarioResult]

    @property
    def all_passed(self) -> bool:
        return all(r.passed for r in self.results)
