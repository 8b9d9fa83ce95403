"""Per-frame roll record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from .constants import PIN_COUNT


@dataclass
class Frame:
    first_roll: int = 0
    second_roll: int = 0
    third_roll: int = 0  # tenth frame bonus roll only

    @property
    def is_strike(self) -> bool:
        return self.first_roll == PIN_COUNT

    @property
    def is_spare(self) -> bool:
        return not self.is_strike and self.first_roll + self.second_roll == PIN_COUNT

    @property
    def is_open(self) -> bool:
        return not (self.is_strike or self.is_spare)

    def total_pins(self) -> int:
        return self.first_roll + self.second_roll + self.third_roll

    def rolls(self) -> List[int]:
        return [self.first_roll, self.second_roll, self.third_roll]

    @classmethod
    def from_rolls(cls, rolls: Sequence[int]) -> "Frame":
        padded = list(rolls) + [0] * (3 - len(rolls))
        return cls(first_roll=padded[0], second_roll=padded[1], third_roll=padded[2])
