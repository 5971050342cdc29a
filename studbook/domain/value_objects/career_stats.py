"""競走成績の値オブジェクト."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ..enums import CareerGrade
from .horse_stats import round_half_up


@dataclass(frozen=True)
class CareerStats:
    """引退時点の通算成績."""

    final_grade: CareerGrade | None
    total_races: int = 0
    races_won: int = 0
    achievements: tuple[str, ...] = field(default_factory=tuple)
    final_turn: int = 24

    def __post_init__(self) -> None:
        """バリデーション."""
        if self.total_races < 0:
            raise ValueError("total_races cannot be negative")
        if self.races_won < 0:
            raise ValueError("races_won cannot be negative")
        if self.races_won > self.total_races:
            raise ValueError("races_won cannot exceed total_races")

    @property
    def win_rate_percent(self) -> int:
        """勝率（整数％）."""
        if self.total_races <= 0:
            return 0
        return round_half_up(self.races_won / self.total_races * 100)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CareerStats:
        """辞書から生成する."""
        return cls(
            final_grade=CareerGrade.parse(data.get("final_grade")),
            total_races=int(data.get("total_races") or 0),
            races_won=int(data.get("races_won") or 0),
            achievements=tuple(data.get("achievements") or ()),
            final_turn=int(data.get("final_turn") or 24),
        )
