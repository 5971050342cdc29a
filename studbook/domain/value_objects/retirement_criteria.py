"""引退受け入れ条件の値オブジェクト."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ..enums import CareerGrade


@dataclass(frozen=True)
class RetirementCriteria:
    """厩舎に受け入れる最低グレードと最低出走数."""

    min_grade: CareerGrade = CareerGrade.D
    min_races: int = 3

    def __post_init__(self) -> None:
        """バリデーション."""
        if self.min_races < 0:
            raise ValueError("min_races cannot be negative")

    def is_satisfied_by(self, grade: CareerGrade | str | None, total_races: int) -> bool:
        """条件を満たしているかどうか."""
        grade_value = CareerGrade.score_of(grade, default=0)
        return grade_value >= self.min_grade.score and total_races >= self.min_races

    def to_dict(self) -> dict:
        """辞書に変換する."""
        return {"min_grade": self.min_grade.value, "min_races": self.min_races}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> RetirementCriteria:
        """辞書から復元する（欠けた項目は既定値）."""
        default = cls()
        if not data:
            return default
        return cls(
            min_grade=CareerGrade.parse(data.get("min_grade")) or default.min_grade,
            min_races=int(data.get("min_races", default.min_races)),
        )
