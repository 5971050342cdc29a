"""遺伝影響度の列挙型."""
from __future__ import annotations

from enum import Enum

from .career_grade import CareerGrade


class HeritageWeight(Enum):
    """親の成績に応じた能力値への影響度."""

    STRONG = 0.15  # S/A
    MODERATE = 0.10  # B/C
    WEAK = 0.05  # D/F

    @classmethod
    def for_grade(cls, grade: CareerGrade | str | None) -> HeritageWeight:
        """成績グレードから影響度を決める."""
        score = CareerGrade.score_of(grade)
        if score >= 5:
            return cls.STRONG
        if score >= 3:
            return cls.MODERATE
        return cls.WEAK
