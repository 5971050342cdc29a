"""競走成績グレードの列挙型."""
from __future__ import annotations

from enum import Enum


class CareerGrade(str, Enum):
    """引退時の通算成績グレード."""

    S = "S"
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"

    @property
    def score(self) -> int:
        """グレード値（S=6 〜 F=1）."""
        return _GRADE_SCORES[self]

    @property
    def strength_points(self) -> int:
        """血統評価で使う持ち点（最大30）."""
        return _STRENGTH_POINTS[self]

    @classmethod
    def parse(cls, value: CareerGrade | str | None) -> CareerGrade | None:
        """文字列からグレードを得る（不明な場合はNone）."""
        if isinstance(value, CareerGrade):
            return value
        if not value:
            return None
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            return None

    @classmethod
    def score_of(cls, value: CareerGrade | str | None, default: int = 1) -> int:
        """グレード値を返す（不明なグレードはdefault）."""
        grade = cls.parse(value)
        return grade.score if grade is not None else default

    @classmethod
    def from_average(cls, average: float) -> CareerGrade:
        """平均グレード値を7段階表で丸めてグレードに変換する."""
        index = int(average // 1)
        if 0 <= index < len(_AVERAGE_BUCKETS):
            return _AVERAGE_BUCKETS[index]
        return cls.F


_GRADE_SCORES = {
    CareerGrade.S: 6,
    CareerGrade.A: 5,
    CareerGrade.B: 4,
    CareerGrade.C: 3,
    CareerGrade.D: 2,
    CareerGrade.F: 1,
}

_STRENGTH_POINTS = {
    CareerGrade.S: 30,
    CareerGrade.A: 25,
    CareerGrade.B: 20,
    CareerGrade.C: 15,
    CareerGrade.D: 10,
    CareerGrade.F: 5,
}

# 平均値の整数部 → グレード（0, 1 はどちらもF）
_AVERAGE_BUCKETS = (
    CareerGrade.F,
    CareerGrade.F,
    CareerGrade.D,
    CareerGrade.C,
    CareerGrade.B,
    CareerGrade.A,
    CareerGrade.S,
)
