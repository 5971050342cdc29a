"""配合相性分析結果の値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass, field

from ..enums import BreedingType, CareerGrade


@dataclass(frozen=True)
class ExpectedOutcome:
    """配合した場合の見込み."""

    predicted_grade: CareerGrade
    breeding_type: BreedingType
    potential_inbreeding: float

    def to_dict(self) -> dict:
        """辞書に変換する."""
        return {
            "predicted_grade": self.predicted_grade.value,
            "breeding_type": self.breeding_type.value,
            "potential_inbreeding": self.potential_inbreeding,
        }


@dataclass(frozen=True)
class CompatibilityAnalysis:
    """配合相性のスコアと、その理由となる長所・懸念点."""

    overall: float
    advantages: tuple[str, ...] = field(default_factory=tuple)
    concerns: tuple[str, ...] = field(default_factory=tuple)
    expected_outcome: ExpectedOutcome | None = None

    def __post_init__(self) -> None:
        """バリデーション."""
        if not 0 <= self.overall <= 100:
            raise ValueError(f"overall must be between 0 and 100, got {self.overall}")

    def to_dict(self) -> dict:
        """辞書に変換する."""
        return {
            "overall": self.overall,
            "advantages": list(self.advantages),
            "concerns": list(self.concerns),
            "expected_outcome": self.expected_outcome.to_dict() if self.expected_outcome else None,
        }
