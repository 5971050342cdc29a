"""配合記録エンティティ."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from ..enums import BreedingType, CareerGrade


@dataclass
class BreedingAttempt:
    """1回の配合の記録.

    産駒の実績（actual_grade, success）は競走生活を終えた後に別処理で埋める。
    """

    sire: str
    dam: str
    offspring: str
    breeding_type: BreedingType
    expected_grade: CareerGrade
    date: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    actual_grade: CareerGrade | None = None
    success: bool = False

    def to_dict(self) -> dict:
        """辞書に変換する."""
        return {
            "sire": self.sire,
            "dam": self.dam,
            "offspring": self.offspring,
            "date": self.date,
            "breeding_type": self.breeding_type.value,
            "expected_grade": self.expected_grade.value,
            "actual_grade": self.actual_grade.value if self.actual_grade else None,
            "success": self.success,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BreedingAttempt:
        """辞書から復元する."""
        return cls(
            sire=data["sire"],
            dam=data["dam"],
            offspring=data["offspring"],
            breeding_type=BreedingType(data.get("breeding_type", BreedingType.PUREBRED.value)),
            expected_grade=CareerGrade.parse(data.get("expected_grade")) or CareerGrade.F,
            date=data.get("date") or datetime.now(timezone.utc).isoformat(),
            actual_grade=CareerGrade.parse(data.get("actual_grade")),
            success=bool(data.get("success", False)),
        )
