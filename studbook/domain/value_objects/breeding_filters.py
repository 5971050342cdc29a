"""繁殖馬の絞り込み条件の値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass

from ..enums import CareerGrade


@dataclass(frozen=True)
class BreedingFilters:
    """品種・適性・最低グレード・近交係数上限による絞り込み条件."""

    breed: str | None = None
    specialization: str | None = None
    min_grade: CareerGrade | None = None
    max_inbreeding: float | None = None

    def __post_init__(self) -> None:
        """バリデーション."""
        if self.max_inbreeding is not None and not 0 <= self.max_inbreeding <= 1:
            raise ValueError(f"max_inbreeding must be between 0 and 1, got {self.max_inbreeding}")

    @classmethod
    def none(cls) -> BreedingFilters:
        """条件なし."""
        return cls()
