"""引退申請馬の値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass, field

from .horse_stats import HorseStats
from .pedigree import Pedigree


@dataclass(frozen=True)
class RetiringHorse:
    """現役を終えて厩舎入りを申請する馬."""

    name: str
    gender: str
    breed: str
    specialization: str
    racing_style: str
    stats: HorseStats
    bond: int = 0
    pedigree: Pedigree | None = None
    genetic_traits: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.name or not self.name.strip():
            raise ValueError("Horse name cannot be empty")
        if not isinstance(self.stats, HorseStats):
            raise TypeError(f"stats must be HorseStats, got {type(self.stats).__name__}")
