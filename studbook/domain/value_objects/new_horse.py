"""新しく生まれた馬の値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass

from ..enums import Gender
from .generation_report import GenerationReport
from .horse_stats import HorseStats
from .pedigree import Pedigree
from .retiring_horse import RetiringHorse
from .secondary_attributes import SecondaryAttributes


@dataclass(frozen=True)
class NewHorse:
    """生成または配合で誕生した競走馬."""

    name: str
    gender: Gender
    breed: str
    specialization: str
    racing_style: str
    stats: HorseStats
    attributes: SecondaryAttributes
    pedigree: Pedigree
    report: GenerationReport

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.name or not self.name.strip():
            raise ValueError("Horse name cannot be empty")

    def to_retiring_horse(self, stats: HorseStats | None = None, bond: int = 0) -> RetiringHorse:
        """現役を終えた時点の能力値で引退申請馬に変換する."""
        return RetiringHorse(
            name=self.name,
            gender=self.gender.value,
            breed=self.breed,
            specialization=self.specialization,
            racing_style=self.racing_style,
            stats=stats if stats is not None else self.stats,
            bond=bond,
            pedigree=self.pedigree,
        )

    def to_dict(self) -> dict:
        """辞書に変換する."""
        return {
            "name": self.name,
            "gender": self.gender.value,
            "breed": self.breed,
            "specialization": self.specialization,
            "racing_style": self.racing_style,
            "stats": self.stats.to_dict(),
            "attributes": self.attributes.to_dict(),
            "pedigree": self.pedigree.to_dict(),
            "generation": self.report.to_dict(),
        }
