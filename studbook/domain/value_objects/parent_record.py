"""血統表に埋め込む親馬情報の値オブジェクト."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ..enums import CareerGrade
from .compressed_pedigree import CompressedPedigree
from .horse_stats import HorseStats


@dataclass(frozen=True)
class ParentRecord:
    """父または母の要約レコード."""

    name: str = "Unknown"
    breed: str = "Thoroughbred"
    specialization: str = "Miler"
    racing_style: str = "Stalker"
    gender: str = "unknown"
    stats: HorseStats | None = None
    achievements: tuple[str, ...] = field(default_factory=tuple)
    career_grade: CareerGrade = CareerGrade.F
    races_won: int = 0
    total_races: int = 0
    pedigree: CompressedPedigree | None = None
    genetic_traits: tuple[str, ...] = field(default_factory=tuple)
    surface_preference: str = "balanced"
    distance_preference: str = "mile"

    @classmethod
    def of(cls, parent: Any) -> ParentRecord:
        """親馬（ParentRecord・引退馬・辞書）からレコードを作る."""
        if isinstance(parent, ParentRecord):
            return parent
        if isinstance(parent, Mapping):
            return cls.from_dict(parent)
        to_parent_record = getattr(parent, "to_parent_record", None)
        if callable(to_parent_record):
            return to_parent_record()
        raise TypeError(f"Cannot build a parent record from {type(parent).__name__}")

    @property
    def win_rate(self) -> float:
        """勝率（0.0〜1.0）."""
        if self.total_races <= 0:
            return 0.0
        return self.races_won / self.total_races

    def strength(self) -> float:
        """血統評価用の親単体の強さ（0〜100）."""
        value = 0.0
        if self.stats is not None:
            value += (self.stats.average / 100) * 40
        value += self.career_grade.strength_points
        value += self.win_rate * 20
        value += min(len(self.achievements) * 2, 10)
        return min(value, 100.0)

    def identity_key(self) -> str:
        """近親度計算で使う個体識別キー."""
        return f"{self.name}_{self.breed}"

    def foundation_tag(self) -> str:
        """基礎血統のタグ."""
        return f"{self.name} ({self.breed})"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ParentRecord:
        """辞書から生成する（欠けた項目は既定値）."""
        raw_stats = data.get("stats")
        raw_pedigree = data.get("pedigree")
        return cls(
            name=data.get("name") or "Unknown",
            breed=data.get("breed") or "Thoroughbred",
            specialization=data.get("specialization") or "Miler",
            racing_style=data.get("racing_style") or "Stalker",
            gender=data.get("gender") or "unknown",
            stats=HorseStats.coerce(raw_stats) if raw_stats is not None else None,
            achievements=tuple(data.get("achievements") or ()),
            career_grade=CareerGrade.parse(data.get("career_grade")) or CareerGrade.F,
            races_won=int(data.get("races_won") or 0),
            total_races=int(data.get("total_races") or 0),
            pedigree=_compress_or_restore(raw_pedigree),
            genetic_traits=tuple(data.get("genetic_traits") or ()),
            surface_preference=data.get("surface_preference") or "balanced",
            distance_preference=data.get("distance_preference") or "mile",
        )

    def to_dict(self) -> dict:
        """辞書に変換する."""
        return {
            "name": self.name,
            "breed": self.breed,
            "specialization": self.specialization,
            "racing_style": self.racing_style,
            "gender": self.gender,
            "stats": self.stats.to_dict() if self.stats is not None else None,
            "achievements": list(self.achievements),
            "career_grade": self.career_grade.value,
            "races_won": self.races_won,
            "total_races": self.total_races,
            "pedigree": self.pedigree.to_dict() if self.pedigree is not None else None,
            "genetic_traits": list(self.genetic_traits),
            "surface_preference": self.surface_preference,
            "distance_preference": self.distance_preference,
        }


def _compress_or_restore(raw: Any) -> CompressedPedigree | None:
    if raw is None:
        return None
    # 保存済みの圧縮形式はそのまま復元し、フルの血統は1世代分に圧縮する
    if isinstance(raw, Mapping) and "sire_name" in raw:
        return CompressedPedigree.from_dict(raw)
    return CompressedPedigree.compress(raw)
