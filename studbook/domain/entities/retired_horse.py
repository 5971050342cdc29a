"""引退馬エンティティ."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from ..enums import CareerGrade, Gender
from ..value_objects import CompressedPedigree, HorseStats, ParentRecord, Pedigree


@dataclass
class BreedingRecord:
    """繁殖成績."""

    times_used: int = 0
    offspring: list[str] = field(default_factory=list)
    successful_offspring: int = 0
    champion_offspring: int = 0

    def add_offspring(self, offspring_name: str) -> None:
        """産駒を追加する."""
        self.times_used += 1
        self.offspring.append(offspring_name)

    def to_dict(self) -> dict:
        """辞書に変換する."""
        return {
            "times_used": self.times_used,
            "offspring": list(self.offspring),
            "successful_offspring": self.successful_offspring,
            "champion_offspring": self.champion_offspring,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> BreedingRecord:
        """辞書から復元する."""
        if not data:
            return cls()
        return cls(
            times_used=int(data.get("times_used", 0)),
            offspring=list(data.get("offspring") or []),
            successful_offspring=int(data.get("successful_offspring", 0)),
            champion_offspring=int(data.get("champion_offspring", 0)),
        )


@dataclass
class RetiredHorse:
    """厩舎で繁殖馬として管理される引退馬."""

    name: str
    original_gender: str
    mature_gender: Gender
    breed: str
    specialization: str
    racing_style: str
    stats: HorseStats
    career_grade: CareerGrade | None
    bond: int = 0
    total_races: int = 0
    races_won: int = 0
    win_rate: int = 0  # 整数％
    achievements: tuple[str, ...] = field(default_factory=tuple)
    pedigree: Pedigree = field(default_factory=Pedigree.create_foundation)
    genetic_traits: tuple[str, ...] = field(default_factory=tuple)
    breeding_record: BreedingRecord = field(default_factory=BreedingRecord)
    retired_date: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    retired_turn: int = 24
    stable_generation: int = 1

    @staticmethod
    def calculate_stable_generation(pedigree: Pedigree | None) -> int:
        """厩舎内での世代（1=基礎馬）."""
        if pedigree is None or pedigree.is_foundation:
            return 1
        return pedigree.generations + 1

    @property
    def grade_value(self) -> int:
        """グレード値（不明な場合は1）."""
        return CareerGrade.score_of(self.career_grade)

    @property
    def breeding_desirability(self) -> float:
        """繁殖馬としての人気度（グレード値 + 勝率/10）."""
        return self.grade_value + self.win_rate / 10

    @property
    def is_foundation(self) -> bool:
        """基礎馬かどうか."""
        return self.pedigree.is_foundation

    def to_parent_record(self) -> ParentRecord:
        """血統表に埋め込む親馬レコードに変換する."""
        return ParentRecord(
            name=self.name,
            breed=self.breed,
            specialization=self.specialization,
            racing_style=self.racing_style,
            gender=self.mature_gender.value,
            stats=self.stats,
            achievements=self.achievements,
            career_grade=self.career_grade or CareerGrade.F,
            races_won=self.races_won,
            total_races=self.total_races,
            pedigree=CompressedPedigree.compress(self.pedigree),
            genetic_traits=self.genetic_traits,
        )

    def to_dict(self) -> dict:
        """保存用の辞書に変換する."""
        return {
            "name": self.name,
            "original_gender": self.original_gender,
            "mature_gender": self.mature_gender.value,
            "breed": self.breed,
            "specialization": self.specialization,
            "racing_style": self.racing_style,
            "stats": self.stats.to_dict(),
            "bond": self.bond,
            "career_grade": self.career_grade.value if self.career_grade else None,
            "total_races": self.total_races,
            "races_won": self.races_won,
            "win_rate": self.win_rate,
            "achievements": list(self.achievements),
            "pedigree": self.pedigree.to_dict(),
            "genetic_traits": list(self.genetic_traits),
            "breeding_record": self.breeding_record.to_dict(),
            "retired_date": self.retired_date,
            "retired_turn": self.retired_turn,
            "stable_generation": self.stable_generation,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RetiredHorse:
        """保存用の辞書から復元する."""
        pedigree_data = data.get("pedigree")
        pedigree = Pedigree.from_dict(pedigree_data) if pedigree_data else Pedigree.create_foundation()
        return cls(
            name=data["name"],
            original_gender=data.get("original_gender", data["mature_gender"]),
            mature_gender=Gender(data["mature_gender"]),
            breed=data["breed"],
            specialization=data.get("specialization", "Miler"),
            racing_style=data.get("racing_style", "Stalker"),
            stats=HorseStats.from_dict(data["stats"]),
            career_grade=CareerGrade.parse(data.get("career_grade")),
            bond=int(data.get("bond", 0)),
            total_races=int(data.get("total_races", 0)),
            races_won=int(data.get("races_won", 0)),
            win_rate=int(data.get("win_rate", 0)),
            achievements=tuple(data.get("achievements") or ()),
            pedigree=pedigree,
            genetic_traits=tuple(data.get("genetic_traits") or ()),
            breeding_record=BreedingRecord.from_dict(data.get("breeding_record")),
            retired_date=data.get("retired_date") or datetime.now(timezone.utc).isoformat(),
            retired_turn=int(data.get("retired_turn", 24)),
            stable_generation=int(data.get("stable_generation", cls.calculate_stable_generation(pedigree))),
        )
