"""厩舎エンティティ."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from ..enums import BreedingType, CareerGrade, Gender
from ..services.breeding_compatibility import BreedingCompatibilityService
from ..value_objects import (
    BreedingFilters,
    BreedingRecommendation,
    BreedingResult,
    CareerStats,
    CompatibilityAnalysis,
    Pedigree,
    RetirementCriteria,
    RetirementResult,
    RetiringHorse,
)
from .breeding_attempt import BreedingAttempt
from .retired_horse import RetiredHorse

if TYPE_CHECKING:
    from ..ports.gender_maturity_mapping import GenderMaturityMapping

DEFAULT_CAPACITY = 20


@dataclass
class StableStatistics:
    """厩舎の累計統計."""

    total_retired: int = 0
    total_offspring: int = 0
    champion_offspring: int = 0
    average_offspring_grade: str = CareerGrade.F.value
    successful_breedings: int = 0
    foundation_horses: int = 0

    def to_dict(self) -> dict:
        """辞書に変換する."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> StableStatistics:
        """既定値の上に保存値を重ねて復元する."""
        merged = cls().to_dict()
        merged.update({k: v for k, v in (data or {}).items() if k in merged})
        return cls(**merged)


@dataclass
class StablePreferences:
    """厩舎の運用設定."""

    auto_retire: bool = True
    retirement_criteria: RetirementCriteria = field(default_factory=RetirementCriteria)

    def to_dict(self) -> dict:
        """辞書に変換する."""
        return {
            "auto_retire": self.auto_retire,
            "retirement_criteria": self.retirement_criteria.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> StablePreferences:
        """既定値の上に保存値を重ねて復元する."""
        data = data or {}
        return cls(
            auto_retire=bool(data.get("auto_retire", True)),
            retirement_criteria=RetirementCriteria.from_dict(data.get("retirement_criteria")),
        )


@dataclass
class Stable:
    """引退馬を繁殖馬として管理する厩舎（集約ルート）.

    種牡馬と繁殖牝馬を名前で管理し、同じ名前の馬はどちらか一方にしか存在しない。
    更新系の操作は例外ではなく結果オブジェクトで失敗を返す。
    """

    gender_maturity: GenderMaturityMapping
    capacity: int = DEFAULT_CAPACITY
    stallions: dict[str, RetiredHorse] = field(default_factory=dict)
    mares: dict[str, RetiredHorse] = field(default_factory=dict)
    breedings: list[BreedingAttempt] = field(default_factory=list)
    founded: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    statistics: StableStatistics = field(default_factory=StableStatistics)
    preferences: StablePreferences = field(default_factory=StablePreferences)
    compatibility_service: BreedingCompatibilityService = field(
        default_factory=BreedingCompatibilityService, repr=False
    )

    def __post_init__(self) -> None:
        """バリデーション."""
        if self.capacity <= 0:
            raise ValueError(f"capacity must be positive, got {self.capacity}")
        if self.get_total_horses() > self.capacity:
            raise ValueError(
                f"Stable holds {self.get_total_horses()} horses but capacity is {self.capacity}"
            )
        overlap = sorted(set(self.stallions) & set(self.mares))
        if overlap:
            raise ValueError(f"Horses cannot be both stallion and mare: {', '.join(overlap)}")

    # --- 引退 ---

    def retire_horse(self, horse: RetiringHorse, career_stats: CareerStats) -> RetirementResult:
        """引退馬を厩舎に受け入れる."""
        if self.is_horse_retired(horse.name):
            return RetirementResult.rejected(
                f"{horse.name} is already retired to the stable",
                self.get_retirement_requirements(),
            )

        criteria = self.preferences.retirement_criteria
        if not criteria.is_satisfied_by(career_stats.final_grade, career_stats.total_races):
            return RetirementResult.rejected(
                "Horse does not meet retirement criteria",
                self.get_retirement_requirements(),
            )

        if self.get_total_horses() >= self.capacity:
            return RetirementResult.rejected(
                "Stable is at capacity",
                {"message": f"Maximum {self.capacity} horses allowed"},
            )

        mature_gender = self.gender_maturity.mature_gender_of(horse.gender)
        retired = self._create_retired_horse(horse, career_stats, mature_gender)
        if mature_gender.is_male:
            self.stallions[horse.name] = retired
        else:
            self.mares[horse.name] = retired

        self.statistics.total_retired += 1
        if retired.is_foundation:
            self.statistics.foundation_horses += 1

        return RetirementResult.accepted(
            retired,
            f"{horse.name} retired as {mature_gender.get_display_name()}",
            self.get_total_horses(),
        )

    def _create_retired_horse(
        self, horse: RetiringHorse, career_stats: CareerStats, mature_gender: Gender
    ) -> RetiredHorse:
        pedigree = horse.pedigree if horse.pedigree is not None else Pedigree.create_foundation()
        return RetiredHorse(
            name=horse.name,
            original_gender=horse.gender,
            mature_gender=mature_gender,
            breed=horse.breed,
            specialization=horse.specialization,
            racing_style=horse.racing_style,
            stats=horse.stats,
            career_grade=career_stats.final_grade,
            bond=horse.bond,
            total_races=career_stats.total_races,
            races_won=career_stats.races_won,
            win_rate=career_stats.win_rate_percent,
            achievements=career_stats.achievements,
            pedigree=pedigree,
            genetic_traits=horse.genetic_traits,
            retired_turn=career_stats.final_turn,
            stable_generation=RetiredHorse.calculate_stable_generation(pedigree),
        )

    # --- 検索 ---

    def get_available_stallions(self, filters: BreedingFilters | None = None) -> list[RetiredHorse]:
        """条件に合う種牡馬を人気順に返す."""
        return self._filter_and_sort(self.stallions.values(), filters)

    def get_available_mares(self, filters: BreedingFilters | None = None) -> list[RetiredHorse]:
        """条件に合う繁殖牝馬を人気順に返す."""
        return self._filter_and_sort(self.mares.values(), filters)

    def _filter_and_sort(self, horses, filters: BreedingFilters | None) -> list[RetiredHorse]:
        filters = filters or BreedingFilters.none()
        candidates = list(horses)
        if filters.breed:
            candidates = [h for h in candidates if h.breed == filters.breed]
        if filters.specialization:
            candidates = [h for h in candidates if h.specialization == filters.specialization]
        if filters.min_grade is not None:
            min_value = filters.min_grade.score
            candidates = [h for h in candidates if h.grade_value >= min_value]
        if filters.max_inbreeding is not None:
            candidates = [
                h for h in candidates
                if h.pedigree.inbreeding_coefficient <= filters.max_inbreeding
            ]
        return sorted(candidates, key=lambda h: h.breeding_desirability, reverse=True)

    def find_horse(self, name: str) -> RetiredHorse | None:
        """名前で引退馬を探す."""
        return self.stallions.get(name) or self.mares.get(name)

    def is_horse_retired(self, name: str) -> bool:
        """引退馬として登録済みかどうか."""
        return name in self.stallions or name in self.mares

    def get_total_horses(self) -> int:
        """在籍頭数."""
        return len(self.stallions) + len(self.mares)

    # --- 配合 ---

    def get_breeding_recommendations(
        self, target: RetiredHorse, max_suggestions: int = 5
    ) -> list[BreedingRecommendation]:
        """対象馬と相性の良い異性の候補を返す."""
        if max_suggestions <= 0:
            return []
        partners = self.get_available_mares() if target.mature_gender.is_male else self.get_available_stallions()
        recommendations = [
            BreedingRecommendation(
                partner=partner,
                compatibility=self.calculate_breeding_compatibility(target, partner),
                breeding_type=self.compatibility_service.classify_breeding_type(target, partner),
            )
            for partner in partners
            if partner.name != target.name
        ]
        recommendations.sort(key=lambda r: r.compatibility_score, reverse=True)
        return recommendations[:max_suggestions]

    def calculate_breeding_compatibility(self, horse1: Any, horse2: Any) -> CompatibilityAnalysis:
        """配合相性を計算する."""
        return self.compatibility_service.calculate_breeding_compatibility(horse1, horse2)

    def calculate_potential_inbreeding(self, horse1: Any, horse2: Any) -> float:
        """配合した場合の近交度を見積もる."""
        return self.compatibility_service.calculate_potential_inbreeding(horse1, horse2)

    def record_breeding(self, sire: Any, dam: Any, offspring_name: str) -> BreedingResult:
        """配合を記録し、在籍している両親の繁殖成績を更新する."""
        if sire.name == dam.name:
            return BreedingResult.rejected("Cannot breed a horse with itself")
        if not offspring_name:
            return BreedingResult.rejected("Offspring name is required")

        attempt = BreedingAttempt(
            sire=sire.name,
            dam=dam.name,
            offspring=offspring_name,
            breeding_type=BreedingType.classify(sire.breed, dam.breed),
            expected_grade=self.compatibility_service.predict_offspring_grade(sire, dam),
        )
        self.breedings.append(attempt)

        if sire.name in self.stallions:
            self.stallions[sire.name].breeding_record.add_offspring(offspring_name)
        if dam.name in self.mares:
            self.mares[dam.name].breeding_record.add_offspring(offspring_name)

        self.statistics.total_offspring += 1
        return BreedingResult.recorded(attempt)

    # --- 統計 ---

    def get_retirement_requirements(self) -> dict:
        """引退受け入れ条件と空き枠."""
        criteria = self.preferences.retirement_criteria
        return {
            "minimum_grade": criteria.min_grade.value,
            "minimum_races": criteria.min_races,
            "capacity_remaining": self.capacity - self.get_total_horses(),
        }

    def get_stable_statistics(self) -> dict:
        """在籍状況と配合実績を含む統計."""
        total = self.get_total_horses()
        breeding_count = len(self.breedings)
        successful = self.statistics.successful_breedings
        return {
            **self.statistics.to_dict(),
            "current_horses": {
                "stallions": len(self.stallions),
                "mares": len(self.mares),
                "total": total,
                "capacity": self.capacity,
                "utilization_rate": round(total / self.capacity * 100),
            },
            "breedings": {
                "total": breeding_count,
                "successful": successful,
                "success_rate": round(successful / breeding_count * 100) if breeding_count else 0,
            },
        }

    # --- 保存 ---

    def to_dict(self) -> dict:
        """保存用の辞書に変換する."""
        return {
            "stallions": [[name, horse.to_dict()] for name, horse in self.stallions.items()],
            "mares": [[name, horse.to_dict()] for name, horse in self.mares.items()],
            "breedings": [b.to_dict() for b in self.breedings],
            "capacity": self.capacity,
            "founded": self.founded,
            "statistics": self.statistics.to_dict(),
            "preferences": self.preferences.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], gender_maturity: GenderMaturityMapping) -> Stable:
        """保存用の辞書から復元する（統計・設定は既定値に上書きで反映）."""
        return cls(
            gender_maturity=gender_maturity,
            capacity=int(data.get("capacity") or DEFAULT_CAPACITY),
            stallions={name: RetiredHorse.from_dict(record) for name, record in data.get("stallions") or []},
            mares={name: RetiredHorse.from_dict(record) for name, record in data.get("mares") or []},
            breedings=[BreedingAttempt.from_dict(b) for b in data.get("breedings") or []],
            founded=data.get("founded") or datetime.now(timezone.utc).isoformat(),
            statistics=StableStatistics.from_dict(data.get("statistics")),
            preferences=StablePreferences.from_dict(data.get("preferences")),
        )
