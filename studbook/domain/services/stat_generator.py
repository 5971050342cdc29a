"""能力値生成サービス."""
from __future__ import annotations

import math
import random
from collections.abc import Mapping
from typing import Any

from ..enums import (
    DistancePreference,
    GenerationType,
    HeritageWeight,
    RacingStrategy,
    StatPattern,
    TrackType,
)
from ..ports.breed_profile import BreedProfile
from ..value_objects import (
    Customization,
    GenerationReport,
    HorseStats,
    InvalidStatInputError,
    ParentRecord,
    Pedigree,
    SecondaryAttributes,
    StatGenerationResult,
    round_half_up,
)
from .base_stat_patterns import choose_pattern, synthesize_base_stats
from .offspring_inheritance import suggest_racing_style

# 品種の成長傾向による初期補正
STRONG_TENDENCY = 1.1
WEAK_TENDENCY = 0.9
TENDENCY_BONUS = 1.05
TENDENCY_PENALTY = 0.95

# 遺伝
AVERAGE_PARENT_STAT = 40
PARENT_SHARE = 0.5
INBREEDING_DEPRESSION_RATE = 0.5

# カスタマイズの強さ
TRACK_TYPE_BIAS = 8
DISTANCE_BIAS = 12
STRATEGY_BIAS = 6

STAT_FLOOR = 0

# (speed, stamina, power) の係数
_TRACK_TYPE_FACTORS = {
    TrackType.TURF: (0.0, 0.7, -0.3),
    TrackType.DIRT: (0.5, 0.0, 0.5),
}

_DISTANCE_FACTORS = {
    DistancePreference.SPRINT: (1.0, -0.5, 0.7),
    DistancePreference.MILE: (0.5, 0.5, 0.0),
    DistancePreference.MEDIUM: (0.2, 0.8, -0.2),
    DistancePreference.LONG: (-0.3, 1.0, -0.3),
}

_STRATEGY_FACTORS = {
    RacingStrategy.FRONT: (0.8, 0.2, 0.5),
    RacingStrategy.PACE: (0.4, 0.4, 0.2),
    RacingStrategy.LATE: (0.3, 0.8, 0.3),
}


class StatGenerator:
    """新しい馬の3能力値を段階的に合成する.

    1. パターンに基づくベース値
    2. 品種の成長傾向
    3. 両親からの遺伝（血統表がある場合）
    4. プレイヤーのカスタマイズ
    5. 品種ごとの上限
    の順に適用し、最後に二次属性を導く。
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        """初期化."""
        self._rng = rng if rng is not None else random.Random()

    def generate_stats(
        self,
        breed: BreedProfile,
        pedigree: Pedigree | None = None,
        customization: Customization | Mapping[str, Any] | None = None,
        generation_type: GenerationType | str = GenerationType.FOUNDATION,
    ) -> StatGenerationResult:
        """能力値・二次属性・生成レポートを返す.

        Raises:
            TypeError: 品種情報や血統表の型が不正な場合
            InvalidStatInputError: 能力値の入力が不正な場合
            ValueError: 生成種別やカスタマイズの値が不正な場合
        """
        if not isinstance(breed, BreedProfile):
            raise TypeError(f"breed must be a BreedProfile, got {type(breed).__name__}")
        if pedigree is not None and not isinstance(pedigree, Pedigree):
            raise TypeError(f"pedigree must be a Pedigree, got {type(pedigree).__name__}")
        generation_type = GenerationType(generation_type)
        customization = Customization.coerce(customization)
        if customization is not None and customization.is_empty:
            customization = None

        pattern = choose_pattern(self._rng)
        base_stats = self.generate_base_stats(generation_type, pattern)
        breed_stats = self.apply_breed_influence(base_stats, breed)
        heritage_stats = (
            self.apply_heritage_influence(breed_stats, pedigree) if pedigree is not None else breed_stats
        )
        customized_stats = (
            self.apply_customization_bias(heritage_stats, customization)
            if customization is not None
            else heritage_stats
        )
        final_stats = self.enforce_caps(customized_stats, breed)
        attributes = self.generate_secondary_attributes(final_stats, breed, pedigree)

        report = GenerationReport(
            generation_type=generation_type,
            breed=breed.name,
            pattern=pattern,
            base_stats=base_stats,
            breed_stats=breed_stats,
            heritage_stats=heritage_stats,
            customized_stats=customized_stats,
            final_stats=final_stats,
            breed_influence=f"{breed.name} breed characteristics applied",
            heritage_influence=_summarize_heritage(pedigree),
            customization_influence=(
                customization.describe() if customization is not None else "None - Random generation"
            ),
        )
        return StatGenerationResult(stats=final_stats, attributes=attributes, report=report)

    # --- 1. ベース値 ---

    def generate_base_stats(
        self,
        generation_type: GenerationType | str = GenerationType.FOUNDATION,
        pattern: StatPattern | None = None,
    ) -> HorseStats:
        """パターンからベース能力値（20〜70）を作る."""
        generation_type = GenerationType(generation_type)
        if pattern is None:
            pattern = choose_pattern(self._rng)
        return synthesize_base_stats(pattern, generation_type.variance, self._rng)

    @staticmethod
    def generate_base_stats_with_seed(
        generation_type: GenerationType | str,
        seed: int,
        pattern: StatPattern | None = None,
    ) -> HorseStats:
        """シードを固定してベース能力値を作る（テスト専用）."""
        return StatGenerator(random.Random(seed)).generate_base_stats(generation_type, pattern)

    # --- 2. 品種 ---

    def apply_breed_influence(self, stats: HorseStats, breed: BreedProfile) -> HorseStats:
        """成長率の高い能力値は少し高く、低い能力値は少し低く始める."""

        def influence(name: str, value: float) -> float:
            tendency = breed.get_growth_rate(name)
            _require_positive(f"growth rate for {name}", tendency)
            if tendency > STRONG_TENDENCY:
                return round_half_up(value * TENDENCY_BONUS)
            if tendency < WEAK_TENDENCY:
                return round_half_up(value * TENDENCY_PENALTY)
            return value

        return stats.map(influence)

    # --- 3. 遺伝 ---

    def apply_heritage_influence(self, stats: HorseStats, pedigree: Pedigree) -> HorseStats:
        """両親の能力値・雑種強勢・近交弱勢を反映する."""
        if pedigree.is_foundation:
            return stats

        contributions = [
            (role, parent, HeritageWeight.for_grade(parent.career_grade).value)
            for role, parent in (("sire", pedigree.sire), ("dam", pedigree.dam))
            if parent is not None
        ]
        for role, parent, _ in contributions:
            _require_parent_stats(role, parent)

        def inherit(name: str, value: float) -> float:
            bonus = sum(
                self.calculate_parent_influence(parent.stats.get(name), weight) * PARENT_SHARE
                for _, parent, weight in contributions
            )
            return round_half_up(value + bonus)

        influenced = stats.map(inherit)

        if pedigree.cross_bred:
            vigor = self.calculate_hybrid_vigor(influenced)
            influenced = influenced.map(lambda _, value: round_half_up(value + vigor))

        if pedigree.inbreeding_coefficient > 0:
            depression = self.calculate_inbreeding_depression(pedigree.inbreeding_coefficient)
            influenced = influenced.map(lambda _, value: round_half_up(value * (1 - depression)))

        return influenced

    @staticmethod
    def calculate_parent_influence(parent_stat: float, weight: float) -> float:
        """平均的な親（40）との差に影響度を掛けた値."""
        return (parent_stat - AVERAGE_PARENT_STAT) * weight

    @staticmethod
    def calculate_hybrid_vigor(stats: HorseStats) -> int:
        """平均値の2〜5%（質が高いほど大きい）を能力値ごとのボーナスとする."""
        average = stats.average
        vigor_rate = 0.02 + (average / 100) * 0.03
        return max(0, round_half_up(average * vigor_rate))

    @staticmethod
    def calculate_inbreeding_depression(inbreeding_coefficient: float) -> float:
        """近交係数10%につき5%の減少率."""
        return inbreeding_coefficient * INBREEDING_DEPRESSION_RATE

    # --- 4. カスタマイズ ---

    def apply_customization_bias(self, stats: HorseStats, customization: Customization) -> HorseStats:
        """馬場・距離・戦法の順に好みを加算する."""
        biased = stats
        if customization.track_type is not None:
            biased = _apply_factors(biased, TRACK_TYPE_BIAS, _TRACK_TYPE_FACTORS[customization.track_type])
        if customization.distance is not None:
            biased = _apply_factors(biased, DISTANCE_BIAS, _DISTANCE_FACTORS[customization.distance])
        if customization.strategy is not None:
            biased = _apply_factors(biased, STRATEGY_BIAS, _STRATEGY_FACTORS[customization.strategy])
        return biased

    # --- 5. 上限 ---

    def enforce_caps(self, stats: HorseStats, breed: BreedProfile) -> HorseStats:
        """品種の上限を適用し、0未満は0にそろえる."""
        capped = breed.enforce_stat_caps(stats)
        if not isinstance(capped, HorseStats):
            raise TypeError(f"enforce_stat_caps must return HorseStats, got {type(capped).__name__}")
        return capped.map(lambda _, value: max(STAT_FLOOR, value))

    # --- 6. 二次属性 ---

    def generate_secondary_attributes(
        self, stats: HorseStats, breed: BreedProfile, pedigree: Pedigree | None
    ) -> SecondaryAttributes:
        """最終能力値から適性・成長余地などを導く."""
        return SecondaryAttributes(
            track_preference=_track_preference(breed),
            distance_aptitude=_distance_aptitude(stats),
            racing_style=suggest_racing_style(stats),
            growth_potential=_growth_potential(stats, breed),
            training_efficiency=_training_efficiency(stats, breed),
            dominant_trait=max(stats.items(), key=lambda item: item[1])[0],
            balance_score=_balance_score(stats),
            heritage_strength=pedigree.pedigree_strength if pedigree is not None else 0,
            genetic_diversity=(
                max(0.0, 1 - pedigree.inbreeding_coefficient) if pedigree is not None else 1.0
            ),
        )


def _require_positive(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or math.isnan(value):
        raise InvalidStatInputError(f"{name} must be numeric, got {value!r}")
    if value <= 0:
        raise InvalidStatInputError(f"{name} must be positive, got {value}")


def _require_parent_stats(role: str, parent: ParentRecord) -> None:
    if parent.stats is None:
        raise InvalidStatInputError(f"{role} {parent.name} has no stats to inherit from")
    if not isinstance(parent.stats, HorseStats):
        raise InvalidStatInputError(f"{role} {parent.name} has malformed stats")


def _apply_factors(stats: HorseStats, bias: int, factors: tuple[float, float, float]) -> HorseStats:
    speed, stamina, power = (round_half_up(bias * f) for f in factors)
    return stats.add(speed=speed, stamina=stamina, power=power)


def _summarize_heritage(pedigree: Pedigree | None) -> str:
    if pedigree is None or pedigree.is_foundation:
        return "None - Foundation horse"
    return f"{pedigree.lineage} bloodline influence"


def _track_preference(breed: BreedProfile) -> str:
    turf = breed.get_surface_preference("turf")
    dirt = breed.get_surface_preference("dirt")
    if abs(turf - dirt) < 0.02:
        return "balanced"
    return "turf" if turf > dirt else "dirt"


def _distance_aptitude(stats: HorseStats) -> str:
    total = stats.total
    if total <= 0:
        return "mile"
    if stats.speed / total > 0.4:
        return "sprint"
    if stats.stamina / total > 0.4:
        return "distance"
    return "mile"


def _growth_potential(stats: HorseStats, breed: BreedProfile) -> int:
    potential = sum(
        (breed.get_stat_cap(name) - value) * breed.get_growth_rate(name) for name, value in stats.items()
    )
    return round_half_up(potential)


def _training_efficiency(stats: HorseStats, breed: BreedProfile) -> dict[str, float]:
    efficiencies = {}
    for name, value in stats.items():
        cap = breed.get_stat_cap(name)
        _require_positive(f"stat cap for {name}", cap)
        efficiencies[name] = breed.get_growth_rate(name) * (1 - value / cap)
    return efficiencies


def _balance_score(stats: HorseStats) -> float:
    values = [value for _, value in stats.items()]
    mean = sum(values) / len(values)
    if mean <= 0:
        return 0.0
    deviation = math.sqrt(sum((v - mean) ** 2 for v in values) / len(values))
    return max(0.0, 1 - deviation / mean)
