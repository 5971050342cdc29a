"""仔馬への形質継承サービス."""
from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Any

from ..enums import DistancePreference, Gender, RacingStrategy
from ..value_objects import Customization, HorseStats

SPECIALIZATIONS: tuple[str, ...] = ("Sprinter", "Miler", "Stayer")
RACING_STYLES: tuple[str, ...] = ("Front Runner", "Stalker", "Closer")

SIRE_BREED_CHANCE = 0.6

# 継承判定の累積しきい値（父25%・母25%・能力値30%・ランダム20%）
SIRE_THRESHOLD = 0.25
DAM_THRESHOLD = 0.5
STATS_THRESHOLD = 0.8

_DISTANCE_SPECIALIZATIONS = {
    DistancePreference.SPRINT: "Sprinter",
    DistancePreference.MILE: "Miler",
    DistancePreference.MEDIUM: "Miler",
    DistancePreference.LONG: "Stayer",
}

_STRATEGY_STYLES = {
    RacingStrategy.FRONT: "Front Runner",
    RacingStrategy.PACE: "Stalker",
    RacingStrategy.LATE: "Closer",
}


def suggest_specialization(stats: HorseStats) -> str:
    """能力値の比率から得意距離を提案する."""
    total = stats.total
    if total <= 0:
        return "Miler"
    if stats.speed / total > 0.4:
        return "Sprinter"
    if stats.stamina / total > 0.4:
        return "Stayer"
    return "Miler"


def suggest_racing_style(stats: HorseStats) -> str:
    """突出した能力値から脚質を提案する."""
    if stats.speed > max(stats.stamina, stats.power):
        return "Front Runner"
    if stats.stamina > max(stats.speed, stats.power):
        return "Closer"
    return "Stalker"


class OffspringInheritance:
    """両親から仔馬の品種・得意距離・脚質を決める."""

    def __init__(self, rng: random.Random | None = None) -> None:
        """初期化."""
        self._rng = rng if rng is not None else random.Random()

    def determine_offspring_breed(self, sire: Any, dam: Any) -> str:
        """同じ品種ならその品種、異なれば60%の確率で父の品種."""
        if sire.breed == dam.breed:
            return sire.breed
        return sire.breed if self._rng.random() < SIRE_BREED_CHANCE else dam.breed

    def random_racing_gender(self) -> Gender:
        """競走年齢の性別をランダムに選ぶ."""
        return self._rng.choice((Gender.COLT, Gender.FILLY))

    def inherit_specialization(
        self, sire: Any, dam: Any, stats: HorseStats, choices: Sequence[str] = SPECIALIZATIONS
    ) -> str:
        """得意距離を継承する."""
        return self._inherit(sire.specialization, dam.specialization, suggest_specialization(stats), choices)

    def inherit_racing_style(
        self, sire: Any, dam: Any, stats: HorseStats, choices: Sequence[str] = RACING_STYLES
    ) -> str:
        """脚質を継承する."""
        return self._inherit(sire.racing_style, dam.racing_style, suggest_racing_style(stats), choices)

    def _inherit(self, from_sire: str, from_dam: str, suggested: str, choices: Sequence[str]) -> str:
        if not choices:
            raise ValueError("choices must not be empty")
        roll = self._rng.random()
        if roll < SIRE_THRESHOLD:
            return from_sire
        if roll < DAM_THRESHOLD:
            return from_dam
        if roll < STATS_THRESHOLD:
            return suggested
        return self._rng.choice(list(choices))


def derive_specialization(customization: Customization | None, stats: HorseStats) -> str:
    """距離の好みがあればそれに従い、なければ能力値から決める."""
    if customization is not None and customization.distance is not None:
        return _DISTANCE_SPECIALIZATIONS[customization.distance]
    return suggest_specialization(stats)


def derive_racing_style(customization: Customization | None, stats: HorseStats) -> str:
    """戦法の好みがあればそれに従い、なければ能力値から決める."""
    if customization is not None and customization.strategy is not None:
        return _STRATEGY_STYLES[customization.strategy]
    return suggest_racing_style(stats)
