"""配合候補取得ユースケース."""
from __future__ import annotations

from dataclasses import dataclass

from studbook.domain.entities import RetiredHorse
from studbook.domain.ports.stable_repository import StableRepository
from studbook.domain.value_objects import BreedingRecommendation

from .open_stable import load_stable


class HorseNotFoundError(Exception):
    """引退馬が見つからないエラー."""

    pass


@dataclass(frozen=True)
class GetBreedingRecommendationsResult:
    """配合候補の取得結果."""

    target: RetiredHorse
    recommendations: list[BreedingRecommendation]


class GetBreedingRecommendationsUseCase:
    """対象馬と相性の良い配合相手を取得するユースケース."""

    def __init__(self, stable_repository: StableRepository) -> None:
        """初期化."""
        self._stable_repository = stable_repository

    def execute(
        self, slot: str, horse_name: str, max_suggestions: int = 5
    ) -> GetBreedingRecommendationsResult:
        """配合候補を取得する.

        Raises:
            StableNotFoundError: 厩舎が存在しない場合
            HorseNotFoundError: 対象馬が厩舎にいない場合
        """
        stable = load_stable(self._stable_repository, slot)
        target = stable.find_horse(horse_name)
        if target is None:
            raise HorseNotFoundError(f"Horse not found in stable: {horse_name}")

        return GetBreedingRecommendationsResult(
            target=target,
            recommendations=stable.get_breeding_recommendations(target, max_suggestions),
        )
