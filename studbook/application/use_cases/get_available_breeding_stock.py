"""繁殖馬一覧取得ユースケース."""
from __future__ import annotations

from dataclasses import dataclass

from studbook.domain.entities import RetiredHorse
from studbook.domain.ports.stable_repository import StableRepository
from studbook.domain.value_objects import BreedingFilters

from .open_stable import load_stable


@dataclass(frozen=True)
class GetAvailableBreedingStockResult:
    """繁殖馬一覧の取得結果."""

    stallions: list[RetiredHorse]
    mares: list[RetiredHorse]
    statistics: dict

    @property
    def can_breed(self) -> bool:
        """配合できる組み合わせがあるかどうか."""
        return bool(self.stallions) and bool(self.mares)


class GetAvailableBreedingStockUseCase:
    """条件に合う種牡馬・繁殖牝馬を人気順に取得するユースケース."""

    def __init__(self, stable_repository: StableRepository) -> None:
        """初期化."""
        self._stable_repository = stable_repository

    def execute(self, slot: str, filters: BreedingFilters | None = None) -> GetAvailableBreedingStockResult:
        """繁殖馬一覧を取得する.

        Raises:
            StableNotFoundError: 厩舎が存在しない場合
        """
        stable = load_stable(self._stable_repository, slot)
        return GetAvailableBreedingStockResult(
            stallions=stable.get_available_stallions(filters),
            mares=stable.get_available_mares(filters),
            statistics=stable.get_stable_statistics(),
        )
