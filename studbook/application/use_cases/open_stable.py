"""厩舎オープンユースケース."""
from __future__ import annotations

import logging

from studbook.domain.entities import Stable, StablePreferences
from studbook.domain.ports.gender_maturity_mapping import GenderMaturityMapping
from studbook.domain.ports.stable_repository import StableRepository
from studbook.domain.value_objects import RetirementCriteria

logger = logging.getLogger(__name__)


class StableNotFoundError(Exception):
    """厩舎が見つからないエラー."""

    pass


def load_stable(stable_repository: StableRepository, slot: str) -> Stable:
    """セーブスロットの厩舎を読み込む.

    Raises:
        StableNotFoundError: 厩舎が存在しない場合
    """
    stable = stable_repository.find_by_slot(slot)
    if stable is None:
        raise StableNotFoundError(f"Stable not found: {slot}")
    return stable


class OpenStableUseCase:
    """セーブスロットの厩舎を開く（なければ新設する）ユースケース."""

    def __init__(
        self,
        stable_repository: StableRepository,
        gender_maturity: GenderMaturityMapping,
        capacity: int,
        retirement_criteria: RetirementCriteria | None = None,
    ) -> None:
        """初期化."""
        self._stable_repository = stable_repository
        self._gender_maturity = gender_maturity
        self._capacity = capacity
        self._retirement_criteria = retirement_criteria or RetirementCriteria()

    def execute(self, slot: str) -> Stable:
        """厩舎を取得する."""
        stable = self._stable_repository.find_by_slot(slot)
        if stable is not None:
            return stable

        stable = Stable(
            gender_maturity=self._gender_maturity,
            capacity=self._capacity,
            preferences=StablePreferences(retirement_criteria=self._retirement_criteria),
        )
        self._stable_repository.save(slot, stable)
        logger.info("Opened new stable in slot %s (capacity %s)", slot, self._capacity)
        return stable
