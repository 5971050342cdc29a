"""引退ユースケース."""
from __future__ import annotations

import logging

from studbook.domain.ports.stable_repository import StableRepository
from studbook.domain.value_objects import CareerStats, RetirementResult, RetiringHorse

from .open_stable import load_stable

logger = logging.getLogger(__name__)


class RetireHorseUseCase:
    """現役を終えた馬を厩舎に受け入れるユースケース."""

    def __init__(self, stable_repository: StableRepository) -> None:
        """初期化."""
        self._stable_repository = stable_repository

    def execute(self, slot: str, horse: RetiringHorse, career_stats: CareerStats) -> RetirementResult:
        """馬を引退させる.

        Args:
            slot: セーブスロット
            horse: 引退する馬
            career_stats: 通算成績

        Returns:
            受け入れ結果（条件を満たさない場合は success=False）

        Raises:
            StableNotFoundError: 厩舎が存在しない場合
        """
        stable = load_stable(self._stable_repository, slot)
        result = stable.retire_horse(horse, career_stats)

        if not result.success:
            logger.info("Retirement of %s rejected: %s", horse.name, result.reason)
            return result

        self._stable_repository.save(slot, stable)
        logger.info("%s retired to stable %s", horse.name, slot)
        return result
