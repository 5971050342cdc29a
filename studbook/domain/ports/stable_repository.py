"""厩舎リポジトリインターフェース."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..entities import Stable


class StableRepository(ABC):
    """セーブスロットごとの厩舎を保存・取得する."""

    @abstractmethod
    def save(self, slot: str, stable: Stable) -> None:
        """厩舎を保存する."""
        pass

    @abstractmethod
    def find_by_slot(self, slot: str) -> Stable | None:
        """セーブスロットで検索する."""
        pass

    @abstractmethod
    def delete(self, slot: str) -> None:
        """厩舎を削除する."""
        pass
