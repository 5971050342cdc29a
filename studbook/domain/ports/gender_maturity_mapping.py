"""性別の成熟区分インターフェース."""
from abc import ABC, abstractmethod

from ..enums import Gender


class GenderMaturityMapping(ABC):
    """競走時の性別を繁殖時の区分（牡・牝）に変換する."""

    @abstractmethod
    def mature_gender_of(self, raw_gender: str) -> Gender:
        """繁殖区分を返す.

        Raises:
            ValueError: 未知の性別の場合
        """
        pass
