"""品種情報のインターフェース."""
from __future__ import annotations

from abc import ABC, abstractmethod

from ..value_objects import HorseStats


class BreedProfile(ABC):
    """能力値の成長傾向・上限・馬場適性を提供する品種情報.

    品種表そのものは外部から与えられ、エンジンはこの能力を呼び出すだけで
    上限値などを独自に定義しない。
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """品種名."""
        pass

    @abstractmethod
    def get_growth_rate(self, stat_name: str) -> float:
        """能力値の成長率（1.0が標準）."""
        pass

    @abstractmethod
    def get_stat_cap(self, stat_name: str) -> float:
        """能力値の上限."""
        pass

    @abstractmethod
    def enforce_stat_caps(self, stats: HorseStats) -> HorseStats:
        """上限を超えた能力値を切り詰める."""
        pass

    @abstractmethod
    def get_surface_preference(self, surface: str) -> float:
        """馬場適性（1.0が標準）."""
        pass


class BreedRegistry(ABC):
    """品種名から品種情報を引くレジストリ."""

    @abstractmethod
    def get_breed(self, breed_name: str) -> BreedProfile | None:
        """品種情報を取得する（未登録ならNone）."""
        pass

    @abstractmethod
    def breed_names(self) -> list[str]:
        """登録済みの品種名."""
        pass
