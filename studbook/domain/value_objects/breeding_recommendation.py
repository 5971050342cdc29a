"""配合候補の値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..enums import BreedingType
from .compatibility_analysis import CompatibilityAnalysis

if TYPE_CHECKING:
    from ..entities.retired_horse import RetiredHorse


@dataclass(frozen=True)
class BreedingRecommendation:
    """相性スコア付きの配合相手."""

    partner: RetiredHorse
    compatibility: CompatibilityAnalysis
    breeding_type: BreedingType

    @property
    def compatibility_score(self) -> float:
        """相性スコア."""
        return self.compatibility.overall

    @property
    def advantages(self) -> tuple[str, ...]:
        """長所."""
        return self.compatibility.advantages

    @property
    def concerns(self) -> tuple[str, ...]:
        """懸念点."""
        return self.compatibility.concerns
