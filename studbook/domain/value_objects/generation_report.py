"""能力値生成レポートの値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from ..enums import GenerationType, StatPattern
from .horse_stats import HorseStats
from .secondary_attributes import SecondaryAttributes


def _tier_of(total: float) -> str:
    if total >= 180:
        return "Elite"
    if total >= 150:
        return "Superior"
    if total >= 120:
        return "Good"
    if total >= 90:
        return "Average"
    return "Below Average"


@dataclass(frozen=True)
class GenerationReport:
    """各段階の能力値と最終評価（診断・UI表示用）."""

    generation_type: GenerationType
    breed: str
    pattern: StatPattern
    base_stats: HorseStats
    breed_stats: HorseStats
    heritage_stats: HorseStats
    customized_stats: HorseStats
    final_stats: HorseStats
    breed_influence: str = ""
    heritage_influence: str = ""
    customization_influence: str = ""
    timestamp: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    @property
    def total_gain(self) -> dict[str, float]:
        """ベースから最終値までの増減."""
        return {
            name: value - self.base_stats.get(name) for name, value in self.final_stats.items()
        }

    @property
    def total_stats(self) -> float:
        """最終能力値の合計."""
        return self.final_stats.total

    @property
    def tier(self) -> str:
        """合計値による評価."""
        return _tier_of(self.final_stats.total)

    @property
    def strengths(self) -> list[str]:
        """50以上の能力値."""
        return [name.capitalize() for name, value in self.final_stats.items() if value >= 50]

    @property
    def weaknesses(self) -> list[str]:
        """30以下の能力値."""
        return [name.capitalize() for name, value in self.final_stats.items() if value <= 30]

    def to_dict(self) -> dict:
        """辞書に変換する."""
        return {
            "type": self.generation_type.value,
            "breed": self.breed,
            "pattern": self.pattern.value,
            "progression": {
                "base": self.base_stats.to_dict(),
                "breed": self.breed_stats.to_dict(),
                "heritage": self.heritage_stats.to_dict(),
                "customized": self.customized_stats.to_dict(),
                "final": self.final_stats.to_dict(),
                "total_gain": self.total_gain,
            },
            "influences": {
                "breed": self.breed_influence,
                "heritage": self.heritage_influence,
                "customization": self.customization_influence,
            },
            "quality": {
                "total_stats": self.total_stats,
                "tier": self.tier,
                "strengths": self.strengths,
                "weaknesses": self.weaknesses,
            },
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True)
class StatGenerationResult:
    """能力値生成の結果."""

    stats: HorseStats
    attributes: SecondaryAttributes
    report: GenerationReport
