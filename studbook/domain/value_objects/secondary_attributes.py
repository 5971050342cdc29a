"""二次属性の値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SecondaryAttributes:
    """最終能力値から導く参考情報（保存はしない）."""

    track_preference: str
    distance_aptitude: str
    racing_style: str
    growth_potential: int
    training_efficiency: dict[str, float] = field(default_factory=dict)
    dominant_trait: str = "speed"
    balance_score: float = 0.0
    heritage_strength: int = 0
    genetic_diversity: float = 1.0

    def to_dict(self) -> dict:
        """辞書に変換する."""
        return {
            "track_preference": self.track_preference,
            "distance_aptitude": self.distance_aptitude,
            "racing_style": self.racing_style,
            "growth_potential": self.growth_potential,
            "training_efficiency": dict(self.training_efficiency),
            "dominant_trait": self.dominant_trait,
            "balance_score": self.balance_score,
            "heritage_strength": self.heritage_strength,
            "genetic_diversity": self.genetic_diversity,
        }
