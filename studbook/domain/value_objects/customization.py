"""プレイヤーカスタマイズの値オブジェクト."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ..enums import DistancePreference, RacingStrategy, TrackType

_KEYS = {"track_type", "distance", "strategy"}


@dataclass(frozen=True)
class Customization:
    """馬場・距離・戦法の好み（いずれも任意）."""

    track_type: TrackType | None = None
    distance: DistancePreference | None = None
    strategy: RacingStrategy | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Customization:
        """辞書から生成する（未知のキー・値はエラー）."""
        unknown = set(data) - _KEYS
        if unknown:
            raise ValueError(f"Unknown customization keys: {', '.join(sorted(unknown))}")
        track_type = data.get("track_type")
        distance = data.get("distance")
        strategy = data.get("strategy")
        return cls(
            track_type=TrackType(track_type) if track_type else None,
            distance=DistancePreference(distance) if distance else None,
            strategy=RacingStrategy(strategy) if strategy else None,
        )

    @classmethod
    def coerce(cls, value: Customization | Mapping[str, Any] | None) -> Customization | None:
        """Customizationまたは辞書をCustomizationに揃える."""
        if value is None or isinstance(value, Customization):
            return value
        if isinstance(value, Mapping):
            return cls.from_dict(value)
        raise TypeError(f"customization must be a mapping, got {type(value).__name__}")

    @property
    def is_empty(self) -> bool:
        """何も選択されていないかどうか."""
        return self.track_type is None and self.distance is None and self.strategy is None

    def describe(self) -> str:
        """選択内容の要約."""
        preferences = []
        if self.track_type is not None:
            preferences.append(f"{self.track_type.value} track")
        if self.distance is not None:
            preferences.append(f"{self.distance.value} distance")
        if self.strategy is not None:
            preferences.append(f"{self.strategy.value} running")
        if not preferences:
            return "None"
        return f"Customized for {', '.join(preferences)}"

    def to_dict(self) -> dict:
        """辞書に変換する."""
        return {
            "track_type": self.track_type.value if self.track_type else None,
            "distance": self.distance.value if self.distance else None,
            "strategy": self.strategy.value if self.strategy else None,
        }
