"""プレイヤーカスタマイズ項目の列挙型."""
from enum import Enum


class TrackType(str, Enum):
    """得意な馬場."""

    TURF = "turf"
    DIRT = "dirt"


class DistancePreference(str, Enum):
    """得意な距離."""

    SPRINT = "sprint"
    MILE = "mile"
    MEDIUM = "medium"
    LONG = "long"


class RacingStrategy(str, Enum):
    """得意な戦法."""

    FRONT = "front"  # 逃げ・先行
    PACE = "pace"  # 平均ペース
    LATE = "late"  # 差し・追込
