"""ベース能力値パターンの列挙型."""
from enum import Enum


class StatPattern(str, Enum):
    """ベース能力値の型（個体差の出方）."""

    BALANCED = "balanced"  # 均整型
    SPEED_FOCUS = "speed_focus"  # スピード特化
    STAMINA_FOCUS = "stamina_focus"  # スタミナ特化
    POWER_FOCUS = "power_focus"  # パワー特化
    SPEED_STAMINA = "speed_stamina"  # スピード＋スタミナ
    SPEED_POWER = "speed_power"  # スピード＋パワー
    STAMINA_POWER = "stamina_power"  # スタミナ＋パワー
    POLARIZED = "polarized"  # 長所と短所がはっきりした型
    UNUSUAL = "unusual"  # 型にはまらない組み合わせ
