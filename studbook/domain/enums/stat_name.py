"""能力値名の列挙型."""
from enum import Enum


class StatName(str, Enum):
    """3つの基本能力値."""

    SPEED = "speed"
    STAMINA = "stamina"
    POWER = "power"
