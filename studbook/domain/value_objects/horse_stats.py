"""能力値の値オブジェクト."""
from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from numbers import Real
from typing import Any, Callable

from ..enums import StatName

STAT_NAMES: tuple[str, ...] = tuple(s.value for s in StatName)


class InvalidStatInputError(ValueError):
    """能力値の入力が不正なエラー."""

    pass


def round_half_up(value: float) -> int:
    """四捨五入する（.5は常に正の方向へ）."""
    return math.floor(value + 0.5)


def _require_number(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidStatInputError(f"{name} must be numeric, got {type(value).__name__}")
    if math.isnan(value) or math.isinf(value):
        raise InvalidStatInputError(f"{name} must be a finite number, got {value}")


@dataclass(frozen=True)
class HorseStats:
    """スピード・スタミナ・パワーの3能力値."""

    speed: float
    stamina: float
    power: float

    def __post_init__(self) -> None:
        """バリデーション."""
        for name in STAT_NAMES:
            _require_number(name, getattr(self, name))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> HorseStats:
        """辞書から生成する（欠けた能力値はエラー）."""
        if data is None:
            raise InvalidStatInputError("stats must not be None")
        if not isinstance(data, Mapping):
            raise InvalidStatInputError(f"stats must be a mapping, got {type(data).__name__}")
        missing = [name for name in STAT_NAMES if data.get(name) is None]
        if missing:
            raise InvalidStatInputError(f"stats is missing: {', '.join(missing)}")
        return cls(speed=data["speed"], stamina=data["stamina"], power=data["power"])

    @classmethod
    def coerce(cls, value: HorseStats | Mapping[str, Any] | None) -> HorseStats:
        """HorseStatsまたは辞書をHorseStatsに揃える."""
        if isinstance(value, HorseStats):
            return value
        return cls.from_dict(value)

    def get(self, stat: StatName | str) -> float:
        """能力値名で値を取得する."""
        key = stat.value if isinstance(stat, StatName) else stat
        if key not in STAT_NAMES:
            raise InvalidStatInputError(f"Unknown stat: {key}")
        return getattr(self, key)

    def map(self, func: Callable[[str, float], float]) -> HorseStats:
        """各能力値に関数を適用した新しいHorseStatsを返す."""
        return HorseStats(**{name: func(name, getattr(self, name)) for name in STAT_NAMES})

    def add(self, speed: float = 0, stamina: float = 0, power: float = 0) -> HorseStats:
        """加算した新しいHorseStatsを返す."""
        return HorseStats(
            speed=self.speed + speed,
            stamina=self.stamina + stamina,
            power=self.power + power,
        )

    def items(self) -> list[tuple[str, float]]:
        """(能力値名, 値) のリスト."""
        return [(name, getattr(self, name)) for name in STAT_NAMES]

    @property
    def total(self) -> float:
        """合計値."""
        return self.speed + self.stamina + self.power

    @property
    def average(self) -> float:
        """平均値."""
        return self.total / 3

    def to_dict(self) -> dict:
        """辞書に変換する."""
        return {
            "speed": self.speed,
            "stamina": self.stamina,
            "power": self.power,
        }
