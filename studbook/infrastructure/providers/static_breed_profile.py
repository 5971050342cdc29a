"""設定表から作る品種情報."""
from __future__ import annotations

from collections.abc import Mapping

from studbook.domain.ports.breed_profile import BreedProfile
from studbook.domain.value_objects import STAT_NAMES, HorseStats

SURFACES = ("turf", "dirt")

DEFAULT_STAT_CAP = 100
DEFAULT_GROWTH_RATE = 1.0
DEFAULT_SURFACE_PREFERENCE = 1.0


def _validated(
    breed: str, kind: str, keys: tuple[str, ...], values: Mapping[str, float] | None, default: float
) -> dict[str, float]:
    table = dict(values) if values is not None else {key: default for key in keys}
    for key in keys:
        value = table.get(key)
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
            raise ValueError(f"Invalid {kind} for {key} in breed {breed}")
    return table


class StaticBreedProfile(BreedProfile):
    """能力値上限・成長率・馬場適性の表を持つ品種."""

    def __init__(
        self,
        name: str,
        stat_caps: Mapping[str, float] | None = None,
        growth_rates: Mapping[str, float] | None = None,
        surface_preferences: Mapping[str, float] | None = None,
        description: str = "",
        strengths: tuple[str, ...] = (),
    ) -> None:
        """初期化.

        Raises:
            ValueError: 表の値が欠けているか正の数でない場合
        """
        if not name:
            raise ValueError("Breed name cannot be empty")
        self._name = name
        self._stat_caps = _validated(name, "stat cap", STAT_NAMES, stat_caps, DEFAULT_STAT_CAP)
        self._growth_rates = _validated(name, "growth rate", STAT_NAMES, growth_rates, DEFAULT_GROWTH_RATE)
        self._surface_preferences = _validated(
            name, "surface preference", SURFACES, surface_preferences, DEFAULT_SURFACE_PREFERENCE
        )
        self.description = description or f"A {name} horse"
        self.strengths = tuple(strengths)

    @property
    def name(self) -> str:
        """品種名."""
        return self._name

    def get_growth_rate(self, stat_name: str) -> float:
        """能力値の成長率."""
        return self._growth_rates.get(stat_name, DEFAULT_GROWTH_RATE)

    def get_stat_cap(self, stat_name: str) -> float:
        """能力値の上限."""
        return self._stat_caps.get(stat_name, DEFAULT_STAT_CAP)

    def enforce_stat_caps(self, stats: HorseStats) -> HorseStats:
        """上限を超えた能力値を上限に揃える."""
        return stats.map(lambda name, value: min(value, self.get_stat_cap(name)))

    def get_surface_preference(self, surface: str) -> float:
        """馬場適性."""
        return self._surface_preferences.get(surface.lower(), DEFAULT_SURFACE_PREFERENCE)

    def __repr__(self) -> str:
        return f"StaticBreedProfile({self._name!r})"
