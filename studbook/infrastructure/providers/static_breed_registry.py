"""静的な品種レジストリ."""
from __future__ import annotations

import logging
from collections.abc import Iterable

from studbook.domain.ports.breed_profile import BreedProfile, BreedRegistry

from .static_breed_profile import StaticBreedProfile

logger = logging.getLogger(__name__)


def default_breeds() -> list[StaticBreedProfile]:
    """標準の3品種."""
    return [
        StaticBreedProfile(
            "Thoroughbred",
            stat_caps={"speed": 100, "stamina": 100, "power": 100},
            growth_rates={"speed": 1.0, "stamina": 1.0, "power": 1.0},
            surface_preferences={"turf": 1.0, "dirt": 1.0},
            description="The classic racing breed. Versatile and balanced with no major weaknesses.",
            strengths=("Balanced development", "Versatile racing ability", "Consistent performance"),
        ),
        StaticBreedProfile(
            "Arabian",
            stat_caps={"speed": 95, "stamina": 110, "power": 95},
            growth_rates={"speed": 0.95, "stamina": 1.25, "power": 0.95},
            surface_preferences={"turf": 1.08, "dirt": 0.96},
            description="Desert-bred endurance specialists with exceptional stamina.",
            strengths=("Exceptional stamina development", "Natural turf track advantage"),
        ),
        StaticBreedProfile(
            "Quarter Horse",
            stat_caps={"speed": 110, "stamina": 90, "power": 105},
            growth_rates={"speed": 1.25, "stamina": 0.85, "power": 1.15},
            surface_preferences={"turf": 0.95, "dirt": 1.08},
            description="American-bred sprint champions with explosive speed and power.",
            strengths=("Explosive sprint speed", "Natural dirt track advantage"),
        ),
    ]


class StaticBreedRegistry(BreedRegistry):
    """起動時に与えた品種情報を名前で引く."""

    def __init__(self, breeds: Iterable[BreedProfile] | None = None) -> None:
        """初期化."""
        profiles = list(breeds) if breeds is not None else default_breeds()
        self._breeds: dict[str, BreedProfile] = {profile.name: profile for profile in profiles}

    def get_breed(self, breed_name: str) -> BreedProfile | None:
        """品種情報を取得する."""
        profile = self._breeds.get(breed_name)
        if profile is None:
            logger.warning("Unknown breed requested: %s", breed_name)
        return profile

    def breed_names(self) -> list[str]:
        """登録済みの品種名."""
        return list(self._breeds)
