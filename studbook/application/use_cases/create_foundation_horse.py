"""基礎馬作成ユースケース."""
from __future__ import annotations

import logging
import random
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from studbook.domain.enums import Gender, GenerationType
from studbook.domain.ports.breed_profile import BreedRegistry
from studbook.domain.services import StatGenerator, derive_racing_style, derive_specialization
from studbook.domain.value_objects import Customization, NewHorse, Pedigree

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateHorseResult:
    """基礎馬作成結果."""

    success: bool
    horse: NewHorse | None = None
    reason: str | None = None
    message: str | None = None


class CreateFoundationHorseUseCase:
    """両親を持たない基礎馬を作成するユースケース.

    カスタマイズが指定された場合は好みに寄せた能力値で作成する。
    """

    def __init__(
        self,
        breed_registry: BreedRegistry,
        stat_generator: StatGenerator | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """初期化."""
        self._breed_registry = breed_registry
        self._rng = rng if rng is not None else random.Random()
        self._stat_generator = stat_generator or StatGenerator(self._rng)

    def execute(
        self,
        name: str,
        breed_name: str | None = None,
        customization: Customization | Mapping[str, Any] | None = None,
    ) -> CreateHorseResult:
        """基礎馬を作成する.

        Args:
            name: 馬名
            breed_name: 品種名（省略時は登録品種からランダム）
            customization: 馬場・距離・戦法の好み

        Returns:
            作成結果（品種が未登録の場合は success=False）

        Raises:
            ValueError: カスタマイズの内容が不正な場合
        """
        if not name or not name.strip():
            return CreateHorseResult(success=False, reason="Horse name is required")

        customization = Customization.coerce(customization)
        if customization is not None and customization.is_empty:
            customization = None

        if breed_name is None:
            names = self._breed_registry.breed_names()
            if not names:
                return CreateHorseResult(success=False, reason="No breeds registered")
            breed_name = self._rng.choice(names)

        breed = self._breed_registry.get_breed(breed_name)
        if breed is None:
            return CreateHorseResult(success=False, reason=f"Unknown breed: {breed_name}")

        generation_type = GenerationType.CUSTOMIZED if customization is not None else GenerationType.FOUNDATION
        generation = self._stat_generator.generate_stats(
            breed, customization=customization, generation_type=generation_type
        )
        logger.debug("Generated %s base pattern for %s", generation.report.pattern.value, name)

        horse = NewHorse(
            name=name,
            gender=self._rng.choice((Gender.COLT, Gender.FILLY)),
            breed=breed.name,
            specialization=derive_specialization(customization, generation.stats),
            racing_style=derive_racing_style(customization, generation.stats),
            stats=generation.stats,
            attributes=generation.attributes,
            pedigree=Pedigree.create_foundation(),
            report=generation.report,
        )
        logger.info("Created %s horse %s (%s)", generation_type.value, name, breed.name)
        return CreateHorseResult(
            success=True, horse=horse, message=f"{name} created as a {generation_type.value} {breed.name}"
        )
