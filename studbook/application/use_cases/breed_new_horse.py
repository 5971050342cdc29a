"""配合ユースケース."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from studbook.domain.enums import GenerationType
from studbook.domain.ports.breed_profile import BreedRegistry
from studbook.domain.ports.stable_repository import StableRepository
from studbook.domain.services import BreedingPairValidator, OffspringInheritance, StatGenerator
from studbook.domain.value_objects import NewHorse, Pedigree

from .open_stable import load_stable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BreedNewHorseResult:
    """配合結果."""

    success: bool
    horse: NewHorse | None = None
    reason: str | None = None
    message: str | None = None

    @classmethod
    def rejected(cls, reason: str) -> BreedNewHorseResult:
        """配合できなかった場合の結果."""
        return cls(success=False, reason=reason)


class BreedNewHorseUseCase:
    """厩舎の種牡馬と繁殖牝馬から仔馬を誕生させるユースケース."""

    def __init__(
        self,
        stable_repository: StableRepository,
        breed_registry: BreedRegistry,
        stat_generator: StatGenerator | None = None,
        inheritance: OffspringInheritance | None = None,
        pair_validator: BreedingPairValidator | None = None,
    ) -> None:
        """初期化."""
        self._stable_repository = stable_repository
        self._breed_registry = breed_registry
        self._stat_generator = stat_generator or StatGenerator()
        self._inheritance = inheritance or OffspringInheritance()
        self._pair_validator = pair_validator or BreedingPairValidator()

    def execute(self, slot: str, sire_name: str, dam_name: str, foal_name: str) -> BreedNewHorseResult:
        """仔馬を誕生させる.

        Args:
            slot: セーブスロット
            sire_name: 種牡馬名
            dam_name: 繁殖牝馬名
            foal_name: 仔馬の名前

        Returns:
            配合結果（ペアが不正な場合などは success=False）

        Raises:
            StableNotFoundError: 厩舎が存在しない場合
        """
        if not foal_name or not foal_name.strip():
            return BreedNewHorseResult.rejected("Foal name is required")

        stable = load_stable(self._stable_repository, slot)
        validation = self._pair_validator.validate(stable, sire_name, dam_name)
        if not validation.valid:
            logger.info("Breeding %s x %s rejected: %s", sire_name, dam_name, validation.reason)
            return BreedNewHorseResult.rejected(validation.reason)
        sire, dam = validation.sire, validation.dam

        breed_name = self._inheritance.determine_offspring_breed(sire, dam)
        breed = self._breed_registry.get_breed(breed_name)
        if breed is None:
            return BreedNewHorseResult.rejected(f"Unknown breed: {breed_name}")

        pedigree = Pedigree.from_parents(sire, dam)
        generation = self._stat_generator.generate_stats(
            breed, pedigree=pedigree, generation_type=GenerationType.BRED
        )
        logger.debug("Generated %s base pattern for %s", generation.report.pattern.value, foal_name)

        breeding = stable.record_breeding(sire, dam, foal_name)
        if not breeding.success:
            return BreedNewHorseResult.rejected(breeding.reason)

        foal = NewHorse(
            name=foal_name,
            gender=self._inheritance.random_racing_gender(),
            breed=breed.name,
            specialization=self._inheritance.inherit_specialization(sire, dam, generation.stats),
            racing_style=self._inheritance.inherit_racing_style(sire, dam, generation.stats),
            stats=generation.stats,
            attributes=generation.attributes,
            pedigree=pedigree,
            report=generation.report,
        )
        self._stable_repository.save(slot, stable)

        logger.info("Bred %s from %s x %s in slot %s", foal_name, sire.name, dam.name, slot)
        return BreedNewHorseResult(
            success=True, horse=foal, message=f"{foal_name} bred from {sire.name} x {dam.name}"
        )
