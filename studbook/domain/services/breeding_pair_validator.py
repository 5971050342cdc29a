"""配合ペアの検証サービス."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .breeding_compatibility import BreedingCompatibilityService

if TYPE_CHECKING:
    from ..entities import RetiredHorse, Stable

MAX_POTENTIAL_INBREEDING = 0.4


@dataclass(frozen=True)
class PairValidation:
    """配合ペアの検証結果."""

    valid: bool
    reason: str | None = None
    sire: RetiredHorse | None = None
    dam: RetiredHorse | None = None

    @classmethod
    def ok(cls, sire: RetiredHorse, dam: RetiredHorse) -> PairValidation:
        """有効なペア."""
        return cls(valid=True, sire=sire, dam=dam)

    @classmethod
    def invalid(cls, reason: str) -> PairValidation:
        """無効なペア."""
        return cls(valid=False, reason=reason)


class BreedingPairValidator:
    """厩舎に在籍する種牡馬と繁殖牝馬の組み合わせを検証する."""

    def __init__(
        self,
        compatibility_service: BreedingCompatibilityService | None = None,
        max_inbreeding: float = MAX_POTENTIAL_INBREEDING,
    ) -> None:
        """初期化."""
        self._compatibility_service = compatibility_service or BreedingCompatibilityService()
        self._max_inbreeding = max_inbreeding

    def validate(self, stable: Stable, sire_name: str | None, dam_name: str | None) -> PairValidation:
        """配合可能なペアかどうかを検証する."""
        if not sire_name or not dam_name:
            return PairValidation.invalid("Both sire and dam must be selected")

        if sire_name == dam_name:
            return PairValidation.invalid("Cannot breed a horse with itself")

        sire = stable.stallions.get(sire_name)
        if sire is None:
            return PairValidation.invalid(f"Sire {sire_name} not found in stable")

        dam = stable.mares.get(dam_name)
        if dam is None:
            return PairValidation.invalid(f"Dam {dam_name} not found in stable")

        if self._compatibility_service.calculate_potential_inbreeding(sire, dam) > self._max_inbreeding:
            return PairValidation.invalid("Excessive inbreeding - choose different parents")

        return PairValidation.ok(sire, dam)
