"""配合種別の列挙型."""
from enum import Enum


class BreedingType(str, Enum):
    """同一品種同士か異品種交配か."""

    PUREBRED = "purebred"
    CROSSBRED = "crossbred"

    @classmethod
    def classify(cls, breed1: str, breed2: str) -> "BreedingType":
        """2頭の品種から配合種別を判定する."""
        return cls.PUREBRED if breed1 == breed2 else cls.CROSSBRED
