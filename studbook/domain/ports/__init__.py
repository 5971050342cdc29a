"""ポートモジュール."""
from .breed_profile import BreedProfile, BreedRegistry
from .gender_maturity_mapping import GenderMaturityMapping
from .stable_repository import StableRepository

__all__ = [
    "BreedProfile",
    "BreedRegistry",
    "GenderMaturityMapping",
    "StableRepository",
]
