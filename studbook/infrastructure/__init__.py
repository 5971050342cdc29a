"""インフラストラクチャ層モジュール."""
from .providers import StandardGenderMaturity, StaticBreedProfile, StaticBreedRegistry
from .repositories import InMemoryStableRepository

__all__ = [
    "InMemoryStableRepository",
    "StandardGenderMaturity",
    "StaticBreedProfile",
    "StaticBreedRegistry",
]
