"""プロバイダモジュール."""
from .standard_gender_maturity import StandardGenderMaturity
from .static_breed_profile import StaticBreedProfile
from .static_breed_registry import StaticBreedRegistry, default_breeds

__all__ = [
    "StandardGenderMaturity",
    "StaticBreedProfile",
    "StaticBreedRegistry",
    "default_breeds",
]
