"""ユースケースモジュール."""
from .breed_new_horse import BreedNewHorseResult, BreedNewHorseUseCase
from .create_foundation_horse import CreateFoundationHorseUseCase, CreateHorseResult
from .get_available_breeding_stock import (
    GetAvailableBreedingStockResult,
    GetAvailableBreedingStockUseCase,
)
from .get_breeding_recommendations import (
    GetBreedingRecommendationsResult,
    GetBreedingRecommendationsUseCase,
    HorseNotFoundError,
)
from .open_stable import OpenStableUseCase, StableNotFoundError
from .retire_horse import RetireHorseUseCase

__all__ = [
    "BreedNewHorseResult",
    "BreedNewHorseUseCase",
    "CreateFoundationHorseUseCase",
    "CreateHorseResult",
    "GetAvailableBreedingStockResult",
    "GetAvailableBreedingStockUseCase",
    "GetBreedingRecommendationsResult",
    "GetBreedingRecommendationsUseCase",
    "HorseNotFoundError",
    "OpenStableUseCase",
    "RetireHorseUseCase",
    "StableNotFoundError",
]
