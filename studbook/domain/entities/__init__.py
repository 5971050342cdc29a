"""エンティティモジュール."""
from .breeding_attempt import BreedingAttempt
from .retired_horse import BreedingRecord, RetiredHorse
from .stable import Stable, StablePreferences, StableStatistics

__all__ = [
    "BreedingAttempt",
    "BreedingRecord",
    "RetiredHorse",
    "Stable",
    "StablePreferences",
    "StableStatistics",
]
