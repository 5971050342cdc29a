"""ドメイン層モジュール."""
from .enums import CareerGrade, Gender, GenerationType, StatPattern
from .value_objects import (
    CareerStats,
    Customization,
    HorseStats,
    InvalidStatInputError,
    ParentRecord,
    Pedigree,
    RetiringHorse,
)
from .ports import BreedProfile, BreedRegistry, GenderMaturityMapping, StableRepository
from .services import BreedingCompatibilityService, StatGenerator
from .entities import RetiredHorse, Stable

__all__ = [
    "BreedProfile",
    "BreedRegistry",
    "BreedingCompatibilityService",
    "CareerGrade",
    "CareerStats",
    "Customization",
    "Gender",
    "GenderMaturityMapping",
    "GenerationType",
    "HorseStats",
    "InvalidStatInputError",
    "ParentRecord",
    "Pedigree",
    "RetiredHorse",
    "RetiringHorse",
    "Stable",
    "StableRepository",
    "StatGenerator",
    "StatPattern",
]
