"""ドメインサービスモジュール."""
from .base_stat_patterns import choose_pattern, synthesize_base_stats
from .breeding_compatibility import BreedingCompatibilityService
from .breeding_pair_validator import BreedingPairValidator, PairValidation
from .offspring_inheritance import (
    RACING_STYLES,
    SPECIALIZATIONS,
    OffspringInheritance,
    derive_racing_style,
    derive_specialization,
    suggest_racing_style,
    suggest_specialization,
)
from .stat_generator import StatGenerator

__all__ = [
    "BreedingCompatibilityService",
    "BreedingPairValidator",
    "OffspringInheritance",
    "PairValidation",
    "RACING_STYLES",
    "SPECIALIZATIONS",
    "StatGenerator",
    "choose_pattern",
    "derive_racing_style",
    "derive_specialization",
    "suggest_racing_style",
    "suggest_specialization",
    "synthesize_base_stats",
]
