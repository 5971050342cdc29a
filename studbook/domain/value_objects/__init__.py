"""値オブジェクトモジュール."""
from .breeding_filters import BreedingFilters
from .breeding_recommendation import BreedingRecommendation
from .career_stats import CareerStats
from .compatibility_analysis import CompatibilityAnalysis, ExpectedOutcome
from .compressed_pedigree import CompressedPedigree
from .customization import Customization
from .generation_report import GenerationReport, StatGenerationResult
from .horse_stats import STAT_NAMES, HorseStats, InvalidStatInputError, round_half_up
from .new_horse import NewHorse
from .operation_results import BreedingResult, RetirementResult
from .parent_record import ParentRecord
from .pedigree import Pedigree
from .retirement_criteria import RetirementCriteria
from .retiring_horse import RetiringHorse
from .secondary_attributes import SecondaryAttributes

__all__ = [
    "BreedingFilters",
    "BreedingRecommendation",
    "BreedingResult",
    "CareerStats",
    "CompatibilityAnalysis",
    "CompressedPedigree",
    "Customization",
    "ExpectedOutcome",
    "GenerationReport",
    "HorseStats",
    "InvalidStatInputError",
    "NewHorse",
    "ParentRecord",
    "Pedigree",
    "RetirementCriteria",
    "RetirementResult",
    "RetiringHorse",
    "STAT_NAMES",
    "SecondaryAttributes",
    "StatGenerationResult",
    "round_half_up",
]
