"""列挙型モジュール."""
from .breeding_type import BreedingType
from .career_grade import CareerGrade
from .customization import DistancePreference, RacingStrategy, TrackType
from .gender import Gender
from .generation_type import GenerationType
from .heritage_weight import HeritageWeight
from .stat_name import StatName
from .stat_pattern import StatPattern

__all__ = [
    "BreedingType",
    "CareerGrade",
    "DistancePreference",
    "Gender",
    "GenerationType",
    "HeritageWeight",
    "RacingStrategy",
    "StatName",
    "StatPattern",
    "TrackType",
]
