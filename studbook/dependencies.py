"""依存性注入コンテナ."""
import logging
import os

from studbook.application.use_cases import (
    BreedNewHorseUseCase,
    CreateFoundationHorseUseCase,
    GetAvailableBreedingStockUseCase,
    GetBreedingRecommendationsUseCase,
    OpenStableUseCase,
    RetireHorseUseCase,
)
from studbook.domain.enums import CareerGrade
from studbook.domain.ports import BreedRegistry, GenderMaturityMapping, StableRepository
from studbook.domain.services import StatGenerator
from studbook.domain.value_objects import RetirementCriteria
from studbook.infrastructure import (
    InMemoryStableRepository,
    StandardGenderMaturity,
    StaticBreedRegistry,
)

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 20
DEFAULT_MIN_RACES = 3


def _int_env(name: str, default: int, minimum: int) -> int:
    """整数の環境変数を読む（不正値は警告して既定値）."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid %s=%s, falling back to %s", name, raw, default)
        return default
    if value < minimum:
        logger.warning("Invalid %s=%s, falling back to %s", name, raw, default)
        return default
    return value


def get_stable_capacity() -> int:
    """厩舎の収容頭数（STABLE_CAPACITY）."""
    return _int_env("STABLE_CAPACITY", DEFAULT_CAPACITY, minimum=1)


def get_retirement_criteria() -> RetirementCriteria:
    """引退受け入れ条件（RETIREMENT_MIN_GRADE / RETIREMENT_MIN_RACES）."""
    default = RetirementCriteria()
    raw_grade = os.environ.get("RETIREMENT_MIN_GRADE")
    min_grade = default.min_grade
    if raw_grade is not None:
        parsed = CareerGrade.parse(raw_grade)
        if parsed is None:
            logger.warning("Unknown RETIREMENT_MIN_GRADE=%s, falling back to %s", raw_grade, min_grade.value)
        else:
            min_grade = parsed
    min_races = _int_env("RETIREMENT_MIN_RACES", DEFAULT_MIN_RACES, minimum=0)
    return RetirementCriteria(min_grade=min_grade, min_races=min_races)


class Dependencies:
    """依存性を管理するコンテナ.

    STABLE_REPOSITORY は現在 "memory" のみ対応。未知の値は警告してインメモリ実装を使う。
    """

    _stable_repository: StableRepository | None = None
    _breed_registry: BreedRegistry | None = None
    _gender_maturity: GenderMaturityMapping | None = None
    _stat_generator: StatGenerator | None = None

    @classmethod
    def get_gender_maturity(cls) -> GenderMaturityMapping:
        """性別成熟区分を取得する."""
        if cls._gender_maturity is None:
            cls._gender_maturity = StandardGenderMaturity()
        return cls._gender_maturity

    @classmethod
    def set_gender_maturity(cls, mapping: GenderMaturityMapping) -> None:
        """性別成熟区分を設定する（テスト用）."""
        cls._gender_maturity = mapping

    @classmethod
    def get_stable_repository(cls) -> StableRepository:
        """厩舎リポジトリを取得する."""
        if cls._stable_repository is None:
            repository_type = os.environ.get("STABLE_REPOSITORY", "memory")
            if repository_type != "memory":
                logger.warning("Unknown STABLE_REPOSITORY=%s, falling back to memory", repository_type)
            cls._stable_repository = InMemoryStableRepository(cls.get_gender_maturity())
        return cls._stable_repository

    @classmethod
    def set_stable_repository(cls, repository: StableRepository) -> None:
        """厩舎リポジトリを設定する（テスト用）."""
        cls._stable_repository = repository

    @classmethod
    def get_breed_registry(cls) -> BreedRegistry:
        """品種レジストリを取得する."""
        if cls._breed_registry is None:
            cls._breed_registry = StaticBreedRegistry()
        return cls._breed_registry

    @classmethod
    def set_breed_registry(cls, registry: BreedRegistry) -> None:
        """品種レジストリを設定する（テスト用）."""
        cls._breed_registry = registry

    @classmethod
    def get_stat_generator(cls) -> StatGenerator:
        """能力値生成サービスを取得する."""
        if cls._stat_generator is None:
            cls._stat_generator = StatGenerator()
        return cls._stat_generator

    @classmethod
    def set_stat_generator(cls, generator: StatGenerator) -> None:
        """能力値生成サービスを設定する（テスト用）."""
        cls._stat_generator = generator

    @classmethod
    def open_stable_use_case(cls) -> OpenStableUseCase:
        """厩舎オープンユースケースを組み立てる."""
        return OpenStableUseCase(
            cls.get_stable_repository(),
            cls.get_gender_maturity(),
            capacity=get_stable_capacity(),
            retirement_criteria=get_retirement_criteria(),
        )

    @classmethod
    def retire_horse_use_case(cls) -> RetireHorseUseCase:
        """引退ユースケースを組み立てる."""
        return RetireHorseUseCase(cls.get_stable_repository())

    @classmethod
    def available_breeding_stock_use_case(cls) -> GetAvailableBreedingStockUseCase:
        """繁殖馬一覧取得ユースケースを組み立てる."""
        return GetAvailableBreedingStockUseCase(cls.get_stable_repository())

    @classmethod
    def breeding_recommendations_use_case(cls) -> GetBreedingRecommendationsUseCase:
        """配合候補取得ユースケースを組み立てる."""
        return GetBreedingRecommendationsUseCase(cls.get_stable_repository())

    @classmethod
    def breed_new_horse_use_case(cls) -> BreedNewHorseUseCase:
        """配合ユースケースを組み立てる."""
        return BreedNewHorseUseCase(
            cls.get_stable_repository(),
            cls.get_breed_registry(),
            stat_generator=cls.get_stat_generator(),
        )

    @classmethod
    def create_foundation_horse_use_case(cls) -> CreateFoundationHorseUseCase:
        """基礎馬作成ユースケースを組み立てる."""
        return CreateFoundationHorseUseCase(cls.get_breed_registry(), stat_generator=cls.get_stat_generator())

    @classmethod
    def reset(cls) -> None:
        """全ての依存性をリセットする（テスト用）."""
        cls._stable_repository = None
        cls._breed_registry = None
        cls._gender_maturity = None
        cls._stat_generator = None
