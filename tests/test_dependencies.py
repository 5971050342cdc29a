"""依存性注入コンテナのテスト."""
import logging
from unittest.mock import MagicMock, patch

import pytest

from studbook.application.use_cases import (
    BreedNewHorseUseCase,
    CreateFoundationHorseUseCase,
    RetireHorseUseCase,
    StableNotFoundError,
)
from studbook.dependencies import Dependencies, get_retirement_criteria, get_stable_capacity
from studbook.domain.enums import CareerGrade
from studbook.domain.ports.stable_repository import StableRepository
from studbook.infrastructure import InMemoryStableRepository, StaticBreedRegistry


@pytest.fixture(autouse=True)
def reset_dependencies():
    Dependencies.reset()
    yield
    Dependencies.reset()


class TestSettings:
    """環境変数による設定のテスト."""

    def test_未設定なら既定値(self):
        with patch.dict("os.environ", {}, clear=True):
            assert get_stable_capacity() == 20
            criteria = get_retirement_criteria()
        assert criteria.min_grade == CareerGrade.D
        assert criteria.min_races == 3

    def test_環境変数で上書きできる(self):
        env = {"STABLE_CAPACITY": "12", "RETIREMENT_MIN_GRADE": "b", "RETIREMENT_MIN_RACES": "5"}
        with patch.dict("os.environ", env, clear=True):
            assert get_stable_capacity() == 12
            criteria = get_retirement_criteria()
        assert criteria.min_grade == CareerGrade.B
        assert criteria.min_races == 5

    def test_不正な値は警告して既定値(self, caplog):
        env = {"STABLE_CAPACITY": "0", "RETIREMENT_MIN_GRADE": "Z", "RETIREMENT_MIN_RACES": "many"}
        with patch.dict("os.environ", env, clear=True), caplog.at_level(logging.WARNING):
            assert get_stable_capacity() == 20
            criteria = get_retirement_criteria()
        assert criteria.min_grade == CareerGrade.D
        assert criteria.min_races == 3
        assert "STABLE_CAPACITY" in caplog.text
        assert "RETIREMENT_MIN_GRADE" in caplog.text


class TestDependencies:
    """Dependenciesのテスト."""

    def test_既定はインメモリ実装(self):
        with patch.dict("os.environ", {}, clear=True):
            repository = Dependencies.get_stable_repository()
        assert isinstance(repository, InMemoryStableRepository)
        assert Dependencies.get_stable_repository() is repository
        assert isinstance(Dependencies.get_breed_registry(), StaticBreedRegistry)

    def test_未知のリポジトリ種別は警告してインメモリ(self, caplog):
        with patch.dict("os.environ", {"STABLE_REPOSITORY": "dynamodb"}), caplog.at_level(logging.WARNING):
            repository = Dependencies.get_stable_repository()
        assert isinstance(repository, InMemoryStableRepository)
        assert "dynamodb" in caplog.text

    def test_リポジトリを差し替えられる(self):
        repository = MagicMock(spec=StableRepository)
        repository.find_by_slot.return_value = None
        Dependencies.set_stable_repository(repository)

        with pytest.raises(StableNotFoundError):
            Dependencies.retire_horse_use_case().execute("slot-1", MagicMock(), MagicMock())

        repository.find_by_slot.assert_called_once_with("slot-1")

    def test_ユースケースを組み立てる(self):
        assert isinstance(Dependencies.retire_horse_use_case(), RetireHorseUseCase)
        assert isinstance(Dependencies.breed_new_horse_use_case(), BreedNewHorseUseCase)
        assert isinstance(Dependencies.create_foundation_horse_use_case(), CreateFoundationHorseUseCase)

    def test_厩舎オープンに設定が反映される(self):
        with patch.dict("os.environ", {"STABLE_CAPACITY": "4"}):
            stable = Dependencies.open_stable_use_case().execute("slot-1")
        assert stable.capacity == 4
        assert Dependencies.get_stable_repository().find_by_slot("slot-1") is not None

    def test_リセットで作り直される(self):
        registry = Dependencies.get_breed_registry()
        Dependencies.reset()
        assert Dependencies.get_breed_registry() is not registry
