"""配合・基礎馬作成ユースケースのテスト."""
import random

import pytest

from studbook.application.use_cases import (
    BreedNewHorseUseCase,
    CreateFoundationHorseUseCase,
    OpenStableUseCase,
    RetireHorseUseCase,
    StableNotFoundError,
)
from studbook.domain.enums import CareerGrade, Gender, GenerationType
from studbook.domain.services import OffspringInheritance, StatGenerator
from studbook.domain.value_objects import CareerStats, Customization, HorseStats, RetiringHorse
from studbook.infrastructure.providers import StandardGenderMaturity, StaticBreedRegistry
from studbook.infrastructure.repositories import InMemoryStableRepository

SLOT = "slot-1"


def _make_stable_with(*horses):
    repository = InMemoryStableRepository(StandardGenderMaturity())
    OpenStableUseCase(repository, StandardGenderMaturity(), capacity=10).execute(SLOT)
    career = CareerStats(final_grade=CareerGrade.A, total_races=10, races_won=6)
    for horse in horses:
        assert RetireHorseUseCase(repository).execute(SLOT, horse, career).success
    return repository


def _make_horse(name, gender, breed="Thoroughbred", stats=None):
    return RetiringHorse(
        name=name,
        gender=gender,
        breed=breed,
        specialization="Miler",
        racing_style="Stalker",
        stats=stats or HorseStats(70, 60, 65),
    )


def _make_breeding_use_case(repository, seed=7):
    return BreedNewHorseUseCase(
        repository,
        StaticBreedRegistry(),
        stat_generator=StatGenerator(random.Random(seed)),
        inheritance=OffspringInheritance(random.Random(seed + 1)),
    )


class TestBreedNewHorseUseCase:
    """BreedNewHorseUseCaseのテスト."""

    def test_仔馬が誕生する(self):
        repository = _make_stable_with(
            _make_horse("Storm King", "colt"), _make_horse("Lady Grace", "filly")
        )

        result = _make_breeding_use_case(repository).execute(SLOT, "Storm King", "Lady Grace", "Little Storm")

        assert result.success is True
        assert result.message == "Little Storm bred from Storm King x Lady Grace"
        foal = result.horse
        assert foal.name == "Little Storm"
        assert foal.breed == "Thoroughbred"
        assert foal.gender in (Gender.COLT, Gender.FILLY)
        assert foal.pedigree.sire.name == "Storm King"
        assert foal.pedigree.dam.name == "Lady Grace"
        assert foal.pedigree.generations == 1
        assert foal.report.generation_type == GenerationType.BRED
        assert all(0 <= value <= 100 for _, value in foal.stats.items())
        assert foal.specialization in ("Sprinter", "Miler", "Stayer")
        assert foal.racing_style in ("Front Runner", "Stalker", "Closer")

    def test_配合記録が保存される(self):
        repository = _make_stable_with(
            _make_horse("Storm King", "colt"), _make_horse("Lady Grace", "filly")
        )

        _make_breeding_use_case(repository).execute(SLOT, "Storm King", "Lady Grace", "Little Storm")

        stable = repository.find_by_slot(SLOT)
        assert [b.offspring for b in stable.breedings] == ["Little Storm"]
        assert stable.stallions["Storm King"].breeding_record.times_used == 1
        assert stable.mares["Lady Grace"].breeding_record.offspring == ["Little Storm"]
        assert stable.statistics.total_offspring == 1

    def test_同じシードなら同じ仔馬(self):
        horses = (_make_horse("Storm King", "colt"), _make_horse("Lady Grace", "filly"))

        first = _make_breeding_use_case(_make_stable_with(*horses), seed=3).execute(
            SLOT, "Storm King", "Lady Grace", "Twin"
        )
        second = _make_breeding_use_case(_make_stable_with(*horses), seed=3).execute(
            SLOT, "Storm King", "Lady Grace", "Twin"
        )

        assert first.horse.stats == second.horse.stats
        assert first.horse.gender == second.horse.gender

    def test_不正なペアは拒否される(self):
        repository = _make_stable_with(
            _make_horse("Storm King", "colt"), _make_horse("Lady Grace", "filly")
        )

        result = _make_breeding_use_case(repository).execute(SLOT, "Lady Grace", "Storm King", "Foal")

        assert result.success is False
        assert result.reason == "Sire Lady Grace not found in stable"
        assert repository.find_by_slot(SLOT).breedings == []

    def test_未登録の品種は拒否される(self):
        repository = _make_stable_with(
            _make_horse("Tiny Tim", "colt", breed="Shetland"),
            _make_horse("Tiny Tess", "filly", breed="Shetland"),
        )

        result = _make_breeding_use_case(repository).execute(SLOT, "Tiny Tim", "Tiny Tess", "Tiny Foal")

        assert result.success is False
        assert result.reason == "Unknown breed: Shetland"
        assert repository.find_by_slot(SLOT).breedings == []

    def test_仔馬の名前は必須(self):
        repository = _make_stable_with(
            _make_horse("Storm King", "colt"), _make_horse("Lady Grace", "filly")
        )

        result = _make_breeding_use_case(repository).execute(SLOT, "Storm King", "Lady Grace", "  ")

        assert result.success is False
        assert result.reason == "Foal name is required"

    def test_厩舎がなければエラー(self):
        repository = InMemoryStableRepository(StandardGenderMaturity())

        with pytest.raises(StableNotFoundError):
            _make_breeding_use_case(repository).execute(SLOT, "Storm King", "Lady Grace", "Foal")


def _make_create_use_case(registry=None, seed=11):
    rng = random.Random(seed)
    return CreateFoundationHorseUseCase(registry or StaticBreedRegistry(), rng=rng)


class TestCreateFoundationHorseUseCase:
    """CreateFoundationHorseUseCaseのテスト."""

    def test_基礎馬を作成する(self):
        result = _make_create_use_case().execute("Dawn Runner", "Arabian")

        assert result.success is True
        assert result.message == "Dawn Runner created as a foundation Arabian"
        horse = result.horse
        assert horse.breed == "Arabian"
        assert horse.pedigree.is_foundation
        assert horse.report.generation_type == GenerationType.FOUNDATION
        assert horse.report.heritage_influence == "None - Foundation horse"
        assert horse.stats.stamina <= 110

    def test_カスタマイズに沿って適性が決まる(self):
        result = _make_create_use_case().execute(
            "Long Shot", "Thoroughbred", {"distance": "long", "strategy": "front"}
        )

        assert result.horse.report.generation_type == GenerationType.CUSTOMIZED
        assert result.horse.specialization == "Stayer"
        assert result.horse.racing_style == "Front Runner"

    def test_空のカスタマイズは基礎馬扱い(self):
        result = _make_create_use_case().execute("Plain", "Thoroughbred", Customization())

        assert result.horse.report.generation_type == GenerationType.FOUNDATION

    def test_不正なカスタマイズはエラー(self):
        with pytest.raises(ValueError):
            _make_create_use_case().execute("Oops", "Thoroughbred", {"surface": "turf"})

    def test_品種省略時は登録品種から選ぶ(self):
        result = _make_create_use_case().execute("Mystery")

        assert result.horse.breed in ("Thoroughbred", "Arabian", "Quarter Horse")

    def test_未登録の品種は失敗(self):
        result = _make_create_use_case().execute("Pony", "Shetland")

        assert result.success is False
        assert result.reason == "Unknown breed: Shetland"

    def test_品種が1つもなければ失敗(self):
        result = _make_create_use_case(StaticBreedRegistry([])).execute("Lonely")

        assert result.success is False
        assert result.reason == "No breeds registered"

    def test_名前は必須(self):
        result = _make_create_use_case().execute("")

        assert result.success is False
        assert result.reason == "Horse name is required"
