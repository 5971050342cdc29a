"""NewHorseのテスト."""
import random

import pytest

from studbook.domain.enums import Gender
from studbook.domain.services import StatGenerator
from studbook.domain.value_objects import NewHorse, Pedigree
from studbook.infrastructure.providers import StaticBreedRegistry


def _make_new_horse(name="Dawn Runner"):
    breed = StaticBreedRegistry().get_breed("Thoroughbred")
    generation = StatGenerator(random.Random(5)).generate_stats(breed)
    return NewHorse(
        name=name,
        gender=Gender.FILLY,
        breed=breed.name,
        specialization="Miler",
        racing_style="Stalker",
        stats=generation.stats,
        attributes=generation.attributes,
        pedigree=Pedigree.create_foundation(),
        report=generation.report,
    )


class TestNewHorse:
    """NewHorseのテスト."""

    def test_名前は必須(self):
        with pytest.raises(ValueError):
            _make_new_horse(name=" ")

    def test_引退申請馬に変換する(self):
        horse = _make_new_horse()

        retiring = horse.to_retiring_horse(bond=40)

        assert retiring.name == "Dawn Runner"
        assert retiring.gender == "filly"
        assert retiring.stats == horse.stats
        assert retiring.bond == 40
        assert retiring.pedigree is horse.pedigree

    def test_現役後の能力値で引退申請できる(self):
        horse = _make_new_horse()

        retiring = horse.to_retiring_horse(stats=horse.stats.add(speed=10))

        assert retiring.stats.speed == horse.stats.speed + 10

    def test_辞書に変換する(self):
        data = _make_new_horse().to_dict()

        assert data["gender"] == "filly"
        assert data["generation"]["type"] == "foundation"
        assert set(data["stats"]) == {"speed", "stamina", "power"}
