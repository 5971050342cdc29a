"""品種プロバイダのテスト."""
import logging

import pytest

from studbook.domain.enums import Gender
from studbook.domain.value_objects import HorseStats
from studbook.infrastructure.providers import (
    StandardGenderMaturity,
    StaticBreedProfile,
    StaticBreedRegistry,
)


class TestStaticBreedProfile:
    """StaticBreedProfileのテスト."""

    def test_表を省略すると標準値(self):
        profile = StaticBreedProfile("Pony")
        assert profile.get_stat_cap("speed") == 100
        assert profile.get_growth_rate("power") == 1.0
        assert profile.get_surface_preference("Turf") == 1.0
        assert profile.description == "A Pony horse"

    def test_上限を超えた能力値を切り詰める(self):
        profile = StaticBreedProfile("Pony", stat_caps={"speed": 80, "stamina": 90, "power": 70})
        assert profile.enforce_stat_caps(HorseStats(95, 50, 75)) == HorseStats(80, 50, 70)

    @pytest.mark.parametrize(
        "overrides",
        [
            {"stat_caps": {"speed": 100, "stamina": 0, "power": 100}},
            {"growth_rates": {"speed": 1.0, "stamina": 1.0}},
            {"surface_preferences": {"turf": 1.0, "dirt": "fast"}},
        ],
    )
    def test_不正な表はエラー(self, overrides):
        with pytest.raises(ValueError):
            StaticBreedProfile("Broken", **overrides)

    def test_名前は必須(self):
        with pytest.raises(ValueError):
            StaticBreedProfile("")


class TestStaticBreedRegistry:
    """StaticBreedRegistryのテスト."""

    def test_標準の3品種(self):
        registry = StaticBreedRegistry()
        assert registry.breed_names() == ["Thoroughbred", "Arabian", "Quarter Horse"]
        assert registry.get_breed("Arabian").get_stat_cap("stamina") == 110

    def test_未登録の品種は警告してNone(self, caplog):
        registry = StaticBreedRegistry()
        with caplog.at_level(logging.WARNING):
            assert registry.get_breed("Unicorn") is None
        assert "Unicorn" in caplog.text

    def test_品種を差し替えられる(self):
        registry = StaticBreedRegistry([StaticBreedProfile("Pony")])
        assert registry.breed_names() == ["Pony"]


class TestStandardGenderMaturity:
    """StandardGenderMaturityのテスト."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("colt", Gender.STALLION),
            ("Filly", Gender.MARE),
            ("stallion", Gender.STALLION),
            ("mare", Gender.MARE),
        ],
    )
    def test_繁殖区分に変換する(self, raw, expected):
        assert StandardGenderMaturity().mature_gender_of(raw) == expected

    def test_未知の性別はエラー(self):
        with pytest.raises(ValueError, match="gelding"):
            StandardGenderMaturity().mature_gender_of("gelding")
