"""引退馬エンティティのテスト."""
from studbook.domain.entities import BreedingRecord, RetiredHorse
from studbook.domain.enums import CareerGrade, Gender
from studbook.domain.value_objects import HorseStats, Pedigree


def _make_retired_horse(**overrides):
    values = {
        "name": "Silver Arrow",
        "original_gender": "colt",
        "mature_gender": Gender.STALLION,
        "breed": "Thoroughbred",
        "specialization": "Miler",
        "racing_style": "Stalker",
        "stats": HorseStats(70, 65, 60),
        "career_grade": CareerGrade.A,
        "total_races": 10,
        "races_won": 6,
        "win_rate": 60,
        "achievements": ("Derby",),
    }
    values.update(overrides)
    return RetiredHorse(**values)


class TestRetiredHorse:
    """RetiredHorseエンティティのテスト."""

    def test_人気度はグレード値と勝率から決まる(self):
        horse = _make_retired_horse()
        assert horse.breeding_desirability == 5 + 6.0

    def test_グレード不明は1として扱う(self):
        assert _make_retired_horse(career_grade=None).grade_value == 1

    def test_基礎馬の厩舎内世代は1(self):
        horse = _make_retired_horse()
        assert horse.is_foundation
        assert RetiredHorse.calculate_stable_generation(horse.pedigree) == 1

    def test_配合馬の厩舎内世代は血統の世代数プラス1(self):
        pedigree = Pedigree.from_parents({"name": "Sire"}, {"name": "Dam"})
        assert RetiredHorse.calculate_stable_generation(pedigree) == 2

    def test_親馬レコードに変換できる(self):
        record = _make_retired_horse().to_parent_record()
        assert record.name == "Silver Arrow"
        assert record.gender == "stallion"
        assert record.career_grade == CareerGrade.A
        assert record.pedigree.foundation_lines == ("Foundation Stock",)

    def test_保存して復元できる(self):
        horse = _make_retired_horse()
        horse.breeding_record.add_offspring("Little Arrow")
        restored = RetiredHorse.from_dict(horse.to_dict())
        assert restored == horse


class TestBreedingRecord:
    """BreedingRecordのテスト."""

    def test_産駒を追加すると使用回数が増える(self):
        record = BreedingRecord()
        record.add_offspring("Foal One")
        record.add_offspring("Foal Two")
        assert record.times_used == 2
        assert record.offspring == ["Foal One", "Foal Two"]

    def test_空の辞書からは既定値(self):
        assert BreedingRecord.from_dict(None) == BreedingRecord()
