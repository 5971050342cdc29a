"""親馬レコードのテスト."""
from studbook.domain.enums import CareerGrade
from studbook.domain.value_objects import CompressedPedigree, HorseStats, ParentRecord, Pedigree


class TestParentRecord:
    """ParentRecordのテスト."""

    def test_既定値(self):
        record = ParentRecord()
        assert record.name == "Unknown"
        assert record.breed == "Thoroughbred"
        assert record.racing_style == "Stalker"
        assert record.surface_preference == "balanced"
        assert record.distance_preference == "mile"

    def test_能力値が不明でも強さを計算できる(self):
        record = ParentRecord(career_grade=CareerGrade.C, races_won=1, total_races=4)
        # C(15) + 0.25*20
        assert record.strength() == 20

    def test_強さの上限は100(self):
        record = ParentRecord(
            stats=HorseStats(300, 300, 300), career_grade=CareerGrade.S, achievements=tuple("abcde")
        )
        assert record.strength() == 100

    def test_識別キーと基礎血統タグ(self):
        record = ParentRecord(name="Storm", breed="Arabian")
        assert record.identity_key() == "Storm_Arabian"
        assert record.foundation_tag() == "Storm (Arabian)"

    def test_辞書の血統はフルなら圧縮し圧縮済みならそのまま(self):
        full = Pedigree.from_parents({"name": "Grand Sire"}, {"name": "Grand Dam"}).to_dict()
        compressed = ParentRecord.from_dict({"name": "Child", "pedigree": full}).pedigree
        assert compressed.sire_name == "Grand Sire"
        assert compressed.generations == 1

        restored = ParentRecord.from_dict({"name": "Child", "pedigree": compressed.to_dict()}).pedigree
        assert restored == compressed

    def test_保存して復元できる(self):
        record = ParentRecord(
            name="Storm",
            stats=HorseStats(50, 60, 70),
            career_grade=CareerGrade.B,
            pedigree=CompressedPedigree("A", "B", 1, ("A (Thoroughbred)",)),
        )
        assert ParentRecord.from_dict(record.to_dict()) == record


class TestCompressedPedigree:
    """CompressedPedigreeのテスト."""

    def test_祖父母の名前と世代数を残す(self):
        pedigree = Pedigree.from_parents({"name": "Grand Sire"}, None)
        compressed = CompressedPedigree.compress(pedigree)
        assert compressed.sire_name == "Grand Sire"
        assert compressed.dam_name == "Unknown"
        assert compressed.generations == 1

    def test_世代数は0未満にならない(self):
        compressed = CompressedPedigree.compress({"generations": -3})
        assert compressed.generations == 0

    def test_世代数は親の血統表の値をそのまま使う(self):
        compressed = CompressedPedigree.compress(Pedigree(generations=2))
        assert compressed.generations == 2

    def test_圧縮を重ねても世代が深くなる(self):
        first = Pedigree.from_parents({"name": "Alpha"}, {"name": "Beta"})
        second = Pedigree.from_parents(
            ParentRecord(name="Colt", pedigree=CompressedPedigree.compress(first)),
            ParentRecord(name="Filly", pedigree=CompressedPedigree.compress(first)),
        )
        third = Pedigree.from_parents(
            ParentRecord(name="Grand Colt", pedigree=CompressedPedigree.compress(second)),
            ParentRecord(name="Grand Filly", pedigree=CompressedPedigree.compress(second)),
        )
        assert (first.generations, second.generations, third.generations) == (1, 2, 3)
