"""列挙型のテスト."""
from studbook.domain.enums import (
    BreedingType,
    CareerGrade,
    Gender,
    GenerationType,
    HeritageWeight,
    StatPattern,
)


class TestCareerGrade:
    """CareerGradeのテスト."""

    def test_グレード値はSが6でFが1(self):
        assert CareerGrade.S.score == 6
        assert CareerGrade.A.score == 5
        assert CareerGrade.F.score == 1

    def test_血統評価の持ち点(self):
        assert CareerGrade.S.strength_points == 30
        assert CareerGrade.D.strength_points == 10
        assert CareerGrade.F.strength_points == 5

    def test_小文字や空白を含む文字列を解釈できる(self):
        assert CareerGrade.parse(" b ") == CareerGrade.B

    def test_不明なグレードはNone(self):
        assert CareerGrade.parse("Z") is None
        assert CareerGrade.parse(None) is None
        assert CareerGrade.parse("") is None

    def test_不明なグレードの値は既定値(self):
        assert CareerGrade.score_of("Z") == 1
        assert CareerGrade.score_of(None, default=0) == 0

    def test_平均値を7段階表で丸める(self):
        assert CareerGrade.from_average(1.0) == CareerGrade.F
        assert CareerGrade.from_average(2.5) == CareerGrade.D
        assert CareerGrade.from_average(4.5) == CareerGrade.B
        assert CareerGrade.from_average(5.5) == CareerGrade.A
        assert CareerGrade.from_average(6.0) == CareerGrade.S

    def test_範囲外の平均値はF(self):
        assert CareerGrade.from_average(7.0) == CareerGrade.F
        assert CareerGrade.from_average(-1.0) == CareerGrade.F


class TestGender:
    """Genderのテスト."""

    def test_牡牝の判定(self):
        assert Gender.COLT.is_male
        assert Gender.STALLION.is_male
        assert Gender.FILLY.is_female
        assert not Gender.MARE.is_male

    def test_繁殖可能なのは成熟した馬だけ(self):
        assert Gender.STALLION.can_breed
        assert Gender.MARE.can_breed
        assert not Gender.COLT.can_breed

    def test_表示名と繁殖上の役割(self):
        assert Gender.STALLION.get_display_name() == "Stallion"
        assert Gender.MARE.get_breeding_role() == "Dam (Mother)"
        assert Gender.FILLY.get_breeding_role() == "Not yet breeding age"


class TestGenerationType:
    """GenerationTypeのテスト."""

    def test_ばらつき係数(self):
        assert GenerationType.FOUNDATION.variance == 1.0
        assert GenerationType.BRED.variance == 0.8
        assert GenerationType.CUSTOMIZED.variance == 0.9


class TestHeritageWeight:
    """HeritageWeightのテスト."""

    def test_成績グレードごとの影響度(self):
        assert HeritageWeight.for_grade(CareerGrade.S) is HeritageWeight.STRONG
        assert HeritageWeight.for_grade("A") is HeritageWeight.STRONG
        assert HeritageWeight.for_grade(CareerGrade.C) is HeritageWeight.MODERATE
        assert HeritageWeight.for_grade(CareerGrade.D) is HeritageWeight.WEAK
        assert HeritageWeight.for_grade(None) is HeritageWeight.WEAK


class TestBreedingType:
    """BreedingTypeのテスト."""

    def test_品種が同じなら純血(self):
        assert BreedingType.classify("Arabian", "Arabian") == BreedingType.PUREBRED
        assert BreedingType.classify("Arabian", "Thoroughbred") == BreedingType.CROSSBRED


class TestStatPattern:
    """StatPatternのテスト."""

    def test_パターンは9種類(self):
        assert len(list(StatPattern)) == 9
