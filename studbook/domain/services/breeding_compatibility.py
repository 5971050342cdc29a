"""配合相性の計算サービス."""
from __future__ import annotations

from typing import Any

from ..enums import BreedingType, CareerGrade
from ..value_objects import CompatibilityAnalysis, ExpectedOutcome, HorseStats

BASE_SCORE = 50
SAME_BREED_BONUS = 10
CROSS_BREED_BONUS = 5
GRADE_MULTIPLIER = 5
MAX_GRADE_BONUS = 25
STRONG_RECORD_THRESHOLD = 4.5
SPECIALIZATION_BONUS = 5
COMMON_ANCESTOR_PENALTY = 0.125

# (近交度の閾値, 減点, 懸念メッセージ) 上から順に判定する
INBREEDING_PENALTIES = (
    (0.2, 15, "Potential inbreeding detected"),
    (0.1, 5, "Some line breeding present"),
)


class BreedingCompatibilityService:
    """2頭の繁殖馬の相性をスコアと理由タグで評価する."""

    def calculate_breeding_compatibility(self, horse1: Any, horse2: Any) -> CompatibilityAnalysis:
        """配合相性を計算する."""
        advantages: list[str] = []
        concerns: list[str] = []
        score: float = BASE_SCORE

        # 品種
        if horse1.breed == horse2.breed:
            score += SAME_BREED_BONUS
            advantages.append("Same breed - consistent traits")
        else:
            score += CROSS_BREED_BONUS
            advantages.append("Cross-breeding - hybrid vigor potential")

        # 競走成績
        combined_grade = (
            CareerGrade.score_of(horse1.career_grade) + CareerGrade.score_of(horse2.career_grade)
        ) / 2
        score += min(combined_grade * GRADE_MULTIPLIER, MAX_GRADE_BONUS)
        if combined_grade >= STRONG_RECORD_THRESHOLD:
            advantages.append("Both parents have strong racing records")

        # 距離適性
        if horse1.specialization == horse2.specialization:
            score += SPECIALIZATION_BONUS
            advantages.append("Matching specializations - focused breeding")
        else:
            advantages.append("Diverse specializations - versatile offspring")

        # 近親
        inbreeding = self.calculate_potential_inbreeding(horse1, horse2)
        for threshold, penalty, message in INBREEDING_PENALTIES:
            if inbreeding > threshold:
                score -= penalty
                concerns.append(message)
                break

        # 能力値の相乗効果
        synergy = self.calculate_stat_synergy(horse1.stats, horse2.stats)
        score += synergy
        if synergy > 5:
            advantages.append("Complementary stat distributions")

        return CompatibilityAnalysis(
            overall=max(0, min(100, score)),
            advantages=tuple(advantages),
            concerns=tuple(concerns),
            expected_outcome=ExpectedOutcome(
                predicted_grade=self.predict_offspring_grade(horse1, horse2),
                breeding_type=self.classify_breeding_type(horse1, horse2),
                potential_inbreeding=inbreeding,
            ),
        )

    def calculate_potential_inbreeding(self, horse1: Any, horse2: Any) -> float:
        """共通する直系の親1頭につき12.5%として近交度を見積もる."""
        ancestors1 = _ancestor_names(getattr(horse1, "pedigree", None))
        ancestors2 = _ancestor_names(getattr(horse2, "pedigree", None))
        if not ancestors1 or not ancestors2:
            return 0.0
        common = [name for name in ancestors1 if name in ancestors2]
        return len(common) * COMMON_ANCESTOR_PENALTY

    def calculate_stat_synergy(self, stats1: HorseStats, stats2: HorseStats) -> int:
        """能力値ごとの平均が高いほど加点する."""
        synergy = 0
        for name, value in stats1.items():
            average = (value + stats2.get(name)) / 2
            if average > 75:
                synergy += 3
            elif average > 60:
                synergy += 1
        return synergy

    def classify_breeding_type(self, horse1: Any, horse2: Any) -> BreedingType:
        """配合種別を判定する."""
        return BreedingType.classify(horse1.breed, horse2.breed)

    def predict_offspring_grade(self, sire: Any, dam: Any) -> CareerGrade:
        """両親のグレード値の平均から産駒のグレードを予想する."""
        average = (CareerGrade.score_of(sire.career_grade) + CareerGrade.score_of(dam.career_grade)) / 2
        return CareerGrade.from_average(average)


def _ancestor_names(pedigree: Any) -> list[str]:
    if pedigree is None:
        return []
    ancestor_names = getattr(pedigree, "ancestor_names", None)
    if callable(ancestor_names):
        return ancestor_names()
    return []
