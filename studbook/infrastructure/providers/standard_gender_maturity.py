"""標準の性別成熟区分."""
from studbook.domain.enums import Gender
from studbook.domain.ports.gender_maturity_mapping import GenderMaturityMapping


class StandardGenderMaturity(GenderMaturityMapping):
    """牡馬（colt）は種牡馬、牝馬（filly）は繁殖牝馬になる."""

    def mature_gender_of(self, raw_gender: str) -> Gender:
        """繁殖区分を返す."""
        try:
            gender = Gender(str(raw_gender).lower())
        except ValueError:
            raise ValueError(f"Unknown gender: {raw_gender}") from None
        return Gender.STALLION if gender.is_male else Gender.MARE
