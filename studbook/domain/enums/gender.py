"""馬の性別の列挙型."""
from enum import Enum


class Gender(str, Enum):
    """競走馬の性別（年齢による呼称を含む）."""

    STALLION = "stallion"  # 牡馬（繁殖可能）
    MARE = "mare"  # 牝馬（繁殖可能）
    COLT = "colt"  # 若い牡馬
    FILLY = "filly"  # 若い牝馬

    @property
    def is_male(self) -> bool:
        """牡かどうか."""
        return self in (Gender.STALLION, Gender.COLT)

    @property
    def is_female(self) -> bool:
        """牝かどうか."""
        return self in (Gender.MARE, Gender.FILLY)

    @property
    def can_breed(self) -> bool:
        """繁殖可能かどうか."""
        return self in (Gender.STALLION, Gender.MARE)

    def get_display_name(self) -> str:
        """表示名を取得する."""
        return self.value.capitalize()

    def get_breeding_role(self) -> str:
        """繁殖上の役割を取得する."""
        roles = {
            Gender.STALLION: "Sire (Father)",
            Gender.MARE: "Dam (Mother)",
        }
        return roles.get(self, "Not yet breeding age")
