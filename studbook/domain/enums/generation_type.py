"""能力値生成種別の列挙型."""
from enum import Enum


class GenerationType(str, Enum):
    """能力値の生成経路."""

    FOUNDATION = "foundation"  # ランダム生成（基礎馬）
    BRED = "bred"  # 配合による生産
    CUSTOMIZED = "customized"  # プレイヤーのカスタマイズ

    @property
    def variance(self) -> float:
        """ベース値のばらつき係数."""
        return _VARIANCE[self]


_VARIANCE = {
    GenerationType.FOUNDATION: 1.0,
    GenerationType.BRED: 0.8,
    GenerationType.CUSTOMIZED: 0.9,
}
