"""圧縮済み祖先情報の値オブジェクト."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class CompressedPedigree:
    """親の血統を1世代分だけ要約したもの.

    再帰構造を持たせず、祖父母の名前と基礎血統のタグだけを残す。
    """

    sire_name: str = "Unknown"
    dam_name: str = "Unknown"
    generations: int = 0
    foundation_lines: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def compress(cls, pedigree: Any) -> CompressedPedigree:
        """親の血統（Pedigreeまたは辞書）を圧縮する."""
        if isinstance(pedigree, CompressedPedigree):
            return pedigree
        if isinstance(pedigree, Mapping):
            sire = pedigree.get("sire")
            dam = pedigree.get("dam")
            generations = pedigree.get("generations") or 0
            lines = pedigree.get("foundation_lines") or ()
        else:
            sire = pedigree.sire
            dam = pedigree.dam
            generations = pedigree.generations
            lines = pedigree.foundation_lines
        return cls(
            sire_name=_name_of(sire),
            dam_name=_name_of(dam),
            generations=max(0, int(generations)),
            foundation_lines=tuple(lines),
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CompressedPedigree:
        """保存形式から復元する."""
        return cls(
            sire_name=data.get("sire_name", "Unknown"),
            dam_name=data.get("dam_name", "Unknown"),
            generations=int(data.get("generations", 0)),
            foundation_lines=tuple(data.get("foundation_lines") or ()),
        )

    def to_dict(self) -> dict:
        """辞書に変換する."""
        return {
            "sire_name": self.sire_name,
            "dam_name": self.dam_name,
            "generations": self.generations,
            "foundation_lines": list(self.foundation_lines),
        }


def _name_of(parent: Any) -> str:
    if parent is None:
        return "Unknown"
    if isinstance(parent, Mapping):
        return parent.get("name") or "Unknown"
    return getattr(parent, "name", None) or "Unknown"
