"""血統表の値オブジェクト."""
from __future__ import annotations

from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from .horse_stats import round_half_up
from .parent_record import ParentRecord

MAX_GENERATIONS = 3
MAX_FOUNDATION_LINES = 8
MAX_INBREEDING = 0.5
DUPLICATE_ANCESTOR_PENALTY = 0.125

FOUNDATION_LINEAGE = "Foundation Horse"
FOUNDATION_STOCK = "Foundation Stock"

# 血統評価の補正
CROSS_BRED_BONUS = 1.05
DEPTH_BONUS = 1.02


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class Pedigree:
    """最大3世代までの血統情報.

    生成時に一度だけ計算され、以後は変更されない。保存データからの復元時は
    保存済みの数値をそのまま採用し、父母から再計算しない。
    """

    sire: ParentRecord | None = None
    dam: ParentRecord | None = None
    generations: int = 0
    inbreeding_coefficient: float = 0.0
    created: str = field(default_factory=_now_iso)
    lineage: str = FOUNDATION_LINEAGE
    cross_bred: bool = False
    foundation_lines: tuple[str, ...] = field(default_factory=tuple)
    pedigree_strength: int = 0

    @classmethod
    def from_parents(cls, sire: Any = None, dam: Any = None) -> Pedigree:
        """父母の情報から血統表を作成する（親がいなくてもエラーにしない）."""
        sire_record = ParentRecord.of(sire) if sire is not None else None
        dam_record = ParentRecord.of(dam) if dam is not None else None

        generations = _count_generations(sire_record, dam_record)
        inbreeding = _inbreeding_coefficient(sire_record, dam_record, generations)
        cross_bred = (
            sire_record is not None
            and dam_record is not None
            and sire_record.breed != dam_record.breed
        )
        return cls(
            sire=sire_record,
            dam=dam_record,
            generations=generations,
            inbreeding_coefficient=inbreeding,
            lineage=_build_lineage(sire_record, dam_record),
            cross_bred=cross_bred,
            foundation_lines=_foundation_lines(sire_record, dam_record),
            pedigree_strength=_pedigree_strength(
                sire_record, dam_record, cross_bred, inbreeding, generations
            ),
        )

    @classmethod
    def create_foundation(cls) -> Pedigree:
        """父母のいない基礎馬の血統表を作成する."""
        return cls(lineage=FOUNDATION_LINEAGE, foundation_lines=(FOUNDATION_STOCK,))

    @property
    def is_foundation(self) -> bool:
        """父母の記録がないかどうか."""
        return self.sire is None and self.dam is None

    @property
    def parents(self) -> list[ParentRecord]:
        """記録のある親（父、母の順）."""
        return [p for p in (self.sire, self.dam) if p is not None]

    def ancestor_names(self) -> list[str]:
        """直系の親の名前."""
        return [p.name for p in self.parents]

    def get_breeding_recommendations(self) -> list[str]:
        """血統から見た配合上の助言を返す."""
        recommendations = []
        if self.inbreeding_coefficient > 0.25:
            recommendations.append("High inbreeding detected - consider outcrossing")
        if self.cross_bred:
            recommendations.append("Cross-bred lineage - benefits from hybrid vigor")
        if self.pedigree_strength > 80:
            recommendations.append("Elite pedigree - excellent breeding prospect")
        elif self.pedigree_strength < 40:
            recommendations.append("Moderate pedigree - focus on performance improvement")
        if self.generations < 2:
            recommendations.append("Shallow pedigree - could benefit from established bloodlines")
        return recommendations

    def get_display_info(self) -> dict:
        """表示用の要約を返す."""
        return {
            "lineage": self.lineage,
            "generations": self.generations,
            "inbreeding": f"{self.inbreeding_coefficient * 100:.1f}%",
            "strength": self.pedigree_strength,
            "cross_bred": self.cross_bred,
            "foundation_lines": list(self.foundation_lines[:4]),
            "parents": {
                "sire": _parent_summary(self.sire),
                "dam": _parent_summary(self.dam),
            },
        }

    def to_dict(self) -> dict:
        """保存用の辞書に変換する."""
        return {
            "sire": self.sire.to_dict() if self.sire is not None else None,
            "dam": self.dam.to_dict() if self.dam is not None else None,
            "generations": self.generations,
            "inbreeding_coefficient": self.inbreeding_coefficient,
            "created": self.created,
            "lineage": self.lineage,
            "cross_bred": self.cross_bred,
            "foundation_lines": list(self.foundation_lines),
            "pedigree_strength": self.pedigree_strength,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Pedigree:
        """保存用の辞書から復元する（欠けた項目は既定値）."""
        if not data:
            return cls()
        sire = data.get("sire")
        dam = data.get("dam")
        return cls(
            sire=ParentRecord.from_dict(sire) if sire else None,
            dam=ParentRecord.from_dict(dam) if dam else None,
            generations=int(data.get("generations") or 0),
            inbreeding_coefficient=float(data.get("inbreeding_coefficient") or 0.0),
            created=data.get("created") or _now_iso(),
            lineage=data.get("lineage") or FOUNDATION_LINEAGE,
            cross_bred=bool(data.get("cross_bred", False)),
            foundation_lines=tuple(data.get("foundation_lines") or ()),
            pedigree_strength=int(data.get("pedigree_strength") or 0),
        )


def _count_generations(sire: ParentRecord | None, dam: ParentRecord | None) -> int:
    if sire is None and dam is None:
        return 0
    if sire is None or dam is None:
        return 1
    sire_path = sire.pedigree.generations + 1 if sire.pedigree is not None else 1
    dam_path = dam.pedigree.generations + 1 if dam.pedigree is not None else 1
    return min(sire_path, dam_path, MAX_GENERATIONS)


def _ancestor_keys(parent: ParentRecord | None) -> list[str]:
    if parent is None:
        return []
    keys = [parent.identity_key()]
    if parent.pedigree is not None:
        # 基礎血統のタグは品種不明の祖先として扱う
        keys.extend(f"{line}_unknown" for line in parent.pedigree.foundation_lines)
    return keys


def _inbreeding_coefficient(
    sire: ParentRecord | None, dam: ParentRecord | None, generations: int
) -> float:
    if generations < 2:
        return 0.0
    counts = Counter(_ancestor_keys(sire) + _ancestor_keys(dam))
    total = sum((count - 1) * DUPLICATE_ANCESTOR_PENALTY for count in counts.values() if count > 1)
    return min(total, MAX_INBREEDING)


def _build_lineage(sire: ParentRecord | None, dam: ParentRecord | None) -> str:
    if sire is None and dam is None:
        return FOUNDATION_LINEAGE
    sire_name = sire.name if sire is not None else "Unknown Sire"
    dam_name = dam.name if dam is not None else "Unknown Dam"
    return f"{sire_name} x {dam_name}"


def _foundation_lines(sire: ParentRecord | None, dam: ParentRecord | None) -> tuple[str, ...]:
    lines: dict[str, None] = {}
    for parent in (sire, dam):
        if parent is None:
            continue
        lines.setdefault(parent.foundation_tag(), None)
        if parent.pedigree is not None:
            for line in parent.pedigree.foundation_lines:
                lines.setdefault(line, None)
    return tuple(lines)[:MAX_FOUNDATION_LINES]


def _pedigree_strength(
    sire: ParentRecord | None,
    dam: ParentRecord | None,
    cross_bred: bool,
    inbreeding: float,
    generations: int,
) -> int:
    parents = [p for p in (sire, dam) if p is not None]
    if not parents:
        return 0

    strength = sum(p.strength() for p in parents) / len(parents)
    if cross_bred:
        strength *= CROSS_BRED_BONUS
    if inbreeding > 0:
        strength *= 1 - inbreeding * 0.5
    if generations >= MAX_GENERATIONS:
        strength *= DEPTH_BONUS
    return max(0, min(round_half_up(strength), 100))


def _parent_summary(parent: ParentRecord | None) -> dict | None:
    if parent is None:
        return None
    return {
        "name": parent.name,
        "breed": parent.breed,
        "grade": parent.career_grade.value,
        "specialization": parent.specialization,
    }
