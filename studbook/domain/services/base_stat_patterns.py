"""ベース能力値パターンの生成.

独立した一様乱数だけで3能力値を決めると平均付近に集まりやすいため、
型（パターン）ごとに能力値の帯域を決めてから値を引く。
"""
from __future__ import annotations

import random

from ..enums import StatName, StatPattern
from ..value_objects import HorseStats, round_half_up

BASE_MIN = 20
BASE_MAX = 70

Band = tuple[int, int]

_BALANCED: Band = (38, 52)
_FOCUS_HIGH: Band = (55, 70)
_FOCUS_LOW: Band = (25, 45)
_DUAL_HIGH: Band = (48, 65)
_DUAL_LOW: Band = (20, 38)
_POLAR_HIGH: Band = (60, 70)
_POLAR_MID: Band = (35, 55)
_POLAR_LOW: Band = (20, 30)
_INVERSE_LOW: Band = (20, 30)
_INVERSE_HIGH: Band = (55, 70)

_SPEED = StatName.SPEED.value
_STAMINA = StatName.STAMINA.value
_POWER = StatName.POWER.value
_ALL = (_SPEED, _STAMINA, _POWER)

_SINGLE_FOCUS = {
    StatPattern.SPEED_FOCUS: _SPEED,
    StatPattern.STAMINA_FOCUS: _STAMINA,
    StatPattern.POWER_FOCUS: _POWER,
}

_DUAL_FOCUS = {
    StatPattern.SPEED_STAMINA: (_SPEED, _STAMINA),
    StatPattern.SPEED_POWER: (_SPEED, _POWER),
    StatPattern.STAMINA_POWER: (_STAMINA, _POWER),
}

ALL_PATTERNS: tuple[StatPattern, ...] = tuple(StatPattern)


def choose_pattern(rng: random.Random) -> StatPattern:
    """9種類のパターンから一様に1つ選ぶ."""
    return rng.choice(ALL_PATTERNS)


def stat_bands(pattern: StatPattern, rng: random.Random) -> dict[str, Band]:
    """パターンに応じた能力値ごとの帯域を返す."""
    if pattern is StatPattern.BALANCED:
        return {name: _BALANCED for name in _ALL}

    if pattern in _SINGLE_FOCUS:
        focus = _SINGLE_FOCUS[pattern]
        return {name: _FOCUS_HIGH if name == focus else _FOCUS_LOW for name in _ALL}

    if pattern in _DUAL_FOCUS:
        pair = _DUAL_FOCUS[pattern]
        return {name: _DUAL_HIGH if name in pair else _DUAL_LOW for name in _ALL}

    if pattern is StatPattern.POLARIZED:
        # 長所・中間・短所をランダムに割り当てる
        order = list(_ALL)
        rng.shuffle(order)
        return dict(zip(order, (_POLAR_HIGH, _POLAR_MID, _POLAR_LOW)))

    # 型にはまらない組み合わせ: スピードが低くスタミナとパワーが高い
    return {name: _INVERSE_LOW if name == _SPEED else _INVERSE_HIGH for name in _ALL}


def draw_from_band(band: Band, variance: float, rng: random.Random) -> int:
    """帯域の中心に向けてばらつきを縮めた範囲から値を引く."""
    low, high = band
    span = high - low
    adjusted = span * variance
    adjusted_min = low + (span - adjusted) / 2
    value = round_half_up(adjusted_min + rng.random() * adjusted)
    return max(BASE_MIN, min(BASE_MAX, value))


def synthesize_base_stats(pattern: StatPattern, variance: float, rng: random.Random) -> HorseStats:
    """パターンとばらつき係数からベース能力値を作る."""
    if not 0 < variance <= 1:
        raise ValueError(f"variance must be in (0, 1], got {variance}")
    bands = stat_bands(pattern, rng)
    return HorseStats(**{name: draw_from_band(bands[name], variance, rng) for name in _ALL})
