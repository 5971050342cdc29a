"""厩舎操作の結果を表す値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..entities.breeding_attempt import BreedingAttempt
    from ..entities.retired_horse import RetiredHorse


@dataclass(frozen=True)
class RetirementResult:
    """引退受け入れの結果."""

    success: bool
    horse: RetiredHorse | None = None
    reason: str | None = None
    details: dict[str, Any] = field(default_factory=dict)
    message: str | None = None
    stable_size: int = 0

    @classmethod
    def accepted(cls, horse: RetiredHorse, message: str, stable_size: int) -> RetirementResult:
        """受け入れ成功."""
        return cls(success=True, horse=horse, message=message, stable_size=stable_size)

    @classmethod
    def rejected(cls, reason: str, details: dict[str, Any] | None = None) -> RetirementResult:
        """受け入れ拒否."""
        return cls(success=False, reason=reason, details=details or {})


@dataclass(frozen=True)
class BreedingResult:
    """配合記録の結果."""

    success: bool
    breeding: BreedingAttempt | None = None
    reason: str | None = None

    @classmethod
    def recorded(cls, breeding: BreedingAttempt) -> BreedingResult:
        """記録成功."""
        return cls(success=True, breeding=breeding)

    @classmethod
    def rejected(cls, reason: str) -> BreedingResult:
        """記録拒否."""
        return cls(success=False, reason=reason)
