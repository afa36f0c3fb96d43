"""Recommendation data models.

Pure data structures for recommendation results.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Recommendation:
    """Whether a 2-iron fits the player's game, and why."""
    is_recommended: bool
    main_reason: str
    confidence_score: int
    additional_reasons: tuple[str, ...] = ()
    practice_routine: tuple[str, ...] = ()
    alternative_suggestion: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the camelCase wire shape."""
        data: dict[str, Any] = {
            "isRecommended": self.is_recommended,
            "mainReason": self.main_reason,
            "additionalReasons": list(self.additional_reasons),
            "practiceRoutine": list(self.practice_routine),
            "confidenceScore": self.confidence_score,
        }
        if self.alternative_suggestion is not None:
            data["alternativeSuggestion"] = self.alternative_suggestion
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Recommendation":
        """Create from dictionary."""
        return cls(
            is_recommended=bool(data.get("isRecommended", False)),
            main_reason=data.get("mainReason", ""),
            confidence_score=int(data.get("confidenceScore", 0)),
            additional_reasons=tuple(data.get("additionalReasons") or []),
            practice_routine=tuple(data.get("practiceRoutine") or []),
            alternative_suggestion=data.get("alternativeSuggestion") or None,
        )
