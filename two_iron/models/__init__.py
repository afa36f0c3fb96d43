"""Data models - Pure data structures with no business logic."""

from .answers import (
    AnswersFormatError,
    Experience,
    Handicap,
    IronDistances,
    IronStrength,
    PlayingStyle,
    PracticeFrequency,
    QuestionnaireAnswers,
)
from .recommendation import Recommendation

__all__ = [
    "AnswersFormatError",
    "Experience",
    "Handicap",
    "IronDistances",
    "IronStrength",
    "PlayingStyle",
    "PracticeFrequency",
    "QuestionnaireAnswers",
    "Recommendation",
]
