"""Two-Iron Advisor package."""

from .models import QuestionnaireAnswers, Recommendation
from .scoring import generate_recommendation
from .services import SubmissionService

__all__ = [
    "QuestionnaireAnswers",
    "Recommendation",
    "generate_recommendation",
    "SubmissionService",
]
