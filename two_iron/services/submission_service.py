"""Submission Service - Score answers and notify the visitor.

This module handles:
- Reading questionnaire answers from a request payload
- Scoring them into a Recommendation
- Sending the recommendation email, then registering the follow-up contact

Interface Contract:
- submit(payload) -> SubmissionResult
- Never raises for bad input or failed notifications; failures are reported
  through SubmissionResult.failed_stage and logged

The two notification steps run strictly in order. The follow-up step is
skipped when the email step fails. There are no retries and answers are not
re-validated here: any well-typed payload gets a recommendation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from two_iron.models import AnswersFormatError, QuestionnaireAnswers, Recommendation
from two_iron.scoring import generate_recommendation

logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "Failed to process submission"


class SubmissionStage(Enum):
    """Pipeline stages, in execution order."""
    PARSE_ANSWERS = "parse_answers"
    SEND_RECOMMENDATION = "send_recommendation"
    SCHEDULE_FOLLOW_UP = "schedule_follow_up"


@dataclass(frozen=True)
class StepOutcome:
    """Result of one notification step."""
    stage: SubmissionStage
    ok: bool
    error: Exception | None = None


@dataclass(frozen=True)
class SubmissionResult:
    """Result of a whole submission."""
    success: bool
    recommendation: Recommendation | None = None
    failed_stage: SubmissionStage | None = None
    error: Exception | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the response body sent to the browser."""
        if self.success and self.recommendation is not None:
            return {"success": True, "recommendation": self.recommendation.to_dict()}
        return {"success": False, "error": GENERIC_FAILURE_MESSAGE}


class SubmissionService:
    """Runs a questionnaire submission end to end."""

    def __init__(self, email_service=None):
        """Initialize with optional email service dependency.

        Args:
            email_service: Brevo client. If None, uses default.
        """
        self._email = email_service

    @property
    def email(self):
        """Lazy load email service."""
        if self._email is None:
            from two_iron.services.email_service import BrevoEmailService
            self._email = BrevoEmailService()
        return self._email

    def submit(self, payload: Any) -> SubmissionResult:
        """Parse, score, and notify.

        Args:
            payload: Decoded JSON body of the request

        Returns:
            SubmissionResult: recommendation on success, failing stage otherwise
        """
        try:
            answers = QuestionnaireAnswers.from_dict(payload)
        except AnswersFormatError as e:
            logger.warning("[submit] %s failed: %s", SubmissionStage.PARSE_ANSWERS.value, e)
            return SubmissionResult(success=False, failed_stage=SubmissionStage.PARSE_ANSWERS, error=e)

        recommendation = generate_recommendation(answers)
        logger.info(
            "[submit] scored %s: score=%d recommended=%s",
            answers.email,
            recommendation.confidence_score,
            recommendation.is_recommended,
        )

        steps: list[tuple[SubmissionStage, Callable[[], None]]] = [
            (
                SubmissionStage.SEND_RECOMMENDATION,
                lambda: self.email.send_recommendation(answers.name, answers.email, recommendation, answers),
            ),
            (
                SubmissionStage.SCHEDULE_FOLLOW_UP,
                lambda: self.email.schedule_follow_up(answers.email, answers.name),
            ),
        ]

        for stage, action in steps:
            outcome = self._run_step(stage, action)
            if not outcome.ok:
                return SubmissionResult(success=False, failed_stage=outcome.stage, error=outcome.error)

        return SubmissionResult(success=True, recommendation=recommendation)

    def _run_step(self, stage: SubmissionStage, action: Callable[[], None]) -> StepOutcome:
        """Run one notification step, turning any failure into a StepOutcome."""
        try:
            action()
        except Exception as e:
            logger.exception("[submit] %s failed: %s", stage.value, e)
            return StepOutcome(stage=stage, ok=False, error=e)
        return StepOutcome(stage=stage, ok=True)
