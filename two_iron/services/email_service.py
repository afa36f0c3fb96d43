"""Email Service - Brevo transactional email and contact calls.

This module handles:
- Sending the templated recommendation email
- Registering the visitor as a contact for follow-up automation

Interface Contract:
- send_recommendation(name, email, recommendation, answers) -> None
- schedule_follow_up(email, name) -> None
- All methods raise EmailServiceError on network errors or non-success status
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Callable

import requests

import config
from two_iron.models import QuestionnaireAnswers, Recommendation

logger = logging.getLogger(__name__)


class EmailServiceError(Exception):
    """Raised when a Brevo call fails."""
    pass


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BrevoEmailService:
    """Client for the two Brevo endpoints the submission flow needs."""

    HEADERS = {
        "Accept": "application/json",
        "Content-Type": "application/json",
    }

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        template_id: int | None = None,
        follow_up_list_id: int | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        """Initialize with explicit settings, falling back to config.

        Args:
            api_key: Brevo API key
            base_url: API root, e.g. https://api.brevo.com/v3
            template_id: Template used for the recommendation email
            follow_up_list_id: Contact list that triggers follow-ups
            timeout: Per-request timeout in seconds (None waits indefinitely)
            session: requests session to reuse. If None, creates one.
            clock: Returns the assessment timestamp
        """
        self.api_key = api_key if api_key is not None else config.BREVO_API_KEY
        self.base_url = (base_url or config.BREVO_API_URL).rstrip("/")
        self.template_id = template_id if template_id is not None else config.BREVO_RECOMMENDATION_TEMPLATE_ID
        self.follow_up_list_id = (
            follow_up_list_id if follow_up_list_id is not None else config.BREVO_FOLLOW_UP_LIST_ID
        )
        self.timeout = timeout if timeout is not None else config.BREVO_TIMEOUT
        self.clock = clock
        self.session = session or requests.Session()
        self.session.headers.update(self.HEADERS)
        self.session.headers["api-key"] = self.api_key

    def send_recommendation(
        self,
        name: str,
        email: str,
        recommendation: Recommendation,
        answers: QuestionnaireAnswers,
    ) -> None:
        """Send the templated recommendation email.

        Raises:
            EmailServiceError: If the request fails or Brevo rejects it
        """
        payload = self._build_recommendation_payload(name, email, recommendation, answers)
        self._post("/smtp/email", payload, "Failed to send email")
        logger.info("[brevo] recommendation email sent to %s", email)

    def schedule_follow_up(self, email: str, name: str) -> None:
        """Create or update the contact on the follow-up list.

        Raises:
            EmailServiceError: If the request fails or Brevo rejects it
        """
        payload = self._build_contact_payload(email, name)
        self._post("/contacts", payload, "Failed to schedule follow-up emails")
        logger.info("[brevo] contact %s added to list %s", email, self.follow_up_list_id)

    def _build_recommendation_payload(
        self,
        name: str,
        email: str,
        recommendation: Recommendation,
        answers: QuestionnaireAnswers,
    ) -> dict[str, Any]:
        """Build the body for POST /smtp/email."""
        return {
            "templateId": self.template_id,
            "to": [{"email": email, "name": name}],
            "params": {
                "name": name,
                "isRecommended": recommendation.is_recommended,
                "mainReason": recommendation.main_reason,
                "additionalReasons": list(recommendation.additional_reasons),
                "alternativeSuggestion": recommendation.alternative_suggestion or "",
                "practiceRoutine": list(recommendation.practice_routine),
                "handicap": answers.handicap,
                "experience": answers.experience,
                "playingStyle": answers.playing_style,
            },
        }

    def _build_contact_payload(self, email: str, name: str) -> dict[str, Any]:
        """Build the body for POST /contacts."""
        return {
            "email": email,
            "attributes": {
                "FIRSTNAME": name,
                "ASSESSMENT_DATE": self.clock().isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            },
            "listIds": [self.follow_up_list_id],
            "updateEnabled": True,
        }

    def _post(self, path: str, payload: dict[str, Any], failure_message: str) -> requests.Response:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.post(url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            raise EmailServiceError(f"{failure_message}: {e}") from e

        if not response.ok:
            logger.warning("[brevo] POST %s -> HTTP %s: %s", path, response.status_code, response.text)
            raise EmailServiceError(f"{failure_message}: HTTP {response.status_code}")
        return response
