"""HTTP client for the submit endpoint."""

from __future__ import annotations

import logging

import requests

from two_iron.models import QuestionnaireAnswers, Recommendation

logger = logging.getLogger(__name__)

DEFAULT_ERROR = "Failed to submit form"


class SubmissionClientError(Exception):
    """Raised when the server does not return a recommendation."""
    pass


class SubmissionClient:
    """Posts questionnaire answers to ``/api/submit``."""

    def __init__(self, base_url: str, *, timeout: float | None = None, session: requests.Session | None = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def submit(self, answers: QuestionnaireAnswers) -> Recommendation:
        """Submit answers and return the server's recommendation.

        Raises:
            SubmissionClientError: With the server's error message when available
        """
        url = f"{self.base_url}/api/submit"
        try:
            response = self.session.post(url, json=answers.to_dict(), timeout=self.timeout)
        except requests.RequestException as e:
            raise SubmissionClientError(f"{DEFAULT_ERROR}: {e}") from e

        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        if not response.ok or not data.get("success"):
            message = data.get("error") or DEFAULT_ERROR
            logger.info("[client] submit rejected: HTTP %s %s", response.status_code, message)
            raise SubmissionClientError(message)

        recommendation = data.get("recommendation")
        if not isinstance(recommendation, dict):
            logger.info("[client] submit succeeded without a recommendation: HTTP %s", response.status_code)
            raise SubmissionClientError(DEFAULT_ERROR)
        return Recommendation.from_dict(recommendation)
