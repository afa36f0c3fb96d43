"""Fire-and-forget analytics events for the questionnaire flow."""

from __future__ import annotations

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)

EventSink = Callable[[dict[str, Any]], Any]


class AnalyticsEvents:
    """Event names pushed to the analytics sink."""
    FORM_START = "form_start"
    FORM_STEP_COMPLETE = "form_step_complete"
    FORM_SUBMISSION = "form_submission"
    RECOMMENDATION_VIEW = "recommendation_view"
    RECOMMENDATION_SHARE = "recommendation_share"
    EMAIL_SENT = "email_sent"
    FORM_ERROR = "form_error"
    FORM_RESTART = "form_restart"


class Analytics:
    """Pushes ``{"event": name, **params}`` records to an optional sink."""

    def __init__(self, sink: EventSink | None = None):
        self.sink = sink

    def track(self, event: str, **params: str | int | bool) -> None:
        """Record an event. Does nothing when no sink is configured."""
        if self.sink is None:
            return
        try:
            self.sink({"event": event, **params})
        except Exception as e:
            logger.warning("[analytics] sink rejected %s: %s", event, e)
