"""Questionnaire wizard state.

``WizardState`` is immutable; every transition returns a new state. The
``QuestionnaireSession`` controller wires the transitions to analytics and to
whatever actually submits the answers, so a front end only has to render
``session.state``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Callable

from two_iron.analytics import Analytics, AnalyticsEvents
from two_iron.models import QuestionnaireAnswers, Recommendation
from two_iron.questionnaire import SECTIONS, FieldError, QuestionSection, validate_section

logger = logging.getLogger(__name__)

SubmitFn = Callable[[QuestionnaireAnswers], Recommendation]


@dataclass(frozen=True)
class WizardState:
    """Snapshot of the questionnaire wizard."""
    step: int = 0
    answers: QuestionnaireAnswers = QuestionnaireAnswers()
    field_errors: tuple[FieldError, ...] = ()
    recommendation: Recommendation | None = None
    error: str | None = None
    is_submitting: bool = False

    @property
    def section(self) -> QuestionSection | None:
        """Current section, or None once the recommendation is showing."""
        if self.step < len(SECTIONS):
            return SECTIONS[self.step]
        return None

    @property
    def is_last_section(self) -> bool:
        return self.step == len(SECTIONS) - 1

    @property
    def is_complete(self) -> bool:
        return self.recommendation is not None


def initial_state() -> WizardState:
    return WizardState()


def update_field(state: WizardState, name: str, value: Any) -> WizardState:
    """Set one answer by wire name."""
    return replace(state, answers=state.answers.with_field(name, value))


def advance(state: WizardState) -> WizardState:
    """Validate the current section and move on.

    Invalid input keeps the step and records the errors. On the last section a
    valid form is flagged ``is_submitting`` instead of moving forward.
    """
    section = state.section
    if section is None or state.is_submitting:
        return state

    errors = validate_section(section, state.answers)
    if errors:
        return replace(state, field_errors=tuple(errors))

    if state.is_last_section:
        return replace(state, field_errors=(), error=None, is_submitting=True)
    return replace(state, step=state.step + 1, field_errors=())


def go_back(state: WizardState) -> WizardState:
    if state.step > 0 and not state.is_complete:
        return replace(state, step=state.step - 1)
    return state


def complete_submission(state: WizardState, recommendation: Recommendation) -> WizardState:
    """Show the recommendation."""
    return replace(
        state,
        step=len(SECTIONS),
        recommendation=recommendation,
        error=None,
        is_submitting=False,
    )


def fail_submission(state: WizardState, message: str) -> WizardState:
    return replace(state, error=message, is_submitting=False)


def reset() -> WizardState:
    """Start over with empty answers."""
    return initial_state()


class QuestionnaireSession:
    """Drives a WizardState through one visitor's questionnaire."""

    def __init__(self, submit: SubmitFn, analytics: Analytics | None = None):
        """Initialize the session.

        Args:
            submit: Sends answers and returns the recommendation; raises on failure
            analytics: Event tracker. If None, events are dropped.
        """
        self._submit = submit
        self.analytics = analytics or Analytics()
        self.state = initial_state()
        self.analytics.track(AnalyticsEvents.FORM_START)

    def set_field(self, name: str, value: Any) -> WizardState:
        self.state = update_field(self.state, name, value)
        return self.state

    def next(self) -> WizardState:
        """Advance one section, submitting after the last one."""
        before = self.state
        self.state = advance(before)

        if self.state.is_submitting:
            return self._submit_answers()

        if self.state.step > before.step:
            self.analytics.track(
                AnalyticsEvents.FORM_STEP_COMPLETE,
                step=before.step + 1,
                stepName=before.section.id,
            )
        return self.state

    def previous(self) -> WizardState:
        self.state = go_back(self.state)
        return self.state

    def start_over(self) -> WizardState:
        self.analytics.track(AnalyticsEvents.FORM_RESTART)
        self.state = reset()
        return self.state

    def _submit_answers(self) -> WizardState:
        answers = self.state.answers
        self.analytics.track(
            AnalyticsEvents.FORM_SUBMISSION,
            handicap=answers.handicap,
            experience=answers.experience,
            playingStyle=answers.playing_style,
        )
        try:
            recommendation = self._submit(answers)
        except Exception as e:
            message = str(e) or "Something went wrong"
            logger.warning("[wizard] submission failed: %s", message)
            self.state = fail_submission(self.state, message)
            self.analytics.track(AnalyticsEvents.FORM_ERROR, error=message)
            return self.state

        self.state = complete_submission(self.state, recommendation)
        self.analytics.track(
            AnalyticsEvents.RECOMMENDATION_VIEW,
            isRecommended=recommendation.is_recommended,
            confidenceScore=recommendation.confidence_score,
        )
        return self.state
