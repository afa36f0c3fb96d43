"""Scoring engine for the 2-iron recommendation.

The confidence score is the sum of six independent signals:

1. handicap band
2. years of experience
3. comfort with long irons
4. practice frequency
5. 7-iron carry distance (emits a reason)
6. playing style (emits a reason)

A player is recommended a 2-iron when the score reaches
``RECOMMENDATION_THRESHOLD``. Every function here is pure.
"""

from __future__ import annotations

import re

from two_iron.models import (
    Experience,
    Handicap,
    IronStrength,
    PlayingStyle,
    PracticeFrequency,
    QuestionnaireAnswers,
    Recommendation,
)

RECOMMENDATION_THRESHOLD = 7
LONG_IRON_ALTERNATIVE_THRESHOLD = 5

HANDICAP_WEIGHTS: dict[Handicap, int] = {
    Handicap.BEGINNER: 0,
    Handicap.HIGH: 1,
    Handicap.MID: 2,
    Handicap.LOW: 3,
    Handicap.SINGLE_DIGIT: 4,
    Handicap.SCRATCH: 5,
    Handicap.UNRECOGNIZED: 0,
}

EXPERIENCE_WEIGHTS: dict[Experience, int] = {
    Experience.UNDER_ONE_YEAR: 0,
    Experience.ONE_TO_THREE: 1,
    Experience.THREE_TO_FIVE: 2,
    Experience.FIVE_TO_TEN: 3,
    Experience.TEN_PLUS: 4,
    Experience.UNRECOGNIZED: 0,
}

STRENGTH_WEIGHTS: dict[IronStrength, int] = {
    IronStrength.STRUGGLES: 0,
    IronStrength.HANDLES_FOUR_IRON: 2,
    IronStrength.STRENGTH: 3,
    IronStrength.FIGHT_A_BEAR: 3,
    IronStrength.UNRECOGNIZED: 0,
}

PRACTICE_WEIGHTS: dict[PracticeFrequency, int] = {
    PracticeFrequency.DAILY: 3,
    PracticeFrequency.WEEKLY: 2,
    PracticeFrequency.MONTHLY: 1,
    PracticeFrequency.SPECIAL_OCCASIONS: 0,
    PracticeFrequency.UNRECOGNIZED: 0,
}

# (minimum yards, score delta, reason); checked top to bottom
SEVEN_IRON_BANDS: tuple[tuple[int, int, str], ...] = (
    (170, 3, "Your 7-iron distance indicates you have the power needed for a 2-iron"),
    (150, 2, "Your 7-iron distance suggests you might have enough power for a 2-iron"),
    (1, -1, "Your current 7-iron distance suggests you might need more swing speed for a 2-iron"),
)

# Evaluated in order; first match wins
PLAYING_STYLE_RULES: tuple[tuple[str, PlayingStyle], ...] = (
    ("Aggressive", PlayingStyle.AGGRESSIVE),
    ("Conservative", PlayingStyle.CONSERVATIVE),
)

STYLE_SIGNALS: dict[PlayingStyle, tuple[int, str | None]] = {
    PlayingStyle.AGGRESSIVE: (1, "Your aggressive playing style could benefit from a 2-iron's versatility"),
    PlayingStyle.CONSERVATIVE: (
        0,
        "While you prefer conservative play, a 2-iron could still be valuable for certain situations",
    ),
    PlayingStyle.NEUTRAL: (0, None),
}

RECOMMENDED_REASON = "Based on your skill level, experience, and power, you're ready for the challenge of a 2-iron!"
NOT_RECOMMENDED_REASON = "A 2-iron might be challenging for your current game."

LONG_IRON_ALTERNATIVE = "Consider starting with a 3 or 4 iron to build confidence with long irons"
HYBRID_ALTERNATIVE = "A hybrid would be a better fit for your game right now"

RECOMMENDED_ROUTINE = (
    "Start with half-swing punch shots to build confidence",
    "Practice with alignment sticks to ensure proper path",
    "Gradually increase swing speed as you gain control",
    "Work on both low runners and higher trajectory shots",
)

NOT_RECOMMENDED_ROUTINE = (
    "Focus on building consistent contact with your mid-irons",
    "Work on increasing swing speed through proper technique",
    "Practice with your longest current iron to build confidence",
)

_LEADING_INT_RE = re.compile(r"\s*([+-]?)([0-9]+)")

# Anything longer is already far past every distance band
_MAX_YARD_DIGITS = 9


def parse_yards(text: str | None) -> int:
    """Read the leading integer of ``text``; anything unparseable is 0."""
    match = _LEADING_INT_RE.match(text or "")
    if not match:
        return 0
    sign, digits = match.groups()
    digits = digits.lstrip("0")[:_MAX_YARD_DIGITS] or "0"
    return int(sign + digits)


def classify_playing_style(text: str | None) -> PlayingStyle:
    """Classify free-text playing style by case-sensitive substring."""
    for needle, style in PLAYING_STYLE_RULES:
        if needle in (text or ""):
            return style
    return PlayingStyle.NEUTRAL


def seven_iron_signal(text: str | None) -> tuple[int, str | None]:
    """Score delta and reason for a 7-iron distance."""
    yards = parse_yards(text)
    for minimum, delta, reason in SEVEN_IRON_BANDS:
        if yards >= minimum:
            return delta, reason
    return 0, None


def playing_style_signal(text: str | None) -> tuple[int, str | None]:
    """Score delta and reason for a playing style description."""
    return STYLE_SIGNALS[classify_playing_style(text)]


def recommendation_for_score(score: int, reasons: list[str] | tuple[str, ...] = ()) -> Recommendation:
    """Build the branch output for a confidence score."""
    if score >= RECOMMENDATION_THRESHOLD:
        return Recommendation(
            is_recommended=True,
            main_reason=RECOMMENDED_REASON,
            confidence_score=score,
            additional_reasons=tuple(reasons),
            practice_routine=RECOMMENDED_ROUTINE,
        )

    if score >= LONG_IRON_ALTERNATIVE_THRESHOLD:
        alternative = LONG_IRON_ALTERNATIVE
    else:
        alternative = HYBRID_ALTERNATIVE

    return Recommendation(
        is_recommended=False,
        main_reason=NOT_RECOMMENDED_REASON,
        confidence_score=score,
        additional_reasons=tuple(reasons),
        practice_routine=NOT_RECOMMENDED_ROUTINE,
        alternative_suggestion=alternative,
    )


def generate_recommendation(answers: QuestionnaireAnswers) -> Recommendation:
    """Score questionnaire answers and decide whether to recommend a 2-iron.

    Unrecognised option labels and unparseable distances contribute nothing;
    this never raises.
    """
    score = 0
    reasons: list[str] = []

    score += HANDICAP_WEIGHTS[Handicap.from_label(answers.handicap)]
    score += EXPERIENCE_WEIGHTS[Experience.from_label(answers.experience)]
    score += STRENGTH_WEIGHTS[IronStrength.from_label(answers.strength)]
    score += PRACTICE_WEIGHTS[PracticeFrequency.from_label(answers.practice_frequency)]

    for delta, reason in (
        seven_iron_signal(answers.iron_distances.seven_iron),
        playing_style_signal(answers.playing_style),
    ):
        score += delta
        if reason:
            reasons.append(reason)

    return recommendation_for_score(score, reasons)
