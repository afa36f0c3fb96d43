"""Questionnaire definition and per-section validation.

The sections are plain data so any front end can render them; the same
definitions drive ``validate_section``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field as dataclass_field
from typing import Any, Literal

from two_iron.models import (
    Experience,
    Handicap,
    IronStrength,
    PracticeFrequency,
    QuestionnaireAnswers,
)

FieldType = Literal["text", "email", "select", "checkbox"]

EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
YARDS_RE = re.compile(r"[0-9]+")

PLAYING_STYLE_OPTIONS = [
    "Conservative - I prefer safer shots",
    "Balanced - I mix it up depending on the situation",
    "Aggressive - I'm here for a good time, not a long time",
]

STRUGGLE_OPTIONS = [
    "Consistency with long irons",
    "Getting enough height on long shots",
    "Want more shot shape options",
    "Need more distance control",
    "Looking for a hybrid alternative",
]


@dataclass(frozen=True)
class FormField:
    """A single input in a questionnaire section."""
    name: str
    label: str
    type: FieldType
    placeholder: str | None = None
    options: list[str] = dataclass_field(default_factory=list)
    optional: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data: dict[str, Any] = {
            "name": self.name,
            "label": self.label,
            "type": self.type,
            "optional": self.optional,
        }
        if self.placeholder:
            data["placeholder"] = self.placeholder
        if self.options:
            data["options"] = list(self.options)
        return data


@dataclass(frozen=True)
class QuestionSection:
    """One step of the questionnaire."""
    id: str
    title: str
    subtitle: str
    fields: list[FormField]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "title": self.title,
            "subtitle": self.subtitle,
            "fields": [f.to_dict() for f in self.fields],
        }


@dataclass(frozen=True)
class FieldError:
    """Validation failure for one field."""
    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary."""
        return {"field": self.field, "message": self.message}


SECTIONS: list[QuestionSection] = [
    QuestionSection(
        id="contact",
        title="Ready to Find Out if a 2-Iron is Right for You?",
        subtitle="Let's start with some basic info",
        fields=[
            FormField(name="name", label="Your Name", type="text"),
            FormField(
                name="email",
                label="Email (for your personalized 2-iron recommendation)",
                type="email",
            ),
        ],
    ),
    QuestionSection(
        id="skill",
        title="Your Golf Profile",
        subtitle="This helps us understand if you're ready for a 2-iron",
        fields=[
            FormField(
                name="handicap",
                label="What's your handicap?",
                type="select",
                options=Handicap.labels(),
            ),
            FormField(
                name="experience",
                label="Years playing golf",
                type="select",
                options=Experience.labels(),
            ),
        ],
    ),
    QuestionSection(
        id="physical",
        title="Physical Attributes",
        subtitle="A 2-iron requires specific physical capabilities",
        fields=[
            FormField(name="height", label="Your height", type="text", placeholder="e.g., 5'10\""),
            FormField(
                name="strength",
                label="How would you rate your ability with long irons?",
                type="select",
                options=IronStrength.labels(),
            ),
            FormField(
                name="swingSpeed",
                label="Driver swing speed (if known)",
                type="text",
                placeholder="e.g., 95 mph",
                optional=True,
            ),
        ],
    ),
    QuestionSection(
        id="distances",
        title="Current Iron Play",
        subtitle="This helps us gauge if a 2-iron matches your game",
        fields=[
            FormField(
                name="typicalIronDistances.sevenIron",
                label="How far do you hit your 7-iron? (yards)",
                type="text",
                placeholder="e.g., 150",
            ),
            FormField(
                name="typicalIronDistances.fourIron",
                label="How far do you hit your 4-iron? (if you use one)",
                type="text",
                placeholder="e.g., 180",
                optional=True,
            ),
        ],
    ),
    QuestionSection(
        id="style",
        title="Playing Style & Goals",
        subtitle="Let's understand why you're interested in a 2-iron",
        fields=[
            FormField(
                name="playingStyle",
                label="What best describes your playing style?",
                type="select",
                options=PLAYING_STYLE_OPTIONS,
            ),
            FormField(
                name="currentStruggles",
                label="Select your current challenges (multiple choice)",
                type="checkbox",
                options=STRUGGLE_OPTIONS,
                optional=True,
            ),
            FormField(
                name="practiceFrequency",
                label="How often do you practice?",
                type="select",
                options=PracticeFrequency.labels(),
            ),
        ],
    ),
]


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_RE.fullmatch(email or ""))


def validate_field(form_field: FormField, value: Any) -> list[FieldError]:
    """Check one field: presence, email syntax, and yardage digits."""
    errors: list[FieldError] = []

    if not form_field.optional and not value:
        errors.append(FieldError(form_field.name, f"{form_field.label} is required"))

    if value and form_field.type == "email" and not is_valid_email(value):
        errors.append(FieldError(form_field.name, "Please enter a valid email address"))

    if value and "Iron" in form_field.name and not YARDS_RE.fullmatch(value):
        errors.append(FieldError(form_field.name, "Please enter a valid distance in yards"))

    return errors


def validate_section(section: QuestionSection, answers: QuestionnaireAnswers) -> list[FieldError]:
    """Validate every field of a section, in field order."""
    errors: list[FieldError] = []
    for form_field in section.fields:
        errors.extend(validate_field(form_field, answers.get_field(form_field.name)))
    return errors


def questionnaire_to_dict() -> dict[str, Any]:
    """Serialize all sections for a renderer."""
    return {"sections": [s.to_dict() for s in SECTIONS]}
