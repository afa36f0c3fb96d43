"""Questionnaire answer models.

Pure data structures for the answers a visitor submits. Answers keep the raw
text of every field so they can be forwarded verbatim to the email template;
the enums below classify that text for scoring.
"""

from __future__ import annotations

from dataclasses import dataclass, field as dataclass_field, replace
from enum import Enum
from typing import Any


class AnswersFormatError(ValueError):
    """Raised when a payload cannot be read as questionnaire answers."""
    pass


class _LabelEnum(Enum):
    """Enum whose members are the option labels shown in the questionnaire."""

    @classmethod
    def from_label(cls, label: Any):
        """Return the member for ``label``, or ``UNRECOGNIZED``."""
        for member in cls:
            if member.value is not None and member.value == label:
                return member
        return cls.UNRECOGNIZED

    @classmethod
    def labels(cls) -> list[str]:
        """Recognised labels in questionnaire order."""
        return [member.value for member in cls if member.value is not None]


class Handicap(_LabelEnum):
    """Self-reported handicap band."""
    BEGINNER = "Beginner (30+)"
    HIGH = "20-30"
    MID = "10-20"
    LOW = "5-10"
    SINGLE_DIGIT = "Below 5"
    SCRATCH = "Scratch or better"
    UNRECOGNIZED = None


class Experience(_LabelEnum):
    """Years playing golf."""
    UNDER_ONE_YEAR = "Less than 1 year"
    ONE_TO_THREE = "1-3 years"
    THREE_TO_FIVE = "3-5 years"
    FIVE_TO_TEN = "5-10 years"
    TEN_PLUS = "10+ years"
    UNRECOGNIZED = None


class IronStrength(_LabelEnum):
    """How comfortable the player is with long irons."""
    STRUGGLES = "I struggle with long irons"
    HANDLES_FOUR_IRON = "I can handle a 4-iron comfortably"
    STRENGTH = "Long irons are my strength"
    FIGHT_A_BEAR = "I could probably fight a bear"
    UNRECOGNIZED = None


class PracticeFrequency(_LabelEnum):
    """How often the player practices."""
    DAILY = "Daily grinder"
    WEEKLY = "Weekly warrior"
    MONTHLY = "Monthly enthusiast"
    SPECIAL_OCCASIONS = "Special occasions only"
    UNRECOGNIZED = None


class PlayingStyle(Enum):
    """Playing style classified from free text."""
    AGGRESSIVE = "aggressive"
    CONSERVATIVE = "conservative"
    NEUTRAL = "neutral"


def _as_text(value: Any) -> str:
    """Coerce a JSON scalar to answer text; non-scalars become empty."""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def _as_struggles(value: Any) -> tuple[str, ...]:
    """Keep the string entries of a list; anything else is no struggles."""
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(s for s in value if isinstance(s, str))


def _text(data: dict[str, Any], key: str) -> str:
    return _as_text(data.get(key))


@dataclass(frozen=True)
class IronDistances:
    """Typical carry distances in yards, as typed."""
    seven_iron: str = ""
    four_iron: str = ""

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary."""
        return {
            "sevenIron": self.seven_iron,
            "fourIron": self.four_iron,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "IronDistances":
        """Create from dictionary."""
        if not isinstance(data, dict):
            return cls()
        return cls(
            seven_iron=_text(data, "sevenIron"),
            four_iron=_text(data, "fourIron"),
        )


@dataclass(frozen=True)
class QuestionnaireAnswers:
    """Everything a visitor answered in the questionnaire."""
    name: str = ""
    email: str = ""
    handicap: str = ""
    experience: str = ""
    height: str = ""
    strength: str = ""
    swing_speed: str = ""
    iron_distances: IronDistances = dataclass_field(default_factory=IronDistances)
    playing_style: str = ""
    current_struggles: tuple[str, ...] = ()
    practice_frequency: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to the camelCase wire shape."""
        return {
            "name": self.name,
            "email": self.email,
            "handicap": self.handicap,
            "experience": self.experience,
            "height": self.height,
            "strength": self.strength,
            "swingSpeed": self.swing_speed,
            "typicalIronDistances": self.iron_distances.to_dict(),
            "playingStyle": self.playing_style,
            "currentStruggles": list(self.current_struggles),
            "practiceFrequency": self.practice_frequency,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "QuestionnaireAnswers":
        """Create from the camelCase wire shape.

        Missing or mistyped fields become empty values, numbers become
        text. Only a payload that is not an object raises AnswersFormatError.
        """
        if not isinstance(data, dict):
            raise AnswersFormatError("Answers payload must be a JSON object")

        return cls(
            name=_text(data, "name"),
            email=_text(data, "email"),
            handicap=_text(data, "handicap"),
            experience=_text(data, "experience"),
            height=_text(data, "height"),
            strength=_text(data, "strength"),
            swing_speed=_text(data, "swingSpeed"),
            iron_distances=IronDistances.from_dict(data.get("typicalIronDistances")),
            playing_style=_text(data, "playingStyle"),
            current_struggles=_as_struggles(data.get("currentStruggles")),
            practice_frequency=_text(data, "practiceFrequency"),
        )

    def get_field(self, name: str) -> Any:
        """Look up a field by its wire name, e.g. ``typicalIronDistances.sevenIron``."""
        if name.startswith("typicalIronDistances."):
            return self.iron_distances.to_dict()[name.split(".", 1)[1]]
        return self.to_dict()[name]

    def with_field(self, name: str, value: Any) -> "QuestionnaireAnswers":
        """Return a copy with one field (by wire name) replaced."""
        if name.startswith("typicalIronDistances."):
            key = name.split(".", 1)[1]
            if key not in ("sevenIron", "fourIron"):
                raise KeyError(name)
            distances = self.iron_distances.to_dict()
            distances[key] = _as_text(value)
            return replace(self, iron_distances=IronDistances.from_dict(distances))
        if name not in _WIRE_TO_ATTR:
            raise KeyError(name)
        if name == "currentStruggles":
            value = _as_struggles(value)
        else:
            value = _as_text(value)
        return replace(self, **{_WIRE_TO_ATTR[name]: value})


_WIRE_TO_ATTR = {
    "name": "name",
    "email": "email",
    "handicap": "handicap",
    "experience": "experience",
    "height": "height",
    "strength": "strength",
    "swingSpeed": "swing_speed",
    "playingStyle": "playing_style",
    "currentStruggles": "current_struggles",
    "practiceFrequency": "practice_frequency",
}
