# -*- coding: utf-8 -*-
"""
Question type configuration and extracted question models.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional


# Known question types, in the order the configuration step lists them
QUESTION_TYPES = ("MCQ", "MSQ", "NAT", "Subjective")

# camelCase wire key -> snake_case attribute
_CONFIG_WIRE_KEYS = {
    "correctMarks": "correct_marks",
    "incorrectMarks": "incorrect_marks",
    "skippedMarks": "skipped_marks",
    "partialMarks": "partial_marks",
    "timeMinutes": "time_minutes",
}


@dataclass
class QuestionTypeConfig:
    """
    Scoring and timing rules for one question type.

    A field left as None is "undefined"; zero is a valid value.
    """

    correct_marks: Optional[float] = None
    incorrect_marks: Optional[float] = None
    skipped_marks: Optional[float] = None
    partial_marks: Optional[float] = None
    time_minutes: Optional[float] = None

    def is_fully_defined(self) -> bool:
        """True when all five numeric fields carry a value."""
        return all(getattr(self, f.name) is not None for f in fields(self))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with camelCase wire keys."""
        return {wire: getattr(self, attr) for wire, attr in _CONFIG_WIRE_KEYS.items()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QuestionTypeConfig":
        """Accept either camelCase wire keys or snake_case attribute names."""
        values = {}
        for wire, attr in _CONFIG_WIRE_KEYS.items():
            if wire in data:
                values[attr] = data[wire]
            elif attr in data:
                values[attr] = data[attr]
        return cls(**values)


DEFAULT_TYPE_CONFIGS: Dict[str, QuestionTypeConfig] = {
    "MCQ": QuestionTypeConfig(4, -1, 0, 0, 2),
    "MSQ": QuestionTypeConfig(4, -2, 0, 1, 3),
    "NAT": QuestionTypeConfig(4, 0, 0, 0, 3),
    "Subjective": QuestionTypeConfig(10, 0, 0, 5, 10),
}


def default_config_for(question_type: str) -> QuestionTypeConfig:
    """Fresh copy of the default config for a type (all zeros when unknown)."""
    preset = DEFAULT_TYPE_CONFIGS.get(question_type)
    if preset is None:
        return QuestionTypeConfig(0, 0, 0, 0, 0)
    return QuestionTypeConfig(**{f.name: getattr(preset, f.name) for f in fields(preset)})


@dataclass
class Question:
    """
    A question returned by extraction, stamped with its batch metadata.
    """

    question_type: str
    question_statement: str
    course_id: str
    options: List[str] = field(default_factory=list)
    answer: Optional[str] = None
    solution: Optional[str] = None
    year: Optional[int] = None
    slot: Optional[str] = None
    part: Optional[str] = None
    correct_marks: Optional[float] = None
    incorrect_marks: Optional[float] = None
    skipped_marks: Optional[float] = None
    partial_marks: Optional[float] = None
    time_minutes: Optional[float] = None
    id: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def apply_config(self, config: QuestionTypeConfig):
        """Copy scoring and timing rules onto this question."""
        self.correct_marks = config.correct_marks
        self.incorrect_marks = config.incorrect_marks
        self.skipped_marks = config.skipped_marks
        self.partial_marks = config.partial_marks
        self.time_minutes = config.time_minutes

    def to_insert_row(self) -> Dict[str, Any]:
        """Row for the questions table; server-assigned fields are left out."""
        row = {
            "question_type": self.question_type,
            "question_statement": self.question_statement,
            "options": self.options or None,
            "answer": self.answer,
            "solution": self.solution,
            "course_id": self.course_id,
            "year": self.year,
            "slot": self.slot,
            "part": self.part,
            "correct_marks": self.correct_marks,
            "incorrect_marks": self.incorrect_marks,
            "skipped_marks": self.skipped_marks,
            "partial_marks": self.partial_marks,
            "time_minutes": self.time_minutes,
        }
        return row
