# -*- coding: utf-8 -*-
"""
Question Extractor Data Models
"""

from .exam import Exam
from .course import Course
from .question import (
    Question,
    QuestionTypeConfig,
    QUESTION_TYPES,
    DEFAULT_TYPE_CONFIGS,
    default_config_for,
)

__all__ = [
    "Exam",
    "Course",
    "Question",
    "QuestionTypeConfig",
    "QUESTION_TYPES",
    "DEFAULT_TYPE_CONFIGS",
    "default_config_for",
]
