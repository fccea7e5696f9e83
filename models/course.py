# -*- coding: utf-8 -*-
"""
Course entity model.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Course:
    """A course belongs to exactly one exam."""

    id: str
    exam_id: str
    name: str
    description: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Course":
        """Create Course from a store row."""
        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})
