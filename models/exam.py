# -*- coding: utf-8 -*-
"""
Exam entity model.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Exam:
    """
    Top-level category for questions (e.g. JEE Main, GATE).

    Timestamps are kept as the ISO strings the store returns.
    """

    id: str
    name: str
    description: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Exam":
        """Create Exam from a store row."""
        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})
