# -*- coding: utf-8 -*-
"""
Extractor Context - State of the question extraction wizard.

Holds the selection (exam, course, slot, part, year), the per-type scoring
settings and the uploaded files. Completion and step visibility are never
stored; they are derived from the current state on every read.
"""

from pathlib import Path
from typing import Dict, List, Optional, Sequence

from app.config import Config
from models.course import Course
from models.exam import Exam
from models.question import QuestionTypeConfig
from services.exceptions import ValidationException
from services.extraction_service import ExtractionRequest
from services.wizard.step_validator import StepValidator
from ui.wizards.framework import WizardContext
from utils.logger import get_logger

logger = get_logger(__name__)


class ExtractorContext(WizardContext):
    """Context for the question extraction wizard."""

    def __init__(self):
        super().__init__()
        self.exam: Optional[Exam] = None
        self.course: Optional[Course] = None
        self.slot: str = ""
        self.part: str = ""
        self.year: int = Config.DEFAULT_YEAR
        self.question_type_settings: Dict[str, QuestionTypeConfig] = {}
        self.uploaded_files: List[Path] = []

    def _get_reference_prefix(self) -> str:
        return "EXT"

    # =========================================================================
    # Derived state
    # =========================================================================

    @property
    def is_config_complete(self) -> bool:
        """Whether upload and extraction may be offered."""
        return StepValidator.is_config_complete(self)

    def visible_steps(self) -> List[int]:
        return StepValidator.visible_steps(self)

    # =========================================================================
    # Mutators
    # =========================================================================

    def set_exam(self, exam: Optional[Exam]):
        """Select an exam; a different exam drops the selected course."""
        previous_id = self.exam.id if self.exam else None
        new_id = exam.id if exam else None
        self.exam = exam
        if previous_id != new_id:
            self.course = None
        self._changed()

    def set_course(self, course: Optional[Course]):
        self.course = course
        self._changed()

    def set_slot(self, slot: str):
        self.slot = slot or ""
        self._changed()

    def set_part(self, part: str):
        self.part = part or ""
        self._changed()

    def set_year(self, year: int):
        self.year = max(Config.YEAR_MIN, min(Config.YEAR_MAX, int(year)))
        self._changed()

    def set_question_type(self, question_type: str, config: QuestionTypeConfig):
        """Add or replace the config of one question type."""
        self.question_type_settings[question_type] = config
        self._changed()

    def update_question_type_field(self, question_type: str, field_name: str, value: Optional[float]):
        """Change one scoring/timing field of a configured type."""
        config = self.question_type_settings.get(question_type)
        if config is None:
            return
        setattr(config, field_name, value)
        self._changed()

    def remove_question_type(self, question_type: str):
        if self.question_type_settings.pop(question_type, None) is not None:
            self._changed()

    def set_uploaded_files(self, files: Sequence[Path]):
        """Replace the uploaded files wholesale."""
        self.uploaded_files = [Path(f) for f in files]
        self._changed()

    def reset(self):
        """
        Clear everything for the next batch.

        The year is kept.
        """
        self.exam = None
        self.course = None
        self.slot = ""
        self.part = ""
        self.question_type_settings = {}
        self.uploaded_files = []
        logger.info(f"Wizard {self.reference_number} reset (year kept: {self.year})")
        self.reference_number = self._generate_reference_number()
        self._changed()

    # =========================================================================
    # Hand-off
    # =========================================================================

    def to_extraction_request(self) -> ExtractionRequest:
        """
        Build the extraction hand-off.

        Raises:
            ValidationException: configuration incomplete or no files
        """
        is_valid, message = StepValidator.validate_step(StepValidator.STEP_EXTRACT, self)
        if not is_valid:
            raise ValidationException(message, context="extraction")

        return ExtractionRequest(
            files=list(self.uploaded_files),
            course_id=self.course.id,
            slot=self.slot,
            part=self.part,
            year=self.year,
            question_type_settings={
                question_type: QuestionTypeConfig.from_dict(config.to_dict())
                for question_type, config in self.question_type_settings.items()
            },
        )

