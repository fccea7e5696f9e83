# -*- coding: utf-8 -*-
"""
Question Extractor Wizard.

All six steps live in one scrolling column. A step is revealed once its
predicate over the context holds and stays revealed while it keeps holding;
visibility is recomputed after every context change, so editing an earlier
step re-gates the later ones immediately.
"""

from functools import partial
from typing import List, Optional

from PyQt5.QtWidgets import QVBoxLayout, QWidget
from PyQt5.QtCore import pyqtSignal

from controllers.course_controller import CourseController
from controllers.exam_controller import ExamController
from services.extraction_service import ExtractionService
from ui.wizards.framework import BaseStep
from utils.logger import get_logger

from .extractor_context import ExtractorContext
from .steps import (
    CourseSelectionStep,
    ExamSelectionStep,
    ExtractStep,
    QuestionTypeStep,
    SlotPartStep,
    UploadStep,
)

logger = get_logger(__name__)


class ExtractorWizard(QWidget):
    """Exam -> course -> slot/part/year -> question types -> upload -> extract."""

    # Emitted with the finished batch's hand-off payload before the reset
    wizard_completed = pyqtSignal(dict)

    def __init__(
        self,
        api_client=None,
        extraction_service_factory=None,
        context: Optional[ExtractorContext] = None,
        parent: Optional[QWidget] = None
    ):
        super().__init__(parent)
        self.context = context or ExtractorContext()
        self.exam_controller = ExamController(api_client, parent=self)
        self.course_controller = CourseController(api_client, parent=self)

        if extraction_service_factory is None and api_client is not None:
            extraction_service_factory = partial(ExtractionService, api_client)

        self.exam_step = ExamSelectionStep(self.context, self.exam_controller)
        self.course_step = CourseSelectionStep(self.context, self.course_controller)
        self.slot_part_step = SlotPartStep(self.context)
        self.question_type_step = QuestionTypeStep(self.context)
        self.upload_step = UploadStep(self.context)
        self.extract_step = ExtractStep(self.context, extraction_service_factory)

        self.steps: List[BaseStep] = [
            self.exam_step,
            self.course_step,
            self.slot_part_step,
            self.question_type_step,
            self.upload_step,
            self.extract_step,
        ]

        self._setup_ui()

        self.extract_step.extraction_completed.connect(self._on_extraction_completed)
        self.extract_step.extraction_failed.connect(self._on_extraction_failed)
        self.context.add_listener(self.refresh)
        self.refresh()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(16)
        for step in self.steps:
            step.initialize()
            layout.addWidget(step)
        layout.addStretch()

    def start(self):
        """Load the exam list. Called once the window is up."""
        self.exam_step.load_exams()

    # =========================================================================
    # Gating
    # =========================================================================

    def refresh(self):
        """Re-derive step visibility from the context and resync visible steps."""
        visible = self.context.visible_steps()
        for index, step in enumerate(self.steps):
            shown = index in visible
            step.setHidden(not shown)
            if shown:
                step.populate_data()
        logger.debug(f"Visible steps: {visible}")

    # =========================================================================
    # Completion
    # =========================================================================

    def _on_extraction_completed(self, request, result):
        payload = request.to_payload()
        payload["reference_number"] = self.context.reference_number
        payload["questions_saved"] = result.questions_saved
        payload["questions_skipped"] = result.questions_skipped
        self.wizard_completed.emit(payload)
        self.reset()

    def _on_extraction_failed(self, error):
        logger.warning(f"Batch {self.context.reference_number} not stored; selection kept for retry")

    def reset(self):
        """Return to the initial state; the year is kept."""
        self.course_controller.clear()
        self.exam_step.selector.reset_form()
        self.course_step.selector.reset_form()
        self.context.reset()

    def shutdown(self):
        """Wait for background calls before the widgets go away."""
        self.exam_controller.wait_for_workers()
        self.course_controller.wait_for_workers()
        self.extract_step.wait_for_worker()
