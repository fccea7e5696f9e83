# -*- coding: utf-8 -*-
"""
Step 1: Exam selection.

Lists exams from the store and lets the user add a new one. A new exam is
appended to the list locally and becomes selectable right away.
"""

from typing import List

from controllers.base_controller import OperationResult
from controllers.exam_controller import ExamController
from models.exam import Exam
from services.translation_manager import tr
from services.wizard.step_validator import StepValidator
from ui.components.registry_selector import RegistrySelector
from ui.error_handler import ErrorHandler
from ui.wizards.framework import BaseStep
from utils.logger import get_logger

logger = get_logger(__name__)


class ExamSelectionStep(BaseStep):
    """Select or create the exam."""

    STEP_INDEX = StepValidator.STEP_EXAM

    def __init__(self, context, controller: ExamController, parent=None):
        super().__init__(context, parent)
        self.controller = controller

    def setup_ui(self):
        self.selector = RegistrySelector(
            placeholder=tr("placeholder.exam"),
            toggle_text=tr("button.new_exam"),
            add_text=tr("button.add_exam"),
            name_placeholder=tr("placeholder.exam_name"),
        )
        self.selector.item_selected.connect(self._on_exam_selected)
        self.selector.add_requested.connect(self.add_exam)
        self.main_layout.addWidget(self.selector)

        self.controller.exams_loaded.connect(self._on_exams_changed)
        self.controller.exam_created.connect(lambda _exam: self._on_exams_changed(self.controller.exams))
        self.controller.operation_finished.connect(self._on_operation_finished)
        self.controller.loading_changed.connect(self.selector.set_busy)

    def load_exams(self):
        """Fetch exams; a failure is reported and leaves an empty list."""
        self.controller.load_exams()

    def add_exam(self, name: str, description: str = ""):
        if self.controller.create_exam(name, description):
            self.selector.set_adding(True)

    def _on_exam_selected(self, exam_id: str):
        exam = self.controller.find_exam(exam_id)
        if exam is None:
            return
        logger.debug(f"Exam selected: {exam.name}")
        self.context.set_exam(exam)

    def _on_exams_changed(self, exams: List[Exam]):
        selected = self.context.exam
        self.selector.set_items(exams, selected.id if selected else None)
        self.populate_data()

    def _on_operation_finished(self, operation: str, result: OperationResult):
        if operation == "create_exam":
            self.selector.set_adding(False)

        if not result.success:
            ErrorHandler.handle(result.error, self, context=ExamController.FAILURES[operation][0])
            return

        if operation == "create_exam":
            self.selector.reset_form()
            ErrorHandler.show_success(self, result.message)

    def populate_data(self):
        exam = self.context.exam
        if exam is None:
            self.selector.set_current(None)
        elif self.selector.current_id() != exam.id or self.selector.details_label.isHidden():
            self.selector.set_current(exam.id, exam.description)
