# -*- coding: utf-8 -*-
"""
Step 2: Course selection for the selected exam.
"""

from typing import List

from controllers.base_controller import OperationResult
from controllers.course_controller import CourseController
from models.course import Course
from services.translation_manager import tr
from services.wizard.step_validator import StepValidator
from ui.components.registry_selector import RegistrySelector
from ui.error_handler import ErrorHandler
from ui.wizards.framework import BaseStep
from utils.logger import get_logger

logger = get_logger(__name__)


class CourseSelectionStep(BaseStep):
    """Select or create a course of the selected exam."""

    STEP_INDEX = StepValidator.STEP_COURSE

    def __init__(self, context, controller: CourseController, parent=None):
        super().__init__(context, parent)
        self.controller = controller

    def setup_ui(self):
        self.selector = RegistrySelector(
            placeholder=tr("placeholder.course"),
            toggle_text=tr("button.new_course"),
            add_text=tr("button.add_course"),
            name_placeholder=tr("placeholder.course_name"),
        )
        self.selector.item_selected.connect(self._on_course_selected)
        self.selector.add_requested.connect(self.add_course)
        self.main_layout.addWidget(self.selector)

        self.controller.courses_loaded.connect(self._on_courses_changed)
        self.controller.course_created.connect(
            lambda _course: self._on_courses_changed(self.controller.courses)
        )
        self.controller.operation_finished.connect(self._on_operation_finished)
        self.controller.loading_changed.connect(self.selector.set_busy)

    def load_courses(self, exam_id: str):
        self.controller.load_courses(exam_id)

    def add_course(self, name: str, description: str = ""):
        if self.controller.create_course(name, description):
            self.selector.set_adding(True)

    def _on_course_selected(self, course_id: str):
        course = self.controller.find_course(course_id)
        if course is None:
            return
        logger.debug(f"Course selected: {course.name}")
        self.context.set_course(course)

    def _on_courses_changed(self, courses: List[Course]):
        selected = self.context.course
        self.selector.set_items(courses, selected.id if selected else None)

    def _on_operation_finished(self, operation: str, result: OperationResult):
        if operation == "create_course":
            self.selector.set_adding(False)

        if not result.success:
            ErrorHandler.handle(result.error, self, context=CourseController.FAILURES[operation][0])
            return

        if operation == "create_course":
            self.selector.reset_form()
            ErrorHandler.show_success(self, result.message)

    def populate_data(self):
        exam = self.context.exam
        if exam is not None and self.controller.exam_id != exam.id:
            self.load_courses(exam.id)

        course = self.context.course
        if course is None:
            self.selector.set_current(None)
        elif self.selector.current_id() != course.id or self.selector.details_label.isHidden():
            self.selector.set_current(course.id, course.description)
