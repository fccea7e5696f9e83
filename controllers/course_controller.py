# -*- coding: utf-8 -*-
"""
Course Controller
=================
Lists and creates the courses of one exam.
"""

from typing import List, Optional

from PyQt5.QtCore import pyqtSignal

from controllers.base_controller import BaseController, OperationResult
from models.course import Course
from services.translation_manager import tr


class CourseController(BaseController):
    """Controller for the courses of the selected exam."""

    FAILURES = {
        "load_courses": ("course.load", "error.course.load_failed"),
        "create_course": ("course.create", "error.course.create_failed"),
    }

    courses_loaded = pyqtSignal(list)  # List[Course]
    course_created = pyqtSignal(object)  # Course

    def __init__(self, api_client=None, parent=None):
        super().__init__(api_client, parent)
        self._exam_id: Optional[str] = None
        self._courses: List[Course] = []

    @property
    def exam_id(self) -> Optional[str]:
        return self._exam_id

    @property
    def courses(self) -> List[Course]:
        return list(self._courses)

    def find_course(self, course_id: str) -> Optional[Course]:
        for course in self._courses:
            if course.id == course_id:
                return course
        return None

    def clear(self):
        """Forget the current exam and its courses."""
        self._exam_id = None
        self._courses = []
        self.courses_loaded.emit([])

    def load_courses(self, exam_id: str):
        """
        Fetch the courses of an exam ordered by name, in the background.

        The exam becomes current immediately; a list that arrives after
        another exam was chosen is dropped.
        """
        self._exam_id = exam_id
        self._courses = []
        self.courses_loaded.emit([])
        self._run_remote("load_courses", self._fetch_courses, exam_id, tag=exam_id)

    def create_course(self, name: str, description: Optional[str] = None) -> bool:
        """
        Create a course under the current exam, in the background.

        Returns:
            False when no exam is current or the name is blank
        """
        name = (name or "").strip()
        description = (description or "").strip() or None

        if self._exam_id is None:
            self._reject("create_course", tr("validation.exam_required"), "exam_id")
            return False

        if not name:
            self._reject("create_course", tr("validation.course_name_required"), "name")
            return False

        self._run_remote(
            "create_course", self._store_course, self._exam_id, name, description, tag=self._exam_id
        )
        return True

    # Worker-thread calls

    def _fetch_courses(self, exam_id: str) -> List[Course]:
        return [Course.from_dict(row) for row in self.api.list_courses(exam_id)]

    def _store_course(self, exam_id: str, name: str, description: Optional[str]) -> Course:
        return Course.from_dict(self.api.create_course(exam_id, name, description))

    # GUI-thread outcome handling

    def _is_current(self, operation, tag) -> bool:
        if operation == "load_courses":
            return tag == self._exam_id
        return True

    def _handle_success(self, operation, tag, data) -> OperationResult:
        if operation == "load_courses":
            self._courses = list(data)
            self.courses_loaded.emit(self.courses)
            return OperationResult.ok(data=self.courses)

        course = data
        if course.exam_id == self._exam_id and self.find_course(course.id) is None:
            self._courses.append(course)
            self.course_created.emit(course)
        return OperationResult.ok(data=course, message=tr("success.course_added"))

    def _handle_failure(self, operation, tag, error):
        if operation == "load_courses":
            self._courses = []
            self.courses_loaded.emit(self.courses)
