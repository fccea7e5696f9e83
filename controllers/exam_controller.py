# -*- coding: utf-8 -*-
"""
Exam Controller
===============
Lists and creates exams. The exam list is kept in memory and updated
optimistically on create, without re-fetching.
"""

from typing import List, Optional

from PyQt5.QtCore import pyqtSignal

from controllers.base_controller import BaseController, OperationResult
from models.exam import Exam
from services.translation_manager import tr


class ExamController(BaseController):
    """Controller for the exam registry."""

    FAILURES = {
        "load_exams": ("exam.load", "error.exam.load_failed"),
        "create_exam": ("exam.create", "error.exam.create_failed"),
    }

    exams_loaded = pyqtSignal(list)  # List[Exam]
    exam_created = pyqtSignal(object)  # Exam

    def __init__(self, api_client=None, parent=None):
        super().__init__(api_client, parent)
        self._exams: List[Exam] = []

    @property
    def exams(self) -> List[Exam]:
        """Current exam list (copy)."""
        return list(self._exams)

    def find_exam(self, exam_id: str) -> Optional[Exam]:
        for exam in self._exams:
            if exam.id == exam_id:
                return exam
        return None

    def load_exams(self):
        """
        Fetch all exams ordered by name, in the background.

        On failure the list is emptied; `operation_finished` carries the error.
        """
        self._run_remote("load_exams", self._fetch_exams)

    def create_exam(self, name: str, description: Optional[str] = None) -> bool:
        """
        Create an exam in the background and append it to the local list.

        Returns:
            False when the name is blank (no remote call is made)
        """
        name = (name or "").strip()
        description = (description or "").strip() or None

        if not name:
            self._reject("create_exam", tr("validation.exam_name_required"), "name")
            return False

        self._run_remote("create_exam", self._store_exam, name, description)
        return True

    # Worker-thread calls

    def _fetch_exams(self) -> List[Exam]:
        return [Exam.from_dict(row) for row in self.api.list_exams()]

    def _store_exam(self, name: str, description: Optional[str]) -> Exam:
        return Exam.from_dict(self.api.create_exam(name, description))

    # GUI-thread outcome handling

    def _handle_success(self, operation, tag, data) -> OperationResult:
        if operation == "load_exams":
            self._exams = list(data)
            self.exams_loaded.emit(self.exams)
            return OperationResult.ok(data=self.exams)

        exam = data
        if self.find_exam(exam.id) is None:
            self._exams.append(exam)
        self.exam_created.emit(exam)
        return OperationResult.ok(data=exam, message=tr("success.exam_added"))

    def _handle_failure(self, operation, tag, error):
        if operation == "load_exams":
            self._exams = []
            self.exams_loaded.emit(self.exams)
