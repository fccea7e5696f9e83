# -*- coding: utf-8 -*-
"""
Shared fixtures: offscreen Qt, an in-memory API client and sample records.
"""
import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from models.course import Course  # noqa: E402
from models.exam import Exam  # noqa: E402
from models.question import QuestionTypeConfig  # noqa: E402
from services.exceptions import ApiException, NetworkException  # noqa: E402


class FakeApiClient:
    """In-memory stand-in for QuestionBankApiClient that records every call."""

    def __init__(self):
        self.exams = [
            {"id": "e2", "name": "JEE", "description": "Joint Entrance"},
            {"id": "e1", "name": "GATE", "description": None},
        ]
        self.courses = [
            {"id": "c1", "exam_id": "e2", "name": "Physics"},
            {"id": "c2", "exam_id": "e2", "name": "Chemistry"},
            {"id": "c3", "exam_id": "e1", "name": "Computer Science"},
        ]
        self.extracted = {}
        self.inserted = []
        self.calls = []
        self.fail_on = set()
        self._next_id = 100

    def _call(self, operation: str):
        self.calls.append(operation)
        if operation in self.fail_on:
            if operation.startswith("create"):
                raise ApiException("insert failed", status_code=500)
            raise NetworkException("connection refused")

    def _new_id(self, prefix: str) -> str:
        self._next_id += 1
        return f"{prefix}{self._next_id}"

    def list_exams(self):
        self._call("list_exams")
        return [dict(e) for e in sorted(self.exams, key=lambda e: e["name"])]

    def create_exam(self, name, description=None):
        self._call("create_exam")
        row = {
            "id": self._new_id("e"),
            "name": name,
            "description": description,
            "created_at": "2026-10-19T10:00:00+00:00",
        }
        self.exams.append(row)
        return dict(row)

    def list_courses(self, exam_id):
        self._call("list_courses")
        rows = [c for c in self.courses if c["exam_id"] == exam_id]
        return [dict(c) for c in sorted(rows, key=lambda c: c["name"])]

    def create_course(self, exam_id, name, description=None):
        self._call("create_course")
        row = {"id": self._new_id("c"), "exam_id": exam_id, "name": name, "description": description}
        self.courses.append(row)
        return dict(row)

    def extract_questions(self, pdf_path, metadata):
        self._call("extract_questions")
        return [dict(q) for q in self.extracted.get(Path(pdf_path).name, [])]

    def insert_questions(self, rows):
        self._call("insert_questions")
        self.inserted.extend(rows)
        return [dict(r, id=self._new_id("q")) for r in rows]


@pytest.fixture
def fake_api():
    return FakeApiClient()


@pytest.fixture
def jee_exam():
    return Exam(id="e1", name="JEE")


@pytest.fixture
def course_c1():
    return Course(id="c1", exam_id="e1", name="Physics")


@pytest.fixture
def mcq_config():
    return QuestionTypeConfig(
        correct_marks=4,
        incorrect_marks=-1,
        skipped_marks=0,
        partial_marks=0,
        time_minutes=2,
    )


@pytest.fixture
def pdf_files(tmp_path):
    """Two small files with a .pdf suffix."""
    paths = []
    for name in ("paper1.pdf", "paper2.pdf"):
        path = tmp_path / name
        path.write_bytes(b"%PDF-1.4\n%%EOF\n")
        paths.append(path)
    return paths
