# -*- coding: utf-8 -*-
"""
Tests for the extraction hand-off service.
"""

import pytest

from models.question import QuestionTypeConfig
from services.exceptions import NetworkException, ValidationException
from services.extraction_service import (
    ExtractionRequest,
    ExtractionService,
    validate_upload_files,
)


@pytest.fixture
def request_for(pdf_files, mcq_config):
    return ExtractionRequest(
        files=list(pdf_files),
        course_id="c1",
        slot="Morning",
        part="A",
        year=2024,
        question_type_settings={"MCQ": mcq_config},
    )


class TestExtractionRequest:

    def test_payload_uses_wire_keys(self, request_for):
        payload = request_for.to_payload()

        assert payload["courseId"] == "c1"
        assert payload["slot"] == "Morning"
        assert payload["part"] == "A"
        assert payload["year"] == 2024
        assert payload["questionTypeSettings"]["MCQ"] == {
            "correctMarks": 4,
            "incorrectMarks": -1,
            "skippedMarks": 0,
            "partialMarks": 0,
            "timeMinutes": 2,
        }
        assert [p.split("/")[-1] for p in payload["files"]] == ["paper1.pdf", "paper2.pdf"]


class TestExtractionService:

    def test_questions_are_stamped_and_stored(self, fake_api, request_for):
        fake_api.extracted = {
            "paper1.pdf": [
                {"question_type": "MCQ", "question_statement": "2+2?", "options": ["3", "4"], "answer": "4"},
            ],
            "paper2.pdf": [
                {"question_type": "MCQ", "question_statement": "3+3?"},
            ],
        }

        result = ExtractionService(fake_api).run(request_for)

        assert result.files_processed == 2
        assert result.questions_saved == 2
        assert result.questions_skipped == 0
        first = fake_api.inserted[0]
        assert first["course_id"] == "c1"
        assert first["year"] == 2024
        assert first["slot"] == "Morning"
        assert first["part"] == "A"
        assert first["correct_marks"] == 4
        assert first["incorrect_marks"] == -1
        assert first["time_minutes"] == 2
        assert first["options"] == ["3", "4"]
        assert fake_api.inserted[1]["options"] is None

    def test_unconfigured_types_are_skipped(self, fake_api, request_for):
        fake_api.extracted = {
            "paper1.pdf": [
                {"question_type": "MCQ", "question_statement": "a"},
                {"question_type": "Subjective", "question_statement": "b"},
                {"question_type": "Subjective", "question_statement": "c"},
            ],
        }

        result = ExtractionService(fake_api).run(request_for)

        assert result.questions_saved == 1
        assert result.questions_skipped == 2
        assert result.skipped_types == ["Subjective"]

    def test_progress_is_reported_per_file(self, fake_api, request_for):
        progress = []

        ExtractionService(fake_api).run(request_for, lambda current, total: progress.append((current, total)))

        assert progress == [(1, 2), (2, 2)]

    def test_remote_failure_stores_nothing(self, fake_api, request_for):
        fake_api.fail_on.add("extract_questions")

        with pytest.raises(NetworkException):
            ExtractionService(fake_api).run(request_for)

        assert "insert_questions" not in fake_api.calls
        assert fake_api.inserted == []

    def test_zero_valued_config_is_applied(self, fake_api, request_for):
        request_for.question_type_settings = {"NAT": QuestionTypeConfig(0, 0, 0, 0, 0)}
        fake_api.extracted = {"paper1.pdf": [{"question_type": "NAT", "question_statement": "x"}]}

        ExtractionService(fake_api).run(request_for)

        assert fake_api.inserted[0]["correct_marks"] == 0
        assert fake_api.inserted[0]["time_minutes"] == 0


class TestUploadValidation:

    def test_accepts_pdfs_in_order(self, pdf_files):
        assert validate_upload_files([str(p) for p in reversed(pdf_files)]) == list(reversed(pdf_files))

    def test_rejects_non_pdf(self, tmp_path):
        notes = tmp_path / "notes.txt"
        notes.write_text("hello")

        with pytest.raises(ValidationException) as exc_info:
            validate_upload_files([notes])

        assert exc_info.value.field == "files"
        assert "notes.txt" in exc_info.value.message

    def test_rejects_missing_file(self, tmp_path):
        with pytest.raises(ValidationException):
            validate_upload_files([tmp_path / "gone.pdf"])

    def test_rejects_oversized_file(self, pdf_files):
        with pytest.raises(ValidationException) as exc_info:
            validate_upload_files(pdf_files, max_mb=0)

        assert len(exc_info.value.errors) == 2
