# -*- coding: utf-8 -*-
"""
Extraction hand-off service.

Sends each uploaded PDF to the remote extraction function, stamps the batch
metadata and per-type scoring rules onto the returned questions, and stores
them. The extraction algorithm itself runs remotely.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence

from app.config import Config
from models.question import Question, QuestionTypeConfig
from services.exceptions import ValidationException
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class ExtractionRequest:
    """Everything the wizard hands to extraction."""
    files: List[Path]
    course_id: str
    slot: str
    part: str
    year: int
    question_type_settings: Dict[str, QuestionTypeConfig]

    def metadata(self) -> Dict[str, Any]:
        """Batch metadata in wire form (camelCase keys)."""
        return {
            "courseId": self.course_id,
            "slot": self.slot,
            "part": self.part,
            "year": self.year,
            "questionTypeSettings": {
                question_type: config.to_dict()
                for question_type, config in self.question_type_settings.items()
            },
        }

    def to_payload(self) -> Dict[str, Any]:
        """Full hand-off payload, files included as paths."""
        payload = self.metadata()
        payload["files"] = [str(f) for f in self.files]
        return payload


@dataclass
class ExtractionResult:
    """Outcome of one extraction batch."""
    files_processed: int = 0
    questions_saved: int = 0
    questions_skipped: int = 0
    skipped_types: List[str] = field(default_factory=list)


def validate_upload_files(files: Sequence[Path], max_mb: Optional[int] = None) -> List[Path]:
    """
    Check files before they are accepted by the upload step.

    Returns:
        The files as Path objects, in the given order

    Raises:
        ValidationException: with one message per rejected file
    """
    limit_mb = max_mb if max_mb is not None else Config.MAX_UPLOAD_MB
    paths = [Path(f) for f in files]
    errors = []

    for path in paths:
        if path.suffix.lower() != Config.PDF_EXTENSION:
            errors.append(tr("validation.not_pdf", name=path.name))
        elif not path.is_file():
            errors.append(tr("validation.file_missing", name=path.name))
        elif path.stat().st_size > limit_mb * 1024 * 1024:
            errors.append(tr("validation.file_too_large", name=path.name, limit=limit_mb))

    if errors:
        raise ValidationException(errors[0], field="files", errors=errors, context="upload")

    return paths


class ExtractionService:
    """Runs an extraction batch against the remote function and store."""

    def __init__(self, api_client=None):
        if api_client is None:
            from services.api_client import get_api_client
            api_client = get_api_client()
        self.api = api_client

    def build_questions(
        self,
        raw_questions: List[Dict[str, Any]],
        request: ExtractionRequest,
        result: ExtractionResult
    ) -> List[Question]:
        """Stamp batch metadata and scoring rules; drop unconfigured types."""
        questions = []
        for raw in raw_questions:
            question_type = raw.get("question_type")
            config = request.question_type_settings.get(question_type)
            if config is None:
                result.questions_skipped += 1
                if question_type not in result.skipped_types:
                    result.skipped_types.append(question_type)
                continue

            question = Question(
                question_type=question_type,
                question_statement=raw.get("question_statement", ""),
                course_id=request.course_id,
                options=raw.get("options") or [],
                answer=raw.get("answer"),
                solution=raw.get("solution"),
                year=request.year,
                slot=request.slot,
                part=request.part,
            )
            question.apply_config(config)
            questions.append(question)
        return questions

    def run(
        self,
        request: ExtractionRequest,
        progress_callback: Optional[Callable[[int, int], None]] = None
    ) -> ExtractionResult:
        """
        Extract every file in order, then store all questions in one insert.

        Any RemoteError propagates and nothing is stored.
        """
        result = ExtractionResult()
        questions: List[Question] = []
        metadata = request.metadata()
        total = len(request.files)

        logger.info(f"Extraction started: {total} file(s) for course {request.course_id}")

        for index, path in enumerate(request.files, start=1):
            raw_questions = self.api.extract_questions(path, metadata)
            logger.info(f"{Path(path).name}: {len(raw_questions)} question(s) extracted")
            questions.extend(self.build_questions(raw_questions, request, result))
            result.files_processed += 1
            if progress_callback:
                progress_callback(index, total)

        stored = self.api.insert_questions([q.to_insert_row() for q in questions])
        result.questions_saved = len(stored)

        if result.questions_skipped:
            logger.warning(
                f"Skipped {result.questions_skipped} question(s) of unconfigured types: "
                f"{result.skipped_types}"
            )
        logger.info(f"Extraction finished: {result.questions_saved} question(s) saved")
        return result
