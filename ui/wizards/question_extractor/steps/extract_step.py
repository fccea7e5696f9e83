# -*- coding: utf-8 -*-
"""
Step 6: Extraction.

Runs the extraction batch on a background thread and reports the result.
On success the wizard resets; on failure the state is left as it was.
"""

from PyQt5.QtWidgets import QLabel, QProgressBar, QPushButton
from PyQt5.QtCore import QThread, pyqtSignal

from app.config import Config
from services.exceptions import ValidationException
from services.extraction_service import ExtractionRequest, ExtractionService
from services.translation_manager import tr
from services.wizard.step_validator import StepValidator
from ui.error_handler import ErrorHandler
from ui.wizards.framework import BaseStep
from utils.logger import get_logger

logger = get_logger(__name__)


class ExtractionWorker(QThread):
    """Background worker for one extraction batch."""

    progress = pyqtSignal(int, int)  # current, total
    completed = pyqtSignal(object)  # ExtractionResult
    failed = pyqtSignal(object)  # Exception

    def __init__(self, service: ExtractionService, request: ExtractionRequest, parent=None):
        super().__init__(parent)
        self.service = service
        self.request = request

    def run(self):
        """Run extraction in background."""
        try:
            result = self.service.run(self.request, self.progress.emit)
        except Exception as e:
            self.failed.emit(e)
            return
        self.completed.emit(result)


class ExtractStep(BaseStep):
    """Summary of the batch and the Extract button."""

    STEP_INDEX = StepValidator.STEP_EXTRACT

    extraction_completed = pyqtSignal(object, object)  # ExtractionRequest, ExtractionResult
    extraction_failed = pyqtSignal(object)  # Exception

    def __init__(self, context, service_factory=None, parent=None):
        super().__init__(context, parent)
        self._service_factory = service_factory or ExtractionService
        self.worker = None

    def setup_ui(self):
        self.summary_label = QLabel()
        self.summary_label.setWordWrap(True)
        self.summary_label.setStyleSheet(f"color: {Config.TEXT_LIGHT};")
        self.main_layout.addWidget(self.summary_label)

        self.progress_bar = QProgressBar()
        self.progress_bar.setTextVisible(False)
        self.progress_bar.setFixedHeight(6)
        self.progress_bar.hide()
        self.main_layout.addWidget(self.progress_bar)

        self.extract_button = QPushButton(tr("button.extract"))
        self.extract_button.setStyleSheet(
            f"background-color: {Config.SUCCESS_COLOR}; color: white; padding: 8px 20px;"
            " border-radius: 6px; font-weight: 600;"
        )
        self.extract_button.clicked.connect(self.start_extraction)
        self.main_layout.addWidget(self.extract_button)

    @property
    def is_running(self) -> bool:
        return self.worker is not None and self.worker.isRunning()

    def start_extraction(self) -> bool:
        """Hand the current configuration to a background worker."""
        if self.is_running:
            return False

        try:
            request = self.context.to_extraction_request()
        except ValidationException as e:
            ErrorHandler.handle(e, self, context="extraction")
            return False

        service = self._service_factory()
        if self.worker is not None:
            self.worker.deleteLater()
        self.worker = ExtractionWorker(service, request, parent=self)
        self._set_running(True, total=len(request.files))
        self.worker.progress.connect(self._on_progress)
        self.worker.completed.connect(self._on_completed)
        self.worker.failed.connect(self._on_failed)
        self.worker.start()
        return True

    def wait_for_worker(self):
        """Block until a running extraction has returned (used on shutdown)."""
        if self.worker is not None:
            self.worker.wait()

    def _set_running(self, running: bool, total: int = 0):
        self.extract_button.setEnabled(not running)
        self.extract_button.setText(tr("button.extracting") if running else tr("button.extract"))
        self.progress_bar.setVisible(running)
        if running:
            self.progress_bar.setRange(0, total)
            self.progress_bar.setValue(0)

    def _on_progress(self, current: int, total: int):
        self.progress_bar.setMaximum(total)
        self.progress_bar.setValue(current)

    def _on_completed(self, result):
        self._set_running(False)
        ErrorHandler.show_success(
            self,
            tr("success.extraction", saved=result.questions_saved, files=result.files_processed)
        )
        self.extraction_completed.emit(self.worker.request, result)

    def _on_failed(self, error: Exception):
        self._set_running(False)
        ErrorHandler.handle(error, self, context="extraction")
        self.extraction_failed.emit(error)

    def populate_data(self):
        ctx = self.context
        if ctx.course is None:
            self.summary_label.clear()
            return
        self.summary_label.setText(tr(
            "label.extract_summary",
            files=len(ctx.uploaded_files),
            course=ctx.course.name,
            slot=ctx.slot.strip(),
            part=ctx.part.strip(),
            year=ctx.year,
        ))
