# -*- coding: utf-8 -*-
"""
Step 5: PDF upload.
"""

from pathlib import Path
from typing import Sequence

from PyQt5.QtWidgets import QFileDialog, QHBoxLayout, QLabel, QListWidget, QPushButton

from services.exceptions import ValidationException
from services.extraction_service import validate_upload_files
from services.translation_manager import tr
from services.wizard.step_validator import StepValidator
from ui.error_handler import ErrorHandler
from ui.wizards.framework import BaseStep
from utils.logger import get_logger

logger = get_logger(__name__)


class UploadStep(BaseStep):
    """Pick the PDF files to extract from. The selection replaces any earlier one."""

    STEP_INDEX = StepValidator.STEP_UPLOAD

    def setup_ui(self):
        buttons = QHBoxLayout()
        self.choose_button = QPushButton(tr("button.choose_files"))
        self.choose_button.clicked.connect(self._choose_files)
        buttons.addWidget(self.choose_button)

        self.clear_button = QPushButton(tr("button.clear_files"))
        self.clear_button.clicked.connect(lambda: self.set_files([]))
        buttons.addWidget(self.clear_button)
        buttons.addStretch()
        self.main_layout.addLayout(buttons)

        self.status_label = QLabel(tr("label.no_files"))
        self.main_layout.addWidget(self.status_label)

        self.file_list = QListWidget()
        self.file_list.setMaximumHeight(140)
        self.main_layout.addWidget(self.file_list)

    def _choose_files(self):
        paths, _filter = QFileDialog.getOpenFileNames(
            self, tr("button.choose_files"), "", "PDF Files (*.pdf)"
        )
        if paths:
            self.set_files(paths)

    def set_files(self, files: Sequence) -> bool:
        """
        Validate and store the selection.

        Rejected selections are reported and leave the previous files in place.
        """
        try:
            paths = validate_upload_files(files)
        except ValidationException as e:
            ErrorHandler.handle(e, self, context="upload")
            return False

        logger.info(f"{len(paths)} file(s) selected for upload")
        self.context.set_uploaded_files(paths)
        return True

    def populate_data(self):
        files = self.context.uploaded_files
        names = [Path(f).name for f in files]
        current = [self.file_list.item(i).text() for i in range(self.file_list.count())]
        if names != current:
            self.file_list.clear()
            self.file_list.addItems(names)
        if files:
            self.status_label.setText(tr("label.files_selected", count=len(files)))
        else:
            self.status_label.setText(tr("label.no_files"))
        self.clear_button.setEnabled(bool(files))
