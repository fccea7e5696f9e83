# -*- coding: utf-8 -*-
"""
Main application window hosting the extraction wizard.
"""

from PyQt5.QtWidgets import QLabel, QMainWindow, QScrollArea, QVBoxLayout, QWidget
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QFont

from .config import Config
from services.translation_manager import tr
from ui.wizards.question_extractor import ExtractorWizard
from utils.logger import get_logger

logger = get_logger(__name__)


class MainWindow(QMainWindow):
    """Single-page window: header and the scrolling wizard."""

    def __init__(self, api_client=None, parent=None):
        super().__init__(parent)
        self.setWindowTitle(f"{Config.APP_NAME} {Config.VERSION}")
        self.setMinimumSize(Config.WINDOW_MIN_WIDTH, Config.WINDOW_MIN_HEIGHT)

        self.wizard = ExtractorWizard(api_client=api_client)
        self.wizard.wizard_completed.connect(self._on_wizard_completed)

        self._setup_ui()

    def _setup_ui(self):
        host = QWidget()
        host.setObjectName("wizardHost")
        layout = QVBoxLayout(host)
        layout.setContentsMargins(32, 24, 32, 24)
        layout.setSpacing(8)

        title = QLabel(tr("app.title"))
        title_font = QFont()
        title_font.setPointSize(20)
        title_font.setBold(True)
        title.setFont(title_font)
        title.setAlignment(Qt.AlignCenter)
        layout.addWidget(title)

        subtitle = QLabel(tr("app.subtitle"))
        subtitle.setAlignment(Qt.AlignCenter)
        subtitle.setStyleSheet(f"color: {Config.TEXT_LIGHT}; margin-bottom: 16px;")
        layout.addWidget(subtitle)

        layout.addWidget(self.wizard)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(host)
        self.setCentralWidget(scroll)

    def start(self):
        """Kick off the initial data load after the window is shown."""
        self.wizard.start()

    def _on_wizard_completed(self, payload: dict):
        logger.info(
            f"Batch {payload.get('reference_number')} finished: "
            f"{payload.get('questions_saved')} saved, {payload.get('questions_skipped')} skipped"
        )

    def closeEvent(self, event):
        """Let running background calls return before the window is destroyed."""
        self.wizard.shutdown()
        super().closeEvent(event)
