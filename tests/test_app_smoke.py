# -*- coding: utf-8 -*-
"""
Smoke tests to ensure application doesn't break after changes.
These tests verify basic functionality works.
"""
import pytest


def test_imports():
    """Test that all main modules can be imported."""
    try:
        from app.config import Config
        from app.main_window import MainWindow
        from controllers import CourseController, ExamController
        from models import Course, Exam, Question, QuestionTypeConfig
        from services.api_client import QuestionBankApiClient
        from services.extraction_service import ExtractionService
        from ui.wizards.question_extractor import ExtractorWizard
        assert True
    except ImportError as e:
        pytest.fail(f"Import failed: {e}")


def test_config_defaults():
    from app.config import Config

    assert Config.YEAR_MIN < Config.YEAR_MAX
    assert Config.PDF_EXTENSION == ".pdf"
    assert Config.MAX_UPLOAD_MB > 0


def test_stylesheet():
    from app import get_stylesheet

    stylesheet = get_stylesheet()
    assert "QPushButton" in stylesheet


def test_translations():
    from services.translation_manager import tr

    assert tr("step.exam") == "Step 1: Select Exam"
    assert tr("success.extraction", saved=3, files=1) == "Extracted 3 question(s) from 1 file(s)"
    assert tr("no.such.key") == "no.such.key"


def test_logger_writes_to_file():
    from app.config import Config
    from utils.logger import get_logger, setup_logger

    setup_logger()
    get_logger("smoke").info("smoke test")
    assert Config.LOG_PATH.exists()


def test_main_window(qtbot, fake_api):
    from PyQt5.QtCore import QThread
    from app.main_window import MainWindow

    window = MainWindow(api_client=fake_api)
    qtbot.addWidget(window)
    with qtbot.waitSignal(window.wizard.exam_controller.operation_finished, timeout=5000):
        window.start()

    assert window.wizard.exam_step.selector.item_ids() == ["e1", "e2"]
    assert window.wizard.context.visible_steps() == [0]

    window.close()
    assert not any(w.isRunning() for w in window.wizard.exam_controller.findChildren(QThread))
