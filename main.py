#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Question Extractor - Main entry point for the application

Collects exam metadata and scoring rules, uploads PDFs and hands them to
the remote extraction function.
"""

import sys

from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore import Qt

from app.config import Config
from app import get_stylesheet
from app.main_window import MainWindow
from utils.logger import setup_logger


def main():
    """Main application entry point."""

    # Set Qt attributes BEFORE creating QApplication
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    logger = setup_logger()

    try:
        app = QApplication(sys.argv)
        app.setApplicationName(Config.APP_NAME)
        app.setOrganizationName(Config.ORGANIZATION)
        app.setStyleSheet(get_stylesheet())

        logger.info("=" * 80)
        logger.info(f"Starting {Config.APP_NAME} {Config.VERSION}")
        logger.info(f"Store: {Config.SUPABASE_URL}")
        logger.info("=" * 80)

        if not Config.SUPABASE_ANON_KEY:
            logger.warning("SUPABASE_ANON_KEY is not set; the store will reject requests")

        window = MainWindow()
        window.show()
        window.start()
        logger.info(">> Main window created and displayed")

        exit_code = app.exec_()
        logger.info(f"Application closed with exit code: {exit_code}")
        sys.exit(exit_code)

    except Exception as e:
        logger.exception(f"Fatal error during application startup: {e}")
        print(f"\n[ERROR] Fatal error during application startup: {e}")
        print(f"\nPlease check {Config.LOG_PATH} for details")
        sys.exit(1)


if __name__ == "__main__":
    main()
