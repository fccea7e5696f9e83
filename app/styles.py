# -*- coding: utf-8 -*-
"""
Application stylesheet for PyQt5.
"""

from .config import Config


def get_stylesheet() -> str:
    """Generate the main application stylesheet."""
    return f"""
    QMainWindow, QScrollArea, #wizardHost {{
        background-color: {Config.BACKGROUND_COLOR};
    }}

    QLabel {{
        color: {Config.TEXT_COLOR};
    }}

    QLineEdit, QComboBox, QSpinBox, QDoubleSpinBox, QPlainTextEdit {{
        background-color: white;
        border: 1px solid {Config.BORDER_COLOR};
        border-radius: 4px;
        padding: 4px 8px;
    }}

    QLineEdit:focus, QComboBox:focus, QPlainTextEdit:focus {{
        border: 1px solid {Config.PRIMARY_COLOR};
    }}

    QPushButton:disabled {{
        background-color: #D1D5DB;
        color: #9CA3AF;
    }}

    QProgressBar {{
        border: none;
        background-color: #E5E7EB;
        border-radius: 3px;
    }}

    QProgressBar::chunk {{
        background-color: {Config.PRIMARY_COLOR};
        border-radius: 3px;
    }}
    """
