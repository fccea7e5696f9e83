# -*- coding: utf-8 -*-
"""
Base Step - Abstract base class for wizard steps.

Steps are stacked panels; the wizard shows or hides each one from the
context state. All steps should inherit from this class and implement:
- setup_ui(): Create the step's widgets
- populate_data(): Sync widgets with the context
"""

from typing import Optional
from abc import ABCMeta, abstractmethod

from PyQt5.QtWidgets import QFrame, QLabel, QVBoxLayout, QWidget
from PyQt5.QtGui import QFont

from app.config import Config
from services.wizard.step_validator import StepValidator


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QFrame), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class BaseStep(QFrame, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for wizard steps.

    Provides the card frame and the step title. Steps write user input
    straight into the context; the wizard re-derives visibility from it.
    """

    STEP_INDEX: int = -1

    def __init__(self, context: 'WizardContext', parent: Optional[QWidget] = None):
        """
        Initialize the step.

        Args:
            context: The wizard context for data sharing
            parent: Parent widget
        """
        super().__init__(parent)
        self.context = context
        self._is_initialized = False

        self.setObjectName("wizardStep")
        self.setStyleSheet(f"""
            QFrame#wizardStep {{
                background-color: {Config.CARD_BACKGROUND};
                border: 1px solid {Config.BORDER_COLOR};
                border-radius: 8px;
            }}
        """)

        self.main_layout = QVBoxLayout(self)
        self.main_layout.setContentsMargins(20, 20, 20, 20)
        self.main_layout.setSpacing(12)

        self.title_label = QLabel(StepValidator.get_step_name(self.STEP_INDEX))
        title_font = QFont()
        title_font.setPointSize(12)
        title_font.setBold(True)
        self.title_label.setFont(title_font)
        self.main_layout.addWidget(self.title_label)

    def initialize(self):
        """Build the UI once."""
        if not self._is_initialized:
            self.setup_ui()
            self._is_initialized = True

    @abstractmethod
    def setup_ui(self):
        """Create all widgets and layouts. Called once."""
        pass

    @abstractmethod
    def populate_data(self):
        """
        Sync widgets with the context.

        Called after every context change while the step is visible, so
        implementations must not write back into the context.
        """
        pass
