# -*- coding: utf-8 -*-
"""
Step 4: Question type configuration.

One row per known question type: a checkbox to include it and five numeric
fields for its scoring and timing rules. Ticking a type seeds its defaults.
"""

from typing import Dict

from PyQt5.QtWidgets import QCheckBox, QDoubleSpinBox, QGridLayout, QLabel

from models.question import QUESTION_TYPES, default_config_for
from services.translation_manager import tr
from services.wizard.step_validator import StepValidator
from ui.wizards.framework import BaseStep

# (attribute, label key, minimum, maximum, step)
_FIELDS = (
    ("correct_marks", "label.correct_marks", -100.0, 100.0, 0.5),
    ("incorrect_marks", "label.incorrect_marks", -100.0, 100.0, 0.25),
    ("skipped_marks", "label.skipped_marks", -100.0, 100.0, 0.5),
    ("partial_marks", "label.partial_marks", -100.0, 100.0, 0.5),
    ("time_minutes", "label.time_minutes", 0.0, 600.0, 0.5),
)


class QuestionTypeStep(BaseStep):
    """Per-type scoring and timing settings."""

    STEP_INDEX = StepValidator.STEP_QUESTION_TYPES

    def setup_ui(self):
        self.checkboxes: Dict[str, QCheckBox] = {}
        self.spinboxes: Dict[str, Dict[str, QDoubleSpinBox]] = {}

        grid = QGridLayout()
        grid.setHorizontalSpacing(10)
        for column, (_attr, label_key, *_rest) in enumerate(_FIELDS, start=1):
            grid.addWidget(QLabel(tr(label_key)), 0, column)

        for row, question_type in enumerate(QUESTION_TYPES, start=1):
            checkbox = QCheckBox(question_type)
            checkbox.toggled.connect(
                lambda checked, qt=question_type: self.set_type_enabled(qt, checked)
            )
            grid.addWidget(checkbox, row, 0)
            self.checkboxes[question_type] = checkbox

            self.spinboxes[question_type] = {}
            for column, (attr, _label, minimum, maximum, step) in enumerate(_FIELDS, start=1):
                spin = QDoubleSpinBox()
                spin.setRange(minimum, maximum)
                spin.setSingleStep(step)
                spin.setDecimals(2)
                spin.setEnabled(False)
                spin.valueChanged.connect(
                    lambda value, qt=question_type, field=attr: self._on_value_changed(qt, field, value)
                )
                grid.addWidget(spin, row, column)
                self.spinboxes[question_type][attr] = spin

        self.main_layout.addLayout(grid)

    def set_type_enabled(self, question_type: str, enabled: bool):
        """Include or drop a question type."""
        if enabled:
            if question_type not in self.context.question_type_settings:
                self.context.set_question_type(question_type, default_config_for(question_type))
        else:
            self.context.remove_question_type(question_type)

    def _on_value_changed(self, question_type: str, field_name: str, value: float):
        self.context.update_question_type_field(question_type, field_name, value)

    def populate_data(self):
        settings = self.context.question_type_settings
        for question_type, checkbox in self.checkboxes.items():
            config = settings.get(question_type)
            checkbox.blockSignals(True)
            checkbox.setChecked(config is not None)
            checkbox.blockSignals(False)

            for attr, spin in self.spinboxes[question_type].items():
                spin.setEnabled(config is not None)
                value = getattr(config, attr) if config is not None else None
                if value is not None and spin.value() != value:
                    spin.blockSignals(True)
                    spin.setValue(value)
                    spin.blockSignals(False)
