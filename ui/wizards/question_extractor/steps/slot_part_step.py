# -*- coding: utf-8 -*-
"""
Step 3: Slot, part and year.
"""

from PyQt5.QtWidgets import QGridLayout, QLabel, QLineEdit, QSpinBox

from app.config import Config
from services.translation_manager import tr
from services.wizard.step_validator import StepValidator
from ui.wizards.framework import BaseStep


class SlotPartStep(BaseStep):
    """Free-text slot and part, plus the exam year."""

    STEP_INDEX = StepValidator.STEP_SLOT_PART

    def setup_ui(self):
        grid = QGridLayout()
        grid.setHorizontalSpacing(16)

        grid.addWidget(QLabel(tr("label.slot")), 0, 0)
        self.slot_input = QLineEdit()
        self.slot_input.setPlaceholderText(tr("placeholder.slot"))
        self.slot_input.textChanged.connect(self._on_slot_changed)
        grid.addWidget(self.slot_input, 1, 0)

        grid.addWidget(QLabel(tr("label.part")), 0, 1)
        self.part_input = QLineEdit()
        self.part_input.setPlaceholderText(tr("placeholder.part"))
        self.part_input.textChanged.connect(self._on_part_changed)
        grid.addWidget(self.part_input, 1, 1)

        grid.addWidget(QLabel(tr("label.year")), 0, 2)
        self.year_input = QSpinBox()
        self.year_input.setRange(Config.YEAR_MIN, Config.YEAR_MAX)
        self.year_input.setValue(self.context.year)
        self.year_input.valueChanged.connect(self._on_year_changed)
        grid.addWidget(self.year_input, 1, 2)

        self.main_layout.addLayout(grid)

    def _on_slot_changed(self, text: str):
        self.context.set_slot(text)

    def _on_part_changed(self, text: str):
        self.context.set_part(text)

    def _on_year_changed(self, value: int):
        self.context.set_year(value)

    def populate_data(self):
        if self.slot_input.text() != self.context.slot:
            self.slot_input.blockSignals(True)
            self.slot_input.setText(self.context.slot)
            self.slot_input.blockSignals(False)
        if self.part_input.text() != self.context.part:
            self.part_input.blockSignals(True)
            self.part_input.setText(self.context.part)
            self.part_input.blockSignals(False)
        if self.year_input.value() != self.context.year:
            self.year_input.blockSignals(True)
            self.year_input.setValue(self.context.year)
            self.year_input.blockSignals(False)
