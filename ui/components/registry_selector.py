# -*- coding: utf-8 -*-
"""
Registry selector - drop-down of stored records with an inline "add" form.

Used by the exam and course steps. The widget only shows data and reports
user intent through signals; controllers do the actual work.
"""

from typing import List, Optional

from PyQt5.QtWidgets import (
    QComboBox, QFrame, QHBoxLayout, QLabel, QLineEdit,
    QPlainTextEdit, QPushButton, QVBoxLayout, QWidget
)
from PyQt5.QtCore import pyqtSignal

from app.config import Config
from services.translation_manager import tr


class RegistrySelector(QWidget):
    """Combo box + details + collapsible add form."""

    item_selected = pyqtSignal(str)  # record id
    add_requested = pyqtSignal(str, str)  # name, description

    def __init__(
        self,
        placeholder: str,
        toggle_text: str,
        add_text: str,
        name_placeholder: str,
        parent: Optional[QWidget] = None
    ):
        super().__init__(parent)
        self._add_text = add_text

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(10)

        self.combo = QComboBox()
        self.combo.addItem(placeholder, None)
        self.combo.currentIndexChanged.connect(self._on_index_changed)
        layout.addWidget(self.combo)

        self.details_label = QLabel()
        self.details_label.setWordWrap(True)
        self.details_label.setStyleSheet(
            f"background-color: #EFF6FF; color: {Config.PRIMARY_DARK};"
            " padding: 10px; border-radius: 6px;"
        )
        self.details_label.hide()
        layout.addWidget(self.details_label)

        self.toggle_button = QPushButton(f"+ {toggle_text}")
        self.toggle_button.setFlat(True)
        self.toggle_button.setStyleSheet(f"color: {Config.PRIMARY_COLOR}; text-align: left;")
        self.toggle_button.clicked.connect(self.toggle_form)
        layout.addWidget(self.toggle_button)

        # Add form
        self.form = QFrame()
        self.form.setStyleSheet(
            f"QFrame {{ background-color: #F9FAFB; border: 1px solid {Config.BORDER_COLOR};"
            " border-radius: 6px; }"
        )
        form_layout = QVBoxLayout(self.form)
        form_layout.setContentsMargins(12, 12, 12, 12)

        form_layout.addWidget(QLabel(tr("label.name")))
        self.name_input = QLineEdit()
        self.name_input.setPlaceholderText(name_placeholder)
        form_layout.addWidget(self.name_input)

        form_layout.addWidget(QLabel(tr("label.description")))
        self.description_input = QPlainTextEdit()
        self.description_input.setPlaceholderText(tr("placeholder.description"))
        self.description_input.setFixedHeight(60)
        form_layout.addWidget(self.description_input)

        buttons = QHBoxLayout()
        self.add_button = QPushButton(add_text)
        self.add_button.setStyleSheet(
            f"background-color: {Config.PRIMARY_COLOR}; color: white; padding: 6px 14px;"
            " border-radius: 4px;"
        )
        self.add_button.clicked.connect(self._on_add_clicked)
        buttons.addWidget(self.add_button)

        self.cancel_button = QPushButton(tr("button.cancel"))
        self.cancel_button.clicked.connect(self.hide_form)
        buttons.addWidget(self.cancel_button)
        buttons.addStretch()
        form_layout.addLayout(buttons)

        self.form.hide()
        layout.addWidget(self.form)

    # =========================================================================
    # Data
    # =========================================================================

    def set_items(self, items: List, selected_id: Optional[str] = None):
        """
        Rebuild the drop-down.

        Args:
            items: Records with `id` and `name` attributes
            selected_id: Record to keep selected, if present
        """
        self.combo.blockSignals(True)
        while self.combo.count() > 1:
            self.combo.removeItem(1)
        for item in items:
            self.combo.addItem(item.name, item.id)
        self.combo.blockSignals(False)
        self.set_current(selected_id)

    def set_current(self, record_id: Optional[str], description: Optional[str] = None):
        """Select a record without emitting `item_selected`."""
        index = self.combo.findData(record_id) if record_id else 0
        self.combo.blockSignals(True)
        self.combo.setCurrentIndex(max(index, 0))
        self.combo.blockSignals(False)
        self.show_details(self.combo.currentText() if index > 0 else None, description)

    def current_id(self) -> Optional[str]:
        return self.combo.currentData()

    def item_ids(self) -> List[str]:
        return [self.combo.itemData(i) for i in range(1, self.combo.count())]

    def show_details(self, name: Optional[str], description: Optional[str] = None):
        if not name:
            self.details_label.hide()
            return
        text = f"<b>{name}</b>"
        if description:
            text += f"<br>{description}"
        self.details_label.setText(text)
        self.details_label.show()

    # =========================================================================
    # Add form
    # =========================================================================

    def toggle_form(self):
        self.form.setVisible(self.form.isHidden())

    def hide_form(self):
        self.form.hide()

    def reset_form(self):
        self.name_input.clear()
        self.description_input.clear()
        self.hide_form()

    def set_busy(self, busy: bool):
        """Lock the drop-down while its list is being fetched."""
        self.combo.setEnabled(not busy)

    def set_adding(self, adding: bool):
        """Disable the add button while a create call is running."""
        self.add_button.setEnabled(not adding)
        self.add_button.setText(tr("button.adding") if adding else self._add_text)

    def _on_add_clicked(self):
        self.add_requested.emit(self.name_input.text(), self.description_input.toPlainText())

    def _on_index_changed(self, index: int):
        record_id = self.combo.itemData(index)
        if record_id:
            self.item_selected.emit(record_id)
