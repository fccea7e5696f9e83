# -*- coding: utf-8 -*-
"""
Toast notification component.
"""

from PyQt5.QtWidgets import QLabel, QWidget, QGraphicsOpacityEffect
from PyQt5.QtCore import Qt, QTimer, QPropertyAnimation

from app.config import Config


class Toast(QLabel):
    """Transient, non-blocking notification shown in the top-right corner."""

    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    _COLORS = {
        SUCCESS: Config.SUCCESS_COLOR,
        ERROR: Config.ERROR_COLOR,
        WARNING: Config.WARNING_COLOR,
        INFO: Config.INFO_COLOR,
    }

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("toast")
        self.toast_type = self.INFO
        self.setAlignment(Qt.AlignCenter)
        self.setWordWrap(True)
        self.setMinimumWidth(260)
        self.setMaximumWidth(420)

        self.opacity_effect = QGraphicsOpacityEffect(self)
        self.setGraphicsEffect(self.opacity_effect)
        self.opacity_effect.setOpacity(0)

        self._hide_timer = QTimer(self)
        self._hide_timer.setSingleShot(True)
        self._hide_timer.timeout.connect(self._fade_out)

        self.hide()

    def show_message(self, message: str, toast_type: str = INFO, duration: int = None):
        """
        Show a toast message.

        Args:
            message: Message text
            toast_type: Type (success, error, warning, info)
            duration: Display duration in milliseconds
        """
        self.toast_type = toast_type
        self.setText(message)

        color = self._COLORS.get(toast_type, "#333")
        text_color = "#111" if toast_type == self.WARNING else "white"
        self.setStyleSheet(f"""
            QLabel#toast {{
                background-color: {color};
                color: {text_color};
                padding: 10px 20px;
                border-radius: 6px;
                font-size: 10pt;
            }}
        """)

        # Top-right corner of the parent
        if self.parentWidget():
            parent_rect = self.parentWidget().rect()
            self.adjustSize()
            self.move(parent_rect.width() - self.width() - 24, 24)

        super().show()
        self.raise_()

        self.fade_in = QPropertyAnimation(self.opacity_effect, b"opacity")
        self.fade_in.setDuration(200)
        self.fade_in.setStartValue(0)
        self.fade_in.setEndValue(1)
        self.fade_in.start()

        self._hide_timer.start(duration or Config.TOAST_DURATION_MS)

    def _fade_out(self):
        self.fade_out = QPropertyAnimation(self.opacity_effect, b"opacity")
        self.fade_out.setDuration(300)
        self.fade_out.setStartValue(1)
        self.fade_out.setEndValue(0)
        self.fade_out.finished.connect(self.hide)
        self.fade_out.start()

    @classmethod
    def notify(cls, parent: QWidget, message: str, toast_type: str = INFO, duration: int = None) -> 'Toast':
        """
        Show a toast on the top-level window of `parent`, reusing one toast per window.
        """
        host = parent.window() if parent is not None else None
        toast = host.findChild(Toast, "toast-notification") if host is not None else None
        if toast is None:
            toast = Toast(host)
            toast.setObjectName("toast-notification")

        toast.show_message(message, toast_type, duration)
        return toast
