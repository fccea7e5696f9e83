# -*- coding: utf-8 -*-
"""
Wizard Context - Base class for wizard state.

Provides:
- Change notification (listeners re-derive everything from current state)
- Reference number generation
"""

from typing import Callable, List
from datetime import datetime
from abc import ABC, abstractmethod
import uuid


class WizardContext(ABC):
    """
    Base class for wizard context.

    Subclasses call `_changed()` after every mutation and implement
    `reset()` to return to the initial state.
    """

    def __init__(self):
        self.reference_number: str = self._generate_reference_number()
        self._listeners: List[Callable[[], None]] = []

    def _generate_reference_number(self) -> str:
        """
        Generate a unique reference number for one wizard run.

        Format: {PREFIX}-{YYYYMMDDHHMMSS}-{SHORT_UUID}
        Example: EXT-20260118153045-A3F2
        """
        timestamp = datetime.now().strftime("%Y%m%d%H%M%S")
        short_id = uuid.uuid4().hex[:4].upper()
        return f"{self._get_reference_prefix()}-{timestamp}-{short_id}"

    def _get_reference_prefix(self) -> str:
        """Get the prefix for reference number. Override in subclasses."""
        return "WIZ"

    def add_listener(self, callback: Callable[[], None]):
        """Call `callback` after every state change."""
        self._listeners.append(callback)

    def _changed(self):
        """Notify listeners of a state change."""
        for callback in list(self._listeners):
            callback()

    @abstractmethod
    def reset(self):
        """Return the wizard to its initial state."""
        pass
