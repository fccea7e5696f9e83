# -*- coding: utf-8 -*-
"""
Wizard Framework - base classes for multi-step wizards.

Provides the shared context and the step panel used by the wizards.
"""

from .base_step import BaseStep
from .wizard_context import WizardContext

__all__ = [
    'BaseStep',
    'WizardContext',
]
