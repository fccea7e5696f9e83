# -*- coding: utf-8 -*-
"""
Question Extractor Wizard Package.

- ExtractorContext: selection, settings and uploaded files
- ExtractorWizard: the step-gated wizard widget
- Steps: one panel per wizard step
"""

from .extractor_context import ExtractorContext
from .extractor_wizard import ExtractorWizard

__all__ = [
    'ExtractorContext',
    'ExtractorWizard'
]
