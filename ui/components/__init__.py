# -*- coding: utf-8 -*-
"""
Question Extractor UI Components
"""

from .toast import Toast
from .registry_selector import RegistrySelector

__all__ = [
    "Toast",
    "RegistrySelector",
]
