# -*- coding: utf-8 -*-
"""
Question Extractor Application Core Module

MainWindow lives in app.main_window; it is not re-exported here so that
importing the configuration never pulls in the UI.
"""

from .config import Config
from .styles import get_stylesheet

__all__ = ["Config", "get_stylesheet"]
