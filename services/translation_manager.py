# -*- coding: utf-8 -*-
"""Centralized lookup for user-visible text."""

from typing import Dict

from utils.logger import get_logger

logger = get_logger(__name__)


class TranslationManager:
    """Singleton holding the message catalogue for the active language."""

    _instance = None
    DEFAULT_LANGUAGE = "en"

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._current_language = cls.DEFAULT_LANGUAGE
            cls._instance._translations = cls._load_translations()
        return cls._instance

    @staticmethod
    def _load_translations() -> Dict[str, Dict[str, str]]:
        from services.translations.en import EN_TRANSLATIONS
        return {"en": EN_TRANSLATIONS}

    def tr(self, key: str, **kwargs) -> str:
        translation = self._translations.get(self._current_language, {}).get(key)
        if translation is None:
            return key
        if kwargs:
            try:
                translation = translation.format(**kwargs)
            except (KeyError, ValueError):
                logger.debug(f"Could not format '{key}' with {kwargs}")
        return translation


_translator = TranslationManager()


def tr(key: str, **kwargs) -> str:
    return _translator.tr(key, **kwargs)

