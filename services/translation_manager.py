# -*- coding: utf-8 -*-
"""Centralized Translation Manager for i18n support."""

from typing import Callable, Dict, List

from app.config import Config
from services.translations.en import EN_TRANSLATIONS
from services.translations.es import ES_TRANSLATIONS
from utils.logger import get_logger

logger = get_logger(__name__)


class TranslationManager:
    """
    Singleton Translation Manager.

    Translations only feed labels and messages; no wizard decision ever
    depends on the text returned here.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._translations: Dict[str, Dict[str, str]] = {
                "es": ES_TRANSLATIONS,
                "en": EN_TRANSLATIONS,
            }
            cls._instance._current_language = cls._instance._resolve(Config.DEFAULT_LANGUAGE)
            cls._instance._listeners: List[Callable] = []
        return cls._instance

    def _resolve(self, lang_code: str) -> str:
        if lang_code in self._translations:
            return lang_code
        logger.warning(f"Unsupported language '{lang_code}', falling back to 'es'")
        return "es"

    def on_language_changed(self, callback: Callable):
        self._listeners.append(callback)

    def set_language(self, lang_code: str):
        lang_code = self._resolve(lang_code)
        if self._current_language != lang_code:
            self._current_language = lang_code
            logger.info(f"Language changed to: {lang_code}")
            for callback in self._listeners:
                try:
                    callback(lang_code)
                except Exception as e:
                    logger.error(f"Language change callback error: {e}")

    def get_language(self) -> str:
        return self._current_language

    def tr(self, key: str, **kwargs) -> str:
        translation = self._translations.get(
            self._current_language, {}
        ).get(key)
        if translation is None:
            return key
        if kwargs:
            try:
                translation = translation.format(**kwargs)
            except (KeyError, ValueError):
                logger.debug(f"Could not format translation '{key}' with {kwargs}")
        return translation

    def has_key(self, key: str) -> bool:
        return key in self._translations.get(self._current_language, {})


_translator = TranslationManager()


def tr(key: str, **kwargs) -> str:
    return _translator.tr(key, **kwargs)


def set_language(lang_code: str):
    _translator.set_language(lang_code)


def get_language() -> str:
    return _translator.get_language()
