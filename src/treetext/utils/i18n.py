from __future__ import annotations

"""
Internationalization (i18n) Utility.

Provides a shared manager for user-facing CLI strings. Implements
dot-notation lookup into nested JSON locale files with str.format
interpolation.
"""

import json
import logging
import os
from typing import Any, Dict

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"
LOCALES_REL_PATH = os.path.join("..", "interface", "locales")


class I18n:
    """
    Resource manager for locale-specific string translations.

    Missing keys resolve to the key itself so that a broken catalogue
    never prevents a message from being shown.
    """

    def __init__(self, locale: str = DEFAULT_LOCALE):
        self._locale = locale
        self._translations: Dict[str, Any] = {}
        self.is_loaded = False

        base_dir = os.path.dirname(os.path.abspath(__file__))
        self._locales_path = os.path.abspath(os.path.join(base_dir, LOCALES_REL_PATH))

        self.load_locale(locale)

    def load_locale(self, locale: str) -> None:
        """
        Load a translation dictionary from the locales directory.

        Args:
            locale: ISO identifier for the target language.
        """
        file_path = os.path.join(self._locales_path, f"{locale}.json")

        if not os.path.exists(file_path):
            logger.warning(f"I18n: Locale resource missing at '{file_path}'. Fallback active.")
            self._translations = {}
            self.is_loaded = False
            return

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                self._translations = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"I18n: Corruption in locale file {file_path}: {e}")
            self._translations = {}
            self.is_loaded = False
            return

        self._locale = locale
        self.is_loaded = True
        logger.debug(f"I18n: Loaded locale dictionary: {locale}")

    def t(self, key: str, default: str = "", **kwargs: Any) -> str:
        """
        Resolve and format a translation string using dot-notation.

        Args:
            key: Hierarchical identifier (e.g., 'cli.args.format').
            default: Text used when the key is missing (else the key).
            **kwargs: Values interpolated with str.format.

        Returns:
            str: The translated, formatted string.
        """
        current_val: Any = self._translations
        for k in key.split("."):
            current_val = current_val.get(k) if isinstance(current_val, dict) else None

        if not isinstance(current_val, str):
            current_val = default or key

        if not kwargs:
            return current_val
        try:
            return current_val.format(**kwargs)
        except (KeyError, IndexError, ValueError) as e:
            logger.debug(f"I18n: Interpolation error for '{key}': {e}")
            return current_val


i18n = I18n(DEFAULT_LOCALE)
