"""
Message Catalogs

Display strings for reporters and the CLI. A Messages instance is passed
explicitly to whatever renders output; scoring never uses it.
"""

import logging
import os
import re
from pathlib import Path
from typing import Any, Optional

import yaml

logger = logging.getLogger(__name__)

LOCALES_DIR = Path(__file__).parent / "locales"
DEFAULT_LANGUAGE = "en"
LANGUAGE_ENV_VAR = "FRONTEND_ASSESSOR_LANG"

SUPPORTED_LANGUAGES = {
    "en": "English",
    "ru": "Русский",
}

PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")


def default_language() -> str:
    """Language named by FRONTEND_ASSESSOR_LANG, English when unset or unsupported."""
    language = os.environ.get(LANGUAGE_ENV_VAR, DEFAULT_LANGUAGE)
    if language not in SUPPORTED_LANGUAGES:
        logger.warning("%s=%s is not supported, using %s", LANGUAGE_ENV_VAR, language, DEFAULT_LANGUAGE)
        return DEFAULT_LANGUAGE
    return language


def _load_catalog(language: str) -> dict:
    with open(LOCALES_DIR / f"{language}.yaml", encoding="utf-8") as f:
        return yaml.safe_load(f)


class Messages:
    """Dotted-key lookup into one language catalog"""

    def __init__(self, language: Optional[str] = None):
        language = language or default_language()
        if language not in SUPPORTED_LANGUAGES:
            logger.warning("Language %s is not supported, using %s", language, DEFAULT_LANGUAGE)
            language = DEFAULT_LANGUAGE
        self.language = language
        self.catalog = _load_catalog(language)

    def _lookup(self, key: str) -> Any:
        value: Any = self.catalog
        for part in key.split("."):
            if not isinstance(value, dict) or part not in value:
                logger.warning('Translation key "%s" not found for language "%s"', key, self.language)
                return None
            value = value[part]
        return value

    def t(self, key: str, **params) -> str:
        """Translate a key, substituting {{name}} placeholders."""
        value = self._lookup(key)
        if not isinstance(value, str):
            return key
        return PLACEHOLDER.sub(lambda m: str(params.get(m.group(1), m.group(0))), value)

    def t_list(self, key: str) -> list[str]:
        value = self._lookup(key)
        return list(value) if isinstance(value, list) else []

    def category(self, name: str) -> str:
        """Localized category title, falling back to the raw name"""
        value = self._lookup(f"categories.{name}")
        return value if isinstance(value, str) else name
