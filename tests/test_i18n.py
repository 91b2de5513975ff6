import logging

import pytest

from assessor.i18n import LOCALES_DIR, SUPPORTED_LANGUAGES, Messages, default_language
from assessor.rules import CATEGORIES


def _leaf_keys(tree: dict, prefix: str = "") -> set[str]:
    keys = set()
    for key, value in tree.items():
        path = f"{prefix}{key}"
        if isinstance(value, dict):
            keys |= _leaf_keys(value, f"{path}.")
        else:
            keys.add(path)
    return keys


def test_substitutes_placeholders():
    messages = Messages("en")
    assert messages.t("assessment.completed", score=82, level="Middle") == "Assessment completed: 82/100 (Middle)"


def test_missing_placeholder_is_left_in_place():
    assert Messages("en").t("assessment.framework") == "Framework: {{framework}}"


def test_missing_key_returns_key(caplog):
    with caplog.at_level(logging.WARNING, logger="assessor.i18n"):
        assert Messages("en").t("report.nope") == "report.nope"
    assert "report.nope" in caplog.text


def test_unknown_language_falls_back_to_english():
    assert Messages("xx").language == "en"


def test_russian_catalog():
    assert Messages("ru").category("performance") == "Производительность"


def test_category_titles():
    messages = Messages("en")
    assert [messages.category(c.name) for c in CATEGORIES] == [c.title for c in CATEGORIES]
    assert messages.category("security") == "security"


def test_t_list():
    criteria = Messages("en").t_list("levels.senior.criteria")
    assert criteria[-1] == "Overall score of 85 or more"
    assert Messages("en").t_list("report.title") == []


def test_time_band_keys():
    messages = Messages("en")
    for band in ("1-2 months", "3-6 months", "6-12 months", "1-2 years", "max level reached"):
        assert messages.t(f"time_bands.{band}") != f"time_bands.{band}"


def test_default_language_from_environment(monkeypatch):
    monkeypatch.setenv("FRONTEND_ASSESSOR_LANG", "ru")
    assert default_language() == "ru"
    assert Messages().language == "ru"


def test_default_language_ignores_unsupported_value(monkeypatch):
    monkeypatch.setenv("FRONTEND_ASSESSOR_LANG", "de")
    assert default_language() == "en"
    assert Messages().language == "en"


@pytest.mark.parametrize("language", sorted(SUPPORTED_LANGUAGES))
def test_catalogs_have_the_same_keys(language):
    assert (LOCALES_DIR / f"{language}.yaml").exists()
    assert _leaf_keys(Messages(language).catalog) == _leaf_keys(Messages("en").catalog)
