"""Tests for locale lookup, interpolation and the translator factory."""
import logging
from collections.abc import Mapping

import pytest

from translations import (DEFAULT_LOCALE, UnsupportedLocaleError, create_translator,
                          get_available_locales, get_nested_value, get_translations,
                          get_translator, interpolate, is_valid_locale)


def leaf_paths(node, prefix=""):
    for key, value in node.items():
        path = f"{prefix}.{key}" if prefix else key
        if isinstance(value, Mapping):
            yield from leaf_paths(value, path)
        else:
            yield path, value


# ── Dictionary store ─────────────────────────────────────

def test_available_locales_in_declaration_order():
    assert get_available_locales() == ["en-GB", "de-DE"]
    assert get_available_locales() == get_available_locales()


def test_is_valid_locale_is_exact_and_case_sensitive():
    assert is_valid_locale("en-GB")
    assert is_valid_locale("de-DE")
    assert not is_valid_locale("fr-FR")
    assert not is_valid_locale("en-gb")
    assert not is_valid_locale("en")
    assert not is_valid_locale(" en-GB")
    assert not is_valid_locale("")
    assert not is_valid_locale(None)


def test_get_translations_unsupported_locale():
    with pytest.raises(UnsupportedLocaleError) as exc:
        get_translations("fr-FR")
    assert exc.value.locale == "fr-FR"
    assert str(exc.value) == "Unsupported locale: fr-FR"


def test_translations_are_read_only():
    dictionary = get_translations("en-GB")
    with pytest.raises(TypeError):
        dictionary["common"] = {}
    with pytest.raises(TypeError):
        dictionary["common"]["welcome"] = "Hi"


def test_locales_share_the_same_key_paths():
    en = {path for path, _ in leaf_paths(get_translations("en-GB"))}
    de = {path for path, _ in leaf_paths(get_translations("de-DE"))}
    assert en == de


def test_every_leaf_is_a_string():
    for locale in get_available_locales():
        for path, value in leaf_paths(get_translations(locale)):
            assert isinstance(value, str), (locale, path)


# ── Resolver ─────────────────────────────────────────────

TREE = {
    "a": {"b": {"c": "deep"}},
    "empty": "",
    "count": 3,
    "flag": True,
    "nothing": None,
    "items": ["x", "y"],
    "dotted.key": "unreachable",
}


def test_resolves_nested_leaf():
    assert get_nested_value(TREE, "a.b.c") == "deep"


def test_missing_segment_is_absent():
    assert get_nested_value(TREE, "a.x.c") is None
    assert get_nested_value(TREE, "a.b.c.d") is None
    assert get_nested_value(TREE, "missing") is None


def test_non_string_leaf_is_absent():
    assert get_nested_value(TREE, "a") is None
    assert get_nested_value(TREE, "a.b") is None
    assert get_nested_value(TREE, "count") is None
    assert get_nested_value(TREE, "flag") is None
    assert get_nested_value(TREE, "nothing") is None
    assert get_nested_value(TREE, "items") is None
    assert get_nested_value(TREE, "items.0") is None


def test_empty_string_leaf_is_present():
    assert get_nested_value(TREE, "empty") == ""


def test_empty_path_is_absent():
    assert get_nested_value(TREE, "") is None
    assert get_nested_value({"": "root"}, "") is None


def test_dot_is_always_a_separator():
    assert get_nested_value(TREE, "dotted.key") is None


# ── Interpolator ─────────────────────────────────────────

def test_interpolate_substitutes_placeholder():
    assert interpolate("Hello {{name}}", {"name": "World"}) == "Hello World"


def test_interpolate_without_params_returns_template():
    assert interpolate("Hello {{name}}") == "Hello {{name}}"


def test_interpolate_keeps_unknown_placeholders():
    assert interpolate("Hello {{name}}", {}) == "Hello {{name}}"
    assert interpolate("{{a}} and {{b}}", {"a": 1}) == "1 and {{b}}"


def test_interpolate_numbers():
    template = "Minimum length is {{min}} characters"
    assert interpolate(template, {"min": 8}) == "Minimum length is 8 characters"
    assert interpolate("{{n}}", {"n": 8.0}) == "8"
    assert interpolate("{{n}}", {"n": 2.5}) == "2.5"
    assert interpolate("{{n}}", {"n": 0}) == "0"


def test_interpolate_repeats_and_does_not_recurse():
    assert interpolate("{{x}}-{{x}}", {"x": "y"}) == "y-y"
    assert interpolate("{{a}}", {"a": "{{b}}", "b": "no"}) == "{{b}}"


def test_interpolate_passes_malformed_placeholders_through():
    params = {"name": "World", "first name": "x"}
    assert interpolate("Hello {{name", params) == "Hello {{name"
    assert interpolate("Hello {{first name}}", params) == "Hello {{first name}}"
    assert interpolate("Hello {{ name }}", params) == "Hello {{ name }}"
    assert interpolate("Hello {name}", params) == "Hello {name}"


def test_interpolate_identifier_is_ascii_word():
    assert interpolate("{{größe}}", {"größe": "x"}) == "{{größe}}"
    assert interpolate("{{item_2}}", {"item_2": "ok"}) == "ok"


# ── Translator factory ───────────────────────────────────

def test_create_translator_unsupported_locale_fails_immediately():
    with pytest.raises(UnsupportedLocaleError):
        create_translator("fr-FR")


def test_translator_returns_every_leaf_verbatim():
    for locale in get_available_locales():
        t = create_translator(locale)
        for path, value in leaf_paths(get_translations(locale)):
            if "{{" not in value:
                assert t(path) == value


def test_translator_basic_lookups():
    en = create_translator("en-GB")
    de = create_translator("de-DE")
    assert en("common.welcome") == "Welcome"
    assert de("common.welcome") == "Willkommen"
    assert en("navigation.home") == "Home"
    assert de("navigation.home") == "Startseite"
    assert de("common.save") == "Speichern"
    assert en("errors.notFound") == "Not found"
    assert de("errors.notFound") == "Nicht gefunden"


def test_translator_interpolates_params():
    t = create_translator("en-GB")
    assert t("validation.minLength", {"min": 8}) == "Minimum length is 8 characters"
    assert t("validation.maxLength", max=100) == "Maximum length is 100 characters"
    assert t("common.hello", {"name": "World"}) == "Hello World"
    assert t("common.hello", {}) == "Hello {{name}}"


def test_keyword_params_override_mapping():
    t = create_translator("en-GB")
    assert t("common.hello", {"name": "A"}, name="B") == "Hello B"


def test_missing_key_returns_key_and_warns(caplog):
    t = create_translator("de-DE")
    with caplog.at_level(logging.WARNING, logger="translations"):
        assert t("does.not.exist") == "does.not.exist"
    assert 'Translation missing for key "does.not.exist" in locale "de-DE"' in caplog.text


def test_section_key_behaves_like_missing(caplog):
    t = create_translator("en-GB")
    with caplog.at_level(logging.WARNING, logger="translations"):
        assert t("common") == "common"
    assert len(caplog.records) == 1


def test_missing_key_is_not_interpolated():
    t = create_translator("en-GB")
    assert t("no.{{such}}.key", {"such": "x"}) == "no.{{such}}.key"


def test_translator_is_idempotent():
    t = create_translator("en-GB")
    assert t("dashboard.pages.console.title") == t("dashboard.pages.console.title")
    assert t("missing.key") == t("missing.key")


def test_translators_are_independent():
    en = create_translator("en-GB")
    de = create_translator("de-DE")
    assert en("navigation.console") == "Console"
    assert de("navigation.console") == "Konsole"
    assert en("navigation.console") == "Console"


def test_get_translator_falls_back_to_default_locale():
    assert DEFAULT_LOCALE == "en-GB"
    assert get_translator("fr-FR")("common.welcome") == "Welcome"
    assert get_translator(None)("common.welcome") == "Welcome"
    assert get_translator("de-DE")("common.welcome") == "Willkommen"


def test_interpolate_formats_values_like_javascript():
    assert interpolate("{{v}}", {"v": True}) == "true"
    assert interpolate("{{v}}", {"v": False}) == "false"
    assert interpolate("{{v}}", {"v": float("inf")}) == "Infinity"
    assert interpolate("{{v}}", {"v": float("-inf")}) == "-Infinity"
    assert interpolate("{{v}}", {"v": float("nan")}) == "NaN"
    assert interpolate("{{v}}", {"v": 1e-7}) == "1e-7"
    assert interpolate("{{v}}", {"v": 1.5e-5}) == "0.000015"
    assert interpolate("{{v}}", {"v": 1e21}) == "1e+21"
    assert interpolate("{{v}}", {"v": 1e20}) == "100000000000000000000"
    assert interpolate("{{v}}", {"v": -0.0}) == "0"
