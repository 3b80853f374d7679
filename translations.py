"""Locale dictionaries and the translator factory used by pages and the API."""
import logging
import math
import re
from collections.abc import Mapping
from decimal import Decimal
from types import MappingProxyType

from locales.de_de import DE_DE
from locales.en_gb import EN_GB

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en-GB"

LOCALE_LABELS = {
    "en-GB": "English",
    "de-DE": "German",
}

PLACEHOLDER_RE = re.compile(r"\{\{(\w+)\}\}", re.ASCII)
EXPONENT_RE = re.compile(r"e([+-])0*(\d)")


class UnsupportedLocaleError(ValueError):
    def __init__(self, locale):
        self.locale = locale
        super().__init__(f"Unsupported locale: {locale}")


def _freeze(value):
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    return value


TRANSLATIONS = MappingProxyType({
    "en-GB": _freeze(EN_GB),
    "de-DE": _freeze(DE_DE),
})

SUPPORTED_LOCALES = tuple(TRANSLATIONS)


def get_available_locales():
    return list(SUPPORTED_LOCALES)


def is_valid_locale(candidate):
    """Exact, case-sensitive match against the declared locales."""
    return isinstance(candidate, str) and candidate in TRANSLATIONS


def get_translations(locale):
    if not is_valid_locale(locale):
        raise UnsupportedLocaleError(locale)
    return TRANSLATIONS[locale]


def get_nested_value(dictionary, key):
    """Walk a dot-separated key path and return the string leaf.

    Returns None when any segment is missing or when the path ends on
    something other than a string (a nested section, a number, ...).
    An empty string leaf is a valid result.
    """
    if not key:
        return None

    current = dictionary
    for part in key.split("."):
        if isinstance(current, Mapping) and part in current:
            current = current[part]
        else:
            return None

    return current if isinstance(current, str) else None


def _to_text(value):
    """Render a parameter the way JavaScript's String() does."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if not isinstance(value, float):
        return str(value)

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))

    text = repr(value)
    if "e" in text and 1e-6 <= abs(value) < 1e21:
        # plain decimal notation between 1e-6 and 1e21
        return format(Decimal(text), "f")
    return EXPONENT_RE.sub(r"e\1\2", text)


def interpolate(template, params=None):
    """Replace {{name}} placeholders; unknown names are left as they are."""
    if params is None:
        return template

    def replace(match):
        value = params.get(match.group(1))
        return match.group(0) if value is None else _to_text(value)

    return PLACEHOLDER_RE.sub(replace, template)


def create_translator(locale):
    """Return a translation function bound to one supported locale."""
    dictionary = get_translations(locale)

    def t(key, params=None, **kwargs):
        if kwargs:
            params = {**(params or {}), **kwargs}

        value = get_nested_value(dictionary, key)
        if value is None:
            logger.warning('Translation missing for key "%s" in locale "%s"', key, locale)
            return key

        return interpolate(value, params)

    return t


def get_translator(locale=None):
    """Return a translation function, falling back to the default locale."""
    if not is_valid_locale(locale):
        locale = DEFAULT_LOCALE
    return create_translator(locale)
