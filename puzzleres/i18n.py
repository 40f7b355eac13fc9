"""Locale description and locale-specific resource file names."""

import locale as _locale
from dataclasses import dataclass
from typing import NamedTuple

from .convert import to_lower_case, to_upper_case


@dataclass(frozen=True)
class Locale:
    """Language, country and encoding of a locale."""

    language: str = ""
    country: str = ""
    encoding: str = ""

    @classmethod
    def parse(cls, name):
        """Parse a name such as ``ru_RU.KOI8-R``."""
        lang_and_country, dot, encoding = name.partition(".")
        if not dot:
            encoding = ""
        language, underscore, country = lang_and_country.partition("_")
        if not underscore:
            country = ""
        return cls(
            language=to_lower_case(language),
            country=to_upper_case(country),
            encoding=to_upper_case(encoding),
        )


def current_locale():
    """Activate the user's locale and describe it.

    Numeric formatting is reset to the C locale afterwards.
    """
    try:
        name = _locale.setlocale(_locale.LC_ALL, "")
    except _locale.Error:
        name = _locale.setlocale(_locale.LC_ALL, "C")
    _locale.setlocale(_locale.LC_NUMERIC, "C")
    return Locale.parse(name or "")


class FileNameParts(NamedTuple):
    """Parts of a localized file name such as ``story_ru_RU.txt``."""

    name: str
    ext: str
    lang: str
    country: str


def _is_lower_case(text):
    return all("a" <= ch <= "z" for ch in text)


def _is_upper_case(text):
    return all("A" <= ch <= "Z" for ch in text)


def _split_suffix(name):
    """Split a trailing ``_xx`` suffix, or return None when there is none."""
    pos = name.rfind("_")
    if pos <= 0 or len(name) - pos != 3:
        return None
    return name[:pos], name[pos + 1:]


def split_file_name(file_name):
    """Split a file name into name, extension, language and country."""
    pos = file_name.rfind(".")
    if pos <= 0:
        name, ext = file_name, ""
    else:
        name, ext = file_name[:pos], file_name[pos + 1:]

    split = _split_suffix(name)
    if split is None:
        return FileNameParts(name, ext, "", "")

    stem, suffix = split
    if _is_upper_case(suffix):
        country = suffix
        name = stem
        lang = ""
        inner = _split_suffix(name)
        if inner is not None and _is_lower_case(inner[1]):
            name, lang = inner
        return FileNameParts(name, ext, lang, country)
    if _is_lower_case(suffix):
        return FileNameParts(stem, ext, suffix, "")
    return FileNameParts(name, ext, "", "")


def get_score(lang, country, locale):
    """Rate how well a language and country match a locale."""
    if not country and not lang:
        return 1
    score = 0
    if locale.country and locale.country == country:
        score += 2
    if locale.language and locale.language == lang:
        score += 4
    return score