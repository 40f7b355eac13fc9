import locale as std_locale

from puzzleres.i18n import (
    FileNameParts,
    Locale,
    current_locale,
    get_score,
    split_file_name,
)


def test_parse_full_locale_name():
    loc = Locale.parse("ru_RU.koi8-r")
    assert (loc.language, loc.country, loc.encoding) == ("ru", "RU", "KOI8-R")


def test_parse_normalises_case():
    loc = Locale.parse("EN_us.utf-8")
    assert loc == Locale("en", "US", "UTF-8")


def test_parse_without_encoding_or_country():
    assert Locale.parse("de") == Locale("de", "", "")


def test_parse_without_encoding():
    assert Locale.parse("fr_CA") == Locale("fr", "CA", "")


def test_current_locale_is_normalised():
    loc = current_locale()
    assert loc.language == loc.language.lower()
    assert loc.country == loc.country.upper()
    assert loc.encoding == loc.encoding.upper()
    assert std_locale.setlocale(std_locale.LC_NUMERIC) == "C"


def test_split_documented_example():
    assert split_file_name("story_ru_RU.txt") == FileNameParts("story", "txt", "ru", "RU")


def test_split_language_only():
    assert split_file_name("rules_de.msg") == FileNameParts("rules", "msg", "de", "")


def test_split_country_only():
    assert split_file_name("rules_DE.msg") == FileNameParts("rules", "msg", "", "DE")


def test_split_mixed_case_suffix_is_not_locale():
    assert split_file_name("rules_De.msg") == FileNameParts("rules_De", "msg", "", "")


def test_split_country_with_invalid_language():
    assert split_file_name("a_XX_RU.txt") == FileNameParts("a_XX", "txt", "", "RU")


def test_split_no_extension():
    assert split_file_name("plain") == FileNameParts("plain", "", "", "")


def test_split_leading_dot_is_not_extension():
    assert split_file_name(".hidden") == FileNameParts(".hidden", "", "", "")


def test_split_suffix_at_start_is_ignored():
    assert split_file_name("_ru.txt") == FileNameParts("_ru", "txt", "", "")


def test_score_locale_independent():
    assert get_score("", "", Locale("ru", "RU", "")) == 1


def test_score_country_and_language():
    loc = Locale("ru", "RU", "")
    assert get_score("ru", "RU", loc) == 6
    assert get_score("ru", "", loc) == 4
    assert get_score("en", "RU", loc) == 2
    assert get_score("en", "US", loc) == 0


def test_score_empty_locale_matches_nothing():
    assert get_score("ru", "", Locale("", "", "")) == 0


def test_language_beats_country():
    loc = Locale("de", "AT", "")
    assert get_score("de", "", loc) > get_score("en", "AT", loc)
    assert get_score("de", "AT", loc) > get_score("de", "", loc)