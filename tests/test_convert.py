import math

import pytest

from puzzleres.convert import (
    num_to_str,
    str_to_double,
    str_to_int,
    to_lower_case,
    to_string,
    to_upper_case,
)
from puzzleres.errors import PuzzleError


@pytest.mark.parametrize("num", [0, 7, -5, 123456, -2147483648, 2147483647])
def test_num_to_str_round_trip(num):
    assert str_to_int(num_to_str(num)) == num


def test_num_to_str_negative():
    assert num_to_str(-5) == "-5"


def test_str_to_int_plain():
    assert str_to_int("42") == 42


def test_str_to_int_sign_and_leading_space():
    assert str_to_int("  -17") == -17
    assert str_to_int("+3") == 3


@pytest.mark.parametrize("text", ["", "   ", "abc", "12a", "4 ", "1_000", "0x10", "+"])
def test_str_to_int_rejects(text):
    with pytest.raises(PuzzleError) as info:
        str_to_int(text)
    assert info.value.message == f"Invalid integer '{text}'"


def test_str_to_double_plain():
    assert str_to_double("1.5") == 1.5
    assert str_to_double("-0.25") == -0.25


def test_str_to_double_forms():
    assert str_to_double(".5") == 0.5
    assert str_to_double("2.") == 2.0
    assert str_to_double(" 1e3") == 1000.0


def test_str_to_double_special_values():
    assert math.isinf(str_to_double("inf"))
    assert str_to_double("-Infinity") < 0
    assert math.isnan(str_to_double("nan"))


def test_str_to_double_hex():
    assert str_to_double("0x1p3") == float.fromhex("0x1p3")


@pytest.mark.parametrize("text", ["", "1e", "1.5x", "abc", ".", "1.0 ", "0x"])
def test_str_to_double_rejects(text):
    with pytest.raises(PuzzleError) as info:
        str_to_double(text)
    assert info.value.message == f"Invalid double '{text}'"


def test_case_conversion_round_trip():
    text = "Einstein Puzzle"
    assert to_upper_case(to_lower_case(text)) == text.upper()
    assert to_lower_case(to_upper_case(text)) == text.lower()


def test_case_conversion_keeps_length():
    text = "straße İstanbul"
    assert len(to_upper_case(text)) == len(text)
    assert len(to_lower_case(text)) == len(text)


def test_case_conversion_cyrillic():
    assert to_upper_case("привет") == "ПРИВЕТ"


def test_to_string_int_and_str():
    assert to_string(42) == num_to_str(42)
    assert to_string("text") == "text"


def test_to_string_bool():
    assert to_string(True) == "1"
    assert to_string(False) == "0"


def test_to_string_float_six_significant_digits():
    assert to_string(1.5) == "1.5"
    assert to_string(1 / 3) == "0.333333"
    assert str_to_double(to_string(2.0)) == 2.0