import string

import pytest

from pushswap.chars import isalnum, isalpha, isascii, isdigit, isprint, tolower, toupper

ASCII = [chr(code) for code in range(128)]


@pytest.mark.parametrize("char", ASCII)
def test_isalpha_matches_ascii_letters(char):
    assert isalpha(char) == (char in string.ascii_letters)


@pytest.mark.parametrize("char", ASCII)
def test_isdigit_matches_digits(char):
    assert isdigit(char) == (char in string.digits)


@pytest.mark.parametrize("char", ASCII)
def test_isalnum_is_union(char):
    assert isalnum(char) == (isalpha(char) or isdigit(char))


@pytest.mark.parametrize("char", ASCII)
def test_isprint_matches_printable_without_control_whitespace(char):
    expected = char in string.printable and (char == " " or char not in string.whitespace)
    assert isprint(char) == expected


def test_isprint_bounds():
    assert isprint(32) is True
    assert isprint(126) is True
    assert isprint(31) is False
    assert isprint(127) is False


def test_isascii_bounds():
    assert isascii(0) is True
    assert isascii(127) is True
    assert isascii(128) is False
    assert isascii(-1) is False


def test_non_ascii_letter_is_not_alpha():
    assert isalpha("é") is False


def test_codes_and_chars_agree():
    assert isdigit(ord("7")) == isdigit("7")
    assert isalpha(ord("Q")) == isalpha("Q")


@pytest.mark.parametrize("char", string.ascii_lowercase)
def test_toupper_letters(char):
    assert toupper(char) == char.upper()
    assert tolower(toupper(char)) == char


@pytest.mark.parametrize("char", string.ascii_uppercase)
def test_tolower_letters(char):
    assert tolower(char) == char.lower()
    assert toupper(tolower(char)) == char


@pytest.mark.parametrize("char", string.digits + string.punctuation + " ")
def test_case_conversion_leaves_others(char):
    assert toupper(char) == char
    assert tolower(char) == char


def test_case_conversion_on_codes():
    assert toupper(ord("a")) == ord("A")
    assert tolower(ord("Z")) == ord("z")
    assert toupper(-1) == -1


def test_rejects_multichar_string():
    with pytest.raises(ValueError):
        isalpha("ab")


def test_rejects_non_character():
    with pytest.raises(TypeError):
        isdigit(1.5)