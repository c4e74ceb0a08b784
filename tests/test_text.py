import pytest

from pushswap.text import atoi, itoa, split, strlcat, strnstr, strtrim, substr


@pytest.mark.parametrize("number", [0, 1, -1, 42, -42, 2147483647, -2147483648])
def test_atoi_itoa_round_trip(number):
    assert atoi(itoa(number)) == number


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n\v\f\r-42abc") == -42
    assert atoi("+17 9") == 17


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("-") == 0
    assert atoi("") == 0


def test_atoi_double_sign_gives_zero():
    assert atoi("--5") == 0
    assert atoi("+-5") == 0


def test_atoi_wraps_like_32_bit_int():
    assert atoi("2147483648") == -2147483648
    assert atoi("-2147483648") == -2147483648


def test_itoa_negative_has_sign():
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(0) == "0"


def test_itoa_rejects_non_integer():
    with pytest.raises(TypeError):
        itoa("7")
    with pytest.raises(TypeError):
        itoa(True)


def test_split_drops_empty_pieces():
    assert split("  4 3  2 1 ", " ") == ["4", "3", "2", "1"]


def test_split_only_delimiters_is_empty():
    assert split("   ", " ") == []
    assert split("", " ") == []


def test_split_join_round_trip():
    words = ["alpha", "beta", "gamma"]
    assert split(",".join(words), ",") == words


def test_split_rejects_long_delimiter():
    with pytest.raises(ValueError):
        split("a b", "  ")


def test_strtrim_removes_set_from_both_ends():
    assert strtrim("xxhelloxyx", "xy") == "hello"


def test_strtrim_all_trimmed_is_empty():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_set_keeps_text():
    assert strtrim("  a  ", "") == "  a  "


def test_strtrim_keeps_inner_characters():
    assert strtrim("-a-b-", "-") == "a-b"


def test_substr_basic():
    assert substr("hello world", 6, 5) == "world"


def test_substr_length_beyond_end():
    assert substr("hello", 2, 100) == "llo"


def test_substr_start_beyond_end_is_empty():
    assert substr("hello", 10, 3) == ""
    assert substr("hello", 5, 3) == ""


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strnstr_empty_little_found_at_start():
    assert strnstr("haystack", "", 0) == 0


def test_strnstr_finds_within_length():
    text = "lorem ipsum dolor"
    position = strnstr(text, "ipsum", len(text))
    assert text[position:position + len("ipsum")] == "ipsum"


def test_strnstr_match_must_fit_in_length():
    assert strnstr("lorem ipsum", "ipsum", 10) is None
    assert strnstr("lorem ipsum", "ipsum", 11) == 6


def test_strnstr_absent():
    assert strnstr("abc", "z", 3) is None


def test_strlcat_fits():
    result, tried = strlcat("foo", "bar", 10)
    assert result == "foobar"
    assert tried == len("foo") + len("bar")


def test_strlcat_truncates_to_size_minus_one():
    result, tried = strlcat("foo", "barbaz", 6)
    assert len(result) == 5
    assert result == "fooba"
    assert tried == len("foo") + len("barbaz")


def test_strlcat_size_not_larger_than_dst():
    result, tried = strlcat("hello", "xy", 3)
    assert result == "hello"
    assert tried == len("xy") + 3


def test_strlcat_zero_size():
    result, tried = strlcat("", "abc", 0)
    assert result == ""
    assert tried == 3


def test_strlcat_negative_size_raises():
    with pytest.raises(ValueError):
        strlcat("a", "b", -1)