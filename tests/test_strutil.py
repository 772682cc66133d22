import pytest

from sigtalk.chars import to_upper
from sigtalk.strutil import (
    atoi,
    itoa,
    split,
    strchr,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    striteri,
    strrchr,
    strtrim,
    substr,
)


@pytest.mark.parametrize("n", [0, 1, -1, 42, -42, 2147483647, -2147483648, 1000000])
def test_atoi_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_atoi_skips_leading_whitespace():
    assert atoi(" \t\n\v\f\r123") == atoi("123") == 123


def test_atoi_stops_at_first_non_digit():
    assert atoi("77abc9") == atoi("77")


def test_atoi_without_digits_is_zero():
    assert atoi("") == 0
    assert atoi("abc") == atoi("") == atoi("+-5")


def test_atoi_negative_sign():
    assert atoi("-15") == -atoi("+15")


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483648") == -2147483648


def test_split_drops_empty_fields():
    assert split(" hello  world ", " ") == ["hello", "world"]


@pytest.mark.parametrize("text", ["a,b,,c", ",,,", "", "no-separators", ",x,"])
def test_split_invariants(text):
    parts = split(text, ",")
    assert all(part and "," not in part for part in parts)
    assert "".join(parts) == text.replace(",", "")


def test_split_accepts_code():
    assert split("a;b", ord(";")) == split("a;b", ";")


def test_split_on_nul_keeps_whole_text():
    assert split("abc", "\0") == ["abc"]
    assert split("", "\0") == []


def test_split_rejects_multi_character_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_strchr_finds_first():
    text = "hello"
    index = strchr(text, "l")
    assert index == text.index("l")
    assert text[index] == "l"


def test_strchr_missing_and_terminator():
    assert strchr("hello", "z") is None
    assert strchr("hello", "\0") == len("hello")


def test_strchr_code_truncated_to_byte():
    assert strchr("abc", 256 + ord("b")) == strchr("abc", "b")


def test_strrchr_finds_last():
    text = "hello"
    assert strrchr(text, "l") == text.rindex("l")
    assert strrchr(text, "q") is None
    assert strrchr(text, "\0") == len(text)


def test_strncmp_equal_and_prefix():
    assert strncmp("abc", "abc", 10) == 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_difference():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strncmp_antisymmetric():
    assert strncmp("apple", "apricot", 7) == -strncmp("apricot", "apple", 7)


def test_strncmp_rejects_negative():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_within_bound():
    big = "foo bar"
    assert strnstr(big, "bar", len(big)) == big.index("bar")
    assert strnstr(big, "bar", len(big) - 1) is None


def test_strnstr_empty_needle_is_at_start():
    assert strnstr("abc", "", 0) == strnstr("abc", "a", 3)
    assert strnstr("abc", "a", 3) == "abc".index("a")


def test_strlcpy_truncates():
    src = "hello"
    assert strlcpy(src, 3) == (src[:2], len(src))
    assert strlcpy(src, 100) == (src, len(src))
    assert strlcpy(src, 0) == ("", len(src))


def test_strlcat_appends_within_size():
    dst, src = "ab", "cdef"
    assert strlcat(dst, src, 4) == (dst + src[:1], len(dst) + len(src))
    assert strlcat(dst, src, 50) == (dst + src, len(dst) + len(src))


def test_strlcat_size_not_larger_than_dst():
    dst, src = "abcd", "xy"
    assert strlcat(dst, src, 2) == (dst, len(src) + 2)


def test_strlcpy_rejects_negative_size():
    with pytest.raises(ValueError):
        strlcpy("abc", -1)


def test_substr_clips_and_bounds():
    text = "minitalk"
    assert substr(text, 4, 100) == text[4:]
    assert substr(text, 0, 4) == text[:4]
    assert substr(text, len(text) + 3, 2) == ""
    assert substr(text, len(text), 2) == ""


def test_substr_rejects_negative_start():
    with pytest.raises(ValueError):
        substr("abc", -1, 1)


def test_strjoin():
    assert strjoin("sig", "talk") == "sigtalk"
    with pytest.raises(TypeError):
        strjoin(None, "x")


def test_strtrim():
    assert strtrim("xxhelloxyx", "xy") == "hello"
    assert strtrim("xyxy", "xy") == ""
    assert strtrim("  keep  ", "") == "  keep  "
    assert strtrim("  keep  ", None) == "  keep  "


def test_strmapi_uses_index_and_char():
    result = strmapi("abcd", lambda i, c: to_upper(c) if i % 2 == 0 else c)
    assert result == "AbCd"
    assert len(strmapi("", lambda i, c: c)) == 0


def test_striteri_mutates_in_place():
    chars = list("abc")
    seen = []

    def visit(index, ch):
        seen.append(index)
        return to_upper(ch) if index == 1 else None

    returned = striteri(chars, visit)
    assert returned is chars
    assert chars == ["a", "B", "c"]
    assert seen == list(range(len(chars)))