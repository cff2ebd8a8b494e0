import pytest

from libft.strfuncs import (
    atoi,
    itoa,
    strchr,
    strlcat,
    strlcpy,
    strlen,
    strncmp,
    strnstr,
    strrchr,
)


def test_strlen_matches_len():
    assert strlen("hello world") == len("hello world")


def test_strlen_stops_at_nul():
    assert strlen("abc\0def") == strlen("abc")


def test_strlen_empty():
    assert strlen("") == 0


def test_strlcpy_truncates():
    src = "hello"
    assert strlcpy(src, 3) == (src[:2], len(src))


def test_strlcpy_fits():
    src = "hi"
    assert strlcpy(src, 10) == (src, len(src))


def test_strlcpy_zero_size():
    src = "hello"
    assert strlcpy(src, 0) == ("", len(src))


def test_strlcpy_negative_size():
    with pytest.raises(ValueError):
        strlcpy("a", -1)


def test_strlcat_truncates():
    dst, src = "ab", "cdef"
    result, total = strlcat(dst, src, 4)
    assert result == dst + src[:1]
    assert total == len(dst) + len(src)


def test_strlcat_full_append():
    dst, src = "ab", "cd"
    assert strlcat(dst, src, 20) == (dst + src, len(dst) + len(src))


def test_strlcat_size_not_larger_than_dst():
    dst, src = "abc", "de"
    assert strlcat(dst, src, 2) == (dst, len(src) + 2)


def test_strlcat_result_fits_buffer():
    for size in range(1, 12):
        result, _ = strlcat("abc", "defgh", size)
        assert len(result) <= max(size - 1, len("abc"))


def test_strchr_first_occurrence():
    s = "hello"
    assert strchr(s, "l") == s.index("l")


def test_strchr_accepts_code():
    s = "hello"
    assert strchr(s, ord("o")) == s.index("o")


def test_strchr_missing():
    assert strchr("hello", "z") is None


def test_strchr_nul_finds_terminator():
    s = "hello"
    assert strchr(s, 0) == len(s)


def test_strchr_rejects_long_string():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strrchr_last_occurrence():
    s = "hello"
    assert strrchr(s, "l") == s.rindex("l")


def test_strrchr_missing():
    assert strrchr("hello", "q") is None


def test_strrchr_nul_finds_terminator():
    s = "abc"
    assert strrchr(s, "\0") == len(s)


def test_strncmp_equal_prefix():
    assert strncmp("abc", "abd", 2) == 0


def test_strncmp_difference():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")


def test_strncmp_shorter_string():
    assert strncmp("ab", "abc", 5) == -ord("c")


def test_strncmp_zero_count():
    assert strncmp("x", "y", 0) == 0


def test_strncmp_antisymmetric():
    assert strncmp("apple", "apricot", 10) == -strncmp("apricot", "apple", 10)


def test_strnstr_found_within_length():
    big = "Foo Bar Baz"
    assert strnstr(big, "Bar", 7) == big.index("Bar")


def test_strnstr_beyond_length():
    assert strnstr("Foo Bar Baz", "Bar", 6) is None


def test_strnstr_empty_needle():
    assert strnstr("Foo", "", 0) == 0


def test_strnstr_zero_length():
    assert strnstr("Foo", "F", 0) is None


def test_atoi_whitespace_and_sign():
    assert atoi(" \t\n -42abc") == -42


def test_atoi_plus_sign():
    assert atoi("\v\f\r+7") == 7


def test_atoi_double_sign():
    assert atoi("--5") == 0


def test_atoi_int_min():
    assert atoi("-2147483648") == -2147483648


def test_atoi_wraps_on_overflow():
    assert atoi("2147483648") == -2147483648


@pytest.mark.parametrize("n", [0, 1, -1, 42, -987654, 2147483647, -2147483648])
def test_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_zero():
    assert itoa(0) == "0"


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2147483648)