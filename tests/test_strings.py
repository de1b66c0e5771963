import pytest

from cubecaster.libft.strings import (
    split,
    strchr,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


# split

def test_split_drops_empty_pieces():
    assert split("  hello   world  ", " ") == ["hello", "world"]


def test_split_only_separators_gives_empty_list():
    assert split(",,,,", ",") == []


def test_split_empty_text():
    assert split("", ",") == []


def test_split_nul_separator_keeps_whole_text():
    assert split("abc def", "\0") == ["abc def"]


def test_split_accepts_integer_code():
    assert split("a,b", ord(",")) == ["a", "b"]


def test_split_pieces_rejoin_without_separator():
    text = "1,22,,333,"
    pieces = split(text, ",")
    assert "".join(pieces) == text.replace(",", "")
    assert all("," not in piece and piece for piece in pieces)


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


# strtrim

def test_strtrim_both_ends():
    assert strtrim("xxhixyx", "xy") == "hi"


def test_strtrim_empty_set_keeps_text():
    assert strtrim("  a  ", "") == "  a  "


def test_strtrim_everything_removed():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_keeps_inner_characters():
    assert strtrim("-a-b-", "-") == "a-b"


# substr

def test_substr_middle():
    assert substr("raycaster", 3, 4) == "cast"


def test_substr_start_past_end():
    assert substr("abc", 10, 2) == ""


def test_substr_length_clamped():
    assert substr("abcdef", 4, 100) == "ef"


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


# strnstr

def test_strnstr_found():
    assert strnstr("lorem ipsum", "ipsum", 11) == 6


def test_strnstr_needle_beyond_length():
    assert strnstr("lorem ipsum", "ipsum", 10) is None


def test_strnstr_empty_needle():
    assert strnstr("", "", 0) == 0


def test_strnstr_missing():
    assert strnstr("abc", "z", 3) is None


def test_strnstr_negative_length():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)


# strncmp

def test_strncmp_equal_within_count():
    assert strncmp("abc", "abd", 2) == 0


def test_strncmp_sign_of_difference():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0


def test_strncmp_difference_of_codes():
    assert strncmp("a", "c", 1) == ord("a") - ord("c")


def test_strncmp_shorter_string():
    assert strncmp("ab", "abc", 5) == -ord("c")


def test_strncmp_identical():
    assert strncmp("same", "same", 100) == 0


def test_strncmp_zero_count():
    assert strncmp("x", "y", 0) == 0


# strchr / strrchr

def test_strchr_first():
    assert strchr("hello", "l") == 2


def test_strrchr_last():
    assert strrchr("hello", "l") == 3


def test_strchr_nul_is_terminator():
    assert strchr("hello", "\0") == len("hello")
    assert strrchr("hello", 0) == len("hello")


def test_strchr_missing():
    assert strchr("hello", "z") is None
    assert strrchr("hello", "z") is None


def test_strchr_integer_code_wraps():
    assert strchr("abc", ord("b") + 256) == strchr("abc", "b")


def test_strchr_and_strrchr_agree_on_single_occurrence():
    assert strchr("abcdef", "d") == strrchr("abcdef", "d")


# strjoin

def test_strjoin_concatenates():
    assert strjoin("north", "_wall") == "north_wall"


def test_strjoin_missing_side():
    assert strjoin(None, "a") is None
    assert strjoin("a", None) is None


# strlcpy

def test_strlcpy_truncates_and_terminates():
    buf = bytearray(5)
    result = strlcpy(buf, b"hello world", 5)
    assert result == len(b"hello world")
    assert bytes(buf) == b"hell\0"


def test_strlcpy_fits():
    buf = bytearray(b"\xff" * 8)
    assert strlcpy(buf, "abc", 8) == 3
    assert bytes(buf[:4]) == b"abc\0"
    assert bytes(buf[4:]) == b"\xff" * 4


def test_strlcpy_zero_size_writes_nothing():
    buf = bytearray(b"xyz")
    assert strlcpy(buf, b"abc", 0) == 3
    assert bytes(buf) == b"xyz"


def test_strlcpy_size_beyond_buffer():
    with pytest.raises(ValueError):
        strlcpy(bytearray(2), b"abc", 3)


# strlcat

def test_strlcat_appends():
    buf = bytearray(b"ab\0\0\0\0")
    result = strlcat(buf, b"cd", 6)
    assert result == len(b"ab") + len(b"cd")
    assert bytes(buf[:5]) == b"abcd\0"


def test_strlcat_truncates():
    buf = bytearray(b"ab\0\0")
    result = strlcat(buf, b"cdef", 4)
    assert result == len(b"ab") + len(b"cdef")
    assert bytes(buf) == b"abc\0"


def test_strlcat_full_destination_untouched():
    buf = bytearray(b"abcd")
    assert strlcat(buf, b"xy", 4) == 4 + 2
    assert bytes(buf) == b"abcd"


def test_strlcat_negative_size():
    with pytest.raises(ValueError):
        strlcat(bytearray(4), b"a", -1)


# strmapi / striteri

def test_strmapi_uses_index():
    result = strmapi("aaaa", lambda i, ch: ch.upper() if i % 2 else ch)
    assert result == "aAaA"


def test_strmapi_preserves_length():
    text = "wall"
    assert len(strmapi(text, lambda i, ch: "#")) == len(text)


def test_strmapi_missing_argument():
    assert strmapi(None, lambda i, ch: ch) is None
    assert strmapi("abc", None) is None


def test_striteri_edits_in_place():
    chars = list("abc")

    def upper(index, seq):
        seq[index] = seq[index].upper()

    striteri(chars, upper)
    assert "".join(chars) == "ABC"


def test_striteri_stops_at_nul():
    buf = bytearray(b"ab\0cd")
    seen = []
    striteri(buf, lambda index, seq: seen.append(index))
    assert seen == [0, 1]
    assert bytes(buf) == b"ab\0cd"


def test_striteri_without_function_leaves_text():
    chars = list("abc")
    striteri(chars, None)
    assert chars == ["a", "b", "c"]