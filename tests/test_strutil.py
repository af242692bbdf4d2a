import pytest

from pushswap.strutil import (
    split,
    strchr,
    strdup,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def _buffer(text, size):
    return list(text) + ["\0"] * (size - len(text))


def _text(buf):
    joined = "".join(buf)
    return joined.split("\0", 1)[0]


def test_strlen_counts_to_nul():
    assert strlen("hello") == 5
    assert strlen("ab\0cd") == 2
    assert strlen("") == 0
    assert strlen(None) == 0


def test_split_drops_empty_pieces():
    assert split("  12 -3   45 ", " ") == ["12", "-3", "45"]
    assert split("", " ") == []
    assert split("   ", " ") == []
    assert split(None, " ") is None


def test_split_join_round_trip():
    words = ["one", "two", "three"]
    assert split(" ".join(words), " ") == words
    assert split(",".join(words), ord(",")) == words


def test_split_on_nul_gives_whole_string():
    assert split("a b", "\0") == ["a b"]


def test_strchr_and_strrchr():
    assert strchr("banana", "a") == 1
    assert strrchr("banana", "a") == 5
    assert strchr("banana", "z") is None
    assert strrchr("banana", "z") is None
    assert strchr("banana", "\0") == len("banana")
    assert strrchr("banana", 0) == len("banana")
    assert strchr("banana", ord("n")) == 2


def test_strdup_copies_up_to_nul():
    assert strdup("abc") == "abc"
    assert strdup("abc\0def") == "abc"


def test_striteri_replaces_in_place():
    chars = list("abc") + ["\0", "z"]
    seen = []

    def upper(index, char):
        seen.append(index)
        return char.upper()

    striteri(chars, upper)
    assert chars == ["A", "B", "C", "\0", "z"]
    assert seen == [0, 1, 2]


def test_striteri_none_keeps_characters():
    chars = list("xyz")
    striteri(chars, lambda index, char: None)
    assert chars == list("xyz")
    striteri(None, lambda index, char: char)
    striteri(chars, None)
    assert chars == list("xyz")


def test_strjoin():
    assert strjoin("push", "swap") == "pushswap"
    assert strjoin(None, "swap") == "swap"
    assert strjoin("push", None) == "push"
    assert strjoin(None, None) is None


def test_strlcpy_truncates_and_returns_source_length():
    buf = _buffer("", 4)
    assert strlcpy(buf, "abcdef", 4) == 6
    assert _text(buf) == "abc"
    assert buf[3] == "\0"


def test_strlcpy_size_zero_writes_nothing():
    buf = _buffer("xy", 3)
    assert strlcpy(buf, "abc", 0) == 3
    assert _text(buf) == "xy"


def test_strlcpy_buffer_too_small():
    with pytest.raises(IndexError):
        strlcpy(["\0"], "abc", 10)


def test_strlcat_appends():
    buf = _buffer("ab", 10)
    assert strlcat(buf, "cd", 10) == 4
    assert _text(buf) == "abcd"


def test_strlcat_truncates():
    buf = _buffer("ab", 4)
    assert strlcat(buf, "cdef", 4) == 6
    assert _text(buf) == "abc"


def test_strlcat_size_not_larger_than_existing():
    buf = _buffer("abcd", 6)
    assert strlcat(buf, "xyz", 2) == len("xyz") + 2
    assert _text(buf) == "abcd"


def test_strmapi():
    assert strmapi("abc", lambda index, char: char.upper()) == "ABC"
    assert strmapi("aaa", lambda index, char: str(index)) == "012"
    assert strmapi(None, lambda index, char: char) is None
    assert strmapi("abc", None) is None


def test_strncmp():
    assert strncmp("abc", "abc", 10) == 0
    assert strncmp("abcx", "abcy", 3) == 0
    assert strncmp("abcx", "abcy", 4) == ord("x") - ord("y")
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")
    assert strncmp("a", "b", 0) == 0
    assert strncmp(None, "b", 1) == -1


def test_strnstr():
    assert strnstr("haystack", "", 0) == 0
    assert strnstr("haystack", "st", 8) == 3
    assert strnstr("haystack", "st", 4) is None
    assert strnstr("haystack", "st", 5) == 3
    assert strnstr("haystack", "zz", 8) is None


def test_strtrim():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("  a b  ", " ") == "a b"
    assert strtrim("aaa", "a") == ""
    assert strtrim("  keep  ", "") == "  keep  "
    assert strtrim(None, " ") is None
    assert strtrim("a", None) is None


def test_substr():
    assert substr("pushswap", 4, 4) == "swap"
    assert substr("pushswap", 4, 100) == "swap"
    assert substr("pushswap", 100, 3) == ""
    assert substr(None, 0, 1) is None
    with pytest.raises(ValueError):
        substr("abc", -1, 1)


def test_substr_pieces_rebuild_string():
    text = "abcdefgh"
    pieces = [substr(text, start, 3) for start in range(0, len(text), 3)]
    assert "".join(pieces) == text