import pytest

from tetrifit.chars import to_upper
from tetrifit.transform import (
    strcat,
    strclr,
    strdup,
    striter,
    striteri,
    strjoin,
    strlcat,
    strmap,
    strmapi,
    strncat,
    strncpy,
    strnew,
    strsplit,
    strsub,
    strtrim,
)


def test_strdup_returns_equal_text():
    assert strdup("fillit") == "fillit"
    assert strdup("") == ""


def test_strdup_rejects_non_string():
    with pytest.raises(TypeError):
        strdup(None)


def test_strncpy_pads_with_nul():
    result = strncpy("ab", 6)
    assert len(result) == 6
    assert result.rstrip("\0") == "ab"
    assert set(result[2:]) == {"\0"}


def test_strncpy_truncates():
    src = "abcdefgh"
    result = strncpy(src, 3)
    assert len(result) == 3
    assert src.startswith(result)


def test_strncpy_negative_length():
    with pytest.raises(ValueError):
        strncpy("abc", -1)


def test_strcat_invariants():
    first, second = "#..#", "..##"
    result = strcat(first, second)
    assert result.startswith(first)
    assert result.endswith(second)
    assert len(result) == len(first) + len(second)


@pytest.mark.parametrize("length", [0, 1, 3, 10])
def test_strncat_limits_appended_part(length):
    first, second = "abc", "defg"
    result = strncat(first, second, length)
    assert result.startswith(first)
    assert len(result) == len(first) + min(length, len(second))
    assert second.startswith(result[len(first):])


def test_strncat_negative_length():
    with pytest.raises(ValueError):
        strncat("a", "b", -2)


def test_strlcat_size_not_larger_than_dest():
    dest, src = "hello", "world"
    text, total = strlcat(dest, src, 3)
    assert text == dest
    assert total == len(src) + 3


def test_strlcat_truncates_to_size():
    dest, src = "hello", "world"
    text, total = strlcat(dest, src, 8)
    assert total == len(dest) + len(src)
    assert len(text) == 7
    assert text.startswith(dest)
    assert src.startswith(text[len(dest):])


def test_strlcat_enough_room():
    dest, src = "ab", "cd"
    text, total = strlcat(dest, src, 100)
    assert text == strcat(dest, src)
    assert total == len(text)


def test_strlcat_negative_size():
    with pytest.raises(ValueError):
        strlcat("a", "b", -1)


def test_strsub_whole_text():
    text = "tetrimino"
    assert strsub(text, 0, len(text)) == text


@pytest.mark.parametrize("cut", [0, 2, 5, 9])
def test_strsub_pieces_join_back(cut):
    text = "tetrimino"
    assert strsub(text, 0, cut) + strsub(text, cut, len(text) - cut) == text


def test_strsub_out_of_range():
    with pytest.raises(ValueError):
        strsub("abc", 2, 5)
    with pytest.raises(ValueError):
        strsub("abc", -1, 1)


def test_strjoin_matches_strcat():
    assert strjoin("foo", "bar") == strcat("foo", "bar")


def test_strjoin_none():
    assert strjoin(None, "bar") is None
    assert strjoin("foo", None) is None


def test_strtrim_strips_space_tab_newline():
    assert strtrim("  \t hello world \n") == "hello world"


def test_strtrim_all_whitespace():
    assert strtrim(" \n\t ") == ""
    assert strtrim("") == ""


def test_strtrim_keeps_other_whitespace_and_is_idempotent():
    assert strtrim("\rx\r") == "\rx\r"
    once = strtrim("  a b  ")
    assert strtrim(once) == once


def test_strtrim_none():
    assert strtrim(None) is None


def test_strsplit_drops_empty_words():
    assert strsplit("**hello*world***", "*") == ["hello", "world"]


def test_strsplit_invariants():
    text = "a,,b,c,,,d"
    words = strsplit(text, ",")
    assert all(words)
    assert all("," not in word for word in words)
    assert ",".join(words).replace(",", "") == text.replace(",", "")


def test_strsplit_empty_and_none():
    assert strsplit("", " ") == []
    assert strsplit("   ", " ") == []
    assert strsplit(None, " ") is None


def test_strsplit_bad_separator():
    with pytest.raises(ValueError):
        strsplit("a b", "ab")


def test_strmap_upper():
    assert strmap("abc", to_upper) == "ABC"


def test_strmap_identity_and_none():
    assert strmap("fill it", lambda c: c) == "fill it"
    assert strmap(None, lambda c: c) is None


def test_strmapi_passes_indices():
    seen = []

    def record(index, ch):
        seen.append((index, ch))
        return ch

    text = "tetris"
    assert strmapi(text, record) == text
    assert seen == list(enumerate(text))


def test_striter_visits_every_character():
    seen = []
    striter("abcd", seen.append)
    assert seen == list("abcd")


def test_striter_without_function_does_nothing():
    seen = []
    striter("", seen.append)
    striter("abc", None)
    assert seen == []


def test_striteri_visits_indices():
    seen = []
    striteri("xyz", lambda i, c: seen.append((i, c)))
    assert seen == list(enumerate("xyz"))


def test_strnew_is_zeroed():
    buffer = strnew(5)
    assert len(buffer) == 5
    assert all(byte == 0 for byte in buffer)


def test_strnew_negative():
    with pytest.raises(ValueError):
        strnew(-1)


def test_strclr_zeroes_bytes():
    buffer = bytearray(b"hello")
    strclr(buffer)
    assert len(buffer) == 5
    assert all(byte == 0 for byte in buffer)


def test_strclr_stops_at_first_zero():
    buffer = bytearray(b"ab\0cd")
    strclr(buffer)
    assert buffer[:3] == bytearray(3)
    assert buffer[3:] == b"cd"


def test_strclr_character_list():
    buffer = list("ab\0c")
    strclr(buffer)
    assert buffer[:3] == ["\0", "\0", "\0"]
    assert buffer[3] == "c"