import pytest

from ayed.strings import (
    byte_index_to_char_index,
    char_count,
    char_index_to_byte_index,
    char_index_to_byte_index_end,
    line_clamped_filled,
)

MULTIBYTE = "héllo wörld ✓"


def test_char_index_zero_is_zero():
    assert char_index_to_byte_index(MULTIBYTE, 0) == 0
    assert char_index_to_byte_index("", 0) == 0


@pytest.mark.parametrize("text", ["", "a", "hello world"])
def test_ascii_char_index_equals_byte_index(text):
    for index in range(len(text) + 1):
        assert char_index_to_byte_index(text, index) == index
    assert char_index_to_byte_index(text, len(text) + 1) is None


def test_multibyte_char_index():
    assert char_index_to_byte_index("é", 1) == len("é".encode("utf-8"))
    assert char_index_to_byte_index(MULTIBYTE, len(MULTIBYTE)) == len(MULTIBYTE.encode("utf-8"))
    assert char_index_to_byte_index(MULTIBYTE, len(MULTIBYTE) + 1) is None


def test_byte_and_char_index_round_trip():
    for index in range(len(MULTIBYTE) + 1):
        byte_index = char_index_to_byte_index(MULTIBYTE, index)
        assert byte_index_to_char_index(MULTIBYTE, byte_index) == index


def test_byte_index_inside_character_rounds_up():
    assert byte_index_to_char_index("é", 1) == 1


def test_byte_index_past_end_is_none():
    assert byte_index_to_char_index(MULTIBYTE, len(MULTIBYTE.encode("utf-8")) + 1) is None


def test_byte_index_end_matches_next_start():
    for index in range(len(MULTIBYTE)):
        assert char_index_to_byte_index_end(MULTIBYTE, index) == char_index_to_byte_index(
            MULTIBYTE, index + 1
        )


def test_byte_index_end_beyond_content():
    size = len(MULTIBYTE.encode("utf-8"))
    assert char_index_to_byte_index_end(MULTIBYTE, len(MULTIBYTE)) == size + 1
    assert char_index_to_byte_index_end(MULTIBYTE, len(MULTIBYTE) + 1) is None


def test_line_clamped_filled_takes_slice():
    assert line_clamped_filled("hello", 1, 3, ".") == "ell"


def test_line_clamped_filled_pads():
    assert line_clamped_filled("hi", 0, 5, ".") == "hi..."


@pytest.mark.parametrize("start,count", [(0, 0), (0, 3), (2, 10), (20, 4)])
def test_line_clamped_filled_length(start, count):
    result = line_clamped_filled(MULTIBYTE, start, count, "_")
    assert char_count(result) == count


def test_char_count_counts_code_points():
    assert char_count("") == 0
    assert char_count(MULTIBYTE) == len(MULTIBYTE)
    assert char_count(MULTIBYTE) < len(MULTIBYTE.encode("utf-8"))