from itertools import islice

import pytest

from codepoint_kit.unicode import INVALID, TRUNCATED, codepoints


@pytest.mark.parametrize(
    "code_units, expected",
    [
        (b"hello world", [ord(c) for c in "hello world"]),
        (b"\x41\xC3\xB1\x42", [0x41, 0xF1, 0x42]),
        (b"\x41\xC2\xC3\xB1\x42", [0x41, -3, 0xF1, 0x42]),
        (b"\xC2\xC3", [-3, -2]),
        (b"\x4D\xD0\xB0\xE4\xBA\x8C\xF0\x90\x8C\x82", [0x004D, 0x0430, 0x4E8C, 0x10302]),
        (b"\xC0\xAF", [-3, -3]),
        (b"\xE0\x9F\x80", [-3, -3]),
        (b"\xF4\x80\x83\x92", [0x1000D2]),
        (b"\x41\xE2\x89\xA2\xCE\x91\x2E", [0x0041, 0x2262, 0x0391, 0x002E]),
        (b"\xED\x95\x9C\xEA\xB5\xAD\xEC\x96\xB4", [0xD55C, 0xAD6D, 0xC5B4]),
        (b"\xE6\x97\xA5\xE6\x9C\xAC\xE8\xAA\x9E", [0x65E5, 0x672C, 0x8A9E]),
        (b"\xEF\xBB\xBF\xF0\xA3\x8E\xB4", [0xFEFF, 0x233B4]),
    ],
)
def test_decoding(code_units, expected):
    assert list(codepoints(code_units)) == expected


@pytest.mark.parametrize("byte", [0xC0, 0xC1, *range(0xF5, 0x100)])
def test_disallowed_bytes(byte):
    assert list(codepoints([byte])) == [INVALID]


def test_error_constants():
    assert list(codepoints(b"\xC2\xC3")) == [INVALID, TRUNCATED]


def test_surrogate_encoding_is_rejected():
    assert list(codepoints(b"\xED\xA0\x80")) == [-3, -3]


def test_truncated_sequence_ends_decoding():
    assert list(codepoints(b"A\xF0\x90\x8C")) == [0x41, TRUNCATED]


def test_empty_input():
    assert list(codepoints(b"")) == []


def test_composes_with_iterator_tools():
    view = islice(codepoints(b"hello world"), 1, 7)
    assert [c for c in view if c != ord("l")] == [ord(c) for c in "eo w"]


def test_accepts_any_iterable_of_code_units():
    assert list(codepoints(iter([0x41, 0xC3, 0xB1]))) == [0x41, 0xF1]
    assert list(codepoints(bytearray(b"\xE2\x89\xA2"))) == [0x2262]


@pytest.mark.parametrize("text", ["plain", "ñandú", "日本語", "\U0001F600 emoji", "\U0010FFFF"])
def test_agrees_with_well_formed_text(text):
    assert list(codepoints(text.encode("utf-8"))) == [ord(c) for c in text]


def test_rejects_values_that_are_not_bytes():
    with pytest.raises(ValueError):
        list(codepoints([0x41, 0x100]))