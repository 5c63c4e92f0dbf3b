"""Decoding of UTF-8 code units into Unicode code points."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

#: Yielded when the input ends in the middle of a multi-byte sequence.
TRUNCATED = -2
#: Yielded for a byte that cannot start or continue a well-formed sequence.
INVALID = -3

_MARKERS = {2: 0xC0 << 6, 3: 0xE0 << 12, 4: 0xF0 << 18}


def _sequence_length(lead: int) -> int:
    if lead < 0xE0:
        return 2
    if lead < 0xF0:
        return 3
    return 4


def _second_unit_ok(lead: int, low: int) -> bool:
    """Apply the restricted second-byte ranges of the well-formedness table."""
    if lead == 0xE0:
        return low >= 0x20
    if lead == 0xED:
        return low < 0x20
    if lead == 0xF0:
        return low >= 0x10
    if lead == 0xF4:
        return low < 0x10
    return True


def codepoints(code_units: Iterable[int]) -> Iterator[int]:
    """Decode UTF-8 code units, yielding code points.

    Ill-formed input does not stop decoding: :data:`INVALID` is yielded for
    each offending subsequence, and :data:`TRUNCATED` once if the input ends
    inside a sequence. A continuation byte that turns out not to be one is
    left in place to start the next sequence.
    """
    units = iter(code_units)
    held: int | None = None
    while True:
        if held is None:
            lead = next(units, None)
            if lead is None:
                return
        else:
            lead, held = held, None

        if not 0 <= lead <= 0xFF:
            raise ValueError(f"code unit out of range: {lead!r}")
        if lead < 0x80:
            yield lead
            continue
        if lead < 0xC2 or lead > 0xF4:
            yield INVALID
            continue

        length = _sequence_length(lead)
        value = lead
        for position in range(1, length):
            unit = next(units, None)
            if unit is None:
                yield TRUNCATED
                return
            low = unit ^ 0x80
            if low >> 6:
                held = unit
                value = INVALID
                break
            if position == 1 and not _second_unit_ok(lead, low):
                value = INVALID
                break
            value = value << 6 ^ low
        else:
            value ^= _MARKERS[length]
        yield value