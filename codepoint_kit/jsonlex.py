"""A streaming JSON lexer that reports what it sees to a visitor."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, Optional

from .unicode import INVALID, TRUNCATED, codepoints

_EOF = -1
_BOM = 0xFEFF

_ERR_VALUE = -10
_ERR_LITERAL = -11
_ERR_OBJECT_MEMBER = -12
_ERR_NAME_SEPARATOR = -13
_ERR_OBJECT_END = -14
_ERR_ARRAY_END = -15
_ERR_XDIGIT = -16
_ERR_DIGIT = -17
_ERR_ESCAPE = -20
_ERR_STRING = -21

_WHITESPACE = frozenset(map(ord, " \t\n\r"))
_ESCAPES = {
    ord('"'): ord('"'),
    ord("\\"): ord("\\"),
    ord("/"): ord("/"),
    ord("b"): ord("\b"),
    ord("f"): ord("\f"),
    ord("n"): ord("\n"),
    ord("r"): ord("\r"),
    ord("t"): ord("\t"),
}
_LITERALS = {
    ord("f"): ("alse", "begin_false", "end_false"),
    ord("n"): ("ull", "begin_null", "end_null"),
    ord("t"): ("rue", "begin_true", "end_true"),
}

EventCallback = Callable[..., Any]


def _isdigit(c: int) -> bool:
    return 0x30 <= c <= 0x39


def _isxdigit(c: int) -> bool:
    return _isdigit(c) or 0x41 <= c <= 0x46 or 0x61 <= c <= 0x66


class LexError(ValueError):
    """Raised when the input is not well-formed JSON or not well-formed UTF-8."""

    def __init__(self, message: str, code: int) -> None:
        super().__init__(message)
        self.code = code


class JsonVisitor:
    """Receives lexing events.

    Every hook forwards its event name and arguments to ``on_event`` when one
    is given; otherwise events are ignored. Subclasses may override any hook.
    """

    on_event: Optional[EventCallback] = None

    def __init__(self, on_event: Optional[EventCallback] = None) -> None:
        self.on_event = on_event

    def _emit(self, name: str, *args: Any) -> None:
        callback = self.on_event
        if callback is not None:
            callback(name, *args)

    def begin_json_text(self) -> None:
        self._emit("begin_json_text")

    def bom(self) -> None:
        self._emit("bom")

    def end_json_text(self) -> None:
        self._emit("end_json_text")

    def begin_whitespace(self) -> None:
        self._emit("begin_whitespace")

    def end_whitespace(self) -> None:
        self._emit("end_whitespace")

    def begin_false(self) -> None:
        self._emit("begin_false")

    def end_false(self) -> None:
        self._emit("end_false")

    def begin_null(self) -> None:
        self._emit("begin_null")

    def end_null(self) -> None:
        self._emit("end_null")

    def begin_true(self) -> None:
        self._emit("begin_true")

    def end_true(self) -> None:
        self._emit("end_true")

    def begin_string(self) -> None:
        self._emit("begin_string")

    def codepoint(self, c: int) -> None:
        self._emit("codepoint", c)

    def end_string(self) -> None:
        self._emit("end_string")

    def begin_array(self) -> None:
        self._emit("begin_array")

    def end_array(self) -> None:
        self._emit("end_array")

    def begin_object(self) -> None:
        self._emit("begin_object")

    def end_object(self) -> None:
        self._emit("end_object")

    def begin_int(self, minus: bool) -> None:
        """Zero can take one of two forms: ``0`` and ``-0``."""
        self._emit("begin_int", minus)

    def end_int(self) -> None:
        self._emit("end_int")

    def begin_frac(self) -> None:
        self._emit("begin_frac")

    def end_frac(self) -> None:
        self._emit("end_frac")

    def begin_exp(self, minus: bool) -> None:
        """Exponents are lax: ``+000`` and ``-00001`` are both accepted."""
        self._emit("begin_exp", minus)

    def end_exp(self) -> None:
        self._emit("end_exp")

    def digit(self, c: str) -> None:
        self._emit("digit", c)


class JsonParser:
    """Lexes JSON from an iterable of code points, driving a visitor.

    Running out of input is not an error: whatever token was open is simply
    left unfinished. Numbers end at the first code point that is not part of
    them.
    """

    def __init__(self, source: Iterable[int], visitor: JsonVisitor | None = None) -> None:
        self._source = iter(source)
        self._visitor = visitor if visitor is not None else JsonVisitor()

    def lex_json_text(self) -> int | None:
        """Lex one JSON text.

        Returns ``None`` when the input was consumed to its end, otherwise
        the first code point that follows the text. Once the input is
        exhausted, further calls keep returning ``None``.
        """
        visitor = self._visitor
        visitor.begin_json_text()
        c = self._next()
        if c == _BOM:
            visitor.bom()
            c = self._next()
        c = self._lex_whitespace(self._lex_value(c))
        visitor.end_json_text()
        return None if c == _EOF else c

    def _next(self) -> int:
        c = next(self._source, _EOF)
        if c == TRUNCATED:
            raise LexError("truncated UTF-8 sequence", TRUNCATED)
        if c == INVALID:
            raise LexError("invalid UTF-8 sequence", INVALID)
        return c

    def _lex_whitespace(self, c: int) -> int:
        self._visitor.begin_whitespace()
        while c in _WHITESPACE:
            c = self._next()
        self._visitor.end_whitespace()
        return c

    def _lex_literal(self, first: int) -> int:
        rest, begin, end = _LITERALS[first]
        getattr(self._visitor, begin)()
        c = self._next()
        for expected in rest:
            if c == _EOF:
                break
            if c != ord(expected):
                raise LexError("malformed literal", _ERR_LITERAL)
            c = self._next()
        getattr(self._visitor, end)()
        return c

    def _lex_4_xdigits(self) -> int | None:
        for _ in range(4):
            c = self._next()
            if c == _EOF:
                return c
            if not _isxdigit(c):
                raise LexError("expected a hexadecimal digit", _ERR_XDIGIT)
        return None

    def _lex_string(self) -> int:
        visitor = self._visitor
        visitor.begin_string()
        while True:
            c = self._next()
            if c == _EOF:
                return c
            if c == ord('"'):
                visitor.end_string()
                return self._next()
            if c == ord("\\"):
                c = self._next()
                if c == _EOF:
                    return c
                if c in _ESCAPES:
                    visitor.codepoint(_ESCAPES[c])
                elif c == ord("u"):
                    if self._lex_4_xdigits() == _EOF:
                        return _EOF
                else:
                    raise LexError("invalid escape", _ERR_ESCAPE)
            elif c < 0x20:
                raise LexError("unescaped control character", _ERR_STRING)
            else:
                visitor.codepoint(c)

    def _lex_digits(self, c: int, end: Callable[[], None]) -> int:
        """Lex one or more digits, then call ``end`` unless input ran out first."""
        if c == _EOF:
            return c
        if not _isdigit(c):
            raise LexError("expected a digit", _ERR_DIGIT)
        while _isdigit(c):
            self._visitor.digit(chr(c))
            c = self._next()
        end()
        return c

    def _lex_number(self, first_digit: int, minus: bool) -> int:
        visitor = self._visitor
        visitor.begin_int(minus)
        visitor.digit(chr(first_digit))
        c = self._next()
        if first_digit != ord("0"):  # zero is always a single digit
            while _isdigit(c):
                visitor.digit(chr(c))
                c = self._next()
        if c == _EOF:
            return c
        visitor.end_int()

        if c == ord("."):
            visitor.begin_frac()
            c = self._lex_digits(self._next(), visitor.end_frac)
        if c in (ord("E"), ord("e")):
            exp_minus = False
            c = self._next()
            if c == ord("-"):
                exp_minus = True
                c = self._next()
            elif c == ord("+"):
                c = self._next()
            visitor.begin_exp(exp_minus)
            c = self._lex_digits(c, visitor.end_exp)
        return c

    def _lex_negative_number(self) -> int:
        c = self._next()
        if c == _EOF:
            return c
        if _isdigit(c):
            return self._lex_number(c, True)
        raise LexError("expected a digit", _ERR_DIGIT)

    def _lex_array(self) -> int:
        visitor = self._visitor
        visitor.begin_array()
        c = self._next()
        while True:
            c = self._lex_value(c)
            if c == _EOF:
                return c
            c = self._lex_whitespace(c)
            if c == _EOF:
                return c
            if c == ord("]"):
                visitor.end_array()
                return self._next()
            if c != ord(","):
                raise LexError("expected ']' or ','", _ERR_ARRAY_END)
            c = self._next()

    def _lex_object(self) -> int:
        visitor = self._visitor
        visitor.begin_object()
        c = self._next()
        while True:
            c = self._lex_whitespace(c)
            if c == _EOF:
                return c
            if c != ord('"'):
                raise LexError("expected an object member name", _ERR_OBJECT_MEMBER)
            c = self._lex_whitespace(self._lex_string())
            if c == _EOF:
                return c
            if c != ord(":"):
                raise LexError("expected ':'", _ERR_NAME_SEPARATOR)
            c = self._lex_value(self._next())
            if c == _EOF:
                return c
            c = self._lex_whitespace(c)
            if c == _EOF:
                return c
            if c == ord("}"):
                visitor.end_object()
                return self._next()
            if c != ord(","):
                raise LexError("expected '}' or ','", _ERR_OBJECT_END)
            c = self._next()

    def _lex_value(self, c: int) -> int:
        c = self._lex_whitespace(c)
        if c == _EOF:
            return c
        if _isdigit(c):
            return self._lex_number(c, False)
        if c == ord("-"):
            return self._lex_negative_number()
        if c in _LITERALS:
            return self._lex_literal(c)
        if c == ord('"'):
            return self._lex_string()
        if c == ord("["):
            return self._lex_array()
        if c == ord("{"):
            return self._lex_object()
        raise LexError("expected a value", _ERR_VALUE)


def is_valid_json(data: bytes | bytearray | str | Iterable[int]) -> bool:
    """Return whether UTF-8 ``data`` lexes as one JSON text that uses up the input."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    try:
        return JsonParser(codepoints(data)).lex_json_text() is None
    except LexError:
        return False