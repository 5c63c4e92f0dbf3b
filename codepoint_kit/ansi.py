"""ANSI terminal escape sequences: cursor control and select graphic rendition."""

from __future__ import annotations

from enum import Enum, IntEnum

_CSI = "\033["

CURSOR_HIDE = "\033[?25l"
CURSOR_SHOW = "\033[?25h"
CURSOR_STEADY_BLOCK = "\033[0 q"
CURSOR_BLINKING_BLOCK = "\033[1 q"
CURSOR_RESET = "\033[H"

CLEAR_SCREEN = "\033[2J"
HARD_CLEAR_SCREEN = "\033[3J\033c"
CLEAR_LINE = "\033[2K"


def _byte(value: int, what: str) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{what} must be in 0..255, got {value!r}")
    return value


def cursor_position(row: int, col: int) -> str:
    """Move the cursor to a 1-based row and column."""
    return f"{_CSI}{row};{col}H"


def _move_cursor(command: str, offset: int) -> str:
    return f"{_CSI}{_byte(offset, 'offset')}{command}"


def cursor_up(offset: int) -> str:
    return _move_cursor("A", offset)


def cursor_down(offset: int) -> str:
    return _move_cursor("B", offset)


def cursor_forward(offset: int) -> str:
    return _move_cursor("C", offset)


def cursor_back(offset: int) -> str:
    return _move_cursor("D", offset)


def cursor_column(offset: int) -> str:
    return _move_cursor("G", offset)


class Style(Enum):
    """Text styles; printing a member gives its complete escape sequence."""

    RESET = 0
    NORMAL = 0
    BOLD = 1
    INCREASED_INTENSITY = 1
    FAINT = 2
    DECREASED_INTENSITY = 2
    ITALIC = 3
    UNDERLINE = 4
    SLOW_BLINK = 5
    BLINK = 5
    RAPID_BLINK = 6
    INVERT = 7
    CONCEAL = 8
    CROSSED_OUT = 9
    STRIKE = 9
    PRIMARY_FONT = 10
    FRAKTUR = 20
    GOTHIC = 20
    DOUBLY_UNDERLINED = 21
    NORMAL_INTENSITY = 22
    NOT_ITALIC_NOR_BLACKLETTER = 23
    NO_UNDERLINED = 24  # neither singly nor doubly underlined
    NOT_BLINKING = 25
    PROPORTIONAL_SPACING = 26
    NOT_REVERSED = 27
    REVEAL = 28
    NOT_CONCEALED = 28
    NOT_CROSSED_OUT = 29

    def __str__(self) -> str:
        return f"{_CSI}{self.value}m"

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


class Color(IntEnum):
    """The eight basic terminal colours."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7


class _ColorParameter:
    """A foreground or background colour parameter of an SGR sequence."""

    _code: str

    @classmethod
    def _from_code(cls, code: str):
        instance = cls.__new__(cls)
        instance._code = code
        return instance

    @property
    def code(self) -> str:
        """The SGR parameter text, such as ``31`` or ``38;5;200``."""
        return self._code

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._code == other._code

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._code))

    def __repr__(self) -> str:
        return f"{type(self).__name__}.from_code({self._code!r})"

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


class Fg(_ColorParameter):
    """Foreground colour."""

    def __init__(self, color: Color, bright: bool = False) -> None:
        self._code = f"{'9' if bright else '3'}{int(Color(color))}"

    @classmethod
    def bright_color(cls, color: Color) -> Fg:
        return cls(color, True)

    @classmethod
    def indexed(cls, index: int) -> Fg:
        """A colour of the 256-colour palette."""
        return cls._from_code(f"38;5;{_byte(index, 'index')}")

    @classmethod
    def rgb(cls, red: int, green: int, blue: int) -> Fg:
        """A true colour."""
        return cls._from_code(
            f"38;2;{_byte(red, 'red')};{_byte(green, 'green')};{_byte(blue, 'blue')}"
        )

    def __str__(self) -> str:
        return str(Sgr(self))


class Bg(_ColorParameter):
    """Background colour."""

    def __init__(self, color: Color, bright: bool = False) -> None:
        self._code = f"{'10' if bright else '4'}{int(Color(color))}"

    @classmethod
    def bright_color(cls, color: Color) -> Bg:
        return cls(color, True)

    @classmethod
    def indexed(cls, index: int) -> Bg:
        """A colour of the 256-colour palette."""
        return cls._from_code(f"48;5;{_byte(index, 'index')}")

    @classmethod
    def rgb(cls, red: int, green: int, blue: int) -> Bg:
        """A true colour."""
        return cls._from_code(
            f"48;2;{_byte(red, 'red')};{_byte(green, 'green')};{_byte(blue, 'blue')}"
        )

    def __str__(self) -> str:
        return str(Sgr(self))


class Sgr:
    """A select-graphic-rendition sequence combining styles and colours."""

    def __init__(self, *args: Style | Fg | Bg) -> None:
        if not args:
            raise ValueError("an SGR sequence needs at least one parameter")
        for value in args:
            if not isinstance(value, (Style, Fg, Bg)):
                raise TypeError(f"not an SGR parameter: {value!r}")
        self.values = args

    def __str__(self) -> str:
        params = (
            str(value.value) if isinstance(value, Style) else value.code
            for value in self.values
        )
        return f"{_CSI}{';'.join(params)}m"

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sgr):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))

    def __repr__(self) -> str:
        return f"Sgr({', '.join(map(repr, self.values))})"


def sgr(*args: Style | Fg | Bg) -> Sgr:
    """Combine styles and colours into one escape sequence."""
    return Sgr(*args)