"""Terminal front end that draws the chess board and tracks the cursor."""

from __future__ import annotations

import argparse
import os
import signal
import sys
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass, field
from itertools import cycle

from .ansi import (
    CURSOR_HIDE,
    CURSOR_SHOW,
    HARD_CLEAR_SCREEN,
    Bg,
    Color,
    Fg,
    Style,
    cursor_position,
    sgr,
)
from .chess import Configuration, Piece

_WHITE_GLYPHS = {
    Piece.EMPTY: "　",
    Piece.PAWN: "Ｐ",
    Piece.ROOK: "Ｒ",
    Piece.KNIGHT: "Ｎ",
    Piece.BISHOP: "Ｂ",
    Piece.QUEEN: "Ｑ",
    Piece.KING: "Ｋ",
}
_BLACK_GLYPHS = {
    Piece.EMPTY: "　",
    Piece.PAWN: "ｐ",
    Piece.ROOK: "ｒ",
    Piece.KNIGHT: "ｎ",
    Piece.BISHOP: "ｂ",
    Piece.QUEEN: "ｑ",
    Piece.KING: "ｋ",
}

_BLACK_FG = Fg.bright_color(Color.GREEN)
_WHITE_FG = Fg.bright_color(Color.WHITE)

_FILE_HINT = "　ａｂｃｄｅｆｇｈ　"
_RANK_HINTS = ("８", "７", "６", "５", "４", "３", "２", "１")
_SQUARE_BACKGROUNDS = (Bg.bright_color(Color.BLUE), Bg(Color.BLUE))
_HINT_COLOR = sgr(Style.RESET, Fg.bright_color(Color.BLACK))

# Row just below the board, where the cursor is left on exit.
_EXIT_ROW = 11


def colored_piece(piece: Piece, is_white: bool) -> str:
    """The full-width glyph of a piece, preceded by its side's colour."""
    glyphs = _WHITE_GLYPHS if is_white else _BLACK_GLYPHS
    color = _WHITE_FG if is_white else _BLACK_FG
    return f"{color}{glyphs[Piece(piece)]}"


def render_board(config: Configuration) -> str:
    """Draw the board with rank and file hints, rank 8 at the top."""
    board = [Piece.EMPTY] * 64
    for side in (config.white, config.black):
        for piece, square in side:
            board[63 - square] = piece

    white_occupancy = config.white.occupancy
    backgrounds = cycle(_SQUARE_BACKGROUNDS)
    parts = [f"{_HINT_COLOR}{_FILE_HINT}\r\n"]
    squares = iter(board)
    pos = 1 << 63
    for rank in _RANK_HINTS:
        parts.append(rank)
        for _ in range(8):
            parts.append(str(next(backgrounds)))
            parts.append(colored_piece(next(squares), bool(pos & white_occupancy)))
            pos >>= 1
        parts.append(f"{_HINT_COLOR}{rank}\r\n")
        next(backgrounds)
    parts.append(f"{_FILE_HINT}{Style.RESET}")
    return "".join(parts)


@dataclass
class Coordinates:
    """A board square by 1-based file and rank; zero means not chosen yet."""

    file: int = 0
    rank: int = 0

    def __str__(self) -> str:
        return cursor_position(10 - self.rank, self.file * 2 + 1)


@dataclass
class CursorState:
    """Turns key presses into cursor movements over the drawn board."""

    coordinates: Coordinates = field(default_factory=Coordinates)

    def feed(self, ch: str) -> str:
        """Take one typed character and return what to write to the terminal."""
        coord = self.coordinates
        if "a" <= ch <= "h":
            if coord.rank == 0:
                coord.file = ord(ch) - ord("a") + 1
                return f"{CURSOR_SHOW}{coord}"
        elif "1" <= ch <= "8":
            if coord.file != 0:
                coord.rank = ord(ch) - ord("1") + 1
                return str(coord)
        elif ch == "\033":
            coord.file = coord.rank = 0
            return CURSOR_HIDE
        return ""


def _set_and_verify(fd: int, attributes: list) -> None:
    import termios

    termios.tcsetattr(fd, termios.TCSAFLUSH, attributes)
    actual = termios.tcgetattr(fd)
    if actual[:4] != attributes[:4]:
        raise OSError("terminal did not accept all requested settings")


@contextmanager
def _raw_terminal(fd: int) -> Iterator[None]:
    """Put the terminal in raw mode, keeping signals, and restore it afterwards."""
    import termios
    import tty

    initial = termios.tcgetattr(fd)
    tty.setraw(fd, termios.TCSAFLUSH)
    raw = termios.tcgetattr(fd)
    raw[3] |= termios.ISIG
    _set_and_verify(fd, raw)

    def _leave(signum: int, frame: object) -> None:
        raise SystemExit(1)

    previous = {}
    for signum in (signal.SIGINT, signal.SIGHUP, signal.SIGTERM):
        if signal.getsignal(signum) != signal.SIG_IGN:
            previous[signum] = signal.signal(signum, _leave)
    try:
        yield
    finally:
        sys.stdout.write(cursor_position(_EXIT_ROW, 1))
        sys.stdout.flush()
        for signum, handler in previous.items():
            signal.signal(signum, handler)
        _set_and_verify(fd, initial)


def _read_keys(fd: int) -> Iterator[str]:
    while data := os.read(fd, 1):
        yield chr(data[0])


def main(argv: Sequence[str] | None = None) -> int:
    """Draw the initial position and follow the typed square coordinates."""
    parser = argparse.ArgumentParser(
        prog="chess",
        description="Show a chess board; type a file and a rank to move the cursor, Esc to hide it.",
    )
    parser.parse_args(argv)

    fd = sys.stdin.fileno()
    with _raw_terminal(fd):
        out = sys.stdout
        out.write(f"{HARD_CLEAR_SCREEN}{CURSOR_HIDE}{render_board(Configuration.initial())}")
        out.flush()
        state = CursorState()
        for ch in _read_keys(fd):
            output = state.feed(ch)
            if output:
                out.write(output)
                out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())