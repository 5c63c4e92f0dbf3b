# codepoint-kit

A small toolkit of text and terminal utilities:

- `codepoint_kit.unicode`: a strict UTF-8 decoder, `codepoints()`, that turns
  bytes into a stream of integer code points.
- `codepoint_kit.jsonlex`: an event-driven JSON lexer (`JsonParser`) that checks
  a JSON text and reports each token to a `JsonVisitor`.
- `codepoint_kit.ansi`: builders for ANSI escape sequences. They cover cursor
  movement, screen clearing and SGR styles and colours (basic, bright,
  256-colour and true colour).
- `codepoint_kit.chess`: a bitboard chess position, with move tests for each
  kind of piece.
- `codepoint_kit.chess_app`: draws the board in a terminal and moves a cursor
  over it as you type.
- `codepoint_kit.formatter_bytecode`: the `DataType` and `Instruction`
  enumerations of a small stack-machine bytecode for data formatters.

## Installation

```
pip install .
```

To install the test requirements as well:

```
pip install ".[test]"
```

## Decoding UTF-8

```python
from codepoint_kit.unicode import INVALID, TRUNCATED, codepoints

list(codepoints(b"\x41\xC3\xB1\x42"))   # [0x41, 0xF1, 0x42]
list(codepoints(b"\xC2\xC3"))           # [-3, -2]
```

Bad input does not stop decoding. Each ill-formed subsequence yields `INVALID`
(`-3`). If the input ends partway through a sequence, `TRUNCATED` (`-2`) is
yielded once. Overlong forms, surrogates and values above U+10FFFF count as
invalid. A code unit outside 0..255 raises `ValueError`.

## Lexing JSON

```python
from codepoint_kit.jsonlex import JsonParser, JsonVisitor, LexError, is_valid_json
from codepoint_kit.unicode import codepoints

is_valid_json(b'{"a": [1, 2.5e3, true, null]}')   # True
is_valid_json("[1,")                              # False


class Strings(JsonVisitor):
    def __init__(self):
        super().__init__()
        self.chars = []

    def codepoint(self, c):
        self.chars.append(chr(c))


visitor = Strings()
JsonParser(codepoints(b'["hi"]'), visitor).lex_json_text()   # None: input used up
"".join(visitor.chars)                                       # "hi"
```

`JsonParser` reads an iterable of code points. `lex_json_text()` returns `None`
when it reaches the end of the input. Otherwise it returns the first code point
after the JSON text. It raises `LexError` for malformed JSON and for invalid or
truncated UTF-8. The `code` attribute of the `LexError` holds a negative error
code.

Every visitor hook is optional. You can pass a callback instead of subclassing:
`JsonVisitor(on_event=print)` calls the callback with the event name and the
event's arguments. Numbers are reported digit by digit through `begin_int`,
`digit`, `end_int`, `begin_frac`/`end_frac` and `begin_exp`/`end_exp`.

## ANSI escapes

```python
from codepoint_kit.ansi import Bg, Color, Fg, Style, cursor_position, sgr

str(Style.BOLD)                                # "\x1b[1m"
str(Fg(Color.RED))                             # "\x1b[31m"
str(Bg.bright_color(Color.MAGENTA))            # "\x1b[105m"
str(sgr(Fg.bright_color(Color.BLACK), Style.UNDERLINE,
        Bg(Color.WHITE), Style.ITALIC))        # "\x1b[90;4;47;3m"
str(Fg.rgb(255, 128, 0))                       # "\x1b[38;2;255;128;0m"
cursor_position(3, 5)                          # "\x1b[3;5H"
```

## Chess

```python
from codepoint_kit.chess import Configuration, Move, Piece

board = Configuration.initial()
board.test_move(Piece.KNIGHT, Move(1, 18))   # True
board.test_move(Piece.ROOK, Move(0, 16))     # False: the a2 pawn is in the way
```

Squares are numbered 0 to 63. Each `Side` keeps a 64-bit occupancy mask and
one packed 4-bit code for each of its pieces. Iterating a side yields
`PieceSquare(piece, square)` pairs.

## Terminal board

In a POSIX terminal, run:

```
codepoint-chess
```

The command shows the initial position. Type a file letter (`a` to `h`) and
then a rank digit (`1` to `8`) to move the cursor to that square. Press Escape
to hide the cursor and start again. Press Ctrl-C to quit.

## What this package does not do

- It does not play chess. `Configuration.try_move` checks whether a move is
  allowed, but the configuration it returns still has every piece where it
  was. Black pawn moves are not checked. Castling, en passant and promotion
  are not handled. The terminal board only moves a cursor and never changes
  the position.
- The JSON lexer checks `\uXXXX` escapes but does not pass the escaped
  character to the visitor. It does not build Python values.
- `formatter_bytecode` only defines the data types and opcodes. It has no
  interpreter.