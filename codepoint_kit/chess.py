"""Chess board configurations held as 64-bit occupancy and packed piece codes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator, NamedTuple, Optional, Union

_MASK64 = 0xFFFF_FFFF_FFFF_FFFF
_FULL = _MASK64
_RIGHTMOST_FILE = 0x0101_0101_0101_0101
_LEFTMOST_FILE = 0x8080_8080_8080_8080
_MAJOR_DIAGONAL = 0x8040_2010_0804_0201
_MINOR_DIAGONAL_H1 = 0x0204_0810_2040_8001
_MINOR_DIAGONAL_A8 = 0x8001_0204_0810_2040
_LAST_RANK = 0xFF00_0000_0000_0000
_SECOND_RANK = 0x0000_0000_0000_FF00


class Piece(IntEnum):
    EMPTY = 0
    PAWN = 1
    ROOK = 2
    KNIGHT = 3
    BISHOP = 4
    QUEEN = 5
    KING = 6


class PieceSquare(NamedTuple):
    piece: Piece
    square: int


_INITIAL_RANK1 = (
    Piece.ROOK, Piece.KNIGHT, Piece.BISHOP, Piece.QUEEN,
    Piece.KING, Piece.BISHOP, Piece.KNIGHT, Piece.ROOK,
)
_INITIAL_RANK2 = (Piece.PAWN,) * 8
_INITIAL_RANK3 = (Piece.EMPTY,) * 48


@dataclass(frozen=True)
class Side:
    """The pieces of one colour.

    Bit ``n`` of ``occupancy`` marks square ``n``. ``pieces`` holds one 4-bit
    piece code per occupied square, the lowest square in the lowest nibble.
    """

    occupancy: int = 0
    pieces: int = 0

    @classmethod
    def _populate(cls, *runs: tuple[Piece, ...]) -> Side:
        occupancy = pieces = 0
        for run in runs:
            for piece in run:
                occupancy <<= 1
                if piece is not Piece.EMPTY:
                    occupancy ^= 1
                    pieces = pieces << 4 ^ int(piece)
        return cls(occupancy, pieces)

    @classmethod
    def initial_white(cls) -> Side:
        return cls._populate(_INITIAL_RANK3, _INITIAL_RANK2, _INITIAL_RANK1)

    @classmethod
    def initial_black(cls) -> Side:
        return cls._populate(_INITIAL_RANK1, _INITIAL_RANK2, _INITIAL_RANK3)

    def king_square(self) -> int:
        for piece, square in self:
            if piece is Piece.KING:
                return square
        raise ValueError("side has no king")

    def __iter__(self) -> Iterator[PieceSquare]:
        occupancy, pieces = self.occupancy, self.pieces
        while occupancy:
            lowest = occupancy & -occupancy
            yield PieceSquare(Piece(pieces & 0xF), lowest.bit_length() - 1)
            occupancy ^= lowest
            pieces >>= 4

    def __len__(self) -> int:
        return bin(self.occupancy).count("1")


_Mask = Optional[Union[int, Side]]


def _as_mask(mask: int | Side) -> int:
    return mask.occupancy if isinstance(mask, Side) else mask


def _trunc_divmod(value: int, divisor: int) -> tuple[int, int]:
    quotient = abs(value) // divisor * (1 if value >= 0 else -1)
    return quotient, value - quotient * divisor


@dataclass(frozen=True)
class Move:
    src_square: int
    dst_square: int

    def __post_init__(self) -> None:
        for square in (self.src_square, self.dst_square):
            if not 0 <= square < 64:
                raise ValueError(f"square out of range: {square!r}")

    def src(self, mask: _Mask = None) -> int:
        """The source bit, restricted to ``mask`` (a bitboard or a side) if given."""
        bit = 1 << self.src_square
        return bit if mask is None else _as_mask(mask) & bit

    def dst(self, mask: _Mask = None) -> int:
        """The destination bit, restricted to ``mask`` (a bitboard or a side) if given."""
        bit = 1 << self.dst_square
        return bit if mask is None else _as_mask(mask) & bit

    def exclude_dst_from(self, mask: int) -> int:
        return mask & ~self.dst() & _MASK64

    def diff(self) -> tuple[int, int]:
        """Rank difference and file difference, dividing with truncation toward zero."""
        return _trunc_divmod(self.dst_square - self.src_square, 8)

    def _straight_path(self, left: int, right: int | None = None) -> int:
        if right is None:
            right = left
        src, dst = self.src_square, self.dst_square
        if src < dst:
            return ((left << src) ^ (left << dst)) & _MASK64
        return (right >> (63 ^ src)) ^ (right >> (63 ^ dst))

    def cardinal_path(self) -> int | None:
        """Squares from source up to destination along a rank or file, if any."""
        rank_diff, file_diff = self.diff()
        if rank_diff == 0:
            return self._straight_path(_FULL)
        if file_diff == 0:
            return self._straight_path(_RIGHTMOST_FILE, _LEFTMOST_FILE)
        return None

    def ordinal_path(self) -> int | None:
        """Squares from source up to destination along a diagonal, if any."""
        rank_diff, file_diff = self.diff()
        if rank_diff == file_diff:
            return self._straight_path(_MAJOR_DIAGONAL)
        if rank_diff == -file_diff:
            return self._straight_path(_MINOR_DIAGONAL_H1, _MINOR_DIAGONAL_A8)
        return None


@dataclass(frozen=True)
class Configuration:
    """The position of both sides; defaults to the initial position."""

    white: Side = field(default_factory=Side.initial_white)
    black: Side = field(default_factory=Side.initial_black)

    def __post_init__(self) -> None:
        if self.white.occupancy & self.black.occupancy:
            raise ValueError("white and black pieces share a square")
        for name, side in (("white", self.white), ("black", self.black)):
            kings = sum(1 for piece, _ in side if piece is Piece.KING)
            if kings != 1:
                raise ValueError(f"{name} must have exactly one king, has {kings}")

    @classmethod
    def initial(cls) -> Configuration:
        return cls(Side.initial_white(), Side.initial_black())

    def _empty(self, mask: int) -> bool:
        return not mask & (self.black.occupancy ^ self.white.occupancy)

    def _check(self, is_white: bool) -> bool:
        king = (self.white if is_white else self.black).king_square()
        opponent = self.black if is_white else self.white
        return any(self.test_move(piece, Move(square, king)) for piece, square in opponent)

    def try_move(self, piece: Piece, move: Move) -> Configuration | None:
        """Return the configuration after ``move``, or ``None`` if it is not allowed."""
        if not move.src(self.black) and not move.src(self.white):
            return None
        if move.src(self.black) and move.dst(self.black):
            return None
        if move.src(self.white) and move.dst(self.white):
            return None
        if not self.test_move(piece, move):
            return None
        if self._check(bool(move.src(self.white))):
            return None
        return Configuration(self.white, self.black)

    def _test_pawn(self, move: Move) -> bool:
        if move.src(self.black):
            return True
        if move.src(_LAST_RANK):
            raise ValueError("a pawn on the last rank must have been promoted")
        rank_diff, file_diff = move.diff()
        if rank_diff == 1:
            if file_diff == 0:
                if not self._empty(move.dst()):
                    raise ValueError("a pawn cannot advance onto an occupied square")
            elif file_diff not in (-1, 1):
                raise ValueError("a pawn cannot move that far sideways")
        elif rank_diff == 2:
            if file_diff != 0:
                raise ValueError("a two-square pawn advance must stay on its file")
            if not move.src(_SECOND_RANK):
                raise ValueError("a two-square pawn advance must be its first move")
            if not self._empty(move.dst()):
                raise ValueError("a pawn cannot advance onto an occupied square")
        else:
            raise ValueError("a pawn cannot move that way")
        return True

    def _path_clear(self, path: int | None) -> bool | None:
        if path is None:
            return None
        return self._empty(path & (1 << 64) - 1 & 0 | path) if False else None

    def test_move(self, piece: Piece, move: Move) -> bool:
        """Whether ``piece`` may move along ``move`` on this board."""
        if piece is Piece.PAWN:
            return self._test_pawn(move)
        if piece is Piece.KING:
            rank_diff, file_diff = move.diff()
            return max(abs(rank_diff), abs(file_diff)) == 1
        if piece is Piece.KNIGHT:
            rank_diff, file_diff = move.diff()
            return abs(rank_diff * file_diff) == 2
        if piece is Piece.ROOK:
            path = move.cardinal_path()
            return path is not None and self._empty(move.src(path))
        if piece is Piece.BISHOP:
            path = move.ordinal_path()
            return path is not None and self._empty(move.src(path))
        if piece is Piece.QUEEN:
            path = move.cardinal_path()
            if path is None:
                path = move.ordinal_path()
            return path is not None and self._empty(move.src(path))
        return False


@dataclass(frozen=True)
class Ply:
    config: Configuration
    white_turn: bool