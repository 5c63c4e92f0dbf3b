import pytest

from codepoint_kit.chess import Configuration, Move, Piece, Ply, Side


def _lone(piece, square):
    return Side(occupancy=1 << square, pieces=int(piece))


def _kings_only():
    return Configuration(_lone(Piece.KING, 0), _lone(Piece.KING, 63))


def test_initial_sides_have_sixteen_pieces():
    assert len(Side.initial_white()) == 16
    assert len(Side.initial_black()) == 16


def test_initial_sides_disjoint_and_mirrored():
    white, black = Side.initial_white(), Side.initial_black()
    assert white.occupancy & black.occupancy == 0
    assert {63 - s for _, s in black} == {s for _, s in white}


def test_initial_piece_counts():
    pieces = [p for p, _ in Side.initial_white()]
    assert pieces.count(Piece.PAWN) == 8
    assert pieces.count(Piece.KING) == 1
    assert pieces.count(Piece.EMPTY) == 0


def test_iteration_ascends_by_square():
    squares = [s for _, s in Side.initial_black()]
    assert squares == sorted(squares)
    assert len(squares) == len(set(squares))


def test_king_squares():
    assert Side.initial_white().king_square() == 3
    assert Side.initial_black().king_square() == 59


def test_king_square_missing():
    with pytest.raises(ValueError):
        _lone(Piece.QUEEN, 5).king_square()


def test_default_configuration_is_initial():
    assert Configuration() == Configuration.initial()


def test_configuration_rejects_overlap():
    with pytest.raises(ValueError):
        Configuration(_lone(Piece.KING, 10), _lone(Piece.KING, 10))


def test_configuration_rejects_missing_king():
    with pytest.raises(ValueError):
        Configuration(_lone(Piece.QUEEN, 0), _lone(Piece.KING, 63))


def test_move_rejects_bad_square():
    with pytest.raises(ValueError):
        Move(0, 64)


def test_src_and_dst_masks():
    move = Move(3, 40)
    assert move.src() == 1 << 3
    assert move.dst() == 1 << 40
    assert move.src(Side.initial_white()) == move.src()
    assert move.dst(Side.initial_white()) == 0
    assert move.exclude_dst_from(move.dst() | move.src()) == move.src()


def test_diff_invariants():
    for src in range(64):
        for dst in range(64):
            rank_diff, file_diff = Move(src, dst).diff()
            assert rank_diff * 8 + file_diff == dst - src
            assert abs(file_diff) < 8
            assert file_diff == 0 or (file_diff > 0) == (dst > src)


@pytest.mark.parametrize("src, dst", [(2, 6), (6, 2), (1, 49), (49, 1)])
def test_cardinal_path_covers_src_not_dst(src, dst):
    move = Move(src, dst)
    path = move.cardinal_path()
    assert path & move.src()
    assert not path & move.dst()
    rank_diff, file_diff = move.diff()
    assert bin(path).count("1") == abs(rank_diff) + abs(file_diff)


def test_knight_move_has_no_straight_path():
    move = Move(6, 16)
    assert move.cardinal_path() is None
    assert move.ordinal_path() is None


def test_test_move_king_and_knight():
    config = Configuration()
    assert config.test_move(Piece.KING, Move(3, 11))
    assert not config.test_move(Piece.KING, Move(3, 27))
    assert config.test_move(Piece.KNIGHT, Move(6, 16))
    assert not config.test_move(Piece.KNIGHT, Move(6, 14))
    assert not config.test_move(Piece.EMPTY, Move(6, 16))


def test_sliding_pieces_need_empty_path():
    config = Configuration()
    assert config.test_move(Piece.ROOK, Move(20, 22))
    assert config.test_move(Piece.BISHOP, Move(20, 29))
    assert config.test_move(Piece.QUEEN, Move(20, 36))
    assert not config.test_move(Piece.BISHOP, Move(20, 22))
    assert not config.test_move(Piece.ROOK, Move(0, 2))


def test_white_pawn_moves():
    config = Configuration()
    assert config.test_move(Piece.PAWN, Move(8, 16))
    assert config.test_move(Piece.PAWN, Move(8, 24))
    with pytest.raises(ValueError):
        config.test_move(Piece.PAWN, Move(8, 40))
    with pytest.raises(ValueError):
        config.test_move(Piece.PAWN, Move(0, 8))


def test_try_move_from_empty_square():
    assert Configuration().try_move(Piece.KING, Move(30, 31)) is None


def test_try_move_onto_own_piece():
    assert Configuration().try_move(Piece.KNIGHT, Move(6, 14)) is None


def test_try_move_returns_configuration():
    config = _kings_only()
    assert config.try_move(Piece.KING, Move(0, 1)) == config
    assert config.try_move(Piece.KING, Move(0, 30)) is None


def test_ply_holds_fields():
    ply = Ply(Configuration(), True)
    assert ply.white_turn is True
    assert ply.config == Configuration.initial()