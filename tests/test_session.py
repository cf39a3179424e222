import logging

import pytest

from camotris_board import collide, new_board
from camotris_config import CONFIG
from camotris_piece import COLS, Piece
from camotris_session import Session, State


@pytest.fixture
def session():
    s = Session.new(seed=1234)
    s.piece = Piece.spawn(2)
    return s


def test_new_session_defaults():
    s = Session.new(seed=7)
    assert s.state is State.RUNNING
    assert not s.over
    assert s.score == 0 and s.lines == 0
    assert s.time_left == CONFIG["TIME_LIMIT_S"] == 120
    assert s.drop_interval == CONFIG["DROP_INTERVAL_MS"] == 1000
    assert s.board == new_board()
    assert s.piece is not None and s.piece.y == 0
    assert s.pieces == 1


def test_same_seed_same_pieces():
    a, b = Session.new(seed=99), Session.new(seed=99)
    assert a.piece == b.piece
    assert [a.rng.next_type() for _ in range(20)] == [b.rng.next_type() for _ in range(20)]


def test_overrides():
    s = Session.new(seed=1, time_limit=5, drop_interval=250)
    assert s.time_left == 5
    assert s.drop_interval == 250


def test_o_piece_falls_and_locks_at_bottom(session):
    assert not collide(session.board, session.piece)
    for _ in range(18):
        assert session.drop() is False
    assert session.piece.y == 18
    assert session.drop() is True
    for x, y in ((4, 18), (5, 18), (4, 19), (5, 19)):
        assert session.board[y][x] == 2
    assert sum(1 for row in session.board for v in row if v) == 4
    assert session.pieces == 2
    assert session.piece.y == 0
    assert session.revision == 1
    assert not session.over


def test_lock_clears_rows_and_scores(session):
    for y in (18, 19):
        session.board[y] = [1] * COLS
        session.board[y][4] = session.board[y][5] = 0
    while not session.drop():
        pass
    assert session.lines == 2
    assert session.score == 30
    assert session.board == new_board()


def test_score_accumulates_across_locks(session):
    session.board[19] = [1] * COLS
    session.board[19][4] = session.board[19][5] = 0
    while not session.drop():
        pass
    assert session.score == 10
    assert session.board[19][4] == 2
    session.piece = Piece.spawn(2)
    while not session.drop():
        pass
    assert session.score == 10
    assert session.lines == 1


def test_blocked_spawn_ends_game(session):
    session.board[0] = [1] * COLS
    assert session.spawn() is False
    assert session.over
    assert session.over_reason == "spawn blocked"


def test_lock_that_fills_spawn_area_ends_game(session, fixed_rng):
    session.rng = fixed_rng(2)
    for y in range(2, 20):
        session.board[y][4] = 1
    assert not collide(session.board, session.piece)
    assert session.drop() is True
    assert session.over
    assert session.board[0][4] == 2


def test_drop_resets_gravity_counter(session):
    session.drop_counter = 700
    session.drop()
    assert session.drop_counter == 0


def test_commands_ignored_after_game_over(session):
    session.game_over("test")
    before = (session.piece.x, session.piece.y, [r[:] for r in session.piece.matrix])
    board = [r[:] for r in session.board]
    assert session.move(-1) is False
    assert session.rotate(1) is False
    assert session.drop() is False
    assert (session.piece.x, session.piece.y, session.piece.matrix) == before
    assert session.board == board


def test_game_over_is_one_way(session):
    session.game_over("time up")
    session.game_over("spawn blocked")
    assert session.state is State.GAME_OVER
    assert session.over_reason == "time up"


def test_lock_and_game_over_are_logged(session, fixed_rng, caplog):
    session.rng = fixed_rng(2)
    for y in range(2, 20):
        session.board[y][4] = 1
    with caplog.at_level(logging.DEBUG, logger="camotris_session"):
        session.drop()
    assert "locked O (piece #1)" in caplog.text
    assert "game over (spawn blocked)" in caplog.text
    assert "pieces=2" in caplog.text
