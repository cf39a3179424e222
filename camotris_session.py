"""Game session: board, active piece, score and the game-over state.

A session owns everything that changes during one game. Input commands and
clock ticks are applied to it through its methods; once the game is over
every mutation is ignored, so starting again means creating a new session.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from camotris_board import Board, collide, merge, new_board, sweep
from camotris_config import CONFIG
from camotris_piece import SHAPE_NAMES, Piece, reset, try_move, try_rotate
from camotris_rng import PieceRandom

log = logging.getLogger(__name__)


class State(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass
class Session:
    board: Board
    rng: PieceRandom
    piece: Optional[Piece] = None
    score: int = 0
    lines: int = 0
    time_left: int = 120
    drop_interval: int = 1000
    drop_counter: int = 0
    state: State = State.RUNNING
    over_reason: str = ""
    revision: int = 0
    pieces: int = field(default=0, repr=False)

    @classmethod
    def new(cls, seed: Optional[int] = None, time_limit: Optional[int] = None,
            drop_interval: Optional[int] = None) -> "Session":
        if seed is None:
            seed = CONFIG["SEED"]
        session = cls(
            board=new_board(),
            rng=PieceRandom(seed),
            time_left=CONFIG["TIME_LIMIT_S"] if time_limit is None else time_limit,
            drop_interval=CONFIG["DROP_INTERVAL_MS"] if drop_interval is None else drop_interval,
        )
        log.info("new session seed=%s time=%ss", session.rng.seed, session.time_left)
        session.spawn()
        return session

    @property
    def over(self) -> bool:
        return self.state is State.GAME_OVER

    def game_over(self, reason: str) -> None:
        if self.over:
            return
        self.state = State.GAME_OVER
        self.over_reason = reason
        log.info("game over (%s): score=%d lines=%d pieces=%d", reason, self.score, self.lines, self.pieces)

    def spawn(self) -> bool:
        self.piece, failed = reset(self.board, self.rng)
        self.pieces += 1
        if failed:
            self.game_over("spawn blocked")
        return not failed

    def move(self, direction: int) -> bool:
        if self.over:
            return False
        return try_move(self.board, self.piece, direction)

    def rotate(self, direction: int) -> bool:
        if self.over:
            return False
        return try_rotate(self.board, self.piece, direction)

    def drop(self) -> bool:
        """Move the piece down one row, locking it if it cannot go further.

        Returns True when the piece locked during this call.
        """
        if self.over:
            return False
        locked = False
        self.piece.y += 1
        if collide(self.board, self.piece):
            self.piece.y -= 1
            self._lock()
            locked = True
        self.drop_counter = 0
        return locked

    def _lock(self):
        merge(self.board, self.piece)
        self.revision += 1
        log.debug("locked %s (piece #%d) at x=%d y=%d", SHAPE_NAMES[self.piece.color], self.pieces, self.piece.x, self.piece.y)
        cleared, points = sweep(self.board)
        if cleared:
            self.lines += cleared
            self.score += points
            log.info("cleared %d row(s) for %d points, score=%d", cleared, points, self.score)
        self.spawn()
