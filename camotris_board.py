"""Board helpers: collide, merge, sweep"""
from typing import List, Tuple
from camotris_piece import Piece, COLS, ROWS

Board = List[List[int]]

LINE_POINTS = 10


def new_board(rows: int = ROWS, cols: int = COLS) -> Board:
    return [[0] * cols for _ in range(rows)]


def collide(board: Board, piece: Piece) -> bool:
    """Return True if piece hits a wall, the floor or a settled cell.

    Cells above the top row are free, even past the side walls, so pieces
    may hang over the board.
    """
    rows, cols = len(board), len(board[0])
    for y, row in enumerate(piece.matrix):
        for x, v in enumerate(row):
            if not v:
                continue
            bx, by = piece.x + x, piece.y + y
            if by < 0:
                continue
            if bx < 0 or bx >= cols or by >= rows:
                return True
            if board[by][bx]:
                return True
    return False


def merge(board: Board, piece: Piece) -> None:
    for y, row in enumerate(piece.matrix):
        for x, v in enumerate(row):
            if v:
                by = piece.y + y
                if by >= 0:
                    board[by][piece.x + x] = v


def sweep(board: Board) -> Tuple[int, int]:
    """Clear full rows and return (rows cleared, points earned).

    Each extra row in the same sweep is worth double the previous one.
    Row 0 is never checked.
    """
    cleared = points = 0
    multiplier = 1
    y = len(board) - 1
    while y > 0:
        if all(board[y]):
            row = board.pop(y)
            row[:] = [0] * len(row)
            board.insert(0, row)
            cleared += 1
            points += multiplier * LINE_POINTS
            multiplier *= 2
        else:
            y -= 1
    return cleared, points
