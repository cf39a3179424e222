"""Piece model, shape catalog, rotation with kick search"""
from dataclasses import dataclass
from typing import List, Tuple

COLS, ROWS = 10, 20

# Index 0 is the empty sentinel; each shape's cells carry its own index.
SHAPES: Tuple[Tuple[Tuple[int, ...], ...], ...] = (
    (),
    ((1, 1, 1, 1),),
    ((2, 2),
     (2, 2)),
    ((0, 3, 0),
     (3, 3, 3)),
    ((4, 0, 0),
     (4, 4, 4)),
    ((0, 0, 5),
     (5, 5, 5)),
    ((6, 6, 0),
     (0, 6, 6)),
    ((0, 7, 7),
     (7, 7, 0)),
)
SHAPE_NAMES = (None, "I", "O", "T", "L", "J", "S", "Z")
N_SHAPES = len(SHAPES) - 1

Matrix = List[List[int]]


@dataclass
class Piece:
    matrix: Matrix
    x: int
    y: int

    @property
    def color(self) -> int:
        for row in self.matrix:
            for v in row:
                if v:
                    return v
        return 0

    @property
    def width(self) -> int:
        return len(self.matrix[0]) if self.matrix else 0

    @staticmethod
    def spawn(type_id: int, cols: int = COLS) -> "Piece":
        if not 1 <= type_id <= N_SHAPES:
            raise ValueError(f"unknown shape index {type_id}")
        matrix = [list(row) for row in SHAPES[type_id]]
        return Piece(matrix, (cols - len(matrix[0])) // 2, 0)


def reset(board, rng) -> Tuple[Piece, bool]:
    """Spawn a random piece centered on the top row.

    The second value is True when the new piece already overlaps the stack,
    which ends the game.
    """
    from camotris_board import collide
    piece = Piece.spawn(rng.next_type(), len(board[0]))
    return piece, collide(board, piece)


def try_move(board, piece: Piece, direction: int) -> bool:
    from camotris_board import collide
    piece.x += direction
    if collide(board, piece):
        piece.x -= direction
        return False
    return True


def rotate_matrix(matrix: Matrix, direction: int) -> None:
    """Rotate a matrix a quarter turn in place.

    Only the pairs above the diagonal of the leading square block are
    swapped, so rectangular pieces keep their dimensions and come out
    mirrored rather than truly rotated. Clockwise (direction > 0) then
    reverses every row; counter-clockwise reverses the row order.
    """
    n = min(len(matrix), len(matrix[0])) if matrix else 0
    for y in range(n):
        for x in range(y):
            matrix[x][y], matrix[y][x] = matrix[y][x], matrix[x][y]
    if direction > 0:
        for row in matrix:
            row.reverse()
    else:
        matrix.reverse()


def try_rotate(board, piece: Piece, direction: int) -> bool:
    """Rotate, then shift sideways +1, -2, +3, ... until the piece fits.

    Gives up once the next shift would exceed the matrix width, leaving the
    piece exactly as it was.
    """
    from camotris_board import collide
    saved = [row[:] for row in piece.matrix]
    pos = piece.x
    offset = 1
    rotate_matrix(piece.matrix, direction)
    while collide(board, piece):
        piece.x += offset
        offset = -(offset + (1 if offset > 0 else -1))
        if offset > piece.width:
            piece.matrix[:] = saved
            piece.x = pos
            return False
    return True
