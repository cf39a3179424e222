# camotris_layout.py
from dataclasses import dataclass
from typing import Dict, Tuple
from camotris_config import CONFIG
from camotris_piece import COLS, ROWS

Rect = Tuple[int, int, int, int]

BUTTONS = ("left", "right", "down", "rotate")

@dataclass
class Dims:
    cell: int
    margin: int
    panel_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int
    buttons: Dict[str, Rect]

def compute_dims() -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    margin = 16
    panel_w = 180

    board_w = COLS * cell
    board_h = ROWS * cell

    total_w = margin + board_w + margin + panel_w + margin
    total_h = margin + board_h + margin

    board_x = margin
    board_y = margin
    panel_x = board_x + board_w + margin
    panel_y = margin

    # 2x2 grid of on-screen buttons at the bottom of the panel
    bw = (panel_w - 3 * 8) // 2
    bh = 40
    by = panel_y + board_h - 2 * bh - 3 * 8
    buttons = {}
    for i, name in enumerate(BUTTONS):
        col, row = i % 2, i // 2
        buttons[name] = (panel_x + 8 + col * (bw + 8), by + 8 + row * (bh + 8), bw, bh)

    return Dims(
        cell=cell, margin=margin, panel_w=panel_w,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=board_x, board_y=board_y,
        panel_x=panel_x, panel_y=panel_y,
        buttons=buttons,
    )
