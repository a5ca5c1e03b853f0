"""Pixel layout: board on the left, stats panel with next preview on the right"""
from dataclasses import dataclass
from tetris_config import CONFIG
from tetris_piece import COLS, ROWS

MARGIN = 16
PANEL_W = 200
PREVIEW_TOP = 150       # below the score/level/lines lines
PREVIEW_PAD = 6

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
    pv_cell: int
    pv_x: int
    pv_y: int
    pv_w: int
    pv_h: int

def compute_dims() -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    board_w, board_h = COLS * cell, ROWS * cell
    panel_x = MARGIN + board_w + MARGIN

    # room for the widest spawn shape (I, 4 cells)
    pv_cell = max(14, int(cell * 0.8))
    pv_w = pv_cell * 4 + 2 * PREVIEW_PAD
    pv_h = pv_cell * 3 + 2 * PREVIEW_PAD

    return Dims(
        cell=cell, margin=MARGIN, panel_w=PANEL_W,
        board_w=board_w, board_h=board_h,
        total_w=panel_x + PANEL_W + MARGIN, total_h=MARGIN + board_h + MARGIN,
        board_x=MARGIN, board_y=MARGIN,
        panel_x=panel_x, panel_y=MARGIN,
        pv_cell=pv_cell, pv_x=panel_x + 12, pv_y=MARGIN + PREVIEW_TOP,
        pv_w=pv_w, pv_h=pv_h,
    )
