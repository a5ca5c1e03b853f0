
"""Piece catalog, piece model and clockwise rotation"""
from dataclasses import dataclass
from typing import Dict, List, Tuple

COLS, ROWS = 10, 20

PIECES = ["I", "O", "T", "S", "Z", "J", "L"]

# Minimal bounding box per type, spawn orientation
SHAPES: Dict[str, List[List[int]]] = {
    "I": [[1,1,1,1]],
    "O": [[1,1],[1,1]],
    "T": [[0,1,0],[1,1,1]],
    "S": [[0,1,1],[1,1,0]],
    "Z": [[1,1,0],[0,1,1]],
    "J": [[1,0,0],[1,1,1]],
    "L": [[0,0,1],[1,1,1]],
}

COLORS: Dict[str, Tuple[int,int,int]] = {
    "I": (103,232,249),
    "O": (253,224,71),
    "T": (192,132,252),
    "S": (134,239,172),
    "Z": (253,164,175),
    "J": (147,197,253),
    "L": (253,186,116),
}

# Net x offsets tried after a rotation, first fit wins
KICKS = (0, 1, -1)

def rotate_cw(m): return [list(r) for r in zip(*m[::-1])]

@dataclass
class Piece:
    t: str
    shape: List[List[int]]
    x: int
    y: int

    @staticmethod
    def spawn(t: str) -> "Piece":
        s = [r[:] for r in SHAPES[t]]
        return Piece(t, s, (COLS - len(s[0])) // 2, 0)

    @property
    def width(self) -> int:
        return len(self.shape[0])

    @property
    def height(self) -> int:
        return len(self.shape)

    def cells(self) -> List[Tuple[int,int]]:
        """Absolute (col, row) of every occupied cell, rows may be negative."""
        return [(self.x + c, self.y + r)
                for r, row in enumerate(self.shape)
                for c, v in enumerate(row) if v]

def translate(piece: Piece, dx: int, dy: int) -> Piece:
    return Piece(piece.t, [r[:] for r in piece.shape], piece.x + dx, piece.y + dy)

# rotation

def try_rotate(board, piece):
    """Rotate clockwise trying each kick; None when every offset collides."""
    from tetris_board import collide
    ns = rotate_cw(piece.shape)
    for dx in KICKS:
        test = Piece(piece.t, [r[:] for r in ns], piece.x + dx, piece.y)
        if not collide(board, test): return test
    return None
