
"""Board helpers: create, query, collide, merge, clear"""
from typing import Optional, List
from tetris_piece import Piece, COLS, ROWS

Board = List[List[Optional[str]]]

def new_board() -> Board:
    return [[None] * COLS for _ in range(ROWS)]

def is_occupied(board: Board, row: int, col: int) -> bool:
    if not (0 <= row < ROWS and 0 <= col < COLS):
        raise IndexError(f"cell ({row}, {col}) outside {ROWS}x{COLS} board")
    return board[row][col] is not None

def collide(board: Board, piece: Piece) -> bool:
    for bx,by in piece.cells():
        if bx<0 or bx>=COLS or by>=ROWS: return True
        if by>=0 and is_occupied(board, by, bx): return True
    return False

def merge(board:Board, piece:Piece):
    for bx,by in piece.cells():
        if by>=0: board[by][bx]=piece.t

def clear_full_rows(board:Board)->int:
    c=0; y=ROWS-1
    while y>=0:
        if all(board[y][x] for x in range(COLS)):
            del board[y]; board.insert(0,[None]*COLS); c+=1
        else: y-=1
    return c
