
"""Game state machine: spawn, fall, lock, clear, score"""
from __future__ import annotations
import enum
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from tetris_board import Board, new_board, collide, merge, clear_full_rows
from tetris_piece import Piece, COLS, translate, try_rotate
from tetris_rng import UniformRandom
from tetris_scheduler import DropScheduler

logger = logging.getLogger(__name__)

LINES_PER_LEVEL = 10
SCORE_TABLE = {1: 100, 2: 300, 3: 500, 4: 800}   # multiplied by level

def level_for_lines(lines: int) -> int:
    return lines // LINES_PER_LEVEL + 1

class Status(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"

@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view handed to the renderer after each command or tick."""
    board: Tuple[Tuple[Optional[str], ...], ...]
    current: Optional[Tuple[str, Tuple[Tuple[int, ...], ...], int, int]]
    next_type: Optional[str]
    next_shape: Optional[Tuple[Tuple[int, ...], ...]]
    score: int
    lines: int
    level: int
    status: Status

def _frozen(shape: List[List[int]]) -> Tuple[Tuple[int, ...], ...]:
    return tuple(tuple(r) for r in shape)

class Game:
    """
    One game instance; the driver owns it and calls in serially.

    Movement, rotation, drops and ticks only act while RUNNING and are
    silent no-ops otherwise. Each command returns True when it changed
    something the renderer cares about.
    """

    def __init__(self, source=None):
        self.source = source if source is not None else UniformRandom()
        self.scheduler = DropScheduler()
        self.status = Status.IDLE
        self.board: Board = new_board()
        self.current: Optional[Piece] = None
        self.next: Optional[Piece] = None
        self.score = 0
        self.lines = 0
        self.level = 1

    # ---------- lifecycle ----------
    def _reset(self):
        self.board = new_board()
        self.score = 0
        self.lines = 0
        self.level = 1
        self.current = None
        self.next = self._draw()
        self.scheduler.reset()
        self.status = Status.RUNNING
        self.spawn()

    def start(self) -> bool:
        if self.status not in (Status.IDLE, Status.GAME_OVER):
            return False
        logger.info("game started")
        self._reset()
        return True

    def restart(self) -> bool:
        logger.info("game restarted from %s", self.status.value)
        self._reset()
        return True

    def toggle_pause(self) -> bool:
        if self.status is Status.RUNNING:
            self.status = Status.PAUSED
        elif self.status is Status.PAUSED:
            self.status = Status.RUNNING
        else:
            return False
        logger.info("pause toggled, now %s", self.status.value)
        return True

    @property
    def running(self) -> bool:
        return self.status is Status.RUNNING

    # ---------- pieces ----------
    def _draw(self) -> Piece:
        return Piece.spawn(self.source.next_piece())

    def spawn(self):
        """Promote next to current, draw a new next, game over if blocked."""
        self.current = self.next or self._draw()
        self.next = self._draw()
        self.current.x = (COLS - self.current.width) // 2
        self.current.y = 0
        if collide(self.board, self.current):
            self.status = Status.GAME_OVER
            logger.info("game over: score=%d lines=%d level=%d",
                        self.score, self.lines, self.level)

    def _lock(self):
        merge(self.board, self.current)
        cleared = clear_full_rows(self.board)
        logger.debug("locked %s at (%d, %d), cleared %d",
                     self.current.t, self.current.x, self.current.y, cleared)
        if cleared:
            self._award(cleared)
        self.spawn()

    def _award(self, cleared: int):
        # level in effect before these lines count
        self.score += SCORE_TABLE[cleared] * self.level
        self.lines += cleared
        level = level_for_lines(self.lines)
        if level != self.level:
            logger.info("level up: %d -> %d", self.level, level)
        self.level = level

    # ---------- commands ----------
    def move(self, dx: int) -> bool:
        if not self.running: return False
        test = translate(self.current, dx, 0)
        if collide(self.board, test): return False
        self.current = test
        return True

    def rotate(self) -> bool:
        if not self.running: return False
        test = try_rotate(self.board, self.current)
        if test is None: return False
        self.current = test
        return True

    def soft_drop(self) -> bool:
        if not self.running: return False
        test = translate(self.current, 0, 1)
        if collide(self.board, test):
            self._lock()
        else:
            self.current = test
        return True

    def hard_drop(self) -> bool:
        if not self.running: return False
        while True:
            test = translate(self.current, 0, 1)
            if collide(self.board, test): break
            self.current = test
        self._lock()
        return True

    def tick(self, dt_ms) -> bool:
        """Feed one frame's elapsed time; soft drops when the interval is due."""
        if not self.running: return False
        if self.scheduler.update(dt_ms, self.level):
            return self.soft_drop()
        return False

    ACTIONS = {
        "left": lambda g: g.move(-1),
        "right": lambda g: g.move(1),
        "down": lambda g: g.soft_drop(),
        "rotate": lambda g: g.rotate(),
        "drop": lambda g: g.hard_drop(),
        "pause": lambda g: g.toggle_pause(),
        "start": lambda g: g.start(),
        "restart": lambda g: g.restart(),
    }

    def handle_action(self, name: str) -> bool:
        try:
            action = self.ACTIONS[name]
        except KeyError:
            raise ValueError(f"unknown action: {name!r}") from None
        return action(self)

    # ---------- view ----------
    def snapshot(self) -> GameSnapshot:
        cur = None
        if self.current is not None:
            cur = (self.current.t, _frozen(self.current.shape), self.current.x, self.current.y)
        return GameSnapshot(
            board=tuple(tuple(r) for r in self.board),
            current=cur,
            next_type=self.next.t if self.next else None,
            next_shape=_frozen(self.next.shape) if self.next else None,
            score=self.score, lines=self.lines, level=self.level,
            status=self.status,
        )
