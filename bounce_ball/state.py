"""Game state snapshots.

Every piece of mutable game data (ball, paddle, session counters and the
active mode) lives in a single frozen :class:`GameState`.  Transitions in
:mod:`bounce_ball.physics` and :mod:`bounce_ball.controls` return new
snapshots built with :func:`dataclasses.replace`, which keeps them easy to
test without a window.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import Tuple

from bounce_ball.config import BALL_RADIUS, PADDLE_THICKNESS, START_LIVES, Board


class Mode(enum.Enum):
    """Which board edge is open.  The paddle always guards that edge."""

    OPEN_RIGHT = "open-right"
    OPEN_LEFT = "open-left"
    OPEN_TOP = "open-top"
    OPEN_BOTTOM = "open-bottom"

    @property
    def vertical(self) -> bool:
        """``True`` when the paddle stands upright and moves along y."""

        return self in (Mode.OPEN_RIGHT, Mode.OPEN_LEFT)

    @property
    def label(self) -> str:
        return self.value.replace("-", " ").title()


DEFAULT_MODE = Mode.OPEN_BOTTOM


class Phase(enum.Enum):
    """Idle until the first input, running while the ball is live, then game over."""

    IDLE = "idle"
    RUNNING = "running"
    GAME_OVER = "game-over"


@dataclass(frozen=True)
class Ball:
    """Ball centre, per-frame velocity and radius, all in board units."""

    x: float
    y: float
    dx: float
    dy: float
    radius: float = BALL_RADIUS


@dataclass(frozen=True)
class Paddle:
    """Top-left corner of the paddle.

    Only the coordinate on the mode's movement axis is used; the other one is
    fixed by the board edge the paddle sits on (see :func:`paddle_rect`).
    """

    x: float
    y: float


@dataclass(frozen=True)
class Session:
    """Counters for one play attempt.

    ``elapsed_ms`` only grows while the phase is :attr:`Phase.RUNNING`; a lost
    life pauses it and a mode switch or game over starts it again from zero.
    """

    phase: Phase = Phase.IDLE
    score: int = 0
    lives: int = START_LIVES
    elapsed_ms: float = 0.0

    @property
    def running(self) -> bool:
        return self.phase is Phase.RUNNING

    @property
    def game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    @property
    def elapsed_seconds(self) -> int:
        return int(self.elapsed_ms // 1000)


@dataclass(frozen=True)
class GameState:
    """Everything the update step, the input handlers and the renderer need."""

    mode: Mode
    ball: Ball
    paddle: Paddle
    session: Session = field(default_factory=Session)
    board: Board = field(default_factory=Board)


def paddle_length(mode: Mode, board: Board) -> float:
    return board.vertical_paddle_length if mode.vertical else board.horizontal_paddle_length


def paddle_rect(state: GameState) -> Tuple[float, float, float, float]:
    """Return the paddle as ``(x, y, width, height)`` in board coordinates."""

    board = state.board
    length = paddle_length(state.mode, board)
    if state.mode is Mode.OPEN_RIGHT:
        return board.width - PADDLE_THICKNESS, state.paddle.y, PADDLE_THICKNESS, length
    if state.mode is Mode.OPEN_LEFT:
        return 0, state.paddle.y, PADDLE_THICKNESS, length
    if state.mode is Mode.OPEN_TOP:
        return state.paddle.x, 0, length, PADDLE_THICKNESS
    return state.paddle.x, board.height - PADDLE_THICKNESS, length, PADDLE_THICKNESS


def starting_ball(mode: Mode, board: Board, radius: float = BALL_RADIUS) -> Ball:
    """Serve position for ``mode``: next to the paddle, heading into the board."""

    if mode is Mode.OPEN_RIGHT:
        return Ball(board.width - PADDLE_THICKNESS - radius, board.height / 2, -4, 2, radius)
    if mode is Mode.OPEN_LEFT:
        return Ball(PADDLE_THICKNESS + radius, board.height / 2, 4, 2, radius)
    if mode is Mode.OPEN_TOP:
        return Ball(board.width / 2, PADDLE_THICKNESS + radius, 2, 4, radius)
    return Ball(board.width / 2, board.height - PADDLE_THICKNESS - radius, 2, -4, radius)


def starting_paddle(board: Board) -> Paddle:
    """Centre the paddle on both axes; whichever one the mode uses is what counts."""

    return Paddle(
        x=(board.width - board.horizontal_paddle_length) / 2,
        y=(board.height - board.vertical_paddle_length) / 2,
    )


def reset_positions(state: GameState) -> GameState:
    """Put the ball and paddle back at the mode's serve position."""

    return replace(
        state,
        ball=starting_ball(state.mode, state.board, state.ball.radius),
        paddle=starting_paddle(state.board),
    )


def new_game(mode: Mode = DEFAULT_MODE, board: Board | None = None) -> GameState:
    """Fresh idle state: score 0, full lives, timer at zero."""

    board = board or Board()
    return GameState(
        mode=mode,
        ball=starting_ball(mode, board),
        paddle=starting_paddle(board),
        session=Session(),
        board=board,
    )
