"""Per-frame update step.

:func:`advance` is a pure transition: it takes a :class:`GameState` and the
milliseconds since the previous frame and returns the next state together
with the events that happened along the way.  Motion is expressed in units
per frame (the host calls ``advance`` once per display refresh), while the
elapsed-time readout accumulates the real frame duration.
"""

from __future__ import annotations

import enum
from dataclasses import replace
from typing import Tuple

from bounce_ball.state import Ball, GameState, Mode, Phase, paddle_rect, reset_positions


class StepEvent(enum.Flag):
    NONE = 0
    WALL = enum.auto()
    PADDLE = enum.auto()
    LIFE_LOST = enum.auto()
    GAME_OVER = enum.auto()


def bounce_off_walls(ball: Ball, mode: Mode, width: float, height: float) -> Tuple[Ball, bool]:
    """Reflect ``ball`` off every wall except the open edge of ``mode``.

    Each axis is handled on its own so a corner hit flips both components.
    There is no tunnelling correction: a ball already past a wall simply has
    its direction flipped.
    """

    dx, dy = ball.dx, ball.dy
    left = ball.x - ball.radius < 0 and mode is not Mode.OPEN_LEFT
    right = ball.x + ball.radius > width and mode is not Mode.OPEN_RIGHT
    top = ball.y - ball.radius < 0 and mode is not Mode.OPEN_TOP
    bottom = ball.y + ball.radius > height and mode is not Mode.OPEN_BOTTOM

    if left or right:
        dx = -dx
    if top or bottom:
        dy = -dy
    bounced = left or right or top or bottom
    return replace(ball, dx=dx, dy=dy), bounced


def escaped(ball: Ball, mode: Mode, width: float, height: float) -> bool:
    """Return ``True`` once the ball's leading edge is past the open edge."""

    if mode is Mode.OPEN_RIGHT:
        return ball.x + ball.radius > width
    if mode is Mode.OPEN_LEFT:
        return ball.x - ball.radius < 0
    if mode is Mode.OPEN_TOP:
        return ball.y - ball.radius < 0
    return ball.y + ball.radius > height


def hits_paddle(state: GameState) -> bool:
    """Bounding-box test between the ball and the paddle.

    The ball is expanded by its radius on the axis normal to the paddle and
    treated as a point on the paddle's own axis.  Contact only counts while
    the ball is heading toward the paddle so a single touch cannot score on
    several consecutive frames.
    """

    ball = state.ball
    px, py, pw, ph = paddle_rect(state)

    if state.mode.vertical:
        overlap = (
            ball.x + ball.radius >= px
            and ball.x - ball.radius <= px + pw
            and py <= ball.y <= py + ph
        )
        approaching = ball.dx > 0 if state.mode is Mode.OPEN_RIGHT else ball.dx < 0
    else:
        overlap = (
            ball.y + ball.radius >= py
            and ball.y - ball.radius <= py + ph
            and px <= ball.x <= px + pw
        )
        approaching = ball.dy > 0 if state.mode is Mode.OPEN_BOTTOM else ball.dy < 0
    return overlap and approaching


def lose_life(state: GameState) -> Tuple[GameState, StepEvent]:
    """Apply a miss: one life less, then either a fresh serve or game over."""

    lives = max(0, state.session.lives - 1)
    if lives == 0:
        session = replace(state.session, lives=0, phase=Phase.GAME_OVER)
        return replace(state, session=session), StepEvent.LIFE_LOST | StepEvent.GAME_OVER

    session = replace(state.session, lives=lives, phase=Phase.IDLE)
    return reset_positions(replace(state, session=session)), StepEvent.LIFE_LOST


def advance(state: GameState, dt_ms: float = 0.0) -> Tuple[GameState, StepEvent]:
    """Run one frame of the simulation.

    Parameters
    ----------
    state:
        Snapshot to advance.  Nothing changes unless the session is running.
    dt_ms:
        Wall-clock milliseconds since the previous frame, added to the
        session timer.

    Returns
    -------
    tuple[GameState, StepEvent]
        The next snapshot and the flags describing what happened.
    """

    if not state.session.running:
        return state, StepEvent.NONE

    events = StepEvent.NONE
    board = state.board
    session = replace(state.session, elapsed_ms=state.session.elapsed_ms + max(0.0, dt_ms))

    ball = state.ball
    ball = replace(ball, x=ball.x + ball.dx, y=ball.y + ball.dy)
    ball, bounced = bounce_off_walls(ball, state.mode, board.width, board.height)
    if bounced:
        events |= StepEvent.WALL

    state = replace(state, ball=ball, session=session)

    # A miss is decided before the paddle so an escaped ball always costs a life.
    if escaped(ball, state.mode, board.width, board.height):
        state, missed = lose_life(state)
        return state, events | missed

    if hits_paddle(state):
        if state.mode.vertical:
            ball = replace(ball, dx=-ball.dx)
        else:
            ball = replace(ball, dy=-ball.dy)
        session = replace(session, score=session.score + 1)
        state = replace(state, ball=ball, session=session)
        events |= StepEvent.PADDLE

    return state, events
