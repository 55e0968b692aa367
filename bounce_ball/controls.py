"""Paddle input: arrow keys and pointer motion.

Both input paths compute a candidate paddle coordinate on the active mode's
axis, clamp it to the board and, if the session is idle, start it.  Input is
never rejected, only clamped, and nothing happens once the game is over.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, Tuple

import pygame

from bounce_ball.config import PADDLE_STEP, POINTER_DEADZONE
from bounce_ball.state import GameState, Phase, paddle_length

# Arrow keys per axis, mapped to the direction they move the paddle.
VERTICAL_KEYS: Dict[int, int] = {pygame.K_UP: -1, pygame.K_DOWN: 1}
HORIZONTAL_KEYS: Dict[int, int] = {pygame.K_LEFT: -1, pygame.K_RIGHT: 1}


def clamp(value: float, low: float, high: float) -> float:
    """Limit ``value`` to the closed range ``[low, high]``."""

    return max(low, min(high, value))


def paddle_limit(state: GameState) -> float:
    """Largest paddle coordinate on the active axis."""

    board = state.board
    extent = board.height if state.mode.vertical else board.width
    return extent - paddle_length(state.mode, board)


def start(state: GameState) -> GameState:
    """Move an idle session into play; other phases are returned untouched."""

    if state.session.phase is Phase.IDLE:
        return replace(state, session=replace(state.session, phase=Phase.RUNNING))
    return state


def place_paddle(state: GameState, coordinate: float) -> GameState:
    """Set the paddle's axis coordinate, clamped to the board."""

    coordinate = clamp(coordinate, 0, paddle_limit(state))
    if state.mode.vertical:
        return replace(state, paddle=replace(state.paddle, y=coordinate))
    return replace(state, paddle=replace(state.paddle, x=coordinate))


def paddle_coordinate(state: GameState) -> float:
    """Paddle position on the active axis: y for side paddles, x otherwise."""

    return state.paddle.y if state.mode.vertical else state.paddle.x


def direction_for_key(state: GameState, key: int) -> int:
    """Return -1/1 for an arrow key on the mode's axis, 0 for anything else."""

    keys = VERTICAL_KEYS if state.mode.vertical else HORIZONTAL_KEYS
    return keys.get(key, 0)


def nudge_paddle(state: GameState, direction: int, step: float = PADDLE_STEP) -> GameState:
    """Handle one arrow key press (or key repeat) in ``direction``."""

    if state.session.game_over or direction == 0:
        return state
    moved = place_paddle(state, paddle_coordinate(state) + direction * step)
    return start(moved)


def point_paddle(state: GameState, x: float, y: float) -> GameState:
    """Centre the paddle on the pointer, given in board coordinates.

    Movements within :data:`POINTER_DEADZONE` of the current position are
    ignored so a resting pointer does not start the session.
    """

    if state.session.game_over:
        return state

    half = paddle_length(state.mode, state.board) / 2
    candidate = (y if state.mode.vertical else x) - half
    if abs(paddle_coordinate(state) - candidate) <= POINTER_DEADZONE:
        return state
    return start(place_paddle(state, candidate))


def to_board(pos: Tuple[int, int], origin: Tuple[int, int], state: GameState) -> Tuple[float, float] | None:
    """Translate a window position into board coordinates.

    Returns ``None`` when the pointer is outside the board rectangle.
    """

    bx = pos[0] - origin[0]
    by = pos[1] - origin[1]
    if 0 <= bx < state.board.width and 0 <= by < state.board.height:
        return bx, by
    return None
