"""Session controller.

:class:`GameSession` owns the current :class:`~bounce_ball.state.GameState`
and the leaderboard store.  The pygame screens talk to it instead of touching
state directly, which keeps the screens free of game rules.
"""

from __future__ import annotations

import logging
from typing import List

from bounce_ball import controls, physics
from bounce_ball.leaderboard import LeaderboardStore, format_rankings
from bounce_ball.physics import StepEvent
from bounce_ball.state import DEFAULT_MODE, GameState, Mode, new_game

logger = logging.getLogger(__name__)


class GameSession:
    """Current game state plus the leaderboard it reports to.

    Attributes
    ----------
    state: GameState
        Snapshot replaced on every input and frame.
    store: LeaderboardStore
        Where finished runs are recorded.
    """

    def __init__(self, store: LeaderboardStore | None = None, mode: Mode = DEFAULT_MODE,
                 state: GameState | None = None) -> None:
        self.store = store or LeaderboardStore()
        self.state = state or new_game(mode)

    @property
    def mode(self) -> Mode:
        return self.state.mode

    def switch_mode(self, mode: Mode) -> None:
        """Select ``mode`` and start over: score 0, full lives, timer reset, idle."""

        logger.info("Switching to %s", mode.value)
        self.state = new_game(mode, self.state.board)

    def press(self, key: int) -> None:
        self.state = controls.nudge_paddle(self.state, controls.direction_for_key(self.state, key))

    def point(self, x: float, y: float) -> None:
        self.state = controls.point_paddle(self.state, x, y)

    def tick(self, dt_ms: float) -> StepEvent:
        """Advance one frame and log the notable outcomes."""

        self.state, events = physics.advance(self.state, dt_ms)
        if StepEvent.GAME_OVER in events:
            logger.info(
                "Game over: score %d after %ds", self.state.session.score, self.state.session.elapsed_seconds
            )
        elif StepEvent.LIFE_LOST in events:
            logger.info("Ball lost, %d lives left", self.state.session.lives)
        return events

    def finish_game(self, name: str | None) -> List[str]:
        """Record the finished run, reset the session and return the rankings."""

        session = self.state.session
        records = self.store.record(name, session.score, session.elapsed_seconds)
        self.state = new_game(self.state.mode, self.state.board)
        return format_rankings(records)
