from __future__ import annotations

from dataclasses import replace

from bounce_ball.physics import StepEvent, advance
from bounce_ball.state import Ball, GameState, Mode, Phase, new_game


def running(mode: Mode, ball: Ball | None = None, **session) -> GameState:
    state = new_game(mode)
    state = replace(state, session=replace(state.session, phase=Phase.RUNNING, **session))
    if ball is not None:
        state = replace(state, ball=ball)
    return state


def test_idle_session_does_not_move() -> None:
    state = new_game(Mode.OPEN_RIGHT)
    after, events = advance(state, 1000)
    assert after is state
    assert events == StepEvent.NONE


def test_ball_moves_by_velocity() -> None:
    state = running(Mode.OPEN_BOTTOM, Ball(300, 250, 3, -2))
    after, events = advance(state)
    assert (after.ball.x, after.ball.y) == (303, 248)
    assert events == StepEvent.NONE


def test_top_wall_reflects_in_open_right() -> None:
    state = running(Mode.OPEN_RIGHT, Ball(300, 16, -4, -2))
    after, events = advance(state)
    assert after.ball.dy == 2
    assert after.ball.dx == -4
    assert (after.ball.x, after.ball.y) == (296, 14)
    assert StepEvent.WALL in events
    assert after.session.lives == 5


def test_closed_walls_never_cost_a_life() -> None:
    for mode in Mode:
        # Aim the ball at every wall except the open one.
        probes = {
            Mode.OPEN_LEFT: Ball(590, 250, 8, 0),
            Mode.OPEN_RIGHT: Ball(10, 250, -8, 0),
            Mode.OPEN_TOP: Ball(300, 490, 0, 8),
            Mode.OPEN_BOTTOM: Ball(300, 10, 0, -8),
        }
        after, events = advance(running(mode, probes[mode]))
        assert StepEvent.WALL in events
        assert StepEvent.LIFE_LOST not in events
        assert after.session.lives == 5
        assert (after.ball.dx, after.ball.dy) == (-probes[mode].dx, -probes[mode].dy)


def test_paddle_hit_scores_and_reflects() -> None:
    state = running(Mode.OPEN_RIGHT, Ball(574, 250, 4, 0))
    after, events = advance(state)
    assert StepEvent.PADDLE in events
    assert after.ball.dx == -4
    assert after.session.score == 1


def test_paddle_hit_on_horizontal_paddle() -> None:
    state = running(Mode.OPEN_TOP, Ball(300, 28, 1, -4))
    after, events = advance(state)
    assert StepEvent.PADDLE in events
    assert after.ball.dy == 4
    assert after.session.score == 1


def test_ball_leaving_the_paddle_does_not_score_again() -> None:
    state = running(Mode.OPEN_RIGHT, Ball(578, 250, -4, 0))
    after, events = advance(state)
    assert StepEvent.PADDLE not in events
    assert after.session.score == 0


def test_miss_through_open_edge_resets_serve() -> None:
    state = running(Mode.OPEN_RIGHT, Ball(584, 50, 4, 0), score=3)
    after, events = advance(state)
    assert StepEvent.LIFE_LOST in events
    assert StepEvent.GAME_OVER not in events
    assert after.session.lives == 4
    assert after.session.phase is Phase.IDLE
    assert after.session.score == 3
    assert (after.ball.x, after.ball.y, after.ball.dx, after.ball.dy) == (575, 250, -4, 2)
    assert after.paddle == new_game(Mode.OPEN_RIGHT).paddle


def test_miss_on_open_bottom() -> None:
    state = running(Mode.OPEN_BOTTOM, Ball(50, 480, 0, 8))
    after, events = advance(state)
    assert StepEvent.LIFE_LOST in events
    assert after.session.lives == 4


def test_last_life_ends_the_game() -> None:
    state = running(Mode.OPEN_LEFT, Ball(16, 50, -4, 0), lives=1)
    after, events = advance(state)
    assert StepEvent.GAME_OVER in events
    assert after.session.lives == 0
    assert after.session.phase is Phase.GAME_OVER
    assert not after.session.running


def test_timer_accumulates_only_while_running() -> None:
    state = running(Mode.OPEN_BOTTOM, Ball(300, 250, 1, 1))
    for _ in range(3):
        state, _ = advance(state, 400)
    assert state.session.elapsed_seconds == 1
    assert state.session.elapsed_ms == 1200

    idle = replace(state, session=replace(state.session, phase=Phase.IDLE))
    after, _ = advance(idle, 5000)
    assert after.session.elapsed_seconds == 1


def test_corner_hit_flips_both_components() -> None:
    state = running(Mode.OPEN_BOTTOM, Ball(16, 16, -4, -4))
    after, events = advance(state)
    assert (after.ball.dx, after.ball.dy) == (4, 4)
    assert StepEvent.WALL in events
    assert StepEvent.LIFE_LOST not in events
    assert after.session.lives == 5
