import numpy as np

from brickbreaker.bricks import EMPTY
from brickbreaker.game import (
    CONFIRM, GAME_OVER, GameEnv, MOVE_LEFT, MOVE_RIGHT, NOT_PLAYING, PLAYING, QUIT, WON,
)


def _park_ball(env, x=500, y=500, dx=0, dy=0):
    env.ball_x, env.ball_y = x, y
    env.ball_dx, env.ball_dy = dx, dy


def test_starts_idle(env):
    assert env.phase == NOT_PLAYING
    assert env.score == 0
    assert env.bricks_remaining == 15 * 15
    assert (env.ball_x, env.ball_y) == (250, 500)
    assert env.paddle_x == 429


def test_advance_is_noop_until_started(env):
    assert env.advance() == 0
    assert (env.ball_x, env.ball_y) == (250, 500)
    assert env.phase == NOT_PLAYING


def test_confirm_starts_session(env):
    assert env.apply_input(CONFIRM)
    assert env.phase == PLAYING
    env.advance()
    assert (env.ball_x, env.ball_y) == (249, 498)


def test_quit_returns_false(env):
    assert env.apply_input(QUIT) is False
    assert env.apply_input("unknown") is True


def test_paddle_is_clamped(env):
    for _ in range(100):
        env.apply_input(MOVE_LEFT)
    assert env.paddle_x == 0
    for _ in range(100):
        env.apply_input(MOVE_RIGHT)
    assert env.paddle_x == 1000 - 142
    env.apply_input(MOVE_LEFT)
    assert env.paddle_x == 1000 - 142 - 20


def test_left_wall_bounce(env):
    env.restart()
    _park_ball(env, x=0, dx=-1, dy=-2)
    env.advance()
    assert env.ball_x == -1
    assert env.ball_dx == 1


def test_right_wall_bounce(env):
    env.restart()
    _park_ball(env, x=980, dx=1, dy=-2)
    env.advance()
    assert env.ball_dx == -1


def test_ceiling_bounce(env):
    env.restart()
    _park_ball(env, x=20, y=0, dx=1, dy=-2)
    env.advance()
    assert env.ball_y == -2
    assert env.ball_dy == 2


def test_no_floor_bounce(env):
    env.restart()
    _park_ball(env, x=20, y=990, dx=1, dy=2)
    env.advance()
    assert env.ball_dy == 2


def test_paddle_bounce(env):
    env.restart()
    _park_ball(env, x=450, y=885, dx=1, dy=2)
    env.advance()
    assert env.ball_dy == -2
    assert env.ball_y == 883


def test_brick_hit_scores_and_bounces(small_env):
    env = small_env
    env.restart()
    _park_ball(env, x=140, y=90, dx=1, dy=2)
    points = env.advance()
    assert points == 5
    assert env.score == 5
    assert env.bricks_remaining == 3
    assert env.ball_dy == -2
    assert env.grid.kind_at(0, 0) == EMPTY


def test_side_hit_flips_horizontal(small_env):
    env = small_env
    env.restart()
    _park_ball(env, x=131, y=150, dx=1, dy=2)
    env.advance()
    assert env.ball_dx == -1
    assert env.ball_dy == 2


def test_ball_below_loss_line_ends_game(env):
    env.restart()
    _park_ball(env, x=100, y=960, dx=1, dy=2)
    assert env.check_outcome() == GAME_OVER
    assert (env.ball_dx, env.ball_dy) == (0, 0)

    env.advance()
    assert (env.ball_x, env.ball_y) == (100, 960)


def test_last_brick_wins():
    env = GameEnv(screen_size=(1000, 1000), brick_rows=1, brick_cols=1)
    env.restart()
    _park_ball(env, x=400, y=250, dx=-1, dy=-2)
    assert env.advance() == 5
    assert env.bricks_remaining == 0
    assert env.phase == PLAYING

    assert env.check_outcome() == WON
    assert (env.ball_dx, env.ball_dy) == (0, 0)
    env.close()


def test_outcome_is_sticky(env):
    env.restart()
    _park_ball(env, y=960)
    env.check_outcome()
    env.bricks_remaining = 0
    assert env.check_outcome() == GAME_OVER


def test_loss_wins_tie(small_env):
    env = small_env
    env.restart()
    env.bricks_remaining = 0
    _park_ball(env, y=960)
    assert env.check_outcome() == GAME_OVER


def test_restart_after_win_resets_session():
    env = GameEnv(screen_size=(1000, 1000), brick_rows=1, brick_cols=1)
    env.restart()
    _park_ball(env, x=400, y=250, dx=-1, dy=-2)
    env.advance()
    env.apply_input(MOVE_LEFT)
    env.check_outcome()
    assert env.phase == WON

    env.apply_input(CONFIRM)
    assert env.phase == PLAYING
    assert env.score == 0
    assert env.bricks_remaining == 1
    assert env.grid.remaining() == 1
    assert (env.ball_x, env.ball_y) == (250, 500)
    assert (env.ball_dx, env.ball_dy) == (-1, -2)
    assert env.paddle_x == 429
    env.close()


def test_render_frame_runs_outcome_check(env):
    env.restart()
    _park_ball(env, y=960)
    env.render_frame()
    assert env.phase == GAME_OVER


def test_step_contract(env):
    obs, info = env.reset()
    assert obs.shape == (1000, 1000, 3)
    assert obs.dtype == np.uint8
    assert info["phase"] == PLAYING

    obs, reward, terminated, truncated, info = env.step(np.array([4, 0, 0]))
    assert env.paddle_x == 449
    assert reward == 0.0
    assert terminated is False
    assert truncated is False
    assert info["steps"] == 1
    assert info["bricks_left"] == 225


def test_step_quit_truncates(env):
    env.reset()
    _, _, _, truncated, _ = env.step([0, 0, 1])
    assert truncated is True


def test_step_terminates_on_loss(env):
    env.reset()
    _park_ball(env, y=960)
    _, _, terminated, _, info = env.step([0, 0, 0])
    assert terminated is True
    assert info["phase"] == GAME_OVER


def test_frame_shows_paddle_and_ball(env):
    obs, _ = env.reset()
    assert tuple(obs[903, 500]) == GameEnv.COLOR_PADDLE
    assert tuple(obs[510, 260]) == GameEnv.COLOR_BALL
    assert tuple(obs[1, 500]) == GameEnv.COLOR_BORDER


def test_validate_implementation(env):
    env.validate_implementation()
    assert env.phase == PLAYING
