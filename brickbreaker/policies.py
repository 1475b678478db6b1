from brickbreaker.game import PLAYING


def track_ball(env):
    # Strategy: keep the paddle centre under the ball centre. Moves are only
    # made when the gap exceeds one paddle step, so the paddle does not jitter
    # around the target. Outside a session, press Enter to start a new one.
    if env.phase != PLAYING:
        return [0, 1, 0]  # Confirm

    lo = env.layout
    paddle_center = env.paddle_x + lo.paddle_width / 2
    ball_center = env.ball_x + lo.ball_size / 2
    gap = ball_center - paddle_center

    if gap > lo.paddle_step:
        return [4, 0, 0]  # Move right
    elif gap < -lo.paddle_step:
        return [3, 0, 0]  # Move left
    else:
        return [0, 0, 0]


def idle(env):
    # Never touches the controls; the ball eventually falls past the paddle.
    return [0, 0, 0]
