from collections import namedtuple


Layout = namedtuple("Layout", [
    "screen_width", "screen_height",
    "rows", "cols",
    "brick_width", "brick_height", "brick_left", "brick_top",
    "paddle_width", "paddle_height", "paddle_y", "paddle_step", "paddle_start_x",
    "ball_size", "ball_start", "ball_start_dir",
    "loss_line",
    "border", "font_score", "font_headline", "font_prompt",
])

# --- Fixed proportions of the screen ---
GRID_WIDTH_RATIO = 0.7
GRID_HEIGHT_RATIO = 0.2
GRID_LEFT_RATIO = 0.15
GRID_TOP_RATIO = 0.1
PADDLE_Y_RATIO = 0.9
LOSS_LINE_RATIO = 0.95

PADDLE_HEIGHT = 8
PADDLE_STEP = 20
BALL_START_DIR = (-1, -2)
BORDER = 3

TICK_INTERVAL_MS = 8


def make_layout(screen_width, screen_height, rows=15, cols=15):
    """Compute every screen-scaled constant for one session.

    All positions are integer pixels except ``brick_left``/``brick_top``,
    which stay fractional so each brick's x/y is truncated only once.
    """
    paddle_width = screen_width // 7
    return Layout(
        screen_width=screen_width,
        screen_height=screen_height,
        rows=rows,
        cols=cols,
        brick_width=int(screen_width * GRID_WIDTH_RATIO) // cols,
        brick_height=int(screen_height * GRID_HEIGHT_RATIO) // rows,
        brick_left=screen_width * GRID_LEFT_RATIO,
        brick_top=screen_height * GRID_TOP_RATIO,
        paddle_width=paddle_width,
        paddle_height=PADDLE_HEIGHT,
        paddle_y=int(screen_height * PADDLE_Y_RATIO),
        paddle_step=PADDLE_STEP,
        paddle_start_x=(screen_width - paddle_width) // 2,
        ball_size=screen_width // 50,
        ball_start=(screen_width // 4, screen_height // 2),
        ball_start_dir=BALL_START_DIR,
        loss_line=screen_height * LOSS_LINE_RATIO,
        border=BORDER,
        font_score=screen_width // 40,
        font_headline=screen_width // 20,
        font_prompt=screen_width // 30,
    )
