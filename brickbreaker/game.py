import logging

import gymnasium as gym
from gymnasium.spaces import MultiDiscrete, Box
import numpy as np
import pygame

from brickbreaker.bricks import BrickGrid, HORIZONTAL
from brickbreaker.layout import make_layout

logger = logging.getLogger(__name__)

# --- Phases ---
NOT_PLAYING = "not_playing"
PLAYING = "playing"
GAME_OVER = "game_over"
WON = "won"

# --- Input keys ---
MOVE_LEFT = "left"
MOVE_RIGHT = "right"
CONFIRM = "confirm"
QUIT = "quit"


class GameEnv(gym.Env):
    metadata = {"render_modes": ["rgb_array"]}

    user_guide = "Controls: ← to move left, → to move right, Enter to (re)start, Esc to quit."

    game_description = (
        "Bounce the ball off your paddle to smash a checkerboard of bricks. "
        "Blue bricks are worth 5 points, pink bricks 20. Don't let the ball fall past the paddle!"
    )

    auto_advance = True

    # --- Constants ---
    SCREEN_WIDTH = 960
    SCREEN_HEIGHT = 600
    BRICK_ROWS = 15
    BRICK_COLS = 15

    # Colors
    COLOR_BG = (0, 0, 0)
    COLOR_BORDER = (255, 255, 0)
    COLOR_PADDLE = (0, 255, 0)
    COLOR_BALL = (255, 0, 0)
    COLOR_TEXT = (255, 255, 255)
    COLOR_LOSE = (255, 0, 0)
    COLOR_WIN = (0, 255, 0)

    # Action mapping: [movement, confirm, quit]
    ACTION_LEFT = 3
    ACTION_RIGHT = 4

    def __init__(self, render_mode="rgb_array", screen_size=None, brick_rows=None, brick_cols=None):
        super().__init__()
        self.render_mode = render_mode

        width, height = screen_size or (self.SCREEN_WIDTH, self.SCREEN_HEIGHT)
        self.layout = make_layout(
            width, height,
            rows=brick_rows or self.BRICK_ROWS,
            cols=brick_cols or self.BRICK_COLS,
        )

        self.observation_space = Box(
            low=0, high=255, shape=(height, width, 3), dtype=np.uint8
        )
        self.action_space = MultiDiscrete([5, 2, 2])

        pygame.init()
        pygame.font.init()
        self.screen = pygame.Surface((width, height))
        self.font_score = pygame.font.SysFont("arial", self.layout.font_score, bold=True)
        self.font_headline = pygame.font.SysFont("arial", self.layout.font_headline, bold=True)
        self.font_prompt = pygame.font.SysFont("arial", self.layout.font_prompt, bold=True)

        self.phase = NOT_PLAYING
        self.steps = 0
        self._new_session()

    def _new_session(self):
        lo = self.layout
        self.grid = BrickGrid(lo)
        self.score = 0
        self.bricks_remaining = lo.rows * lo.cols
        self.paddle_x = lo.paddle_start_x
        self.ball_x, self.ball_y = lo.ball_start
        self.ball_dx, self.ball_dy = lo.ball_start_dir

    # --- Entry points ---

    def restart(self):
        self._new_session()
        self.phase = PLAYING
        logger.info("New session started (%d bricks)", self.bricks_remaining)

    def apply_input(self, key):
        """Apply one discrete key press. Returns False when the player quits."""
        lo = self.layout
        if key == MOVE_LEFT:
            self.paddle_x = max(self.paddle_x - lo.paddle_step, 0)
        elif key == MOVE_RIGHT:
            self.paddle_x = min(self.paddle_x + lo.paddle_step, lo.screen_width - lo.paddle_width)
        elif key == CONFIRM:
            self.restart()
        elif key == QUIT:
            return False
        return True

    def advance(self):
        """Run one simulation tick and return the points it awarded."""
        if self.phase != PLAYING:
            return 0

        lo = self.layout
        ball = self.ball_rect()

        # Paddle (box overlap only, the ball is not pushed back out)
        if ball.colliderect(self.paddle_rect()):
            self.ball_dy = -self.ball_dy

        points = 0
        hit = self.grid.resolve_collision(self.ball_x, self.ball_y, lo.ball_size)
        if hit is not None:
            points = hit.points
            self.score += points
            self.bricks_remaining -= 1
            if hit.axis == HORIZONTAL:
                self.ball_dx = -self.ball_dx
            else:
                self.ball_dy = -self.ball_dy

        self.ball_x += self.ball_dx
        self.ball_y += self.ball_dy

        # Walls; no floor, falling out is handled by check_outcome
        if self.ball_x < 0 or self.ball_x > lo.screen_width - lo.ball_size:
            self.ball_dx = -self.ball_dx
        if self.ball_y < 0:
            self.ball_dy = -self.ball_dy

        return points

    def check_outcome(self):
        if self.phase != PLAYING:
            return self.phase
        if self.ball_y > self.layout.loss_line:
            self._finish(GAME_OVER)
        elif self.bricks_remaining == 0:
            self._finish(WON)
        return self.phase

    def _finish(self, phase):
        self.phase = phase
        self.ball_dx = 0
        self.ball_dy = 0
        logger.info("Session ended: %s, score %d", phase, self.score)

    def ball_rect(self):
        size = self.layout.ball_size
        return pygame.Rect(self.ball_x, self.ball_y, size, size)

    def paddle_rect(self):
        lo = self.layout
        return pygame.Rect(self.paddle_x, lo.paddle_y, lo.paddle_width, lo.paddle_height)

    # --- Gymnasium interface ---

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)
        self.steps = 0
        self.restart()
        return self._get_observation(), self._get_info()

    def step(self, action):
        movement, confirm, quit_pressed = action[0], action[1], action[2]

        if movement == self.ACTION_LEFT:
            self.apply_input(MOVE_LEFT)
        elif movement == self.ACTION_RIGHT:
            self.apply_input(MOVE_RIGHT)
        if confirm == 1:
            self.apply_input(CONFIRM)
        truncated = quit_pressed == 1 and not self.apply_input(QUIT)

        reward = float(self.advance())
        self.steps += 1

        observation = self._get_observation()
        terminated = self.phase in (GAME_OVER, WON)

        return (
            observation,
            reward,
            terminated,
            bool(truncated),
            self._get_info()
        )

    def render(self):
        return self._get_observation()

    def render_frame(self):
        """Evaluate loss/win and draw the current frame to ``self.screen``."""
        self.check_outcome()
        self.screen.fill(self.COLOR_BG)
        self._render_game()
        self._render_ui()
        return self.screen

    def _get_observation(self):
        self.render_frame()
        arr = pygame.surfarray.array3d(self.screen)
        return np.transpose(arr, (1, 0, 2)).astype(np.uint8)

    def _render_game(self):
        lo = self.layout
        self.grid.render(self.screen)

        # Top, left and right walls
        pygame.draw.rect(self.screen, self.COLOR_BORDER, (0, 0, lo.screen_width, lo.border))
        pygame.draw.rect(self.screen, self.COLOR_BORDER, (0, 0, lo.border, lo.screen_height))
        pygame.draw.rect(self.screen, self.COLOR_BORDER, (lo.screen_width - lo.border, 0, lo.border, lo.screen_height))

        pygame.draw.rect(self.screen, self.COLOR_PADDLE, self.paddle_rect())
        pygame.draw.ellipse(self.screen, self.COLOR_BALL, self.ball_rect())

    def _render_ui(self):
        lo = self.layout
        score_text = self.font_score.render(f"Score: {self.score}", True, self.COLOR_TEXT)
        self.screen.blit(score_text, score_text.get_rect(bottomleft=(lo.screen_width - 200, 30)))

        if self.phase == NOT_PLAYING:
            self._render_centered("Press Enter to Start", self.font_prompt, self.COLOR_TEXT)
        elif self.phase == GAME_OVER:
            self._render_centered(f"Game Over, Score: {self.score}", self.font_headline, self.COLOR_LOSE)
            self._render_centered("Press Enter to Restart", self.font_prompt, self.COLOR_TEXT, below=True)
        elif self.phase == WON:
            self._render_centered(f"You Won! Score: {self.score}", self.font_headline, self.COLOR_WIN)
            self._render_centered("Press Enter to Restart", self.font_prompt, self.COLOR_TEXT, below=True)

    def _render_centered(self, text, font, color, below=False):
        lo = self.layout
        surf = font.render(text, True, color)
        if below:
            rect = surf.get_rect(midtop=(lo.screen_width // 2, lo.screen_height // 2))
        else:
            rect = surf.get_rect(midbottom=(lo.screen_width // 2, lo.screen_height // 2))
        self.screen.blit(surf, rect)

    def _get_info(self):
        return {
            "score": self.score,
            "steps": self.steps,
            "bricks_left": self.bricks_remaining,
            "phase": self.phase,
        }

    def close(self):
        pygame.quit()

    def validate_implementation(self):
        '''
        Sanity-check the gymnasium contract; leaves the env in a fresh session.
        '''
        assert self.action_space.shape == (3,)
        assert self.action_space.nvec.tolist() == [5, 2, 2]

        obs, info = self.reset()
        assert obs.shape == (self.layout.screen_height, self.layout.screen_width, 3)
        assert obs.dtype == np.uint8
        assert isinstance(info, dict)

        obs, reward, term, trunc, info = self.step([0, 0, 0])
        assert obs.shape == (self.layout.screen_height, self.layout.screen_width, 3)
        assert isinstance(reward, float)
        assert isinstance(term, bool)
        assert isinstance(trunc, bool)
        assert info["phase"] == PLAYING

        self.reset()
        logger.info("Implementation validated")
