"""
PyGame renderer for Pongo
"""

import pygame

from pongo.core.entities import BallShape
from pongo.core.entities import GameState
from pongo.gui.resources import FontSet
from pongo.utils.config import LOGICAL_HEIGHT
from pongo.utils.config import LOGICAL_WIDTH
from pongo.utils.config import GameConfig
from pongo.utils.config import game_config


def format_hud_lines(score: int, high_score: int) -> tuple[str, str]:
    """Returns the score and high score labels"""
    return (f"Score: {score}", f"High score: {high_score}")


class PygameRenderer:
    """PyGame-based renderer for Pongo

    Everything is drawn on a canvas at the logical resolution, then scaled to the window.
    Without a window surface the renderer works off-screen.
    """

    def __init__(
        self,
        fonts: FontSet,
        screen: pygame.Surface | None = None,
        config: GameConfig | None = None,
    ):
        self.config = config or game_config
        self.fonts = fonts
        self.screen = screen
        self.width = LOGICAL_WIDTH
        self.height = LOGICAL_HEIGHT
        self.canvas = pygame.Surface((self.width, self.height))

        self.background_color: tuple[int, int, int] = self.config.BACKGROUND_COLOR
        self.foreground_color: tuple[int, int, int] = self.config.FOREGROUND_COLOR

    def clear_screen(self) -> None:
        """Clear the canvas with background color"""
        self.canvas.fill(self.background_color)

    def draw_paddle(self, paddle_rect: tuple[int, int, int, int]) -> None:
        """Draw the player paddle"""
        pygame.draw.rect(self.canvas, self.foreground_color, pygame.Rect(*paddle_rect))

    def draw_ball(self, position: tuple[int, int], shape: str, size: int) -> None:
        """Draw the ball as a square or a disc"""
        if shape == BallShape.CIRCLE.value:
            pygame.draw.circle(self.canvas, self.foreground_color, position, size)
        else:
            pygame.draw.rect(self.canvas, self.foreground_color, pygame.Rect(*position, size, size))

    def draw_score(self, score: int, high_score: int) -> None:
        """Draw the current score and the high score"""
        score_text, high_score_text = format_hud_lines(score, high_score)
        for text, offset in (
            (score_text, self.config.SCORE_TEXT_OFFSET),
            (high_score_text, self.config.HIGH_SCORE_TEXT_OFFSET),
        ):
            text_surface = self.fonts.hud.render(text, True, self.foreground_color)
            self.canvas.blit(text_surface, offset)

    def render_game_state(self, game_state: GameState) -> None:
        """Render the complete game state"""
        self.clear_screen()
        self.draw_paddle(game_state.paddle_rect)
        self.draw_ball(game_state.ball_position, game_state.ball_shape, game_state.ball_size)
        self.draw_score(game_state.score, game_state.high_score)

    def present(self) -> None:
        """Scale the canvas to the window and flip"""
        if self.screen is None:
            return
        if self.screen.get_size() == self.canvas.get_size():
            self.screen.blit(self.canvas, (0, 0))
        else:
            pygame.transform.scale(self.canvas, self.screen.get_size(), self.screen)
        pygame.display.flip()

    def cleanup(self) -> None:
        """Release the window surface"""
        self.screen = None
