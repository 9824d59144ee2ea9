"""
Font resources for the Pongo HUD

Fonts are loaded once during application setup and handed to the renderer.
"""

from dataclasses import dataclass

import pygame

from pongo.utils.config import GameConfig
from pongo.utils.config import game_config


class ResourceError(Exception):
    """A startup resource could not be loaded"""


@dataclass
class FontSet:
    """Fonts used by the renderer"""

    hud: pygame.font.Font
    size: int


def load_fonts(config: GameConfig | None = None) -> FontSet:
    """
    Load the HUD font.

    Args:
        config: Configuration to read FONT_PATH / FONT_SIZE from (global config by default)

    Returns:
        FontSet ready to be passed to the renderer

    Raises:
        ResourceError: The font file is missing or unreadable
    """
    config = config or game_config
    if not pygame.font.get_init():
        pygame.font.init()

    source = config.FONT_PATH or "pygame default font"
    try:
        hud = pygame.font.Font(config.FONT_PATH, config.FONT_SIZE)
    except (OSError, pygame.error) as e:
        raise ResourceError(f"Unable to load font from {source}: {e}") from e

    return FontSet(hud=hud, size=config.FONT_SIZE)
