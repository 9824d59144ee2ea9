"""
Pongo utilities
"""

from pongo.utils.config import GameConfig
from pongo.utils.config import Variant
from pongo.utils.config import game_config

__all__ = ["game_config", "GameConfig", "Variant"]
