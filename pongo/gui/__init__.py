"""
PyGame front end for Pongo
"""

from pongo.gui.human_player import HumanPlayer
from pongo.gui.human_player import InputManager
from pongo.gui.pygame_renderer import PygameRenderer
from pongo.gui.resources import FontSet
from pongo.gui.resources import ResourceError
from pongo.gui.resources import load_fonts

__all__ = [
    "FontSet",
    "HumanPlayer",
    "InputManager",
    "PygameRenderer",
    "ResourceError",
    "load_fonts",
]
