"""
Core interfaces and protocols for Pongo

The game-state updater only talks to its collaborators through these protocols,
so renderers and input sources can be swapped (pygame window, headless tests).
"""

from pongo.core.interfaces.physics import PhysicsBackend
from pongo.core.interfaces.player import InputSource
from pongo.core.interfaces.renderer import RendererProtocol

__all__ = ["PhysicsBackend", "InputSource", "RendererProtocol"]
