"""
Core module of Pongo
"""

from pongo.core.entities import Ball
from pongo.core.entities import BallShape
from pongo.core.entities import GameState
from pongo.core.entities import InputState
from pongo.core.entities import Paddle
from pongo.core.entities import Position
from pongo.core.entities import Score
from pongo.core.entities import Velocity
from pongo.core.physics import PhysicsEngine

__all__ = [
    "Ball",
    "BallShape",
    "GameState",
    "InputState",
    "Paddle",
    "PhysicsEngine",
    "Position",
    "Score",
    "Velocity",
]
