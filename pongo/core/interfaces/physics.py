"""
Physics backend protocol - defines interface for game-state updaters
"""

from typing import Any
from typing import Protocol

from pongo.core.entities import Ball
from pongo.core.entities import GameState
from pongo.core.entities import InputState
from pongo.core.entities import Paddle
from pongo.core.entities import Score


class PhysicsBackend(Protocol):
    """
    Protocol for game-state updaters.

    The host drives it once per tick and the renderer reads it back right after.
    """

    ball: Ball
    paddle: Paddle
    score: Score
    tick: int

    field_width: int
    field_height: int

    def update(self, action: InputState) -> dict[str, list[Any]]:
        """
        Advance the simulation by one fixed tick.

        Args:
            action: Keys held by the player during this tick

        Returns:
            Dictionary with events that occurred:
            {
                "misses": [...],
                "wall_bounces": [...],
                "paddle_hits": [...]
            }
        """
        ...

    def reset(self) -> None:
        """Ball back to its start position, current score to zero"""
        ...

    def reset_game(self) -> None:
        """Fresh entities, score and high score to zero"""
        ...

    def get_game_state(self) -> GameState:
        """Snapshot of positions, velocity and scores"""
        ...
