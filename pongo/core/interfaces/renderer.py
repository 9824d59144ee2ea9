"""
Renderer protocol - defines interface for different rendering backends
"""

from typing import Protocol

from pongo.core.entities import GameState


class RendererProtocol(Protocol):
    """
    Protocol for renderer implementations.

    Renderers only read the game state; they never change it.
    """

    def render_game_state(self, game_state: GameState) -> None:
        """
        Draw a single frame.

        Args:
            game_state: Snapshot taken right after the tick's update
        """
        ...

    def present(self) -> None:
        """Show the drawn frame"""
        ...

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        ...
