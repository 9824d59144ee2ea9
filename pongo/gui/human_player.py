"""
Keyboard input for Pongo
"""

from typing import Any

import pygame

from pongo.core.entities import InputState
from pongo.utils.config import GameConfig
from pongo.utils.config import game_config


class HumanPlayer:
    """Human player that gets input from keyboard"""

    def __init__(self, control_scheme: str | None = None, config: GameConfig | None = None):
        """
        Initialize human player

        Args:
            control_scheme: "arrows" for arrow keys or "wasd" for WASD keys
                (CONTROL_SCHEME from the configuration by default)
            config: Configuration providing the keyboard layout
        """
        config = config or game_config
        self.control_scheme = control_scheme or config.CONTROL_SCHEME
        self.current_input = InputState()

        layout = config.get_keyboard_layout()

        if self.control_scheme == "arrows":
            self.key_mapping = layout.arrow_keys.copy()
            self.display_names = {"up": "↑", "down": "↓"}
        elif self.control_scheme == "wasd":
            self.key_mapping = layout.wasd_keys.copy()
            self.display_names = layout.display_names.copy()
        else:
            raise ValueError(f"Unknown control scheme: {self.control_scheme}")

    def update_from_keys(self, keys_pressed: Any) -> InputState:
        """Update input from key states indexed by pygame key constants"""
        self.current_input = InputState(
            up=bool(keys_pressed[self.key_mapping["up"]]),
            down=bool(keys_pressed[self.key_mapping["down"]]),
        )
        return self.current_input

    def get_input(self) -> InputState:
        return self.current_input

    def get_control_info(self) -> dict[str, str]:
        """Get information about controls for this player"""
        return self.display_names.copy()


class InputManager:
    """Polls the keyboard once per tick for a human player"""

    def __init__(self, player: HumanPlayer) -> None:
        self.player = player

    def get_input(self) -> InputState:
        """Read the keyboard state for the current tick"""
        return self.player.update_from_keys(pygame.key.get_pressed())

    def handle_event(self, event: pygame.event.Event) -> str | None:
        """
        Handle pygame events

        Returns:
            "quit" when the window is closed or Escape is pressed, None otherwise
        """
        if event.type == pygame.QUIT:
            return "quit"
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return "quit"
        return None
