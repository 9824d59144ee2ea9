"""
Main game application with PyGame GUI
"""

import argparse
import sys
import traceback

import pygame
from pydantic import ValidationError

from pongo.core.interfaces import InputSource
from pongo.core.interfaces import PhysicsBackend
from pongo.core.interfaces import RendererProtocol
from pongo.core.physics import TICK_RATE
from pongo.core.physics import PhysicsEngine
from pongo.gui.human_player import HumanPlayer
from pongo.gui.human_player import InputManager
from pongo.gui.pygame_renderer import PygameRenderer
from pongo.gui.resources import ResourceError
from pongo.gui.resources import load_fonts
from pongo.utils.config import CONTROL_SCHEMES
from pongo.utils.config import GameConfig
from pongo.utils.config import Variant
from pongo.utils.config import apply_config
from pongo.utils.config import game_config
from pongo.utils.keyboard_layout import auto_configure_layout
from pongo.utils.keyboard_layout import show_layout_help


class PongoApp:
    """Owns the window and drives the update/draw loop at a fixed rate"""

    def __init__(self, config: GameConfig | None = None) -> None:
        """Initialize the application

        Raises:
            ResourceError: The HUD font could not be loaded
        """
        self.config = config or game_config

        pygame.init()
        self.window = pygame.display.set_mode(self.config.get_window_size())
        pygame.display.set_caption(self.config.WINDOW_TITLE)

        fonts = load_fonts(self.config)

        self.engine: PhysicsBackend = PhysicsEngine(variant=self.config.VARIANT)
        self.renderer: RendererProtocol = PygameRenderer(fonts, self.window, self.config)
        self.player = HumanPlayer(config=self.config)
        self.input_manager: InputSource = InputManager(self.player)
        self.clock = pygame.time.Clock()
        self.running = True

    def handle_events(self) -> None:
        for event in pygame.event.get():
            if self.input_manager.handle_event(event) == "quit":
                self.running = False

    def update(self) -> dict:
        """Run one tick of game logic"""
        action = self.input_manager.get_input()
        return self.engine.update(action)

    def render(self) -> None:
        """Draw the state produced by the last tick"""
        self.renderer.render_game_state(self.engine.get_game_state())
        self.renderer.present()

    def run(self) -> None:
        """Main application loop"""
        controls = self.player.get_control_info()
        print(f"Controls: up {controls['up']}, down {controls['down']}, ESC to quit")
        print("Starting Pongo...")

        try:
            while self.running:
                self.handle_events()
                if not self.running:
                    break

                self.update()
                self.render()

                self.clock.tick(TICK_RATE)
        finally:
            self.cleanup()

    def cleanup(self) -> None:
        """Clean up resources"""
        print("Cleaning up resources...")
        self.renderer.cleanup()
        pygame.quit()
        print("Pongo closed properly.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pongo", description="Single-player Pong")
    parser.add_argument("--config", help="JSON configuration file to load")
    parser.add_argument(
        "--variant", choices=[variant.value for variant in Variant], help="Collision rule set"
    )
    parser.add_argument("--scale", type=int, help="Window size multiplier (1-4)")
    parser.add_argument("--controls", choices=list(CONTROL_SCHEMES), help="Paddle keys")
    return parser


def configure(argv: list[str] | None = None) -> GameConfig:
    """
    Apply the config file and the command line on top of the global configuration.

    Everything is validated together before game_config is touched, so a rejected
    value leaves it unchanged.

    Raises:
        FileNotFoundError: --config points to a missing file
        ValidationError: A value is rejected by the configuration model
    """
    args = build_parser().parse_args(argv)

    values = game_config.model_dump()
    if args.config:
        # Only the keys written in the file override the current values
        values.update(GameConfig.load_from_file(args.config).model_dump(exclude_unset=True))
    if args.variant:
        values["VARIANT"] = args.variant
    if args.scale is not None:
        values["WINDOW_SCALE"] = args.scale
    if args.controls:
        values["CONTROL_SCHEME"] = args.controls

    apply_config(GameConfig(**values))
    return game_config


def main(argv: list[str] | None = None) -> int:
    """Main entry point, returns the process exit code"""
    layout = auto_configure_layout()
    print(f"Detected keyboard configuration: {layout.upper()}")

    try:
        config = configure(argv)
    except (FileNotFoundError, ValidationError) as e:
        print(f"Configuration error: {e}")
        return 2

    print(show_layout_help())

    try:
        app = PongoApp(config)
    except ResourceError as e:
        print(f"Fatal error: {e}")
        pygame.quit()
        return 1

    try:
        app.run()
    except KeyboardInterrupt:
        print("\nUser interruption")
    except Exception as e:
        print(f"Fatal error: {e}")
        traceback.print_exc()
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
