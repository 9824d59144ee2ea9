"""
Pongo configuration with Pydantic validation

Only presentation and controls are configurable; the physics constants live in
pongo.core.physics.
"""

import json
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

import pygame
from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator

# Logical resolution, independent of the window size
LOGICAL_WIDTH = 640
LOGICAL_HEIGHT = 480


class Variant(str, Enum):
    """Rule sets the game can run with"""

    CLASSIC = "classic"
    REFINED = "refined"


@dataclass
class KeyboardLayout:
    """Configuration for keyboard layouts"""

    name: str
    wasd_keys: dict[str, int]
    arrow_keys: dict[str, int]
    display_names: dict[str, str]


_ARROW_KEYS = {"up": pygame.K_UP, "down": pygame.K_DOWN}

KEYBOARD_LAYOUTS = {
    "qwerty": KeyboardLayout(
        name="QWERTY",
        wasd_keys={"up": pygame.K_w, "down": pygame.K_s},
        arrow_keys=_ARROW_KEYS,
        display_names={"up": "W", "down": "S"},
    ),
    "azerty": KeyboardLayout(
        name="AZERTY",
        wasd_keys={"up": pygame.K_z, "down": pygame.K_s},  # Z instead of W
        arrow_keys=_ARROW_KEYS,
        display_names={"up": "Z", "down": "S"},
    ),
    "qwertz": KeyboardLayout(
        name="QWERTZ",
        wasd_keys={"up": pygame.K_w, "down": pygame.K_s},
        arrow_keys=_ARROW_KEYS,
        display_names={"up": "W", "down": "S"},
    ),
}

CONTROL_SCHEMES = ("arrows", "wasd")


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    model_config = {"validate_assignment": True}

    # Rules
    VARIANT: Variant = Field(default=Variant.CLASSIC, description="Collision rule set")

    # Window
    WINDOW_TITLE: str = Field(default="Pongo ~ Pong en Go", description="Window caption")
    WINDOW_SCALE: int = Field(default=1, ge=1, le=4, description="Window size multiplier")

    # Controls
    CONTROL_SCHEME: str = Field(default="arrows", description="Keys moving the paddle")
    KEYBOARD_LAYOUT: str = Field(default="qwerty", description="Keyboard layout name")

    # Text
    FONT_PATH: str | None = Field(default=None, description="TTF file, pygame default if unset")
    FONT_SIZE: int = Field(default=24, gt=0, le=96, description="HUD font size")
    SCORE_TEXT_OFFSET: tuple[int, int] = Field(default=(10, 10), description="Score position")
    HIGH_SCORE_TEXT_OFFSET: tuple[int, int] = Field(
        default=(10, 30), description="High score position"
    )

    # Colors
    BACKGROUND_COLOR: tuple[int, int, int] = Field(default=(0, 0, 0), description="RGB color")
    FOREGROUND_COLOR: tuple[int, int, int] = Field(
        default=(255, 255, 255), description="Shapes and text RGB color"
    )

    @field_validator("CONTROL_SCHEME")
    @classmethod
    def validate_control_scheme(cls, v: str) -> str:
        """Validate control scheme exists"""
        if v not in CONTROL_SCHEMES:
            raise ValueError(f"Unknown control scheme '{v}'. Available: {list(CONTROL_SCHEMES)}")
        return v

    @field_validator("KEYBOARD_LAYOUT")
    @classmethod
    def validate_keyboard_layout(cls, v: str) -> str:
        """Validate keyboard layout exists"""
        if v not in KEYBOARD_LAYOUTS:
            raise ValueError(
                f"Unknown keyboard layout '{v}'. Available: {list(KEYBOARD_LAYOUTS.keys())}"
            )
        return v

    @field_validator("BACKGROUND_COLOR", "FOREGROUND_COLOR")
    @classmethod
    def validate_color(cls, v: tuple[int, int, int]) -> tuple[int, int, int]:
        """Validate RGB channels"""
        if any(not 0 <= channel <= 255 for channel in v):
            raise ValueError(f"Color channels must be within 0-255, got {v}")
        return v

    @field_validator("SCORE_TEXT_OFFSET", "HIGH_SCORE_TEXT_OFFSET")
    @classmethod
    def validate_text_offset(cls, v: tuple[int, int]) -> tuple[int, int]:
        """Validate that text starts on the logical screen"""
        x, y = v
        if not (0 <= x < LOGICAL_WIDTH and 0 <= y < LOGICAL_HEIGHT):
            raise ValueError(
                f"Text offset {v} is outside the {LOGICAL_WIDTH}x{LOGICAL_HEIGHT} screen"
            )
        return v

    def get_keyboard_layout(self) -> KeyboardLayout:
        """Get the current keyboard layout configuration"""
        return KEYBOARD_LAYOUTS.get(self.KEYBOARD_LAYOUT, KEYBOARD_LAYOUTS["qwerty"])

    def get_window_size(self) -> tuple[int, int]:
        return (LOGICAL_WIDTH * self.WINDOW_SCALE, LOGICAL_HEIGHT * self.WINDOW_SCALE)

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump(mode="json")

    def save_to_file(self, filepath: str = "pongo_config.json") -> None:
        """Save configuration to a JSON file"""
        with open(Path(filepath), "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "pongo_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)


# Global configuration instance
game_config = GameConfig()


def apply_config(config: GameConfig) -> None:
    """Copy an already validated configuration into global game_config"""
    for field_name in GameConfig.model_fields.keys():
        setattr(game_config, field_name, getattr(config, field_name))


def _change_values(obj: BaseModel, old_values: dict[str, Any], **kwargs: Any) -> None:
    """Helper to change config values, recording each old value before it is replaced"""
    for name, new_value in kwargs.items():
        previous = getattr(obj, name)
        setattr(obj, name, new_value)
        old_values.setdefault(name, previous)


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)

    Values applied before a rejected one are rolled back as well.
    """
    old_values: dict[str, Any] = {}
    try:
        _change_values(game_config, old_values, **kwargs)
        yield
    finally:
        _change_values(game_config, {}, **old_values)
