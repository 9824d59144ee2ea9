"""
Keyboard layout detection for Pongo
"""

import locale
import os

from pongo.utils.config import KEYBOARD_LAYOUTS
from pongo.utils.config import game_config

_LOCALE_LAYOUTS = {"fr": "azerty", "de": "qwertz"}


def _layout_for_language(language: str) -> str | None:
    language = language.lower()
    for prefix, layout in _LOCALE_LAYOUTS.items():
        if language.startswith(prefix):
            return layout
    return None


def detect_system_layout() -> str:
    """
    Detect the most likely keyboard layout based on system locale

    Returns:
        Keyboard layout name (default to 'qwerty' if detection fails)
    """
    try:
        system_locale = locale.getlocale()[0]
    except ValueError:
        system_locale = None

    if system_locale:
        return _layout_for_language(system_locale) or "qwerty"

    # Fallback to environment variables
    return _layout_for_language(os.environ.get("LANG", "")) or "qwerty"


def list_available_layouts() -> dict[str, str]:
    """Get all available keyboard layouts"""
    return {name: layout.name for name, layout in KEYBOARD_LAYOUTS.items()}


def auto_configure_layout() -> str:
    """
    Select the detected keyboard layout in the global configuration

    Returns:
        The selected layout name
    """
    detected = detect_system_layout()
    game_config.KEYBOARD_LAYOUT = detected
    return detected


def show_layout_help() -> str:
    """
    Generate help text describing the active keyboard layout

    Returns:
        Formatted help text
    """
    layout = game_config.get_keyboard_layout()

    help_text = f"Keyboard layout: {layout.name} (controls: {game_config.CONTROL_SCHEME})\n"
    help_text += f"Available layouts: {', '.join(list_available_layouts().values())}\n"

    return help_text
