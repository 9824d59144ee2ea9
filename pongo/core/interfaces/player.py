"""
Input protocol - defines interface for anything that can drive the paddle
"""

from typing import Any
from typing import Protocol

from pongo.core.entities import InputState


class InputSource(Protocol):
    """
    Protocol that input sources (keyboard, scripted input, etc.) must implement.

    The core only ever reads the returned state; it never writes back.
    """

    def get_input(self) -> InputState:
        """
        Get the keys held for the current tick.

        Returns:
            InputState with the up/down flags

        Example:
            >>> state = source.get_input()
            >>> assert isinstance(state.up, bool)
        """
        ...

    def handle_event(self, event: Any) -> str | None:
        """
        Process a window event.

        Returns:
            "quit" when the player asked to leave, None otherwise
        """
        ...
