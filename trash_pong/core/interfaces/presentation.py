"""
Presentation protocol - what the match tells the outside world
"""

from typing import Protocol

from trash_pong.core.entities import Side


class Presentation(Protocol):
    """
    Receives match notifications that are not drawn on the play surface.

    Implementations own the taunt banner and the visibility of the play
    surface and of the "play again" control.
    """

    def show_taunt(self, side: Side, message: str) -> None:
        """
        Display a taunt after a point.

        Args:
            side: Side that scored the point
            message: Taunt text to display
        """
        ...

    def show_game_over(self) -> None:
        """Hide the play surface and taunt, reveal the "play again" control"""
        ...

    def show_playing(self) -> None:
        """Show the play surface again after a restart"""
        ...
