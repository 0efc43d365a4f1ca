"""
Visibility of the play surface, the taunt banner and the "play again" control
"""

from trash_pong.core.entities import Side


class OverlayState:
    """Presentation state read by the renderer every frame"""

    def __init__(self) -> None:
        self.surface_visible = True
        self.play_again_visible = False
        self.taunt_visible = False
        self.taunt_text = ""

    def show_taunt(self, side: Side, message: str) -> None:
        self.taunt_text = message
        self.taunt_visible = True

    def show_game_over(self) -> None:
        self.surface_visible = False
        self.play_again_visible = True
        self.taunt_visible = False

    def show_playing(self) -> None:
        self.surface_visible = True
        self.play_again_visible = False
