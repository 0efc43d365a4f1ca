"""
Keyboard input for the human player (left paddle)
"""

import pygame

from trash_pong.utils.config import KEYBOARD_LAYOUTS
from trash_pong.utils.config import GameConfig
from trash_pong.utils.config import game_config


class KeyboardController:
    """Turns key presses into the left paddle's velocity"""

    def __init__(self, layout: str | None = None, config: GameConfig | None = None):
        """
        Initialize the controller

        Args:
            layout: Keyboard layout name, the configured one by default
            config: Game configuration, the global one by default
        """
        config = config or game_config
        layout_name = layout or config.KEYBOARD_LAYOUT

        if layout_name not in KEYBOARD_LAYOUTS:
            raise ValueError(f"Unknown keyboard layout: {layout_name}")

        keyboard_layout = KEYBOARD_LAYOUTS[layout_name]
        self.up_key = keyboard_layout.paddle_keys["up"]
        self.down_key = keyboard_layout.paddle_keys["down"]
        self.display_names = keyboard_layout.display_names.copy()
        self.paddle_speed = config.PADDLE_SPEED
        self.velocity = 0.0

    def key_down(self, key: int) -> float:
        """Handle a key press, returns the new paddle velocity"""
        if key == self.up_key:
            self.velocity = -self.paddle_speed
        elif key == self.down_key:
            self.velocity = self.paddle_speed
        return self.velocity

    def key_up(self, key: int) -> float:
        """Releasing either paddle key stops the paddle"""
        if key in (self.up_key, self.down_key):
            self.velocity = 0.0
        return self.velocity

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle a pygame event

        Returns:
            True if the event changed the paddle velocity
        """
        before = self.velocity
        if event.type == pygame.KEYDOWN:
            self.key_down(event.key)
        elif event.type == pygame.KEYUP:
            self.key_up(event.key)
        return self.velocity != before

    def get_control_info(self) -> dict[str, str]:
        """Get information about controls for this player"""
        return self.display_names.copy()
