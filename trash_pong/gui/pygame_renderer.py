"""
PyGame renderer for Trash Pong
"""

import pygame

from trash_pong.core.drawing import Clear, DrawCommand, FillRect, FillText
from trash_pong.gui.overlay import OverlayState
from trash_pong.utils.config import GameConfig
from trash_pong.utils.config import game_config


class PygameRenderer:
    """PyGame-based renderer: play surface on top, taunt banner below"""

    def __init__(self, config: GameConfig | None = None):
        """Initialize the PyGame renderer"""
        self.config = config or game_config
        self.width = self.config.FIELD_WIDTH
        self.field_height = self.config.FIELD_HEIGHT
        self.height = self.field_height + self.config.BANNER_HEIGHT

        # Initialize PyGame
        pygame.init()

        # Create the display
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption("Trash Pong")

        # Clock for controlling frame rate
        self.clock = pygame.time.Clock()

        self.background_color: tuple[int, int, int] = self.config.BACKGROUND_COLOR
        self.text_color: tuple[int, int, int] = self.config.TEXT_COLOR
        self.button_color: tuple[int, int, int] = (60, 60, 60)
        self.button_hover_color: tuple[int, int, int] = (90, 90, 90)

        # Fonts, cached by pixel size
        self._fonts: dict[int, pygame.font.Font] = {}
        self.font_banner = pygame.font.Font(None, 32)
        self.font_button = pygame.font.Font(None, 48)

        self.play_again_rect = pygame.Rect(0, 0, 260, 70)
        self.play_again_rect.center = (self.width // 2, self.field_height // 2)

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def clear_screen(self) -> None:
        """Clear the whole window with background color"""
        self.screen.fill(self.background_color)

    def render_frame(self, commands: list[DrawCommand]) -> None:
        """Execute the draw commands of one frame on the play surface"""
        for command in commands:
            if isinstance(command, Clear):
                rect = pygame.Rect(0, 0, int(command.width), int(command.height))
                pygame.draw.rect(self.screen, self.background_color, rect)
            elif isinstance(command, FillRect):
                rect = pygame.Rect(
                    int(command.x), int(command.y), int(command.width), int(command.height)
                )
                pygame.draw.rect(self.screen, command.color, rect)
            elif isinstance(command, FillText):
                surface = self._font(command.font_size).render(command.text, True, command.color)
                # Canvas text is anchored on its baseline
                text_rect = surface.get_rect()
                text_rect.bottomleft = (int(command.x), int(command.y))
                self.screen.blit(surface, text_rect)

    def draw_taunt_banner(self, message: str) -> None:
        """Draw the taunt below the play surface"""
        surface = self.font_banner.render(message, True, self.text_color)
        rect = surface.get_rect()
        rect.center = (self.width // 2, self.field_height + self.config.BANNER_HEIGHT // 2)
        self.screen.blit(surface, rect)

    def draw_play_again(self, hovered: bool = False) -> None:
        """Draw the "play again" button shown after the match"""
        color = self.button_hover_color if hovered else self.button_color
        pygame.draw.rect(self.screen, color, self.play_again_rect, border_radius=8)
        pygame.draw.rect(self.screen, self.text_color, self.play_again_rect, 2, border_radius=8)

        label = self.font_button.render("Play again", True, self.text_color)
        label_rect = label.get_rect()
        label_rect.center = self.play_again_rect.center
        self.screen.blit(label, label_rect)

    def is_play_again_clicked(self, position: tuple[int, int]) -> bool:
        return bool(self.play_again_rect.collidepoint(position))

    def render(self, commands: list[DrawCommand], overlay: OverlayState) -> None:
        """Render one frame according to the overlay visibility flags"""
        self.clear_screen()

        # A hidden surface swallows the frame's draw commands
        if overlay.surface_visible:
            self.render_frame(commands)

        if overlay.taunt_visible and overlay.taunt_text:
            self.draw_taunt_banner(overlay.taunt_text)

        if overlay.play_again_visible:
            hovered = self.is_play_again_clicked(pygame.mouse.get_pos())
            self.draw_play_again(hovered)

    def present(self) -> None:
        """Present the rendered frame"""
        pygame.display.flip()

    def tick(self, fps: int | None = None) -> int:
        """Wait for the next frame, returns the elapsed milliseconds"""
        fps = fps or self.config.FPS
        return self.clock.tick(fps)

    def cleanup(self) -> None:
        """Clean up PyGame resources"""
        pygame.quit()
