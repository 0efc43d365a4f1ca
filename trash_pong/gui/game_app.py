"""
Main game application with PyGame GUI
"""

import sys
import traceback

import numpy as np
import pygame

from trash_pong.core.entities import Side
from trash_pong.core.game_engine import MatchEngine
from trash_pong.core.interfaces import Opponent
from trash_pong.gui.human_player import KeyboardController
from trash_pong.gui.overlay import OverlayState
from trash_pong.gui.pygame_renderer import PygameRenderer
from trash_pong.utils.config import GameConfig
from trash_pong.utils.config import game_config


class TrashPongApp:
    """Main application class for Trash Pong with PyGame GUI"""

    def __init__(
        self,
        seed: int | None = None,
        opponent: Opponent | None = None,
        config: GameConfig | None = None,
    ) -> None:
        """Initialize the application"""
        self.config = config or game_config
        self.overlay = OverlayState()
        self.renderer = PygameRenderer(self.config)
        self.controller = KeyboardController(config=self.config)
        self.engine = MatchEngine(
            presentation=self.overlay,
            opponent=opponent,
            rng=np.random.default_rng(seed),
            config=self.config,
        )
        self.running = True
        self.game_over_announced = False

        print("Trash Pong initialized successfully!")
        controls = self.controller.get_control_info()
        print(f"Use {controls['up']}/{controls['down']} to move, ESC to quit")

    def handle_event(self, event: pygame.event.Event) -> None:
        """Route one pygame event"""
        if event.type == pygame.QUIT:
            self.running = False
            return

        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.running = False
            return

        if self.engine.is_game_over:
            if event.type == pygame.KEYDOWN and event.key in (pygame.K_SPACE, pygame.K_RETURN):
                self.restart_game()
                return
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if self.renderer.is_play_again_clicked(event.pos):
                    self.restart_game()
                    return

        if self.controller.handle_event(event):
            self.engine.set_left_velocity(self.controller.velocity)

    def restart_game(self) -> None:
        """Restart the match, the frame loop keeps running as is"""
        self.engine.restart()
        self.game_over_announced = False
        print("New match started")

    def update(self, elapsed_ms: float) -> None:
        """Update game logic"""
        events = self.engine.update(elapsed_ms)

        if events.game_over and not self.game_over_announced:
            self.game_over_announced = True
            winner = self.engine.get_winner()
            left, right = self.engine.state.score.to_tuple()
            who = "You win" if winner is Side.LEFT else "Computer wins"
            print(f"{who}! Final score: {left} - {right}")
            stats = self.engine.stats
            print(f"Points played: {stats['points']}, paddle hits: {stats['paddle_hits']}")

    def render(self) -> None:
        """Render the current frame"""
        self.renderer.render(self.engine.last_events.commands, self.overlay)
        self.renderer.present()

    def run(self) -> None:
        """Main application loop"""
        print("Starting Trash Pong...")

        try:
            elapsed_ms = 0.0
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)

                self.update(elapsed_ms)
                self.render()

                # Control frame rate
                elapsed_ms = float(self.renderer.tick())

        except Exception as e:
            print(f"Error during execution: {e}")
            traceback.print_exc()

        finally:
            self.cleanup()

    def cleanup(self) -> None:
        """Clean up resources"""
        print("Cleaning up resources...")
        self.renderer.cleanup()
        print("Trash Pong closed properly.")


def main(seed: int | None = None, opponent: Opponent | None = None) -> None:
    """Main entry point"""
    try:
        app = TrashPongApp(seed=seed, opponent=opponent)
        app.run()
    except KeyboardInterrupt:
        print("\nUser interruption")
    except Exception as e:
        print(f"Fatal error: {e}")
        traceback.print_exc()
    finally:
        # Ensure pygame is properly closed
        pygame.quit()
        sys.exit(0)


if __name__ == "__main__":
    main()
