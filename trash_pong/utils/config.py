"""
Trash Pong game configuration with Pydantic validation
"""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

import pygame
from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator


@dataclass
class KeyboardLayout:
    """Configuration for keyboard layouts"""

    name: str
    paddle_keys: dict[str, int]
    display_names: dict[str, str]


# Keyboard layouts definition
KEYBOARD_LAYOUTS = {
    "qwerty": KeyboardLayout(
        name="QWERTY",
        paddle_keys={"up": pygame.K_w, "down": pygame.K_s},
        display_names={"up": "W", "down": "S"},
    ),
    "azerty": KeyboardLayout(
        name="AZERTY",
        paddle_keys={"up": pygame.K_z, "down": pygame.K_s},  # Z instead of W
        display_names={"up": "Z", "down": "S"},
    ),
    "qwertz": KeyboardLayout(
        name="QWERTZ",
        paddle_keys={"up": pygame.K_w, "down": pygame.K_s},
        display_names={"up": "W", "down": "S"},
    ),
}


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    # Allow mutation for compatibility with existing code
    model_config = {"validate_assignment": True, "arbitrary_types_allowed": True}

    # Field dimensions
    FIELD_WIDTH: int = Field(default=750, gt=0, description="Field width in pixels")
    FIELD_HEIGHT: int = Field(default=585, gt=0, description="Field height in pixels")
    GRID: int = Field(default=15, gt=0, description="Wall thickness and ball size in pixels")

    # Paddles
    PADDLE_GRID_UNITS: int = Field(default=5, gt=0, description="Paddle height in grid units")
    PADDLE_SPEED: float = Field(default=6.0, gt=0, description="Paddle speed per frame")

    # Ball
    BALL_SPEED: float = Field(default=5.0, gt=0, description="Initial ball speed per frame")
    RESTART_BALL_SPEED: float = Field(default=2.0, gt=0, description="Ball speed after restart")
    RESET_DELAY_MS: float = Field(default=400.0, ge=0, description="Delay before re-centering")

    # Gameplay
    WINNING_SCORE: int = Field(default=7, gt=0, description="Winning score")
    OPPONENT_MISS_OUTCOMES: int = Field(
        default=6, ge=1, description="Opponent freezes on one roll out of this many"
    )

    # Keyboard layout
    KEYBOARD_LAYOUT: str = Field(default="qwerty", description="Keyboard layout name")

    # Display
    FPS: int = Field(default=60, gt=0, description="Frames per second")
    BANNER_HEIGHT: int = Field(default=60, ge=0, description="Taunt banner height in pixels")
    SCORE_FONT_SIZE: int = Field(default=30, gt=0, description="Score font size in pixels")
    SCORE_TEXT_POSITIONS: tuple[tuple[int, int], tuple[int, int]] = Field(
        default=((180, 100), (600, 100)), description="Left and right score text positions"
    )
    BACKGROUND_COLOR: tuple[int, int, int] = Field(default=(0, 0, 0), description="RGB color")
    PADDLE_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")
    BALL_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")
    WALL_COLOR: tuple[int, int, int] = Field(default=(211, 211, 211), description="RGB color")
    TEXT_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")

    @field_validator("KEYBOARD_LAYOUT")
    @classmethod
    def validate_keyboard_layout(cls, v: str) -> str:
        """Validate keyboard layout exists"""
        if v not in KEYBOARD_LAYOUTS:
            raise ValueError(
                f"Unknown keyboard layout '{v}'. Available: {list(KEYBOARD_LAYOUTS.keys())}"
            )
        return v

    @model_validator(mode="after")
    def validate_field_dimensions(self) -> "GameConfig":
        """Validate field is large enough for walls, paddles and the ball"""
        min_width = 6 * self.GRID + 100
        if self.FIELD_WIDTH < min_width:
            raise ValueError(f"FIELD_WIDTH must be at least {min_width} pixels")

        min_height = self.paddle_height + 4 * self.GRID
        if self.FIELD_HEIGHT < min_height:
            raise ValueError(f"FIELD_HEIGHT must be at least {min_height} pixels")

        return self

    @property
    def paddle_height(self) -> int:
        """Paddle height in pixels (grid * 5 = 75 with the defaults)"""
        return self.GRID * self.PADDLE_GRID_UNITS

    @property
    def max_paddle_y(self) -> int:
        """Lowest allowed paddle top edge"""
        return self.FIELD_HEIGHT - self.GRID - self.paddle_height

    def get_keyboard_layout(self) -> KeyboardLayout:
        """Get the current keyboard layout configuration"""
        return KEYBOARD_LAYOUTS.get(self.KEYBOARD_LAYOUT, KEYBOARD_LAYOUTS["qwerty"])

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "trash_pong_config.json") -> None:
        """Save configuration to a JSON file"""
        import json
        from pathlib import Path

        config_dict = self.to_dict()
        config_path = Path(filepath)

        with open(config_path, "w") as f:
            json.dump(config_dict, f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "trash_pong_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        import json
        from pathlib import Path

        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)

    def reset_to_defaults(self) -> None:
        """Reset all fields to their default values"""
        _copy_fields(self, GameConfig())


def _copy_fields(target: BaseModel, source: BaseModel) -> None:
    """Copies every field of an already validated config at once, skipping per-field validation"""
    target.__dict__.update(source.__dict__)


# Global configuration instance with validation
game_config = GameConfig()


def load_config_from_file(filepath: str = "trash_pong_config.json") -> bool:
    """Load configuration from file into global game_config"""
    try:
        loaded_config = GameConfig.load_from_file(filepath)
    except Exception as e:
        print(f"Error loading config: {e}")
        return False

    # Update global config
    _copy_fields(game_config, loaded_config)
    return True


def _change_values(obj: BaseModel, old_values: dict[str, Any], **kwargs: Any) -> None:
    """Helper to change config values temporarily, old values are recorded before each change"""
    for name, new_value in kwargs.items():
        old_values[name] = getattr(obj, name)
        setattr(obj, name, new_value)


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values: dict[str, Any] = {}
    try:
        _change_values(game_config, old_values, **kwargs)
        yield
    finally:
        # Reverse order walks back through states that were already valid
        for name in reversed(list(old_values)):
            setattr(game_config, name, old_values[name])
