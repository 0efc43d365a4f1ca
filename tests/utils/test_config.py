"""
Unit tests for configuration validation

Tests the configuration system including:
- Default constants of the game
- Pydantic validation of invalid values
- Context manager for temporary config changes
- JSON save and load
"""

import pytest
from pydantic import ValidationError

from trash_pong.utils.config import (
    KEYBOARD_LAYOUTS,
    GameConfig,
    game_config,
    game_config_tmp,
    load_config_from_file,
)


class TestDefaults:
    """Default values of the game constants"""

    def test_constants(self):
        config = GameConfig()
        assert config.GRID == 15
        assert config.PADDLE_SPEED == 6
        assert config.BALL_SPEED == 5
        assert config.RESTART_BALL_SPEED == 2
        assert config.WINNING_SCORE == 7
        assert config.RESET_DELAY_MS == 400
        assert config.OPPONENT_MISS_OUTCOMES == 6
        assert config.SCORE_TEXT_POSITIONS == ((180, 100), (600, 100))

    def test_paddle_height_is_five_grid_units(self):
        config = GameConfig()
        assert config.paddle_height == 75

    def test_max_paddle_y(self):
        config = GameConfig()
        assert config.max_paddle_y == config.FIELD_HEIGHT - 15 - 75

    def test_keyboard_layout(self):
        config = GameConfig(KEYBOARD_LAYOUT="azerty")
        assert config.get_keyboard_layout() is KEYBOARD_LAYOUTS["azerty"]


class TestValidation:
    """Invalid configurations are rejected"""

    def test_unknown_keyboard_layout(self):
        with pytest.raises(ValidationError):
            GameConfig(KEYBOARD_LAYOUT="dvorak")

    def test_negative_grid(self):
        with pytest.raises(ValidationError):
            GameConfig(GRID=-1)

    def test_field_too_short_for_paddle(self):
        with pytest.raises(ValidationError):
            GameConfig(FIELD_HEIGHT=100)

    def test_field_too_narrow(self):
        with pytest.raises(ValidationError):
            GameConfig(FIELD_WIDTH=120)

    def test_no_miss_outcomes(self):
        with pytest.raises(ValidationError):
            GameConfig(OPPONENT_MISS_OUTCOMES=0)

    def test_assignment_is_validated(self):
        config = GameConfig()
        with pytest.raises(ValidationError):
            config.WINNING_SCORE = 0


class TestTemporaryConfig:
    """game_config_tmp restores the previous values"""

    def test_values_restored(self):
        original = game_config.WINNING_SCORE

        with game_config_tmp(WINNING_SCORE=3):
            assert game_config.WINNING_SCORE == 3

        assert game_config.WINNING_SCORE == original

    def test_values_restored_on_error(self):
        original = game_config.BALL_SPEED

        with pytest.raises(RuntimeError):
            with game_config_tmp(BALL_SPEED=9.0):
                raise RuntimeError("boom")

        assert game_config.BALL_SPEED == original

    def test_failed_override_restores_earlier_values(self):
        with pytest.raises(ValidationError):
            with game_config_tmp(WINNING_SCORE=3, GRID=-1):
                pass

        assert game_config.WINNING_SCORE == 7
        assert game_config.GRID == 15

    def test_dependent_values_restored(self):
        with game_config_tmp(GRID=5, FIELD_WIDTH=400, FIELD_HEIGHT=100):
            assert game_config.paddle_height == 25

        assert (game_config.FIELD_WIDTH, game_config.FIELD_HEIGHT, game_config.GRID) == (
            750,
            585,
            15,
        )


class TestFiles:
    """JSON persistence of the configuration"""

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "config.json"
        config = GameConfig(WINNING_SCORE=11, KEYBOARD_LAYOUT="qwertz")
        config.save_to_file(str(path))

        loaded = GameConfig.load_from_file(str(path))

        assert loaded.WINNING_SCORE == 11
        assert loaded.KEYBOARD_LAYOUT == "qwertz"
        assert loaded.SCORE_TEXT_POSITIONS == ((180, 100), (600, 100))

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            GameConfig.load_from_file(str(tmp_path / "missing.json"))

    def test_load_into_global_config_missing(self, tmp_path, capsys):
        assert load_config_from_file(str(tmp_path / "missing.json")) is False
        assert "Configuration file not found" in capsys.readouterr().out

    def test_load_into_global_config(self, tmp_path):
        path = tmp_path / "config.json"
        GameConfig(WINNING_SCORE=5).save_to_file(str(path))

        original = game_config.WINNING_SCORE
        try:
            assert load_config_from_file(str(path)) is True
            assert game_config.WINNING_SCORE == 5
        finally:
            game_config.WINNING_SCORE = original

    def test_invalid_file_returns_false(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text('{"GRID": -3}')
        assert load_config_from_file(str(path)) is False

    def test_load_small_field_into_global_config(self, tmp_path):
        path = tmp_path / "config.json"
        GameConfig(FIELD_WIDTH=400, FIELD_HEIGHT=100, GRID=5).save_to_file(str(path))

        try:
            assert load_config_from_file(str(path)) is True
            assert (game_config.FIELD_WIDTH, game_config.FIELD_HEIGHT, game_config.GRID) == (
                400,
                100,
                5,
            )
            assert game_config.max_paddle_y == 100 - 5 - 25
        finally:
            game_config.reset_to_defaults()

        assert game_config.model_dump() == GameConfig().model_dump()

    def test_rejected_file_leaves_global_config_untouched(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text('{"WINNING_SCORE": 3, "FIELD_HEIGHT": 100}')

        assert load_config_from_file(str(path)) is False
        assert game_config.model_dump() == GameConfig().model_dump()

    def test_reset_to_defaults(self):
        config = GameConfig(WINNING_SCORE=3)
        config.reset_to_defaults()
        assert config.WINNING_SCORE == 7
