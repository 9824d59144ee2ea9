"""
Unit tests for configuration validation

Tests the configuration system including:
- Pydantic validation of controls, colors and text offsets
- JSON save / load
- Context manager for temporary config changes
"""

import json

import pytest
from pydantic import ValidationError

from pongo.utils.config import (
    GameConfig,
    Variant,
    game_config,
    game_config_tmp,
    apply_config,
)


class TestGameConfigValidation:
    """Test game configuration validation"""

    def test_valid_default_config(self):
        config = GameConfig()
        assert config.VARIANT == Variant.CLASSIC
        assert config.WINDOW_TITLE == "Pongo ~ Pong en Go"
        assert config.SCORE_TEXT_OFFSET == (10, 10)
        assert config.HIGH_SCORE_TEXT_OFFSET == (10, 30)
        assert config.FOREGROUND_COLOR == (255, 255, 255)

    def test_variant_accepts_string(self):
        assert GameConfig(VARIANT="refined").VARIANT == Variant.REFINED

    def test_unknown_variant(self):
        with pytest.raises(ValidationError):
            GameConfig(VARIANT="arcade")

    def test_unknown_control_scheme(self):
        with pytest.raises(ValidationError, match="control scheme"):
            GameConfig(CONTROL_SCHEME="mouse")

    def test_unknown_keyboard_layout(self):
        with pytest.raises(ValidationError, match="keyboard layout"):
            GameConfig(KEYBOARD_LAYOUT="dvorak")

    @pytest.mark.parametrize("color", [(256, 0, 0), (0, -1, 0)])
    def test_color_channels_out_of_range(self, color):
        with pytest.raises(ValidationError):
            GameConfig(FOREGROUND_COLOR=color)

    @pytest.mark.parametrize("offset", [(-1, 10), (10, 480), (640, 0)])
    def test_text_offset_off_screen(self, offset):
        with pytest.raises(ValidationError):
            GameConfig(SCORE_TEXT_OFFSET=offset)

    @pytest.mark.parametrize("scale", [0, 5])
    def test_window_scale_bounds(self, scale):
        with pytest.raises(ValidationError):
            GameConfig(WINDOW_SCALE=scale)

    def test_assignment_is_validated(self):
        config = GameConfig()
        with pytest.raises(ValidationError):
            config.CONTROL_SCHEME = "joystick"
        assert config.CONTROL_SCHEME == "arrows"

    def test_window_size(self):
        assert GameConfig().get_window_size() == (640, 480)
        assert GameConfig(WINDOW_SCALE=2).get_window_size() == (1280, 960)

    def test_keyboard_layout_lookup(self):
        assert GameConfig(KEYBOARD_LAYOUT="azerty").get_keyboard_layout().name == "AZERTY"


class TestConfigFiles:
    """Test JSON persistence of the configuration"""

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "pongo.json"
        config = GameConfig(VARIANT="refined", FOREGROUND_COLOR=(200, 200, 0))

        config.save_to_file(str(path))

        assert json.loads(path.read_text())["VARIANT"] == "refined"
        assert GameConfig.load_from_file(str(path)) == config

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            GameConfig.load_from_file(str(tmp_path / "missing.json"))

    def test_load_invalid_file(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"CONTROL_SCHEME": "mouse"}))
        with pytest.raises(ValidationError):
            GameConfig.load_from_file(str(path))

    def test_apply_loaded_config_to_global(self, tmp_path):
        path = tmp_path / "pongo.json"
        GameConfig(VARIANT="refined", WINDOW_SCALE=2).save_to_file(str(path))

        with game_config_tmp(VARIANT=Variant.CLASSIC, WINDOW_SCALE=1):
            apply_config(GameConfig.load_from_file(str(path)))
            assert game_config.VARIANT == Variant.REFINED
            assert game_config.WINDOW_SCALE == 2

        assert game_config.VARIANT == Variant.CLASSIC
        assert game_config.WINDOW_SCALE == 1


class TestContextManager:
    """Test temporary config changes"""

    def test_values_restored(self):
        original = game_config.FONT_SIZE
        with game_config_tmp(FONT_SIZE=40):
            assert game_config.FONT_SIZE == 40
        assert game_config.FONT_SIZE == original

    def test_values_restored_after_exception(self):
        original = game_config.VARIANT
        with pytest.raises(RuntimeError):
            with game_config_tmp(VARIANT=Variant.REFINED):
                raise RuntimeError("boom")
        assert game_config.VARIANT == original

    def test_invalid_value_rejected(self):
        with pytest.raises(ValidationError):
            with game_config_tmp(WINDOW_SCALE=10):
                pass

    def test_rejected_value_rolls_back_earlier_ones(self):
        """Test that values applied before a rejected one are restored"""
        original_size = game_config.FONT_SIZE
        original_scale = game_config.WINDOW_SCALE

        with pytest.raises(ValidationError):
            with game_config_tmp(FONT_SIZE=40, WINDOW_SCALE=10):
                pass

        assert game_config.FONT_SIZE == original_size
        assert game_config.WINDOW_SCALE == original_scale
