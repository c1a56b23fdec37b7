"""
Tests for configuration loading and validation.
"""

import pytest

from boxgame.box_core import config_loader
from boxgame.box_core.config_loader import get_config, load_config, reload_config


def write_config(tmp_path, text):
    path = tmp_path / "game_config.yaml"
    path.write_text(text)
    return str(path)


class TestLoadConfig:
    """Test the bundled config and YAML parsing."""

    def test_default_config(self):
        config = load_config()

        assert config.players.names == ("A", "B")
        assert config.players.first == "A"
        assert config.tokens.min_weight == 0
        assert config.tokens.max_weight >= config.tokens.min_weight
        assert config.output.print_status is True

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.yaml"))

    def test_empty_file_uses_defaults(self, tmp_path):
        config = load_config(write_config(tmp_path, ""))

        assert config.players.names == ("A", "B")
        assert config.tokens.default_length == 8

    def test_custom_values(self, tmp_path):
        path = write_config(tmp_path, """
players:
  names: [Alice, Bob]
tokens:
  min_weight: 2
  max_weight: 5
  default_length: 3
output:
  print_status: false
""")
        config = load_config(path)

        assert config.players.names == ("Alice", "Bob")
        assert config.tokens.min_weight == 2
        assert config.tokens.default_length == 3
        assert config.output.print_status is False

    def test_config_is_frozen(self):
        config = load_config()
        with pytest.raises(AttributeError):
            config.output = None


class TestValidation:
    """Invalid configs must be rejected at load time."""

    @pytest.mark.parametrize("text, message", [
        ("players:\n  names: [A]\n", "Exactly 2"),
        ("players:\n  names: [A, A]\n", "distinct"),
        ("players:\n  names: [A, '']\n", "non-empty"),
        ("tokens:\n  min_weight: -1\n", "min_weight"),
        ("tokens:\n  min_weight: 9\n  max_weight: 3\n", "exceeds"),
        ("tokens:\n  default_length: -4\n", "default_length"),
    ])
    def test_rejects(self, tmp_path, text, message):
        with pytest.raises(ValueError, match=message):
            load_config(write_config(tmp_path, text))


class TestCachedConfig:

    def test_get_config_caches(self):
        assert get_config() is get_config()

    def test_reload_config(self, tmp_path, monkeypatch):
        monkeypatch.setattr(config_loader, "_cached_config", None)
        path = write_config(tmp_path, "players:\n  names: [X, Y]\n")

        reloaded = reload_config(path)

        assert reloaded.players.names == ("X", "Y")
        assert get_config() is reloaded
