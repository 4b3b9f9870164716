"""Unit tests for configuration loading"""

import logging

from src.shellprompt.config import LuaConfig, PromptConfig, ShellConfig, load_config


class TestDefaults:
    """Test built-in defaults"""

    def test_module_defaults(self):
        config = PromptConfig()
        assert config.modules == ["shell", "crystal", "lua"]
        assert config.lua.symbol == "🌙 "
        assert config.crystal.style == "bold red"
        assert config.shell.disabled is True
        assert config.shell.unknown_indicator == ""

    def test_defaults_not_shared(self):
        """Test list defaults are not shared between instances"""
        first = PromptConfig()
        first.modules.append("extra")
        assert PromptConfig().modules == ["shell", "crystal", "lua"]


class TestLoadConfig:
    """Test reading YAML configuration"""

    def test_missing_file_gives_defaults(self, temp_dir):
        assert load_config(str(temp_dir / "absent.yaml")) == PromptConfig()

    def test_partial_override(self, temp_dir):
        """Test a file only needs the settings it changes"""
        path = temp_dir / "config.yaml"
        path.write_text(
            "modules: [lua]\n"
            "lua:\n"
            "  lua_binary: luajit\n"
            "shell:\n"
            "  disabled: false\n"
            "  bash_indicator: '[bash](bold cyan)'\n"
        )
        config = load_config(str(path))

        assert config.modules == ["lua"]
        assert config.lua == LuaConfig(lua_binary="luajit")
        assert config.shell == ShellConfig(disabled=False, bash_indicator="[bash](bold cyan)")

    def test_env_variable_location(self, temp_dir, monkeypatch):
        path = temp_dir / "env.yaml"
        path.write_text("command_timeout: 2\n")
        monkeypatch.setenv("SHELLPROMPT_CONFIG", str(path))
        assert load_config().command_timeout == 2

    def test_empty_file(self, temp_dir):
        path = temp_dir / "empty.yaml"
        path.write_text("")
        assert load_config(str(path)) == PromptConfig()

    def test_invalid_yaml_falls_back(self, temp_dir, caplog):
        path = temp_dir / "broken.yaml"
        path.write_text("lua: [unclosed\n")
        with caplog.at_level(logging.WARNING):
            config = load_config(str(path))
        assert config == PromptConfig()
        assert "Error loading config" in caplog.text

    def test_invalid_values_fall_back(self, temp_dir, caplog):
        path = temp_dir / "invalid.yaml"
        path.write_text("command_timeout: -1\n")
        with caplog.at_level(logging.WARNING):
            config = load_config(str(path))
        assert config.command_timeout == 0.5
        assert "Invalid config" in caplog.text

    def test_non_mapping_falls_back(self, temp_dir, caplog):
        path = temp_dir / "list.yaml"
        path.write_text("- lua\n- shell\n")
        with caplog.at_level(logging.WARNING):
            assert load_config(str(path)) == PromptConfig()
