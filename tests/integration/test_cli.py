"""Integration tests for the command line interface"""

import pytest
from click.testing import CliRunner

from src.shellprompt.cli.commands import cli

from tests.fixtures.data import make_files


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def config_file(temp_dir):
    path = temp_dir / "config.yaml"
    path.write_text("modules: [crystal, lua]\n")
    return path


class TestPromptCommand:
    """Test printing the prompt"""

    def test_prompt(self, runner, temp_dir, config_file, mock_exec_cmd):
        make_files(temp_dir, ["main.lua"])
        result = runner.invoke(cli, ['--config', str(config_file), 'prompt', '--path', str(temp_dir)])
        assert result.exit_code == 0
        assert result.output == "via 🌙 v5.4.0 "

    def test_prompt_in_empty_directory(self, runner, temp_dir, config_file, mock_exec_cmd):
        result = runner.invoke(cli, ['--config', str(config_file), 'prompt', '--path', str(temp_dir)])
        assert result.exit_code == 0
        assert result.output == ""

    def test_shell_from_environment(self, runner, temp_dir):
        config = temp_dir / "shell.yaml"
        config.write_text("modules: [shell]\nshell:\n  disabled: false\n")
        result = runner.invoke(
            cli,
            ['--config', str(config), 'prompt', '--path', str(temp_dir)],
            env={'SHELLPROMPT_SHELL': 'fish'},
        )
        assert result.exit_code == 0
        assert result.output == "fsh "


class TestModuleCommand:
    """Test printing one module"""

    def test_module(self, runner, temp_dir, mock_exec_cmd):
        make_files(temp_dir, ["shard.yml"])
        config = temp_dir / "none.yaml"
        result = runner.invoke(cli, ['--config', str(config), 'module', 'crystal', '--path', str(temp_dir)])
        assert result.exit_code == 0
        assert result.output == "via 🔮 v0.35.1 "

    def test_inactive_module_prints_nothing(self, runner, temp_dir, mock_exec_cmd):
        config = temp_dir / "none.yaml"
        result = runner.invoke(cli, ['--config', str(config), 'module', 'lua', '--path', str(temp_dir)])
        assert result.exit_code == 0
        assert result.output == ""

    def test_unknown_module_rejected(self, runner):
        result = runner.invoke(cli, ['module', 'cobol'])
        assert result.exit_code != 0


class TestExplainCommand:
    """Test the module table"""

    def test_explain(self, runner, temp_dir, config_file, mock_exec_cmd):
        make_files(temp_dir, ["main.lua"])
        result = runner.invoke(cli, ['--config', str(config_file), 'explain', '--path', str(temp_dir)])
        assert result.exit_code == 0
        assert "lua" in result.output
        assert "v5.4.0" in result.output

    def test_explain_nothing_active(self, runner, temp_dir, config_file, mock_exec_cmd):
        result = runner.invoke(cli, ['--config', str(config_file), 'explain', '--path', str(temp_dir)])
        assert result.exit_code == 0
        assert "No modules active" in result.output


class TestFormatCommand:
    """Test ad-hoc format strings"""

    def test_values_and_groups(self, runner):
        result = runner.invoke(cli, ['format', '$a($b )($c)', '-v', 'a=1', '-v', 'b=2'])
        assert result.exit_code == 0
        assert result.output == "12 \n"

    def test_meta_and_style(self, runner):
        result = runner.invoke(cli, ['format', '[$sym$v]($s)', '-m', 'sym=[>](red) ', '-v', 'v=x',
                                     '--style', 's=bold'])
        assert result.exit_code == 0
        assert result.output == "> x\n"

    def test_parse_error(self, runner):
        result = runner.invoke(cli, ['format', '$a(b'])
        assert result.exit_code == 1

    def test_unknown_variable(self, runner):
        result = runner.invoke(cli, ['format', '$missing'])
        assert result.exit_code == 1

    def test_bad_assignment(self, runner):
        result = runner.invoke(cli, ['format', '$a', '-v', 'novalue'])
        assert result.exit_code == 2
