"""Tests for commitly.cli module."""

import json

from typer.testing import CliRunner

from commitly.cli import app
from commitly.git import GitError
from commitly.llm import BackendError, MissingAPIKeyError
from commitly.resolution import EffectiveProvider


runner = CliRunner()


class TestMainCommand:
    """Tests for the default generate command."""

    def test_generates_message(self, mocker, config_file, fake_diff_source):
        """Test the interactive flow."""
        mocker.patch("commitly.cli.main.GitDiffSource", return_value=fake_diff_source)
        mock_generate = mocker.patch(
            "commitly.cli.main.generate_commit_message",
            return_value="feat(PROJ-123): Add line\n\nChanges:\n- Add a line",
        )

        result = runner.invoke(app, [], input="PROJ-123\n")

        assert result.exit_code == 0
        assert "Enter the Jira ticket name: " in result.output
        assert "Generated commit message:" in result.output
        assert "feat(PROJ-123): Add line" in result.output

        prompt, effective, config = mock_generate.call_args.args
        assert "Jira ticket 'PROJ-123'" in prompt
        assert "+added line" in prompt
        assert "fix: previous" in prompt
        assert effective == EffectiveProvider(backend="openai", model="gpt-4o")
        assert mock_generate.call_args.kwargs["timeout"] is None

    def test_ticket_option_skips_prompt(self, mocker, config_file, fake_diff_source):
        """Test that --ticket avoids the interactive prompt."""
        mocker.patch("commitly.cli.main.GitDiffSource", return_value=fake_diff_source)
        mock_generate = mocker.patch(
            "commitly.cli.main.generate_commit_message", return_value="msg"
        )

        result = runner.invoke(app, ["--ticket", " ABC-9 "])

        assert result.exit_code == 0
        assert "Enter the Jira ticket name" not in result.output
        assert "Jira ticket 'ABC-9'" in mock_generate.call_args.args[0]

    def test_empty_ticket_is_accepted(self, mocker, config_file, fake_diff_source):
        """Test that pressing enter at the prompt still generates."""
        mocker.patch("commitly.cli.main.GitDiffSource", return_value=fake_diff_source)
        mocker.patch("commitly.cli.main.generate_commit_message", return_value="msg")

        result = runner.invoke(app, [], input="\n")

        assert result.exit_code == 0
        assert "msg" in result.output

    def test_provider_resolution_uses_config(self, mocker, config_file, fake_diff_source):
        """Test that the configured default provider and redirection apply."""
        config_file.write_text(json.dumps({
            "gemini": {"provider": "deepseek", "api_key": "", "model": "custom"},
            "default_provider": "gemini",
        }))
        mocker.patch("commitly.cli.main.GitDiffSource", return_value=fake_diff_source)
        mock_generate = mocker.patch(
            "commitly.cli.main.generate_commit_message", return_value="msg"
        )

        result = runner.invoke(app, ["-t", "X-1"])

        assert result.exit_code == 0
        assert mock_generate.call_args.args[1] == EffectiveProvider("deepseek", "custom")

    def test_provider_option_and_env(self, mocker, config_file, fake_diff_source, monkeypatch):
        """Test that --provider beats AI_PROVIDER."""
        monkeypatch.setenv("AI_PROVIDER", "gemini")
        mocker.patch("commitly.cli.main.GitDiffSource", return_value=fake_diff_source)
        mock_generate = mocker.patch(
            "commitly.cli.main.generate_commit_message", return_value="msg"
        )

        runner.invoke(app, ["-t", "X-1"])
        assert mock_generate.call_args.args[1].backend == "gemini"

        runner.invoke(app, ["-t", "X-1", "--provider", "claude"])
        assert mock_generate.call_args.args[1].backend == "claude"

    def test_timeout_and_history_options(self, mocker, config_file, fake_diff_source):
        """Test that --timeout and --history are passed through."""
        mocker.patch("commitly.cli.main.GitDiffSource", return_value=fake_diff_source)
        mock_generate = mocker.patch(
            "commitly.cli.main.generate_commit_message", return_value="msg"
        )

        result = runner.invoke(app, ["-t", "X-1", "--timeout", "15", "-n", "3"])

        assert result.exit_code == 0
        assert mock_generate.call_args.kwargs["timeout"] == 15.0
        assert fake_diff_source.history_calls == [3]

    def test_timeout_from_env(self, mocker, config_file, fake_diff_source, monkeypatch):
        """Test that COMMITLY_TIMEOUT sets the timeout."""
        monkeypatch.setenv("COMMITLY_TIMEOUT", "20")
        mocker.patch("commitly.cli.main.GitDiffSource", return_value=fake_diff_source)
        mock_generate = mocker.patch(
            "commitly.cli.main.generate_commit_message", return_value="msg"
        )

        runner.invoke(app, ["-t", "X-1"])

        assert mock_generate.call_args.kwargs["timeout"] == 20.0

    def test_zero_timeout_is_rejected(self, mocker, config_file, fake_diff_source):
        """Test that --timeout 0 is a usage error and nothing is sent."""
        mocker.patch("commitly.cli.main.GitDiffSource", return_value=fake_diff_source)
        mock_generate = mocker.patch("commitly.cli.main.generate_commit_message")

        result = runner.invoke(app, ["-t", "X-1", "--timeout", "0"])

        assert result.exit_code == 2
        mock_generate.assert_not_called()

    def test_missing_api_key_exits_nonzero(self, mocker, config_file, fake_diff_source):
        """Test that a missing key is reported with setup instructions."""
        mocker.patch("commitly.cli.main.GitDiffSource", return_value=fake_diff_source)

        result = runner.invoke(app, ["-t", "X-1"])

        assert result.exit_code == 1
        assert "OPENAI_API_KEY" in result.output
        assert "Generated commit message" not in result.output

    def test_backend_error_exits_nonzero(self, mocker, config_file, fake_diff_source):
        """Test that backend failures are reported."""
        mocker.patch("commitly.cli.main.GitDiffSource", return_value=fake_diff_source)
        mocker.patch(
            "commitly.cli.main.generate_commit_message",
            side_effect=BackendError("OpenAI API call failed: 429"),
        )

        result = runner.invoke(app, ["-t", "X-1"])

        assert result.exit_code == 1
        assert "429" in result.output

    def test_git_error_exits_nonzero(self, mocker, config_file):
        """Test that git failures are reported."""
        source = mocker.MagicMock()
        source.diff.return_value = ""
        source.history.side_effect = GitError("Git command failed: git log")
        mocker.patch("commitly.cli.main.GitDiffSource", return_value=source)
        mock_generate = mocker.patch("commitly.cli.main.generate_commit_message")

        result = runner.invoke(app, ["-t", "X-1"])

        assert result.exit_code == 1
        assert "Git error" in result.output
        mock_generate.assert_not_called()

    def test_malformed_config_exits_nonzero(self, mocker, config_file, fake_diff_source):
        """Test that a broken config file is reported."""
        config_file.write_text("{broken")
        mocker.patch("commitly.cli.main.GitDiffSource", return_value=fake_diff_source)

        result = runner.invoke(app, ["-t", "X-1"])

        assert result.exit_code == 1
        assert "Config error" in result.output

    def test_version(self):
        """Test the --version flag."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "commitly" in result.output


class TestConfigSetCommand:
    """Tests for commitly config set."""

    def test_sets_value(self, config_file):
        """Test writing a value."""
        result = runner.invoke(app, ["config", "set", "openai.api_key", "sk-xxxxxxx"])

        assert result.exit_code == 0
        assert "Config openai.api_key set successfully" in result.output
        assert json.loads(config_file.read_text())["openai"]["api_key"] == "sk-xxxxxxx"

    def test_missing_value_shows_usage(self, config_file):
        """Test that missing arguments print usage and exit 1."""
        result = runner.invoke(app, ["config", "set", "openai.api_key"])

        assert result.exit_code == 1
        assert "Usage: commitly config set <key> <value>" in result.output
        assert not config_file.exists()

    def test_missing_key_shows_usage(self, config_file):
        """Test that no arguments print usage and exit 1."""
        result = runner.invoke(app, ["config", "set"])

        assert result.exit_code == 1
        assert "Usage" in result.output

    def test_invalid_key_exits_nonzero(self, config_file):
        """Test that an unknown key is rejected."""
        result = runner.invoke(app, ["config", "set", "openai.temperature", "1"])

        assert result.exit_code == 1
        assert "Error setting config" in result.output
        assert not config_file.exists()


class TestConfigGetCommand:
    """Tests for commitly config get."""

    def test_gets_value(self, config_file):
        """Test reading a value."""
        runner.invoke(app, ["config", "set", "claude.model", "claude-x"])

        result = runner.invoke(app, ["config", "get", "claude.model"])

        assert result.exit_code == 0
        assert "claude.model = claude-x" in result.output

    def test_gets_default(self, config_file):
        """Test reading a built-in default."""
        result = runner.invoke(app, ["config", "get", "default.provider"])

        assert result.exit_code == 0
        assert "default.provider = openai" in result.output

    def test_missing_key_shows_usage(self, config_file):
        """Test that a missing key prints usage and exits 1."""
        result = runner.invoke(app, ["config", "get"])

        assert result.exit_code == 1
        assert "Usage: commitly config get <key>" in result.output

    def test_invalid_key_exits_nonzero(self, config_file):
        """Test that an unknown key is an error."""
        result = runner.invoke(app, ["config", "get", "default.model"])

        assert result.exit_code == 1
        assert "Error getting config" in result.output


class TestConfigShowCommand:
    """Tests for commitly config show."""

    def test_shows_masked_keys(self, config_file):
        """Test that keys are masked by length."""
        config_file.write_text(json.dumps({
            "openai": {"provider": "openai", "api_key": "sk-abcdefghijkl", "model": "gpt-4o"},
            "claude": {"provider": "claude", "api_key": "short", "model": "c"},
            "default_provider": "openai",
        }))

        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "Default Provider: openai" in result.output
        assert "API Key: sk-a...ijkl" in result.output
        assert "API Key: ****" in result.output
        assert "API Key: [not set]" in result.output
        assert "sk-abcdefghijkl" not in result.output

    def test_sections_use_display_names(self, config_file):
        """Test that each section is headed by the backend's display name."""
        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "OpenAI Configuration:" in result.output
        assert "Claude Configuration:" in result.output
        assert "Deepseek Configuration:" in result.output
        assert "Gemini Configuration:" in result.output
        assert "openai configuration:" not in result.output

    def test_shows_defaults_without_file(self, config_file):
        """Test showing the built-in defaults."""
        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "gemini-1.5-flash-latest" in result.output
        assert "not written yet" in result.output
        assert not config_file.exists()

    def test_malformed_config_exits_nonzero(self, config_file):
        """Test that a broken config file is reported."""
        config_file.write_text("[1, 2]")

        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 1
        assert "Error loading config" in result.output

    def test_non_utf8_config_exits_nonzero(self, config_file):
        """Test that a config file with invalid UTF-8 is reported, not a traceback."""
        config_file.write_bytes(b'{"default_provider": "\xff\xfe"}')

        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 1
        assert "Error loading config" in result.output
        assert not isinstance(result.exception, UnicodeDecodeError)


class TestConfigGroup:
    """Tests for the config group itself."""

    def test_no_subcommand_lists_commands(self, config_file):
        """Test that bare 'config' prints the available commands."""
        result = runner.invoke(app, ["config"])

        assert result.exit_code == 0
        assert "Available commands: set, get, show" in result.output

    def test_list_providers(self):
        """Test listing the supported backends."""
        result = runner.invoke(app, ["config", "list-providers"])

        assert result.exit_code == 0
        for name in ("openai", "claude", "deepseek", "gemini"):
            assert name in result.output
        assert "ANTHROPIC_API_KEY" in result.output
