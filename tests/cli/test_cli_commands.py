"""
Tests for the configbridge CLI commands.
"""

import pytest

from configbridge.cli.exit_codes import EXIT_CONFIG_ERROR, EXIT_ERROR, EXIT_SUCCESS
from configbridge.cli.main import app


class TestFlagCommands:
    def test_set_then_get(self, typer_test_client, config_home):
        result = typer_test_client.invoke(app, ["flag", "set", "steer", "on"])
        assert result.exit_code == EXIT_SUCCESS
        assert (config_home / "config.toml").read_text(encoding="utf-8") == "steer = true\n"

        result = typer_test_client.invoke(app, ["flag", "get", "steer"])
        assert result.exit_code == EXIT_SUCCESS
        assert "true" in result.stdout

    def test_get_unset(self, typer_test_client, config_home):
        result = typer_test_client.invoke(app, ["flag", "get", "apps"])

        assert result.exit_code == EXIT_SUCCESS
        assert "unset" in result.stdout

    def test_deprecated_key(self, typer_test_client, config_home):
        result = typer_test_client.invoke(app, ["flag", "set", "collab", "true"])

        assert result.exit_code == EXIT_ERROR
        assert "multi_agent" in result.stdout
        assert not config_home.exists()

    def test_bad_boolean(self, typer_test_client, config_home):
        result = typer_test_client.invoke(app, ["flag", "set", "steer", "maybe"])

        assert result.exit_code == EXIT_ERROR

    def test_malformed_config_is_config_error(self, typer_test_client, write_config):
        write_config("steer = = true\n")

        result = typer_test_client.invoke(app, ["flag", "get", "steer"])

        assert result.exit_code == EXIT_CONFIG_ERROR


class TestPersonalityCommands:
    def test_set_and_get(self, typer_test_client, config_home):
        result = typer_test_client.invoke(app, ["personality", "set", "Friendly"])
        assert result.exit_code == EXIT_SUCCESS

        result = typer_test_client.invoke(app, ["personality", "get"])
        assert "friendly" in result.stdout

    def test_unknown_value_is_ignored(self, typer_test_client, config_home):
        result = typer_test_client.invoke(app, ["personality", "set", "grumpy"])

        assert result.exit_code == EXIT_SUCCESS
        assert "unset" in result.stdout


class TestConfigCommands:
    def test_path(self, typer_test_client, config_home):
        result = typer_test_client.invoke(app, ["config", "path"])

        assert result.exit_code == EXIT_SUCCESS
        assert str(config_home / "config.toml") in result.stdout

    def test_path_without_home(self, typer_test_client, no_config_home):
        result = typer_test_client.invoke(app, ["config", "path"])

        assert result.exit_code == EXIT_CONFIG_ERROR

    def test_model_with_override(self, typer_test_client, no_config_home, tmp_path):
        (tmp_path / "config.toml").write_text('model = "gpt-5"\n', encoding="utf-8")

        result = typer_test_client.invoke(app, ["config", "model", "--home", str(tmp_path)])

        assert result.exit_code == EXIT_SUCCESS
        assert "gpt-5" in result.stdout

    def test_model_unresolvable(self, typer_test_client, no_config_home):
        result = typer_test_client.invoke(app, ["config", "model"])

        assert result.exit_code == EXIT_CONFIG_ERROR
        assert "Unable to resolve config home" in result.stdout


class TestFileCommands:
    def test_write_and_read_workspace_agents(self, typer_test_client, tmp_path):
        repo = tmp_path / "repo"
        repo.mkdir()
        root_arg = f"ws=  {repo}"

        result = typer_test_client.invoke(
            app,
            ["file", "write", "workspace", "agents", "-w", "ws", "--workspace-root", root_arg],
            input="# Agents\n",
        )
        assert result.exit_code == EXIT_SUCCESS
        assert (repo / "AGENTS.md").read_text(encoding="utf-8") == "# Agents\n"

        result = typer_test_client.invoke(
            app,
            ["file", "read", "workspace", "agents", "-w", "ws", "--workspace-root", root_arg, "--json"],
        )
        assert result.exit_code == EXIT_SUCCESS
        assert '"exists":true' in result.stdout
        assert '"truncated":false' in result.stdout

    def test_read_global_config(self, typer_test_client, write_config):
        write_config('model = "gpt-5"\n')

        result = typer_test_client.invoke(app, ["file", "read", "global", "config"])

        assert result.exit_code == EXIT_SUCCESS
        assert 'model = "gpt-5"' in result.stdout

    def test_unknown_workspace(self, typer_test_client, config_home):
        result = typer_test_client.invoke(app, ["file", "read", "workspace", "agents", "-w", "nope"])

        assert result.exit_code == EXIT_CONFIG_ERROR

    def test_bad_scope(self, typer_test_client, config_home):
        result = typer_test_client.invoke(app, ["file", "read", "team", "agents"])

        assert result.exit_code == EXIT_ERROR

    @pytest.mark.parametrize("entry", ["no-separator", "=path", "ws="])
    def test_bad_workspace_root(self, typer_test_client, config_home, entry):
        result = typer_test_client.invoke(
            app, ["file", "read", "global", "agents", "--workspace-root", entry]
        )

        assert result.exit_code == EXIT_ERROR


class TestExportCommand:
    def test_export_with_content(self, typer_test_client, tmp_path):
        target = tmp_path / "a" / "b.md"

        result = typer_test_client.invoke(app, ["export", str(target), "--content", "hello"])

        assert result.exit_code == EXIT_SUCCESS
        assert target.read_text(encoding="utf-8") == "hello"

    def test_export_from_stdin(self, typer_test_client, tmp_path):
        target = tmp_path / "c.md"

        result = typer_test_client.invoke(app, ["export", str(target)], input="piped")

        assert result.exit_code == EXIT_SUCCESS
        assert target.read_text(encoding="utf-8") == "piped"

    def test_export_blank_path(self, typer_test_client):
        result = typer_test_client.invoke(app, ["export", "  ", "--content", "x"])

        assert result.exit_code == EXIT_ERROR
        assert "Path is required" in result.stdout
