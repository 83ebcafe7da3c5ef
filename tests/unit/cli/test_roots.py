"""Unit tests for the roots command and global options."""

from pathlib import Path

from rmguard import __version__
from rmguard.cli.main import app
from rmguard.core.config import GuardConfig, save_config
from typer.testing import CliRunner

runner = CliRunner()


class TestRootsCommand:
    """Tests for rmguard roots."""

    def test_lists_roots_in_order(self, tmp_path: Path) -> None:
        config_path = tmp_path / "config.toml"
        save_config(GuardConfig.for_prefix(Path("/opt/inst"), Path("/g")), config_path)

        result = runner.invoke(app, ["--config", str(config_path), "roots"])

        assert result.exit_code == 0
        output = result.output
        assert "Managed Roots" in output
        positions = [
            output.index(root)
            for root in ("/opt/inst ", "/g ", "/opt/inst/lib/pkgs", "/g/lib/pkgs", "/opt/inst/bin", "/g/bin")
        ]
        assert positions == sorted(positions)
        assert "force is enabled" not in output

    def test_force_warning(self, tmp_path: Path) -> None:
        config_path = tmp_path / "config.toml"
        save_config(GuardConfig.for_prefix(Path("/opt/inst"), force=True), config_path)

        result = runner.invoke(app, ["--config", str(config_path), "roots"])

        assert result.exit_code == 0
        assert "force is enabled" in result.output

    def test_missing_config(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["--config", str(tmp_path / "none.toml"), "roots"])

        assert result.exit_code == 1


class TestGlobalOptions:
    """Tests for options on the main callback."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"rmguard version {__version__}" in result.output

    def test_no_args_shows_help(self) -> None:
        result = runner.invoke(app, [])

        assert "Usage" in result.output

    def test_verbose_traces_decisions(self, config_file: Path, installed_package: Path) -> None:
        result = runner.invoke(
            app, ["--verbose", "--config", str(config_file), "check", str(installed_package)]
        )

        assert result.exit_code == 0
        assert "DEBUG" in result.output
