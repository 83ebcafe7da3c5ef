"""Unit tests for the config command group."""

from pathlib import Path

from rmguard.cli.main import app
from rmguard.core.config import GuardConfig, load_config, save_config
from typer.testing import CliRunner

runner = CliRunner()


class TestConfigInit:
    """Tests for rmguard config init."""

    def test_writes_standard_layout(self, tmp_path: Path) -> None:
        config_path = tmp_path / "cfg" / "config.toml"
        prefix = tmp_path / "inst"

        result = runner.invoke(
            app, ["--config", str(config_path), "config", "init", "--prefix", str(prefix)]
        )

        assert result.exit_code == 0
        assert "Config written" in result.output
        assert load_config(config_path) == GuardConfig.for_prefix(prefix)

    def test_global_prefix_and_force(self, tmp_path: Path) -> None:
        config_path = tmp_path / "config.toml"

        result = runner.invoke(
            app,
            [
                "--config",
                str(config_path),
                "config",
                "init",
                "-p",
                str(tmp_path / "inst"),
                "-g",
                str(tmp_path / "global"),
                "--force-purge",
            ],
        )

        assert result.exit_code == 0
        config = load_config(config_path)
        assert config.global_bin_dir == tmp_path / "global" / "bin"
        assert config.force is True

    def test_refuses_to_overwrite(self, config_file: Path, tmp_path: Path) -> None:
        before = config_file.read_text()

        result = runner.invoke(
            app,
            ["--config", str(config_file), "config", "init", "--prefix", str(tmp_path / "other")],
        )

        assert result.exit_code == 1
        assert "already exists" in result.output
        assert config_file.read_text() == before

    def test_overwrite(self, config_file: Path, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            [
                "--config",
                str(config_file),
                "config",
                "init",
                "--prefix",
                str(tmp_path / "other"),
                "--overwrite",
            ],
        )

        assert result.exit_code == 0
        assert load_config(config_file).prefix == tmp_path / "other"


class TestConfigShow:
    """Tests for rmguard config show."""

    def test_show(self, tmp_path: Path) -> None:
        config_path = tmp_path / "config.toml"
        save_config(GuardConfig.for_prefix(Path("/opt/inst")), config_path)

        result = runner.invoke(app, ["--config", str(config_path), "config", "show"])

        assert result.exit_code == 0
        assert "/opt/inst/lib/pkgs" in result.output
        assert "force" in result.output
        assert "false" in result.output

    def test_show_without_config(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["--config", str(tmp_path / "missing.toml"), "config", "show"])

        assert result.exit_code == 1
        assert "Config not found" in result.output
