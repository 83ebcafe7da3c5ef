"""Guard configuration and settings.

This module provides the configuration model and I/O functions for the
managed roots and the force flag consumed by the deletion guard.

Configuration is stored in ~/.config/rmguard/config.toml
"""

import os
import tomllib
from pathlib import Path
from typing import Annotated, Any

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from rmguard.core.paths import get_config_path

# Standard layout below a prefix
MODULE_SUBDIR = Path("lib") / "pkgs"
BIN_SUBDIR = Path("bin")


class GuardConfig(BaseModel):
    """Managed roots and removal policy.

    Attributes:
        prefix: Install prefix. Relative targets resolve against it and it
            is the default boundary in gentle mode.
        global_prefix: Global install prefix.
        module_dir: Directory holding installed packages.
        global_module_dir: Global counterpart of module_dir.
        bin_dir: Directory holding command links and shims.
        global_bin_dir: Global counterpart of bin_dir.
        force: Upgrade every removal to an unconditional purge.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    prefix: Annotated[
        Path,
        Field(description="Install prefix"),
    ]
    global_prefix: Annotated[
        Path | None,
        Field(description="Global install prefix"),
    ] = None
    module_dir: Annotated[
        Path | None,
        Field(description="Package module directory"),
    ] = None
    global_module_dir: Annotated[
        Path | None,
        Field(description="Global package module directory"),
    ] = None
    bin_dir: Annotated[
        Path | None,
        Field(description="Command directory"),
    ] = None
    global_bin_dir: Annotated[
        Path | None,
        Field(description="Global command directory"),
    ] = None
    force: Annotated[
        bool,
        Field(description="Purge instead of gently removing"),
    ] = False

    @field_validator(
        "prefix",
        "global_prefix",
        "module_dir",
        "global_module_dir",
        "bin_dir",
        "global_bin_dir",
    )
    @classmethod
    def validate_absolute(cls, v: Path | None) -> Path | None:
        """Require managed roots to be absolute and normalize them."""
        if v is None:
            return None
        expanded = v.expanduser()
        if not expanded.is_absolute():
            msg = f"managed root must be an absolute path: {v}"
            raise ValueError(msg)
        return Path(os.path.normpath(expanded))

    @classmethod
    def for_prefix(
        cls,
        prefix: Path,
        global_prefix: Path | None = None,
        force: bool = False,
    ) -> "GuardConfig":
        """Build a config using the standard layout below the prefixes.

        Args:
            prefix: Install prefix.
            global_prefix: Global install prefix, if any.
            force: Value for the force flag.

        Returns:
            GuardConfig with module and bin directories filled in.
        """
        return cls(
            prefix=prefix,
            global_prefix=global_prefix,
            module_dir=prefix / MODULE_SUBDIR,
            global_module_dir=global_prefix / MODULE_SUBDIR if global_prefix else None,
            bin_dir=prefix / BIN_SUBDIR,
            global_bin_dir=global_prefix / BIN_SUBDIR if global_prefix else None,
            force=force,
        )

    @property
    def install_root(self) -> str:
        """Get the install prefix as a string path."""
        return str(self.prefix)

    @property
    def managed_roots(self) -> tuple[str, ...]:
        """Get the managed roots in priority order.

        Unset roots are skipped and duplicates keep their first position.

        Returns:
            Tuple of absolute, normalized root paths.
        """
        candidates = (
            self.prefix,
            self.global_prefix,
            self.module_dir,
            self.global_module_dir,
            self.bin_dir,
            self.global_bin_dir,
        )
        roots: list[str] = []
        for candidate in candidates:
            if candidate is None:
                continue
            root = str(candidate)
            if root not in roots:
                roots.append(root)
        return tuple(roots)


class ConfigError(Exception):
    """Base exception for guard configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


class ConfigValidationError(ConfigError):
    """Raised when config content is invalid."""


def load_config(path: Path | None = None) -> GuardConfig:
    """Load guard configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses default config path.

    Returns:
        Validated GuardConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigValidationError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return GuardConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid config content: {e}") from e


def save_config(config: GuardConfig, path: Path | None = None) -> Path:
    """Save guard configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The GuardConfig object to save.
        path: Path to save the config. If None, uses default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    from tempfile import NamedTemporaryFile

    config_path = path or get_config_path()

    # Ensure parent directory exists
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = _config_to_dict(config)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        # os.replace() is atomic on POSIX
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        # Cleanup temp file on failure
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def config_exists(path: Path | None = None) -> bool:
    """Check if a config file exists.

    Args:
        path: Path to check. If None, uses default config path.

    Returns:
        True if the config file exists, False otherwise.
    """
    config_path = path or get_config_path()
    return config_path.exists()


def require_config(config_path: Path | None = None) -> GuardConfig:
    """Load config or exit with helpful error message.

    Args:
        config_path: Optional custom config path.

    Returns:
        Loaded and validated GuardConfig.

    Raises:
        typer.Exit: If the config cannot be loaded.
    """
    import typer

    from rmguard.utils.formatting import print_error, print_info

    path = config_path or get_config_path()
    try:
        return load_config(path)
    except ConfigNotFoundError as e:
        print_error(f"Config not found: {path}")
        print_info("Run 'rmguard config init --prefix <dir>' to create one.")
        raise typer.Exit(code=1) from e
    except ConfigError as e:
        print_error(f"Failed to load config: {e}")
        raise typer.Exit(code=1) from e


def _config_to_dict(config: GuardConfig) -> dict[str, Any]:
    """Convert GuardConfig to a dictionary for TOML serialization.

    Only includes set roots and a non-default force flag.

    Args:
        config: The GuardConfig to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    result: dict[str, Any] = {"prefix": str(config.prefix)}

    for name in ("global_prefix", "module_dir", "global_module_dir", "bin_dir", "global_bin_dir"):
        value = getattr(config, name)
        if value is not None:
            result[name] = str(value)

    if config.force:
        result["force"] = True

    return result
