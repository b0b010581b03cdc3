"""TOML config loading and resolution of the default dotenv file path."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path

# Python 3.11+ stdlib
import tomllib

from dotenv_cli.errors import ConfigError


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

_DEFAULTS = {
    "defaults_file": "./.env",
}

# Environment override for the dotenv path (below -f/--file, above config).
FILE_ENV_VAR = "DOTENV_CLI_FILE"


@dataclass
class DotenvCliConfig:
    """Merged configuration (hardcoded defaults < config.toml < env < CLI)."""

    defaults_file: str = _DEFAULTS["defaults_file"]


def _flatten_toml(data: dict, prefix: str = "") -> dict[str, str]:
    """Flatten nested TOML dict into underscore-joined keys.

    ``{"defaults": {"file": "x"}}`` → ``{"defaults_file": "x"}``
    """
    out: dict[str, str] = {}
    for k, v in data.items():
        key = f"{prefix}_{k}" if prefix else k
        if isinstance(v, dict):
            out.update(_flatten_toml(v, key))
        else:
            out[key] = str(v)
    return out


def xdg(env_var: str, default_suffix: str) -> Path:
    """Resolve an XDG directory from environment or default under $HOME."""
    val = os.environ.get(env_var, "")
    if val:
        return Path(val).resolve()
    return Path.home() / default_suffix


def config_file_path() -> Path:
    """Return ``$XDG_CONFIG_HOME/dotenv_cli/config.toml``."""
    return xdg("XDG_CONFIG_HOME", ".config") / "dotenv_cli" / "config.toml"


def load_config(path: Path) -> DotenvCliConfig:
    """Read a single TOML file and return a DotenvCliConfig with defaults filled in.

    A missing file yields the defaults; unknown keys are ignored.
    """
    cfg = DotenvCliConfig()
    if not path.exists():
        return cfg
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e
    flat = _flatten_toml(data)
    valid_keys = {fld.name for fld in fields(cfg)}
    for k, v in flat.items():
        if k in valid_keys:
            setattr(cfg, k, v)
    return cfg


def resolve_env_file(cli_value: str | None, cfg: DotenvCliConfig | None = None) -> str:
    """Pick the dotenv path to operate on.

    Precedence: ``-f/--file`` > ``$DOTENV_CLI_FILE`` > config.toml > ``./.env``.
    """
    if cli_value:
        return cli_value
    from_env = os.environ.get(FILE_ENV_VAR, "")
    if from_env:
        return from_env
    if cfg is None:
        cfg = load_config(config_file_path())
    return cfg.defaults_file
