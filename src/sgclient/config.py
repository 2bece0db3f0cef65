"""Persistent configuration: directories, profiles, and precedence.

Files live under the XDG base directories on Linux and BSD and under
``~/.sgclient/`` elsewhere.  The global :class:`~sgclient.models.GlobalConfig`
sits in ``config.json`` and each :class:`~sgclient.models.Profile` in
``profiles/<name>.json``.  Writes go to a temp file that is renamed over
the target, so a crash never leaves a half-written file.

:func:`resolve_config` picks the active profile; :func:`resolve_credential`
turns a credential source (``env:``, ``file:``, ``prompt``) into a secret.
"""

from __future__ import annotations

import getpass
import json
import logging
import os
import platform
import sys
import tempfile
from pathlib import Path
from typing import Any, Optional, TypeVar

from pydantic import BaseModel

from sgclient.exceptions import ConfigError
from sgclient.models import GlobalConfig, Profile

logger = logging.getLogger(__name__)

_APP_NAME = "sgclient"
_CONFIG_FILENAME = "config.json"
_PROJECT_CONFIG_FILENAME = "sgclient.json"
DEFAULT_PROFILE_NAME = "default"

_M = TypeVar("_M", bound=BaseModel)


# --- Directories ---


def _is_xdg_platform() -> bool:
    system = platform.system()
    return system == "Linux" or system.endswith("BSD")


def _base_dir(xdg_var: str, xdg_default: Path, fallback: Path) -> Path:
    if _is_xdg_platform():
        path = Path(os.environ.get(xdg_var) or xdg_default) / _APP_NAME
    else:
        path = fallback
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_config_dir() -> Path:
    """Return ``$XDG_CONFIG_HOME/sgclient`` (or ``~/.sgclient``), creating it."""
    home = Path.home()
    return _base_dir("XDG_CONFIG_HOME", home / ".config", home / f".{_APP_NAME}")


def get_data_dir() -> Path:
    """Return ``$XDG_DATA_HOME/sgclient`` (or ``~/.sgclient``), creating it.

    Crash logs are written to its ``logs/`` subdirectory.
    """
    home = Path.home()
    return _base_dir("XDG_DATA_HOME", home / ".local" / "share", home / f".{_APP_NAME}")


def get_profiles_dir() -> Path:
    path = get_config_dir() / "profiles"
    path.mkdir(parents=True, exist_ok=True)
    return path


# --- File I/O ---


def _atomic_write(path: Path, data: str) -> None:
    """Replace *path* with *data* via a sibling temp file and ``os.replace``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = tempfile.NamedTemporaryFile(
        "w", dir=path.parent, prefix=f".{path.name}.", suffix=".tmp",
        delete=False, encoding="utf-8",
    )
    try:
        with tmp:
            tmp.write(data)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp.name, path)
    except BaseException:
        Path(tmp.name).unlink(missing_ok=True)
        raise


def _write_json(path: Path, data: Any) -> None:
    _atomic_write(path, json.dumps(data, indent=2) + "\n")


def _read_json(path: Path, what: str) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except ValueError as exc:
        raise ConfigError(f"Invalid {what} at {path}: {exc}") from exc


def _load_model(path: Path, model: type[_M], what: str) -> _M:
    data = _read_json(path, what)
    try:
        return model.model_validate(data)
    except ValueError as exc:
        raise ConfigError(f"Invalid {what} at {path}: {exc}") from exc


# --- Global config ---


def _global_config_path() -> Path:
    return get_config_dir() / _CONFIG_FILENAME


def load_global_config() -> GlobalConfig:
    """Load ``config.json``; a missing file yields the defaults.

    Raises:
        ConfigError: If the file is not valid JSON or fails validation.
    """
    path = _global_config_path()
    if not path.is_file():
        return GlobalConfig()
    return _load_model(path, GlobalConfig, "global config")


def save_global_config(config: GlobalConfig) -> None:
    _write_json(_global_config_path(), config.model_dump(mode="json"))


# --- Profiles ---


def _profile_path(name: str) -> Path:
    return get_profiles_dir() / f"{name}.json"


def list_profiles() -> list[str]:
    """Names of the saved profiles, sorted."""
    return sorted(p.stem for p in get_profiles_dir().glob("*.json") if p.is_file())


def profile_exists(name: str) -> bool:
    return _profile_path(name).is_file()


def load_profile(name: str) -> Profile:
    """Load the profile called *name*.

    Raises:
        ConfigError: If it does not exist, is not valid JSON, or fails
            validation.
    """
    path = _profile_path(name)
    if not path.is_file():
        raise ConfigError(f"Profile '{name}' not found at {path}")
    return _load_model(path, Profile, f"profile '{name}'")


def save_profile(profile: Profile) -> None:
    _write_json(_profile_path(profile.name), profile.model_dump(mode="json"))


def delete_profile(name: str) -> None:
    path = _profile_path(name)
    if not path.is_file():
        raise ConfigError(f"Profile '{name}' not found at {path}")
    path.unlink()


def load_project_config() -> Optional[dict[str, Any]]:
    """Read ``./sgclient.json`` if present; ``None`` otherwise."""
    path = Path.cwd() / _PROJECT_CONFIG_FILENAME
    if not path.is_file():
        return None
    return _read_json(path, "project config")


# --- Precedence ---


def _select_profile_name(global_cfg: GlobalConfig, cli_profile: Optional[str]) -> Optional[str]:
    if cli_profile is not None:
        return cli_profile
    env_profile = os.environ.get("SGCLIENT_PROFILE")
    if env_profile:
        return env_profile
    project = load_project_config() or {}
    if project.get("default_profile"):
        return project["default_profile"]
    if global_cfg.default_profile:
        return global_cfg.default_profile
    if global_cfg.auto_select_single_profile:
        profiles = list_profiles()
        if len(profiles) == 1:
            return profiles[0]
    return None


def resolve_config(
    cli_profile: Optional[str] = None,
    cli_base_url: Optional[str] = None,
    cli_format: Optional[str] = None,
) -> tuple[GlobalConfig, Profile]:
    """Return ``(global_config, active_profile)``.

    The profile is chosen by, in order: ``cli_profile``, ``$SGCLIENT_PROFILE``,
    ``default_profile`` in ``./sgclient.json``, ``default_profile`` in the
    global config, and finally the only saved profile if there is exactly
    one.  With none of those an anonymous profile for the public API is
    used.  ``cli_base_url`` and then ``$SGCLIENT_BASE_URL`` override the
    profile's base URL.
    """
    global_cfg = load_global_config()

    name = _select_profile_name(global_cfg, cli_profile)
    if name is None:
        logger.debug("No profile configured; using built-in defaults")
        profile = Profile(name=DEFAULT_PROFILE_NAME)
    else:
        profile = load_profile(name)

    base_url = cli_base_url or os.environ.get("SGCLIENT_BASE_URL")
    if base_url:
        profile.base_url = base_url
    if cli_format is not None:
        global_cfg.output.format = cli_format

    return global_cfg, profile


# --- Credentials ---


def _read_env(name: str) -> str:
    value = os.environ.get(name)
    if value is None:
        raise ConfigError(f"Environment variable '{name}' is not set")
    return value


def _read_file(raw_path: str) -> str:
    path = Path(raw_path).expanduser()
    try:
        return path.read_text(encoding="utf-8").strip()
    except FileNotFoundError:
        raise ConfigError(f"Credential file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read credential file {path}: {exc}") from exc


def resolve_credential(source: str) -> str:
    """Resolve a credential source to its secret value.

    ``env:NAME`` reads an environment variable, ``file:PATH`` reads a file
    (surrounding whitespace stripped), and ``prompt`` asks on the terminal.

    Raises:
        ConfigError: If the source is unknown or cannot be read.
    """
    kind, _, arg = source.partition(":")
    if kind == "env" and arg:
        return _read_env(arg)
    if kind == "file" and arg:
        return _read_file(arg)
    if source == "prompt":
        if not sys.stdin.isatty():
            raise ConfigError("Cannot prompt for a credential: stdin is not a TTY")
        return getpass.getpass("Access token: ")
    raise ConfigError(f"Unknown credential source format: {source}")
