"""``sgclient config``: inspect and edit the global configuration.

Keys use dot notation for nested sections (``output.format``).  Values
are coerced to the type of the current setting and validated before the
file is rewritten.
"""

from __future__ import annotations

from typing import Any

import typer

from sgclient.output import error, format_response, info, print_table, success

config_app = typer.Typer(no_args_is_help=True)


def _fail(message: str) -> typer.Exit:
    error(message)
    return typer.Exit(code=2)


def _coerce(key: str, current: Any, value: str) -> Any:
    if isinstance(current, bool):
        return value.lower() in ("true", "1", "yes", "on")
    if isinstance(current, int):
        try:
            return int(value)
        except ValueError:
            raise _fail(f"{key} expects an integer, got {value!r}") from None
    return value


@config_app.command("show")
def config_show() -> None:
    """Print the global configuration (``sgclient config show --json``)."""
    from sgclient.config import get_config_dir, load_global_config

    info(f"Config directory: {get_config_dir()}")
    format_response(load_global_config())


@config_app.command("set")
def config_set(
    key: str = typer.Argument(help="Setting to change, e.g. 'output.format'."),
    value: str = typer.Argument(help="New value."),
) -> None:
    """Change one setting.

    Example::

        sgclient config set default_profile work
    """
    from pydantic import ValidationError

    from sgclient.config import load_global_config, save_global_config
    from sgclient.models import GlobalConfig

    data = load_global_config().model_dump(mode="json")
    *parents, leaf = key.split(".")
    section = data
    for name in parents:
        section = section.get(name)
        if not isinstance(section, dict):
            raise _fail(f"Invalid config key: {key}")
    if leaf not in section:
        raise _fail(f"Unknown config key: {key}")

    section[leaf] = _coerce(key, section[leaf], value)
    try:
        updated = GlobalConfig.model_validate(data)
    except ValidationError as exc:
        raise _fail(f"Invalid value for {key}: {exc}") from None

    save_global_config(updated)
    success(f"Set {key} = {section[leaf]}")


@config_app.command("reset")
def config_reset(ctx: typer.Context) -> None:
    """Restore the default configuration.  Asks first unless ``--force`` is given."""
    from sgclient.config import save_global_config
    from sgclient.models import GlobalConfig

    force = bool((ctx.obj or {}).get("force"))
    if not force and not typer.confirm("Reset all settings to their defaults?"):
        info("Cancelled.")
        raise typer.Exit()

    save_global_config(GlobalConfig())
    success("Configuration reset to defaults.")


@config_app.command("profiles")
def config_profiles() -> None:
    """List saved connection profiles."""
    from sgclient.config import list_profiles, load_profile

    rows = []
    for name in list_profiles():
        profile = load_profile(name)
        rows.append([name, profile.base_url, profile.auth.type if profile.auth else "-"])
    print_table(["Name", "Base URL", "Auth"], rows, title="Profiles")
