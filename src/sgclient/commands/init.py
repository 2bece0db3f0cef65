"""Init command -- create a connection profile.

Implements ``sgclient init``: writes a :class:`~sgclient.models.Profile`
with the API base URL and, optionally, an access-token source, then makes
it the default profile in the global configuration.
"""

from __future__ import annotations

from typing import Optional

import typer

from sgclient.models import DEFAULT_BASE_URL
from sgclient.output import error, info, success


def init_command(
    name: str = typer.Option("default", "--name", "-n", help="Profile name."),
    base_url: str = typer.Option(DEFAULT_BASE_URL, "--base-url", help="API root URL."),
    token_source: Optional[str] = typer.Option(
        None,
        "--token-source",
        help="Access token source: env:VAR, file:/path, or prompt.",
    ),
    overwrite: bool = typer.Option(False, "--overwrite", help="Replace an existing profile."),
) -> None:
    """Create a connection profile and make it the default.

    Example::

        sgclient init --base-url https://sourcegraph.example.com/api \\
            --token-source env:SRC_ACCESS_TOKEN
    """
    from sgclient.config import (
        load_global_config,
        profile_exists,
        save_global_config,
        save_profile,
    )
    from sgclient.models import AuthConfig, Profile

    if profile_exists(name) and not overwrite:
        error(f"Profile '{name}' already exists (use --overwrite to replace it)")
        raise typer.Exit(code=2)

    auth = AuthConfig(type="bearer", source=token_source) if token_source else None
    profile = Profile(name=name, base_url=base_url.rstrip("/"), auth=auth)
    save_profile(profile)

    global_cfg = load_global_config()
    global_cfg.default_profile = name
    save_global_config(global_cfg)

    success(f"Created profile '{name}' for {profile.base_url}")
    if auth is None:
        info("No access token configured; requests will be anonymous.")
