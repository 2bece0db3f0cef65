"""Built-in CLI sub-commands for sgclient.

* :mod:`~sgclient.commands.people` -- parse person specs, fetch people.
* :mod:`~sgclient.commands.repos` -- fetch and list repositories.
* :mod:`~sgclient.commands.pulls` -- pull requests and their comments.
* :mod:`~sgclient.commands.units` -- source units.
* :mod:`~sgclient.commands.config` -- view and modify global settings.
* :mod:`~sgclient.commands.init` -- create a connection profile.

API commands open a :class:`~sgclient.api.Client` with :func:`open_client`
and run inside :func:`api_errors`, which turns any
:class:`~sgclient.exceptions.SgclientError` into an error message and
the matching exit code.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import typer

from sgclient.api import Client
from sgclient.exceptions import InvalidFormatError, SgclientError
from sgclient.output import error
from sgclient.specs import PersonSpec, RepoSpec, parse_person_spec


def open_client(ctx: typer.Context) -> Client:
    """Build a :class:`Client` for the profile selected by the global options."""
    from sgclient.auth import create_default_manager
    from sgclient.config import resolve_config

    obj = ctx.obj or {}
    _, profile = resolve_config(
        cli_profile=obj.get("profile"), cli_base_url=obj.get("base_url")
    )
    return Client(
        profile,
        auth_manager=create_default_manager(),
        dry_run=obj.get("dry_run", False),
    )


@contextmanager
def api_errors() -> Iterator[None]:
    """Report an :class:`SgclientError` and exit with its code."""
    try:
        yield
    except SgclientError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None


def person_arg(text: str) -> PersonSpec:
    """Typer parser for person spec arguments."""
    try:
        return parse_person_spec(text)
    except InvalidFormatError as exc:
        raise typer.BadParameter(str(exc)) from None


def repo_arg(text: str) -> RepoSpec:
    """Typer parser for repository URI arguments."""
    if not text:
        raise typer.BadParameter("repository URI must not be empty")
    return RepoSpec(uri=text.strip("/"))
