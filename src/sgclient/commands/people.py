"""People commands -- ``sgclient people parse|get``."""

from __future__ import annotations

import typer

from sgclient.commands import api_errors, open_client, person_arg
from sgclient.output import format_response
from sgclient.specs import PersonSpec

people_app = typer.Typer(no_args_is_help=True)


@people_app.command("parse")
def people_parse(
    spec: PersonSpec = typer.Argument(
        ..., parser=person_arg, metavar="SPEC", help="login, email, or $UID."
    ),
) -> None:
    """Parse a person spec and print its structured form.

    Example::

        sgclient people parse alice
        sgclient people parse '$42' --json
    """
    format_response(spec)


@people_app.command("get")
def people_get(
    ctx: typer.Context,
    spec: PersonSpec = typer.Argument(
        ..., parser=person_arg, metavar="SPEC", help="login, email, or $UID."
    ),
) -> None:
    """Fetch a person by login, email, or UID."""
    with api_errors(), open_client(ctx) as client:
        format_response(client.people.get(spec))
