"""Source unit commands -- ``sgclient units get|list``."""

from __future__ import annotations

from typing import Optional

import typer

from sgclient.commands import api_errors, open_client, repo_arg
from sgclient.models import UnitListOptions
from sgclient.output import format_response, print_table
from sgclient.specs import RepoSpec, UnitSpec

units_app = typer.Typer(no_args_is_help=True)


@units_app.command("get")
def units_get(
    ctx: typer.Context,
    repo: RepoSpec = typer.Argument(..., parser=repo_arg, metavar="URI"),
    unit_type: str = typer.Argument(..., metavar="TYPE", help="Unit type, e.g. GoPackage."),
    unit: str = typer.Argument(..., metavar="NAME", help="Unit name."),
) -> None:
    """Fetch a single source unit."""
    spec = UnitSpec(repo=repo, unit_type=unit_type, unit=unit)
    with api_errors(), open_client(ctx) as client:
        format_response(client.units.get(spec))


@units_app.command("list")
def units_list(
    ctx: typer.Context,
    repos: Optional[list[str]] = typer.Option(None, "--repo", "-r", help="Repository URI (repeatable)."),
    unit_type: str = typer.Option("", "--type", "-t", help="Only units of this type."),
    query: str = typer.Option("", "--query", "-q", help="Filter units by name."),
) -> None:
    """List source units."""
    opt = UnitListOptions(repo_uris=repos or [], unit_type=unit_type, query=query)
    with api_errors(), open_client(ctx) as client:
        units = client.units.list(opt)
    print_table(
        ["Repo", "Type", "Unit"],
        [[u.repo, u.unit_type, u.unit] for u in units],
        title="Source units",
    )
