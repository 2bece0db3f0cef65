"""Repository commands -- ``sgclient repos get|list``."""

from __future__ import annotations

import typer

from sgclient.commands import api_errors, open_client, repo_arg
from sgclient.models import RepoListOptions
from sgclient.output import format_response, print_table
from sgclient.specs import RepoSpec

repos_app = typer.Typer(no_args_is_help=True)


@repos_app.command("get")
def repos_get(
    ctx: typer.Context,
    repo: RepoSpec = typer.Argument(..., parser=repo_arg, metavar="URI"),
) -> None:
    """Fetch a repository, e.g. ``sgclient repos get github.com/a/b``."""
    with api_errors(), open_client(ctx) as client:
        format_response(client.repos.get(repo))


@repos_app.command("list")
def repos_list(
    ctx: typer.Context,
    query: str = typer.Option("", "--query", "-q", help="Filter repositories."),
    page: int = typer.Option(0, "--page", help="Result page (1-based)."),
    per_page: int = typer.Option(0, "--per-page", help="Results per page."),
) -> None:
    """List repositories."""
    opt = RepoListOptions(query=query, page=page, per_page=per_page)
    with api_errors(), open_client(ctx) as client:
        repos = client.repos.list(opt)
    print_table(
        ["URI", "Description"],
        [[r.uri, r.description] for r in repos],
        title="Repositories",
    )
