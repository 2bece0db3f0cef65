"""Pull request commands -- ``sgclient pulls ...``.

Every command addresses a pull request by repository URI and number,
e.g. ``sgclient pulls get github.com/a/b 5``.
"""

from __future__ import annotations

import typer

from sgclient.commands import api_errors, open_client, repo_arg
from sgclient.models import PullRequestComment, PullRequestListOptions
from sgclient.output import format_response, print_table, success
from sgclient.specs import PullRequestSpec, RepoSpec

pulls_app = typer.Typer(no_args_is_help=True)

_REPO = typer.Argument(..., parser=repo_arg, metavar="URI", help="Repository URI.")
_NUMBER = typer.Argument(..., metavar="NUMBER", help="Pull request number.")


@pulls_app.command("get")
def pulls_get(ctx: typer.Context, repo: RepoSpec = _REPO, number: int = _NUMBER) -> None:
    """Fetch a pull request."""
    with api_errors(), open_client(ctx) as client:
        format_response(client.pull_requests.get(PullRequestSpec(repo=repo, number=number)))


@pulls_app.command("list")
def pulls_list(
    ctx: typer.Context,
    repo: RepoSpec = _REPO,
    state: str = typer.Option("", "--state", "-s", help="open, closed, or all."),
    page: int = typer.Option(0, "--page"),
    per_page: int = typer.Option(0, "--per-page"),
) -> None:
    """List pull requests for a repository."""
    opt = PullRequestListOptions(state=state, page=page, per_page=per_page)
    with api_errors(), open_client(ctx) as client:
        pulls = client.pull_requests.list_by_repo(repo, opt)
    print_table(
        ["#", "State", "Title"],
        [[str(p.number), p.state, p.title] for p in pulls],
        title=f"Pull requests for {repo}",
    )


@pulls_app.command("comments")
def pulls_comments(ctx: typer.Context, repo: RepoSpec = _REPO, number: int = _NUMBER) -> None:
    """List review comments on a pull request."""
    with api_errors(), open_client(ctx) as client:
        comments = client.pull_requests.list_comments(PullRequestSpec(repo=repo, number=number))
    format_response(comments)


@pulls_app.command("comment")
def pulls_comment(
    ctx: typer.Context,
    repo: RepoSpec = _REPO,
    number: int = _NUMBER,
    body: str = typer.Argument(..., help="Comment text."),
) -> None:
    """Add a comment to a pull request."""
    pull = PullRequestSpec(repo=repo, number=number)
    with api_errors(), open_client(ctx) as client:
        created = client.pull_requests.create_comment(pull, PullRequestComment(body=body))
    format_response(created)


@pulls_app.command("edit-comment")
def pulls_edit_comment(
    ctx: typer.Context,
    repo: RepoSpec = _REPO,
    number: int = _NUMBER,
    comment_id: int = typer.Argument(..., metavar="ID", help="Comment ID."),
    body: str = typer.Argument(..., help="New comment text."),
) -> None:
    """Replace the text of a pull request comment."""
    pull = PullRequestSpec(repo=repo, number=number)
    with api_errors(), open_client(ctx) as client:
        updated = client.pull_requests.edit_comment(
            pull, PullRequestComment(id=comment_id, body=body)
        )
    format_response(updated)


@pulls_app.command("delete-comment")
def pulls_delete_comment(
    ctx: typer.Context,
    repo: RepoSpec = _REPO,
    number: int = _NUMBER,
    comment_id: int = typer.Argument(..., metavar="ID", help="Comment ID."),
) -> None:
    """Delete a pull request comment."""
    pull = PullRequestSpec(repo=repo, number=number)
    with api_errors(), open_client(ctx) as client:
        client.pull_requests.delete_comment(pull, comment_id)
    success(f"Deleted comment {comment_id} on {repo}#{number}")
