"""Named API routes and URL construction.

Every endpoint is addressed by a :class:`Route` whose path template
contains ``{Name}`` placeholders.  :func:`url_for` fills those
placeholders from the route variables produced by a spec's
``route_vars()`` method::

    spec = PullRequestSpec(repo=RepoSpec(uri="github.com/a/b"), number=5)
    url_for(Route.REPO_PULL_REQUEST, spec.route_vars())
    # "/repos/github.com/a/b/.pulls/5"

Variables are percent-encoded.  ``RepoSpec`` and ``Unit`` may span several
path segments, so their ``/`` separators are kept; every other variable
must fit in a single segment.
"""

from __future__ import annotations

import enum
import re
from urllib.parse import quote

from sgclient.exceptions import InvalidFormatError


class Route(str, enum.Enum):
    """Route names understood by the API server."""

    REPOS = "repos"
    REPO = "repo"
    REPO_ISSUE = "repo.issue"
    REPO_PULL_REQUESTS = "repo.pull_requests"
    REPO_PULL_REQUEST = "repo.pull_request"
    REPO_PULL_REQUEST_COMMENTS = "repo.pull_request.comments"
    REPO_PULL_REQUEST_COMMENTS_CREATE = "repo.pull_request.comments.create"
    REPO_PULL_REQUEST_COMMENTS_EDIT = "repo.pull_request.comments.edit"
    REPO_PULL_REQUEST_COMMENTS_DELETE = "repo.pull_request.comments.delete"
    PERSON = "person"
    UNITS = "units"
    UNIT = "unit"


_PULL = "/repos/{RepoSpec}/.pulls/{Pull}"

ROUTES: dict[Route, str] = {
    Route.REPOS: "/repos",
    Route.REPO: "/repos/{RepoSpec}",
    Route.REPO_ISSUE: "/repos/{RepoSpec}/.issues/{Issue}",
    Route.REPO_PULL_REQUESTS: "/repos/{RepoSpec}/.pulls",
    Route.REPO_PULL_REQUEST: _PULL,
    Route.REPO_PULL_REQUEST_COMMENTS: _PULL + "/comments",
    Route.REPO_PULL_REQUEST_COMMENTS_CREATE: _PULL + "/comments",
    Route.REPO_PULL_REQUEST_COMMENTS_EDIT: _PULL + "/comments/{CommentID}",
    Route.REPO_PULL_REQUEST_COMMENTS_DELETE: _PULL + "/comments/{CommentID}",
    Route.PERSON: "/people/{PersonSpec}",
    Route.UNITS: "/.units",
    Route.UNIT: "/repos/{RepoSpec}/.units/{UnitType}/{Unit}",
}

_MULTI_SEGMENT_VARS = frozenset({"RepoSpec", "Unit"})
_PLACEHOLDER = re.compile(r"\{(\w+)\}")


def url_for(route: Route, route_vars: dict[str, str] | None = None) -> str:
    """Build the URL path for *route* by substituting *route_vars*.

    Variables not referenced by the template are ignored, so the mapping
    of a nested spec can address any of its parents' routes.

    Args:
        route: The named route.
        route_vars: Mapping of template variable names to values.

    Returns:
        The URL path, relative to the API base URL.

    Raises:
        InvalidFormatError: If a variable the template needs is missing.
    """
    variables = route_vars or {}

    def _substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        value = variables.get(name)
        if value is None:
            raise InvalidFormatError(
                f"Route '{route.value}' requires variable '{name}'"
            )
        safe = "/@$:" if name in _MULTI_SEGMENT_VARS else "@$:"
        return quote(value, safe=safe)

    return _PLACEHOLDER.sub(_substitute, ROUTES[route])
