"""sgclient -- client library and CLI for a remote code-hosting API.

The package talks to a REST API exposing repositories, pull requests,
people, and source units. Resources are addressed by compact *specs*
(``github.com/a/b``, ``alice``, ``$42``) that parse into structured values
and marshal into route variables for URL construction.

Typical usage::

    from sgclient import Client, PullRequestSpec, RepoSpec
    from sgclient.models import Profile

    with Client(Profile(name="default")) as client:
        pull = client.pull_requests.get(
            PullRequestSpec(repo=RepoSpec(uri="github.com/a/b"), number=5)
        )

Modules:
    specs: Spec value objects, parsing, and route-variable marshalling.
    router: Named route table and URL construction.
    api: The :class:`Client` facade bundling all services.
    models: Pydantic models for configuration and API resources.
    config: XDG-aware configuration and profile management.
    exceptions: Exception hierarchy with exit-code mapping.
    output: stdout/stderr formatting system with Rich support.
"""

__version__ = "0.3.0"

from sgclient.api import Client  # noqa: E402
from sgclient.specs import (  # noqa: E402
    IssueSpec,
    PersonSpec,
    PullRequestCommentSpec,
    PullRequestSpec,
    RepoSpec,
    UnitSpec,
    parse_person_spec,
)

__all__ = [
    "Client",
    "IssueSpec",
    "PersonSpec",
    "PullRequestCommentSpec",
    "PullRequestSpec",
    "RepoSpec",
    "UnitSpec",
    "parse_person_spec",
]
