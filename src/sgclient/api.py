"""The :class:`Client` facade: one HTTP transport, every resource service.

Example::

    from sgclient import Client, RepoSpec
    from sgclient.auth import create_default_manager
    from sgclient.config import resolve_config

    _, profile = resolve_config()
    with Client(profile, auth_manager=create_default_manager()) as client:
        repo = client.repos.get(RepoSpec(uri="github.com/a/b"))
"""

from __future__ import annotations

from typing import Optional

import httpx

from sgclient.auth.manager import AuthManager
from sgclient.client.sync_client import SyncClient
from sgclient.models import Profile
from sgclient.services.people import HTTPPeopleService, PeopleService
from sgclient.services.pulls import HTTPPullRequestsService, PullRequestsService
from sgclient.services.repos import HTTPReposService, ReposService
from sgclient.services.units import HTTPUnitsService, UnitsService


class Client:
    """Bundles the resource services over a shared :class:`SyncClient`.

    The services are plain attributes typed by their interfaces, so a test
    may replace any of them (``client.pull_requests = MagicMock(spec=...)``).

    Args:
        profile: Connection profile (base URL, auth, request settings).
        auth_manager: Resolves the profile's credentials on entry.
        dry_run: Print requests instead of sending them.
        transport: Optional httpx transport override.
    """

    def __init__(
        self,
        profile: Profile,
        auth_manager: Optional[AuthManager] = None,
        dry_run: bool = False,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.http = SyncClient(
            profile, auth_manager=auth_manager, dry_run=dry_run, transport=transport
        )
        self.repos: ReposService = HTTPReposService(self.http)
        self.pull_requests: PullRequestsService = HTTPPullRequestsService(self.http)
        self.people: PeopleService = HTTPPeopleService(self.http)
        self.units: UnitsService = HTTPUnitsService(self.http)

    def __enter__(self) -> Client:
        self.http.__enter__()
        return self

    def __exit__(self, *args: object) -> None:
        self.http.__exit__(*args)
