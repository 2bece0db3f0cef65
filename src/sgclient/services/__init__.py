"""Resource services.

Each service is an abstract interface (``PullRequestsService``,
``ReposService``, ``PeopleService``, ``UnitsService``) with one
HTTP-backed implementation.  Code that consumes a service should depend
on the interface, so tests can substitute
``MagicMock(spec=PullRequestsService)`` for the real thing.
"""

from sgclient.services.people import HTTPPeopleService, PeopleService
from sgclient.services.pulls import HTTPPullRequestsService, PullRequestsService
from sgclient.services.repos import HTTPReposService, ReposService
from sgclient.services.units import HTTPUnitsService, UnitsService

__all__ = [
    "HTTPPeopleService",
    "HTTPPullRequestsService",
    "HTTPReposService",
    "HTTPUnitsService",
    "PeopleService",
    "PullRequestsService",
    "ReposService",
    "UnitsService",
]
