"""Repository endpoints."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from sgclient.models import Repo, RepoListOptions
from sgclient.router import Route
from sgclient.services.base import HTTPService, decode, decode_list
from sgclient.specs import RepoSpec


class ReposService(ABC):
    """Communicates with the repository endpoints of the API."""

    @abstractmethod
    def get(self, repo: RepoSpec) -> Optional[Repo]:
        """Fetch a repository."""

    @abstractmethod
    def list(self, opt: Optional[RepoListOptions] = None) -> list[Repo]:
        """List repositories, optionally filtered by a query."""


class HTTPReposService(HTTPService, ReposService):
    def get(self, repo: RepoSpec) -> Optional[Repo]:
        return decode(self._call("GET", Route.REPO, repo.route_vars()), Repo)

    def list(self, opt: Optional[RepoListOptions] = None) -> list[Repo]:
        return decode_list(self._call("GET", Route.REPOS, opt=opt), Repo)
