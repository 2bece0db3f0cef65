"""Pull request endpoints: fetch, list, and manage review comments."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from sgclient.exceptions import InvalidUsageError
from sgclient.models import (
    PullRequest,
    PullRequestComment,
    PullRequestListCommentsOptions,
    PullRequestListOptions,
)
from sgclient.router import Route
from sgclient.services.base import HTTPService, decode, decode_list
from sgclient.specs import PullRequestCommentSpec, PullRequestSpec, RepoSpec


class PullRequestsService(ABC):
    """Communicates with the pull request endpoints of the API."""

    @abstractmethod
    def get(self, pull: PullRequestSpec) -> Optional[PullRequest]:
        """Fetch a pull request."""

    @abstractmethod
    def list_by_repo(
        self, repo: RepoSpec, opt: Optional[PullRequestListOptions] = None
    ) -> list[PullRequest]:
        """List pull requests for a repository."""

    @abstractmethod
    def list_comments(
        self,
        pull: PullRequestSpec,
        opt: Optional[PullRequestListCommentsOptions] = None,
    ) -> list[PullRequestComment]:
        """List comments on a pull request."""

    @abstractmethod
    def create_comment(
        self, pull: PullRequestSpec, comment: PullRequestComment
    ) -> Optional[PullRequestComment]:
        """Create a comment on a pull request."""

    @abstractmethod
    def edit_comment(
        self, pull: PullRequestSpec, comment: PullRequestComment
    ) -> Optional[PullRequestComment]:
        """Update an existing comment; ``comment.id`` selects which one."""

    @abstractmethod
    def delete_comment(self, pull: PullRequestSpec, comment_id: int) -> None:
        """Delete a comment on a pull request."""


class HTTPPullRequestsService(HTTPService, PullRequestsService):
    """:class:`PullRequestsService` backed by the REST API."""

    def get(self, pull: PullRequestSpec) -> Optional[PullRequest]:
        resp = self._call("GET", Route.REPO_PULL_REQUEST, pull.route_vars())
        return decode(resp, PullRequest)

    def list_by_repo(
        self, repo: RepoSpec, opt: Optional[PullRequestListOptions] = None
    ) -> list[PullRequest]:
        resp = self._call("GET", Route.REPO_PULL_REQUESTS, repo.route_vars(), opt)
        return decode_list(resp, PullRequest)

    def list_comments(
        self,
        pull: PullRequestSpec,
        opt: Optional[PullRequestListCommentsOptions] = None,
    ) -> list[PullRequestComment]:
        resp = self._call("GET", Route.REPO_PULL_REQUEST_COMMENTS, pull.route_vars(), opt)
        return decode_list(resp, PullRequestComment)

    def create_comment(
        self, pull: PullRequestSpec, comment: PullRequestComment
    ) -> Optional[PullRequestComment]:
        resp = self._call(
            "POST", Route.REPO_PULL_REQUEST_COMMENTS_CREATE, pull.route_vars(), body=comment
        )
        return decode(resp, PullRequestComment)

    def edit_comment(
        self, pull: PullRequestSpec, comment: PullRequestComment
    ) -> Optional[PullRequestComment]:
        if comment.id is None:
            raise InvalidUsageError("comment ID not specified")
        spec = PullRequestCommentSpec(pull=pull, comment=comment.id)
        resp = self._call(
            "PATCH", Route.REPO_PULL_REQUEST_COMMENTS_EDIT, spec.route_vars(), body=comment
        )
        return decode(resp, PullRequestComment)

    def delete_comment(self, pull: PullRequestSpec, comment_id: int) -> None:
        spec = PullRequestCommentSpec(pull=pull, comment=comment_id)
        self._call("DELETE", Route.REPO_PULL_REQUEST_COMMENTS_DELETE, spec.route_vars())
