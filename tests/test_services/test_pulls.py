"""Tests for the HTTP-backed pull request service."""

from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest

from sgclient.api import Client
from sgclient.exceptions import InvalidUsageError, NotFoundError
from sgclient.models import PullRequest, PullRequestComment, PullRequestListOptions
from sgclient.specs import PullRequestSpec, RepoSpec

REPO = RepoSpec(uri="github.com/a/b")
PULL = PullRequestSpec(repo=REPO, number=5)
PR_JSON = {
    "number": 5,
    "title": "Fix the thing",
    "state": "open",
    "html_url": "https://github.com/a/b/pull/5",
}


class Recorder:
    """MockTransport handler that records requests and replays one response."""

    def __init__(self, status: int = 200, payload: object = None) -> None:
        self.status = status
        self.payload = payload
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.payload is None:
            return httpx.Response(self.status)
        return httpx.Response(self.status, json=self.payload)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def test_get(make_client: Callable[..., Client]) -> None:
    rec = Recorder(payload=PR_JSON)
    with make_client(rec) as client:
        pr = client.pull_requests.get(PULL)

    assert isinstance(pr, PullRequest)
    assert pr.title == "Fix the thing"
    assert rec.last.method == "GET"
    assert rec.last.url.path == "/repos/github.com/a/b/.pulls/5"
    assert pr.spec() == PULL


def test_list_by_repo_with_options(make_client: Callable[..., Client]) -> None:
    rec = Recorder(payload=[PR_JSON, {**PR_JSON, "number": 6}])
    with make_client(rec) as client:
        pulls = client.pull_requests.list_by_repo(REPO, PullRequestListOptions(state="all", per_page=2))

    assert [p.number for p in pulls] == [5, 6]
    assert rec.last.url.path == "/repos/github.com/a/b/.pulls"
    assert dict(rec.last.url.params) == {"PerPage": "2", "State": "all"}


def test_list_comments(make_client: Callable[..., Client]) -> None:
    rec = Recorder(payload=[{"id": 1, "body": "lgtm", "Published": True}])
    with make_client(rec) as client:
        comments = client.pull_requests.list_comments(PULL)

    assert comments == [PullRequestComment(id=1, body="lgtm", published=True)]
    assert rec.last.url.path == "/repos/github.com/a/b/.pulls/5/comments"


def test_create_comment(make_client: Callable[..., Client]) -> None:
    rec = Recorder(status=201, payload={"id": 9, "body": "hi"})
    with make_client(rec) as client:
        created = client.pull_requests.create_comment(PULL, PullRequestComment(body="hi"))

    assert created is not None and created.id == 9
    assert rec.last.method == "POST"
    assert rec.last.url.path == "/repos/github.com/a/b/.pulls/5/comments"
    assert json.loads(rec.last.content) == {"Published": False, "body": "hi"}


def test_edit_comment(make_client: Callable[..., Client]) -> None:
    rec = Recorder(payload={"id": 7, "body": "edited"})
    with make_client(rec) as client:
        updated = client.pull_requests.edit_comment(PULL, PullRequestComment(id=7, body="edited"))

    assert updated is not None and updated.body == "edited"
    assert rec.last.method == "PATCH"
    assert rec.last.url.path == "/repos/github.com/a/b/.pulls/5/comments/7"


def test_edit_comment_requires_id(make_client: Callable[..., Client]) -> None:
    rec = Recorder(payload={})
    with make_client(rec) as client:
        with pytest.raises(InvalidUsageError, match="comment ID not specified"):
            client.pull_requests.edit_comment(PULL, PullRequestComment(body="x"))
    assert rec.requests == []


def test_delete_comment(make_client: Callable[..., Client]) -> None:
    rec = Recorder(status=204)
    with make_client(rec) as client:
        assert client.pull_requests.delete_comment(PULL, 7) is None

    assert rec.last.method == "DELETE"
    assert rec.last.url.path == "/repos/github.com/a/b/.pulls/5/comments/7"


def test_transport_errors_propagate(make_client: Callable[..., Client]) -> None:
    rec = Recorder(status=404, payload={"message": "no such pull"})
    with make_client(rec) as client:
        with pytest.raises(NotFoundError, match="no such pull"):
            client.pull_requests.get(PULL)
