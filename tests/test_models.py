"""Tests for sgclient.models -- resource decoding, derived specs, list options."""

from __future__ import annotations

import pytest

from sgclient.exceptions import InvalidFormatError
from sgclient.models import (
    ListOptions,
    Person,
    PullRequest,
    PullRequestComment,
    PullRequestListOptions,
    Repo,
    RepoSourceUnit,
    UnitListOptions,
)
from sgclient.specs import PersonSpec, PullRequestSpec, RepoSpec, UnitSpec


class TestPullRequestSpec:
    def test_spec_from_html_url(self) -> None:
        pr = PullRequest(number=5, html_url="https://github.com/a/b/pull/5")
        assert pr.spec() == PullRequestSpec(repo=RepoSpec(uri="github.com/a/b"), number=5)

    def test_number_comes_from_number_field(self) -> None:
        pr = PullRequest(number=9, html_url="https://github.com/a/b/pull/5")
        assert pr.spec().number == 9

    def test_url_without_scheme(self) -> None:
        pr = PullRequest(number=1, html_url="example.com/x/y/pull/1")
        assert pr.spec().repo == RepoSpec(uri="example.com/x/y")

    @pytest.mark.parametrize(
        "html_url", [None, "", "https://github.com/a", "https://github.com//b/pull/1"]
    )
    def test_malformed_url(self, html_url: str | None) -> None:
        with pytest.raises(InvalidFormatError):
            PullRequest(number=1, html_url=html_url).spec()

    def test_missing_number(self) -> None:
        with pytest.raises(InvalidFormatError):
            PullRequest(html_url="https://github.com/a/b/pull/5").spec()

    def test_decodes_github_payload(self) -> None:
        pr = PullRequest.model_validate(
            {
                "number": 5,
                "title": "Fix",
                "state": "open",
                "html_url": "https://github.com/a/b/pull/5",
                "user": {"login": "alice", "id": 1},
                "created_at": "2024-01-02T03:04:05Z",
                "mergeable": True,
            }
        )
        assert pr.user is not None and pr.user.login == "alice"
        assert pr.created_at is not None and pr.created_at.year == 2024
        assert pr.model_extra == {"mergeable": True}


class TestPersonSpec:
    def test_uid_preferred(self) -> None:
        person = Person.model_validate({"UID": 3, "Login": "a", "Email": "a@a.com"})
        assert person.spec() == PersonSpec(uid=3)

    def test_zero_uid_means_unset(self) -> None:
        person = Person.model_validate({"UID": 0, "Login": "alice"})
        assert person.spec() == PersonSpec(login="alice")

    def test_zero_uid_falls_through_to_email(self) -> None:
        assert Person(uid=0, email="a@a.com").spec() == PersonSpec(email="a@a.com")

    def test_unrepresentable_login(self) -> None:
        with pytest.raises(InvalidFormatError):
            Person(login="$5").spec()

    def test_login_then_email(self) -> None:
        assert Person(login="a", email="a@a.com").spec() == PersonSpec(login="a")
        assert Person(email="a@a.com").spec() == PersonSpec(email="a@a.com")

    def test_no_identifier(self) -> None:
        with pytest.raises(InvalidFormatError):
            Person(full_name="Nobody").spec()


def test_repo_decoding_and_spec() -> None:
    repo = Repo.model_validate({"URI": "github.com/a/b", "Description": "d", "Fork": True})
    assert repo.fork is True
    assert repo.spec() == RepoSpec(uri="github.com/a/b")


def test_unit_spec() -> None:
    unit = RepoSourceUnit.model_validate(
        {"Repo": "github.com/a/b", "CommitID": "abc", "UnitType": "GoPackage", "Unit": "github.com/a/b"}
    )
    assert unit.spec() == UnitSpec(
        repo=RepoSpec(uri="github.com/a/b"), unit_type="GoPackage", unit="github.com/a/b"
    )


def test_comment_serialises_server_names() -> None:
    comment = PullRequestComment(id=7, body="hi", published=True)
    data = comment.model_dump(mode="json", by_alias=True, exclude_none=True)
    assert data["Published"] is True
    assert data["id"] == 7


class TestListOptions:
    def test_empty_values_omitted(self) -> None:
        assert ListOptions().to_params() == {}

    def test_server_field_names(self) -> None:
        opt = PullRequestListOptions(state="open", page=2, per_page=50)
        assert opt.to_params() == {"Page": 2, "PerPage": 50, "State": "open"}

    def test_list_values_joined(self) -> None:
        opt = UnitListOptions(repo_uris=["a/b", "c/d"], unit_type="GoPackage")
        assert opt.to_params() == {"RepositoryURIs": "a/b,c/d", "UnitType": "GoPackage"}
