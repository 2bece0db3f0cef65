"""Tests for the repository, people, and source unit services."""

from __future__ import annotations

from collections.abc import Callable
from unittest.mock import MagicMock

import httpx
import pytest

from sgclient.api import Client
from sgclient.models import Person, Profile, Repo, RepoListOptions, UnitListOptions
from sgclient.services import PeopleService, PullRequestsService, ReposService, UnitsService
from sgclient.specs import PersonSpec, RepoSpec, UnitSpec, parse_person_spec


def _replay(payload: object, seen: list[httpx.Request]) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=payload)

    return handler


class TestRepos:
    def test_get(self, make_client: Callable[..., Client]) -> None:
        seen: list[httpx.Request] = []
        with make_client(_replay({"URI": "github.com/a/b", "Name": "b"}, seen)) as client:
            repo = client.repos.get(RepoSpec(uri="github.com/a/b"))
        assert repo == Repo(uri="github.com/a/b", name="b")
        assert seen[0].url.path == "/repos/github.com/a/b"

    def test_list(self, make_client: Callable[..., Client]) -> None:
        seen: list[httpx.Request] = []
        with make_client(_replay([{"URI": "x/y"}], seen)) as client:
            repos = client.repos.list(RepoListOptions(query="y"))
        assert [r.uri for r in repos] == ["x/y"]
        assert seen[0].url.path == "/repos"
        assert seen[0].url.params["Query"] == "y"


class TestPeople:
    @pytest.mark.parametrize(
        ("text", "raw_path"),
        [("alice", b"/people/alice"), ("a@a.com", b"/people/a@a.com"), ("$3", b"/people/$3")],
    )
    def test_get_addresses_person_by_path_component(
        self, make_client: Callable[..., Client], text: str, raw_path: bytes
    ) -> None:
        seen: list[httpx.Request] = []
        with make_client(_replay({"Login": "alice", "UID": 3}, seen)) as client:
            person = client.people.get(parse_person_spec(text))
        assert person == Person(login="alice", uid=3)
        assert seen[0].url.raw_path == raw_path


class TestUnits:
    def test_get(self, make_client: Callable[..., Client]) -> None:
        seen: list[httpx.Request] = []
        payload = {"Repo": "github.com/a/b", "UnitType": "GoPackage", "Unit": "github.com/a/b/cmd"}
        spec = UnitSpec(repo=RepoSpec(uri="github.com/a/b"), unit_type="GoPackage", unit="github.com/a/b/cmd")
        with make_client(_replay(payload, seen)) as client:
            unit = client.units.get(spec)
        assert unit is not None and unit.spec() == spec
        assert seen[0].url.path == "/repos/github.com/a/b/.units/GoPackage/github.com/a/b/cmd"

    def test_list(self, make_client: Callable[..., Client]) -> None:
        seen: list[httpx.Request] = []
        with make_client(_replay([], seen)) as client:
            units = client.units.list(UnitListOptions(unit_type="GoPackage"))
        assert units == []
        assert seen[0].url.path == "/.units"
        assert seen[0].url.params["UnitType"] == "GoPackage"


class TestDryRunClient:
    def test_services_return_empty_results(self, profile: Profile, quiet_output: object) -> None:
        with Client(profile, dry_run=True) as client:
            assert client.repos.get(RepoSpec(uri="a/b")) is None
            assert client.repos.list() == []


class TestServiceDoubles:
    """Consumers depend on the interfaces, so mocks can stand in for HTTP."""

    def test_client_services_are_replaceable(self, profile: Profile) -> None:
        client = Client(profile)
        pulls = MagicMock(spec=PullRequestsService)
        client.pull_requests = pulls
        client.pull_requests.delete_comment("pull", 1)
        pulls.delete_comment.assert_called_once_with("pull", 1)

    @pytest.mark.parametrize(
        "interface", [PeopleService, PullRequestsService, ReposService, UnitsService]
    )
    def test_interfaces_are_abstract(self, interface: type) -> None:
        with pytest.raises(TypeError):
            interface()

    def test_mock_rejects_unknown_methods(self) -> None:
        people = MagicMock(spec=PeopleService)
        people.get.return_value = Person(login="a")
        assert people.get(PersonSpec(login="a")).login == "a"
        with pytest.raises(AttributeError):
            people.list  # noqa: B018
