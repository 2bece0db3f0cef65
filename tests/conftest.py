"""Shared test fixtures for sgclient.

Provides isolated config environments, output state management, a
profile for HTTP tests, and helpers that route client traffic through an
:class:`httpx.MockTransport`.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

from sgclient.api import Client
from sgclient.models import Profile, RequestConfig
from sgclient.output import OutputManager, reset_output, set_output

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The manager caches sys.stdout/sys.stderr at creation time; CliRunner
    swaps those streams, so a stale manager would write to closed files.
    """
    yield
    reset_output()


@pytest.fixture
def quiet_output() -> OutputManager:
    output = OutputManager(no_color=True, quiet=True)
    set_output(output)
    return output


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate configuration to a temporary directory.

    Points the XDG directories at ``tmp_path``, clears ``SGCLIENT_*``
    variables, and changes into ``tmp_path`` so project config is not
    picked up from the repository.
    """
    monkeypatch.setattr("sgclient.config._is_xdg_platform", lambda: True)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    for var in ["SGCLIENT_PROFILE", "SGCLIENT_BASE_URL"]:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def profile() -> Profile:
    """A profile with no retries so error tests do not sleep."""
    return Profile(
        name="test",
        base_url="https://api.example.com",
        request=RequestConfig(timeout=5, max_retries=0),
    )


@pytest.fixture
def make_client(profile: Profile) -> Callable[[Handler], Client]:
    """Factory for a :class:`Client` whose requests go to *handler*."""

    def _make(handler: Handler) -> Client:
        return Client(profile, transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def cli_runner():
    from typer.testing import CliRunner

    return CliRunner()
