"""Tests for sgclient.output -- stdout/stderr separation and formats."""

from __future__ import annotations

import json

import pytest

from sgclient.models import Repo
from sgclient.output import OutputFormat, OutputManager, get_output, reset_output, to_data
from sgclient.specs import PersonSpec


class TestToData:
    def test_model_uses_aliases_and_drops_none(self) -> None:
        repo = Repo(uri="github.com/a/b", name="b")
        data = to_data(repo)
        assert data["URI"] == "github.com/a/b"
        assert "HTMLURL" not in data

    def test_list_and_plain_values(self) -> None:
        assert to_data([PersonSpec(login="a")]) == [{"login": "a"}]
        assert to_data("x") == "x"


class TestOutputManager:
    def test_auto_is_plain_when_not_a_tty(self) -> None:
        assert OutputManager().format == OutputFormat.PLAIN

    def test_no_color_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NO_COLOR", "")
        assert OutputManager(format=OutputFormat.RICH)._no_color

    def test_json_goes_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        OutputManager(format=OutputFormat.JSON).format_response(PersonSpec(uid=7))
        captured = capsys.readouterr()
        assert json.loads(captured.out) == {"uid": 7}
        assert captured.err == ""

    def test_plain_dict(self, capsys: pytest.CaptureFixture[str]) -> None:
        OutputManager(format=OutputFormat.PLAIN).format_response({"login": "a"})
        assert capsys.readouterr().out == "login\ta\n"

    def test_table_formats(self, capsys: pytest.CaptureFixture[str]) -> None:
        OutputManager(format=OutputFormat.JSON).print_table(["A", "B"], [["1", "2"]])
        assert json.loads(capsys.readouterr().out) == [{"A": "1", "B": "2"}]

        OutputManager(format=OutputFormat.PLAIN).print_table(["A", "B"], [["1", "2"]])
        assert capsys.readouterr().out == "A\tB\n1\t2\n"

    def test_diagnostics_go_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        out = OutputManager(no_color=True)
        out.info("hello")
        out.error("boom")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "hello" in captured.err
        assert "Error: boom" in captured.err

    def test_quiet_keeps_warnings_and_errors(self, capsys: pytest.CaptureFixture[str]) -> None:
        out = OutputManager(no_color=True, quiet=True)
        out.info("hidden")
        out.success("hidden")
        out.warning("careful")
        out.error("bad")
        err = capsys.readouterr().err
        assert "hidden" not in err
        assert "Warning: careful" in err
        assert "Error: bad" in err

    def test_debug_only_when_verbose(self, capsys: pytest.CaptureFixture[str]) -> None:
        OutputManager(no_color=True).debug("x")
        assert capsys.readouterr().err == ""
        OutputManager(no_color=True, verbose=True).debug("x")
        assert "[debug] x" in capsys.readouterr().err


def test_global_instance_is_lazy() -> None:
    reset_output()
    first = get_output()
    assert get_output() is first
