"""Typer application and CLI entry point for sgclient.

The root callback turns the global options into an
:class:`~sgclient.output.OutputManager` and a ``ctx.obj`` dict that the
sub-commands read.  :func:`main` is the console-script entry point; it
maps :class:`~sgclient.exceptions.SgclientError` to its exit code and
writes a crash log for anything else.
"""

from __future__ import annotations

import logging
import signal
import sys
import traceback
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

import typer

from sgclient import __version__
from sgclient.commands.config import config_app
from sgclient.commands.init import init_command
from sgclient.commands.people import people_app
from sgclient.commands.pulls import pulls_app
from sgclient.commands.repos import repos_app
from sgclient.commands.units import units_app
from sgclient.exit_codes import EXIT_GENERIC_FAILURE

app = typer.Typer(
    name="sgclient",
    help="Query repositories, pull requests, people, and source units.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command("init")(init_command)
app.add_typer(people_app, name="people", help="Parse person specs and look up people.")
app.add_typer(repos_app, name="repos", help="Repositories.")
app.add_typer(pulls_app, name="pulls", help="Pull requests and their comments.")
app.add_typer(units_app, name="units", help="Source units.")
app.add_typer(config_app, name="config", help="Configuration management.")


def _show_version(value: bool) -> None:
    if value:
        typer.echo(f"sgclient {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", callback=_show_version, is_eager=True,
        help="Print the version and exit.",
    ),
    profile: Optional[str] = typer.Option(
        None, "--profile", "-p", help="Connection profile to use."
    ),
    base_url: Optional[str] = typer.Option(
        None, "--base-url", help="API root URL, overriding the profile."
    ),
    json_output: bool = typer.Option(False, "--json", help="Emit JSON."),
    plain_output: bool = typer.Option(False, "--plain", help="Emit tab-separated text."),
    no_color: bool = typer.Option(False, "--no-color", help="Turn off colour."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print data, warnings and errors."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Trace requests on stderr."),
    dry_run: bool = typer.Option(
        False, "--dry-run", "-n", help="Show requests without sending them."
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Do not ask for confirmation."),
) -> None:
    """Apply the global options before any sub-command runs."""
    from sgclient.output import OutputFormat, OutputManager, set_output

    if json_output:
        fmt = OutputFormat.JSON
    elif plain_output:
        fmt = OutputFormat.PLAIN
    else:
        fmt = OutputFormat.AUTO
    set_output(OutputManager(format=fmt, no_color=no_color, quiet=quiet, verbose=verbose))

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    ctx.ensure_object(dict)
    ctx.obj.update(
        profile=profile, base_url=base_url, dry_run=dry_run, force=force, verbose=verbose
    )


def _on_sigint(signum: int, frame: Any) -> None:
    sys.stderr.write("\nCancelled.\n")
    sys.exit(130)


def _write_crash_log(exc: Exception) -> Path:
    """Save the active traceback to ``<data dir>/logs`` and return the file."""
    from sgclient.config import get_data_dir

    log_path = get_data_dir() / "logs" / f"crash-{datetime.now():%Y%m%d-%H%M%S}.log"
    log_path.parent.mkdir(parents=True, exist_ok=True)
    log_path.write_text(f"{exc!r}\n\n{traceback.format_exc()}", encoding="utf-8")
    return log_path


def main() -> None:
    """Console-script entry point.

    Library errors that escape a command become their exit code; anything
    else is logged to a crash file and exits with status 1.
    """
    from sgclient.exceptions import SgclientError
    from sgclient.output import error

    signal.signal(signal.SIGINT, _on_sigint)
    try:
        app()
    except SgclientError as exc:
        error(str(exc))
        sys.exit(exc.exit_code)
    except KeyboardInterrupt:
        _on_sigint(signal.SIGINT, None)
    except Exception as exc:
        error(f"Unexpected error. Debug log: {_write_crash_log(exc)}")
        sys.exit(EXIT_GENERIC_FAILURE)
