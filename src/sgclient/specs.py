"""Spec value objects: compact identifiers for API resources.

A *spec* identifies a resource without carrying any of its data. Specs
come in two shapes:

* **Textual** -- :class:`PersonSpec` parses from and formats to a compact
  string (``alice``, ``alice@example.com``, ``$42``), used as a CLI
  argument and as a single URL path component.
* **Route variables** -- every spec projects onto a string-keyed mapping
  (``{"RepoSpec": "github.com/a/b", "Pull": "5"}``) that the
  :mod:`sgclient.router` substitutes into path templates.  The matching
  ``unmarshal_*`` functions invert that projection.

Composite specs nest: a :class:`PullRequestCommentSpec` holds a
:class:`PullRequestSpec`, which holds a :class:`RepoSpec`.  The parent's
route variables always extend the child's, so one mapping can address
every level of the hierarchy.

All specs are frozen Pydantic models: immutable, hashable, and compared
by value.
"""

from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from sgclient.exceptions import InvalidFormatError

RouteVars = dict[str, str]

_UID_PREFIX = "$"
_CANONICAL_UID = re.compile(r"[1-9][0-9]*")
_ROUTE_INT = re.compile(r"[+-]?[0-9]+")


def _route_int(route_vars: dict[str, str], key: str) -> int:
    """Read the decimal integer stored under *key* in *route_vars*.

    An optional leading sign is allowed; nothing else but ASCII digits.
    """
    value = route_vars.get(key)
    if value is None:
        raise InvalidFormatError(f"Missing route variable '{key}'")
    if not _ROUTE_INT.fullmatch(value):
        raise InvalidFormatError(
            f"Route variable '{key}' must be an integer, got {value!r}"
        )
    return int(value)


# --- Repository ---


class RepoSpec(BaseModel):
    """Identifies a repository by its URI (e.g. ``github.com/a/b``)."""

    model_config = ConfigDict(frozen=True)

    uri: str

    def route_vars(self) -> RouteVars:
        return {"RepoSpec": self.uri}

    def __str__(self) -> str:
        return self.uri


def unmarshal_repo_spec(route_vars: dict[str, str]) -> RepoSpec:
    """Build a :class:`RepoSpec` from route variables.

    Raises:
        InvalidFormatError: If ``RepoSpec`` is missing or empty.
    """
    uri = route_vars.get("RepoSpec")
    if not uri:
        raise InvalidFormatError("Missing route variable 'RepoSpec'")
    return RepoSpec(uri=uri)


# --- Person ---


class PersonSpec(BaseModel):
    """Identifies a person by exactly one of login, email, or numeric UID.

    The three fields are mutually exclusive.  Construction fails unless
    exactly one is set, and it also rejects values that would parse back
    as a different kind: a login starting with ``$`` or containing ``@``,
    an email without ``@``, a UID below 1.  Every constructible spec
    therefore survives ``parse_person_spec(spec.path_component())``.

    Example::

        PersonSpec(login="alice").path_component()      # "alice"
        PersonSpec(email="a@a.com").path_component()    # "a@a.com"
        PersonSpec(uid=1).path_component()              # "$1"
    """

    model_config = ConfigDict(frozen=True)

    login: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = Field(default=None, min_length=1)
    uid: Optional[int] = Field(default=None, gt=0)

    @model_validator(mode="after")
    def _exactly_one(self) -> PersonSpec:
        populated = [
            name for name in ("login", "email", "uid") if getattr(self, name) is not None
        ]
        if len(populated) != 1:
            raise ValueError(
                "PersonSpec requires exactly one of login, email, uid "
                f"(got {', '.join(populated) or 'none'})"
            )
        if self.login is not None and (
            self.login.startswith(_UID_PREFIX) or "@" in self.login
        ):
            raise ValueError(f"login {self.login!r} would be read back as a UID or email")
        if self.email is not None and "@" not in self.email:
            raise ValueError(f"email {self.email!r} must contain '@'")
        return self

    def path_component(self) -> str:
        """Format the spec in its compact textual form.

        This is the exact inverse of :func:`parse_person_spec`.
        """
        if self.uid is not None:
            return f"{_UID_PREFIX}{self.uid}"
        if self.email is not None:
            return self.email
        assert self.login is not None
        return self.login

    def route_vars(self) -> RouteVars:
        return {"PersonSpec": self.path_component()}

    def __str__(self) -> str:
        return self.path_component()


def parse_person_spec(text: str) -> PersonSpec:
    """Parse the compact textual form of a :class:`PersonSpec`.

    The grammar is positional and checked in order:

    1. ``$<digits>`` -- a numeric UID.  Only canonical positive decimal
       is accepted (no sign, no leading zeros, no ``$0``) so that formatting the result
       reproduces *text* exactly.
    2. Anything containing ``@`` -- an email address, taken verbatim.
    3. Anything else -- a login, taken verbatim.

    There is no escaping: a login containing ``@`` or starting with ``$``
    cannot be expressed.

    Args:
        text: The spec string, e.g. ``"alice"``, ``"a@a.com"``, ``"$1"``.

    Returns:
        The parsed spec.

    Raises:
        InvalidFormatError: If *text* is empty or starts with ``$`` but the
            remainder is not a positive integer.
    """
    if text.startswith(_UID_PREFIX):
        digits = text[len(_UID_PREFIX):]
        if not _CANONICAL_UID.fullmatch(digits):
            raise InvalidFormatError(
                f"Invalid person spec {text!r}: expected '$' followed by a "
                "positive integer"
            )
        return PersonSpec(uid=int(digits))
    if not text:
        raise InvalidFormatError("Invalid person spec: empty string")
    if "@" in text:
        return PersonSpec(email=text)
    return PersonSpec(login=text)


def unmarshal_person_spec(route_vars: dict[str, str]) -> PersonSpec:
    """Build a :class:`PersonSpec` from the ``PersonSpec`` route variable."""
    text = route_vars.get("PersonSpec")
    if text is None:
        raise InvalidFormatError("Missing route variable 'PersonSpec'")
    return parse_person_spec(text)


# --- Issues and pull requests ---


class IssueSpec(BaseModel):
    """Identifies an issue by repository and number."""

    model_config = ConfigDict(frozen=True)

    repo: RepoSpec
    number: int

    def route_vars(self) -> RouteVars:
        rv = self.repo.route_vars()
        rv["Issue"] = str(self.number)
        return rv


def unmarshal_issue_spec(route_vars: dict[str, str]) -> IssueSpec:
    repo = unmarshal_repo_spec(route_vars)
    return IssueSpec(repo=repo, number=_route_int(route_vars, "Issue"))


class PullRequestSpec(BaseModel):
    """Identifies a pull request by its base repository and sequence number."""

    model_config = ConfigDict(frozen=True)

    repo: RepoSpec
    number: int

    def route_vars(self) -> RouteVars:
        """Return the route variables for generating pull request URLs."""
        rv = self.repo.route_vars()
        rv["Pull"] = str(self.number)
        return rv

    def issue_spec(self) -> IssueSpec:
        """Return the spec of the issue sharing this pull request's repo and number."""
        return IssueSpec(repo=self.repo, number=self.number)


def unmarshal_pull_request_spec(route_vars: dict[str, str]) -> PullRequestSpec:
    """Build a :class:`PullRequestSpec` from route variables.

    Accepts any mapping produced by :meth:`PullRequestSpec.route_vars`
    (or a superset of it).  Errors from the repository unmarshalling are
    raised unchanged.

    Raises:
        InvalidFormatError: If ``Pull`` is missing or not an integer.
    """
    repo = unmarshal_repo_spec(route_vars)
    return PullRequestSpec(repo=repo, number=_route_int(route_vars, "Pull"))


class PullRequestCommentSpec(BaseModel):
    """Identifies a comment on a pull request."""

    model_config = ConfigDict(frozen=True)

    pull: PullRequestSpec
    comment: int

    def route_vars(self) -> RouteVars:
        rv = self.pull.route_vars()
        rv["CommentID"] = str(self.comment)
        return rv


def unmarshal_pull_request_comment_spec(
    route_vars: dict[str, str],
) -> PullRequestCommentSpec:
    """Build a :class:`PullRequestCommentSpec` from route variables.

    Raises:
        InvalidFormatError: If ``Pull`` or ``CommentID`` is missing or not
            an integer.
    """
    pull = unmarshal_pull_request_spec(route_vars)
    return PullRequestCommentSpec(
        pull=pull, comment=_route_int(route_vars, "CommentID")
    )


# --- Source units ---


class UnitSpec(BaseModel):
    """Identifies a source unit (e.g. a Go package) within a repository."""

    model_config = ConfigDict(frozen=True)

    repo: RepoSpec
    unit_type: str
    unit: str

    def route_vars(self) -> RouteVars:
        rv = self.repo.route_vars()
        rv["UnitType"] = self.unit_type
        rv["Unit"] = self.unit
        return rv


def unmarshal_unit_spec(route_vars: dict[str, str]) -> UnitSpec:
    repo = unmarshal_repo_spec(route_vars)
    unit_type = route_vars.get("UnitType")
    unit = route_vars.get("Unit")
    if not unit_type or not unit:
        raise InvalidFormatError("Missing route variable 'UnitType' or 'Unit'")
    return UnitSpec(repo=repo, unit_type=unit_type, unit=unit)
