"""Canonical Pydantic models shared across all sgclient modules.

The models fall into three groups:

**Configuration models** -- serialised as JSON in the user's config directory:
    :class:`AuthConfig`, :class:`RequestConfig`, :class:`OutputConfig`,
    :class:`GlobalConfig`, and :class:`Profile`.

**Resource models** -- decoded from API responses:
    :class:`Repo`, :class:`Person`, :class:`PullRequest`,
    :class:`PullRequestComment`, and :class:`RepoSourceUnit`.  Unknown keys
    are kept (``extra="allow"``) so that fields added by the server
    survive a round trip.

**List options** -- encoded as query parameters:
    :class:`ListOptions` and its per-resource subclasses.

Resource fields use the server's JSON names as aliases; models accept
either the alias or the Python field name.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from sgclient.exceptions import InvalidFormatError
from sgclient.specs import PersonSpec, PullRequestSpec, RepoSpec, UnitSpec

DEFAULT_BASE_URL = "https://sourcegraph.com/api"


# --- Configuration ---


class AuthConfig(BaseModel):
    """Authentication configuration embedded in a :class:`Profile`.

    Example::

        AuthConfig(type="bearer", source="env:SRC_ACCESS_TOKEN")
    """

    model_config = ConfigDict(extra="allow")

    type: str = Field(description="Auth type: bearer, basic")
    source: str = Field(
        default="prompt",
        description="Credential source: env:VAR, file:/path, prompt",
    )


class RequestConfig(BaseModel):
    """Default HTTP request settings applied to every API call in a profile."""

    timeout: int = Field(default=30, description="Request timeout in seconds")
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")
    max_retries: int = Field(default=3, description="Max retry attempts")


class OutputConfig(BaseModel):
    """Default output format preferences stored in :class:`GlobalConfig`."""

    format: str = Field(
        default="auto", description="Output format: auto, json, plain, rich"
    )


class GlobalConfig(BaseModel):
    """User-wide configuration persisted at ``~/.config/sgclient/config.json``.

    Fields here have the lowest precedence and can be overridden by
    project config, environment variables, or CLI flags.  See
    :func:`~sgclient.config.resolve_config` for the full precedence chain.
    """

    default_profile: Optional[str] = None
    auto_select_single_profile: bool = True
    output: OutputConfig = Field(default_factory=OutputConfig)


class Profile(BaseModel):
    """Per-server profile stored as JSON under the ``profiles/`` config directory.

    Bundles the API base URL with the authentication and request settings
    needed to talk to it.  Profiles are created with ``sgclient init``.
    """

    model_config = ConfigDict(extra="allow")

    name: str
    base_url: str = Field(default=DEFAULT_BASE_URL, description="API root URL")
    auth: Optional[AuthConfig] = None
    request: RequestConfig = Field(default_factory=RequestConfig)


# --- Resources ---


class _Resource(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class User(_Resource):
    """Minimal account record embedded in pull requests and comments."""

    login: Optional[str] = None
    id: Optional[int] = None
    avatar_url: Optional[str] = None


class Repo(_Resource):
    """A repository returned by the API."""

    uri: str = Field(alias="URI")
    name: str = Field(default="", alias="Name")
    description: str = Field(default="", alias="Description")
    default_branch: str = Field(default="", alias="DefaultBranch")
    fork: bool = Field(default=False, alias="Fork")
    private: bool = Field(default=False, alias="Private")
    html_url: Optional[str] = Field(default=None, alias="HTMLURL")

    def spec(self) -> RepoSpec:
        return RepoSpec(uri=self.uri)


class Person(_Resource):
    """A person (committer, author, or user) returned by the API."""

    login: Optional[str] = Field(default=None, alias="Login")
    email: Optional[str] = Field(default=None, alias="Email")
    uid: Optional[int] = Field(default=None, alias="UID")
    full_name: str = Field(default="", alias="FullName")
    avatar_url: Optional[str] = Field(default=None, alias="AvatarURL")

    def spec(self) -> PersonSpec:
        """Return the most stable spec identifying this person.

        The UID wins over the login, which wins over the email.  A UID of
        0 is the server's "unset" value and is skipped.

        Raises:
            InvalidFormatError: If the record carries no identifier at all,
                or the chosen one cannot be written as a spec.
        """
        if self.uid:
            fields: dict[str, Any] = {"uid": self.uid}
        elif self.login:
            fields = {"login": self.login}
        elif self.email:
            fields = {"email": self.email}
        else:
            raise InvalidFormatError("Person has no login, email, or UID")
        try:
            return PersonSpec(**fields)
        except ValidationError as exc:
            raise InvalidFormatError(f"Cannot build a person spec from {fields}: {exc}") from exc


class PullRequest(_Resource):
    """A pull request returned by the API (GitHub field names)."""

    number: Optional[int] = None
    title: str = ""
    body: str = ""
    state: str = ""
    html_url: Optional[str] = None
    user: Optional[User] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    closed_at: Optional[datetime] = None
    merged_at: Optional[datetime] = None

    def spec(self) -> PullRequestSpec:
        """Return the :class:`PullRequestSpec` that identifies this pull request.

        The repository URI is recovered from ``html_url``: the scheme is
        dropped and the host plus the first two path segments are kept
        (``https://github.com/a/b/pull/5`` gives ``github.com/a/b``).
        This depends on the server's web URL layout.

        Raises:
            InvalidFormatError: If ``html_url`` or ``number`` is missing, or
                the URL has fewer than three segments.
        """
        if not self.html_url:
            raise InvalidFormatError("Pull request has no html_url")
        if self.number is None:
            raise InvalidFormatError("Pull request has no number")
        url = self.html_url.removeprefix("https://")
        parts = url.split("/")
        if len(parts) < 3 or not all(parts[:3]):
            raise InvalidFormatError(
                f"Cannot extract repository from pull request URL {self.html_url!r}"
            )
        return PullRequestSpec(repo=RepoSpec(uri="/".join(parts[:3])), number=self.number)


class PullRequestComment(_Resource):
    """A review comment on a pull request."""

    published: bool = Field(default=False, alias="Published")
    id: Optional[int] = None
    body: str = ""
    path: Optional[str] = None
    position: Optional[int] = None
    commit_id: Optional[str] = None
    user: Optional[User] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class RepoSourceUnit(_Resource):
    """A source unit (package, module, ...) built from a repository commit."""

    repo: str = Field(alias="Repo")
    commit_id: str = Field(default="", alias="CommitID")
    unit_type: str = Field(alias="UnitType")
    unit: str = Field(alias="Unit")
    data: Any = Field(default=None, alias="Data")

    def spec(self) -> UnitSpec:
        return UnitSpec(repo=RepoSpec(uri=self.repo), unit_type=self.unit_type, unit=self.unit)


# --- List options ---


class ListOptions(BaseModel):
    """Pagination options shared by every list endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    page: int = Field(default=0, alias="Page")
    per_page: int = Field(default=0, alias="PerPage")

    def to_params(self) -> dict[str, Any]:
        """Encode as query parameters, omitting empty values."""
        params: dict[str, Any] = {}
        for key, value in self.model_dump(by_alias=True).items():
            if value in (None, "", 0, False, []):
                continue
            params[key] = ",".join(value) if isinstance(value, list) else value
        return params


class PullRequestListOptions(ListOptions):
    state: str = Field(default="", alias="State", description="open, closed, or all")


class PullRequestListCommentsOptions(ListOptions):
    pass


class RepoListOptions(ListOptions):
    query: str = Field(default="", alias="Query")


class UnitListOptions(ListOptions):
    repo_uris: list[str] = Field(default_factory=list, alias="RepositoryURIs")
    unit_type: str = Field(default="", alias="UnitType")
    query: str = Field(default="", alias="Query")
