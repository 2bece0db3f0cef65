"""The interface every authentication strategy implements.

A strategy turns the ``auth`` section of a profile into the headers and
query parameters that :class:`~sgclient.client.SyncClient` adds to each
request.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from sgclient.models import AuthConfig


@dataclass
class AuthResult:
    """Credentials ready to attach to a request."""

    headers: dict[str, str] = field(default_factory=dict)
    params: dict[str, str] = field(default_factory=dict)


class AuthPlugin(ABC):
    """One way of authenticating, selected by :attr:`auth_type`."""

    @property
    @abstractmethod
    def auth_type(self) -> str:
        """The ``auth.type`` value this plugin handles, e.g. ``"bearer"``."""

    @abstractmethod
    def authenticate(self, auth_config: AuthConfig) -> AuthResult:
        """Resolve the credential named by ``auth_config.source``.

        Raises:
            AuthError: The credential is malformed.
            ConfigError: The credential source cannot be read.
        """

    def validate_config(self, auth_config: AuthConfig) -> list[str]:
        """Problems with *auth_config*, as messages; empty when it is usable."""
        if not auth_config.source:
            return [f"{self.auth_type} auth requires a credential 'source'"]
        return []
