"""Access-token authentication.

The token is resolved from the configured ``source`` (e.g.
``env:SRC_ACCESS_TOKEN``) and sent as ``Authorization: Bearer <token>``.
"""

from __future__ import annotations

from sgclient.auth.base import AuthPlugin, AuthResult
from sgclient.config import resolve_credential
from sgclient.exceptions import AuthError
from sgclient.models import AuthConfig


class BearerAuthPlugin(AuthPlugin):
    """Authenticate with an access token in the Authorization header."""

    @property
    def auth_type(self) -> str:
        return "bearer"

    def authenticate(self, auth_config: AuthConfig) -> AuthResult:
        token = resolve_credential(auth_config.source).strip()
        if not token:
            raise AuthError(f"Empty access token (source: {auth_config.source})")
        return AuthResult(headers={"Authorization": f"Bearer {token}"})
