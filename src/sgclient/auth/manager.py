"""Dispatch from a profile's ``auth.type`` to the plugin that handles it.

:class:`~sgclient.client.SyncClient` authenticates the active profile
once, on entry, and injects the resulting
:class:`~sgclient.auth.base.AuthResult` into every request.
"""

from __future__ import annotations

from sgclient.auth.base import AuthPlugin, AuthResult
from sgclient.exceptions import AuthError
from sgclient.models import Profile


class AuthManager:
    """Holds one :class:`AuthPlugin` per auth type."""

    def __init__(self, *plugins: AuthPlugin) -> None:
        self._plugins: dict[str, AuthPlugin] = {}
        for plugin in plugins:
            self.register(plugin)

    def register(self, plugin: AuthPlugin) -> None:
        self._plugins[plugin.auth_type] = plugin

    def list_types(self) -> list[str]:
        return sorted(self._plugins)

    def get_plugin(self, auth_type: str) -> AuthPlugin:
        """Return the plugin for *auth_type*.

        Raises:
            AuthError: If no plugin handles that type.
        """
        try:
            return self._plugins[auth_type]
        except KeyError:
            available = ", ".join(self.list_types()) or "(none)"
            raise AuthError(
                f"Unsupported auth type '{auth_type}'. Available types: {available}"
            ) from None

    def authenticate(self, profile: Profile) -> AuthResult:
        """Resolve *profile*'s credentials; anonymous profiles get an empty result."""
        if profile.auth is None:
            return AuthResult()
        return self.get_plugin(profile.auth.type).authenticate(profile.auth)


def create_default_manager() -> AuthManager:
    """An :class:`AuthManager` that understands ``bearer`` and ``basic``."""
    from sgclient.auth.basic import BasicAuthPlugin
    from sgclient.auth.bearer import BearerAuthPlugin

    return AuthManager(BearerAuthPlugin(), BasicAuthPlugin())
