"""Token-based authentication for sgclient.

- :class:`AuthPlugin` -- abstract base class for an auth strategy.
- :class:`AuthManager` -- maps auth type strings to plugin instances and
  authenticates a :class:`~sgclient.models.Profile`.
- :func:`create_default_manager` -- a manager with the built-in ``bearer``
  and ``basic`` strategies.

Typical usage::

    from sgclient.auth import create_default_manager

    manager = create_default_manager()
    auth_result = manager.authenticate(profile)
"""

from sgclient.auth.base import AuthPlugin, AuthResult
from sgclient.auth.manager import AuthManager, create_default_manager

__all__ = [
    "AuthPlugin",
    "AuthResult",
    "AuthManager",
    "create_default_manager",
]
