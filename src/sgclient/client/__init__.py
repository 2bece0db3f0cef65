"""HTTP transport for sgclient.

:class:`SyncClient` wraps :mod:`httpx` with auth injection, dry-run mode,
retry with exponential backoff, and typed error mapping.  Resource
services in :mod:`sgclient.services` send every request through it.

Example::

    from sgclient.client import SyncClient

    with SyncClient(profile, auth_manager=manager) as client:
        resp = client.request("GET", "/repos/github.com/a/b")
"""

from sgclient.client.sync_client import SyncClient

__all__ = ["SyncClient"]
