"""The HTTP transport shared by every resource service.

:class:`SyncClient` is a thin layer over :class:`httpx.Client` that adds
what every API call needs: credentials from the profile, a bounded retry
loop for flaky servers, a dry-run switch, and translation of error
statuses into :mod:`sgclient.exceptions`.
"""

from __future__ import annotations

import json
import time
from typing import Any, Optional

import httpx

from sgclient import __version__
from sgclient.auth.base import AuthResult
from sgclient.auth.manager import AuthManager
from sgclient.exceptions import AuthError, ConnectionError_, NotFoundError, ServerError
from sgclient.models import Profile
from sgclient.output import get_output

USER_AGENT = f"sgclient/{__version__}"

_DEFAULT_HEADERS = {"Accept": "application/json", "User-Agent": USER_AGENT}


class SyncClient:
    """Blocking API client bound to one :class:`~sgclient.models.Profile`.

    The underlying connection pool exists only inside a ``with`` block::

        with SyncClient(profile, auth_manager=create_default_manager()) as http:
            http.request("GET", "/repos/github.com/a/b")

    Args:
        profile: Supplies the base URL, the auth section, and the timeout,
            SSL and retry settings.
        auth_manager: Resolves the profile's credentials on entry.  Without
            one, requests are anonymous.
        dry_run: Print each request to stderr and answer it with an empty
            204 instead of sending it.
        transport: Replaces httpx's network transport (tests pass an
            :class:`httpx.MockTransport`).
    """

    def __init__(
        self,
        profile: Profile,
        auth_manager: Optional[AuthManager] = None,
        dry_run: bool = False,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._profile = profile
        self._auth_manager = auth_manager
        self._dry_run = dry_run
        self._transport = transport
        self._auth_result: Optional[AuthResult] = None
        self._client: Optional[httpx.Client] = None

    @property
    def profile(self) -> Profile:
        return self._profile

    @property
    def dry_run(self) -> bool:
        return self._dry_run

    def __enter__(self) -> SyncClient:
        settings = self._profile.request
        self._client = httpx.Client(
            base_url=self._profile.base_url,
            timeout=settings.timeout,
            verify=settings.verify_ssl,
            follow_redirects=True,
            transport=self._transport,
        )
        if self._auth_manager is not None and self._profile.auth is not None:
            self._auth_result = self._auth_manager.authenticate(self._profile)
        return self

    def __exit__(self, *args: object) -> None:
        if self._client is not None:
            self._client.close()
        self._client = None

    def request(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
        json_body: Optional[Any] = None,
    ) -> httpx.Response:
        """Send *method* *path* and return the successful response.

        *path* is relative to the profile's base URL.  Explicit *headers*
        and *params* take precedence over injected credentials.

        Raises:
            AuthError: The server answered 401 or 403.
            NotFoundError: The server answered 404.
            ServerError: Any other 4xx, or a 5xx that survived the retries.
            ConnectionError_: The server could not be reached.
        """
        merged_headers, merged_params = self._inject_auth(
            {**_DEFAULT_HEADERS, **(headers or {})}, dict(params or {})
        )
        if self._dry_run:
            return self._print_dry_run(method, path, merged_headers, merged_params, json_body)

        response = self._execute_with_retry(method, path, merged_headers, merged_params, json_body)
        self._map_response_error(response)
        return response

    def _inject_auth(
        self,
        headers: dict[str, str],
        params: dict[str, Any],
    ) -> tuple[dict[str, str], dict[str, Any]]:
        """Merge auth credentials into *headers* and *params*; caller values win."""
        if self._auth_result is None:
            return headers, params
        return (
            {**self._auth_result.headers, **headers},
            {**self._auth_result.params, **params},
        )

    def _execute_with_retry(
        self,
        method: str,
        path: str,
        headers: dict[str, str],
        params: dict[str, Any],
        json_body: Any,
    ) -> httpx.Response:
        """Send the request, retrying 5xx responses and network errors.

        Attempt *n* (0-based) that fails waits ``2 ** n`` seconds before
        the next one.  The last 5xx response is returned as is.
        """
        assert self._client is not None, "Client not initialised -- use as context manager"

        output = get_output()
        retries = self._profile.request.max_retries
        attempt = 0
        while True:
            output.debug(f"{method} {path}")
            try:
                response = self._client.request(
                    method, path, headers=headers, params=params, json=json_body,
                )
            except httpx.TransportError as exc:
                if attempt >= retries:
                    raise ConnectionError_(
                        f"Connection failed after {attempt + 1} attempts: {exc}"
                    ) from exc
                reason = f"Connection error: {exc}"
            else:
                if response.status_code < 500 or attempt >= retries:
                    return response
                reason = f"Server error {response.status_code}"

            delay = 2 ** attempt
            attempt += 1
            output.debug(f"{reason}, retrying in {delay}s (attempt {attempt}/{retries})")
            time.sleep(delay)

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            detail = response.json()
        except ValueError:
            return response.text[:200]
        if isinstance(detail, dict):
            return str(detail.get("message") or detail.get("error") or detail.get("detail") or "")
        return str(detail)

    def _map_response_error(self, response: httpx.Response) -> None:
        """Raise the :class:`SgclientError` matching an error status."""
        status = response.status_code
        if status < 400:
            return
        detail = self._error_message(response)
        message = f"HTTP {status}: {detail}" if detail else f"HTTP {status}"
        if status in (401, 403):
            raise AuthError(message)
        if status == 404:
            raise NotFoundError(message)
        raise ServerError(message)

    def _print_dry_run(
        self,
        method: str,
        path: str,
        headers: dict[str, str],
        params: dict[str, Any],
        json_body: Any,
    ) -> httpx.Response:
        """Describe the request on stderr and answer it with an empty 204."""
        url = f"{self._profile.base_url}{path}"
        lines = [f"[dry-run] {method} {url}"]
        for key, value in headers.items():
            if key.lower() == "authorization":
                scheme, _, _ = value.partition(" ")
                value = f"{scheme} ***"
            lines.append(f"  Header: {key}: {value}")
        lines.extend(f"  Param: {key}={value}" for key, value in params.items())
        if json_body is not None:
            lines.append(f"  Body (JSON): {json.dumps(json_body, indent=2, default=str)}")

        output = get_output()
        for line in lines:
            output.info(line)
        return httpx.Response(204, request=httpx.Request(method, url))
