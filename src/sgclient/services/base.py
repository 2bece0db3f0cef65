"""Shared plumbing for the HTTP-backed services.

Every call follows the same path: route variables from a spec, a URL
from :func:`~sgclient.router.url_for`, a request through
:class:`~sgclient.client.SyncClient`, and a JSON body decoded into a
resource model.  Errors from any step propagate to the caller unchanged.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter

from sgclient.client.sync_client import SyncClient
from sgclient.models import ListOptions
from sgclient.router import Route, url_for

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class HTTPService:
    """Base class for services that talk to the API through a :class:`SyncClient`."""

    def __init__(self, http: SyncClient) -> None:
        self._http = http

    def _call(
        self,
        method: str,
        route: Route,
        route_vars: Optional[dict[str, str]] = None,
        opt: Optional[ListOptions] = None,
        body: Optional[BaseModel] = None,
    ) -> httpx.Response:
        path = url_for(route, route_vars)
        params = opt.to_params() if opt is not None else None
        json_body = (
            body.model_dump(mode="json", by_alias=True, exclude_none=True)
            if body is not None
            else None
        )
        logger.debug("%s %s (%s)", method, path, route.value)
        return self._http.request(method, path, params=params, json_body=json_body)


def decode(response: httpx.Response, model: type[M]) -> Optional[M]:
    """Decode a JSON object body into *model*; ``None`` for an empty body."""
    if not response.content:
        return None
    return model.model_validate(response.json())


def decode_list(response: httpx.Response, model: type[M]) -> list[M]:
    """Decode a JSON array body into a list of *model*; empty for an empty body."""
    if not response.content:
        return []
    data: Any = response.json()
    return TypeAdapter(list[model]).validate_python(data)  # type: ignore[valid-type]
