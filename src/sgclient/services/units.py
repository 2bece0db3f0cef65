"""Source unit endpoints."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from sgclient.models import RepoSourceUnit, UnitListOptions
from sgclient.router import Route
from sgclient.services.base import HTTPService, decode, decode_list
from sgclient.specs import UnitSpec


class UnitsService(ABC):
    """Communicates with the source unit endpoints of the API."""

    @abstractmethod
    def get(self, unit: UnitSpec) -> Optional[RepoSourceUnit]:
        """Fetch a source unit."""

    @abstractmethod
    def list(self, opt: Optional[UnitListOptions] = None) -> list[RepoSourceUnit]:
        """List source units across repositories."""


class HTTPUnitsService(HTTPService, UnitsService):
    def get(self, unit: UnitSpec) -> Optional[RepoSourceUnit]:
        return decode(self._call("GET", Route.UNIT, unit.route_vars()), RepoSourceUnit)

    def list(self, opt: Optional[UnitListOptions] = None) -> list[RepoSourceUnit]:
        return decode_list(self._call("GET", Route.UNITS, opt=opt), RepoSourceUnit)
