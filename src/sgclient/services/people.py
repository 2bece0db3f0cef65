"""People endpoints.

A person is addressed by the compact form of its
:class:`~sgclient.specs.PersonSpec` (``alice``, ``a@a.com``, ``$42``),
which becomes a single URL path component.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from sgclient.models import Person
from sgclient.router import Route
from sgclient.services.base import HTTPService, decode
from sgclient.specs import PersonSpec


class PeopleService(ABC):
    """Communicates with the people endpoints of the API."""

    @abstractmethod
    def get(self, person: PersonSpec) -> Optional[Person]:
        """Fetch a person by login, email, or UID."""


class HTTPPeopleService(HTTPService, PeopleService):
    def get(self, person: PersonSpec) -> Optional[Person]:
        return decode(self._call("GET", Route.PERSON, person.route_vars()), Person)
