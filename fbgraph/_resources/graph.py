"""Graph resource — raw access to objects and connections."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from ._utils import _build_params

if TYPE_CHECKING:
    from .._http import HTTPClient


class Graph:
    """client.graph — fetch, publish and delete arbitrary Graph objects."""

    def __init__(self, http: HTTPClient):
        self._http = http

    def fetch_object(self, object_id: str, *, fields: Iterable[str] | None = None) -> dict:
        """Fetch a single object by id or alias."""
        resp = self._http.request("GET", f"/{object_id}", params=_build_params(fields))
        return resp.json()

    def fetch_connections(
        self,
        object_id: str,
        connection: str,
        *,
        fields: Iterable[str] | None = None,
    ) -> list[dict]:
        """Fetch the items of a connection such as ``me/friends``."""
        resp = self._http.request(
            "GET", f"/{object_id}/{connection}", params=_build_params(fields)
        )
        return resp.json().get("data", [])

    def publish(self, object_id: str, connection: str, data: dict[str, Any]) -> str:
        """Create an object on a connection and return the new object's id."""
        resp = self._http.request("POST", f"/{object_id}/{connection}", data=data)
        return str(resp.json()["id"])

    def delete(self, object_id: str) -> None:
        self._http.request("DELETE", f"/{object_id}")
