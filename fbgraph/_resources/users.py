"""Users resource — profile and granted permissions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .._types import FacebookProfile

if TYPE_CHECKING:
    from .._http import HTTPClient


class Users:
    """client.users — read user profiles."""

    def __init__(self, http: HTTPClient):
        self._http = http

    def get_profile(self, user_id: str = "me") -> FacebookProfile:
        resp = self._http.request("GET", f"/{user_id}")
        return FacebookProfile.from_dict(resp.json())

    def get_permissions(self, user_id: str = "me") -> list[str]:
        """Names of the permissions the user has granted to the app."""
        resp = self._http.request("GET", f"/{user_id}/permissions")
        return [
            p["permission"]
            for p in resp.json().get("data", [])
            if p.get("status") == "granted"
        ]
