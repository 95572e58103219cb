"""Friends resource — friends and friend lists."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .._types import FriendList, Reference

if TYPE_CHECKING:
    from .._http import HTTPClient


class Friends:
    """client.friends — list friends and manage friend lists.

    Friend list membership changes are where the Graph API reports
    ``NotAFriendError`` and ``ResourceOwnershipError``.
    """

    def __init__(self, http: HTTPClient):
        self._http = http

    def get_friends(self, user_id: str = "me") -> list[Reference]:
        resp = self._http.request("GET", f"/{user_id}/friends")
        return [Reference.from_dict(d) for d in resp.json().get("data", [])]

    def get_friend_lists(self, user_id: str = "me") -> list[FriendList]:
        resp = self._http.request("GET", f"/{user_id}/friendlists")
        return [FriendList.from_dict(d) for d in resp.json().get("data", [])]

    def create_friend_list(self, name: str, *, user_id: str = "me") -> FriendList:
        resp = self._http.request("POST", f"/{user_id}/friendlists", data={"name": name})
        return FriendList(id=str(resp.json()["id"]), name=name, list_type=None)

    def delete_friend_list(self, list_id: str) -> None:
        self._http.request("DELETE", f"/{list_id}")

    def add_to_friend_list(self, list_id: str, friend_id: str) -> None:
        self._http.request("POST", f"/{list_id}/members/{friend_id}")

    def remove_from_friend_list(self, list_id: str, friend_id: str) -> None:
        self._http.request("DELETE", f"/{list_id}/members/{friend_id}")
