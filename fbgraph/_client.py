"""fbgraph client — entry point for the Graph API."""

from __future__ import annotations

import os

from ._exceptions import InvalidAuthorizationError
from ._http import HTTPClient
from ._resources import Friends, Graph, Users


class FacebookGraph:
    """Client for the Facebook Graph API.

    Usage:
        with FacebookGraph(access_token="EAAB...") as fb:
            profile = fb.users.get_profile()
            for friend_list in fb.friends.get_friend_lists():
                print(friend_list.name)

    Failed calls raise a subclass of ``FacebookError``.
    """

    def __init__(
        self,
        access_token: str | None = None,
        base_url: str = "https://graph.facebook.com",
        timeout: int = 30,
    ):
        access_token = access_token or os.environ.get("FACEBOOK_ACCESS_TOKEN")
        if not access_token:
            raise InvalidAuthorizationError(
                "No access token provided. Pass access_token= or set "
                "FACEBOOK_ACCESS_TOKEN env var."
            )

        self._http = HTTPClient(access_token=access_token, base_url=base_url, timeout=timeout)
        self.graph = Graph(self._http)
        self.users = Users(self._http)
        self.friends = Friends(self._http)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> FacebookGraph:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
