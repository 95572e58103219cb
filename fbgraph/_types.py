"""Dataclass models mirroring Graph API response objects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Reference:
    """A bare pointer to another Graph object (friend, page, ...)."""

    id: str
    name: str | None

    @classmethod
    def from_dict(cls, data: dict) -> Reference:
        return cls(id=str(data["id"]), name=data.get("name"))


@dataclass
class FacebookProfile:
    """Basic profile fields of a user."""

    id: str
    name: str | None
    first_name: str | None
    last_name: str | None
    username: str | None
    email: str | None
    link: str | None
    locale: str | None
    gender: str | None

    @classmethod
    def from_dict(cls, data: dict) -> FacebookProfile:
        return cls(
            id=str(data["id"]),
            name=data.get("name"),
            first_name=data.get("first_name"),
            last_name=data.get("last_name"),
            username=data.get("username"),
            email=data.get("email"),
            link=data.get("link"),
            locale=data.get("locale"),
            gender=data.get("gender"),
        )


@dataclass
class FriendList:
    """A named list of friends owned by a user."""

    id: str
    name: str | None
    list_type: str | None

    @classmethod
    def from_dict(cls, data: dict) -> FriendList:
        return cls(
            id=str(data["id"]),
            name=data.get("name"),
            list_type=data.get("list_type"),
        )
