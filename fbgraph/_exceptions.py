"""Typed error hierarchy for failures reported by the Graph API."""

from __future__ import annotations

import requests


class FacebookError(Exception):
    """Base exception for all fbgraph errors."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error_type: str | None = None,
        code: int | None = None,
        error_subcode: int | None = None,
        fbtrace_id: str | None = None,
        method: str | None = None,
        path: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_type = error_type
        self.code = code
        self.error_subcode = error_subcode
        self.fbtrace_id = fbtrace_id
        self.method = method
        self.path = path


class NotAuthorizedError(FacebookError):
    """The access token can no longer be used."""


class InvalidAuthorizationError(NotAuthorizedError):
    """Token is invalid, revoked, or the app was deauthorized."""


class ExpiredAuthorizationError(NotAuthorizedError):
    """Token session has expired."""


class InsufficientPermissionError(FacebookError):
    """Operation requires an extended permission the token was not granted."""

    def __init__(self, message: str, permission: str | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.permission = permission


class NotAFriendError(FacebookError):
    """Target user is not a friend of the current user."""


class ResourceNotFoundError(FacebookError):
    """Requested object, connection or alias does not exist."""


class ResourceOwnershipError(FacebookError):
    """Current user does not own the resource being modified."""


class UncategorizedApiError(FacebookError):
    """Error that matched no known pattern.

    ``http_error`` holds the ``requests.HTTPError`` raised for the response
    status, or ``None`` when the HTTP layer considered the response successful
    (for example a 200 carrying an error envelope).
    """

    def __init__(
        self, message: str, http_error: requests.HTTPError | None = None, **kwargs
    ):
        super().__init__(message, **kwargs)
        self.http_error = http_error
