"""Detect error responses from the Graph API and raise typed exceptions.

The Graph API's ``type`` field is almost always ``OAuthException`` and its
status codes are inconsistent, so apart from 401 the only usable signal is
the human-readable ``message``. Rules are evaluated in order and the first
match wins.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, NoReturn

import requests

from ._exceptions import (
    ExpiredAuthorizationError,
    FacebookError,
    InsufficientPermissionError,
    InvalidAuthorizationError,
    NotAFriendError,
    ResourceNotFoundError,
    ResourceOwnershipError,
    UncategorizedApiError,
)

logger = logging.getLogger(__name__)

ERROR_ENVELOPE_PREFIX = '{"error":'
NO_DETAILS_MESSAGE = "No error details from Facebook"

_INVALIDATED_SESSION_MESSAGES = (
    "The session has been invalidated because the user has changed the password.",
    "Error validating access token: The session is invalid because the user logged out.",
    "Error validating access token: Session does not match current stored session. "
    "This may be because the user changed the password since the time the session "
    "was created or Facebook has changed the session for security reasons.",
)


def _required_permission(message: str) -> str | None:
    # "(#200) Requires extended permission: publish_actions" -> "publish_actions"
    parts = message.split(": ")
    return parts[1] if len(parts) > 1 else None


def _insufficient_permission(message: str, **context: Any) -> FacebookError:
    return InsufficientPermissionError(
        message, permission=_required_permission(message), **context
    )


# (match, text, factory); match is "contains" or "equals".
_MESSAGE_RULES: list[tuple[str, str, Callable[..., FacebookError]]] = [
    ("contains", "Requires extended permission", _insufficient_permission),
    ("equals", "The member must be a friend of the current user.", NotAFriendError),
    ("contains", "Unknown path components", ResourceNotFoundError),
    ("equals", "User must be an owner of the friendlist", ResourceOwnershipError),
    ("contains", "Some of the aliases you requested do not exist", ResourceNotFoundError),
    ("contains", "Session has expired", ExpiredAuthorizationError),
    *(("equals", text, InvalidAuthorizationError) for text in _INVALIDATED_SESSION_MESSAGES),
    ("contains", "has not authorized application", InvalidAuthorizationError),
]


def _matches(match: str, text: str, message: str) -> bool:
    if match == "equals":
        return message == text
    return text in message


def classify(status_code: int | None, message: str, **context: Any) -> FacebookError | None:
    """Map a status code and error message to a typed exception.

    Returns the exception instance (not raised) or ``None`` when no rule
    applies. Extra keyword arguments are passed through to the exception.
    """
    # 401 is the only status code the Graph API uses consistently.
    if status_code == 401:
        return InvalidAuthorizationError(
            message or "Invalid access token", status_code=status_code, **context
        )

    for match, text, factory in _MESSAGE_RULES:
        if _matches(match, text, message):
            return factory(message, status_code=status_code, **context)
    return None


def has_error(resp: requests.Response) -> bool:
    """True for HTTP error statuses and for bodies that open with an error envelope."""
    if not resp.ok:
        return True
    first_line = resp.text.split("\n", 1)[0] if resp.text else ""
    return first_line.startswith(ERROR_ENVELOPE_PREFIX)


def extract_error_details(resp: requests.Response) -> dict[str, Any] | None:
    """Return the ``error`` object from the response body, or None if there isn't one."""
    try:
        body = resp.json()
    except ValueError:
        logger.debug("Failed to parse error body: %s", resp.text[:200] if resp.text else "empty")
        return None
    if not isinstance(body, dict):
        return None
    error = body.get("error")
    if not isinstance(error, dict):
        return None
    return error


def _str_or_none(value: Any) -> str | None:
    return None if value is None else str(value)


def handle_error(resp: requests.Response, *, method: str = "", path: str = "") -> NoReturn:
    """Raise the exception that best describes an error response."""
    details = extract_error_details(resp)
    context: dict[str, Any] = {"method": method, "path": path}
    message = ""
    if details is not None:
        message = _str_or_none(details.get("message")) or ""
        context.update(
            error_type=_str_or_none(details.get("type")),
            code=details.get("code"),
            error_subcode=details.get("error_subcode"),
            fbtrace_id=_str_or_none(details.get("fbtrace_id")),
        )

    exc = classify(resp.status_code, message, **context)
    if exc is not None:
        logger.debug("%s %s failed: %s", method, path, type(exc).__name__)
        resp.close()
        raise exc

    http_error: requests.HTTPError | None = None
    try:
        resp.raise_for_status()
    except requests.HTTPError as e:
        http_error = e
    resp.close()
    raise UncategorizedApiError(
        message or NO_DETAILS_MESSAGE,
        http_error=http_error,
        status_code=resp.status_code,
        **context,
    ) from http_error
