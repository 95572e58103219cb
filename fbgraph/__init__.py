"""
fbgraph - Python client for the Facebook Graph API.

Graph API failures are translated into typed exceptions.
"""

__version__ = "0.1.0"

from ._client import FacebookGraph
from ._errors import classify, extract_error_details, handle_error, has_error
from ._exceptions import (
    ExpiredAuthorizationError,
    FacebookError,
    InsufficientPermissionError,
    InvalidAuthorizationError,
    NotAFriendError,
    NotAuthorizedError,
    ResourceNotFoundError,
    ResourceOwnershipError,
    UncategorizedApiError,
)
from ._types import FacebookProfile, FriendList, Reference

__all__ = [
    # Main client
    "FacebookGraph",
    # Exceptions
    "ExpiredAuthorizationError",
    "FacebookError",
    "InsufficientPermissionError",
    "InvalidAuthorizationError",
    "NotAFriendError",
    "NotAuthorizedError",
    "ResourceNotFoundError",
    "ResourceOwnershipError",
    "UncategorizedApiError",
    # Models
    "FacebookProfile",
    "FriendList",
    "Reference",
    # Error translation
    "classify",
    "extract_error_details",
    "handle_error",
    "has_error",
]
