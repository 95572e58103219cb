"""Tests for the fbgraph exception hierarchy."""

import requests

from fbgraph._exceptions import (
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


class TestExceptionHierarchy:
    def test_all_inherit_from_base(self):
        for exc_cls in [
            InvalidAuthorizationError,
            ExpiredAuthorizationError,
            InsufficientPermissionError,
            NotAFriendError,
            ResourceNotFoundError,
            ResourceOwnershipError,
            UncategorizedApiError,
        ]:
            assert issubclass(exc_cls, FacebookError)

    def test_authorization_errors_share_parent(self):
        assert issubclass(InvalidAuthorizationError, NotAuthorizedError)
        assert issubclass(ExpiredAuthorizationError, NotAuthorizedError)
        assert not issubclass(ResourceNotFoundError, NotAuthorizedError)

    def test_base_carries_fields(self):
        err = FacebookError(
            "boom",
            status_code=400,
            error_type="OAuthException",
            code=190,
            error_subcode=463,
            fbtrace_id="AbCdEf",
        )
        assert str(err) == "boom"
        assert err.message == "boom"
        assert err.status_code == 400
        assert err.error_type == "OAuthException"
        assert err.code == 190
        assert err.error_subcode == 463
        assert err.fbtrace_id == "AbCdEf"

    def test_defaults_are_none(self):
        err = FacebookError("oops")
        assert err.status_code is None
        assert err.error_type is None
        assert err.code is None
        assert err.method is None
        assert err.path is None


class TestSpecificErrors:
    def test_insufficient_permission_carries_permission(self):
        err = InsufficientPermissionError("Requires extended permission: email", permission="email")
        assert err.permission == "email"
        assert err.message == "Requires extended permission: email"

    def test_insufficient_permission_defaults(self):
        assert InsufficientPermissionError("nope").permission is None

    def test_uncategorized_carries_http_error(self):
        http_error = requests.HTTPError("400 Client Error")
        err = UncategorizedApiError("weird", http_error=http_error, status_code=400)
        assert err.http_error is http_error
        assert err.status_code == 400

    def test_uncategorized_without_http_error(self):
        assert UncategorizedApiError("weird").http_error is None
