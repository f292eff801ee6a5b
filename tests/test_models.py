"""
Tests for request/response value types
"""

import dataclasses

import pytest

from http_utility import DecodeError, HttpMethod, HttpRequest, Result, TransportError


class TestHttpMethod:
    """Test HttpMethod coercion"""

    @pytest.mark.parametrize("name", ["get", "GET", "Get"])
    def test_coerce_is_case_insensitive(self, name):
        assert HttpMethod.coerce(name) is HttpMethod.GET

    def test_coerce_passes_members_through(self):
        assert HttpMethod.coerce(HttpMethod.PUT) is HttpMethod.PUT

    def test_coerce_rejects_unknown(self):
        with pytest.raises(ValueError, match="PATCH"):
            HttpMethod.coerce("PATCH")


class TestHttpRequest:
    """Test HttpRequest construction and headers"""

    def test_headers_with_token_and_body(self):
        request = HttpRequest(HttpMethod.POST, "https://x.test", body=b"{}", token="tok")

        assert request.headers == {"authorization": "tok", "content-type": "application/json"}

    def test_headers_empty_without_token_or_body(self):
        assert HttpRequest(HttpMethod.GET, "https://x.test").headers == {}

    def test_string_method_is_coerced(self):
        assert HttpRequest("post", "https://x.test", body=b"{}").method is HttpMethod.POST

    def test_post_requires_body(self):
        with pytest.raises(ValueError):
            HttpRequest(HttpMethod.POST, "https://x.test")

    @pytest.mark.parametrize("method", [HttpMethod.GET, HttpMethod.DELETE])
    def test_get_and_delete_reject_body(self, method):
        with pytest.raises(ValueError):
            HttpRequest(method, "https://x.test", body=b"{}")

    def test_put_body_is_optional(self):
        assert HttpRequest(HttpMethod.PUT, "https://x.test").body is None

    def test_request_is_immutable(self):
        request = HttpRequest(HttpMethod.GET, "https://x.test")

        with pytest.raises(dataclasses.FrozenInstanceError):
            request.url = "https://other.test"


class TestResult:
    """Test Result variants"""

    def test_success(self):
        result = Result.success(42)

        assert result.is_success
        assert not result.is_failure
        assert result.unwrap() == 42

    def test_success_may_hold_none(self):
        result = Result.success(None)

        assert result.is_success
        assert result.unwrap() is None

    def test_failure(self):
        error = TransportError("timed out")
        result = Result.failure(error)

        assert result.is_failure
        assert result.value is None
        with pytest.raises(TransportError):
            result.unwrap()

    def test_failure_requires_error(self):
        with pytest.raises(ValueError):
            Result.failure(None)

    def test_cannot_hold_both(self):
        with pytest.raises(ValueError):
            Result(value=1, error=DecodeError(status_code=200))
