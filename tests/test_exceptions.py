"""
Tests for exception handling
"""

import pytest

from http_utility.exceptions import (
    ConfigurationError,
    DecodeError,
    HttpUtilityError,
    NetworkError,
    TransportError,
)


class TestNetworkError:
    """Test NetworkError and its two kinds"""

    def test_attributes(self):
        error = NetworkError("connection reset", 502)

        assert error.reason == "connection reset"
        assert error.status_code == 502

    def test_message_includes_status(self):
        assert str(NetworkError("connection reset", 502)) == "connection reset (HTTP 502)"
        assert str(NetworkError("connection reset")) == "connection reset"
        assert str(NetworkError()) == "network error"

    def test_hierarchy(self):
        assert issubclass(TransportError, NetworkError)
        assert issubclass(DecodeError, NetworkError)
        assert issubclass(NetworkError, HttpUtilityError)
        assert issubclass(ConfigurationError, HttpUtilityError)

    def test_equality_by_kind_reason_and_status(self):
        assert TransportError("timeout") == TransportError("timeout")
        assert TransportError("timeout", 504) != TransportError("timeout")
        assert TransportError("decoding error", 200) != DecodeError(status_code=200)

    def test_can_be_raised(self):
        with pytest.raises(NetworkError) as exc_info:
            raise TransportError("dns failure")

        assert exc_info.value.status_code is None


class TestDecodeError:
    """Test DecodeError"""

    def test_reason_is_fixed(self):
        error = DecodeError(status_code=200, detail="Invalid JSON: EOF while parsing")

        assert error.reason == "decoding error"
        assert error.status_code == 200
        assert error.detail == "Invalid JSON: EOF while parsing"

    def test_detail_does_not_affect_equality(self):
        first = DecodeError(status_code=200, detail="a")
        second = DecodeError(status_code=200, detail="b")

        assert first == second


class TestConfigurationError:
    """Test ConfigurationError"""

    def test_with_config_key(self):
        error = ConfigurationError("required value is missing", config_key="transport.user_agent")

        assert error.config_key == "transport.user_agent"
        assert str(error) == (
            "Configuration error for 'transport.user_agent': required value is missing"
        )

    def test_without_config_key(self):
        error = ConfigurationError("bad file")

        assert error.config_key is None
        assert str(error) == "Configuration error: bad file"

    def test_arguments_are_keyword_only(self):
        """A reason string can't be mistaken for the status code"""
        with pytest.raises(TypeError):
            DecodeError("decoding error")
