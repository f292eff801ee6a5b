"""
http-utility: a thin JSON-over-HTTP client

Issues GET/POST/PUT/DELETE requests, optionally with a bearer token, and decodes
the JSON response into a caller-declared type. Every request completes exactly
once with a Result, delivered through a Future and an optional callback.
"""

import logging

from .client import HttpClient
from .decoding import Date, DateDecodingStrategy, Decodable, JsonDecoder
from .exceptions import (
    ConfigurationError,
    DecodeError,
    HttpUtilityError,
    NetworkError,
    TransportError,
)
from .models import HttpMethod, HttpRequest, RawResponse, Result
from .transport import HttpTransport, default_transport

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ConfigurationError",
    "Date",
    "DateDecodingStrategy",
    "DecodeError",
    "Decodable",
    "HttpClient",
    "HttpMethod",
    "HttpRequest",
    "HttpTransport",
    "HttpUtilityError",
    "JsonDecoder",
    "NetworkError",
    "RawResponse",
    "Result",
    "TransportError",
    "default_transport",
]
