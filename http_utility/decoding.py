"""
JSON decoding into caller-declared types

JsonDecoder turns response bytes into any type pydantic can validate: Decodable
models, dataclasses, TypedDicts, builtins and unions of those. Dates are parsed
according to the decoder's DateDecodingStrategy (ISO-8601 unless configured
otherwise), which reaches the validators through the pydantic validation context.

Which values follow the strategy:
- ``datetime`` and ``datetime | None`` fields on models deriving from Decodable
- values annotated with ``Date`` anywhere in the target type (e.g. ``list[Date]``)

Plain ``datetime`` fields elsewhere fall back to pydantic's own datetime parsing.
"""

import types
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from functools import lru_cache
from typing import Annotated, Any, ClassVar, TypeVar, Union, get_args, get_origin

from pydantic import BaseModel, BeforeValidator, TypeAdapter, ValidationInfo, field_validator

T = TypeVar("T")

CONTEXT_KEY = "date_decoding_strategy"


def _parse_iso8601(value: Any) -> datetime:
    if not isinstance(value, str):
        raise ValueError(f"expected an ISO-8601 date string, got {type(value).__name__}")
    return datetime.fromisoformat(value)


def _parse_seconds(value: Any) -> datetime:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise ValueError(f"expected seconds since 1970 as a number, got {type(value).__name__}")
    try:
        return datetime.fromtimestamp(value, tz=timezone.utc)
    except (OverflowError, OSError) as e:
        raise ValueError(f"seconds since 1970 out of range: {value!r}") from e


def _parse_milliseconds(value: Any) -> datetime:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise ValueError(
            f"expected milliseconds since 1970 as a number, got {type(value).__name__}"
        )
    try:
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    except (OverflowError, OSError) as e:
        raise ValueError(f"milliseconds since 1970 out of range: {value!r}") from e


@dataclass(frozen=True)
class DateDecodingStrategy:
    """
    How a JSON value becomes a datetime.

    Use the class-level presets (ISO8601, SECONDS_SINCE_1970,
    MILLISECONDS_SINCE_1970) or build one with formatted() / custom().
    A parser raises ValueError when the value does not fit.
    """

    name: str
    parser: Callable[[Any], datetime]

    ISO8601: ClassVar["DateDecodingStrategy"]
    SECONDS_SINCE_1970: ClassVar["DateDecodingStrategy"]
    MILLISECONDS_SINCE_1970: ClassVar["DateDecodingStrategy"]

    @classmethod
    def formatted(cls, fmt: str) -> "DateDecodingStrategy":
        """Parse date strings with a strptime format, e.g. '%d.%m.%Y %H:%M'"""

        def parse(value: Any) -> datetime:
            if not isinstance(value, str):
                raise ValueError(f"expected a date string, got {type(value).__name__}")
            return datetime.strptime(value, fmt)

        return cls(name=f"formatted({fmt})", parser=parse)

    @classmethod
    def custom(cls, parser: Callable[[Any], datetime]) -> "DateDecodingStrategy":
        """Delegate to a caller-supplied function taking the raw JSON value"""
        return cls(name=f"custom({getattr(parser, '__name__', 'parser')})", parser=parser)

    def parse(self, value: Any) -> datetime:
        if isinstance(value, datetime):
            return value
        return self.parser(value)


# Presets
DateDecodingStrategy.ISO8601 = DateDecodingStrategy("iso8601", _parse_iso8601)
DateDecodingStrategy.SECONDS_SINCE_1970 = DateDecodingStrategy("secondsSince1970", _parse_seconds)
DateDecodingStrategy.MILLISECONDS_SINCE_1970 = DateDecodingStrategy(
    "millisecondsSince1970", _parse_milliseconds
)


def _strategy_from(info: ValidationInfo) -> DateDecodingStrategy:
    context = info.context if isinstance(info.context, dict) else {}
    return context.get(CONTEXT_KEY) or DateDecodingStrategy.ISO8601


def _decode_date(value: Any, info: ValidationInfo) -> Any:
    if value is None:
        return value
    return _strategy_from(info).parse(value)


Date = Annotated[datetime, BeforeValidator(_decode_date)]
"""A datetime that is parsed with the active decoder's date strategy."""


def _expects_datetime(annotation: Any) -> bool:
    if annotation is datetime:
        return True
    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        return len(args) == 1 and args[0] is datetime
    return False


class Decodable(BaseModel):
    """
    Base model for response types.

    Every ``datetime`` / ``datetime | None`` field is parsed with the date
    strategy of the JsonDecoder doing the decoding.

    Example:
        class Post(Decodable):
            id: int
            title: str
            published_at: datetime
    """

    @field_validator("*", mode="before")
    @classmethod
    def decode_date_fields(cls, value: Any, info: ValidationInfo) -> Any:
        field = cls.model_fields.get(info.field_name) if info.field_name else None
        if field is None or value is None or not _expects_datetime(field.annotation):
            return value
        return _strategy_from(info).parse(value)


@lru_cache(maxsize=256)
def _adapter_for(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


class JsonDecoder:
    """
    Decodes JSON bytes into a statically declared type.

    The date strategy only reaches ``datetime`` fields of Decodable models and
    values annotated with ``Date``. A ``datetime`` field on a plain dataclass,
    TypedDict or non-Decodable BaseModel ignores the strategy and is parsed by
    pydantic itself (ISO-8601 strings or epoch numbers).

    Usage:
        decoder = JsonDecoder(DateDecodingStrategy.SECONDS_SINCE_1970)
        post = decoder.decode(b'{"id": 1, "published_at": 1589673600}', Post)
    """

    def __init__(self, date_decoding_strategy: DateDecodingStrategy | None = None):
        """
        Args:
            date_decoding_strategy: How date fields are parsed (ISO-8601 if None)
        """
        self.date_decoding_strategy = date_decoding_strategy or DateDecodingStrategy.ISO8601

    def decode(self, data: bytes | str, result_type: type[T]) -> T:
        """
        Decode ``data`` as JSON into ``result_type``.

        Raises:
            pydantic.ValidationError: If the data is not JSON or does not fit the type
        """
        return _adapter_for(result_type).validate_json(
            data, context={CONTEXT_KEY: self.date_decoding_strategy}
        )

    def __repr__(self) -> str:
        return f"JsonDecoder(date_decoding_strategy={self.date_decoding_strategy.name!r})"
