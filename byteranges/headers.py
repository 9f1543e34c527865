"""Range parsing straight from a request's headers.

Web frameworks model multi-valued headers in different ways, so the adapter
works against a small `Headers` interface and `as_headers` coerces the usual
shapes into it:

- a `Headers` instance (used as-is)
- an object with a multi-value getter: `get_list` (tornado), `getlist`
  (werkzeug, starlette), `getall` (multidict, aiohttp) or `get_all`
  (`email.message.Message`, wsgiref)
- a mapping of header name to a string or a sequence of strings
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from typing_extensions import override

from byteranges.errors import InvalidContentLengthError, MalformedNumberError
from byteranges.interval import Interval
from byteranges.parser import parse, parse_int
from byteranges.util import BYTES_PREFIX, CONTENT_LENGTH_HEADER, RANGE_HEADER

logger = logging.getLogger(__name__)

_MULTI_VALUE_GETTERS = ("get_list", "getlist", "getall", "get_all")


class Headers(ABC):
    """A header collection where each key maps to zero or more values."""

    @abstractmethod
    def get_all(self, key: str) -> list[str]:
        """Return every value stored under `key`, in order, or []."""
        pass


class MappingHeaders(Headers):
    """Headers backed by a mapping of name to a value or list of values.

    Keys are matched exactly, so {"range": ...} does not answer "Range".
    """

    def __init__(self, mapping: Mapping[str, str | Sequence[str]]):
        self.mapping: Mapping[str, str | Sequence[str]] = mapping

    @override
    def get_all(self, key: str) -> list[str]:
        value = self.mapping.get(key)
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return list(value)


class _GetterHeaders(Headers):
    def __init__(self, getter: Callable[[str], Any]):
        self.getter: Callable[[str], Any] = getter

    @override
    def get_all(self, key: str) -> list[str]:
        try:
            values = self.getter(key)
        except KeyError:
            # multidict getall() raises for a missing key
            return []
        # email.message.Message.get_all returns None for a missing key
        return list(values or [])


def as_headers(headers: Any) -> Headers:
    """Coerce a framework's header collection into `Headers`.

    Raises:
        TypeError: If `headers` offers no way to look up multiple values.
    """
    if isinstance(headers, Headers):
        return headers
    for name in _MULTI_VALUE_GETTERS:
        getter = getattr(headers, name, None)
        if callable(getter):
            return _GetterHeaders(getter)
    if isinstance(headers, Mapping):
        return MappingHeaders(headers)
    raise TypeError(
        f"Cannot read headers from {type(headers).__name__!r}.\n"
        f"Expected a Headers instance, a mapping, or an object with one of "
        f"{', '.join(_MULTI_VALUE_GETTERS)}()."
    )


def parse_headers(
    headers: Any,
    *,
    range_header: str = RANGE_HEADER,
    length_header: str = CONTENT_LENGTH_HEADER,
    prefix: str = BYTES_PREFIX,
) -> list[Interval]:
    """Parse the byte ranges requested by `headers`.

    The content length is read from the first `length_header` value and
    every `range_header` value is handed to `parse` with `prefix`. Only the
    bytes unit is meaningful here; for other units call `parse` directly.

    Raises:
        InvalidContentLengthError: If the content length is missing, not an
            integer, or negative.
        InvalidRangeError, MalformedNumberError: As raised by `parse`.

    Example:
        >>> parse_headers({"Range": ["100-200"], "Content-Length": ["300"]})
        [Interval(start=100, stop=200)]
    """
    source = as_headers(headers)

    raw_lengths = source.get_all(length_header)
    if not raw_lengths:
        logger.debug("No %s header", length_header)
        raise InvalidContentLengthError(raw_lengths)
    try:
        length = parse_int(raw_lengths[0])
    except MalformedNumberError as exc:
        logger.debug("Malformed %s header: %r", length_header, raw_lengths)
        raise InvalidContentLengthError(raw_lengths) from exc
    if length < 0:
        logger.debug("Negative %s header: %r", length_header, raw_lengths)
        raise InvalidContentLengthError(raw_lengths)

    return parse(source.get_all(range_header), prefix, length)
