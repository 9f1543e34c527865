"""Range-spec tokenizing and validation.

A range spec is a comma-separated list of tokens, each in one of three forms,
resolved against the length of the content being ranged over:

    X-Y   bytes X through Y
    X-    bytes X through the end
    -Y    the last Y bytes

Every resolved interval lies within [0, max_len]. Anything else raises
`InvalidRangeError`, except bounds that are not integers at all, which raise
`MalformedNumberError` naming the bad text.
"""

import logging
import re
from collections.abc import Iterable

from byteranges.errors import InvalidRangeError, MalformedNumberError
from byteranges.interval import Interval
from byteranges.merge import merge
from byteranges.util import BOUND_SEPARATOR, BYTES_PREFIX, RANGE_SEPARATOR

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_int(text: str) -> int:
    # int() alone would also accept whitespace, underscores and non-ASCII digits
    if not _INTEGER.fullmatch(text):
        raise MalformedNumberError(text)
    return int(text)


def _reject(token: str, reason: str) -> InvalidRangeError:
    logger.debug("Rejecting range %r: %s", token, reason)
    return InvalidRangeError()


def parse_range(token: str, max_len: int) -> Interval:
    """Resolve a single prefix-free range token against `max_len`.

    Raises:
        InvalidRangeError: If the token is not exactly two dash-separated
            parts, or a bound lies outside [0, max_len], or start > stop.
        MalformedNumberError: If a bound is not an integer.

    Examples:
        >>> parse_range("0-99", 350)
        Interval(start=0, stop=99)
        >>> parse_range("250-", 350)
        Interval(start=250, stop=350)
        >>> parse_range("-50", 350)
        Interval(start=300, stop=350)
    """
    parts = token.split(BOUND_SEPARATOR)
    if len(parts) != 2:
        raise _reject(
            token, f"expected one {BOUND_SEPARATOR!r}, got {len(parts) - 1}"
        )
    first, last = parts

    if first == "":
        suffix = parse_int(last)
        if suffix < 0 or suffix > max_len:
            raise _reject(token, f"suffix length outside [0, {max_len}]")
        return Interval(start=max_len - suffix, stop=max_len)

    if last == "":
        start = parse_int(first)
        if start < 0 or start > max_len:
            raise _reject(token, f"start outside [0, {max_len}]")
        return Interval(start=start, stop=max_len)

    start = parse_int(first)
    stop = parse_int(last)
    if start < 0 or stop < 0 or start > max_len or stop > max_len:
        raise _reject(token, f"bound outside [0, {max_len}]")
    if start > stop:
        raise _reject(token, "start is after stop")
    return Interval(start=start, stop=stop)


def parse(range_lists: Iterable[str], prefix: str, max_len: int) -> list[Interval]:
    """Parse range specs into a merged, sorted list of intervals.

    Args:
        range_lists: One string per header occurrence, each holding one or
            more comma-separated range tokens.
        prefix: Unit prefix (e.g. "bytes=") removed from the start of each
            string when present. A missing prefix is not an error.
        max_len: Length of the content being ranged over.

    Returns:
        A new list of disjoint intervals sorted by start. Empty when
        `range_lists` is empty.

    Raises:
        InvalidRangeError: On the first token with a bad shape or bounds.
        MalformedNumberError: On the first token with a non-integer bound.
        TypeError: If `range_lists` is a single string instead of a
            collection of them.

    Tokens are checked in order, string by string; the first failure aborts
    the whole call.

    Example:
        >>> parse(["bytes=0-99", "bytes=50-99,200-300", "bytes=250-,-50"],
        ...       "bytes=", 350)
        [Interval(start=0, stop=99), Interval(start=200, stop=350)]
    """
    if isinstance(range_lists, str):
        raise TypeError(
            f"parse() expects a collection of range specs, got a str: "
            f"{range_lists!r}\n"
            f"Hint: wrap a single header value in a list: parse([value], ...)"
        )

    intervals: list[Interval] = []
    for entry in range_lists:
        entry = entry.removeprefix(prefix)
        for token in entry.split(RANGE_SEPARATOR):
            intervals.append(parse_range(token, max_len))

    merged = merge(intervals)
    logger.debug("Parsed %d range(s) into %s", len(intervals), merged)
    return merged


def format_ranges(
    intervals: Iterable[Interval], prefix: str = BYTES_PREFIX
) -> str:
    """Render intervals back into a range spec, e.g. "bytes=0-99,200-350"."""
    return prefix + RANGE_SEPARATOR.join(
        f"{interval.start}{BOUND_SEPARATOR}{interval.stop}" for interval in intervals
    )
