"""Exceptions raised while parsing range specifications.

All of them derive from `RangeError`, itself a `ValueError`, so callers can
catch the whole family at once or tell the kinds apart:

    >>> try:
    ...     parse(["bytes=0-99"], "bytes=", 50)
    ... except InvalidRangeError:
    ...     ...  # answer 416 Range Not Satisfiable
    ... except MalformedNumberError as err:
    ...     log.warning("bad range bound %r", err.text)
"""

from collections.abc import Sequence


class RangeError(ValueError):
    """Base class for range parsing failures."""


class InvalidRangeError(RangeError):
    """A range token has the wrong shape or falls outside the content.

    Deliberately coarse: it does not say which bound check failed.
    """

    def __init__(self) -> None:
        super().__init__("invalid range")


class MalformedNumberError(RangeError):
    """A range bound is not an integer. `text` is the offending substring."""

    def __init__(self, text: str) -> None:
        self.text: str = text
        super().__init__(f"invalid integer: {text!r}")


class InvalidContentLengthError(RangeError):
    """The Content-Length header is missing or not an integer.

    `values` holds every raw value found under the header (possibly none).
    """

    def __init__(self, values: Sequence[str]) -> None:
        self.values: list[str] = list(values)
        super().__init__(f"invalid content length: {self.values!r}")
