from .errors import (
    InvalidContentLengthError,
    InvalidRangeError,
    MalformedNumberError,
    RangeError,
)
from .headers import Headers, MappingHeaders, as_headers, parse_headers
from .interval import Interval
from .merge import merge
from .parser import format_ranges, parse, parse_range

__all__ = [
    "Interval",
    "parse",
    "parse_range",
    "parse_headers",
    "merge",
    "format_ranges",
    "Headers",
    "MappingHeaders",
    "as_headers",
    "RangeError",
    "InvalidRangeError",
    "MalformedNumberError",
    "InvalidContentLengthError",
]
