"""Tests for parsing ranges out of request headers."""

from collections.abc import Iterator, Mapping
from email.message import Message
from wsgiref.headers import Headers as WSGIHeaders

import pytest
from typing_extensions import override

from byteranges import (
    Headers,
    InvalidContentLengthError,
    InvalidRangeError,
    Interval,
    MalformedNumberError,
    MappingHeaders,
    as_headers,
    parse_headers,
)


class MultiDict:
    """Stand-in for a framework header object exposing getlist()."""

    def __init__(self, *items: tuple[str, str]):
        self.items: list[tuple[str, str]] = list(items)

    def getlist(self, key: str) -> list[str]:
        return [value for name, value in self.items if name == key]


class FirstValueMapping(Mapping[str, str]):
    """Stand-in for multidict headers: a mapping that answers the first
    value per key, with getall() for the rest."""

    def __init__(self, *items: tuple[str, str]):
        self.pairs: list[tuple[str, str]] = list(items)

    def __getitem__(self, key: str) -> str:
        return self.getall(key)[0]

    def __iter__(self) -> Iterator[str]:
        return iter(dict.fromkeys(name for name, _ in self.pairs))

    def __len__(self) -> int:
        return len(dict.fromkeys(name for name, _ in self.pairs))

    def getall(self, key: str) -> list[str]:
        values = [value for name, value in self.pairs if name == key]
        if not values:
            raise KeyError(key)
        return values


class FixedHeaders(Headers):
    def __init__(self, **values: list[str]):
        self.values: dict[str, list[str]] = {
            key.replace("_", "-"): value for key, value in values.items()
        }

    @override
    def get_all(self, key: str) -> list[str]:
        return self.values.get(key, [])


class TestParseHeaders:
    def test_happy_path(self):
        headers = {"Range": ["100-200"], "Content-Length": ["300"]}
        assert parse_headers(headers) == [Interval(start=100, stop=200)]

    def test_string_values(self):
        headers = {"Range": "bytes=0-9,5-19", "Content-Length": "300"}
        assert parse_headers(headers) == [Interval(start=0, stop=19)]

    def test_multiple_range_values_are_merged(self):
        headers = {
            "Range": ["bytes=0-99", "bytes=50-99,200-300", "bytes=250-,-50"],
            "Content-Length": ["350"],
        }
        assert parse_headers(headers) == [
            Interval(start=0, stop=99),
            Interval(start=200, stop=350),
        ]

    def test_no_range_header(self):
        assert parse_headers({"Content-Length": ["300"]}) == []

    def test_only_first_content_length_is_used(self):
        headers = {"Range": ["0-"], "Content-Length": ["10", "oops"]}
        assert parse_headers(headers) == [Interval(start=0, stop=10)]

    def test_range_key_is_case_sensitive(self):
        headers = {"range": ["0-10"], "Content-Length": ["300"]}
        assert parse_headers(headers) == []

    def test_missing_content_length(self):
        with pytest.raises(InvalidContentLengthError) as excinfo:
            parse_headers({"Range": ["0-10"]})
        assert excinfo.value.values == []
        assert str(excinfo.value) == "invalid content length: []"

    @pytest.mark.parametrize("raw", ["abc", "", "-1", " 300", "3.5"])
    def test_invalid_content_length(self, raw: str):
        with pytest.raises(InvalidContentLengthError) as excinfo:
            parse_headers({"Range": ["0-10"], "Content-Length": [raw]})
        assert excinfo.value.values == [raw]
        assert repr(raw) in str(excinfo.value)

    def test_malformed_content_length_chains_cause(self):
        with pytest.raises(InvalidContentLengthError) as excinfo:
            parse_headers({"Content-Length": ["abc"]})
        assert isinstance(excinfo.value.__cause__, MalformedNumberError)

    def test_range_errors_pass_through(self):
        with pytest.raises(InvalidRangeError):
            parse_headers({"Range": ["bytes=0-400"], "Content-Length": ["300"]})
        with pytest.raises(MalformedNumberError):
            parse_headers({"Range": ["items=0-4"], "Content-Length": ["300"]})

    def test_header_and_prefix_overrides(self):
        headers = {"X-Range": ["items=0-4"], "X-Total": ["12"]}
        ranges = parse_headers(
            headers,
            range_header="X-Range",
            length_header="X-Total",
            prefix="items=",
        )
        assert ranges == [Interval(start=0, stop=4)]


class TestAsHeaders:
    def test_headers_instance_is_used_as_is(self):
        headers = FixedHeaders(Range=["0-1"])
        assert as_headers(headers) is headers

    def test_mapping(self):
        headers = as_headers({"Range": ["0-1", "5-6"], "Content-Length": "10"})
        assert isinstance(headers, MappingHeaders)
        assert headers.get_all("Range") == ["0-1", "5-6"]
        assert headers.get_all("Content-Length") == ["10"]
        assert headers.get_all("Missing") == []

    def test_getlist_object(self):
        headers = MultiDict(
            ("Range", "bytes=0-9"),
            ("Range", "bytes=20-29"),
            ("Content-Length", "100"),
        )
        assert parse_headers(headers) == [
            Interval(start=0, stop=9),
            Interval(start=20, stop=29),
        ]

    def test_getall_mapping_keeps_every_value(self):
        headers = FirstValueMapping(
            ("Range", "bytes=0-9"),
            ("Range", "bytes=20-29"),
            ("Content-Length", "100"),
        )
        assert parse_headers(headers) == [
            Interval(start=0, stop=9),
            Interval(start=20, stop=29),
        ]

    def test_getall_missing_key_means_no_values(self):
        headers = FirstValueMapping(("Content-Length", "100"))
        assert as_headers(headers).get_all("Range") == []
        assert parse_headers(headers) == []

    def test_email_message(self):
        message = Message()
        message["Range"] = "bytes=10-"
        message["Content-Length"] = "20"
        assert as_headers(message).get_all("Missing") == []
        assert parse_headers(message) == [Interval(start=10, stop=20)]

    def test_wsgiref_headers(self):
        headers = WSGIHeaders([("Range", "bytes=-5"), ("Content-Length", "20")])
        assert parse_headers(headers) == [Interval(start=15, stop=20)]

    def test_custom_headers_subclass(self):
        headers = FixedHeaders(Range=["bytes=1-2"], Content_Length=["5"])
        assert parse_headers(headers) == [Interval(start=1, stop=2)]

    def test_unsupported_type(self):
        with pytest.raises(TypeError, match="Cannot read headers from 'int'"):
            as_headers(42)
