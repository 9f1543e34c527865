"""Default header names and range syntax constants for byteranges.

Every function that uses one of these also accepts an override keyword, so
callers with non-standard headers or units never need to patch the module.
"""

# Unit prefix stripped from each Range header value
BYTES_PREFIX = "bytes="

# Header names (looked up case-sensitively)
RANGE_HEADER = "Range"
CONTENT_LENGTH_HEADER = "Content-Length"

# Range-spec punctuation
RANGE_SEPARATOR = ","
BOUND_SEPARATOR = "-"
