"""suitemeta error ADTs."""

from suitemeta.errors.parser import (
    InvalidParserConfig,
    InvalidTestWithJson,
    InvalidVersionRequirement,
    MethodNotFound,
    ParseError,
    ParseResult,
    describe_parse_error,
)

__all__ = [
    "InvalidParserConfig",
    "InvalidTestWithJson",
    "InvalidVersionRequirement",
    "MethodNotFound",
    "ParseError",
    "ParseResult",
    "describe_parse_error",
]
