"""Metadata parsers."""

from __future__ import annotations

from suitemeta.config import ParserConfig
from suitemeta.parser.attribute import (
    CLASS_BUILDERS,
    METHOD_BUILDERS,
    AttributeParser,
    decode_test_with_json,
)
from suitemeta.parser.chain import ParserChain
from suitemeta.parser.protocol import Parser


def default_parser(config: ParserConfig | None = None) -> Parser:
    """Parser used by the runner when nothing else is configured."""
    return AttributeParser(config)


__all__ = [
    "AttributeParser",
    "CLASS_BUILDERS",
    "METHOD_BUILDERS",
    "Parser",
    "ParserChain",
    "decode_test_with_json",
    "default_parser",
]
