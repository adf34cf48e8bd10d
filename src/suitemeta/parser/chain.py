"""Combine several parsers into one, e.g. decorators first, then doc-comments."""

from __future__ import annotations

from typing import Callable

from suitemeta.errors import ParseResult
from suitemeta.metadata import MetadataCollection
from suitemeta.parser.protocol import Parser
from suitemeta.result import Success


class ParserChain:
    """Merge the collections of several parsers, in the order given.

    The first failing parser aborts the chain; its error is returned.
    """

    def __init__(self, *parsers: Parser) -> None:
        self._parsers = parsers

    def for_class(self, test_class: type) -> ParseResult[MetadataCollection]:
        return self._merge(lambda parser: parser.for_class(test_class))

    def for_method(self, test_class: type, method_name: str) -> ParseResult[MetadataCollection]:
        return self._merge(lambda parser: parser.for_method(test_class, method_name))

    def for_class_and_method(
        self, test_class: type, method_name: str
    ) -> ParseResult[MetadataCollection]:
        """All class-level metadata (every parser) before any method-level metadata."""
        return self.for_class(test_class).flat_map(
            lambda class_level: self.for_method(test_class, method_name).map(class_level.merge_with)
        )

    def _merge(
        self, parse: Callable[[Parser], ParseResult[MetadataCollection]]
    ) -> ParseResult[MetadataCollection]:
        merged: ParseResult[MetadataCollection] = Success(MetadataCollection.empty())
        for parser in self._parsers:
            merged = merged.flat_map(
                lambda collection, parser=parser: parse(parser).map(collection.merge_with)
            )
        return merged


__all__ = ["ParserChain"]
