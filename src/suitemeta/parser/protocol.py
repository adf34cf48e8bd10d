"""Structural interface shared by all metadata parsers."""

from __future__ import annotations

from typing import Protocol

from suitemeta.errors import ParseResult
from suitemeta.metadata import MetadataCollection


class Parser(Protocol):
    """Produces metadata for a test class or one of its methods.

    Implementations differ in where declarations come from (decorators,
    doc-comments...), never in the shape of what they return.
    """

    def for_class(self, test_class: type) -> ParseResult[MetadataCollection]: ...

    def for_method(self, test_class: type, method_name: str) -> ParseResult[MetadataCollection]: ...

    def for_class_and_method(
        self, test_class: type, method_name: str
    ) -> ParseResult[MetadataCollection]: ...
