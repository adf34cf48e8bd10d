"""Tests for ParserChain and default_parser."""

from __future__ import annotations

from suitemeta import attributes as sm
from suitemeta import metadata as md
from suitemeta.errors import InvalidVersionRequirement, ParseResult
from suitemeta.metadata import Metadata, MetadataCollection
from suitemeta.parser import AttributeParser, Parser, ParserChain, default_parser
from suitemeta.result import Failure, Success
from tests.helpers import expect_failure, expect_success


class StubParser:
    """Parser returning fixed results and recording how often it was asked."""

    def __init__(
        self,
        class_level: list[Metadata] | None = None,
        method_level: list[Metadata] | None = None,
        error: InvalidVersionRequirement | None = None,
    ) -> None:
        self._class_level = MetadataCollection.from_values(class_level or [])
        self._method_level = MetadataCollection.from_values(method_level or [])
        self._error = error
        self.calls = 0

    def _result(self, collection: MetadataCollection) -> ParseResult[MetadataCollection]:
        self.calls += 1
        if self._error is not None:
            return Failure(self._error)
        return Success(collection)

    def for_class(self, test_class: type) -> ParseResult[MetadataCollection]:
        return self._result(self._class_level)

    def for_method(self, test_class: type, method_name: str) -> ParseResult[MetadataCollection]:
        return self._result(self._method_level)

    def for_class_and_method(
        self, test_class: type, method_name: str
    ) -> ParseResult[MetadataCollection]:
        return self.for_class(test_class).flat_map(
            lambda class_level: self.for_method(test_class, method_name).map(
                class_level.merge_with
            )
        )


class SampleTest:
    @sm.Test()
    def runs(self) -> None:
        return None


class TestParserChain:
    """ParserChain merges parser results in order."""

    def test_empty_chain(self) -> None:
        chain = ParserChain()
        assert expect_success(chain.for_class(SampleTest)).is_empty()
        assert expect_success(chain.for_method(SampleTest, "runs")).is_empty()

    def test_parsers_merged_in_order(self) -> None:
        first = StubParser(class_level=[md.Group(group_name="first")])
        second = StubParser(class_level=[md.Group(group_name="second")])
        collection = expect_success(ParserChain(first, second).for_class(SampleTest))
        assert list(collection) == [md.Group(group_name="first"), md.Group(group_name="second")]

    def test_class_level_before_method_level_across_parsers(self) -> None:
        first = StubParser(class_level=[md.Group(group_name="a")], method_level=[md.Before()])
        second = StubParser(class_level=[md.Group(group_name="b")], method_level=[md.After()])
        collection = expect_success(
            ParserChain(first, second).for_class_and_method(SampleTest, "runs")
        )
        assert list(collection) == [
            md.Group(group_name="a"),
            md.Group(group_name="b"),
            md.Before(),
            md.After(),
        ]

    def test_first_failure_stops_chain(self) -> None:
        error = InvalidVersionRequirement(requirement="8.x")
        failing = StubParser(error=error)
        never_called = StubParser(class_level=[md.Test()])
        result = ParserChain(failing, never_called).for_class(SampleTest)
        assert expect_failure(result) == error
        assert never_called.calls == 0

    def test_failure_after_success_discards_partial_result(self) -> None:
        error = InvalidVersionRequirement(requirement="newest")
        chain = ParserChain(StubParser(method_level=[md.Test()]), StubParser(error=error))
        assert expect_failure(chain.for_method(SampleTest, "runs")) == error

    def test_chain_with_attribute_parser(self) -> None:
        extra = StubParser(method_level=[md.Todo()])
        chain = ParserChain(AttributeParser(), extra)
        collection = expect_success(chain.for_method(SampleTest, "runs"))
        assert list(collection) == [md.Test(), md.Todo()]

    def test_chain_is_a_parser(self) -> None:
        parser: Parser = ParserChain(StubParser(), AttributeParser())
        assert expect_success(parser.for_class(SampleTest)).is_empty()


class TestDefaultParser:
    """default_parser returns the attribute parser."""

    def test_default_parser(self) -> None:
        parser = default_parser()
        assert isinstance(parser, AttributeParser)
        assert list(expect_success(parser.for_method(SampleTest, "runs"))) == [md.Test()]
