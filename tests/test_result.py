"""Tests for the Result ADT."""

from __future__ import annotations

from typing import Iterator

import pytest

from suitemeta.result import Failure, Result, Success, collect_results


def _parse_depth(text: str) -> Result[int, str]:
    if not text.isdigit():
        return Failure(f"not a number: {text!r}")
    return Success(int(text))


class TestSuccess:
    """Tests for Success."""

    def test_predicates_and_unwrap(self) -> None:
        result = _parse_depth("8")
        assert result.is_success()
        assert not result.is_failure()
        assert result.unwrap() == 8
        assert result.unwrap_or(0) == 8

    def test_map_and_flat_map(self) -> None:
        assert _parse_depth("8").map(lambda depth: depth * 2) == Success(16)
        assert _parse_depth("8").flat_map(lambda _depth: _parse_depth("x")) == Failure(
            "not a number: 'x'"
        )

    def test_map_error_is_noop(self) -> None:
        assert _parse_depth("8").map_error(len) == Success(8)


class TestFailure:
    """Tests for Failure."""

    def test_predicates_and_unwrap(self) -> None:
        result = _parse_depth("x")
        assert result.is_failure()
        assert not result.is_success()
        assert result.unwrap_or(0) == 0
        with pytest.raises(RuntimeError, match="Called unwrap"):
            result.unwrap()

    def test_map_and_flat_map_are_noops(self) -> None:
        result = _parse_depth("x")
        assert result.map(lambda depth: depth * 2) == result
        assert result.flat_map(lambda depth: Success(depth)) == result

    def test_map_error(self) -> None:
        assert _parse_depth("x").map_error(len) == Failure(len("not a number: 'x'"))


class TestCollectResults:
    """Tests for collect_results."""

    def test_all_success_keeps_order(self) -> None:
        assert collect_results([Success(1), Success(2), Success(3)]) == Success([1, 2, 3])

    def test_empty(self) -> None:
        assert collect_results([]) == Success([])

    def test_first_failure_wins(self) -> None:
        results: list[Result[int, str]] = [Success(1), Failure("a"), Success(2), Failure("b")]
        assert collect_results(results) == Failure("a")

    def test_stops_at_first_failure(self) -> None:
        seen: list[str] = []

        def results() -> Iterator[Result[int, str]]:
            for text in ["1", "x", "2"]:
                seen.append(text)
                yield _parse_depth(text)

        assert collect_results(results()) == Failure("not a number: 'x'")
        assert seen == ["1", "x"]
