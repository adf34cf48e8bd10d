"""Tests for ParserConfig validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from suitemeta.config import (
    DEFAULT_JSON_MAX_DEPTH,
    DEFAULT_NAMESPACE,
    ParserConfig,
    build_parser_config,
)
from suitemeta.errors import InvalidParserConfig
from tests.helpers import expect_failure, expect_success


class TestParserConfig:
    """Tests for ParserConfig defaults and constraints."""

    def test_defaults(self) -> None:
        config = ParserConfig()
        assert config.namespace == DEFAULT_NAMESPACE == "suitemeta.attributes."
        assert config.json_max_depth == DEFAULT_JSON_MAX_DEPTH == 512

    def test_frozen(self) -> None:
        config = ParserConfig()
        with pytest.raises(ValidationError):
            setattr(config, "json_max_depth", 3)

    def test_build_valid(self) -> None:
        config = expect_success(build_parser_config(namespace="acme.markers.", json_max_depth=8))
        assert config == ParserConfig(namespace="acme.markers.", json_max_depth=8)

    @pytest.mark.parametrize(
        "data",
        [
            {"json_max_depth": 0},
            {"json_max_depth": -1},
            {"namespace": ""},
            {"namespace": "acme.markers"},
            {"unknown": True},
        ],
    )
    def test_build_invalid(self, data: dict[str, object]) -> None:
        error = expect_failure(build_parser_config(**data))
        assert isinstance(error, InvalidParserConfig)
        assert error.kind == "InvalidParserConfig"
        assert error.error.error_count() >= 1
