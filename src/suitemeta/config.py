"""Configuration for the attribute parser."""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

from suitemeta.errors import InvalidParserConfig
from suitemeta.result import Result
from suitemeta.validation import validate_model


DEFAULT_NAMESPACE: Final = "suitemeta.attributes."
DEFAULT_JSON_MAX_DEPTH: Final = 512


class ParserConfig(BaseModel):
    """Immutable settings shared by every parse.

    Attributes:
        namespace: Module prefix of recognized declarations. Declarations whose
            type name does not start with it are ignored; the rest are looked
            up by the name that follows it, so the module must define
            subclasses of the :mod:`suitemeta.attributes` types it re-exports.
        json_max_depth: Maximum nesting depth of ``TestWithJson`` payloads.
    """

    namespace: str = Field(DEFAULT_NAMESPACE, min_length=1)
    json_max_depth: int = Field(DEFAULT_JSON_MAX_DEPTH, gt=0)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("namespace")
    @classmethod
    def _namespace_is_module_prefix(cls, value: str) -> str:
        if not value.endswith("."):
            raise ValueError("namespace must end with '.'")
        return value


def build_parser_config(**data: object) -> Result[ParserConfig, InvalidParserConfig]:
    """Validate parser settings, returning InvalidParserConfig on bad input."""
    return validate_model(ParserConfig, **data).map_error(
        lambda error: InvalidParserConfig(error=error)
    )


__all__ = ["DEFAULT_JSON_MAX_DEPTH", "DEFAULT_NAMESPACE", "ParserConfig", "build_parser_config"]
