"""Error ADTs for translating declarations into metadata."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeVar

from pydantic import ValidationError

from suitemeta.result import Result


@dataclass(frozen=True)
class InvalidVersionRequirement:
    """A version-requirement declaration could not be parsed."""

    requirement: str
    kind: Literal["InvalidVersionRequirement"] = "InvalidVersionRequirement"


@dataclass(frozen=True)
class InvalidTestWithJson:
    """Inline JSON test data could not be decoded into a data set."""

    json: str
    message: str
    kind: Literal["InvalidTestWithJson"] = "InvalidTestWithJson"


@dataclass(frozen=True)
class MethodNotFound:
    """The method to parse does not exist on the test class."""

    class_name: str
    method_name: str
    kind: Literal["MethodNotFound"] = "MethodNotFound"


@dataclass(frozen=True)
class InvalidParserConfig:
    """Parser configuration validation failed (Pydantic failure)."""

    error: ValidationError
    kind: Literal["InvalidParserConfig"] = "InvalidParserConfig"


ParseError = InvalidVersionRequirement | InvalidTestWithJson | MethodNotFound

T = TypeVar("T")
ParseResult = Result[T, ParseError]


def describe_parse_error(error: ParseError) -> str:
    """Render a parse error as a one-line configuration message for a test."""
    match error:
        case InvalidVersionRequirement(requirement=requirement):
            return f'Version requirement "{requirement}" is not well-formed'
        case InvalidTestWithJson(json=text, message=message):
            return f"TestWithJson data {text!r} could not be decoded: {message}"
        case MethodNotFound(class_name=class_name, method_name=method_name):
            return f"Method {class_name}::{method_name} does not exist"
