"""
Coverage intent metadata.

``Covers*`` values name the code a test is meant to exercise, ``Uses*`` values
name code a test may execute without it counting as covered. The attribute
parser produces the class and function forms; ``Covers``, ``CoversMethod``,
``CoversDefaultClass`` and their ``Uses`` counterparts come from doc-comment
declarations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from suitemeta.metadata.base import MetadataMixin


@dataclass(frozen=True)
class Covers(MetadataMixin):
    target: str
    kind: Literal["Covers"] = "Covers"


@dataclass(frozen=True)
class CoversClass(MetadataMixin):
    class_name: str
    kind: Literal["CoversClass"] = "CoversClass"


@dataclass(frozen=True)
class CoversDefaultClass(MetadataMixin):
    class_name: str
    kind: Literal["CoversDefaultClass"] = "CoversDefaultClass"


@dataclass(frozen=True)
class CoversFunction(MetadataMixin):
    function_name: str
    kind: Literal["CoversFunction"] = "CoversFunction"


@dataclass(frozen=True)
class CoversMethod(MetadataMixin):
    class_name: str
    method_name: str
    kind: Literal["CoversMethod"] = "CoversMethod"


@dataclass(frozen=True)
class CoversNothing(MetadataMixin):
    """The test contributes no coverage at all."""

    kind: Literal["CoversNothing"] = "CoversNothing"


@dataclass(frozen=True)
class CodeCoverageIgnore(MetadataMixin):
    """Exclude the annotated code from coverage reports."""

    kind: Literal["CodeCoverageIgnore"] = "CodeCoverageIgnore"


@dataclass(frozen=True)
class Uses(MetadataMixin):
    target: str
    kind: Literal["Uses"] = "Uses"


@dataclass(frozen=True)
class UsesClass(MetadataMixin):
    class_name: str
    kind: Literal["UsesClass"] = "UsesClass"


@dataclass(frozen=True)
class UsesDefaultClass(MetadataMixin):
    class_name: str
    kind: Literal["UsesDefaultClass"] = "UsesDefaultClass"


@dataclass(frozen=True)
class UsesFunction(MetadataMixin):
    function_name: str
    kind: Literal["UsesFunction"] = "UsesFunction"


@dataclass(frozen=True)
class UsesMethod(MetadataMixin):
    class_name: str
    method_name: str
    kind: Literal["UsesMethod"] = "UsesMethod"


CoverageMetadata = (
    Covers
    | CoversClass
    | CoversDefaultClass
    | CoversFunction
    | CoversMethod
    | CoversNothing
    | CodeCoverageIgnore
    | Uses
    | UsesClass
    | UsesDefaultClass
    | UsesFunction
    | UsesMethod
)
