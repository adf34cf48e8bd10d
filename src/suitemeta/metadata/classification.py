"""Grouping, naming and test-marker metadata."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from suitemeta.metadata.base import MetadataMixin


@dataclass(frozen=True)
class Group(MetadataMixin):
    """Membership of a named group; size and ticket declarations map here too."""

    group_name: str
    kind: Literal["Group"] = "Group"


@dataclass(frozen=True)
class TestDox(MetadataMixin):
    """Human-readable test name used by documentation-style reports."""

    text: str
    kind: Literal["TestDox"] = "TestDox"


@dataclass(frozen=True)
class Test(MetadataMixin):
    """Marks a method as a test regardless of its name."""

    kind: Literal["Test"] = "Test"


@dataclass(frozen=True)
class Todo(MetadataMixin):
    kind: Literal["Todo"] = "Todo"


ClassificationMetadata = Group | TestDox | Test | Todo
