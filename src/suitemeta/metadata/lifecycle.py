"""Lifecycle hook metadata: methods run around tests and test classes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from suitemeta.metadata.base import MetadataMixin


@dataclass(frozen=True)
class Before(MetadataMixin):
    """Run the method before each test of the class."""

    kind: Literal["Before"] = "Before"


@dataclass(frozen=True)
class After(MetadataMixin):
    """Run the method after each test of the class."""

    kind: Literal["After"] = "After"


@dataclass(frozen=True)
class BeforeClass(MetadataMixin):
    """Run the method once before the first test of the class."""

    kind: Literal["BeforeClass"] = "BeforeClass"


@dataclass(frozen=True)
class AfterClass(MetadataMixin):
    """Run the method once after the last test of the class."""

    kind: Literal["AfterClass"] = "AfterClass"


@dataclass(frozen=True)
class PreCondition(MetadataMixin):
    kind: Literal["PreCondition"] = "PreCondition"


@dataclass(frozen=True)
class PostCondition(MetadataMixin):
    kind: Literal["PostCondition"] = "PostCondition"


LifecycleMetadata = Before | After | BeforeClass | AfterClass | PreCondition | PostCondition
