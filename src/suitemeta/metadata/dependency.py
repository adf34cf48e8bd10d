"""
Dependency metadata: a test needs another test (or a whole class) to pass first.

The clone flags select how the depended-upon test's return value is handed to
the dependent test: unchanged, as a deep copy or as a shallow copy. At most one
flag may be set.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from suitemeta.metadata.base import MetadataMixin


def _check_clone_flags(deep_clone: bool, shallow_clone: bool) -> None:
    if deep_clone and shallow_clone:
        raise ValueError("deep_clone and shallow_clone are mutually exclusive")


@dataclass(frozen=True)
class DependsOnMethod(MetadataMixin):
    """Dependency on a single test method.

    Attributes:
        kind: Discriminator for pattern matching. Always "DependsOnMethod".
        class_name: Qualified name of the class declaring the target method.
        method_name: Name of the target test method.
        deep_clone: Pass a deep copy of the target's return value.
        shallow_clone: Pass a shallow copy of the target's return value.
    """

    class_name: str
    method_name: str
    deep_clone: bool = False
    shallow_clone: bool = False
    kind: Literal["DependsOnMethod"] = "DependsOnMethod"

    def __post_init__(self) -> None:
        _check_clone_flags(self.deep_clone, self.shallow_clone)


@dataclass(frozen=True)
class DependsOnClass(MetadataMixin):
    """Dependency on every test of another class."""

    class_name: str
    deep_clone: bool = False
    shallow_clone: bool = False
    kind: Literal["DependsOnClass"] = "DependsOnClass"

    def __post_init__(self) -> None:
        _check_clone_flags(self.deep_clone, self.shallow_clone)


DependencyMetadata = DependsOnClass | DependsOnMethod
