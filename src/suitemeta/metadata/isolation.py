"""Process isolation metadata."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from suitemeta.metadata.base import MetadataMixin


@dataclass(frozen=True)
class RunInSeparateProcess(MetadataMixin):
    kind: Literal["RunInSeparateProcess"] = "RunInSeparateProcess"


@dataclass(frozen=True)
class RunClassInSeparateProcess(MetadataMixin):
    """Run all tests of the class together in one child process."""

    kind: Literal["RunClassInSeparateProcess"] = "RunClassInSeparateProcess"


@dataclass(frozen=True)
class RunTestsInSeparateProcesses(MetadataMixin):
    """Run each test of the class in its own child process."""

    kind: Literal["RunTestsInSeparateProcesses"] = "RunTestsInSeparateProcesses"


@dataclass(frozen=True)
class PreserveGlobalState(MetadataMixin):
    """Copy the parent's global state into the child process."""

    enabled: bool
    kind: Literal["PreserveGlobalState"] = "PreserveGlobalState"


IsolationMetadata = (
    RunInSeparateProcess
    | RunClassInSeparateProcess
    | RunTestsInSeparateProcesses
    | PreserveGlobalState
)
