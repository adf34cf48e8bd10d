"""
Metadata ADT - the closed set of facts that can be declared about a test.

Type Safety:
    - All metadata types are frozen dataclasses (immutable)
    - Literal ``kind`` discriminators enable exhaustive pattern matching
    - Family unions (LifecycleMetadata, DependencyMetadata...) group related variants
"""

from __future__ import annotations

from suitemeta.metadata.backup import (
    BackupGlobals,
    BackupMetadata,
    BackupStaticProperties,
    ExcludeGlobalVariableFromBackup,
    ExcludeStaticPropertyFromBackup,
)
from suitemeta.metadata.classification import ClassificationMetadata, Group, Test, TestDox, Todo
from suitemeta.metadata.coverage import (
    CodeCoverageIgnore,
    CoverageMetadata,
    Covers,
    CoversClass,
    CoversDefaultClass,
    CoversFunction,
    CoversMethod,
    CoversNothing,
    Uses,
    UsesClass,
    UsesDefaultClass,
    UsesFunction,
    UsesMethod,
)
from suitemeta.metadata.data import DataMetadata, DataProvider, DoesNotPerformAssertions, TestWith
from suitemeta.metadata.dependency import DependencyMetadata, DependsOnClass, DependsOnMethod
from suitemeta.metadata.isolation import (
    IsolationMetadata,
    PreserveGlobalState,
    RunClassInSeparateProcess,
    RunInSeparateProcess,
    RunTestsInSeparateProcesses,
)
from suitemeta.metadata.lifecycle import (
    After,
    AfterClass,
    Before,
    BeforeClass,
    LifecycleMetadata,
    PostCondition,
    PreCondition,
)
from suitemeta.metadata.requirements import (
    RequirementMetadata,
    RequiresFramework,
    RequiresFunction,
    RequiresMethod,
    RequiresOperatingSystem,
    RequiresOperatingSystemFamily,
    RequiresPackage,
    RequiresPython,
    RequiresSetting,
)


# Master Metadata Union - enables exhaustive pattern matching across all variants
Metadata = (
    LifecycleMetadata
    | BackupMetadata
    | CoverageMetadata
    | ClassificationMetadata
    | DependencyMetadata
    | RequirementMetadata
    | IsolationMetadata
    | DataMetadata
)

__all__ = [
    "Metadata",
    # Lifecycle
    "LifecycleMetadata",
    "Before",
    "After",
    "BeforeClass",
    "AfterClass",
    "PreCondition",
    "PostCondition",
    # Backup control
    "BackupMetadata",
    "BackupGlobals",
    "BackupStaticProperties",
    "ExcludeGlobalVariableFromBackup",
    "ExcludeStaticPropertyFromBackup",
    # Coverage intent
    "CoverageMetadata",
    "Covers",
    "CoversClass",
    "CoversDefaultClass",
    "CoversFunction",
    "CoversMethod",
    "CoversNothing",
    "CodeCoverageIgnore",
    "Uses",
    "UsesClass",
    "UsesDefaultClass",
    "UsesFunction",
    "UsesMethod",
    # Classification
    "ClassificationMetadata",
    "Group",
    "Test",
    "TestDox",
    "Todo",
    # Dependency
    "DependencyMetadata",
    "DependsOnClass",
    "DependsOnMethod",
    # Requirements
    "RequirementMetadata",
    "RequiresPython",
    "RequiresFramework",
    "RequiresPackage",
    "RequiresOperatingSystem",
    "RequiresOperatingSystemFamily",
    "RequiresSetting",
    "RequiresFunction",
    "RequiresMethod",
    # Process isolation
    "IsolationMetadata",
    "RunInSeparateProcess",
    "RunClassInSeparateProcess",
    "RunTestsInSeparateProcesses",
    "PreserveGlobalState",
    # Data and assertions
    "DataMetadata",
    "DataProvider",
    "TestWith",
    "DoesNotPerformAssertions",
]
