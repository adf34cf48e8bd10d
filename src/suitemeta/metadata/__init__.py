"""
Normalized test metadata.

This package re-exports every metadata variant, the master ``Metadata`` union,
the ordered :class:`MetadataCollection` and the version-requirement model, so
consumers can write ``from suitemeta.metadata import Group, MetadataCollection``.
"""

from __future__ import annotations

from suitemeta.metadata.base import FAMILY_KINDS, MetadataFamily, MetadataMixin
from suitemeta.metadata.collection import MetadataCollection
from suitemeta.metadata.data import freeze_data
from suitemeta.metadata.types import (
    Metadata,
    After,
    AfterClass,
    BackupGlobals,
    BackupMetadata,
    BackupStaticProperties,
    Before,
    BeforeClass,
    ClassificationMetadata,
    CodeCoverageIgnore,
    CoverageMetadata,
    Covers,
    CoversClass,
    CoversDefaultClass,
    CoversFunction,
    CoversMethod,
    CoversNothing,
    DataMetadata,
    DataProvider,
    DependencyMetadata,
    DependsOnClass,
    DependsOnMethod,
    DoesNotPerformAssertions,
    ExcludeGlobalVariableFromBackup,
    ExcludeStaticPropertyFromBackup,
    Group,
    IsolationMetadata,
    LifecycleMetadata,
    PostCondition,
    PreCondition,
    PreserveGlobalState,
    RequirementMetadata,
    RequiresFramework,
    RequiresFunction,
    RequiresMethod,
    RequiresOperatingSystem,
    RequiresOperatingSystemFamily,
    RequiresPackage,
    RequiresPython,
    RequiresSetting,
    RunClassInSeparateProcess,
    RunInSeparateProcess,
    RunTestsInSeparateProcesses,
    Test,
    TestDox,
    TestWith,
    Todo,
    Uses,
    UsesClass,
    UsesDefaultClass,
    UsesFunction,
    UsesMethod,
)
from suitemeta.metadata.version import (
    ComparisonRequirement,
    ConstraintRequirement,
    VersionComparisonOperator,
    VersionRequirement,
    parse_version_requirement,
)

__all__ = [
    "Metadata",
    "MetadataCollection",
    "MetadataFamily",
    "MetadataMixin",
    "FAMILY_KINDS",
    "ComparisonRequirement",
    "ConstraintRequirement",
    "VersionComparisonOperator",
    "VersionRequirement",
    "parse_version_requirement",
    "freeze_data",
    "After",
    "AfterClass",
    "BackupGlobals",
    "BackupMetadata",
    "BackupStaticProperties",
    "Before",
    "BeforeClass",
    "ClassificationMetadata",
    "CodeCoverageIgnore",
    "CoverageMetadata",
    "Covers",
    "CoversClass",
    "CoversDefaultClass",
    "CoversFunction",
    "CoversMethod",
    "CoversNothing",
    "DataMetadata",
    "DataProvider",
    "DependencyMetadata",
    "DependsOnClass",
    "DependsOnMethod",
    "DoesNotPerformAssertions",
    "ExcludeGlobalVariableFromBackup",
    "ExcludeStaticPropertyFromBackup",
    "Group",
    "IsolationMetadata",
    "LifecycleMetadata",
    "PostCondition",
    "PreCondition",
    "PreserveGlobalState",
    "RequirementMetadata",
    "RequiresFramework",
    "RequiresFunction",
    "RequiresMethod",
    "RequiresOperatingSystem",
    "RequiresOperatingSystemFamily",
    "RequiresPackage",
    "RequiresPython",
    "RequiresSetting",
    "RunClassInSeparateProcess",
    "RunInSeparateProcess",
    "RunTestsInSeparateProcesses",
    "Test",
    "TestDox",
    "TestWith",
    "Todo",
    "Uses",
    "UsesClass",
    "UsesDefaultClass",
    "UsesFunction",
    "UsesMethod",
]
