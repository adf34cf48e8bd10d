"""
Kind and family classification shared by every metadata variant.

Each variant is a frozen dataclass with a ``kind`` Literal discriminator. The
mixin below derives every "is this kind X?" question from that single tag, so
no variant needs its own predicate methods.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Literal, Mapping


MetadataFamily = Literal[
    "lifecycle",
    "backup",
    "coverage",
    "classification",
    "dependency",
    "requirement",
    "isolation",
    "misc",
]

FAMILY_KINDS: Final[Mapping[MetadataFamily, frozenset[str]]] = MappingProxyType(
    {
        "lifecycle": frozenset(
            {"Before", "After", "BeforeClass", "AfterClass", "PreCondition", "PostCondition"}
        ),
        "backup": frozenset(
            {
                "BackupGlobals",
                "BackupStaticProperties",
                "ExcludeGlobalVariableFromBackup",
                "ExcludeStaticPropertyFromBackup",
            }
        ),
        "coverage": frozenset(
            {
                "CodeCoverageIgnore",
                "Covers",
                "CoversClass",
                "CoversDefaultClass",
                "CoversFunction",
                "CoversMethod",
                "CoversNothing",
                "Uses",
                "UsesClass",
                "UsesDefaultClass",
                "UsesFunction",
                "UsesMethod",
            }
        ),
        "classification": frozenset({"Group", "Test", "TestDox", "Todo"}),
        "dependency": frozenset({"DependsOnClass", "DependsOnMethod"}),
        "requirement": frozenset(
            {
                "RequiresFramework",
                "RequiresFunction",
                "RequiresMethod",
                "RequiresOperatingSystem",
                "RequiresOperatingSystemFamily",
                "RequiresPackage",
                "RequiresPython",
                "RequiresSetting",
            }
        ),
        "isolation": frozenset(
            {
                "PreserveGlobalState",
                "RunClassInSeparateProcess",
                "RunInSeparateProcess",
                "RunTestsInSeparateProcesses",
            }
        ),
        "misc": frozenset({"DataProvider", "DoesNotPerformAssertions", "TestWith"}),
    }
)

_KIND_FAMILY: Final[Mapping[str, MetadataFamily]] = MappingProxyType(
    {kind: family for family, kinds in FAMILY_KINDS.items() for kind in kinds}
)


class MetadataMixin:
    """Predicates shared by all metadata variants."""

    # Variants are named Test, TestDox, TestWith...; keep pytest from collecting them.
    __test__ = False

    kind: str

    def is_kind(self, *kinds: str) -> bool:
        return self.kind in kinds

    def family(self) -> MetadataFamily:
        return _KIND_FAMILY[self.kind]

    def is_lifecycle(self) -> bool:
        return self.family() == "lifecycle"

    def is_backup(self) -> bool:
        return self.family() == "backup"

    def is_coverage(self) -> bool:
        return self.family() == "coverage"

    def is_classification(self) -> bool:
        return self.family() == "classification"

    def is_depends(self) -> bool:
        return self.family() == "dependency"

    def is_requirement(self) -> bool:
        return self.family() == "requirement"

    def is_isolation(self) -> bool:
        return self.family() == "isolation"

    def is_misc(self) -> bool:
        return self.family() == "misc"


__all__ = ["FAMILY_KINDS", "MetadataFamily", "MetadataMixin"]
