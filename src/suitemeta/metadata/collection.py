"""
Ordered, immutable collection of metadata values.

A collection keeps declaration order and allows duplicates. After
:meth:`MetadataCollection.merge_with`, class-level metadata precedes
method-level metadata. Every operation returns a new collection; filtering
never reorders the surviving elements.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from suitemeta.metadata.types import Metadata


@dataclass(frozen=True)
class MetadataCollection:
    """Immutable sequence of :data:`~suitemeta.metadata.types.Metadata` values.

    Example:
        >>> collection = MetadataCollection.from_values([Group("slow"), Test()])
        >>> [m.kind for m in collection.is_group()]
        ['Group']
    """

    items: tuple[Metadata, ...] = ()

    @classmethod
    def from_values(cls, values: Iterable[Metadata]) -> MetadataCollection:
        return cls(items=tuple(values))

    @classmethod
    def empty(cls) -> MetadataCollection:
        return cls()

    def as_tuple(self) -> tuple[Metadata, ...]:
        return self.items

    def count(self) -> int:
        return len(self.items)

    def is_empty(self) -> bool:
        return not self.items

    def is_not_empty(self) -> bool:
        return bool(self.items)

    def merge_with(self, other: MetadataCollection) -> MetadataCollection:
        """Return ``self`` followed by ``other``, each side in its own order."""
        return MetadataCollection(items=self.items + other.items)

    def of_kind(self, *kinds: str) -> MetadataCollection:
        """Return the members whose ``kind`` is one of ``kinds``, in order."""
        return MetadataCollection(items=tuple(m for m in self.items if m.kind in kinds))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Metadata]:
        return iter(self.items)

    def __getitem__(self, index: int) -> Metadata:
        return self.items[index]

    def __contains__(self, value: object) -> bool:
        return value in self.items

    # ................................ lifecycle ..............................

    def is_before(self) -> MetadataCollection:
        return self.of_kind("Before")

    def is_after(self) -> MetadataCollection:
        return self.of_kind("After")

    def is_before_class(self) -> MetadataCollection:
        return self.of_kind("BeforeClass")

    def is_after_class(self) -> MetadataCollection:
        return self.of_kind("AfterClass")

    def is_pre_condition(self) -> MetadataCollection:
        return self.of_kind("PreCondition")

    def is_post_condition(self) -> MetadataCollection:
        return self.of_kind("PostCondition")

    # ................................ backup .................................

    def is_backup_globals(self) -> MetadataCollection:
        return self.of_kind("BackupGlobals")

    def is_backup_static_properties(self) -> MetadataCollection:
        return self.of_kind("BackupStaticProperties")

    def is_exclude_global_variable_from_backup(self) -> MetadataCollection:
        return self.of_kind("ExcludeGlobalVariableFromBackup")

    def is_exclude_static_property_from_backup(self) -> MetadataCollection:
        return self.of_kind("ExcludeStaticPropertyFromBackup")

    # ................................ coverage ...............................

    def is_covers(self) -> MetadataCollection:
        return self.of_kind("Covers")

    def is_covers_class(self) -> MetadataCollection:
        return self.of_kind("CoversClass")

    def is_covers_default_class(self) -> MetadataCollection:
        return self.of_kind("CoversDefaultClass")

    def is_covers_function(self) -> MetadataCollection:
        return self.of_kind("CoversFunction")

    def is_covers_method(self) -> MetadataCollection:
        return self.of_kind("CoversMethod")

    def is_covers_nothing(self) -> MetadataCollection:
        return self.of_kind("CoversNothing")

    def is_code_coverage_ignore(self) -> MetadataCollection:
        return self.of_kind("CodeCoverageIgnore")

    def is_uses(self) -> MetadataCollection:
        return self.of_kind("Uses")

    def is_uses_class(self) -> MetadataCollection:
        return self.of_kind("UsesClass")

    def is_uses_default_class(self) -> MetadataCollection:
        return self.of_kind("UsesDefaultClass")

    def is_uses_function(self) -> MetadataCollection:
        return self.of_kind("UsesFunction")

    def is_uses_method(self) -> MetadataCollection:
        return self.of_kind("UsesMethod")

    # ............................. classification ............................

    def is_group(self) -> MetadataCollection:
        return self.of_kind("Group")

    def is_test_dox(self) -> MetadataCollection:
        return self.of_kind("TestDox")

    def is_test(self) -> MetadataCollection:
        return self.of_kind("Test")

    def is_todo(self) -> MetadataCollection:
        return self.of_kind("Todo")

    # ............................... dependency ..............................

    def is_depends(self) -> MetadataCollection:
        """Dependencies of either kind, class-level and method-level interleaved as declared."""
        return self.of_kind("DependsOnClass", "DependsOnMethod")

    def is_depends_on_class(self) -> MetadataCollection:
        return self.of_kind("DependsOnClass")

    def is_depends_on_method(self) -> MetadataCollection:
        return self.of_kind("DependsOnMethod")

    # .............................. requirements .............................

    def is_requires_python(self) -> MetadataCollection:
        return self.of_kind("RequiresPython")

    def is_requires_framework(self) -> MetadataCollection:
        return self.of_kind("RequiresFramework")

    def is_requires_package(self) -> MetadataCollection:
        return self.of_kind("RequiresPackage")

    def is_requires_operating_system(self) -> MetadataCollection:
        return self.of_kind("RequiresOperatingSystem")

    def is_requires_operating_system_family(self) -> MetadataCollection:
        return self.of_kind("RequiresOperatingSystemFamily")

    def is_requires_setting(self) -> MetadataCollection:
        return self.of_kind("RequiresSetting")

    def is_requires_function(self) -> MetadataCollection:
        return self.of_kind("RequiresFunction")

    def is_requires_method(self) -> MetadataCollection:
        return self.of_kind("RequiresMethod")

    # ............................ process isolation ..........................

    def is_run_in_separate_process(self) -> MetadataCollection:
        return self.of_kind("RunInSeparateProcess")

    def is_run_class_in_separate_process(self) -> MetadataCollection:
        return self.of_kind("RunClassInSeparateProcess")

    def is_run_tests_in_separate_processes(self) -> MetadataCollection:
        return self.of_kind("RunTestsInSeparateProcesses")

    def is_preserve_global_state(self) -> MetadataCollection:
        return self.of_kind("PreserveGlobalState")

    # ................................. data ..................................

    def is_data_provider(self) -> MetadataCollection:
        return self.of_kind("DataProvider")

    def is_test_with(self) -> MetadataCollection:
        return self.of_kind("TestWith")

    def is_does_not_perform_assertions(self) -> MetadataCollection:
        return self.of_kind("DoesNotPerformAssertions")


__all__ = ["MetadataCollection"]
