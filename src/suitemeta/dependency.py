"""
Dependency descriptors and the set operations a scheduler runs over them.

A :class:`TestDependency` names the test (``Class::method``) or the whole class
(``Class::class``) that must pass before the dependent test runs, plus how the
depended-upon result is handed over (original, deep copy, shallow copy).

Two descriptors are the same dependency iff their target strings are equal;
clone mode and the declaration style that produced them do not matter. The
algebra below (:func:`filter_invalid`, :func:`merge_unique`, :func:`diff`) is
built on that identity and always preserves input order.

Example:
    >>> declared = [create_from_annotation_text("shop.CartTest", "clone creates_cart")]
    >>> passed = [create_dependency("shop.CartTest", "creates_cart")]
    >>> diff(filter_invalid(declared), passed)
    ()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final, Iterable, Sequence

from suitemeta.metadata import (
    DependencyMetadata,
    DependsOnClass,
    DependsOnMethod,
    MetadataCollection,
)


logger = logging.getLogger(__name__)

TARGET_SEPARATOR: Final = "::"
CLASS_TARGET: Final = "class"
DEEP_CLONE_OPTION: Final = "clone"
SHALLOW_CLONE_OPTION: Final = "shallowClone"


@dataclass(frozen=True)
class TestDependency:
    """One declared dependency edge.

    Attributes:
        class_name: Class containing the target; empty for invalid declarations.
        method_name: Target method, or ``"class"`` for the whole class.
        use_shallow_clone: Hand over a shallow copy of the target's result.
        use_deep_clone: Hand over a deep copy of the target's result.
    """

    __test__ = False

    class_name: str = ""
    method_name: str = ""
    use_shallow_clone: bool = False
    use_deep_clone: bool = False

    def is_valid(self) -> bool:
        # Invalid dependencies can be declared; the runner skips them.
        return self.class_name != "" and self.method_name != ""

    def target_is_class(self) -> bool:
        return self.method_name == CLASS_TARGET

    @property
    def target_class_name(self) -> str:
        return self.class_name

    def get_target(self) -> str:
        """``Class::member`` for valid descriptors, ``""`` otherwise."""
        return f"{self.class_name}{TARGET_SEPARATOR}{self.method_name}" if self.is_valid() else ""

    @property
    def target(self) -> str:
        return self.get_target()

    def __str__(self) -> str:
        return self.get_target()


def create_dependency(
    class_or_target: str, method_name: str | None = None, option: str | None = None
) -> TestDependency:
    """
    Build a descriptor from a class name and method, or from a qualified target.

    Args:
        class_or_target: Class name, or ``Class::member`` when no method is given.
        method_name: Target method; when empty the member comes from
            ``class_or_target`` or defaults to the whole class.
        option: ``"clone"`` for a deep copy, ``"shallowClone"`` for a shallow copy;
            any other value means no copy.
    """
    if class_or_target == "":
        return TestDependency()

    if method_name:
        class_name, member = class_or_target, method_name
    elif TARGET_SEPARATOR in class_or_target:
        class_name, member = class_or_target.split(TARGET_SEPARATOR)[:2]
    else:
        class_name, member = class_or_target, CLASS_TARGET

    return TestDependency(
        class_name=class_name,
        method_name=member,
        use_shallow_clone=option == SHALLOW_CLONE_OPTION,
        use_deep_clone=option == DEEP_CLONE_OPTION,
    )


def _names_class(target: str) -> bool:
    return "." in target or target[:1].isupper()


def create_from_annotation_text(class_name: str, annotation: str) -> TestDependency:
    """
    Parse a doc-comment dependency declaration of the form ``[option ]target``.

    A target without ``::`` is read as a class when it is dotted or starts with
    an uppercase letter, and then means every test of that class. Anything else
    is a method of ``class_name``. A method whose name starts with an uppercase
    letter must therefore be written ``Class::Method``.

    Example:
        >>> create_from_annotation_text("Foo", "shallowClone Bar").get_target()
        'Bar::class'
    """
    parts = annotation.strip().split(" ", 1)
    if len(parts) == 1:
        clone_option, target = "", parts[0]
    else:
        clone_option, target = parts

    if target != "" and TARGET_SEPARATOR not in target and not _names_class(target):
        target = f"{class_name}{TARGET_SEPARATOR}{target}"

    return create_dependency(target, None, clone_option)


def dependency_from_metadata(metadata: DependencyMetadata) -> TestDependency:
    """Descriptor for a ``DependsOnMethod`` / ``DependsOnClass`` metadata value."""
    match metadata:
        case DependsOnMethod(class_name=class_name, method_name=method_name):
            member = method_name
        case DependsOnClass(class_name=class_name):
            member = CLASS_TARGET
    if class_name == "" or member == "":
        return TestDependency()
    return TestDependency(
        class_name=class_name,
        method_name=member,
        use_shallow_clone=metadata.shallow_clone,
        use_deep_clone=metadata.deep_clone,
    )


def dependencies_from_collection(collection: MetadataCollection) -> tuple[TestDependency, ...]:
    """Descriptors for every dependency in ``collection``, in declaration order."""
    return tuple(
        dependency_from_metadata(metadata)
        for metadata in collection.is_depends()
        if isinstance(metadata, (DependsOnMethod, DependsOnClass))
    )


def filter_invalid(dependencies: Iterable[TestDependency]) -> tuple[TestDependency, ...]:
    """Drop descriptors with an empty class or member, keeping order."""
    valid: list[TestDependency] = []
    for dependency in dependencies:
        if dependency.is_valid():
            valid.append(dependency)
        else:
            logger.debug("Dropping invalid dependency %r", dependency)
    return tuple(valid)


def merge_unique(
    existing: Sequence[TestDependency], additional: Iterable[TestDependency]
) -> tuple[TestDependency, ...]:
    """
    Append the descriptors of ``additional`` whose targets are not yet present.

    The first descriptor seen for a target wins, including its clone mode.
    """
    targets = {dependency.get_target() for dependency in existing}
    merged = list(existing)
    for dependency in additional:
        if dependency.get_target() not in targets:
            targets.add(dependency.get_target())
            merged.append(dependency)
    return tuple(merged)


def diff(
    left: Sequence[TestDependency], right: Sequence[TestDependency]
) -> tuple[TestDependency, ...]:
    """Descriptors of ``left`` whose targets do not occur in ``right``, in order."""
    if not right:
        return tuple(left)

    right_targets = {dependency.get_target() for dependency in right}
    return tuple(dependency for dependency in left if dependency.get_target() not in right_targets)


__all__ = [
    "CLASS_TARGET",
    "TARGET_SEPARATOR",
    "TestDependency",
    "create_dependency",
    "create_from_annotation_text",
    "dependencies_from_collection",
    "dependency_from_metadata",
    "diff",
    "filter_invalid",
    "merge_unique",
]
