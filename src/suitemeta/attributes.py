"""
Structured declarations for test classes and test methods.

Every class in this module is a decorator: applying an instance records it on
the decorated class or function, where the attribute parser later finds it and
translates it into metadata.

Example:
    >>> from suitemeta import attributes as sm
    >>>
    >>> @sm.Group("integration")
    ... @sm.CoversClass("shop.cart.Cart")
    ... class CartTest:
    ...     @sm.Test()
    ...     def creates_cart(self) -> list[str]:
    ...         return []
    ...
    ...     @sm.Test()
    ...     @sm.Depends("creates_cart")
    ...     def adds_item(self, cart: list[str]) -> None:
    ...         cart.append("book")

Class-valued parameters accept either the class object or its qualified name.
Only declarations whose type lives in this module are recognized; anything
else recorded on a test is ignored by the parser.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, TypeVar

from suitemeta.introspection import declare


T = TypeVar("T")


class Attribute:
    """Base for all suitemeta declarations."""

    __test__ = False

    def __call__(self, target: T) -> T:
        return declare(target, self)


# ─────────────────────────────── lifecycle hooks ─────────────────────────────


@dataclass(frozen=True)
class Before(Attribute):
    pass


@dataclass(frozen=True)
class After(Attribute):
    pass


@dataclass(frozen=True)
class BeforeClass(Attribute):
    pass


@dataclass(frozen=True)
class AfterClass(Attribute):
    pass


@dataclass(frozen=True)
class PreCondition(Attribute):
    pass


@dataclass(frozen=True)
class PostCondition(Attribute):
    pass


# ─────────────────────────────── backup control ──────────────────────────────


@dataclass(frozen=True)
class BackupGlobals(Attribute):
    enabled: bool


@dataclass(frozen=True)
class BackupStaticProperties(Attribute):
    enabled: bool


@dataclass(frozen=True)
class ExcludeGlobalVariableFromBackup(Attribute):
    global_variable_name: str


@dataclass(frozen=True)
class ExcludeStaticPropertyFromBackup(Attribute):
    class_name: str | type
    property_name: str


# ─────────────────────────────── coverage intent ─────────────────────────────


@dataclass(frozen=True)
class CoversClass(Attribute):
    class_name: str | type


@dataclass(frozen=True)
class CoversFunction(Attribute):
    function_name: str


@dataclass(frozen=True)
class CoversNothing(Attribute):
    pass


@dataclass(frozen=True)
class CodeCoverageIgnore(Attribute):
    pass


@dataclass(frozen=True)
class UsesClass(Attribute):
    class_name: str | type


@dataclass(frozen=True)
class UsesFunction(Attribute):
    function_name: str


# ─────────────────────────────── classification ──────────────────────────────


@dataclass(frozen=True)
class Group(Attribute):
    name: str


@dataclass(frozen=True)
class Small(Attribute):
    """Shorthand for ``Group("small")``."""


@dataclass(frozen=True)
class Medium(Attribute):
    """Shorthand for ``Group("medium")``."""


@dataclass(frozen=True)
class Large(Attribute):
    """Shorthand for ``Group("large")``."""


@dataclass(frozen=True)
class Ticket(Attribute):
    """Issue-tracker reference; tests are grouped by ticket text."""

    text: str


@dataclass(frozen=True)
class TestDox(Attribute):
    text: str


@dataclass(frozen=True)
class Test(Attribute):
    """Mark a method as a test regardless of its name."""


# ──────────────────────────────── dependencies ───────────────────────────────
# Plain forms resolve the method against the class being parsed; "External"
# forms name the class explicitly.


@dataclass(frozen=True)
class Depends(Attribute):
    method_name: str


@dataclass(frozen=True)
class DependsUsingDeepClone(Attribute):
    method_name: str


@dataclass(frozen=True)
class DependsUsingShallowClone(Attribute):
    method_name: str


@dataclass(frozen=True)
class DependsExternal(Attribute):
    class_name: str | type
    method_name: str


@dataclass(frozen=True)
class DependsExternalUsingDeepClone(Attribute):
    class_name: str | type
    method_name: str


@dataclass(frozen=True)
class DependsExternalUsingShallowClone(Attribute):
    class_name: str | type
    method_name: str


@dataclass(frozen=True)
class DependsOnClass(Attribute):
    class_name: str | type


@dataclass(frozen=True)
class DependsOnClassUsingDeepClone(Attribute):
    class_name: str | type


@dataclass(frozen=True)
class DependsOnClassUsingShallowClone(Attribute):
    class_name: str | type


# ─────────────────────────────── test data ───────────────────────────────────


@dataclass(frozen=True)
class DataProvider(Attribute):
    method_name: str


@dataclass(frozen=True)
class DataProviderExternal(Attribute):
    class_name: str | type
    method_name: str


@dataclass(frozen=True)
class TestWith(Attribute):
    """One inline data set, passed to the test as positional arguments."""

    data: Sequence[object]


@dataclass(frozen=True)
class TestWithJson(Attribute):
    """One inline data set encoded as a JSON array."""

    json: str


@dataclass(frozen=True)
class DoesNotPerformAssertions(Attribute):
    pass


# ──────────────────────────── environment requirements ───────────────────────


@dataclass(frozen=True)
class RequiresPython(Attribute):
    """Interpreter version, e.g. ``">=3.12"`` or ``"< 3.14"``."""

    version_requirement: str


@dataclass(frozen=True)
class RequiresFramework(Attribute):
    version_requirement: str


@dataclass(frozen=True)
class RequiresPackage(Attribute):
    package: str
    version_requirement: str | None = None

    def has_version_requirement(self) -> bool:
        return self.version_requirement is not None


@dataclass(frozen=True)
class RequiresOperatingSystem(Attribute):
    regular_expression: str


@dataclass(frozen=True)
class RequiresOperatingSystemFamily(Attribute):
    operating_system_family: str


@dataclass(frozen=True)
class RequiresSetting(Attribute):
    setting: str
    value: str


@dataclass(frozen=True)
class RequiresFunction(Attribute):
    function_name: str


@dataclass(frozen=True)
class RequiresMethod(Attribute):
    class_name: str | type
    method_name: str


# ───────────────────────────── process isolation ─────────────────────────────


@dataclass(frozen=True)
class RunInSeparateProcess(Attribute):
    pass


@dataclass(frozen=True)
class RunClassInSeparateProcess(Attribute):
    pass


@dataclass(frozen=True)
class RunTestsInSeparateProcesses(Attribute):
    pass


@dataclass(frozen=True)
class PreserveGlobalState(Attribute):
    enabled: bool
