"""
Version requirements attached to RequiresPython, RequiresFramework and
RequiresPackage metadata.

A declaration's raw requirement string is parsed once, when the declaration is
translated into metadata, into one of two shapes:

* :class:`ConstraintRequirement` - a PEP 440 specifier set such as
  ``>=3.11,<4`` or ``~=3.12``.
* :class:`ComparisonRequirement` - the legacy ``operator version`` shape such as
  ``>= 8.1`` or ``<> 1.0``. A bare version (``3.12``) implies ``>=``.

Anything else is an :class:`~suitemeta.errors.InvalidVersionRequirement`.
"""

from __future__ import annotations

import operator
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Final, Literal

from packaging.specifiers import InvalidSpecifier, SpecifierSet
from packaging.version import InvalidVersion, Version

from suitemeta.errors import InvalidVersionRequirement
from suitemeta.result import Failure, Result, Success


_VERSION_COMPARISON: Final = re.compile(
    r"^(?P<operator>!=|<>|<=|>=|==|<|>|=)?"
    r"(?P<version>[\d.\-]+(?:dev|(?:RC|alpha|beta)[\d.])?)$"
)


class VersionComparisonOperator(str, Enum):
    """Operators accepted by the ``operator version`` requirement shape."""

    lt = "<"
    le = "<="
    gt = ">"
    ge = ">="
    eq = "=="
    ne = "!="

    @classmethod
    def from_symbol(cls, symbol: str) -> VersionComparisonOperator:
        """Normalize legacy spellings (``=``, ``<>``, ``ge``...) to an operator."""
        return cls(_OPERATOR_ALIASES.get(symbol, symbol))

    def compare(self, left: Version, right: Version) -> bool:
        return _OPERATOR_FUNCTIONS[self](left, right)


_OPERATOR_ALIASES: Final[dict[str, str]] = {
    "=": "==",
    "<>": "!=",
    "lt": "<",
    "le": "<=",
    "gt": ">",
    "ge": ">=",
    "eq": "==",
    "ne": "!=",
}

_OPERATOR_FUNCTIONS: Final[dict[VersionComparisonOperator, Callable[[Version, Version], bool]]] = {
    VersionComparisonOperator.lt: operator.lt,
    VersionComparisonOperator.le: operator.le,
    VersionComparisonOperator.gt: operator.gt,
    VersionComparisonOperator.ge: operator.ge,
    VersionComparisonOperator.eq: operator.eq,
    VersionComparisonOperator.ne: operator.ne,
}


@dataclass(frozen=True)
class ComparisonRequirement:
    """A single ``operator version`` comparison."""

    version: str
    operator: VersionComparisonOperator = VersionComparisonOperator.ge
    kind: Literal["ComparisonRequirement"] = "ComparisonRequirement"

    def is_satisfied_by(self, version: str) -> bool:
        """
        Check an installed version against this requirement.

        Raises:
            packaging.version.InvalidVersion: If ``version`` is not PEP 440.
        """
        return self.operator.compare(Version(version), Version(self.version))

    def as_string(self) -> str:
        return f"{self.operator.value} {self.version}"


@dataclass(frozen=True)
class ConstraintRequirement:
    """A PEP 440 specifier set."""

    specifiers: SpecifierSet
    kind: Literal["ConstraintRequirement"] = "ConstraintRequirement"

    def is_satisfied_by(self, version: str) -> bool:
        """
        Check an installed version against this requirement.

        Pre-releases are considered, since requirements are declared against
        interpreters and frameworks that are routinely tested in beta.

        Raises:
            packaging.version.InvalidVersion: If ``version`` is not PEP 440.
        """
        return self.specifiers.contains(Version(version), prereleases=True)

    def as_string(self) -> str:
        return str(self.specifiers)


VersionRequirement = ConstraintRequirement | ComparisonRequirement


def parse_version_requirement(
    requirement: str,
) -> Result[VersionRequirement, InvalidVersionRequirement]:
    """
    Parse a declared version requirement.

    Args:
        requirement: Raw requirement text from a declaration.

    Returns:
        Success(requirement) or Failure(InvalidVersionRequirement) for text that
        is neither a specifier set nor an ``operator version`` comparison.
    """
    if requirement.strip() == "":
        return Failure(InvalidVersionRequirement(requirement=requirement))

    try:
        return Success(ConstraintRequirement(specifiers=SpecifierSet(requirement)))
    except InvalidSpecifier:
        pass

    match_ = _VERSION_COMPARISON.match(re.sub(r"\s+", "", requirement))
    if match_ is None:
        return Failure(InvalidVersionRequirement(requirement=requirement))

    version = match_.group("version")
    try:
        Version(version)
    except InvalidVersion:
        return Failure(InvalidVersionRequirement(requirement=requirement))

    return Success(
        ComparisonRequirement(
            version=version,
            operator=VersionComparisonOperator.from_symbol(match_.group("operator") or ">="),
        )
    )


__all__ = [
    "ComparisonRequirement",
    "ConstraintRequirement",
    "VersionComparisonOperator",
    "VersionRequirement",
    "parse_version_requirement",
]
