"""
Environmental requirement metadata.

A test whose requirements are not met is skipped by the runner; evaluating the
requirements is the runner's job; these values only record them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from suitemeta.metadata.base import MetadataMixin
from suitemeta.metadata.version import VersionRequirement


@dataclass(frozen=True)
class RequiresPython(MetadataMixin):
    """Interpreter version requirement."""

    version_requirement: VersionRequirement
    kind: Literal["RequiresPython"] = "RequiresPython"


@dataclass(frozen=True)
class RequiresFramework(MetadataMixin):
    """Requirement on the version of suitemeta itself."""

    version_requirement: VersionRequirement
    kind: Literal["RequiresFramework"] = "RequiresFramework"


@dataclass(frozen=True)
class RequiresPackage(MetadataMixin):
    """An installed distribution, optionally constrained to a version range.

    Attributes:
        kind: Discriminator for pattern matching. Always "RequiresPackage".
        package: Distribution name as published on the package index.
        version_requirement: Constraint on the installed version, or None for any.
    """

    package: str
    version_requirement: VersionRequirement | None = None
    kind: Literal["RequiresPackage"] = "RequiresPackage"

    def has_version_requirement(self) -> bool:
        return self.version_requirement is not None


@dataclass(frozen=True)
class RequiresOperatingSystem(MetadataMixin):
    """Regular expression matched against ``platform.system()``."""

    regular_expression: str
    kind: Literal["RequiresOperatingSystem"] = "RequiresOperatingSystem"


@dataclass(frozen=True)
class RequiresOperatingSystemFamily(MetadataMixin):
    operating_system_family: str
    kind: Literal["RequiresOperatingSystemFamily"] = "RequiresOperatingSystemFamily"


@dataclass(frozen=True)
class RequiresSetting(MetadataMixin):
    setting: str
    value: str
    kind: Literal["RequiresSetting"] = "RequiresSetting"


@dataclass(frozen=True)
class RequiresFunction(MetadataMixin):
    function_name: str
    kind: Literal["RequiresFunction"] = "RequiresFunction"


@dataclass(frozen=True)
class RequiresMethod(MetadataMixin):
    class_name: str
    method_name: str
    kind: Literal["RequiresMethod"] = "RequiresMethod"


RequirementMetadata = (
    RequiresPython
    | RequiresFramework
    | RequiresPackage
    | RequiresOperatingSystem
    | RequiresOperatingSystemFamily
    | RequiresSetting
    | RequiresFunction
    | RequiresMethod
)
