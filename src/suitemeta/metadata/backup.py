"""Backup control metadata for module globals and class attributes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from suitemeta.metadata.base import MetadataMixin


@dataclass(frozen=True)
class BackupGlobals(MetadataMixin):
    """Snapshot and restore global variables around each test."""

    enabled: bool
    kind: Literal["BackupGlobals"] = "BackupGlobals"


@dataclass(frozen=True)
class BackupStaticProperties(MetadataMixin):
    """Snapshot and restore class attributes around each test."""

    enabled: bool
    kind: Literal["BackupStaticProperties"] = "BackupStaticProperties"


@dataclass(frozen=True)
class ExcludeGlobalVariableFromBackup(MetadataMixin):
    global_variable_name: str
    kind: Literal["ExcludeGlobalVariableFromBackup"] = "ExcludeGlobalVariableFromBackup"


@dataclass(frozen=True)
class ExcludeStaticPropertyFromBackup(MetadataMixin):
    class_name: str
    property_name: str
    kind: Literal["ExcludeStaticPropertyFromBackup"] = "ExcludeStaticPropertyFromBackup"


BackupMetadata = (
    BackupGlobals
    | BackupStaticProperties
    | ExcludeGlobalVariableFromBackup
    | ExcludeStaticPropertyFromBackup
)
