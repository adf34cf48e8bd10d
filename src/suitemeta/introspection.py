"""
Enumerate the declarations attached to test classes and methods.

Declarations are plain objects recorded on the decorated class or function, in
source order (the top-most decorator first). Each one is reported as a
:class:`Declaration` whose ``name`` is the fully qualified name of its type;
the parser uses that name to decide whether the declaration belongs to the
suitemeta namespace.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Final, TypeVar

from suitemeta.errors import MethodNotFound
from suitemeta.result import Failure, Result, Success


DECLARATIONS_ATTRIBUTE: Final = "__suitemeta_declarations__"

T = TypeVar("T")


@dataclass(frozen=True)
class Declaration:
    """One raw declaration as seen by the parser."""

    name: str
    instance: object

    def new_instance(self) -> object:
        return self.instance


def qualified_name(obj: object) -> str:
    """Return ``module.QualName`` for a class or function."""
    module = getattr(obj, "__module__", None)
    qualname = getattr(obj, "__qualname__", None)
    if not isinstance(qualname, str):
        raise TypeError(f"{obj!r} has no qualified name")
    return qualname if module in (None, "builtins") else f"{module}.{qualname}"


def class_name_of(value: str | type) -> str:
    """Normalize a class given either by name or by the class object itself."""
    return value if isinstance(value, str) else qualified_name(value)


def _holder(target: object) -> object:
    if isinstance(target, (staticmethod, classmethod)):
        return target.__func__
    return target


def _recorded(holder: object) -> tuple[object, ...]:
    own = getattr(holder, "__dict__", {})
    recorded = own.get(DECLARATIONS_ATTRIBUTE, ())
    return tuple(recorded)


def declare(target: T, *declarations: object) -> T:
    """
    Record declarations on a class or function.

    Decorators apply bottom-up, so new declarations are placed in front of the
    ones already recorded to keep source order.

    Example:
        >>> class ExternalMarker: ...
        >>> def test_it() -> None: ...
        >>> _ = declare(test_it, ExternalMarker())
    """
    holder = _holder(target)
    setattr(holder, DECLARATIONS_ATTRIBUTE, (*declarations, *_recorded(holder)))
    return target


def _as_declarations(instances: tuple[object, ...]) -> tuple[Declaration, ...]:
    return tuple(
        Declaration(name=qualified_name(type(instance)), instance=instance)
        for instance in instances
    )


def class_declarations(test_class: type) -> tuple[Declaration, ...]:
    """Declarations recorded on the class itself; base classes are not consulted."""
    return _as_declarations(_recorded(test_class))


def method_declarations(
    test_class: type, method_name: str
) -> Result[tuple[Declaration, ...], MethodNotFound]:
    """Declarations recorded on a method, which may be inherited from a base class."""
    not_found = MethodNotFound(class_name=qualified_name(test_class), method_name=method_name)
    try:
        member = inspect.getattr_static(test_class, method_name)
    except AttributeError:
        return Failure(not_found)

    holder = _holder(member)
    if not callable(holder):
        return Failure(not_found)
    return Success(_as_declarations(_recorded(holder)))


__all__ = [
    "DECLARATIONS_ATTRIBUTE",
    "Declaration",
    "class_declarations",
    "class_name_of",
    "declare",
    "method_declarations",
    "qualified_name",
]
