"""
Translate structured declarations (``suitemeta.attributes``) into metadata.

The translation is a lookup table from a declaration's type name, relative to
the configured namespace (``Group`` for ``suitemeta.attributes.Group``), to a
builder producing exactly one metadata value. A namespace other than the
default recognizes subclasses of the declarations defined in that module.

The class and method scopes recognize different vocabularies. A declaration
in the namespace but not in the scope's table is skipped, as is anything
outside the namespace.

Builders that parse text (version requirements, JSON data sets) can fail. A
failure aborts the parse of that class or method: the caller receives the
error and no partial collection.
"""

from __future__ import annotations

import json
import logging
from types import MappingProxyType
from typing import Callable, Final, Mapping, Sequence, TypeVar

from suitemeta import attributes as sm
from suitemeta import metadata as md
from suitemeta.config import ParserConfig
from suitemeta.errors import InvalidTestWithJson, ParseError, ParseResult
from suitemeta.introspection import (
    Declaration,
    class_declarations,
    class_name_of,
    method_declarations,
    qualified_name,
)
from suitemeta.metadata import (
    Metadata,
    MetadataCollection,
    freeze_data,
    parse_version_requirement,
)
from suitemeta.result import Failure, Result, Success, collect_results


logger = logging.getLogger(__name__)

A = TypeVar("A", bound=sm.Attribute)

Builder = Callable[[object, str, ParserConfig], Result[Metadata, ParseError]]


def _entry(
    attribute_type: type[A],
    build: Callable[[A, str, ParserConfig], Result[Metadata, ParseError]],
) -> tuple[str, Builder]:
    """Key a typed builder by the bare name of its declaration type."""

    def run(
        instance: object, class_name: str, config: ParserConfig
    ) -> Result[Metadata, ParseError]:
        if not isinstance(instance, attribute_type):
            raise TypeError(
                f"declaration {type(instance).__name__} registered as {attribute_type.__name__}"
            )
        return build(instance, class_name, config)

    return attribute_type.__name__, run


def _constant(attribute_type: type[A], value: Metadata) -> tuple[str, Builder]:
    """Parameterless declarations always map to the same metadata value."""
    return _entry(attribute_type, lambda _attribute, _class_name, _config: Success(value))


# ───────────────────────────── parsing builders ──────────────────────────────


def _exceeds_depth(value: object, max_depth: int) -> bool:
    # Iterative: payloads may nest deeper than the interpreter recursion limit.
    pending: list[tuple[object, int]] = [(value, 0)]
    while pending:
        item, depth = pending.pop()
        match item:
            case list():
                children: list[object] = list(item)
            case dict():
                children = list(item.values())
            case _:
                continue
        if depth + 1 > max_depth:
            return True
        pending.extend((child, depth + 1) for child in children)
    return False


def _data_set(values: Sequence[object]) -> tuple[object, ...]:
    return tuple([freeze_data(item) for item in values])


def decode_test_with_json(
    text: str, max_depth: int
) -> Result[tuple[object, ...], InvalidTestWithJson]:
    """
    Decode the text of a ``TestWithJson`` declaration into one data set.

    Args:
        text: JSON text; must encode an array.
        max_depth: Maximum container nesting (``[1]`` has depth 1).

    Returns:
        Success(tuple of frozen arguments) or Failure(InvalidTestWithJson)
    """
    try:
        decoded = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as exc:
        return Failure(InvalidTestWithJson(json=text, message=str(exc)))

    # Only arrays: data sets are positional. A JSON object would have to become
    # keyword arguments, which TestWith does not model.
    if not isinstance(decoded, list):
        return Failure(InvalidTestWithJson(json=text, message="expected a JSON array"))
    if _exceeds_depth(decoded, max_depth):
        return Failure(
            InvalidTestWithJson(json=text, message=f"maximum nesting depth {max_depth} exceeded")
        )
    return Success(_data_set(decoded))


def _test_with_json(
    attribute: sm.TestWithJson, _class_name: str, config: ParserConfig
) -> Result[Metadata, ParseError]:
    match decode_test_with_json(attribute.json, config.json_max_depth):
        case Success(data):
            return Success(md.TestWith(data=data))
        case Failure(error):
            return Failure(error)


def _requires_python(
    attribute: sm.RequiresPython, _class_name: str, _config: ParserConfig
) -> Result[Metadata, ParseError]:
    match parse_version_requirement(attribute.version_requirement):
        case Success(requirement):
            return Success(md.RequiresPython(version_requirement=requirement))
        case Failure(error):
            return Failure(error)


def _requires_framework(
    attribute: sm.RequiresFramework, _class_name: str, _config: ParserConfig
) -> Result[Metadata, ParseError]:
    match parse_version_requirement(attribute.version_requirement):
        case Success(requirement):
            return Success(md.RequiresFramework(version_requirement=requirement))
        case Failure(error):
            return Failure(error)


def _requires_package(
    attribute: sm.RequiresPackage, _class_name: str, _config: ParserConfig
) -> Result[Metadata, ParseError]:
    if attribute.version_requirement is None:
        return Success(md.RequiresPackage(package=attribute.package))

    match parse_version_requirement(attribute.version_requirement):
        case Success(requirement):
            return Success(
                md.RequiresPackage(package=attribute.package, version_requirement=requirement)
            )
        case Failure(error):
            return Failure(error)


# ───────────────────────────── declaration tables ────────────────────────────

_SHARED: Final[tuple[tuple[str, Builder], ...]] = (
    _entry(sm.BackupGlobals, lambda a, _c, _cfg: Success(md.BackupGlobals(enabled=a.enabled))),
    _entry(
        sm.BackupStaticProperties,
        lambda a, _c, _cfg: Success(md.BackupStaticProperties(enabled=a.enabled)),
    ),
    _constant(sm.CodeCoverageIgnore, md.CodeCoverageIgnore()),
    _constant(sm.CoversNothing, md.CoversNothing()),
    _constant(sm.DoesNotPerformAssertions, md.DoesNotPerformAssertions()),
    _entry(
        sm.ExcludeGlobalVariableFromBackup,
        lambda a, _c, _cfg: Success(
            md.ExcludeGlobalVariableFromBackup(global_variable_name=a.global_variable_name)
        ),
    ),
    _entry(
        sm.ExcludeStaticPropertyFromBackup,
        lambda a, _c, _cfg: Success(
            md.ExcludeStaticPropertyFromBackup(
                class_name=class_name_of(a.class_name), property_name=a.property_name
            )
        ),
    ),
    _entry(sm.Group, lambda a, _c, _cfg: Success(md.Group(group_name=a.name))),
    _entry(sm.Ticket, lambda a, _c, _cfg: Success(md.Group(group_name=a.text))),
    _entry(
        sm.PreserveGlobalState,
        lambda a, _c, _cfg: Success(md.PreserveGlobalState(enabled=a.enabled)),
    ),
    _entry(
        sm.RequiresMethod,
        lambda a, _c, _cfg: Success(
            md.RequiresMethod(class_name=class_name_of(a.class_name), method_name=a.method_name)
        ),
    ),
    _entry(
        sm.RequiresFunction,
        lambda a, _c, _cfg: Success(md.RequiresFunction(function_name=a.function_name)),
    ),
    _entry(
        sm.RequiresOperatingSystem,
        lambda a, _c, _cfg: Success(
            md.RequiresOperatingSystem(regular_expression=a.regular_expression)
        ),
    ),
    _entry(
        sm.RequiresOperatingSystemFamily,
        lambda a, _c, _cfg: Success(
            md.RequiresOperatingSystemFamily(operating_system_family=a.operating_system_family)
        ),
    ),
    _entry(sm.RequiresPython, _requires_python),
    _entry(sm.RequiresFramework, _requires_framework),
    _entry(sm.RequiresPackage, _requires_package),
    _entry(
        sm.RequiresSetting,
        lambda a, _c, _cfg: Success(md.RequiresSetting(setting=a.setting, value=a.value)),
    ),
    _entry(sm.TestDox, lambda a, _c, _cfg: Success(md.TestDox(text=a.text))),
)

_CLASS_ONLY: Final[tuple[tuple[str, Builder], ...]] = (
    _entry(
        sm.CoversClass,
        lambda a, _c, _cfg: Success(md.CoversClass(class_name=class_name_of(a.class_name))),
    ),
    _entry(
        sm.CoversFunction,
        lambda a, _c, _cfg: Success(md.CoversFunction(function_name=a.function_name)),
    ),
    _constant(sm.Large, md.Group(group_name="large")),
    _constant(sm.Medium, md.Group(group_name="medium")),
    _constant(sm.Small, md.Group(group_name="small")),
    _constant(sm.RunClassInSeparateProcess, md.RunClassInSeparateProcess()),
    _constant(sm.RunTestsInSeparateProcesses, md.RunTestsInSeparateProcesses()),
    _entry(
        sm.UsesClass,
        lambda a, _c, _cfg: Success(md.UsesClass(class_name=class_name_of(a.class_name))),
    ),
    _entry(
        sm.UsesFunction,
        lambda a, _c, _cfg: Success(md.UsesFunction(function_name=a.function_name)),
    ),
)

_METHOD_ONLY: Final[tuple[tuple[str, Builder], ...]] = (
    _constant(sm.After, md.After()),
    _constant(sm.AfterClass, md.AfterClass()),
    _constant(sm.Before, md.Before()),
    _constant(sm.BeforeClass, md.BeforeClass()),
    _constant(sm.PreCondition, md.PreCondition()),
    _constant(sm.PostCondition, md.PostCondition()),
    _constant(sm.RunInSeparateProcess, md.RunInSeparateProcess()),
    _constant(sm.Test, md.Test()),
    _entry(
        sm.DataProvider,
        lambda a, c, _cfg: Success(md.DataProvider(class_name=c, method_name=a.method_name)),
    ),
    _entry(
        sm.DataProviderExternal,
        lambda a, _c, _cfg: Success(
            md.DataProvider(class_name=class_name_of(a.class_name), method_name=a.method_name)
        ),
    ),
    _entry(
        sm.Depends,
        lambda a, c, _cfg: Success(md.DependsOnMethod(class_name=c, method_name=a.method_name)),
    ),
    _entry(
        sm.DependsUsingDeepClone,
        lambda a, c, _cfg: Success(
            md.DependsOnMethod(class_name=c, method_name=a.method_name, deep_clone=True)
        ),
    ),
    _entry(
        sm.DependsUsingShallowClone,
        lambda a, c, _cfg: Success(
            md.DependsOnMethod(class_name=c, method_name=a.method_name, shallow_clone=True)
        ),
    ),
    _entry(
        sm.DependsExternal,
        lambda a, _c, _cfg: Success(
            md.DependsOnMethod(class_name=class_name_of(a.class_name), method_name=a.method_name)
        ),
    ),
    _entry(
        sm.DependsExternalUsingDeepClone,
        lambda a, _c, _cfg: Success(
            md.DependsOnMethod(
                class_name=class_name_of(a.class_name),
                method_name=a.method_name,
                deep_clone=True,
            )
        ),
    ),
    _entry(
        sm.DependsExternalUsingShallowClone,
        lambda a, _c, _cfg: Success(
            md.DependsOnMethod(
                class_name=class_name_of(a.class_name),
                method_name=a.method_name,
                shallow_clone=True,
            )
        ),
    ),
    _entry(
        sm.DependsOnClass,
        lambda a, _c, _cfg: Success(md.DependsOnClass(class_name=class_name_of(a.class_name))),
    ),
    _entry(
        sm.DependsOnClassUsingDeepClone,
        lambda a, _c, _cfg: Success(
            md.DependsOnClass(class_name=class_name_of(a.class_name), deep_clone=True)
        ),
    ),
    _entry(
        sm.DependsOnClassUsingShallowClone,
        lambda a, _c, _cfg: Success(
            md.DependsOnClass(class_name=class_name_of(a.class_name), shallow_clone=True)
        ),
    ),
    _entry(sm.TestWith, lambda a, _c, _cfg: Success(md.TestWith(data=_data_set(a.data)))),
    _entry(sm.TestWithJson, _test_with_json),
)

CLASS_BUILDERS: Final[Mapping[str, Builder]] = MappingProxyType(dict(_SHARED + _CLASS_ONLY))
METHOD_BUILDERS: Final[Mapping[str, Builder]] = MappingProxyType(dict(_SHARED + _METHOD_ONLY))


# ───────────────────────────────── parser ────────────────────────────────────


class AttributeParser:
    """Metadata parser for declarations made with :mod:`suitemeta.attributes`.

    The parser holds only its immutable configuration, so one instance can be
    shared between threads parsing different classes.

    Example:
        >>> parser = AttributeParser()
        >>> match parser.for_class_and_method(CartTest, "adds_item"):
        ...     case Success(collection):
        ...         dependencies = collection.is_depends()
        ...     case Failure(error):
        ...         report(describe_parse_error(error))
    """

    def __init__(self, config: ParserConfig | None = None) -> None:
        self._config = config if config is not None else ParserConfig()

    @property
    def config(self) -> ParserConfig:
        return self._config

    def for_class(self, test_class: type) -> ParseResult[MetadataCollection]:
        return self._translate(
            class_declarations(test_class), CLASS_BUILDERS, qualified_name(test_class)
        )

    def for_method(self, test_class: type, method_name: str) -> ParseResult[MetadataCollection]:
        class_name = qualified_name(test_class)
        match method_declarations(test_class, method_name):
            case Success(declarations):
                return self._translate(declarations, METHOD_BUILDERS, class_name)
            case Failure(error):
                return Failure(error)

    def for_class_and_method(
        self, test_class: type, method_name: str
    ) -> ParseResult[MetadataCollection]:
        """Class-level metadata followed by method-level metadata."""
        return self.for_class(test_class).flat_map(
            lambda class_level: self.for_method(test_class, method_name).map(class_level.merge_with)
        )

    def _builder_for(
        self, declaration: Declaration, builders: Mapping[str, Builder], class_name: str
    ) -> Builder | None:
        namespace = self._config.namespace
        if not declaration.name.startswith(namespace):
            logger.debug("Ignoring foreign declaration %s on %s", declaration.name, class_name)
            return None
        builder = builders.get(declaration.name.removeprefix(namespace))
        if builder is None:
            logger.debug(
                "Skipping declaration %s on %s: not recognized in this scope",
                declaration.name,
                class_name,
            )
        return builder

    def _translate(
        self,
        declarations: tuple[Declaration, ...],
        builders: Mapping[str, Builder],
        class_name: str,
    ) -> ParseResult[MetadataCollection]:
        results: list[Result[Metadata, ParseError]] = []
        for declaration in declarations:
            builder = self._builder_for(declaration, builders, class_name)
            if builder is not None:
                results.append(builder(declaration.new_instance(), class_name, self._config))
        return collect_results(results).map(MetadataCollection.from_values)


__all__ = [
    "AttributeParser",
    "CLASS_BUILDERS",
    "METHOD_BUILDERS",
    "decode_test_with_json",
]
