"""Test data and assertion-expectation metadata."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from suitemeta.metadata.base import MetadataMixin


@dataclass(frozen=True)
class DataProvider(MetadataMixin):
    """Binding to the method that supplies data sets for a test.

    Attributes:
        kind: Discriminator for pattern matching. Always "DataProvider".
        class_name: Class declaring the provider; the test class unless external.
        method_name: Name of the provider method.
    """

    class_name: str
    method_name: str
    kind: Literal["DataProvider"] = "DataProvider"


@dataclass(frozen=True)
class TestWith(MetadataMixin):
    """One inline data set; each element is one positional test argument.

    Nested containers are frozen (see :func:`freeze_data`), so the value is
    hashable and shares nothing with the declaration it came from.
    """

    data: tuple[object, ...]
    kind: Literal["TestWith"] = "TestWith"


@dataclass(frozen=True)
class DoesNotPerformAssertions(MetadataMixin):
    kind: Literal["DoesNotPerformAssertions"] = "DoesNotPerformAssertions"


def freeze_data(value: object) -> object:
    """
    Deep-copy literal test data into immutable, hashable containers.

    Lists and tuples become tuples, sets become frozensets and dicts become
    tuples of ``(key, value)`` pairs in insertion order. Scalars are returned
    as they are.

    Example:
        >>> freeze_data([1, {"a": [2]}])
        (1, (('a', (2,)),))
    """
    # List comprehensions keep one frame per nesting level.
    match value:
        case list() | tuple():
            return tuple([freeze_data(item) for item in value])
        case dict():
            return tuple([(key, freeze_data(item)) for key, item in value.items()])
        case set() | frozenset():
            return frozenset([freeze_data(item) for item in value])
        case _:
            return value


DataMetadata = DataProvider | TestWith | DoesNotPerformAssertions
