# tests/helpers/__init__.py
"""Shared test utilities for the suitemeta test suite.

Usage:
    >>> from tests.helpers import expect_success, one_of_each_kind
    >>>
    >>> collection = expect_success(AttributeParser().for_class(CartTest))
    >>> mixed = MetadataCollection.from_values(one_of_each_kind())
"""

from __future__ import annotations

from tests.helpers.factories import ALL_KINDS, comparison, one_of_each_kind
from tests.helpers.result_utils import E, T, expect_failure, expect_success

__all__ = [
    # Result unwrapping
    "expect_success",
    "expect_failure",
    "T",
    "E",
    # Metadata factories
    "ALL_KINDS",
    "comparison",
    "one_of_each_kind",
]
