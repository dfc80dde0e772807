"""Exact-match filter specifications for documents.

A filter is a mapping of field name to required value. Values are compared
strictly: containers only match themselves, booleans only match booleans,
and numbers compare numerically regardless of int/float.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from aidb.domain.models import Document

_CONTAINERS = (dict, list, tuple, set, frozenset, BaseModel)


def strict_equals(actual: Any, expected: Any) -> bool:
    """Compare two values without deep equality."""
    actual_is_number = isinstance(actual, int | float) and not isinstance(actual, bool)
    expected_is_number = isinstance(expected, int | float) and not isinstance(expected, bool)
    if actual_is_number and expected_is_number:
        return actual == expected

    if actual is expected:
        return True

    if isinstance(actual, _CONTAINERS) or isinstance(expected, _CONTAINERS):
        return False

    return type(actual) is type(expected) and actual == expected


class ExactMatchSpecification:
    """Satisfied when every filter entry strictly equals the document's field.

    A document lacking a filtered field never satisfies the specification.
    """

    def __init__(self, filter: Mapping[str, Any] | None = None) -> None:
        self.filter = dict(filter or {})

    def fields_of(self, document: Document) -> Mapping[str, Any]:
        """The fields of a document that the filter is applied to."""
        return document.top_level_fields()

    def is_satisfied_by(self, document: Document) -> bool:
        if not self.filter:
            return True

        fields = self.fields_of(document)
        return all(
            key in fields and strict_equals(fields[key], value)
            for key, value in self.filter.items()
        )


class DataMatchSpecification(ExactMatchSpecification):
    """Exact match against the document's ``data`` attributes instead of its top-level fields."""

    def fields_of(self, document: Document) -> Mapping[str, Any]:
        return document.data
