#!/usr/bin/env python3
"""
Field Lookup - Typed access to open-ended proposal documents.

Proposal documents are free-form JSON objects. Each lookup reports whether a
field is absent, present with the wrong shape, or present and usable, so the
scoring rules can skip a bonus without ever raising on odd content.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Mapping, Optional, Sequence, TypeVar

T = TypeVar('T')


class FieldStatus(str, Enum):
    ABSENT = "absent"
    WRONG_TYPE = "wrong_type"
    VALID = "valid"


@dataclass(frozen=True)
class FieldLookup(Generic[T]):
    """Result of looking up one field in a proposal document."""
    status: FieldStatus
    value: Optional[T] = None

    @property
    def is_valid(self) -> bool:
        return self.status is FieldStatus.VALID

    def satisfies(self, predicate) -> bool:
        """True only for a valid value that passes predicate."""
        return self.is_valid and bool(predicate(self.value))


_ABSENT = FieldLookup(FieldStatus.ABSENT)
_WRONG_TYPE = FieldLookup(FieldStatus.WRONG_TYPE)


def lookup_number(document: Mapping[str, Any], name: str) -> FieldLookup[float]:
    """
    Look up a numeric field.

    ints and floats are numeric; bools, strings and non-finite floats are not.
    ints are returned unconverted so arbitrarily large values still compare
    exactly against float thresholds.
    """
    if name not in document:
        return _ABSENT
    raw = document[name]
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        return _WRONG_TYPE
    if isinstance(raw, float) and not math.isfinite(raw):
        return _WRONG_TYPE
    return FieldLookup(FieldStatus.VALID, raw)


def lookup_list(document: Mapping[str, Any], name: str) -> FieldLookup[Sequence[Any]]:
    """Look up a list field; strings and mappings are wrong-typed."""
    if name not in document:
        return _ABSENT
    raw = document[name]
    if not isinstance(raw, (list, tuple)):
        return _WRONG_TYPE
    return FieldLookup(FieldStatus.VALID, raw)
