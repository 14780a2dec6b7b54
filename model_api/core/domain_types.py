"""Domain Types — identifier type and its canonical text encoding.

Invariants:
    - ModelId wraps UUID; storage lookups always go through parse_model_id
    - Canonical text form is 8-4-4-4-12 hex digits (36 chars), any letter case
    - Parse failure raises InvalidIDError, never ValueError

Design Decisions:
    - NewType over a wrapper class: zero runtime cost, full type-checker support
    - Stricter than uuid.UUID(): braces, urn: prefixes and unhyphenated hex are rejected
"""

import re
import uuid
from typing import NewType
from uuid import UUID

from model_api.core.errors import InvalidIDError


ModelId = NewType("ModelId", UUID)

ID_LENGTH = 36

_CANONICAL_ID = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$",
)


def is_canonical_id(value: object) -> bool:
    """True when value is a str in canonical UUID text form."""
    return (
        isinstance(value, str)
        and len(value) == ID_LENGTH
        and _CANONICAL_ID.match(value) is not None
    )


def parse_model_id(value: str | None) -> ModelId:
    if not is_canonical_id(value):
        raise InvalidIDError()
    return ModelId(UUID(value))


def new_model_id() -> ModelId:
    """System-assigned identifier for a newly created model."""
    return ModelId(uuid.uuid4())
