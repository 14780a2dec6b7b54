"""Domain Types — canonical identifier parsing.

Tests:
    - Canonical 8-4-4-4-12 ids accepted in either case
    - Braced, urn-prefixed, unhyphenated and garbage ids rejected with InvalidIDError
    - new_model_id produces distinct UUIDs
"""

from uuid import UUID

import pytest

from model_api.core.domain_types import (
    ID_LENGTH, is_canonical_id, new_model_id, parse_model_id,
)
from model_api.core.errors import ErrorKey, InvalidIDError

VALID_ID = "3f2b8c1e-9d4a-4f6b-8a2e-1c5d7e9f0a1b"


def test_canonical_id_accepted():
    assert is_canonical_id(VALID_ID)
    assert is_canonical_id(VALID_ID.upper())
    assert len(VALID_ID) == ID_LENGTH


@pytest.mark.parametrize(
    "value",
    [
        "not-a-uuid",
        "",
        "{" + VALID_ID + "}",
        "urn:uuid:" + VALID_ID,
        VALID_ID.replace("-", ""),
        VALID_ID[:-1] + "g",
        VALID_ID + "0",
        " " + VALID_ID,
        None,
        123,
    ],
)
def test_non_canonical_ids_rejected(value):
    assert not is_canonical_id(value)
    with pytest.raises(InvalidIDError) as info:
        parse_model_id(value)
    assert info.value.key is ErrorKey.INVALID_ID


def test_parse_returns_uuid():
    assert parse_model_id(VALID_ID) == UUID(VALID_ID)
    assert parse_model_id(VALID_ID.upper()) == UUID(VALID_ID)


def test_new_model_id_is_random_uuid():
    a, b = new_model_id(), new_model_id()
    assert isinstance(a, UUID)
    assert a != b
    assert is_canonical_id(str(a))
