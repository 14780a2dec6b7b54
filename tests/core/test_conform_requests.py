"""Request Conformance — idempotent normalization after validation.

Tests cover:
    - Text fields stripped, absent description defaults to ""
    - Identifiers lower-cased
    - conform(conform(r)) == conform(r) for every operation
    - Inputs are not mutated (frozen dataclasses, new instance returned)
"""

import pytest

from model_api.core.conform_requests import (
    conform_create,
    conform_delete,
    conform_get,
    conform_list,
    conform_update,
)
from model_api.core.request_types import (
    CreateRequest, DeleteRequest, GetRequest, ListRequest, UpdateRequest,
)

VALID_ID = "3F2B8C1E-9D4A-4F6B-8A2E-1C5D7E9F0A1B"


def test_create_strips_and_defaults_description():
    req = CreateRequest(name="  resnet-50 ", description=None)
    out = conform_create(req)
    assert out == CreateRequest(name="resnet-50", description="")
    assert req.name == "  resnet-50 "


def test_create_keeps_inner_whitespace():
    out = conform_create(CreateRequest(name=" a  b ", description=" x y "))
    assert out.name == "a  b"
    assert out.description == "x y"


def test_get_and_delete_lower_case_id():
    assert conform_get(GetRequest(id=VALID_ID)).id == VALID_ID.lower()
    assert conform_delete(DeleteRequest(id=VALID_ID)).id == VALID_ID.lower()


def test_update_normalizes_all_fields():
    out = conform_update(UpdateRequest(id=VALID_ID, name=" n ", description=None))
    assert out == UpdateRequest(id=VALID_ID.lower(), name="n", description="")


def test_list_is_identity():
    req = ListRequest()
    assert conform_list(req) == req


@pytest.mark.parametrize("conform, req", [
    (conform_create, CreateRequest(name="\tname\n", description="  desc  ")),
    (conform_create, CreateRequest(name="plain")),
    (conform_get, GetRequest(id=VALID_ID)),
    (conform_list, ListRequest()),
    (conform_update, UpdateRequest(id=VALID_ID, name=" x ", description=" y ")),
    (conform_delete, DeleteRequest(id=VALID_ID)),
])
def test_conformance_is_idempotent(conform, req):
    once = conform(req)
    assert conform(once) == once
