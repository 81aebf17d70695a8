"""Unit tests for _users document models."""

import json

import pytest
from pydantic import ValidationError

from couchdb_admin.models.users import UserCreate, UserRecord

SERVER_RECORD = {
    "_id": "org.couchdb.user:jan",
    "_rev": "1-1d509578d1bc8cba3a6690fca5e7a9fd",
    "password_scheme": "pbkdf2",
    "iterations": 10,
    "type": "user",
    "roles": ["couchdb contributor"],
    "name": "jan",
    "derived_key": "a294518b2a6d0b9a1f1e8d2a",
    "salt": "70869c4b2a6d0b9a",
}


@pytest.mark.unit
def test_user_create_serialization():
    payload = UserCreate(name="jan", password="relax", roles=["contributor"])

    assert json.loads(payload.model_dump_json()) == {
        "name": "jan",
        "password": "relax",
        "roles": ["contributor"],
        "type": "user",
    }


@pytest.mark.unit
def test_user_create_type_is_fixed():
    with pytest.raises(ValidationError):
        UserCreate(name="jan", password="relax", type="admin")


@pytest.mark.unit
def test_user_record_from_server_json():
    record = UserRecord.model_validate_json(json.dumps(SERVER_RECORD))

    assert record.id == "org.couchdb.user:jan"
    assert record.rev == "1-1d509578d1bc8cba3a6690fca5e7a9fd"
    assert record.name == "jan"
    assert record.roles == ["couchdb contributor"]
    assert record.iterations == 10
    assert not hasattr(record, "password")


@pytest.mark.unit
def test_user_record_keeps_unknown_fields():
    record = UserRecord.model_validate(
        {**SERVER_RECORD, "pbkdf2_prf": "sha256", "x": 1}
    )

    assert record.pbkdf2_prf == "sha256"
    assert record.model_extra == {"x": 1}


@pytest.mark.unit
def test_user_record_rev_is_optional():
    record = UserRecord.model_validate({"_id": "org.couchdb.user:jan", "name": "jan"})

    assert record.rev is None


@pytest.mark.unit
def test_user_record_accepts_rev_only():
    record = UserRecord.model_validate_json('{"_rev": "1-a"}')

    assert record.rev == "1-a"
    assert record.id is None
    assert record.name is None
