"""Tests for shared/models.py."""

from typing import Optional

import pytest
from pydantic import Field, HttpUrl, ValidationError

from shared.models import AuthenticatedUser, PartialUpdate


class SampleUpdate(PartialUpdate):
    name: Optional[str] = Field(None, max_length=10)
    age: Optional[int] = None
    link: Optional[HttpUrl] = None


class TestAuthenticatedUser:
    def test_is_frozen(self):
        user = AuthenticatedUser(id=1, email="a@example.com")
        with pytest.raises(ValidationError):
            user.id = 2

    def test_ignores_extra_fields(self):
        user = AuthenticatedUser(id=1, email="a@example.com", password_hash="secret")
        assert not hasattr(user, "password_hash")


class TestPartialUpdate:
    def test_only_sent_fields_are_changes(self):
        update = SampleUpdate.model_validate({"name": "new"})
        assert update.changes() == {"name": "new"}

    def test_null_fields_are_dropped(self):
        update = SampleUpdate.model_validate({"name": None, "age": 3})
        assert update.changes() == {"age": 3}

    def test_empty_body_has_no_changes(self):
        assert SampleUpdate.model_validate({}).changes() == {}

    def test_changes_are_json_ready(self):
        update = SampleUpdate.model_validate({"link": "https://example.com/a.png"})
        assert update.changes() == {"link": "https://example.com/a.png"}

    def test_field_constraints_still_apply(self):
        with pytest.raises(ValidationError):
            SampleUpdate.model_validate({"name": "x" * 11})
