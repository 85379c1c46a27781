"""Unit tests for the not-found and ownership guards, and the error translator."""
from types import SimpleNamespace

import pytest
from sqlalchemy.exc import OperationalError

from group_api.errors import (
    BadCredentialsError,
    DocumentNotFoundError,
    OwnershipError,
    handle_404,
    require_ownership,
)
from group_api.services import group_service
from tests.conftest import auth, create_test_user


class TestHandle404:

    def test_passes_record_through(self):
        record = SimpleNamespace(owner_id="u1")
        assert handle_404(record) is record

    def test_none_raises(self):
        with pytest.raises(DocumentNotFoundError) as exc_info:
            handle_404(None)
        assert exc_info.value.status_code == 404


class TestRequireOwnership:

    def test_owner_passes(self):
        require_ownership(SimpleNamespace(user_id="u1"), SimpleNamespace(owner_id="u1"))

    def test_other_user_raises(self):
        with pytest.raises(OwnershipError) as exc_info:
            require_ownership(SimpleNamespace(user_id="u2"), SimpleNamespace(owner_id="u1"))
        assert exc_info.value.status_code == 401


class TestErrorDetails:

    def test_default_detail(self):
        assert str(BadCredentialsError()) == BadCredentialsError.detail

    def test_custom_detail(self):
        exc = DocumentNotFoundError("Group not found")
        assert exc.detail == "Group not found"
        assert DocumentNotFoundError.detail != "Group not found"


class TestPersistenceErrors:

    def test_database_failure_is_500(self, client, monkeypatch):
        user = create_test_user(client)

        def _fail(db):
            raise OperationalError("SELECT * FROM groups", {}, Exception("database is locked"))

        monkeypatch.setattr(group_service, "list_groups", _fail)
        resp = client.get("/groups", headers=auth(user))
        assert resp.status_code == 500
        assert resp.json() == {"detail": "Internal server error"}
