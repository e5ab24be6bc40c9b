"""
Tests for the wire models.
"""
import pytest
from pydantic import ValidationError

from vaulthub_client.models import ResponseEnvelope, Role, SecurityPinStatus, UserInfo


class TestResponseEnvelope:

    def test_success(self):
        envelope = ResponseEnvelope.model_validate(
            {"code": 200, "data": {"a": 1}, "message": "success",
             "requestId": "r-1", "timestamp": 1700000000000}
        )
        assert envelope.ok is True
        assert envelope.unauthorized is False
        assert envelope.data == {"a": 1}

    def test_unauthorized(self):
        envelope = ResponseEnvelope(code=401, message="expired")
        assert envelope.ok is False
        assert envelope.unauthorized is True

    def test_code_required(self):
        with pytest.raises(ValidationError):
            ResponseEnvelope.model_validate({"data": None})


class TestUserInfo:

    def test_profile_fields(self):
        user = UserInfo.model_validate({
            "id": 3, "uuid": "u-3", "username": "carol", "role": "admin",
            "status": 1, "created_at": "2025-01-02T03:04:05Z",
            "nickname": "Caz",
        })
        assert user.has_role(Role.ADMIN)
        assert user.has_role("admin")
        assert not user.has_role(Role.USER)
        assert user.created_at.year == 2025
        assert user.model_extra == {"nickname": "Caz"}

    def test_role_required(self):
        with pytest.raises(ValidationError):
            UserInfo.model_validate({"username": "nobody"})

    def test_unknown_role_kept(self):
        user = UserInfo(role="auditor")
        assert user.has_role("auditor")
        assert not user.has_role(Role.ADMIN)

    def test_snapshot_is_read_only(self):
        user = UserInfo(role="user")
        with pytest.raises(ValidationError):
            user.role = "admin"


class TestSecurityPinStatus:

    def test_parse(self):
        assert SecurityPinStatus.model_validate({"has_security_pin": False}).has_security_pin is False

    def test_missing_flag(self):
        with pytest.raises(ValidationError):
            SecurityPinStatus.model_validate({})
