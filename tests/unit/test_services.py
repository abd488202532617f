"""
Unit tests for the User, Device and DbUser services against in-memory SQLite.
"""
import pytest

from tinysensor.core.exceptions import DuplicateEntityException, EntityNotFoundException
from tinysensor.domain.schemas.db_user import DbUserWrite
from tinysensor.domain.schemas.device import DeviceWrite
from tinysensor.domain.schemas.user import UserWrite
from tinysensor.application.services import db_user_service, device_service, user_service


def make_user(**overrides):
    fields = {
        "firstname": "John",
        "lastname": "Smith",
        "email": "john@example.com",
        "address": "1 Main St",
        "image_url": "http://img/john.png",
    }
    fields.update(overrides)
    return UserWrite(**fields)


def make_device(**overrides):
    fields = {
        "model": "Thermo-100",
        "serialnumber": "SN-0001",
        "mac": "00:11:22:33:44:55",
        "ip": "10.0.0.15",
        "image_url": None,
    }
    fields.update(overrides)
    return DeviceWrite(**fields)


class TestUserService:
    """Tests for user_service"""

    def test_create_assigns_store_id(self, user_repo):
        user = user_service.create_user(user_repo, make_user(id=777))
        assert user.id is not None
        assert user.id != 777

    def test_create_then_get_round_trip(self, user_repo):
        dto = make_user()
        created = user_service.create_user(user_repo, dto)

        fetched = user_service.get_user(user_repo, created.id)
        assert fetched.firstname == dto.firstname
        assert fetched.lastname == dto.lastname
        assert fetched.email == dto.email
        assert fetched.address == dto.address
        assert fetched.image_url == dto.image_url

    def test_get_missing_raises(self, user_repo):
        with pytest.raises(EntityNotFoundException) as exc_info:
            user_service.get_user(user_repo, 9999)
        assert exc_info.value.status_code == 404
        assert "9999" in exc_info.value.message

    def test_list_returns_everything(self, user_repo):
        assert user_service.list_users(user_repo) == []
        user_service.create_user(user_repo, make_user(email="a@example.com"))
        user_service.create_user(user_repo, make_user(email="b@example.com"))
        assert len(user_service.list_users(user_repo)) == 2

    def test_find_by_lastname_prefix(self, user_repo):
        user_service.create_user(user_repo, make_user(lastname="Smith", email="a@example.com"))
        user_service.create_user(user_repo, make_user(lastname="Smithers", email="b@example.com"))
        user_service.create_user(user_repo, make_user(lastname="Jones", email="c@example.com"))

        found = user_service.find_users_by_lastname(user_repo, "Smi")
        assert sorted(u.lastname for u in found) == ["Smith", "Smithers"]

    def test_find_with_no_match_raises(self, user_repo):
        user_service.create_user(user_repo, make_user())
        with pytest.raises(EntityNotFoundException):
            user_service.find_users_by_lastname(user_repo, "Zz")

    def test_prefix_wildcards_are_literal(self, user_repo):
        user_service.create_user(user_repo, make_user(lastname="Smith"))
        with pytest.raises(EntityNotFoundException):
            user_service.find_users_by_lastname(user_repo, "%")

    def test_update_replaces_all_fields(self, user_repo):
        created = user_service.create_user(user_repo, make_user())
        updated = user_service.update_user(
            user_repo, created.id, UserWrite(firstname="Jane", lastname="Doe", email="jane@example.com")
        )
        assert updated.id == created.id
        assert updated.firstname == "Jane"
        # Full replace, not a merge
        assert updated.address is None
        assert updated.image_url is None

    def test_update_missing_raises_without_write(self, user_repo):
        with pytest.raises(EntityNotFoundException):
            user_service.update_user(user_repo, 42, make_user())
        assert user_service.list_users(user_repo) == []

    def test_delete_then_get_raises(self, user_repo):
        created = user_service.create_user(user_repo, make_user())
        user_id = created.id
        user_service.delete_user(user_repo, user_id)
        with pytest.raises(EntityNotFoundException):
            user_service.get_user(user_repo, user_id)

    def test_delete_missing_raises(self, user_repo):
        with pytest.raises(EntityNotFoundException):
            user_service.delete_user(user_repo, 5)

    def test_duplicate_email_is_rejected_and_rolled_back(self, user_repo):
        user_service.create_user(user_repo, make_user(email="same@example.com"))
        with pytest.raises(DuplicateEntityException) as exc_info:
            user_service.create_user(user_repo, make_user(email="same@example.com"))
        assert exc_info.value.status_code == 409
        # Session stays usable after the rollback
        assert len(user_service.list_users(user_repo)) == 1


class TestDeviceService:
    """Tests for device_service"""

    def test_create_and_find_by_model(self, device_repo):
        device_service.create_device(device_repo, make_device())
        device_service.create_device(device_repo, make_device(model="Hygro-2", mac="66:77:88:99:AA:BB"))

        found = device_service.find_devices_by_model(device_repo, "Thermo")
        assert [d.model for d in found] == ["Thermo-100"]

    def test_find_with_no_match_raises(self, device_repo):
        with pytest.raises(EntityNotFoundException):
            device_service.find_devices_by_model(device_repo, "Nothing")

    def test_update_missing_raises(self, device_repo):
        with pytest.raises(EntityNotFoundException):
            device_service.update_device(device_repo, 1, make_device())

    def test_update_keeps_id(self, device_repo):
        created = device_service.create_device(device_repo, make_device())
        updated = device_service.update_device(device_repo, created.id, make_device(ip="10.0.0.99"))
        assert updated.id == created.id
        assert updated.ip == "10.0.0.99"

    def test_duplicate_mac_is_rejected(self, device_repo):
        device_service.create_device(device_repo, make_device())
        with pytest.raises(DuplicateEntityException):
            device_service.create_device(device_repo, make_device(model="Other"))

    def test_delete_removes_device(self, device_repo):
        created = device_service.create_device(device_repo, make_device())
        device_id = created.id
        device_service.delete_device(device_repo, device_id)
        assert device_service.list_devices(device_repo) == []
        with pytest.raises(EntityNotFoundException):
            device_service.get_device(device_repo, device_id)


class TestDbUserService:
    """Tests for db_user_service"""

    def test_register_and_find_by_username(self, db_user_repo):
        db_user_service.register_db_user(db_user_repo, DbUserWrite(username="operator", password="secret"))

        found = db_user_service.find_db_users_by_username(db_user_repo, "operator")
        assert len(found) == 1
        assert found[0].password == "secret"

    def test_find_is_exact_match(self, db_user_repo):
        db_user_service.register_db_user(db_user_repo, DbUserWrite(username="operator", password="secret"))
        with pytest.raises(EntityNotFoundException):
            db_user_service.find_db_users_by_username(db_user_repo, "oper")

    def test_username_exists_excludes_own_record(self, db_user_repo):
        created = db_user_service.register_db_user(
            db_user_repo, DbUserWrite(username="operator", password="secret")
        )
        assert db_user_service.username_exists(db_user_repo, "operator") is True
        assert db_user_service.username_exists(db_user_repo, "operator", exclude_id=created.id) is False
        assert db_user_service.username_exists(db_user_repo, "nobody") is False

    def test_duplicate_username_is_rejected(self, db_user_repo):
        db_user_service.register_db_user(db_user_repo, DbUserWrite(username="operator", password="secret"))
        with pytest.raises(DuplicateEntityException):
            db_user_service.register_db_user(db_user_repo, DbUserWrite(username="operator", password="other"))

    def test_update_and_delete(self, db_user_repo):
        created = db_user_service.register_db_user(
            db_user_repo, DbUserWrite(username="operator", password="secret")
        )
        db_user_id = created.id
        updated = db_user_service.update_db_user(
            db_user_repo, db_user_id, DbUserWrite(username="operator", password="changed")
        )
        assert updated.password == "changed"

        db_user_service.delete_db_user(db_user_repo, db_user_id)
        with pytest.raises(EntityNotFoundException):
            db_user_service.get_db_user(db_user_repo, db_user_id)
