from __future__ import annotations

from datetime import datetime, timezone
from uuid import uuid4

from user_management.modules.user import mapper
from user_management.modules.user.models import User, UserRole
from user_management.modules.user.schemas import UserCreate, UserUpdate


def _stored_user(**overrides: object) -> User:
    fields: dict[str, object] = {
        "id": uuid4(),
        "username": "ada",
        "email": "ada@example.com",
        "phone_number": "+441234567",
        "role": UserRole.ADMIN,
        "created_at": datetime(2024, 1, 1, tzinfo=timezone.utc),
        "updated_at": datetime(2024, 1, 1, tzinfo=timezone.utc),
    }
    fields.update(overrides)
    return User(**fields)


def test_to_entity_leaves_identity_and_timestamps_unset() -> None:
    user = mapper.to_entity(
        UserCreate(
            username="ada",
            email="ada@example.com",
            phone_number="+441234567",
            role=UserRole.ADMIN,
        )
    )

    assert user.username == "ada"
    assert user.email == "ada@example.com"
    assert user.phone_number == "+441234567"
    assert user.role is UserRole.ADMIN
    assert user.id is None
    assert user.created_at is None


def test_apply_update_overwrites_only_supplied_fields() -> None:
    user = _stored_user()

    mapper.apply_update(UserUpdate(id=user.id, email="lovelace@example.com"), user)

    assert user.email == "lovelace@example.com"
    assert user.username == "ada"
    assert user.phone_number == "+441234567"
    assert user.role is UserRole.ADMIN


def test_apply_update_with_every_field() -> None:
    user = _stored_user()

    mapper.apply_update(
        UserUpdate(
            id=user.id,
            username="grace",
            email="grace@example.com",
            phone_number="15551234",
            role=UserRole.MODERATOR,
        ),
        user,
    )

    assert (user.username, user.email, user.phone_number, user.role) == (
        "grace",
        "grace@example.com",
        "15551234",
        UserRole.MODERATOR,
    )


def test_to_response_projects_fields_with_camel_case_json() -> None:
    user = _stored_user()

    body = mapper.to_response(user).model_dump(mode="json", by_alias=True)

    assert body == {
        "id": str(user.id),
        "username": "ada",
        "email": "ada@example.com",
        "phoneNumber": "+441234567",
        "role": "ADMIN",
        "createdAt": "2024-01-01T00:00:00Z",
        "updatedAt": "2024-01-01T00:00:00Z",
    }


def test_to_responses_preserves_order() -> None:
    users = [_stored_user(username=name) for name in ("c", "a", "b")]

    assert [r.username for r in mapper.to_responses(users)] == ["c", "a", "b"]
