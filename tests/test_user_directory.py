import pytest

from app.models import User
from app.services.user_service import UserDirectory, normalize_email


def test_normalize_email():
    assert normalize_email("  Someone@Example.COM ") == "someone@example.com"


async def test_save_stores_normalized_email(db):
    users = UserDirectory(db)

    user = await users.save(User(email=" Mixed@Case.com ", first_name="A", last_name="B", password="h"))

    assert user.email == "mixed@case.com"
    assert (await users.get_by_email("MIXED@case.com")).id == user.id


async def test_active_lookups_skip_inactive_users(db):
    users = UserDirectory(db)
    user = await users.save(User(email="idle@x.com", first_name="A", last_name="B", password="h"))

    assert await users.get_active_by_email("idle@x.com") is None
    assert await users.get_active_by_id(user.id) is None
    assert (await users.get_by_id(user.id)).email == "idle@x.com"

    user.is_active = True
    await users.update(user, user.id)

    assert (await users.get_active_by_id(user.id)).id == user.id


async def test_update_rejects_mismatched_id(db):
    users = UserDirectory(db)
    user = await users.save(User(email="a@x.com", first_name="A", last_name="B", password="h"))

    with pytest.raises(ValueError):
        await users.update(user, "another-id")
