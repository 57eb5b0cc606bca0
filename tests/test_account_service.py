import pytest
from sqlalchemy import func, select

from app.errors import DuplicateEmailError, ErrorKind, InvalidCodeError, SubjectNotFoundError, UserNotFoundError
from app.models import User, UserContact, VerificationCode
from app.schemas.users import UserCreate


def candidate(email="a@x.com", password="plain-password"):
    return UserCreate(email=email, first_name="Ana", last_name="Souza", password=password)


async def count(db, model, *criteria):
    return await db.scalar(select(func.count()).select_from(model).where(*criteria))


async def test_create_account_persists_inactive_user_with_hashed_password(accounts, db, notifier):
    user = await accounts.create_account(candidate(password="plain-password"))

    assert user.id is not None
    assert user.is_active is False
    assert user.password != "plain-password"
    assert user.password == "hashed::plain-password"
    assert await count(db, VerificationCode, VerificationCode.user_id == user.id, VerificationCode.is_valid == True) == 1
    assert len(notifier.activations) == 1
    assert notifier.activations[0][0] == "a@x.com"


async def test_create_account_normalizes_email(accounts):
    user = await accounts.create_account(candidate(email="Ana.Souza@Example.COM"))

    assert user.email == "ana.souza@example.com"


async def test_create_account_with_registered_email_has_no_side_effects(accounts, db, notifier):
    await accounts.create_account(candidate(email="a@x.com"))

    with pytest.raises(DuplicateEmailError) as exc_info:
        await accounts.create_account(candidate(email="A@X.com"))

    assert exc_info.value.kind == ErrorKind.DUPLICATE_EMAIL
    assert await count(db, User) == 1
    assert await count(db, VerificationCode) == 1
    assert len(notifier.activations) == 1


async def test_create_account_refuses_email_of_inactive_user(accounts):
    await accounts.create_account(candidate(email="pending@x.com"))

    with pytest.raises(DuplicateEmailError):
        await accounts.create_account(candidate(email="pending@x.com"))


async def test_activate_account_with_issued_code(accounts, notifier):
    await accounts.create_account(candidate(email="a@x.com"))
    code = notifier.last_activation_code()

    user = await accounts.activate_account(code)

    assert user.is_active is True
    assert user.email == "a@x.com"


async def test_activate_account_invalidates_code_and_creates_contact_identity(accounts, code_store, db, notifier):
    created = await accounts.create_account(candidate())
    code_id = notifier.last_activation_code()

    await accounts.activate_account(code_id)
    await accounts.activate_account(code_id)

    code = await code_store.get_by_id(code_id)
    assert code.is_valid is False
    assert await count(db, UserContact, UserContact.user_id == created.id) == 1


async def test_activate_account_with_unknown_code(accounts, db):
    with pytest.raises(InvalidCodeError) as exc_info:
        await accounts.activate_account("does-not-exist")

    assert exc_info.value.kind == ErrorKind.INVALID_CODE
    assert await count(db, User, User.is_active == True) == 0


async def test_activate_account_accepts_superseded_code(accounts, codes, notifier):
    # Activation resolves the code by id only, its valid flag is not checked
    user = await accounts.create_account(candidate())
    first_code = notifier.last_activation_code()
    await codes.issue(user)

    activated = await accounts.activate_account(first_code)

    assert activated.is_active is True


async def test_password_recovery_sends_new_code_to_active_user(accounts, register, code_store, notifier):
    user = await register("a@x.com")

    await accounts.initiate_password_recovery("A@x.com")

    assert len(notifier.recoveries) == 1
    email, code_id = notifier.recoveries[0]
    assert email == "a@x.com"
    code = await code_store.get_by_id(code_id)
    assert code.is_valid is True
    assert code.user_id == user.id


async def test_password_recovery_replaces_previous_code(accounts, register, code_store, notifier):
    await register("a@x.com")

    await accounts.initiate_password_recovery("a@x.com")
    await accounts.initiate_password_recovery("a@x.com")

    first = await code_store.get_by_id(notifier.recoveries[0][1])
    second = await code_store.get_by_id(notifier.recoveries[1][1])
    assert first.is_valid is False
    assert second.is_valid is True


async def test_password_recovery_for_unknown_email_is_silent(accounts, db, notifier):
    result = await accounts.initiate_password_recovery("nobody@x.com")

    assert result is None
    assert notifier.recoveries == []
    assert await count(db, VerificationCode) == 0


async def test_password_recovery_ignores_inactive_user(accounts, db, notifier):
    await accounts.create_account(candidate(email="a@x.com"))

    await accounts.initiate_password_recovery("a@x.com")

    assert notifier.recoveries == []
    assert await count(db, VerificationCode) == 1


async def test_load_credential_subject(accounts, register):
    user = await register("a@x.com", password="plain-password")

    subject = await accounts.load_credential_subject("a@x.com")

    assert subject.user_id == user.id
    assert subject.email == "a@x.com"
    assert subject.password_hash == "hashed::plain-password"
    assert subject.is_active is True


async def test_load_credential_subject_reports_inactive_user(accounts):
    await accounts.create_account(candidate(email="a@x.com"))

    subject = await accounts.load_credential_subject("a@x.com")

    assert subject.is_active is False


async def test_load_credential_subject_unknown_email(accounts):
    with pytest.raises(SubjectNotFoundError) as exc_info:
        await accounts.load_credential_subject("nobody@x.com")

    assert exc_info.value.kind == ErrorKind.SUBJECT_NOT_FOUND


async def test_registration_race_surfaces_as_duplicate_email(accounts, db, notifier, monkeypatch):
    await accounts.create_account(candidate(email="a@x.com"))

    async def lookup_misses(email):
        return None

    # The other registration commits between the lookup and the insert
    monkeypatch.setattr(accounts.deps.users, "get_by_email", lookup_misses)

    with pytest.raises(DuplicateEmailError):
        await accounts.create_account(candidate(email="a@x.com"))

    assert await count(db, User) == 1
    assert await count(db, VerificationCode) == 1
    assert len(notifier.activations) == 1


class FailingNotifier:
    async def send_activation(self, user, code):
        raise RuntimeError("mail relay misconfigured")

    async def send_recovery(self, user, code):
        raise RuntimeError("mail relay misconfigured")


async def test_notifier_failure_keeps_committed_account(accounts, db):
    accounts.deps.notifier = FailingNotifier()

    user = await accounts.create_account(candidate(email="a@x.com"))

    assert user.id is not None
    assert await count(db, User, User.email == "a@x.com") == 1
    assert await count(db, VerificationCode, VerificationCode.user_id == user.id) == 1


async def test_notifier_failure_keeps_recovery_code(accounts, register, db):
    user = await register("a@x.com")
    accounts.deps.notifier = FailingNotifier()

    await accounts.initiate_password_recovery("a@x.com")

    assert await count(db, VerificationCode, VerificationCode.user_id == user.id) == 2
    assert await count(db, VerificationCode, VerificationCode.user_id == user.id, VerificationCode.is_valid == True) == 1


async def test_get_account(accounts, register):
    user = await register("a@x.com")

    found = await accounts.get_account(user.id)

    assert found.id == user.id
    assert found.email == "a@x.com"


async def test_get_account_unknown_id(accounts):
    with pytest.raises(UserNotFoundError):
        await accounts.get_account("missing")
