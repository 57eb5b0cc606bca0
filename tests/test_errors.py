from app.errors import CategoryNotFoundError, DuplicateEmailError, ErrorKind, UserNotFoundError


def test_default_message_per_kind():
    error = DuplicateEmailError()

    assert error.kind == ErrorKind.DUPLICATE_EMAIL
    assert error.message == "Email is already registered"
    assert str(error) == "Email is already registered"


def test_custom_message_keeps_kind():
    error = UserNotFoundError("User not provided for category")

    assert error.kind == ErrorKind.USER_NOT_FOUND
    assert error.message == "User not provided for category"


def test_none_message_falls_back_to_default():
    assert CategoryNotFoundError(None).message == "Category not found"
