"""Unit tests for request validation error flattening."""

from social.interface.error import validation_errors


def test_missing_fields_are_labelled():
    errors = validation_errors(
        [
            {"type": "missing", "loc": ("body", "username"), "msg": "Field required"},
            {"type": "missing", "loc": ("body", "password"), "msg": "Field required"},
        ]
    )

    assert errors == {
        "username": "Username is required.",
        "password": "Password is required.",
    }


def test_label_overrides():
    errors = validation_errors(
        [
            {"type": "missing", "loc": ("body", "refresh"), "msg": "Field required"},
            {"type": "missing", "loc": ("body",), "msg": "Field required"},
        ]
    )

    assert errors == {
        "refresh": "Refresh token is required.",
        "body": "Request body is required.",
    }


def test_invalid_path_uuid():
    errors = validation_errors(
        [
            {
                "type": "uuid_parsing",
                "loc": ("path", "user_id"),
                "msg": "Input should be a valid UUID",
            }
        ]
    )

    assert errors == {"user_id": "Invalid user id."}


def test_value_error_message_is_kept():
    errors = validation_errors(
        [
            {
                "type": "value_error",
                "loc": ("body", "password"),
                "msg": "Value error, Password must be ...",
                "ctx": {
                    "error": ValueError(
                        "Password must be at least 6 and at most 20 characters long."
                    )
                },
            }
        ]
    )

    assert errors == {
        "password": "Password must be at least 6 and at most 20 characters long."
    }


def test_first_message_per_field_wins():
    errors = validation_errors(
        [
            {"type": "string_too_long", "loc": ("body", "headline"), "msg": "Too long"},
            {"type": "string_type", "loc": ("body", "headline"), "msg": "Not a string"},
        ]
    )

    assert errors == {"headline": "Too long"}


def test_nested_fields_use_dotted_names():
    errors = validation_errors(
        [{"type": "missing", "loc": ("body", "contacts", 0, "value"), "msg": "Field required"}]
    )

    assert errors == {"contacts.0.value": "Value is required."}


def test_empty_string_reads_as_required():
    errors = validation_errors(
        [
            {
                "type": "string_too_short",
                "loc": ("body", "refresh"),
                "msg": "String should have at least 1 character",
                "ctx": {"min_length": 1},
            }
        ]
    )

    assert errors == {"refresh": "Refresh token is required."}


def test_longer_minimum_keeps_pydantic_message():
    errors = validation_errors(
        [
            {
                "type": "string_too_short",
                "loc": ("body", "nickname"),
                "msg": "String should have at least 3 characters",
                "ctx": {"min_length": 3},
            }
        ]
    )

    assert errors == {"nickname": "String should have at least 3 characters"}
