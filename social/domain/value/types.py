"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from pydantic import Field, field_validator

from social.domain.value.common import RootValueObject, ValueObject

USERNAME_MIN_LENGTH = 6
USERNAME_MAX_LENGTH = 20


class Username(RootValueObject[str]):
    """Unique login name of a user.

    Surrounding whitespace is stripped; the remainder must be 6-20 characters.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username length after trimming."""
        v = v.strip()
        if not USERNAME_MIN_LENGTH <= len(v) <= USERNAME_MAX_LENGTH:
            raise ValueError(
                f"Username must be at least {USERNAME_MIN_LENGTH} and at most "
                f"{USERNAME_MAX_LENGTH} characters long."
            )
        return v


class Contact(ValueObject):
    """A single contact record shown on a profile (e.g. type=email)."""

    type: str = Field(min_length=1, max_length=20)
    value: str = Field(min_length=1, max_length=100)


PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 20


def validate_password(v: str) -> str:
    """Check password length (passwords are kept verbatim, no trimming).

    Raises:
        ValueError: If the password is too short or too long
    """
    if not PASSWORD_MIN_LENGTH <= len(v) <= PASSWORD_MAX_LENGTH:
        raise ValueError(
            f"Password must be at least {PASSWORD_MIN_LENGTH} and at most "
            f"{PASSWORD_MAX_LENGTH} characters long."
        )
    return v
