"""Operation results returned by domain services.

Services report expected failures as values rather than exceptions. Every
operation returns ``Success`` or one of the failure variants below, and the
HTTP layer dispatches on them with a ``match`` statement. Unexpected errors
(e.g. the database going away) still propagate as exceptions.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Operation completed; ``payload`` carries its value (may be None)."""

    payload: T


@dataclass(frozen=True)
class ValidationError:
    """Rejected input, reported per field."""

    errors: dict[str, str]


@dataclass(frozen=True)
class Unauthorized:
    """Credential rejected.

    Only flags which token kind failed, never why.
    """

    access: bool = False
    refresh: bool = False

    def details(self) -> dict[str, bool]:
        """Flags that are set, e.g. ``{"refresh": True}``."""
        return {
            name: True
            for name, flag in (("access", self.access), ("refresh", self.refresh))
            if flag
        }


@dataclass(frozen=True)
class AccessViolation:
    """Authenticated, but not entitled to act on the resource."""


@dataclass(frozen=True)
class NotFound:
    """Referenced entity does not exist."""

    message: str


@dataclass(frozen=True)
class Conflict:
    """State precondition failed (e.g. liking twice)."""

    message: str


Failure = ValidationError | Unauthorized | AccessViolation | NotFound | Conflict
