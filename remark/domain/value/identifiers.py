"""Strongly typed identifiers for comment service entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import Callable, NewType, TypeVar
from uuid import UUID

from remark.domain.error import ValidationError

# Entities owned by this service
CommentId = NewType("CommentId", UUID)
ReactionId = NewType("ReactionId", UUID)
ReportId = NewType("ReportId", UUID)
SettingsId = NewType("SettingsId", UUID)

# Issued by the auth and tenant collaborators, opaque to us
UserId = NewType("UserId", str)
TenantId = NewType("TenantId", str)

T = TypeVar("T")


def parse_id(raw: str, factory: Callable[[UUID], T], label: str = "ID") -> T:
    """Parse a UUID string into a typed identifier.

    Args:
        raw: UUID string from the outside world
        factory: NewType constructor to wrap the UUID with
        label: Human readable name used in the error message

    Returns:
        Typed identifier

    Raises:
        ValidationError: If the string is not a valid UUID
    """
    try:
        return factory(UUID(raw))
    except (ValueError, TypeError, AttributeError):
        raise ValidationError(f"Invalid {label}: {raw}")


def parse_comment_id(raw: str) -> CommentId:
    """Parse a comment ID, raising ValidationError when malformed."""
    return parse_id(raw, CommentId, "comment ID")
