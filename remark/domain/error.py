"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error (bad input, comment state unchanged)."""

    pass


class ContentTooLongError(ValidationError):
    """Raised when content exceeds the configured maximum length."""

    def __init__(self, length: int, max_length: int):
        self.length = length
        self.max_length = max_length
        super().__init__(
            f"Comment exceeds maximum length of {max_length} characters ({length})"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class ContentDeletedException(DomainError):
    """Raised when attempting to edit deleted content."""

    def __init__(self, resource: str, resource_id: str):
        super().__init__(f"Cannot edit deleted {resource} {resource_id}")


class PolicyViolationError(DomainError):
    """A tenant setting forbids the requested operation."""

    pass


class CommentsDisabledError(PolicyViolationError):
    """Comments are disabled for this resource type."""

    def __init__(self, resource_type: str):
        super().__init__(f"Comments are disabled for {resource_type}")


class AnonymousNotAllowedError(PolicyViolationError):
    """Anonymous comments are not allowed."""

    def __init__(self) -> None:
        super().__init__("Anonymous comments are not allowed")


class RepliesNotAllowedError(PolicyViolationError):
    """Replies are not allowed."""

    def __init__(self) -> None:
        super().__init__("Replies are not allowed")


class MaxDepthExceededError(PolicyViolationError):
    """Reply would nest deeper than allowed."""

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(f"Maximum reply depth of {max_depth} exceeded")


class ReactionsNotAllowedError(PolicyViolationError):
    """Reactions (or this reaction type) are disabled."""

    def __init__(self, message: str = "Reactions are not allowed"):
        super().__init__(message)


class ConflictError(DomainError):
    """The operation conflicts with existing state."""

    pass


class DuplicateReportError(ConflictError):
    """The reporter has already reported this comment."""

    def __init__(self) -> None:
        super().__init__("You have already reported this comment")


class AlreadyExistsError(DomainError):
    """Raised by repositories when a uniqueness constraint is hit."""

    def __init__(self, resource: str, key: str):
        self.resource = resource
        self.key = key
        super().__init__(f"{resource} already exists: {key}")


class AuthenticationError(DomainError):
    """Raised when a caller cannot be authenticated."""

    pass
