"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Malformed input, such as a non-numeric cursor or a zero limit.

    Always raised before the store is touched.
    """

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class MismatchError(DomainError):
    """Raised when a declared parent comment belongs to another post."""

    def __init__(self, comment_id: str, post_id: str):
        self.comment_id = comment_id
        self.post_id = post_id
        super().__init__(f"Comment {comment_id} does not belong to post {post_id}")


class AlreadyExistsError(DomainError):
    """Raised when creating a relation that already exists."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} already exists: {identifier}")


class NotAuthorizedError(DomainError):
    """Raised when a user's role or ownership does not allow an action."""

    def __init__(
        self, resource: str, resource_id: str, user_id: str, action: str = "delete"
    ):
        self.action = action
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class EditWindowExpiredError(DomainError):
    """Raised when a post is edited after its edit window closed."""

    def __init__(self, post_id: str):
        self.post_id = post_id
        super().__init__(f"Edit window of post {post_id} has expired")
