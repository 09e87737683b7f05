"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error (malformed input)."""

    pass


class QuotaExceededError(DomainError):
    """Raised when a user has used up their daily suggestion allowance."""

    def __init__(self, user_id: str, limit: int):
        self.user_id = user_id
        self.limit = limit
        super().__init__(f"Daily suggestion limit of {limit} reached")


class DuplicateVoteError(DomainError):
    """Raised when a user votes twice for the same suggestion."""

    def __init__(self, user_id: str, suggestion_id: str):
        self.user_id = user_id
        self.suggestion_id = suggestion_id
        super().__init__("Already voted for this suggestion")


class InvalidStateError(DomainError):
    """Raised when a transition is attempted on a resolved suggestion."""

    def __init__(self, suggestion_id: str, status: str, action: str):
        self.suggestion_id = suggestion_id
        self.status = status
        self.action = action
        super().__init__(f"Cannot {action} suggestion {suggestion_id}: already {status}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
