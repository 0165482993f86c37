"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Raised at the event-source boundary, before the scoring engine runs.
    """

    pass


class InvalidPointsError(ValidationError):
    """Raised when a vote carries zero points or points outside the allowed range."""

    def __init__(self, points: int, min_points: int, max_points: int):
        self.points = points
        super().__init__(
            f"Points must be non-zero and between {min_points} and {max_points}, got {points}"
        )


class NotAllowedError(ValidationError):
    """Raised when a message cannot be ranked at all (e.g. it was posted by a bot)."""

    pass


class SelfVoteError(NotAllowedError):
    """Raised when a user tries to rank their own joke."""

    def __init__(self, user_id: str, joke_id: str):
        super().__init__(f"User {user_id} cannot rank their own joke {joke_id}")


class StoreUnavailableError(DomainError):
    """Raised when the persistent store cannot be reached or times out.

    Nothing about partially applied state may be assumed when this is raised.
    """

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        super().__init__(f"Store unavailable during {operation}: {reason}")


class InconsistentAggregateError(DomainError):
    """Raised when an aggregate upsert returns a state that breaks its invariants."""

    def __init__(self, aggregate: str, aggregate_id: str, detail: str):
        self.aggregate = aggregate
        self.aggregate_id = aggregate_id
        super().__init__(f"Inconsistent {aggregate} {aggregate_id}: {detail}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
