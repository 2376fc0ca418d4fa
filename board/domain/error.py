"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Input failed one or more validation rules.

    Carries every violation message, not just the first one found.
    """

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        plural = "" if len(self.errors) == 1 else "s"
        super().__init__(f"ValidationError <{len(self.errors)} error{plural}>")


class ForbiddenError(DomainError):
    """Raised when a user acts on content they have no permission for."""

    def __init__(self, resource: str, identifier: str, user_id: int):
        self.resource = resource
        self.identifier = identifier
        super().__init__(
            f"User {user_id} is not allowed to modify {resource} {identifier}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class FieldNotFetchedError(DomainError):
    """Raised when an optional aggregate is used without having been fetched.

    This signals a caller bug, so it is never mapped to a client error.
    """

    def __init__(self, entity: str, field: str):
        self.entity = entity
        self.field = field
        super().__init__(f"{entity}.{field} was not requested when fetching")
