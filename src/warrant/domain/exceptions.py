"""Domain exceptions."""


class WarrantError(Exception):
    """Base exception for Warrant."""

    pass


class PermissionDenied(WarrantError):
    """User does not have permission for the requested action."""

    def __init__(
        self,
        message: str = "Permission denied",
        *,
        action: str | None = None,
        subject_type: str | None = None,
        reason: str | None = None,
    ) -> None:
        super().__init__(message)
        self.action = action
        self.subject_type = subject_type
        self.reason = reason


class NotFound(WarrantError):
    """Requested resource was not found."""

    pass


class ValidationError(WarrantError):
    """Validation failed for input data."""

    pass


class UnsupportedConditionOperator(ValidationError):
    """Condition uses an operator the matcher does not implement."""

    def __init__(self, operator: str) -> None:
        super().__init__(f"Unsupported condition operator: {operator}")
        self.operator = operator
