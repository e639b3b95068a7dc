"""Domain exceptions.

Errors raised by the catalog generators when a caller passes arguments
that cannot produce a meaningful result. Soft fallbacks (missing category,
missing description, exhausted unique-string retries) are not errors and
never raise.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the API layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidArgumentError(DomainError):
    """Raised when an argument is outside the accepted domain.

    Examples are an empty charset, an odd hex length, no character
    class selected, or an empty sales channel list.
    """

    def __init__(self, argument: str, reason: str) -> None:
        """Initialize invalid argument error.

        Args:
            argument: Name of the offending argument.
            reason: Explanation of why the value is rejected.
        """
        super().__init__(
            f"Invalid argument '{argument}': {reason}",
            details={"argument": argument, "reason": reason},
        )
        self.argument = argument
        self.reason = reason
