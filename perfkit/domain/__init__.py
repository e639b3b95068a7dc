"""Domain layer.

Holds the error types shared by the catalog generators and the API.
"""

from perfkit.domain.exceptions import DomainError, InvalidArgumentError

__all__ = [
    "DomainError",
    "InvalidArgumentError",
]
