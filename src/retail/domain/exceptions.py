"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input is malformed or a business rule was violated."""


class NotFoundError(DomainException):
    """A requested entity does not exist."""


class ConflictError(DomainException):
    """The request is valid but the current stock state cannot satisfy it.

    Raised for insufficient stock or an inactive product.  Callers may retry
    once the catalog changes.
    """
