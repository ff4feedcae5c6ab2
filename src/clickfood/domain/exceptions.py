"""Domain-level exceptions.

Every rule violation in the ordering flow is a subclass of DomainException
so the CLI layer can catch them uniformly and display a short message.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested item or order does not exist."""
