"""Domain-level exceptions.

Validators report bad user input through return values, not exceptions.
The classes below cover programmer misuse and broken configuration, and
share the DomainException base so the CLI can catch them uniformly.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A model invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class EmptyStackError(DomainException, IndexError):
    """pop() or peek() was called on an empty stack."""


class ConfigurationError(DomainException):
    """A configuration data file is malformed."""
