"""Domain-level exceptions.

Factories never raise: they return ``Ok``/``Err`` results. Exceptions are
reserved for the few paths that are unsafe by contract (``unwrap()``,
``Price.unsafe_create``) and for raw input that is not even the right
primitive, so the CLI layer can catch them uniformly.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value that was assumed to be valid turned out not to be."""
