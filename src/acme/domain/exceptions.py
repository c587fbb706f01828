"""Domain-level exceptions.

Only input that cannot be represented at all (e.g. a non-numeric cost)
is raised as an exception.  Product-name rejections are never raised;
they are recorded on the Product for the caller to poll.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value could not be coerced into a valid domain value."""
