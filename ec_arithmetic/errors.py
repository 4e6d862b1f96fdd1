class CurveError(ValueError):
    """Base class for every error raised by the curve arithmetic."""


class DomainError(CurveError):
    """A scalar is outside the domain of the operation."""


class NotInvertibleError(CurveError):
    """No modular inverse exists because the value and modulus share a factor."""


class InvalidPointError(CurveError):
    """An input or computed point does not satisfy the curve equation."""


class UndefinedResultError(CurveError):
    """The group law was asked for a result that only the identity can represent."""


class UnsupportedCurveError(CurveError):
    """The curve parameters are rejected or lack a required capability."""


class MalformedPointError(CurveError):
    """A serialized point has an invalid length, prefix or coordinate."""
