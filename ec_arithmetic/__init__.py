from .curve_parameters import CurveParameters
from .engine import CurveEngine
from .errors import (
    CurveError,
    DomainError,
    InvalidPointError,
    MalformedPointError,
    NotInvertibleError,
    UndefinedResultError,
    UnsupportedCurveError,
)
from .point import INFINITY, GroupElement, Point, PointAtInfinity

__all__ = [
    "CurveEngine",
    "CurveError",
    "CurveParameters",
    "DomainError",
    "GroupElement",
    "INFINITY",
    "InvalidPointError",
    "MalformedPointError",
    "NotInvertibleError",
    "Point",
    "PointAtInfinity",
    "UndefinedResultError",
    "UnsupportedCurveError",
]
