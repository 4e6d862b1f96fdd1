import logging
import typing as t

from . import curve_parameters
from . import errors
from . import modular
from . import point
from . import sec1


logger = logging.getLogger(__name__)


class CurveEngine:
    """Group arithmetic and point encoding for a short-Weierstrass curve."""

    def __init__(self, params: curve_parameters.CurveParameters) -> None:
        if not isinstance(params, curve_parameters.CurveParameters):
            raise TypeError("CurveEngine requires CurveParameters")
        self._params = params
        logger.debug(
            "Created curve engine: %d-bit prime, compression %s, group order %s",
            params.prime.bit_length(),
            "supported" if params.supports_compression else "unsupported",
            "configured" if params.order is not None else "not configured",
        )

    @classmethod
    def from_bytes(
        cls,
        prime: bytes,
        a: bytes,
        b: bytes,
        order: t.Optional[bytes] = None,
    ) -> "CurveEngine":
        """
        Create an engine from unsigned big-endian curve parameters.

        Args:
            prime: Field prime
            a: Curve coefficient a
            b: Curve coefficient b
            order: Optional order of the point group

        Returns:
            CurveEngine instance
        """
        return cls(curve_parameters.CurveParameters.from_bytes(prime, a, b, order))

    @property
    def params(self) -> curve_parameters.CurveParameters:
        return self._params

    def is_on_curve(self, pt: point.GroupElement) -> bool:
        """
        Check whether the coordinates are field elements with y^2 - x^3 - a*x - b == 0 (mod p).

        INFINITY is the group identity and always belongs to the curve.
        """
        if isinstance(pt, point.PointAtInfinity):
            return True
        p = self._params.prime
        x, y = pt.x, pt.y
        if not (0 <= x < p and 0 <= y < p):
            return False
        rhs = modular.add(
            modular.add(
                modular.mul(modular.mul(x, x, p), x, p), modular.mul(self._params.a, x, p), p
            ),
            self._params.b,
            p,
        )
        return modular.sub(modular.mul(y, y, p), rhs, p) == 0

    def _require_on_curve(self, pt: point.Point, role: str) -> None:
        if not isinstance(pt, point.Point):
            raise TypeError(f"{role} must be a Point")
        if not self.is_on_curve(pt):
            logger.debug("Rejecting %s %r: not on curve", role, pt)
            raise errors.InvalidPointError(f"{role} is not on the curve")

    def negate(self, pt: point.Point) -> point.Point:
        """
        Return -P, the reflection of P across the x axis.

        Raises:
            InvalidPointError: If the point is not on the curve
        """
        self._require_on_curve(pt, "Point")
        return point.Point.from_coordinates(pt.x, modular.reduce(-pt.y, self._params.prime))

    def add(self, first: point.Point, second: point.Point) -> point.Point:
        """
        Add two points with the chord-and-tangent rule.

        Args:
            first: Point P
            second: Point Q

        Returns:
            R = P + Q

        Raises:
            InvalidPointError: If an operand or the result is not on the curve
            UndefinedResultError: If the sum is the point at infinity
            DomainError: If a point with y = 0 is doubled
        """
        self._require_on_curve(first, "First point")
        self._require_on_curve(second, "Second point")

        p = self._params.prime
        x1, y1 = first.x, first.y
        x2, y2 = second.x, second.y

        if x1 == x2:
            if y1 != y2:
                # P + (-P) = point at infinity
                raise errors.UndefinedResultError(
                    "Cannot add point to its inverse (point at infinity)"
                )
            # Point doubling: (3x^2 + a) / 2y
            numerator = modular.add(3 * modular.mul(x1, x1, p), self._params.a, p)
            slope = modular.mul(numerator, modular.inverse(2 * y1, p), p)
        else:
            # Regular addition: (y1 - y2) / (x1 - x2)
            slope = modular.mul(
                modular.sub(y1, y2, p), modular.inverse(modular.sub(x1, x2, p), p), p
            )

        x3 = modular.sub(modular.sub(modular.mul(slope, slope, p), x1, p), x2, p)
        y3 = modular.sub(modular.mul(slope, modular.sub(x1, x3, p), p), y1, p)
        result = point.Point.from_coordinates(x3, y3)

        if not self.is_on_curve(result):
            raise errors.InvalidPointError("Point addition produced a point off the curve")

        return result

    def multiply(self, pt: point.Point, n: int) -> point.Point:
        """
        Multiply a point by a scalar using the double-and-add algorithm.

        The scalar is rejected when it reduces to zero modulo the group order,
        or modulo the field prime when no group order is configured.

        Args:
            pt: Point P
            n: Positive scalar

        Returns:
            H = n*P

        Raises:
            InvalidPointError: If the point is not on the curve
            DomainError: If the scalar reduces to zero or is not positive
            UndefinedResultError: If an intermediate sum is the point at infinity
        """
        self._require_on_curve(pt, "Point")
        if not isinstance(n, int) or isinstance(n, bool):
            raise TypeError("Scalar must be an integer")

        modulus = self._params.order if self._params.order is not None else self._params.prime
        if modular.reduce(n, modulus) == 0:
            logger.debug("Rejecting scalar %d: zero modulo %d", n, modulus)
            raise errors.DomainError("Scalar reduces to zero")
        if n < 0:
            raise errors.DomainError("Scalar must be positive")

        addend = pt
        result: t.Optional[point.Point] = None

        while n:
            if n & 1:
                result = addend if result is None else self.add(result, addend)
            n >>= 1
            if n:
                addend = self.add(addend, addend)

        assert result is not None
        return result

    def group_negate(self, pt: point.GroupElement) -> point.GroupElement:
        """Return -P, treating INFINITY as its own negation."""
        if isinstance(pt, point.PointAtInfinity):
            return point.INFINITY
        return self.negate(pt)

    def group_add(
        self, first: point.GroupElement, second: point.GroupElement
    ) -> point.GroupElement:
        """
        Add two group elements, returning INFINITY where the sum has no affine point.

        Raises:
            InvalidPointError: If a finite operand is not on the curve
        """
        if isinstance(first, point.PointAtInfinity):
            if not isinstance(second, point.PointAtInfinity):
                self._require_on_curve(second, "Second point")
            return second
        if isinstance(second, point.PointAtInfinity):
            self._require_on_curve(first, "First point")
            return first

        self._require_on_curve(first, "First point")
        self._require_on_curve(second, "Second point")
        if first.x == second.x and (first.y != second.y or first.y == 0):
            return point.INFINITY
        return self.add(first, second)

    def group_multiply(self, pt: point.GroupElement, n: int) -> point.GroupElement:
        """
        Multiply a group element by any integer scalar.

        Zero gives INFINITY and negative scalars multiply the negation. With a
        configured group order the scalar is reduced by it first.

        Raises:
            InvalidPointError: If a finite point is not on the curve
        """
        if not isinstance(n, int) or isinstance(n, bool):
            raise TypeError("Scalar must be an integer")
        if isinstance(pt, point.PointAtInfinity):
            return point.INFINITY
        self._require_on_curve(pt, "Point")

        if n < 0:
            return self.group_multiply(self.negate(pt), -n)
        if self._params.order is not None:
            n = modular.reduce(n, self._params.order)

        addend: point.GroupElement = pt
        result: point.GroupElement = point.INFINITY

        while n:
            if n & 1:
                result = self.group_add(result, addend)
            n >>= 1
            if n:
                addend = self.group_add(addend, addend)

        return result

    def serialize(self, pt: point.GroupElement, compressed: bool = True) -> bytes:
        """Encode a point in SEC1 compressed (33 bytes) or uncompressed (65 bytes) form."""
        return sec1.encode(pt, self._params, compressed)

    def parse(self, data: bytes) -> point.GroupElement:
        """
        Decode a SEC1-encoded point.

        The result is not validated against the curve; call is_on_curve for that.
        """
        return sec1.decode(data, self._params)

    def __repr__(self) -> str:
        return f"CurveEngine({self._params!r})"
