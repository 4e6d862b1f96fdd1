import dataclasses
import typing as t

from . import curve_parameters
from . import errors


@dataclasses.dataclass(frozen=True)
class Point:
    """An affine point (x, y). Membership of a curve is checked by the engine."""

    x: int
    y: int

    def __post_init__(self) -> None:
        """Validate coordinate types and width on initialization."""
        for value in (self.x, self.y):
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError("Point coordinates must be integers")

        limit = 1 << (curve_parameters.COORDINATE_LENGTH_BYTES * 8)
        if not (0 <= self.x < limit and 0 <= self.y < limit):
            raise errors.MalformedPointError("Point coordinates out of range")

    @classmethod
    def from_coordinates(cls, x: int, y: int) -> "Point":
        """Create a Point from x and y coordinates."""
        return cls(x=x, y=y)

    @classmethod
    def from_bytes(cls, x_bytes: bytes, y_bytes: bytes) -> "Point":
        """
        Create a Point from big-endian unsigned coordinate bytes.

        Args:
            x_bytes: Encoded x coordinate
            y_bytes: Encoded y coordinate

        Returns:
            Point with the decoded coordinates
        """
        return cls(
            x=int.from_bytes(x_bytes, byteorder="big"),
            y=int.from_bytes(y_bytes, byteorder="big"),
        )

    @property
    def x_bytes(self) -> bytes:
        """Return the 32-byte big-endian x coordinate."""
        return self.x.to_bytes(curve_parameters.COORDINATE_LENGTH_BYTES, byteorder="big")

    @property
    def y_bytes(self) -> bytes:
        """Return the 32-byte big-endian y coordinate."""
        return self.y.to_bytes(curve_parameters.COORDINATE_LENGTH_BYTES, byteorder="big")

    def __repr__(self) -> str:
        return f"Point(0x{self.x:064x}, 0x{self.y:064x})"


class PointAtInfinity:
    """The identity element of the curve group."""

    _instance: t.Optional["PointAtInfinity"] = None

    def __new__(cls) -> "PointAtInfinity":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __eq__(self, other: object) -> bool:
        return isinstance(other, PointAtInfinity)

    def __hash__(self) -> int:
        return hash(PointAtInfinity)

    def __repr__(self) -> str:
        return "INFINITY"


INFINITY = PointAtInfinity()

GroupElement = t.Union[Point, PointAtInfinity]
