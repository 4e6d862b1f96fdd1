import dataclasses
import typing as t

from . import errors
from . import modular


# Coordinates are serialized as fixed-width big-endian integers
COORDINATE_LENGTH_BYTES = 32


@dataclasses.dataclass(frozen=True)
class CurveParameters:
    """Defines the curve y^2 = x^3 + a*x + b over the prime field of order prime."""

    prime: int
    a: int
    b: int
    order: t.Optional[int] = None

    def __post_init__(self) -> None:
        if self.prime <= 3 or self.prime % 2 == 0:
            raise errors.UnsupportedCurveError("Field prime must be an odd integer greater than 3")
        if self.prime.bit_length() > COORDINATE_LENGTH_BYTES * 8:
            raise errors.UnsupportedCurveError(
                f"Field prime does not fit in {COORDINATE_LENGTH_BYTES} bytes"
            )
        if self.order is not None and self.order <= 0:
            raise errors.UnsupportedCurveError("Group order must be positive")

        object.__setattr__(self, "a", modular.reduce(self.a, self.prime))
        object.__setattr__(self, "b", modular.reduce(self.b, self.prime))

        # Discriminant check: 4a^3 + 27b^2 != 0 (mod p)
        discriminant = modular.add(
            4 * pow(self.a, 3, self.prime), 27 * pow(self.b, 2, self.prime), self.prime
        )
        if discriminant == 0:
            raise errors.UnsupportedCurveError("Curve is singular")

    @classmethod
    def from_ints(
        cls, prime: int, a: int, b: int, order: t.Optional[int] = None
    ) -> "CurveParameters":
        """Create from integer parameters."""
        return cls(prime=prime, a=a, b=b, order=order)

    @classmethod
    def from_bytes(
        cls,
        prime: bytes,
        a: bytes,
        b: bytes,
        order: t.Optional[bytes] = None,
    ) -> "CurveParameters":
        """
        Create from unsigned big-endian byte strings.

        Args:
            prime: Field prime
            a: Curve coefficient a
            b: Curve coefficient b
            order: Optional order of the point group

        Returns:
            CurveParameters instance
        """
        return cls(
            prime=int.from_bytes(prime, byteorder="big"),
            a=int.from_bytes(a, byteorder="big"),
            b=int.from_bytes(b, byteorder="big"),
            order=None if order is None else int.from_bytes(order, byteorder="big"),
        )

    @property
    def coordinate_length(self) -> int:
        """Return the serialized width of one coordinate in bytes."""
        return COORDINATE_LENGTH_BYTES

    @property
    def supports_compression(self) -> bool:
        """Return whether compressed points can be decompressed (p = 3 mod 4)."""
        return self.prime % 4 == 3

    def __repr__(self) -> str:
        order = "None" if self.order is None else f"0x{self.order:x}"
        return (
            f"CurveParameters(prime=0x{self.prime:x}, a=0x{self.a:x}, "
            f"b=0x{self.b:x}, order={order})"
        )
