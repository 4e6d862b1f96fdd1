import logging

from . import curve_parameters
from . import errors
from . import modular
from . import point


logger = logging.getLogger(__name__)

PREFIX_INFINITY = 0x00
PREFIX_EVEN_Y = 0x02
PREFIX_ODD_Y = 0x03
PREFIX_UNCOMPRESSED = 0x04

COMPRESSED_LENGTH = 1 + curve_parameters.COORDINATE_LENGTH_BYTES
UNCOMPRESSED_LENGTH = 1 + 2 * curve_parameters.COORDINATE_LENGTH_BYTES


def encode(
    pt: point.GroupElement,
    params: curve_parameters.CurveParameters,
    compressed: bool = True,
) -> bytes:
    """
    Encode a point to SEC1 format.

    Args:
        pt: Point to encode, or INFINITY
        params: Curve the point belongs to
        compressed: Whether to use compressed format (33 bytes) or uncompressed (65 bytes)

    Returns:
        SEC1-encoded bytes

    Raises:
        MalformedPointError: If a coordinate is outside the field
    """
    if isinstance(pt, point.PointAtInfinity):
        return bytes([PREFIX_INFINITY])

    if pt.x >= params.prime or pt.y >= params.prime:
        raise errors.MalformedPointError("Point coordinates out of field range")

    if compressed:
        prefix = PREFIX_EVEN_Y if pt.y % 2 == 0 else PREFIX_ODD_Y
        return bytes([prefix]) + pt.x_bytes

    return bytes([PREFIX_UNCOMPRESSED]) + pt.x_bytes + pt.y_bytes


def decode(data: bytes, params: curve_parameters.CurveParameters) -> point.GroupElement:
    """
    Decode SEC1-encoded bytes into a point.

    Compressed points are decompressed with the p = 3 (mod 4) square root.
    The decoded point is not checked against the curve equation.

    Args:
        data: SEC1-encoded bytes (1, 33 or 65 bytes)
        params: Curve the point belongs to

    Returns:
        Decoded point, or INFINITY for the single byte 0x00

    Raises:
        MalformedPointError: If the length, prefix or a coordinate is invalid
        UnsupportedCurveError: If a compressed point is given for a curve
            without p = 3 (mod 4)
    """
    if not data:
        raise errors.MalformedPointError("Invalid SEC1 length")

    prefix = data[0]

    if len(data) == 1:
        if prefix != PREFIX_INFINITY:
            raise errors.MalformedPointError("Invalid SEC1 infinity encoding")
        return point.INFINITY

    if len(data) == COMPRESSED_LENGTH:
        if prefix not in (PREFIX_EVEN_Y, PREFIX_ODD_Y):
            raise errors.MalformedPointError("Invalid SEC1 compressed prefix")

        x = int.from_bytes(data[1:COMPRESSED_LENGTH], byteorder="big")
        if x >= params.prime:
            raise errors.MalformedPointError("Invalid SEC1 x-coordinate")

        return point.Point.from_coordinates(x, _decompress_y(x, prefix, params))

    if len(data) == UNCOMPRESSED_LENGTH:
        if prefix != PREFIX_UNCOMPRESSED:
            raise errors.MalformedPointError("Invalid SEC1 uncompressed prefix")

        x = int.from_bytes(data[1:COMPRESSED_LENGTH], byteorder="big")
        y = int.from_bytes(data[COMPRESSED_LENGTH:], byteorder="big")
        if x >= params.prime or y >= params.prime:
            raise errors.MalformedPointError("Invalid SEC1 uncompressed coordinates")

        return point.Point.from_coordinates(x, y)

    raise errors.MalformedPointError("Invalid SEC1 length")


def _decompress_y(x: int, prefix: int, params: curve_parameters.CurveParameters) -> int:
    if not params.supports_compression:
        logger.debug("Rejecting compressed point for prime 0x%x", params.prime)
        raise errors.UnsupportedCurveError(
            "Point decompression requires a field prime congruent to 3 modulo 4"
        )

    p = params.prime
    # y^2 = x^3 + a*x + b (mod p)
    y_sq = modular.add(
        modular.add(pow(x, 3, p), modular.mul(params.a, x, p), p), params.b, p
    )
    y = modular.sqrt(y_sq, p)

    if (y % 2 == 0) != (prefix == PREFIX_EVEN_Y):
        y = modular.sub(p, y, p)

    return y
