import pytest

from ec_arithmetic import curve_parameters
from ec_arithmetic import engine
from ec_arithmetic import point


# Secp256k1 curve parameters
SECP256K1_P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
SECP256K1_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
SECP256K1_G = point.Point(
    0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
    0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
)
SECP256K1_2G = point.Point(
    0xC6047F9441ED7D6D3045406E95C07CD85C778E4B8CEF3CA7ABAC09B95C709EE5,
    0x1AE168FEA63DC339A3C58419466CEAEEF7F632653266D0E1236431A950CFE52A,
)
SECP256K1_3G = point.Point(
    0xF9308A019258C31049344F85F89D5229B531C845836F99B08601F113BCE036F9,
    0x388F7B0F632DE8140FE337E62A37F3566500A99934C2231B6CB9FD7584B8E672,
)

# y^2 = x^3 + 2x + 2 (mod 17), a cyclic group of 19 points generated by (5, 1)
TOY_GENERATOR = point.Point(5, 1)
TOY_ORDER = 19
TOY_MULTIPLES = {
    1: (5, 1),
    2: (6, 3),
    3: (10, 6),
    4: (3, 1),
    5: (9, 16),
    6: (16, 13),
    7: (0, 6),
    8: (13, 7),
    9: (7, 6),
    10: (7, 11),
    11: (13, 10),
    12: (0, 11),
    13: (16, 4),
    14: (9, 1),
    15: (3, 16),
    16: (10, 11),
    17: (6, 14),
    18: (5, 16),
}


@pytest.fixture
def toy_engine():
    """Engine for y^2 = x^3 + 2x + 2 (mod 17) without a group order."""
    return engine.CurveEngine(curve_parameters.CurveParameters.from_ints(17, 2, 2))


@pytest.fixture
def toy_engine_with_order():
    """Engine for y^2 = x^3 + 2x + 2 (mod 17) with its group order of 19."""
    return engine.CurveEngine(
        curve_parameters.CurveParameters.from_ints(17, 2, 2, order=TOY_ORDER)
    )


@pytest.fixture
def compressible_engine():
    """Engine for y^2 = x^3 + 7 (mod 23), a small prime congruent to 3 mod 4."""
    return engine.CurveEngine(curve_parameters.CurveParameters.from_ints(23, 0, 7))


@pytest.fixture
def two_torsion_engine():
    """Engine for y^2 = x^3 + x + 21 (mod 23), which contains the point (1, 0)."""
    return engine.CurveEngine(curve_parameters.CurveParameters.from_ints(23, 1, 21))


@pytest.fixture
def secp256k1_engine():
    """Engine for secp256k1 built from its byte-encoded parameters."""
    return engine.CurveEngine.from_bytes(
        SECP256K1_P.to_bytes(32, byteorder="big"),
        b"\x00",
        b"\x07",
    )
