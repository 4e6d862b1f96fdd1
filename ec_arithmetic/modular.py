from . import errors


def reduce(value: int, modulus: int) -> int:
    """
    Reduce an integer to its canonical residue in [0, modulus).

    Args:
        value: Any integer, negative values included
        modulus: Positive modulus

    Returns:
        Canonical residue of value

    Raises:
        DomainError: If modulus is not positive
    """
    if modulus <= 0:
        raise errors.DomainError("Modulus must be positive")
    # floor division keeps the remainder non-negative for a positive modulus
    return value % modulus


def add(augend: int, addend: int, modulus: int) -> int:
    """Return (augend + addend) mod modulus."""
    return reduce(augend + addend, modulus)


def sub(minuend: int, subtrahend: int, modulus: int) -> int:
    """Return (minuend - subtrahend) mod modulus."""
    return reduce(minuend - subtrahend, modulus)


def mul(multiplicand: int, multiplier: int, modulus: int) -> int:
    """Return (multiplicand * multiplier) mod modulus."""
    return reduce(multiplicand * multiplier, modulus)


def inverse(k: int, modulus: int) -> int:
    """
    Compute the multiplicative inverse of k modulo modulus.

    Uses the iterative extended Euclidean algorithm, tracking the Bezout
    coefficients alongside the remainders.

    Args:
        k: Value to invert, may be negative
        modulus: Modulus, at least 2

    Returns:
        Integer m in [1, modulus) such that (k * m) mod modulus == 1

    Raises:
        DomainError: If k is zero or the modulus is below 2
        NotInvertibleError: If gcd(k, modulus) != 1
    """
    if k == 0:
        raise errors.DomainError("Cannot invert zero")
    if modulus < 2:
        raise errors.DomainError("Modulus must be at least 2")

    if k < 0:
        return modulus - inverse(-k, modulus)

    old_s, s = 1, 0
    old_t, t = 0, 1
    old_r, r = k, modulus

    while r != 0:
        quotient = old_r // r
        old_r, r = r, old_r - quotient * r
        old_s, s = s, old_s - quotient * s
        old_t, t = t, old_t - quotient * t

    gcd, x = old_r, old_s
    if gcd != 1:
        raise errors.NotInvertibleError(
            f"{k} has no inverse modulo {modulus} (gcd is {gcd})"
        )

    assert mul(k, x, modulus) == 1, "extended Euclid produced a wrong inverse"

    return reduce(x, modulus)


def sqrt(value: int, prime: int) -> int:
    """
    Compute a square root of value modulo a prime p with p = 3 (mod 4).

    The result is only meaningful when value is a quadratic residue; no
    residuosity check is made.

    Args:
        value: Field element whose root is wanted
        prime: Field prime, congruent to 3 modulo 4

    Returns:
        value ** ((p + 1) / 4) mod p

    Raises:
        DomainError: If the prime is not congruent to 3 modulo 4
    """
    if prime % 4 != 3:
        raise errors.DomainError("Square root shortcut requires p = 3 (mod 4)")
    return pow(reduce(value, prime), (prime + 1) // 4, prime)
