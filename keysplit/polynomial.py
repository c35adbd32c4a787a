"""
Polynomials over GF(2^8)
Random generation, Horner evaluation and Lagrange interpolation.

A polynomial is a bytearray of coefficients, lowest degree first:
p(x) = c[0] + c[1]*x + ... + c[k-1]*x^(k-1). c[0] is the intercept, the
secret byte being protected; the rest are random.
"""

from keysplit import galois
from keysplit.entropy import SecureRandom, default_source
from keysplit.errors import (
    DuplicateCoordinateError,
    InconsistentInputLengthsError,
    RandomnessFailureError,
)


def random_polynomial(order: int, source: SecureRandom = None) -> bytearray:
    """
    Generate `order` coefficients, all but the intercept random.

    Index 0 is left at 0 for the caller to overwrite with the secret byte.
    The caller owns the buffer and should zero it once done.

    Raises:
        RandomnessFailureError: If the source cannot supply bytes.
    """
    source = source or default_source()
    random_bytes = source.read(order - 1)
    if len(random_bytes) != order - 1:
        raise RandomnessFailureError("random source returned a short read")

    coefficients = bytearray(order)
    coefficients[1:] = random_bytes
    return coefficients


def evaluate_at(x: int, polynomial) -> int:
    """Evaluate a polynomial at x using Horner's method."""
    # Every term above degree 0 vanishes at x = 0: p(0) is the intercept.
    if x == 0:
        return polynomial[0]

    degree = len(polynomial) - 1
    value = polynomial[degree]
    for i in range(degree - 1, -1, -1):
        value = galois.add(polynomial[i], galois.multiply(value, x))
    return value


def interpolate_at(coordinates, values, z: int) -> int:
    """
    Lagrange interpolation at z through the points (coordinates[i], values[i]).

    Characteristic 2: subtraction is addition, so z - x_j is add(z, x_j).

    Raises:
        InconsistentInputLengthsError: If coordinates and values differ in length.
        DuplicateCoordinateError: If two coordinates are equal.
    """
    if len(coordinates) != len(values):
        raise InconsistentInputLengthsError(
            f"{len(coordinates)} coordinates but {len(values)} values"
        )
    if len(set(coordinates)) != len(coordinates):
        raise DuplicateCoordinateError("interpolation coordinates must be distinct")

    result = 0
    for i, x_i in enumerate(coordinates):
        # The basis product starts at the multiplicative identity
        basis = 1
        for j, x_j in enumerate(coordinates):
            if i == j:
                continue
            basis = galois.multiply(
                basis,
                galois.divide(galois.add(z, x_j), galois.add(x_i, x_j)),
            )
        result = galois.add(result, galois.multiply(basis, values[i]))
    return result
