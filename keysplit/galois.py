"""
GF(2^8) Arithmetic
Byte-level field operations in the Galois field used by AES.

Every value is an int in 0..255. Addition is XOR. Multiplication is
carry-less polynomial multiplication reduced modulo the AES polynomial
x^8 + x^4 + x^3 + x + 1 (0x11B).

Multiplication and inversion go through logarithm/antilogarithm tables
keyed to the generator 0x03. The tables are built once, on first use,
and never modified afterwards, so concurrent readers need no locking.
"""

import threading

from keysplit.errors import DivideByZeroError

FIELD_SIZE = 256
POLYNOMIAL = 0x11B  # x^8 + x^4 + x^3 + x + 1
GENERATOR = 0x03    # x + 1, a primitive element for 0x11B

# Order of the multiplicative group
_ORDER = FIELD_SIZE - 1

_tables = None
_tables_lock = threading.Lock()


def _xtime_multiply(a: int, b: int) -> int:
    """Carry-less multiply of a and b reduced mod POLYNOMIAL (shift-and-add)."""
    product = 0
    while b:
        if b & 1:
            product ^= a
        a <<= 1
        if a & 0x100:
            a ^= POLYNOMIAL
        b >>= 1
    return product


def _build_tables() -> tuple[tuple[int, ...], tuple[int, ...]]:
    """
    Compute (log, exp) for the field.

    exp has 2 * 255 entries so that exp[log[a] + log[b]] never needs a
    modulo. log[0] is a sentinel (0): zero has no logarithm, callers mask it.
    """
    log = [0] * FIELD_SIZE
    exp = [0] * (2 * _ORDER)

    x = 1
    for i in range(_ORDER):
        exp[i] = x
        exp[i + _ORDER] = x
        log[x] = i
        x = _xtime_multiply(x, GENERATOR)

    return tuple(log), tuple(exp)


def _get_tables() -> tuple[tuple[int, ...], tuple[int, ...]]:
    global _tables
    tables = _tables
    if tables is None:
        with _tables_lock:
            if _tables is None:
                _tables = _build_tables()
            tables = _tables
    return tables


def add(a: int, b: int) -> int:
    """Field addition (and subtraction): XOR."""
    return a ^ b


def multiply(a: int, b: int) -> int:
    """Field multiplication via log/exp lookup."""
    log, exp = _get_tables()
    product = exp[log[a] + log[b]]
    # -1 keeps every bit, -0 clears them; no branch on the operands
    return product & -((a != 0) & (b != 0))


def inverse(a: int) -> int:
    """
    Multiplicative inverse of a.

    Raises:
        DivideByZeroError: If a is 0.
    """
    if a == 0:
        raise DivideByZeroError("zero has no multiplicative inverse in GF(2^8)")
    log, exp = _get_tables()
    return exp[_ORDER - log[a]]


def divide(a: int, b: int) -> int:
    """
    Field division a / b, defined as multiply(a, inverse(b)).

    Raises:
        DivideByZeroError: If b is 0.
    """
    if b == 0:
        raise DivideByZeroError("division by zero in GF(2^8)")
    return multiply(a, inverse(b))
