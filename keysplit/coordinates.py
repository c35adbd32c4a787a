"""
Coordinate Selection
Deal each participant a distinct, nonzero point of GF(2^8).

Coordinates are the first n entries of a secure uniform permutation of
1..255, so no value is favoured and none repeats within a split.
"""

from keysplit.entropy import SecureRandom, default_source
from keysplit.errors import RangeExceededError

MAX_COORDINATES = 255


def pick_coordinates(n: int, source: SecureRandom = None) -> list[int]:
    """
    Pick n distinct nonzero field elements in uniformly random order.

    Raises:
        RangeExceededError: If n is outside 1..255.
        RandomnessFailureError: If the source cannot supply randomness.
    """
    if n < 1 or n > MAX_COORDINATES:
        raise RangeExceededError(
            f"can pick between 1 and {MAX_COORDINATES} coordinates, not {n}"
        )

    source = source or default_source()
    candidates = list(range(1, MAX_COORDINATES + 1))
    source.shuffle(candidates)
    return candidates[:n]
