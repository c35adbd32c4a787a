"""
Secure Randomness
Cryptographically secure bytes, bounded integers and permutations.

Everything random in keysplit comes from here: polynomial coefficients and
the order in which participant coordinates are dealt. The source is the
operating system CSPRNG (through the secrets module). There is no seed, and
there is no way to give it one.

Consumers take an optional `source` argument so a deterministic subclass
can stand in during tests.
"""

import secrets

from keysplit.errors import RandomnessFailureError


class SecureRandom:
    """
    Thin wrapper over the OS CSPRNG.

    Any failure from the operating system surfaces as RandomnessFailureError
    rather than as a partially filled buffer.
    """

    def read(self, size: int) -> bytes:
        """Return `size` secure random bytes."""
        try:
            data = secrets.token_bytes(size)
        except (OSError, NotImplementedError) as e:
            raise RandomnessFailureError("secure random source unavailable") from e
        if len(data) != size:
            raise RandomnessFailureError(
                f"secure random source returned {len(data)} of {size} bytes"
            )
        return data

    def randbelow(self, upper: int) -> int:
        """Return a uniform int in [0, upper)."""
        try:
            return secrets.randbelow(upper)
        except (OSError, NotImplementedError) as e:
            raise RandomnessFailureError("secure random source unavailable") from e

    def shuffle(self, items: list) -> None:
        """
        Shuffle `items` in place (Fisher-Yates).

        Every swap index is drawn from randbelow, so each of the len(items)!
        orderings is equally likely.
        """
        for i in range(len(items) - 1, 0, -1):
            j = self.randbelow(i + 1)
            items[i], items[j] = items[j], items[i]


_default = SecureRandom()


def default_source() -> SecureRandom:
    """The process-wide source used when callers don't pass one."""
    return _default
