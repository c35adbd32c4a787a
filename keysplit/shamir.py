"""
Shamir's Secret Sharing
Split a secret into N shares where any K can reconstruct it.

Works byte by byte in GF(2^8): each byte of the secret becomes the
intercept of its own random polynomial of degree K-1, and every
participant receives that polynomial's value at their coordinate.

Share layout (the only format keysplit ever hands out):

    [y_0, y_1, ..., y_(p-1), x]

p value bytes, one per secret byte, followed by the participant's
coordinate x. No header, no version, no length prefix. All shares from
one split have the same length, p + 1.

Shamir's scheme leaks the length of the secret. For anything larger than
a key, encrypt the data and share the key instead.
"""

import hmac
import logging

from keysplit.coordinates import pick_coordinates
from keysplit.entropy import SecureRandom
from keysplit.errors import (
    DuplicateCoordinateError,
    EmptySecretError,
    InconsistentShareLengthsError,
    InvalidParticipantCountError,
    InvalidThresholdError,
    MalformedShareError,
    ShamirError,
    TooFewSharesError,
)
from keysplit.polynomial import evaluate_at, interpolate_at, random_polynomial

logger = logging.getLogger(__name__)

MIN_THRESHOLD = 2
MIN_SHARES = 2
MAX_SHARES = 255
MIN_SECRET_LENGTH = 1


def _wipe(buffer: bytearray) -> None:
    """Overwrite a mutable buffer with zeros, in place."""
    buffer[:] = bytes(len(buffer))


def split(
    secret: bytes,
    num_shares: int,
    threshold: int,
    *,
    source: SecureRandom = None,
) -> list[bytes]:
    """
    Split a secret into shares using Shamir's Secret Sharing.

    Args:
        secret: The secret bytes to split (at least 1 byte).
        num_shares: Total shares to generate (N), 2..255.
        threshold: Minimum shares needed to reconstruct (K), 2..N.
        source: Randomness source. Defaults to the OS CSPRNG.

    Returns:
        List of N shares, each len(secret) + 1 bytes. Any K reconstruct
        the secret.

    Raises:
        InvalidParticipantCountError: If num_shares is outside 2..255.
        InvalidThresholdError: If threshold is below 2 or above num_shares.
        EmptySecretError: If the secret is empty.
        RandomnessFailureError: If the randomness source fails.
    """
    if isinstance(secret, str):
        raise TypeError("secret must be bytes, not str")
    if num_shares < MIN_SHARES or num_shares > MAX_SHARES:
        raise InvalidParticipantCountError(
            f"Number of shares must be between {MIN_SHARES} and {MAX_SHARES}, got {num_shares}"
        )
    if threshold < MIN_THRESHOLD:
        raise InvalidThresholdError(f"Threshold must be at least {MIN_THRESHOLD}")
    if threshold > num_shares:
        raise InvalidThresholdError("Threshold cannot exceed number of shares")
    if len(secret) < MIN_SECRET_LENGTH:
        raise EmptySecretError("Secret cannot be empty")

    logger.debug(
        "splitting %d-byte secret into %d shares, threshold %d",
        len(secret), num_shares, threshold,
    )

    coordinates = pick_coordinates(num_shares, source)
    if len(set(coordinates)) != num_shares or 0 in coordinates:
        raise DuplicateCoordinateError("picked coordinates are not distinct and nonzero")

    # One row per participant: p values, then the coordinate
    rows = [bytearray(len(secret) + 1) for _ in range(num_shares)]
    try:
        for j, chunk in enumerate(secret):
            polynomial = random_polynomial(threshold, source)
            try:
                polynomial[0] = chunk
                for i, x in enumerate(coordinates):
                    rows[i][j] = evaluate_at(x, polynomial)
            finally:
                _wipe(polynomial)

        for row, x in zip(rows, coordinates):
            row[-1] = x

        return [bytes(row) for row in rows]
    finally:
        for row in rows:
            _wipe(row)


def recover(shares: list[bytes]) -> bytes:
    """
    Reconstruct a secret from shares using Lagrange interpolation at x = 0.

    Any K or more shares from the same split return the original secret,
    in any order. The threshold is not stored in the shares, so recover
    cannot tell when it was given too few: fewer than K shares return
    bytes unrelated to the secret, not an error.

    Args:
        shares: At least 2 shares of equal length, as produced by split.

    Returns:
        The reconstructed secret bytes.

    Raises:
        TooFewSharesError: If fewer than 2 shares are given.
        InconsistentShareLengthsError: If the shares differ in length.
        MalformedShareError: If a share is shorter than 2 bytes or has a
            zero coordinate.
        DuplicateCoordinateError: If two shares carry the same coordinate.
    """
    shares = list(shares)
    if len(shares) < MIN_THRESHOLD:
        raise TooFewSharesError(f"Need at least {MIN_THRESHOLD} shares, got {len(shares)}")

    share_length = len(shares[0])
    if any(len(share) != share_length for share in shares):
        raise InconsistentShareLengthsError("All shares must be the same length")
    if share_length < MIN_SECRET_LENGTH + 1:
        raise MalformedShareError("Shares must hold at least one value byte and a coordinate")

    # The participant coordinate is the last byte of each share
    coordinates = [share[-1] for share in shares]
    if 0 in coordinates:
        raise MalformedShareError("Share coordinates must be nonzero")
    if len(set(coordinates)) != len(coordinates):
        raise DuplicateCoordinateError("Two shares carry the same coordinate")

    logger.debug("recovering %d-byte secret from %d shares", share_length - 1, len(shares))

    secret = bytearray(share_length - 1)
    values = bytearray(len(shares))
    try:
        for j in range(share_length - 1):
            for i, share in enumerate(shares):
                values[i] = share[j]
            secret[j] = interpolate_at(coordinates, values, 0)
        return bytes(secret)
    finally:
        _wipe(values)
        _wipe(secret)


def verify_shares(shares: list[bytes], secret: bytes) -> bool:
    """Verify that a set of shares correctly reconstructs the secret."""
    try:
        reconstructed = recover(shares)
    except ShamirError:
        return False
    return hmac.compare_digest(reconstructed, bytes(secret))
