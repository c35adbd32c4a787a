"""
keysplit — Shamir's Secret Sharing over GF(2^8)
Split a secret into N shares where any K reconstruct it.

Fewer than K shares reveal nothing about the secret. Use it to spread
trust in key material across custodians: no single custodian, and no
group smaller than K, can recover the key.

Usage:
    from keysplit import split, recover
    shares = split(b"my key material", num_shares=5, threshold=3)
    secret = recover(shares[:3])

Shares are plain bytes: one value per secret byte, then the holder's
coordinate. How they reach their holders is up to you.
"""

from keysplit.shamir import split, recover, verify_shares
from keysplit.encoding import to_hex, from_hex
from keysplit.errors import (
    ShamirError,
    InvalidThresholdError,
    InvalidParticipantCountError,
    EmptySecretError,
    RandomnessFailureError,
    TooFewSharesError,
    InconsistentShareLengthsError,
    InconsistentInputLengthsError,
    DuplicateCoordinateError,
    RangeExceededError,
    MalformedShareError,
    DivideByZeroError,
)

__version__ = "0.1.0"
__all__ = [
    "split",
    "recover",
    "verify_shares",
    "to_hex",
    "from_hex",
    "ShamirError",
    "InvalidThresholdError",
    "InvalidParticipantCountError",
    "EmptySecretError",
    "RandomnessFailureError",
    "TooFewSharesError",
    "InconsistentShareLengthsError",
    "InconsistentInputLengthsError",
    "DuplicateCoordinateError",
    "RangeExceededError",
    "MalformedShareError",
    "DivideByZeroError",
]
