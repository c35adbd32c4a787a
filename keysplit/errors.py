"""
Errors
Every failure the engine can report, as a small exception hierarchy.

Nothing in keysplit terminates the process on bad input. Each problem is
raised as a subclass of ShamirError so callers can catch the whole family,
and each subclass also derives from the matching builtin (ValueError,
RuntimeError, ZeroDivisionError) so generic handlers keep working.

Messages never carry secret bytes, coefficients or share values.
"""


class ShamirError(Exception):
    """Base class for all keysplit errors."""


class InvalidThresholdError(ShamirError, ValueError):
    """Threshold is below 2 or above the number of shares."""


class InvalidParticipantCountError(ShamirError, ValueError):
    """Number of shares is below 2 or above 255."""


class EmptySecretError(ShamirError, ValueError):
    """The secret has zero length."""


class RandomnessFailureError(ShamirError, RuntimeError):
    """The secure randomness source could not supply bytes."""


class TooFewSharesError(ShamirError, ValueError):
    """Fewer than 2 shares were passed to recover."""


class InconsistentShareLengthsError(ShamirError, ValueError):
    """Shares of differing lengths were passed to recover."""


class InconsistentInputLengthsError(ShamirError, ValueError):
    """Coordinates and values passed to interpolation differ in length."""


class DuplicateCoordinateError(ShamirError, ValueError):
    """Two shares (or two picked coordinates) carry the same coordinate."""


class RangeExceededError(ShamirError, ValueError):
    """More coordinates were requested than the field can provide."""


class MalformedShareError(ShamirError, ValueError):
    """A share is too short, has a zero coordinate, or is not valid hex."""


class DivideByZeroError(ShamirError, ZeroDivisionError):
    """Field division (or inversion) by the additive identity."""
