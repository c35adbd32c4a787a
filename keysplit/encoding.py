"""
Share Text Encoding
Hex strings for showing shares to people and pasting them back.

The text form is just the share bytes in hex, coordinate last, exactly
as split returns them. It adds nothing to the wire layout.
"""

from keysplit.errors import MalformedShareError


def to_hex(share: bytes) -> str:
    """Serialize a share to a portable hex string."""
    return bytes(share).hex()


def from_hex(text: str) -> bytes:
    """
    Deserialize a share from a hex string.

    Surrounding and embedded whitespace is ignored; case doesn't matter.

    Raises:
        MalformedShareError: If the text isn't hex or decodes to fewer
            than 2 bytes.
    """
    cleaned = "".join(text.split())
    try:
        share = bytes.fromhex(cleaned)
    except ValueError as e:
        raise MalformedShareError("Share is not a valid hex string") from e
    if len(share) < 2:
        raise MalformedShareError("Share must decode to at least 2 bytes")
    return share
