"""Command line interface for keysplit."""

import argparse
import logging
import sys

from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from keysplit.encoding import from_hex, to_hex
from keysplit.errors import ShamirError
from keysplit.shamir import recover, split

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger("keysplit")

DEMO_SECRET = b"hello world"
DEMO_SHARES = 5
DEMO_THRESHOLD = 3


def _cmd_split(args) -> int:
    if args.generate_key:
        # The key itself is never printed; only its shares leave this process
        secret = AESGCM.generate_key(bit_length=256)
        logger.info("generated a fresh 256-bit AES key to split")
    else:
        secret = args.secret.encode("utf-8")

    shares = split(secret, args.shares, args.threshold)
    for share in shares:
        print(to_hex(share))
    return 0


def _cmd_recover(args) -> int:
    shares = [from_hex(text) for text in args.share]
    secret = recover(shares)
    if args.text:
        print(secret.decode("utf-8", errors="replace"))
    else:
        print(secret.hex())
    return 0


def _cmd_demo(args) -> int:
    number, threshold = DEMO_SHARES, DEMO_THRESHOLD

    logger.info("using Shamir to split secret value: %s", DEMO_SECRET.decode())
    logger.info("using number of shares: %d", number)
    logger.info("using threshold: %d", threshold)

    shares = split(DEMO_SECRET, number, threshold)
    for i, share in enumerate(shares, start=1):
        logger.info("share %d: %s", i, to_hex(share))

    recovered = recover(shares[:threshold - 1])
    logger.info(
        "attempted recovery with %d shares (threshold = %d): %r",
        threshold - 1, threshold, recovered,
    )

    recovered = recover(shares[:threshold])
    logger.info(
        "attempted recovery with %d shares (threshold = %d): %r",
        threshold, threshold, recovered,
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="keysplit",
        description="Split a secret into shares with Shamir's Secret Sharing over GF(2^8)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_split = sub.add_parser("split", help="Split a secret into hex shares")
    p_split.add_argument("-n", "--shares", type=int, required=True, help="Total shares (N)")
    p_split.add_argument("-k", "--threshold", type=int, required=True, help="Shares needed (K)")
    source = p_split.add_mutually_exclusive_group(required=True)
    source.add_argument("--secret", help="Secret text to split (UTF-8)")
    source.add_argument(
        "--generate-key",
        action="store_true",
        help="Split a freshly generated AES-256 key instead of a given secret",
    )
    p_split.set_defaults(func=_cmd_split)

    p_recover = sub.add_parser("recover", help="Recover a secret from hex shares")
    p_recover.add_argument("share", nargs="+", help="Hex-encoded share")
    p_recover.add_argument("--text", action="store_true", help="Print the secret as UTF-8 text")
    p_recover.set_defaults(func=_cmd_recover)

    p_demo = sub.add_parser("demo", help="Walk through a 3-of-5 split and recovery")
    p_demo.set_defaults(func=_cmd_demo)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
    )

    try:
        return args.func(args)
    except ShamirError as e:
        print(f"keysplit: error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
