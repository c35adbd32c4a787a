"""
keysplit — Basic Usage Example

Splits a secret 3-of-5, prints the shares, then shows that two shares
recover garbage while any three recover the secret exactly.
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from keysplit import split, recover, to_hex, from_hex


def main():
    secret = b"hello world"
    number, threshold = 5, 3

    print("=" * 50)
    print("  keysplit — 3-of-5 Shamir split")
    print("=" * 50)

    shares = split(secret, number, threshold)

    print(f"\nSecret: {secret!r} ({len(secret)} bytes)")
    print(f"Each share: {len(shares[0])} bytes (secret length + 1 coordinate byte)")
    for i, share in enumerate(shares, start=1):
        print(f"  share {i}: {to_hex(share)}")

    # Below threshold: no error, just bytes unrelated to the secret
    below = recover(shares[:threshold - 1])
    print(f"\nRecovered with {threshold - 1} shares: {below!r}")

    # At threshold, any subset in any order
    exact = recover([shares[4], shares[0], shares[2]])
    print(f"Recovered with {threshold} shares:  {exact!r}")

    # Shares survive a trip through their text form
    pasted = [from_hex(to_hex(s)) for s in shares[1:4]]
    print(f"Recovered from hex text: {recover(pasted)!r}")


if __name__ == "__main__":
    main()
