"""
Tests for share hex encoding and the keysplit command line.
"""

import contextlib
import io
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from keysplit.cli import main as cli_main
from keysplit.encoding import to_hex, from_hex
from keysplit.errors import MalformedShareError
from keysplit.shamir import split, recover


def _run(*argv):
    """Run the CLI, returning (exit code, stdout, stderr)."""
    out, err = io.StringIO(), io.StringIO()
    with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
        try:
            code = cli_main(list(argv))
        except SystemExit as e:
            code = e.code
    return code, out.getvalue(), err.getvalue()


def test_share_serialization():
    """Test share hex serialization round-trip."""
    print("Testing share serialization...", end=" ")
    secret = b"correct horse battery staple"
    shares = split(secret, 7, 4)

    for share in shares:
        text = to_hex(share)
        assert len(text) == 2 * len(share)
        assert from_hex(text) == share

    # Reconstruct from serialized shares, tolerating case and whitespace
    serialized = [to_hex(s).upper() for s in shares[:4]]
    restored = [from_hex(f"  {h[:6]} {h[6:]}\n") for h in serialized]
    assert recover(restored) == secret
    print("PASS")


def test_from_hex_rejects_garbage():
    """Non-hex text and too-short shares are malformed."""
    print("Testing from_hex errors...", end=" ")
    for text in ("zz01", "abc", "", "01"):
        try:
            from_hex(text)
            raise AssertionError(f"from_hex({text!r}) should have raised")
        except MalformedShareError:
            pass
    print("PASS")


def test_cli_split_then_recover():
    """split prints N hex lines; recover on K of them prints the secret."""
    print("Testing CLI split/recover...", end=" ")
    code, out, _ = _run("split", "-n", "5", "-k", "3", "--secret", "hello world")
    assert code == 0
    lines = out.split()
    assert len(lines) == 5
    assert all(len(line) == 2 * (len("hello world") + 1) for line in lines)

    code, out, _ = _run("recover", "--text", lines[4], lines[0], lines[2])
    assert code == 0
    assert out.strip() == "hello world"

    code, out, _ = _run("recover", lines[1], lines[3], lines[4])
    assert code == 0
    assert out.strip() == b"hello world".hex()
    print("PASS")


def test_cli_generate_key():
    """--generate-key splits a 32-byte key without printing it."""
    print("Testing CLI key generation...", end=" ")
    code, out, _ = _run("split", "-n", "3", "-k", "2", "--generate-key")
    assert code == 0
    lines = out.split()
    assert len(lines) == 3
    assert all(len(from_hex(line)) == 33 for line in lines)

    key = recover([from_hex(line) for line in lines[:2]])
    assert len(key) == 32
    assert key.hex() not in out
    print("PASS")


def test_cli_reports_errors():
    """Bad parameters exit 1 with a message, not a traceback."""
    print("Testing CLI errors...", end=" ")
    code, out, err = _run("split", "-n", "5", "-k", "1", "--secret", "x")
    assert code == 1
    assert out == ""
    assert "Threshold" in err
    assert "Traceback" not in err

    code, _, err = _run("recover", "0101")
    assert code == 1
    assert "at least 2 shares" in err

    code, _, err = _run("recover", "not-hex", "0102")
    assert code == 1

    # argparse usage errors
    code, _, _ = _run("split", "-n", "5", "-k", "3")
    assert code == 2
    print("PASS")


def test_cli_demo():
    """The demo walks through a split and both recovery attempts."""
    print("Testing CLI demo...", end=" ")
    code, _, _ = _run("demo")
    assert code == 0
    print("PASS")


def main():
    print("=" * 50)
    print("  Encoding + CLI Tests")
    print("=" * 50)
    print()

    tests = [
        test_share_serialization,
        test_from_hex_rejects_garbage,
        test_cli_split_then_recover,
        test_cli_generate_key,
        test_cli_reports_errors,
        test_cli_demo,
    ]

    passed = 0
    failed = 0

    for test in tests:
        try:
            test()
            passed += 1
        except Exception as e:
            print(f"FAIL: {e}")
            import traceback
            traceback.print_exc()
            failed += 1

    print()
    print(f"Results: {passed} passed, {failed} failed")
    return failed == 0


if __name__ == "__main__":
    success = main()
    sys.exit(0 if success else 1)
