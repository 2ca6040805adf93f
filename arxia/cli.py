"""Command-line interface: key generation and DID creation."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from arxia.did import ArxiaDid
from arxia.signing import generate_keypair, private_key_bytes, public_key_bytes

_HELP = """\
arxia-cli - Arxia command-line interface

USAGE:
  arxia-cli <COMMAND>

COMMANDS:
  keygen    Generate a new Ed25519 keypair
  did       Generate a new DID
  help      Print this help message"""


def _cmd_keygen() -> None:
    signing_key, _ = generate_keypair()
    print(f"Public key:  {public_key_bytes(signing_key).hex()}")
    print(f"Private key: {private_key_bytes(signing_key).hex()}")
    print()
    print("IMPORTANT: Store your private key securely.")
    print("Never share it or commit it to version control.")


def _cmd_did() -> None:
    signing_key, _ = generate_keypair()
    did = ArxiaDid.from_public_key(public_key_bytes(signing_key))
    print(f"DID: {did}")


def _print_help() -> None:
    print(_HELP)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command named by the first argument; show help otherwise."""
    args = list(sys.argv[1:] if argv is None else argv)
    command = args[0] if args else None
    if command == "keygen":
        _cmd_keygen()
    elif command == "did":
        _cmd_did()
    else:
        _print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())