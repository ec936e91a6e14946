"""Command-line front end for the ciphers and key exchanges."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from cryptolab.hill import HillCipher
from cryptolab.publickey import diffie_hellman, generate_rsa_keys
from cryptolab.substitution import caesar_decrypt, caesar_encrypt

__all__ = ["main"]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cryptolab", description="Classical and toy public-key cryptography.")
    commands = parser.add_subparsers(dest="command", required=True)

    caesar = commands.add_parser("caesar", help="shift letters and digits by a key")
    caesar.add_argument("--key", type=int, required=True)
    caesar.add_argument("--decrypt", action="store_true", help="decrypt instead of encrypt")
    caesar.add_argument("text")

    hill = commands.add_parser("hill", help="encrypt and decrypt with a 2x2 Hill cipher")
    hill.add_argument("--key", type=int, nargs=4, required=True, metavar=("K00", "K01", "K10", "K11"))
    hill.add_argument("text", help="upper-case letters, even length")

    dh = commands.add_parser("dh", help="Diffie-Hellman key exchange")
    dh.add_argument("p", type=int, help="prime modulus")
    dh.add_argument("g", type=int, help="base")
    dh.add_argument("a", type=int, help="private key of party A")
    dh.add_argument("b", type=int, help="private key of party B")

    rsa = commands.add_parser("rsa", help="RSA key generation, encryption and decryption")
    rsa.add_argument("p", type=int, help="first prime")
    rsa.add_argument("q", type=int, help="second prime")
    rsa.add_argument("e", type=int, help="public exponent coprime to phi(n)")
    rsa.add_argument("message", type=int, help="a number less than n")
    return parser


def _run_caesar(args: argparse.Namespace) -> None:
    if args.decrypt:
        print(f"Decrypted message: {caesar_decrypt(args.text, args.key)}")
    else:
        print(f"Encrypted message: {caesar_encrypt(args.text, args.key)}")


def _run_hill(args: argparse.Namespace) -> None:
    k = args.key
    cipher = HillCipher([[k[0], k[1]], [k[2], k[3]]])
    encrypted = cipher.encrypt(args.text)
    print(f"Encrypted text: {encrypted}")
    print(f"Decrypted text: {cipher.decrypt(encrypted)}")


def _run_dh(args: argparse.Namespace) -> None:
    result = diffie_hellman(args.p, args.g, args.a, args.b)
    print(f"Public key A for Party A: {result.public_a}")
    print(f"Public key B for Party B: {result.public_b}")
    print(f"Shared secret key computed by Party A: {result.secret_a}")
    print(f"Shared secret key computed by Party B: {result.secret_b}")
    print(f"The shared secret key is successfully established: {result.secret}")


def _run_rsa(args: argparse.Namespace) -> None:
    key = generate_rsa_keys(args.p, args.q, args.e)
    print(f"Public key: (e = {key.e}, n = {key.n})")
    print(f"Private key: (d = {key.d}, n = {key.n})")
    encrypted = key.encrypt(args.message)
    print(f"Encrypted message: {encrypted}")
    print(f"Decrypted message: {key.decrypt(encrypted)}")


_HANDLERS = {
    "caesar": _run_caesar,
    "hill": _run_hill,
    "dh": _run_dh,
    "rsa": _run_rsa,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run the chosen command and return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        _HANDLERS[args.command](args)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())