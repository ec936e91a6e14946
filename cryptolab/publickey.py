"""Diffie-Hellman key agreement and textbook RSA over small integers."""

from __future__ import annotations

from dataclasses import dataclass

from cryptolab.numtheory import are_relatively_prime, modular_inverse, power_mod

__all__ = ["SharedSecret", "RSAKey", "diffie_hellman", "generate_rsa_keys"]


@dataclass(frozen=True)
class SharedSecret:
    """Public values exchanged and the secret each party derives from them."""

    public_a: int
    public_b: int
    secret_a: int
    secret_b: int

    @property
    def established(self) -> bool:
        """True when both parties arrived at the same secret."""
        return self.secret_a == self.secret_b

    @property
    def secret(self) -> int:
        """The agreed secret; raise ValueError if the parties disagree."""
        if not self.established:
            raise ValueError("there was an error in key exchange")
        return self.secret_a


def diffie_hellman(p: int, g: int, a: int, b: int) -> SharedSecret:
    """Run the exchange for prime p, base g and private keys a and b."""
    if p < 2:
        raise ValueError("p must be a prime number greater than 1")
    public_a = power_mod(g, a, p)
    public_b = power_mod(g, b, p)
    return SharedSecret(
        public_a=public_a,
        public_b=public_b,
        secret_a=power_mod(public_b, a, p),
        secret_b=power_mod(public_a, b, p),
    )


@dataclass(frozen=True)
class RSAKey:
    """An RSA key pair: public exponent e, private exponent d and modulus n."""

    e: int
    d: int
    n: int

    @property
    def public_key(self) -> tuple[int, int]:
        return self.e, self.n

    @property
    def private_key(self) -> tuple[int, int]:
        return self.d, self.n

    def _check(self, value: int) -> None:
        if not 0 <= value < self.n:
            raise ValueError("message must be a non-negative number less than n")

    def encrypt(self, message: int) -> int:
        """Encrypt a number smaller than n with the public exponent."""
        self._check(message)
        return power_mod(message, self.e, self.n)

    def decrypt(self, ciphertext: int) -> int:
        """Decrypt a number smaller than n with the private exponent."""
        self._check(ciphertext)
        return power_mod(ciphertext, self.d, self.n)


def generate_rsa_keys(p: int, q: int, e: int) -> RSAKey:
    """Build a key pair from primes p and q and a public exponent e coprime to phi(n)."""
    if p < 2 or q < 2:
        raise ValueError("p and q must be prime numbers greater than 1")
    n = p * q
    phi = (p - 1) * (q - 1)
    if not are_relatively_prime(e, phi):
        raise ValueError("e and phi(n) are not coprime")
    d = modular_inverse(e, phi)
    return RSAKey(e=e, d=d, n=n)