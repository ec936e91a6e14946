"""Elementary number theory: gcd, inverses, totient, powers and primality."""

from __future__ import annotations

import random
from dataclasses import dataclass

__all__ = [
    "NoInverseError",
    "EuclidStep",
    "gcd_iterative",
    "gcd_recursive",
    "additive_inverse",
    "are_relatively_prime",
    "extended_gcd_steps",
    "extended_gcd",
    "extended_euclidean",
    "modular_inverse",
    "euler_totient",
    "power_mod",
    "is_primitive_root",
    "primitive_roots",
    "is_probable_prime",
]


class NoInverseError(ValueError):
    """Raised when a number has no multiplicative inverse modulo n."""


@dataclass(frozen=True)
class EuclidStep:
    """One row of the extended Euclidean algorithm trace."""

    q: int
    r: int
    x: int
    y: int
    gcd: int


def _tdiv(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _tmod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _tdiv(a, b)


def gcd_iterative(a: int, b: int) -> int:
    """Greatest common divisor by repeated remainders."""
    while b != 0:
        a, b = b, _tmod(a, b)
    return a


def gcd_recursive(a: int, b: int) -> int:
    """Greatest common divisor, recursive form."""
    if b == 0:
        return a
    return gcd_recursive(b, _tmod(a, b))


def additive_inverse(a: int, n: int) -> int:
    """Return the value x in [0, n) with a + x congruent to 0 modulo n."""
    if n <= 0:
        raise ValueError("modulo n must be greater than zero")
    return (n - a % n) % n


def are_relatively_prime(a: int, b: int) -> bool:
    """True when a and b share no factor other than 1."""
    return gcd_iterative(a, b) == 1


def _run_extended_gcd(a: int, b: int) -> tuple[list[EuclidStep], int, int, int]:
    old_x, old_y = 1, 0
    cur_x, cur_y = 0, 1
    steps: list[EuclidStep] = []
    while b != 0:
        q = _tdiv(a, b)
        r = _tmod(a, b)
        steps.append(EuclidStep(q=q, r=r, x=cur_x, y=cur_y, gcd=b))
        old_x, cur_x = cur_x, old_x - q * cur_x
        old_y, cur_y = cur_y, old_y - q * cur_y
        a, b = b, r
    return steps, a, old_x, old_y


def extended_gcd_steps(a: int, b: int) -> list[EuclidStep]:
    """Return the table of quotients, remainders and coefficients."""
    steps, _, _, _ = _run_extended_gcd(a, b)
    return steps


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return (g, x, y) with a*x + b*y == g, computed iteratively."""
    _, g, x, y = _run_extended_gcd(a, b)
    return g, x, y


def extended_euclidean(a: int, b: int) -> tuple[int, int, int]:
    """Return (g, x, y) with a*x + b*y == g, computed recursively."""
    if a == 0:
        return b, 0, 1
    g, x1, y1 = extended_euclidean(_tmod(b, a), a)
    return g, y1 - _tdiv(b, a) * x1, x1


def modular_inverse(a: int, n: int) -> int:
    """Return the inverse of a modulo n; raise NoInverseError if none exists."""
    g, x, _ = extended_euclidean(a, n)
    if g != 1:
        raise NoInverseError(f"{a} has no inverse modulo {n}")
    return _tmod(_tmod(x, n) + n, n)


def euler_totient(n: int) -> int:
    """Count the integers in [1, n] that are coprime to n."""
    if n <= 0:
        raise ValueError("n must be a positive integer")
    result = n
    i = 2
    while i * i <= n:
        if n % i == 0:
            while n % i == 0:
                n //= i
            result -= result // i
        i += 1
    if n > 1:
        result -= result // n
    return result


def power_mod(base: int, exp: int, mod: int) -> int:
    """Compute base**exp modulo mod by square-and-multiply."""
    result = 1
    base = _tmod(base, mod)
    while exp > 0:
        if exp & 1:
            result = _tmod(result * base, mod)
        exp >>= 1
        base = _tmod(base * base, mod)
    return result


def is_primitive_root(g: int, n: int) -> bool:
    """True when no power g**i with 1 <= i < n is congruent to 1 modulo n."""
    return all(power_mod(g, i, n) != 1 for i in range(1, n))


def primitive_roots(n: int) -> list[int]:
    """Return every g in [2, n) accepted by is_primitive_root."""
    if n < 2:
        return []
    return [g for g in range(2, n) if is_primitive_root(g, n)]


def is_probable_prime(n: int, k: int = 5, rng: random.Random | None = None) -> bool:
    """Rabin-Miller test with k rounds; False means n is surely composite."""
    if n <= 1:
        return False
    if n in (2, 3):
        return True
    if n % 2 == 0:
        return False
    if rng is None:
        rng = random.Random()

    d, r = n - 1, 0
    while d % 2 == 0:
        d //= 2
        r += 1

    for _ in range(k):
        a = 2 + rng.randrange(n - 4)
        x = power_mod(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(r - 1):
            x = power_mod(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True