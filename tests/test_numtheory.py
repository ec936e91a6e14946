import math
import random

import pytest

from cryptolab.numtheory import (
    EuclidStep,
    NoInverseError,
    additive_inverse,
    are_relatively_prime,
    euler_totient,
    extended_euclidean,
    extended_gcd,
    extended_gcd_steps,
    gcd_iterative,
    gcd_recursive,
    is_primitive_root,
    is_probable_prime,
    modular_inverse,
    power_mod,
    primitive_roots,
)

PAIRS = [(48, 18), (17, 5), (100, 75), (1, 1), (0, 9), (9, 0), (240, 46), (35, 64)]
PRIMES = [2, 3, 5, 7, 11, 13, 97, 7919, 104729]
COMPOSITES = [0, 1, 4, 9, 15, 561, 1105, 7917, 104730]


@pytest.mark.parametrize("a,b", PAIRS)
def test_gcd_forms_agree_with_math_gcd(a, b):
    assert gcd_iterative(a, b) == math.gcd(a, b)
    assert gcd_recursive(a, b) == math.gcd(a, b)


@pytest.mark.parametrize("a,b", [(48, 18), (17, 5), (100, 75)])
def test_gcd_divides_both(a, b):
    g = gcd_iterative(a, b)
    assert a % g == 0 and b % g == 0


@pytest.mark.parametrize("a,n", [(3, 5), (-3, 5), (10, 5), (0, 7), (123, 11)])
def test_additive_inverse(a, n):
    inv = additive_inverse(a, n)
    assert 0 <= inv < n
    assert (a + inv) % n == 0


@pytest.mark.parametrize("n", [0, -4])
def test_additive_inverse_rejects_bad_modulus(n):
    with pytest.raises(ValueError):
        additive_inverse(3, n)


def test_relatively_prime():
    assert are_relatively_prime(8, 15) is True
    assert are_relatively_prime(12, 18) is False


@pytest.mark.parametrize("a,b", PAIRS)
def test_extended_gcd_bezout(a, b):
    g, x, y = extended_gcd(a, b)
    assert g == math.gcd(a, b)
    assert a * x + b * y == g


@pytest.mark.parametrize("a,b", PAIRS)
def test_extended_euclidean_bezout(a, b):
    g, x, y = extended_euclidean(a, b)
    assert g == math.gcd(a, b)
    assert a * x + b * y == g


def test_extended_gcd_worked_example():
    assert extended_gcd(240, 46) == (2, -9, 47)


def test_extended_gcd_steps_trace():
    steps = extended_gcd_steps(240, 46)
    assert all(isinstance(s, EuclidStep) for s in steps)
    assert steps[0].gcd == 46
    assert steps[0].x == 0 and steps[0].y == 1
    assert steps[-1].r == 0
    assert steps[-1].gcd == extended_gcd(240, 46)[0]
    for prev, nxt in zip(steps, steps[1:]):
        assert nxt.gcd == prev.r


def test_extended_gcd_steps_empty_when_b_is_zero():
    assert extended_gcd_steps(7, 0) == []
    assert extended_gcd(7, 0) == (7, 1, 0)


@pytest.mark.parametrize("a,n", [(3, 11), (7, 26), (17, 3120), (5, 2), (-3, 7)])
def test_modular_inverse(a, n):
    inv = modular_inverse(a, n)
    assert 0 <= inv < n
    assert (a * inv) % n == 1


@pytest.mark.parametrize("a,n", [(4, 8), (6, 9), (0, 5)])
def test_modular_inverse_missing(a, n):
    with pytest.raises(NoInverseError):
        modular_inverse(a, n)


def test_no_inverse_error_is_value_error():
    with pytest.raises(ValueError):
        modular_inverse(10, 15)


@pytest.mark.parametrize("n", list(range(1, 60)))
def test_totient_counts_coprimes(n):
    assert euler_totient(n) == sum(1 for k in range(1, n + 1) if math.gcd(k, n) == 1)


@pytest.mark.parametrize("p", PRIMES)
def test_totient_of_prime(p):
    assert euler_totient(p) == p - 1


@pytest.mark.parametrize("n", [0, -5])
def test_totient_rejects_non_positive(n):
    with pytest.raises(ValueError):
        euler_totient(n)


@pytest.mark.parametrize(
    "base,exp,mod", [(2, 10, 1000), (7, 0, 13), (123, 456, 789), (5, 117, 19), (10**6, 3, 97)]
)
def test_power_mod_matches_pow(base, exp, mod):
    assert power_mod(base, exp, mod) == pow(base, exp, mod)


def test_power_mod_zero_exponent_is_one():
    assert power_mod(5, 0, 1) == 1


def test_primitive_roots_small_n():
    assert primitive_roots(0) == []
    assert primitive_roots(1) == []


@pytest.mark.parametrize("n", [4, 6, 9, 10, 12, 15])
def test_primitive_roots_consistent(n):
    roots = primitive_roots(n)
    assert roots == [g for g in range(2, n) if is_primitive_root(g, n)]
    for g in roots:
        assert math.gcd(g, n) > 1


@pytest.mark.parametrize("p", [5, 7, 11, 13])
def test_primitive_roots_of_prime_reach_one(p):
    # every unit g satisfies g**(p-1) == 1, which lies in the checked range
    assert primitive_roots(p) == []


@pytest.mark.parametrize("n", PRIMES)
def test_probable_prime_accepts_primes(n):
    assert is_probable_prime(n, 5, random.Random(1234)) is True


@pytest.mark.parametrize("n", COMPOSITES)
def test_probable_prime_rejects_composites(n):
    assert is_probable_prime(n, 5, random.Random(1234)) is False


def test_probable_prime_defaults():
    assert is_probable_prime(97) is True
    assert is_probable_prime(100) is False