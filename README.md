# cryptolab

Classical ciphers, toy public-key schemes and the number theory behind
them, written for learning and experimentation. It has no runtime
dependencies.

**These algorithms are for study only. None of them is safe for protecting
real data.**

## What is inside

| Module | Contents |
| --- | --- |
| `cryptolab.substitution` | Caesar and Vigenère ciphers |
| `cryptolab.railfence` | Rail fence transposition cipher |
| `cryptolab.playfair` | `PlayfairCipher` with a 5×5 key square (`j` folded into `i`) |
| `cryptolab.hill` | `HillCipher` with a 2×2 key matrix modulo 26 |
| `cryptolab.sbox` | The S1 substitution box of DES |
| `cryptolab.numtheory` | GCD, extended Euclid, additive and modular inverses, Euler's totient, modular exponentiation, primitive roots and the Rabin–Miller primality test |
| `cryptolab.publickey` | Diffie–Hellman key agreement and textbook RSA |
| `cryptolab.cli` | The `cryptolab` command |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the library

### Substitution ciphers

```python
from cryptolab.substitution import (
    caesar_encrypt, caesar_decrypt, vigenere_encrypt, vigenere_decrypt,
)

caesar_encrypt("Hello", 3)                   # 'Khoor'
caesar_decrypt("Khoor", 3)                   # 'Hello'

vigenere_encrypt("ATTACKATDAWN", "LEMON")    # 'LXFOPVEFRNHR'
vigenere_decrypt("LXFOPVEFRNHR", "LEMON")    # 'ATTACKATDAWN'
```

Caesar shifts ASCII letters within their own case (mod 26) and digits
within `0`–`9` (mod 10); everything else passes through unchanged.
Vigenère shifts letters only and advances through the key only on letters.
Its key must be a non-empty string of ASCII letters, otherwise
`ValueError` is raised.

### Rail fence

```python
from cryptolab.railfence import rail_fence_encrypt, rail_fence_decrypt

rail_fence_encrypt("wearediscovered", 3)     # 'wecrerdsoeeaivd'
rail_fence_decrypt("wecrerdsoeeaivd", 3)     # 'wearediscovered'
```

The key is the number of rails and must be at least 1.

### Playfair

```python
from cryptolab.playfair import PlayfairCipher

playfair = PlayfairCipher("monarchy")
playfair.matrix                              # the 5x5 key square
playfair.prepare_text("balloon")             # 'balxloon'
sealed = playfair.encrypt("instruments")
playfair.decrypt(sealed)                     # 'instrumentsx'
```

`encrypt` prepares the text itself: it keeps only letters, lower-cases
them, turns `j` into `i`, puts an `x` between doubled letters and pads to
an even length with `x`. `decrypt` returns the prepared text and raises
`ValueError` for an odd-length or non-letter ciphertext.

### Hill

```python
from cryptolab.hill import HillCipher

hill = HillCipher([[3, 3], [2, 5]])
hill.inverse_key()                           # ((15, 17), (20, 9))
hill.encrypt("HI")                           # 'TC'
hill.decrypt("TC")                           # 'HI'
```

Text must be an even number of upper-case letters `A`–`Z`. When the key's
determinant has no inverse modulo 26, `inverse_key` and `decrypt` raise
`NoInverseError`.

### DES S-box

```python
from cryptolab.sbox import S1, s1_output

s1_output(0)    # 14
```

The input is a 6-bit value (0–63): its outer bits select the row and its
middle four bits the column. Other values raise `ValueError`.

### Number theory

```python
from cryptolab import numtheory as nt

nt.gcd_iterative(48, 18)        # 6
nt.gcd_recursive(48, 18)        # 6
nt.are_relatively_prime(8, 15)  # True
nt.additive_inverse(3, 7)       # 4
nt.euler_totient(9)             # 6
nt.power_mod(4, 13, 497)        # 445
nt.modular_inverse(3, 26)       # 9
nt.primitive_roots(7)
nt.is_probable_prime(97)        # True

g, x, y = nt.extended_euclidean(240, 46)    # 240*x + 46*y == g
g, x, y = nt.extended_gcd(240, 46)          # the same, iteratively
for step in nt.extended_gcd_steps(240, 46):
    print(step)                 # one EuclidStep(q, r, x, y, gcd) per division
```

`modular_inverse` raises `NoInverseError` (a `ValueError`) when the number
and the modulus are not coprime. `additive_inverse` and `euler_totient`
raise `ValueError` for a non-positive modulus or argument.
`is_probable_prime(n, k=5, rng=None)` runs `k` Rabin–Miller rounds; pass a
`random.Random` as `rng` for repeatable results.

### Public-key exchanges

```python
from cryptolab.publickey import diffie_hellman, generate_rsa_keys

shared = diffie_hellman(23, 5, 6, 15)
shared.public_a, shared.public_b    # (8, 19)
shared.secret                       # 2

rsa_key = generate_rsa_keys(61, 53, 17)
rsa_key.public_key                  # (17, 3233)
rsa_key.private_key                 # (2753, 3233)
ciphertext = rsa_key.encrypt(65)    # 2790
rsa_key.decrypt(ciphertext)         # 65
```

`generate_rsa_keys` raises `ValueError` when `e` is not coprime to
φ(n); `encrypt` and `decrypt` raise `ValueError` for values outside
`[0, n)`.

## Command line

Installing the package provides the `cryptolab` command. It takes all its
input as arguments:

```
cryptolab caesar --key 3 "Hello 2024"
cryptolab caesar --key 3 --decrypt "Khoor 5357"
cryptolab hill --key 3 3 2 5 HI
cryptolab dh 23 5 6 15
cryptolab rsa 61 53 17 65
```

- `caesar` encrypts the text, or decrypts it with `--decrypt`.
- `hill` encrypts the text with the 2×2 key given row by row, then
  decrypts the result.
- `dh` takes the prime `p`, the base `g` and the two private keys, and
  prints both public keys and both derived secrets.
- `rsa` takes primes `p` and `q`, the public exponent `e` and a message
  number, and prints the key pair, the encrypted and the decrypted message.

On invalid input the command prints `error: ...` to standard error and
exits with status 1.

## What it does not do

The command does not prompt for input, and it offers only the four
sub-commands above. The Vigenère, rail fence and Playfair ciphers, the
S-box and the number-theory functions are available from Python only.