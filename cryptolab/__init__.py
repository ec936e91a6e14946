"""Classical ciphers, toy public-key schemes and number-theory tools for studying cryptography."""

__version__ = "0.1.0"

__all__ = [
    "cli",
    "hill",
    "numtheory",
    "playfair",
    "publickey",
    "railfence",
    "sbox",
    "substitution",
]