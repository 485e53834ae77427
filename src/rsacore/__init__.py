"""Textbook RSA in an Academic Sense.

Provides the number-theoretic core of textbook RSA: Miller-Rabin primality testing, random prime generation, the
Extended Euclidean Algorithm and modular inverse, key pair generation and raw modular-exponentiation encryption and
decryption. No padding, no key formats and no side-channel hardening: strictly for study.

Typical usage example:

    pub, priv = gen_keys()
    c = encrypt(pub, 42)
    m = decrypt(pub, priv, c)
    is_probable_prime(2**127 - 1, 20)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from rsacore.keygen import gen_keys
from rsacore.keygen import is_probable_prime
from rsacore.keygen import PUBLIC_EXPONENT
from rsacore.keygen import random_prime
from rsacore.numtheory import extended_gcd
from rsacore.numtheory import factor_out_twos
from rsacore.numtheory import is_even
from rsacore.numtheory import mod_inverse
from rsacore.numtheory import NotCoprimeError
from rsacore.rsa import decrypt
from rsacore.rsa import encrypt
from rsacore.rsa import PrivateKey
from rsacore.rsa import PublicKey

__version__ = "0.1.0"
__all__ = [
    "PublicKey",
    "PrivateKey",
    "PUBLIC_EXPONENT",
    "NotCoprimeError",
    "gen_keys",
    "encrypt",
    "decrypt",
    "is_probable_prime",
    "random_prime",
    "extended_gcd",
    "mod_inverse",
    "is_even",
    "factor_out_twos",
]
