"""Provides the textbook RSA keys and the raw encryption and decryption primitives.

Strictly "textbook" RSA: the message representative is raised to the key exponent modulo the public modulus, with no
padding, no range checks and no chunking. Messages must already lie in [0, mod-1]; anything larger is silently
reduced by the modular exponentiation.

Typical usage example:

    pub, priv = gen_keys()
    c = encrypt(pub, 42)
    m = decrypt(pub, priv, c)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import typing


class PublicKey(typing.NamedTuple):
    """An RSA public key.

    Attributes:
        mod: The modulus of the keypair, the product of two generated primes.
        expo: The public exponent, coprime to the totient of `mod`.
    """
    mod: int
    expo: int

    @property
    def bsize(self) -> int:
        """Size of the modulus in bytes."""
        return (self.mod.bit_length() + 7) // 8


class PrivateKey(typing.NamedTuple):
    """An RSA private key.

    Holds only the private exponent. The modulus belongs to the matching `PublicKey`, which has to be supplied
    alongside this key for decryption.

    Attributes:
        expo: The private exponent, inverse of the public exponent modulo the totient.
    """
    expo: int


def encrypt(pub_key: PublicKey, message: int) -> int:
    """Performs textbook RSA encryption.

    Args:
        pub_key: The public key to encrypt with.
        message: The int-marshalled message. Expected in [0, mod-1], but not validated.

    Returns:
        The ciphertext message**expo mod mod.
    """
    return pow(message, pub_key.expo, pub_key.mod)


def decrypt(pub_key: PublicKey, priv_key: PrivateKey, ciphertext: int) -> int:
    """Performs textbook RSA decryption.

    Args:
        pub_key: The public key providing the modulus.
        priv_key: The private key providing the exponent.
        ciphertext: The int-marshalled ciphertext.

    Returns:
        The recovered message ciphertext**d mod mod.
    """
    return pow(ciphertext, priv_key.expo, pub_key.mod)
