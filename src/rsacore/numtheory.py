"""Elementary number theory underpinning the RSA core.

Parity helpers used by the Miller-Rabin decomposition, the Extended Euclidean Algorithm and the modular inverse
derived from it.

Typical usage example:

    s, d = factor_out_twos(560)
    g, (x, y), _ = extended_gcd(240, 46)
    d = mod_inverse(65537, phi)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


class NotCoprimeError(ValueError):
    """Raised when a modular inverse is requested for arguments sharing a common factor.

    Attributes:
        a: The value whose inverse was requested.
        m: The modulus.
        gcd: The greatest common divisor found for `a` and `m`.
    """

    def __init__(self, a: int, m: int, gcd: int) -> None:
        super().__init__(f"{a} and {m} are not coprime")
        self.a = a
        self.m = m
        self.gcd = gcd


def is_even(n: int) -> bool:
    """Check whether `n` is divisible by two. Works for negative `n` as well."""
    return n % 2 == 0


def factor_out_twos(n: int) -> tuple[int, int]:
    """Split `n` into an odd part and a power of two.

    Args:
        n: The number to decompose. Must not be 0, as 0 stays even under halving and the loop never ends.

    Returns:
        Tuple (s, d) such that n = d * 2**s and d is odd.
    """
    s = 0
    d = n
    while is_even(d):
        d //= 2
        s += 1
    return s, d


def extended_gcd(a: int, b: int) -> tuple[int, tuple[int, int], tuple[int, int]]:
    """Implements the Extended Euclidean Algorithm.

    Such that a*old_s + b*old_t = old_r = gcd(a, b). The loop ends one update past the Bezout pair, so both the
    pair before the final update and the final one are handed back.

    Args:
        a: The first integer.
        b: The second integer.

    Returns:
        Tuple of (gcd, (old_s, old_t), (s, t)), where (old_s, old_t) are the Bezout coefficients.
    """
    old_r, r = a, b
    old_s, s = 1, 0
    old_t, t = 0, 1
    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s
        old_t, t = t, old_t - q * t
    return old_r, (old_s, old_t), (s, t)


def mod_inverse(a: int, m: int) -> int:
    """Computes the multiplicative inverse of `a` modulo `m`.

    A negative Bezout coefficient is brought into range by a single addition of `m`.

    Args:
        a: The value to invert.
        m: The modulus.

    Returns:
        The inverse of `a` in [0, m).

    Raises:
        NotCoprimeError: `a` and `m` share a common factor, so no inverse exists.
    """
    gcd, (s, _), _ = extended_gcd(a, m)
    if gcd != 1:
        raise NotCoprimeError(a, m, gcd)
    if s < 0:
        return m + s
    return s
