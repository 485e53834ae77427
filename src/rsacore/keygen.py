"""Core Key Generation Utility, covering primality testing and the generation of random large primes.

Probable primes are found by rejection sampling over a decimal range and filtered through the Miller-Rabin test.
Every function that samples accepts an explicit `random.Random` instance, so runs can be reproduced from a seed. When
none is given, the operating system's entropy source is used through `secrets.SystemRandom`.

Typical usage example:

    is_probable_prime(2**127 - 1, 20)
    p = random_prime(50, rng=random.Random(1234))
    pub, priv = gen_keys()
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import random
import secrets

from rsacore.numtheory import factor_out_twos
from rsacore.numtheory import is_even
from rsacore.numtheory import mod_inverse
from rsacore.rsa import PrivateKey
from rsacore.rsa import PublicKey

PUBLIC_EXPONENT: int = 65537
PRIME_ROUNDS: int = 100
DEFAULT_DIGITS: int = 100

_SYSTEM_RANDOM = secrets.SystemRandom()


def _resolve_rng(rng: random.Random | None) -> random.Random:
    return _SYSTEM_RANDOM if rng is None else rng


def is_probable_prime(n: int, num_rounds: int, rng: random.Random | None = None) -> bool:
    """Perform Miller-Rabin primality test.

    Even numbers are rejected outright, 2 included. Each round draws a witness from [2, n-2] and squares through the
    decomposition n - 1 = d * 2**s, looking for a non-trivial square root of 1.

    Args:
        n: The candidate to test. Must be >= 2. For n = 3 the witness range is empty and sampling raises ValueError.
        num_rounds: Number of Miller-Rabin rounds to perform. Each round cuts the false-positive chance by 4.
        rng: Random source for the witnesses. Defaults to the system entropy source.

    Returns:
        True if `n` is probably prime, False if it is certainly composite.
    """
    if is_even(n):
        return False
    rng = _resolve_rng(rng)
    s, d = factor_out_twos(n - 1)
    n1 = n - 1
    for _ in range(num_rounds):
        a = rng.randrange(2, n1)
        x = pow(a, d, n)
        for _ in range(s):
            y = pow(x, 2, n)
            if y == 1 and x != 1 and x != n1:
                return False
            x = y
        if x != 1:
            return False
    return True


def random_prime(n_digits: int = DEFAULT_DIGITS,
                 rng: random.Random | None = None,
                 max_attempts: int | None = None) -> int:
    """Generate a probable prime by rejection sampling.

    Candidates are drawn uniformly from [10**(n_digits-1), 10**(2*(n_digits-1))), the upper bound being the square of
    the lower one, and tested with `PRIME_ROUNDS` Miller-Rabin rounds.

    Args:
        n_digits: Decimal digit count of the lower sampling bound. Defaults to 100. Must be >= 2.
        rng: Random source for candidates and witnesses. Defaults to the system entropy source.
        max_attempts: Ceiling on the number of candidates drawn. Defaults to None, sampling until a prime is found.

    Returns:
        A probable prime in the sampling range.

    Raises:
        ValueError: If `n_digits` is too small to give a non-empty range.
        RuntimeError: If `max_attempts` candidates were drawn with no prime found.
    """
    if n_digits < 2:
        raise ValueError("n_digits must be at least 2.")
    rng = _resolve_rng(rng)
    low = 10**(n_digits - 1)
    high = low**2
    attempts = 0
    while max_attempts is None or attempts < max_attempts:
        attempts += 1
        candidate = rng.randrange(low, high)
        if is_probable_prime(candidate, PRIME_ROUNDS, rng):
            return candidate
    raise RuntimeError(f"Drew {max_attempts} candidates with no prime found.")


def gen_keys(n_digits: int = DEFAULT_DIGITS, rng: random.Random | None = None) -> tuple[PublicKey, PrivateKey]:
    """Generates a textbook RSA key pair.

    Two primes are drawn independently, so p == q is not excluded, although vanishingly unlikely at useful sizes.

    Args:
        n_digits: Passed to `random_prime()` for both primes. Defaults to 100.
        rng: Random source for prime generation. Defaults to the system entropy source.

    Returns:
        A tuple of (public key, private key).

    Raises:
        NotCoprimeError: If the public exponent shares a factor with the totient.
    """
    p = random_prime(n_digits, rng)
    q = random_prime(n_digits, rng)
    n = p * q
    phi = (p - 1) * (q - 1)
    d = mod_inverse(PUBLIC_EXPONENT, phi)
    return PublicKey(n, PUBLIC_EXPONENT), PrivateKey(d)
