# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import math

import pytest

from rsacore import numtheory

coprime_pairs = [
    (3, 11),
    (7, 11),
    (10, 17),
    (17, 3120),
    (65537, 2**64),
    (65537, (2**127 - 2) * (2**61 - 2)),
    (2**61 - 1, 2**127 - 1),
]


@pytest.mark.parametrize("n,expected", [(0, True), (2, True), (-2, True), (2**200, True), (1, False), (7, False),
                                        (-3, False), (2**127 - 1, False)])
def test_is_even(n, expected):
    assert numtheory.is_even(n) == expected


@pytest.mark.parametrize("n,expected", [
    (1, (0, 1)),
    (1023, (0, 1023)),
    (560, (4, 35)),
    (2**127, (127, 1)),
    (3 * 2**64, (64, 3)),
    (-8, (3, -1)),
])
def test_factor_out_twos(n, expected):
    assert numtheory.factor_out_twos(n) == expected


@pytest.mark.parametrize("n", [2, 40114, 2**127 - 2, 12345678 * 2**33])
def test_factor_out_twos_recombines(n):
    s, d = numtheory.factor_out_twos(n)
    assert d % 2 == 1
    assert d * 2**s == n


def test_extended_gcd_concrete():
    assert numtheory.extended_gcd(240, 46) == (2, (-9, 47), (23, -120))


@pytest.mark.parametrize("a,b", [(240, 46), (46, 240), (40115, 113), (2**127 - 1, 2**61 - 1), (0, 5), (5, 0)])
def test_extended_gcd_bezout(a, b):
    g, (s, t), _ = numtheory.extended_gcd(a, b)
    assert g == math.gcd(a, b)
    assert a * s + b * t == g


@pytest.mark.parametrize("a,b", [(-240, 46), (240, -46), (17, -5), (-65537, 3120)])
def test_extended_gcd_bezout_mixed_sign(a, b):
    g, (s, t), _ = numtheory.extended_gcd(a, b)
    assert abs(g) == math.gcd(a, b)
    assert a * s + b * t == g


def test_extended_gcd_final_pair():
    # The pair past the Bezout coefficients annihilates the inputs.
    a, b = 40115, 113
    g, _, (s, t) = numtheory.extended_gcd(a, b)
    assert a * s + b * t == 0
    assert abs(s) == b // g
    assert abs(t) == a // g


@pytest.mark.parametrize("a,m", coprime_pairs)
def test_mod_inverse(a, m):
    inv = numtheory.mod_inverse(a, m)
    assert 0 <= inv < m
    assert (a * inv) % m == 1
    assert inv == pow(a, -1, m)


def test_mod_inverse_normalizes_negative():
    _, (s, _), _ = numtheory.extended_gcd(7, 11)
    assert s == -3
    assert numtheory.mod_inverse(7, 11) == 8


def test_mod_inverse_keeps_positive():
    _, (s, _), _ = numtheory.extended_gcd(3, 11)
    assert s == 4
    assert numtheory.mod_inverse(3, 11) == 4


@pytest.mark.parametrize("a,m,gcd", [(6, 9, 3), (65537, 65537 * 4, 65537), (10, 0, 10), (2**64, 2**32, 2**32)])
def test_mod_inverse_not_coprime(a, m, gcd):
    with pytest.raises(numtheory.NotCoprimeError, match="are not coprime") as exc:
        numtheory.mod_inverse(a, m)
    assert exc.value.a == a
    assert exc.value.m == m
    assert exc.value.gcd == gcd


def test_not_coprime_is_value_error():
    with pytest.raises(ValueError):
        numtheory.mod_inverse(4, 8)
