#!/usr/bin/env python3

# Copyright (C) 2023 The btcecc developers
#
# This file is part of btcecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Modular arithmetic functions over a prime modulus.

All exponentiations use the three-argument pow,
i.e. square-and-multiply modular exponentiation:
no intermediate power is ever materialized before reduction.

The square root algorithms follow
https://codereview.stackexchange.com/questions/43210/tonelli-shanks-algorithm-implementation-of-prime-modular-square-root/43267
"""

from btcecc.exceptions import BTCeccValueError
from btcecc.utils import int_repr


def mod_inv_prime(a: int, p: int) -> int:
    """Return the inverse of a (mod p), p being a prime.

    Fermat's little theorem gives a^(p-1) = 1 (mod p),
    hence a^(p-2) is the inverse of a.
    Zero (mod p) has no inverse:
    a^(p-2) would silently evaluate to zero, so it is rejected.
    """

    a %= p
    if a == 0:
        raise BTCeccValueError(f"no inverse for 0 mod {int_repr(p)}")
    return pow(a, p - 2, p)


def legendre_symbol(a: int, p: int) -> int:
    """Compute the Legendre symbol a|p using Euler's criterion.

    p is an odd prime.
    It returns 1 if a has a square root modulo p, -1 if it has not,
    and 0 if p divides a.
    """

    ls = pow(a, p >> 1, p)
    return -1 if ls == p - 1 else ls


def mod_sqrt(a: int, p: int) -> int:
    """Return a square root of a (mod p); p must be a prime.

    Solve the equation:
        x^2 = a mod p

    and return x. Note that p - x is also a root.

    The p = 3 (mod 4) case (e.g. secp256k1) is solved by a single
    exponentiation, the p = 5 (mod 8) case by at most two;
    otherwise the Tonelli-Shanks algorithm is used.
    """

    a %= p

    if p % 4 == 3:
        root = pow(a, (p + 1) // 4, p)
    elif p % 8 == 5:
        root = pow(a, (p + 3) // 8, p)
        if root * root % p != a:
            root = root * pow(2, p >> 2, p) % p
    else:
        return tonelli(a, p)

    if root * root % p != a:
        raise BTCeccValueError(f"no root for {int_repr(a)} mod {int_repr(p)}")
    return root


def tonelli(a: int, p: int) -> int:
    """Return a square root of a (mod p) with the Tonelli-Shanks algorithm.

    p must be a prime.
    """

    a %= p
    if a == 0 or p == 2:
        return a

    if legendre_symbol(a, p) != 1:
        raise BTCeccValueError(f"no root for {int_repr(a)} mod {int_repr(p)}")

    # p - 1 = q * 2^s, with q odd
    q, s = p - 1, 0
    while q & 1 == 0:
        s += 1
        q >>= 1
    if s == 1:
        return pow(a, (p + 1) // 4, p)

    # z: any quadratic non residue
    z = 2
    while legendre_symbol(z, p) != -1:
        z += 1

    c = pow(z, q, p)
    root = pow(a, (q + 1) // 2, p)
    t = pow(a, q, p)
    m = s
    while t != 1:
        # lowest i such that t^(2^i) = 1
        i, t2i = 0, t
        while t2i != 1:
            t2i = t2i * t2i % p
            i += 1
        b = pow(c, 1 << (m - i - 1), p)
        root = root * b % p
        c = b * b % p
        t = t * c % p
        m = i

    return root
