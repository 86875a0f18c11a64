#!/usr/bin/env python3

# Copyright (C) 2023 The btcecc developers
#
# This file is part of btcecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic Curve Digital Signature Algorithm (ECDSA).

Implementation according to SEC 1 v.2:

http://www.secg.org/sec1-v2.pdf

specialized with bitcoin canonical 'lower-s' form
to avoid accepting malleable signatures.

The message digest z is an integer computed by the caller:
no hashing is performed here.
"""

import secrets
from dataclasses import dataclass, field
from typing import Optional

from btcecc.alias import NonceF
from btcecc.ecc.curve import Point
from btcecc.ecc.nonce import random_nonce
from btcecc.ecc.number_theory import mod_inv_prime
from btcecc.ecc.secp256k1 import G, N
from btcecc.ecc.signature import Signature
from btcecc.exceptions import BTCeccRuntimeError, BTCeccTypeError, BTCeccValueError
from btcecc.utils import int_repr


def _sign_(z: int, q: int, nonce: int, lower_s: bool, g: Point, n: int) -> Signature:
    # Private function for testing purposes: nonce is assumed in [1, n-1].
    # Steps numbering follows SEC 1 v.2 section 4.1.3
    K = g.mul(nonce)  # 1
    if K.x is None:
        raise BTCeccRuntimeError("failed to sign: nonce point is the identity")

    # affine x_K-coordinate of K, used as is
    r = K.x.number  # 2, 3
    if r % n == 0:  # r≠0 required as it multiplies the private key
        raise BTCeccRuntimeError("failed to sign: r = 0")

    s = (z + r * q) * mod_inv_prime(nonce, n) % n  # 6
    if s == 0:  # s≠0 required as verify will need the inverse of s
        raise BTCeccRuntimeError("failed to sign: s = 0")

    # bitcoin canonical 'low-s' encoding for ECDSA signatures
    # it removes signature malleability as cause of transaction malleability
    # see https://github.com/bitcoin/bitcoin/pull/6769
    if lower_s and s > n // 2:
        s = n - s

    return Signature(r, s)


@dataclass(frozen=True)
class PrivateKey:
    """ECDSA private key.

    The public key point = secret * g is computed once, at construction.
    """

    secret: int = field(repr=False)
    g: Point = G
    n: int = N
    nonce_source: NonceF = field(default=random_nonce, repr=False, compare=False)
    point: Point = field(init=False)

    def __post_init__(self) -> None:
        if not isinstance(self.secret, int):
            raise BTCeccTypeError("private key must be an integer")
        # SEC 1 v.2 section 3.2.1
        if not 0 < self.secret < self.n:
            err_msg = f"private key not in 1..n-1: {int_repr(self.secret)}"
            raise BTCeccValueError(err_msg)
        object.__setattr__(self, "point", self.g.mul(self.secret))

    def sign(self, z: int, nonce: Optional[int] = None, lower_s: bool = True) -> Signature:
        """Sign the message digest z.

        If the nonce is not provided,
        a fresh one is drawn from the nonce source for every signature
        and degenerate nonces are silently drawn again.
        An explicitly provided nonce is used as is:
        if it is degenerate, BTCeccRuntimeError is raised.
        """

        if nonce is not None:
            k = nonce % self.n
            if k == 0:
                raise BTCeccRuntimeError("failed to sign: nonce = 0 (mod n)")
            return _sign_(z, self.secret, k, lower_s, self.g, self.n)

        while True:
            k = self.nonce_source() % self.n
            if k == 0:
                continue
            try:
                return _sign_(z, self.secret, k, lower_s, self.g, self.n)
            except BTCeccRuntimeError:
                continue

    def verify(self, z: int, signature: Signature) -> bool:
        return verify_signature(self.point, z, signature, self.g, self.n)


def gen_keys(g: Point = G, n: int = N) -> PrivateKey:
    "Return a random private key, its secret being in [1, n-1]."
    return PrivateKey(1 + secrets.randbelow(n - 1), g, n)


def verify_signature(
    pub_point: Point, z: int, signature: Signature, g: Point = G, n: int = N
) -> bool:
    """ECDSA signature verification (SEC 1 v.2 section 4.1.4).

    Accept iff u*g + v*pub_point is not the identity
    and its affine x-coordinate equals r,
    with u = z/s and v = r/s (mod n).
    """
    return pub_point.verify(z, signature, g, n)
