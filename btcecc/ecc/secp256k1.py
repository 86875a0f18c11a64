#!/usr/bin/env python3

# Copyright (C) 2023 The btcecc developers
#
# This file is part of btcecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""The secp256k1 curve used by bitcoin.

SEC 2 v.2 section 2.4.1

http://www.secg.org/sec2-v2.pdf

The parameters are process-wide read-only constants.
"""

from typing import Optional

from btcecc.ecc.curve import Curve, Point
from btcecc.ecc.field import FieldElement
from btcecc.ecc.signature import Signature

# field prime: 2^256 - 2^32 - 977
P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
A = 0
B = 7
GX = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
GY = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8
# order of the group generated by G
N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

SECP256K1 = Curve.from_ints(P, A, B)


def s256_field(number: int) -> FieldElement:
    return FieldElement(number, P)


class S256Point(Point):
    """Point of the secp256k1 curve.

    Scalars are reduced mod N before multiplication,
    as N*P is the identity for every point of the curve.
    """

    def mul(self, m: int) -> "S256Point":
        if isinstance(m, int):
            m %= N
        return super().mul(m)

    def verify(
        self, z: int, signature: Signature, g: Optional[Point] = None, n: int = N
    ) -> bool:
        "ECDSA verification of signature for message digest z, g defaulting to G."
        return super().verify(z, signature, G if g is None else g, n)


def s256_point(x: int, y: int) -> S256Point:
    return S256Point.from_ints(x, y, SECP256K1)


G = s256_point(GX, GY)
