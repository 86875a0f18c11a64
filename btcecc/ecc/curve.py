#!/usr/bin/env python3

# Copyright (C) 2023 The btcecc developers
#
# This file is part of btcecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve and curve point classes.

The elliptic curve is the set of points (x, y)
that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
with x, y, a, and b in Fp (p being a prime),
together with a point at infinity, the identity of the group.
The constants a, b must satisfy the relationship
4 a^3 + 27 b^2 ≠ 0.

The group is defined by the point addition group law.
"""

from dataclasses import dataclass
from math import ceil
from typing import Optional, Type, TypeVar

from btcecc.ecc.field import FieldElement
from btcecc.ecc.signature import Signature
from btcecc.exceptions import (
    BTCeccTypeError,
    BTCeccValueError,
    MismatchCurvesError,
    MismatchPrimesError,
    NotOnCurveError,
)
from btcecc.utils import HEX_THRESHOLD, hex_string


@dataclass(frozen=True)
class Curve:
    a: FieldElement
    b: FieldElement

    def __post_init__(self) -> None:
        if self.a.prime != self.b.prime:
            raise MismatchPrimesError(self.a.prime, self.b.prime)

        # 4*a^3 + 27*b^2 ≠ 0 (mod p)
        d = 4 * self.a.pow(3) + 27 * self.b.pow(2)
        if d.is_zero():
            raise BTCeccValueError("zero discriminant")

    @classmethod
    def from_ints(cls, p: int, a: int, b: int) -> "Curve":
        return cls(FieldElement(a, p), FieldElement(b, p))

    @property
    def prime(self) -> int:
        return self.a.prime

    @property
    def p_size(self) -> int:
        "Byte size of the field elements."
        return ceil(self.prime.bit_length() / 8)

    def __str__(self) -> str:
        result = "Curve"
        if self.prime > HEX_THRESHOLD:
            result += f"\n p   = {hex_string(self.prime)}"
        else:
            result += f"\n p   = {self.prime}"
        result += f"\n a   = {self.a}"
        result += f"\n b   = {self.b}"
        return result

    def __repr__(self) -> str:
        if self.prime > HEX_THRESHOLD:
            result = f"Curve('{hex_string(self.prime)}'"
            return result + f", '{self.a}', '{self.b}')"
        return f"Curve({self.prime}, {self.a}, {self.b})"

    def y2(self, x: FieldElement) -> FieldElement:
        "Return x^3 + a*x + b."
        return x.pow(3) + self.a * x + self.b

    def contains(self, x: FieldElement, y: FieldElement) -> bool:
        "Return True if (x, y) satisfies the curve equation."
        return y.pow(2) == self.y2(x)


_Point = TypeVar("_Point", bound="Point")


@dataclass(frozen=True)
class Point:
    """Point of an elliptic curve.

    A point is either affine, with both coordinates,
    or the identity (point at infinity), with no coordinates at all.
    Affine coordinates are checked against the curve equation.
    """

    x: Optional[FieldElement]
    y: Optional[FieldElement]
    curve: Curve

    def __post_init__(self) -> None:
        if self.x is None and self.y is None:
            return
        if self.x is None or self.y is None:
            raise BTCeccTypeError("a point has both coordinates or none")
        for coordinate in (self.x, self.y):
            if coordinate.prime != self.curve.prime:
                raise MismatchPrimesError(coordinate.prime, self.curve.prime)
        if not self.curve.contains(self.x, self.y):
            raise NotOnCurveError(self.x, self.y, self.curve)

    @classmethod
    def from_ints(cls: Type[_Point], x: int, y: int, curve: Curve) -> _Point:
        return cls(FieldElement(x, curve.prime), FieldElement(y, curve.prime), curve)

    @classmethod
    def identity(cls: Type[_Point], curve: Curve) -> _Point:
        return cls(None, None, curve)

    infinity = identity

    def is_identity(self) -> bool:
        return self.x is None

    def __str__(self) -> str:
        if self.is_identity():
            return "Point(infinity)"
        return f"Point({self.x}, {self.y})"

    def __eq__(self, other: object) -> bool:
        # by value: an S256Point equals the plain Point with the same coordinates
        if not isinstance(other, Point):
            return NotImplemented
        return (self.x, self.y, self.curve) == (other.x, other.y, other.curve)

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.curve))

    def _require_same_curve(self: _Point, other: _Point) -> None:
        if not isinstance(other, Point):
            raise BTCeccTypeError(f"not a point: {other!r}")
        if self.curve != other.curve:
            raise MismatchCurvesError(self.curve, other.curve)

    def negate(self: _Point) -> _Point:
        "Return the opposite point, i.e. the reflection across the x-axis."
        if self.x is None or self.y is None:
            return self
        return type(self)(self.x, self.y.neg(), self.curve)

    def add(self: _Point, other: _Point) -> _Point:
        "Return the sum of two points of the same curve."

        self._require_same_curve(other)

        if self.x is None or self.y is None:
            return other
        if other.x is None or other.y is None:
            return self

        x1, y1, x2, y2 = self.x, self.y, other.x, other.y
        if x1 == x2:
            if y1 != y2:  # vertical chord: other is -self
                return type(self).identity(self.curve)
            if y1.is_zero():  # vertical tangent
                return type(self).identity(self.curve)
            slope = (3 * x1.pow(2) + self.curve.a) / (2 * y1)
            x3 = slope.pow(2) - 2 * x1
        else:
            slope = (y2 - y1) / (x2 - x1)
            x3 = slope.pow(2) - x1 - x2
        y3 = slope * (x1 - x3) - y1
        return type(self)(x3, y3, self.curve)

    def mul(self: _Point, m: int) -> _Point:
        """Scalar multiplication of a curve point.

        This implementation uses
        'double & add' algorithm,
        'right-to-left' binary decomposition of the m coefficient.
        """

        if not isinstance(m, int):
            raise BTCeccTypeError(f"scalar must be an integer: {m!r}")
        if m < 0:
            raise BTCeccValueError(f"negative m: {hex(m)}")

        result = type(self).identity(self.curve)
        base = self
        while m > 0:
            # if least significant bit of m is 1, then add base to result
            if m & 1:
                result = result.add(base)
            # the doubling part of 'double & add'
            base = base.add(base)
            # remove the bit just accounted for
            m >>= 1
        return result

    __add__ = add
    __neg__ = negate

    def __mul__(self: _Point, m: int) -> _Point:
        if not isinstance(m, int):
            return NotImplemented
        return self.mul(m)

    __rmul__ = __mul__

    def verify(self, z: int, signature: Signature, g: "Point", n: int) -> bool:
        """ECDSA signature verification, self being the public key.

        z is the message digest as integer,
        g the group generator of prime order n.
        Verification must return True or False,
        it raises only when g and self are not on the same curve.
        """

        s_inv = pow(signature.s, n - 2, n)
        u = z * s_inv % n
        v = signature.r * s_inv % n
        total = g.mul(u).add(self.mul(v))
        if total.x is None:
            return False
        return total.x.number == signature.r
