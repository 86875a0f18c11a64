#!/usr/bin/env python3

# Copyright (C) 2023 The btcecc developers
#
# This file is part of btcecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Prime field Fp elements.

A FieldElement is an immutable (number, prime) pair,
with 0 <= number < prime.
Binary operations are only defined between elements of the same field:
mixing primes raises MismatchPrimesError, it never coerces.

Every operation is available as a named method (add, sub, mul, div, pow)
and through the corresponding Python operator.
"""

from dataclasses import dataclass

from btcecc.ecc.number_theory import mod_inv_prime, mod_sqrt
from btcecc.exceptions import (
    BTCeccTypeError,
    BTCeccValueError,
    InvalidNumberError,
    MismatchPrimesError,
)
from btcecc.utils import HEX_THRESHOLD, hex_string


@dataclass(frozen=True)
class FieldElement:
    number: int
    prime: int

    def __post_init__(self) -> None:
        if not isinstance(self.number, int) or not isinstance(self.prime, int):
            raise BTCeccTypeError("number and prime must be integers")
        if self.prime < 2:
            raise BTCeccValueError(f"invalid prime: {self.prime}")
        if not 0 <= self.number < self.prime:
            raise InvalidNumberError(self.number, self.prime)

    def __str__(self) -> str:
        if self.prime > HEX_THRESHOLD:
            return f"{hex_string(self.number)}"
        return f"{self.number}"

    def __repr__(self) -> str:
        if self.prime > HEX_THRESHOLD:
            return f"FieldElement('{hex_string(self.number)}', '{hex_string(self.prime)}')"
        return f"FieldElement({self.number}, {self.prime})"

    def _require_same_field(self, other: "FieldElement") -> None:
        if not isinstance(other, FieldElement):
            raise BTCeccTypeError(f"not a field element: {other!r}")
        if self.prime != other.prime:
            raise MismatchPrimesError(self.prime, other.prime)

    def _new(self, number: int) -> "FieldElement":
        return type(self)(number % self.prime, self.prime)

    def is_zero(self) -> bool:
        return self.number == 0

    def add(self, other: "FieldElement") -> "FieldElement":
        self._require_same_field(other)
        return self._new(self.number + other.number)

    def sub(self, other: "FieldElement") -> "FieldElement":
        self._require_same_field(other)
        # adding prime keeps the intermediate value non negative
        return self._new(self.number - other.number + self.prime)

    def mul(self, other: "FieldElement") -> "FieldElement":
        self._require_same_field(other)
        return self._new(self.number * other.number)

    def scale(self, coefficient: int) -> "FieldElement":
        "Return the element multiplied by an integer coefficient."
        return self._new(self.number * coefficient)

    def div(self, other: "FieldElement") -> "FieldElement":
        """Return self / other, i.e. self * other^(p-2).

        Division by the zero element is an error:
        its Fermat 'inverse' would silently be zero.
        """
        self._require_same_field(other)
        if other.number == 0:
            raise BTCeccValueError("division by the zero field element")
        return self._new(self.number * mod_inv_prime(other.number, self.prime))

    def pow(self, exponent: int) -> "FieldElement":
        """Return self^exponent with modular exponentiation.

        The exponent is reduced mod (p-1), which is safe by
        Fermat's little theorem, but only for a non-zero base:
        zero to a positive exponent must stay zero,
        while a reduced exponent could become 0 and yield 0^0 = 1.
        Negative exponents are allowed for non-zero bases.
        """
        if not isinstance(exponent, int):
            raise BTCeccTypeError(f"exponent must be an integer: {exponent!r}")
        if self.number == 0:
            if exponent < 0:
                raise BTCeccValueError("zero has no inverse")
            return self._new(pow(0, exponent, self.prime))
        return self._new(pow(self.number, exponent % (self.prime - 1), self.prime))

    def neg(self) -> "FieldElement":
        return self._new(-self.number)

    def sqrt(self) -> "FieldElement":
        """Return a square root of the element.

        The other root is its opposite.
        For p = 3 (mod 4) this is self^((p+1)/4).
        """
        return self._new(mod_sqrt(self.number, self.prime))

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __truediv__ = div
    __pow__ = pow
    __neg__ = neg

    def __rmul__(self, coefficient: int) -> "FieldElement":
        if not isinstance(coefficient, int):
            return NotImplemented
        return self.scale(coefficient)
