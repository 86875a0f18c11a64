#!/usr/bin/env python3

# Copyright (C) 2023 The btcecc developers
#
# This file is part of btcecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `btcecc.ecc.field` module."

import pytest

from btcecc.ecc.field import FieldElement
from btcecc.exceptions import (
    BTCeccTypeError,
    BTCeccValueError,
    InvalidNumberError,
    MismatchPrimesError,
)

small_primes = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 223]


def test_constructor() -> None:
    a = FieldElement(7, 13)
    assert a.number == 7
    assert a.prime == 13
    assert FieldElement(0, 13).is_zero()

    with pytest.raises(InvalidNumberError, match="number not in 0..prime-1: ") as e:
        FieldElement(13, 13)
    assert e.value.number == 13
    assert e.value.prime == 13

    with pytest.raises(InvalidNumberError, match="number not in 0..prime-1: "):
        FieldElement(-1, 13)

    with pytest.raises(BTCeccValueError, match="invalid prime: "):
        FieldElement(0, 1)

    with pytest.raises(BTCeccTypeError, match="must be integers"):
        FieldElement("1", 13)  # type: ignore


def test_equality() -> None:
    a = FieldElement(2, 31)
    b = FieldElement(2, 31)
    c = FieldElement(15, 31)
    assert a == b
    assert a != c
    assert FieldElement(2, 31) != FieldElement(2, 37)
    assert len({a, b, c}) == 2


def test_add() -> None:
    assert FieldElement(7, 13) + FieldElement(12, 13) == FieldElement(6, 13)
    assert FieldElement(7, 13).add(FieldElement(12, 13)) == FieldElement(6, 13)
    assert FieldElement(2, 31) + FieldElement(15, 31) == FieldElement(17, 31)
    assert FieldElement(17, 31) + FieldElement(21, 31) == FieldElement(7, 31)


def test_sub() -> None:
    assert FieldElement(6, 13) - FieldElement(12, 13) == FieldElement(7, 13)
    assert FieldElement(29, 31).sub(FieldElement(4, 31)) == FieldElement(25, 31)
    assert FieldElement(15, 31) - FieldElement(30, 31) == FieldElement(16, 31)
    assert FieldElement(0, 31) - FieldElement(1, 31) == FieldElement(30, 31)


def test_mul() -> None:
    assert FieldElement(3, 13) * FieldElement(12, 13) == FieldElement(10, 13)
    assert FieldElement(24, 31).mul(FieldElement(19, 31)) == FieldElement(22, 31)
    assert 3 * FieldElement(5, 13) == FieldElement(2, 13)
    assert FieldElement(5, 13).scale(-1) == FieldElement(8, 13)
    assert -FieldElement(5, 13) == FieldElement(8, 13)
    assert -FieldElement(0, 13) == FieldElement(0, 13)

    with pytest.raises(BTCeccTypeError, match="not a field element: "):
        FieldElement(3, 13) * 3  # type: ignore
    with pytest.raises(TypeError):
        2.5 * FieldElement(3, 13)  # type: ignore


def test_div() -> None:
    assert FieldElement(2, 19) / FieldElement(7, 19) == FieldElement(3, 19)
    assert FieldElement(7, 19).div(FieldElement(5, 19)) == FieldElement(9, 19)
    assert FieldElement(3, 31) / FieldElement(24, 31) == FieldElement(4, 31)

    with pytest.raises(BTCeccValueError, match="division by the zero field element"):
        FieldElement(3, 31) / FieldElement(0, 31)


def test_pow() -> None:
    assert FieldElement(3, 13) ** 3 == FieldElement(1, 13)
    assert FieldElement(17, 31).pow(3) == FieldElement(15, 31)
    assert FieldElement(5, 31) ** 5 * FieldElement(18, 31) == FieldElement(16, 31)
    assert FieldElement(7, 13) ** -3 == FieldElement(8, 13)
    assert FieldElement(17, 31) ** -3 == FieldElement(29, 31)
    assert FieldElement(4, 31) ** -4 * FieldElement(11, 31) == FieldElement(13, 31)

    # exponents far larger than the prime
    a = FieldElement(5, 13)
    assert a.pow(12 * 10**40 + 1) == a
    assert a.pow(0) == FieldElement(1, 13)

    with pytest.raises(BTCeccTypeError, match="exponent must be an integer: "):
        a.pow(1.5)  # type: ignore


def test_pow_of_zero() -> None:
    zero = FieldElement(0, 13)
    # a multiple of p-1 must not be reduced to a zero exponent
    assert zero.pow(12) == zero
    assert zero.pow(24) == zero
    assert zero.pow(1) == zero
    assert zero.pow(0) == FieldElement(1, 13)
    with pytest.raises(BTCeccValueError, match="zero has no inverse"):
        zero.pow(-1)


def test_mismatched_primes() -> None:
    a = FieldElement(7, 13)
    b = FieldElement(6, 17)
    for op in (a.add, a.sub, a.mul, a.div):
        with pytest.raises(MismatchPrimesError, match="mismatched primes: ") as e:
            op(b)
        assert e.value.left == 13
        assert e.value.right == 17


def test_field_properties() -> None:
    for p in small_primes:
        elements = [FieldElement(i, p) for i in range(p)]
        one = FieldElement(1, p)
        for a in elements:
            for b in elements[:20]:
                assert (a + b) - b == a
                assert a + b == b + a
                assert a * b == b * a
                if not b.is_zero():
                    assert (a * b) / b == a
            if not a.is_zero():
                # Fermat's little theorem
                assert a.pow(p - 1) == one
                assert a * a.pow(-1) == one


def test_sqrt() -> None:
    for p in small_primes:
        squares = {i * i % p for i in range(p)}
        for i in range(p):
            a = FieldElement(i, p)
            if i in squares:
                root = a.sqrt()
                assert root * root == a
                assert -root * -root == a
            else:
                with pytest.raises(BTCeccValueError, match="no root for "):
                    a.sqrt()


def test_representation() -> None:
    a = FieldElement(7, 13)
    assert str(a) == "7"
    assert repr(a) == "FieldElement(7, 13)"

    p = 2**256 - 2**32 - 977
    b = FieldElement(0xDEADBEEF00, p)
    assert str(b) == "DE ADBEEF00"
    assert repr(b).startswith("FieldElement('DE ADBEEF00', 'FFFFFFFF")
