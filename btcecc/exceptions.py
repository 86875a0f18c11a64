#!/usr/bin/env python3

# Copyright (C) 2023 The btcecc developers
#
# This file is part of btcecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

The three base classes only discriminate between Exceptions raised
by btcecc and those raised by other codebase:
users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the btcecc versions are derived.

The remaining classes refine BTCeccValueError and carry the offending
values as attributes, so that callers can inspect what went wrong.
"""

from typing import Any


class BTCeccValueError(ValueError):
    pass


class BTCeccTypeError(TypeError):
    pass


class BTCeccRuntimeError(RuntimeError):
    pass


class InvalidNumberError(BTCeccValueError):
    "A field element number outside 0..prime-1."

    def __init__(self, number: int, prime: int) -> None:
        # btcecc.utils imports this module
        from btcecc.utils import int_repr

        self.number = number
        self.prime = prime
        err_msg = f"number not in 0..prime-1: {int_repr(number)}"
        err_msg += f" (prime {int_repr(prime)})"
        super().__init__(err_msg)


class MismatchPrimesError(BTCeccValueError):
    "Field elements (or curve coefficients) bound to different primes."

    def __init__(self, left: int, right: int) -> None:
        from btcecc.utils import int_repr

        self.left = left
        self.right = right
        super().__init__(f"mismatched primes: {int_repr(left)} != {int_repr(right)}")


class NotOnCurveError(BTCeccValueError):
    "Affine coordinates that do not satisfy the curve equation."

    def __init__(self, x: Any, y: Any, curve: Any) -> None:
        self.x = x
        self.y = y
        self.curve = curve
        super().__init__(f"point not on curve: ({x}, {y}) on {curve!r}")


class MismatchCurvesError(BTCeccValueError):
    "Points lying on different curves."

    def __init__(self, left: Any, right: Any) -> None:
        self.left = left
        self.right = right
        super().__init__(f"mismatched curves: {left!r} != {right!r}")


class InvalidFormatError(BTCeccValueError):
    "SEC encoding with an empty buffer, an unknown tag, or a wrong size."


class InvalidValueError(BTCeccValueError):
    "SEC encoding whose content does not decode to a valid curve point."
