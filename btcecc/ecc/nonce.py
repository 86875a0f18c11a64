#!/usr/bin/env python3

# Copyright (C) 2023 The btcecc developers
#
# This file is part of btcecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Random ECDSA nonce candidates.

A nonce is assembled from NONCE_LIMBS random limbs of LIMB_BITS bits each,
drawn from the operating system CSPRNG through the secrets module.
The caller reduces the candidate modulo the group order
and draws again if it is degenerate.
A nonce must never be reused: every call returns fresh randomness.
"""

import secrets
from typing import List

from btcecc.exceptions import BTCeccValueError
from btcecc.utils import int_from_limbs

LIMB_BITS = 32
NONCE_LIMBS = 8


def random_limbs(count: int = NONCE_LIMBS, limb_bits: int = LIMB_BITS) -> List[int]:
    "Return count unpredictable limbs of limb_bits bits each."

    if count < 1:
        raise BTCeccValueError(f"invalid limb count: {count}")
    if limb_bits < 1:
        raise BTCeccValueError(f"invalid limb size: {limb_bits}")
    return [secrets.randbits(limb_bits) for _ in range(count)]


def random_nonce() -> int:
    "Return a NONCE_LIMBS * LIMB_BITS bits random integer."
    return int_from_limbs(random_limbs(), LIMB_BITS)
