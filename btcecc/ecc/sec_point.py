#!/usr/bin/env python3

# Copyright (C) 2023 The btcecc developers
#
# This file is part of btcecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""SEC compressed/uncompressed point representation.

SEC 1 v.2, sections 2.3.3 and 2.3.4:

* uncompressed: 0x04 | x | y
* compressed: 0x02 (even y) or 0x03 (odd y) | x

with x and y as big-endian, fixed-size (curve.p_size) octets.
"""

from btcecc.alias import Octets
from btcecc.ecc.curve import Curve, Point
from btcecc.ecc.field import FieldElement
from btcecc.ecc.secp256k1 import SECP256K1, S256Point
from btcecc.exceptions import BTCeccValueError, InvalidFormatError, InvalidValueError
from btcecc.utils import bytes_from_octets, hex_string


def bytes_from_point(Q: Point, compressed: bool = True) -> bytes:
    """Return a point as compressed/uncompressed octet sequence.

    Return a point as compressed (0x02, 0x03) or uncompressed (0x04)
    octet sequence, according to SEC 1 v.2, section 2.3.3.
    """

    if Q.x is None or Q.y is None:
        raise BTCeccValueError("no bytes representation for infinity point")

    p_size = Q.curve.p_size
    bytes_ = Q.x.number.to_bytes(p_size, byteorder="big", signed=False)
    if compressed:
        return (b"\x03" if (Q.y.number & 1) else b"\x02") + bytes_

    return b"\x04" + bytes_ + Q.y.number.to_bytes(p_size, byteorder="big", signed=False)


def point_from_octets(pub_key: Octets, curve: Curve = SECP256K1) -> Point:
    """Return the curve point encoded by the octet sequence.

    Decoding follows SEC 1 v.2, section 2.3.4;
    points of the secp256k1 curve are returned as S256Point.
    """

    pub_key = bytes_from_octets(pub_key)
    if not pub_key:
        raise InvalidFormatError("empty SEC encoding")

    point_type = S256Point if curve == SECP256K1 else Point
    p_size = curve.p_size
    bsize = len(pub_key)
    if pub_key[0] in (0x02, 0x03):  # compressed point
        if bsize != p_size + 1:
            err_msg = "invalid size for compressed point: "
            err_msg += f"{bsize} instead of {p_size + 1}"
            raise InvalidFormatError(err_msg)
        x_Q = int.from_bytes(pub_key[1:], byteorder="big", signed=False)
        try:
            x = FieldElement(x_Q, curve.prime)
            beta = curve.y2(x).sqrt()
        except BTCeccValueError as e:
            msg = f"invalid x-coordinate: '{hex_string(x_Q)}'"
            raise InvalidValueError(msg) from e
        # the root parity must match the tag parity
        if beta.number & 1 != pub_key[0] & 1:
            beta = beta.neg()
        # a zero root is its own opposite
        if beta.number & 1 != pub_key[0] & 1:
            msg = f"no odd root for x-coordinate: '{hex_string(x_Q)}'"
            raise InvalidValueError(msg)
        return point_type(x, beta, curve)

    if pub_key[0] == 0x04:  # uncompressed point
        if bsize != 2 * p_size + 1:
            err_msg = "invalid size for uncompressed point: "
            err_msg += f"{bsize} instead of {2 * p_size + 1}"
            raise InvalidFormatError(err_msg)
        x_Q = int.from_bytes(pub_key[1 : p_size + 1], byteorder="big", signed=False)
        y_Q = int.from_bytes(pub_key[p_size + 1 :], byteorder="big", signed=False)
        try:
            return point_type.from_ints(x_Q, y_Q, curve)
        except BTCeccValueError as e:
            raise InvalidValueError(f"invalid point: {e}") from e

    raise InvalidFormatError(f"not a point: {pub_key!r}")
