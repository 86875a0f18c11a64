#!/usr/bin/env python3

# Copyright (C) 2023 The btcecc developers
#
# This file is part of btcecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Assorted conversion utilities.

Octets are bytes or hex-strings, see btcecc.alias;
integers may also be given as hex-strings or big-endian bytes.
"""

from io import BytesIO
from typing import Iterable, Optional, Sequence, Union

from btcecc.alias import BinaryData, Integer, Octets
from btcecc.exceptions import BTCeccValueError

HEX_THRESHOLD = 0xFFFFFFFF

Sizes = Optional[Union[int, Iterable[int]]]


def bytes_from_octets(octets: Octets, out_size: Sizes = None) -> bytes:
    """Return bytes from bytes or hex-string.

    Hex-strings may have leading/trailing spaces.
    If out_size is given (a size or a collection of sizes)
    the result must have one of the allowed sizes.
    """

    if isinstance(octets, str):
        octets = bytes.fromhex(octets.strip())
    if out_size is None:
        return octets

    sizes = (out_size,) if isinstance(out_size, int) else tuple(out_size)
    if len(octets) not in sizes:
        err_msg = f"invalid size: {len(octets)} bytes instead of {out_size}"
        raise BTCeccValueError(err_msg)
    return octets


def bytesio_from_binarydata(stream: BinaryData) -> BytesIO:
    "Return a readable BytesIO; an existing stream is returned as is."

    if isinstance(stream, BytesIO):
        return stream
    return BytesIO(bytes_from_octets(stream))


def int_from_integer(i: Integer) -> int:
    """Return an int from an int, a hex-string, or big-endian bytes.

    A hex-string with the 0x prefix (possibly negative, e.g. '-0xff')
    is read as a number, without it as big-endian bytes (e.g. 'de ad').
    """

    if isinstance(i, int):
        return i

    if isinstance(i, str):
        i = i.strip().lower()
        if i.lstrip("-").startswith("0x"):
            return int(i, 16)
        i = bytes.fromhex(i)

    return int.from_bytes(i, byteorder="big", signed=False)


def int_from_limbs(limbs: Sequence[int], limb_bits: int = 32) -> int:
    """Return the integer assembled from fixed-size limbs.

    Limbs are in big-endian order, i.e. the most significant limb first,
    and each of them must fit in limb_bits bits.
    """

    if limb_bits <= 0:
        raise BTCeccValueError(f"non positive limb size: {limb_bits}")

    result = 0
    for limb in limbs:
        if not 0 <= limb < 1 << limb_bits:
            raise BTCeccValueError(f"limb not in 0..2^{limb_bits}-1: {limb}")
        result = (result << limb_bits) | limb
    return result


def hex_string(i: Integer) -> str:
    """Return the upper-case hex-string of a non negative integer.

    The string has an even number of digits, grouped in words
    of eight digits (four bytes) starting from the least significant.
    """

    value = int_from_integer(i)
    if value < 0:
        raise BTCeccValueError(f"negative integer: {value}")
    digits = f"{value:X}"
    digits = digits.zfill(len(digits) + len(digits) % 2)

    words = [digits[max(0, end - 8) : end] for end in range(len(digits), 0, -8)]
    return " ".join(reversed(words))


def int_repr(i: int) -> str:
    "Return i in decimal, or as quoted hex-string above HEX_THRESHOLD."

    if abs(i) <= HEX_THRESHOLD:
        return f"{i}"
    sign = "-" if i < 0 else ""
    return f"'{sign}{hex_string(abs(i))}'"
