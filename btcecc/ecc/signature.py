#!/usr/bin/env python3

# Copyright (C) 2023 The btcecc developers
#
# This file is part of btcecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""ECDSA signature (r, s) with strict ASN.1 DER serialization.

r is the affine x-coordinate of the nonce point,
s is the signature scalar in canonical 'low-s' form.

The DER layout is the one enforced by BIP66:

    0x30 | len(body) | 0x02 | len(r) | r | 0x02 | len(s) | s

r and s are positive big-endian integers in their shortest encoding:
a leading zero byte is only allowed, and then required,
when the following byte is 0x80 or larger,
as it would otherwise be read as a negative number.
Any deviation from this layout is rejected by the parser.

https://github.com/bitcoin/bips/blob/master/bip-0066.mediawiki
"""

from dataclasses import dataclass, field
from io import BytesIO
from typing import Any, Type, TypeVar

from dataclasses_json import DataClassJsonMixin, config

from btcecc.alias import BinaryData
from btcecc.exceptions import BTCeccRuntimeError, BTCeccValueError
from btcecc.utils import bytesio_from_binarydata, hex_string, int_repr

_DER_SCALAR_MARKER = b"\x02"
_DER_SIG_MARKER = b"\x30"
# DER short form: a single length byte, 0x80 and above mark the long form
_DER_MAX_SHORT_LENGTH = 0x7F


def _serialize_length_prefixed(content: bytes) -> bytes:
    size = len(content)
    if size > _DER_MAX_SHORT_LENGTH:
        raise BTCeccValueError(f"DER content too long for short form length: {size}")
    return bytes([size]) + content


def _parse_length_prefixed(stream: BytesIO) -> bytes:
    "Return the content following a non zero DER short form length."

    length = stream.read(1)
    if not length:
        raise BTCeccRuntimeError("not enough binary data")
    size = length[0]
    if size == 0:
        raise BTCeccValueError("zero size")
    if size > _DER_MAX_SHORT_LENGTH:
        raise BTCeccValueError(f"invalid DER length: {length.hex()}, not in short form")

    content = stream.read(size)
    if len(content) != size:
        raise BTCeccRuntimeError("not enough binary data")
    return content


def _serialize_scalar(scalar: int) -> bytes:
    # 'highest bit set' padding included here
    scalar_size = scalar.bit_length() // 8 + 1
    scalar_bytes = scalar.to_bytes(scalar_size, byteorder="big", signed=False)
    return _DER_SCALAR_MARKER + _serialize_length_prefixed(scalar_bytes)


def _deserialize_scalar(sig_data_stream: BytesIO) -> int:
    marker = sig_data_stream.read(1)
    if marker != _DER_SCALAR_MARKER:
        err_msg = f"invalid value header: {marker.hex()}"
        err_msg += f", instead of integer element {_DER_SCALAR_MARKER.hex()}"
        raise BTCeccValueError(err_msg)

    r_bytes = _parse_length_prefixed(sig_data_stream)
    if r_bytes[0] == 0 and (len(r_bytes) == 1 or r_bytes[1] < 0x80):
        raise BTCeccValueError("invalid 'highest bit set' padding")
    if r_bytes[0] >= 0x80:
        raise BTCeccValueError("invalid negative scalar")

    return int.from_bytes(r_bytes, byteorder="big", signed=False)


def _scalar_field() -> Any:
    return field(
        metadata=config(encoder=lambda v: f"{v:x}", decoder=lambda v: int(v, 16))
    )


_Sig = TypeVar("_Sig", bound="Signature")


@dataclass(frozen=True)
class Signature(DataClassJsonMixin):
    r: int = _scalar_field()
    s: int = _scalar_field()

    def __str__(self) -> str:
        return f"Signature({hex_string(self.r)}, {hex_string(self.s)})"

    def assert_valid(self, n: int) -> None:
        "Raise if r or s cannot belong to a signature for group order n."

        if self.r <= 0:
            err_msg = f"non positive scalar r: {int_repr(self.r)}"
            raise BTCeccValueError(err_msg)

        if not 0 < self.s < n:
            err_msg = f"scalar s not in 1..n-1: {int_repr(self.s)}"
            raise BTCeccValueError(err_msg)

    def serialize(self) -> bytes:
        "Serialize the signature to strict ASN.1 DER representation."

        if self.r <= 0 or self.s <= 0:
            raise BTCeccValueError("DER scalars must be positive")
        out = _serialize_scalar(self.r)
        out += _serialize_scalar(self.s)
        return _DER_SIG_MARKER + _serialize_length_prefixed(out)

    @classmethod
    def parse(cls: Type[_Sig], data: BinaryData) -> _Sig:
        """Return a Signature by parsing binary data.

        Deserialize a strict ASN.1 DER representation of an ECDSA
        signature.
        """

        stream = bytesio_from_binarydata(data)

        # [0x30] [data-size][0x02][r-size][r][0x02][s-size][s]
        marker = stream.read(1)
        if marker != _DER_SIG_MARKER:
            err_msg = f"invalid compound header: {marker.hex()}"
            err_msg += f", instead of DER sequence tag {_DER_SIG_MARKER.hex()}"
            raise BTCeccValueError(err_msg)

        # [data-size][0x02][r-size][r][0x02][s-size][s]
        sig_data = _parse_length_prefixed(stream)

        # [0x02][r-size][r][0x02][s-size][s]
        sig_data_substream = bytesio_from_binarydata(sig_data)
        r = _deserialize_scalar(sig_data_substream)
        s = _deserialize_scalar(sig_data_substream)

        # to prevent malleability
        # the sig_data_substream must have been consumed entirely
        if sig_data_substream.read(1) != b"":
            raise BTCeccValueError("invalid DER sequence length")

        return cls(r, s)
