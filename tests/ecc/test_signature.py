#!/usr/bin/env python3

# Copyright (C) 2023 The btcecc developers
#
# This file is part of btcecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `btcecc.ecc.signature` module."

import json

import pytest

from btcecc.ecc.secp256k1 import N
from btcecc.ecc.signature import Signature
from btcecc.exceptions import BTCeccRuntimeError, BTCeccValueError

r = 0x2B698A0F0A4041B77E63488AD48C23E8E8838DD1FB7520408B121697B782EF22
s = 0x1DBC63BFEF4416705E602A7B564161167076D8B20990A0F26F316CFF2CB0BC1A


def test_der_serialization() -> None:
    assert Signature(1, 1).serialize() == bytes.fromhex("3006020101020101")
    # 'highest bit set' padding
    assert Signature(0x80, 0x7F).serialize() == bytes.fromhex("30070202008002017f")

    sig = Signature(r, s)
    der = sig.serialize()
    assert len(der) == 70
    assert Signature.parse(der) == sig
    assert Signature.parse(der.hex()) == sig

    sig = Signature(N - 1, N - 1)
    assert len(sig.serialize()) == 72
    assert Signature.parse(sig.serialize()) == sig

    with pytest.raises(BTCeccValueError, match="DER scalars must be positive"):
        Signature(1, 0).serialize()
    # DER short form lengths only
    for big_r in (1 << 1000, 1 << 1100):
        with pytest.raises(BTCeccValueError, match="too long for short form length"):
            Signature(big_r, 1).serialize()


def test_der_parse_errors() -> None:
    invalid_encodings = {
        "3106020101020101": "invalid compound header: ",
        "3006030101020101": "invalid value header: ",
        "300702020001020101": "invalid 'highest bit set' padding",
        "3006020100020101": "invalid 'highest bit set' padding",
        "3006020181020101": "invalid negative scalar",
        "3007020101020101ff": "invalid DER sequence length",
        "3000": "zero size",
        "3006020001020101": "zero size",
        # only the DER short form is a valid length
        "30fd0600020101020101": "invalid DER length: fd, not in short form",
        "308106020101020101": "invalid DER length: 81, not in short form",
        "300702810101020101": "invalid DER length: 81, not in short form",
    }
    for der, err_msg in invalid_encodings.items():
        with pytest.raises(BTCeccValueError, match=err_msg):
            Signature.parse(der)

    for der in ("30", "3006020101", "300602"):
        with pytest.raises(BTCeccRuntimeError, match="not enough binary data"):
            Signature.parse(der)

    # a valid signature with a var_int style body length
    der = Signature(N - 1, N - 1).serialize()
    assert Signature.parse(der) == Signature(N - 1, N - 1)
    with pytest.raises(BTCeccValueError, match="invalid DER length: "):
        Signature.parse(b"\x30\xfd" + bytes([der[1], 0]) + der[2:])


def test_dataclasses_json() -> None:
    sig = Signature(0x1F, 0x2A)
    assert sig.to_dict() == {"r": "1f", "s": "2a"}
    assert Signature.from_dict({"r": "1f", "s": "2a"}) == sig

    sig = Signature(r, s)
    sig_json = sig.to_json()
    assert json.loads(sig_json) == {"r": f"{r:x}", "s": f"{s:x}"}
    assert Signature.from_json(sig_json) == sig


def test_assert_valid() -> None:
    Signature(1, 1).assert_valid(7)
    Signature(r, s).assert_valid(N)

    with pytest.raises(BTCeccValueError, match="non positive scalar r: "):
        Signature(0, 1).assert_valid(7)
    with pytest.raises(BTCeccValueError, match="scalar s not in 1..n-1: "):
        Signature(1, 7).assert_valid(7)
    with pytest.raises(BTCeccValueError, match="scalar s not in 1..n-1: "):
        Signature(r, N).assert_valid(N)


def test_representation() -> None:
    assert str(Signature(1, 0x1F)) == "Signature(01, 1F)"
    assert Signature(1, 2) == Signature(1, 2)
    assert Signature(1, 2) != Signature(2, 1)
