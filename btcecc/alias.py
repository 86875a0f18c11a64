#!/usr/bin/env python3

# Copyright (C) 2023 The btcecc developers
#
# This file is part of btcecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from io import BytesIO
from typing import Callable, Union

# binary octets are eight-bit bytes or hex-string (not text string)
#
# hex-strings are valid input
# leading/trailing spaces are stripped
Octets = Union[bytes, str]

# binary data, usually to be consumed as byte stream,
# but possibily provided in other formats
BinaryData = Union[BytesIO, Octets]

# integers accept also hex-strings and bytes (big-endian)
Integer = Union[bytes, str, int]

# a zero-argument callable returning a fresh ECDSA nonce candidate
NonceF = Callable[[], int]
