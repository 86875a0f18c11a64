#!/usr/bin/env python3

# Copyright (C) 2023 The btcecc developers
#
# This file is part of btcecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Elliptic curve cryptography: fields, curves, ECDSA, and SEC encoding."
