#!/usr/bin/env python3

# Copyright (C) 2023 The btcecc developers
#
# This file is part of btcecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the btcecc package."

name = "btcecc"
__version__ = "2023.10.1"
__author__ = "The btcecc developers"
__author_email__ = "devs@btcecc.org"
__copyright__ = "Copyright (C) 2023 The btcecc developers"
__license__ = "MIT License"
