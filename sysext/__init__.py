# Copyright (c) 2022-2023 SiumLhahah
# Distributed under the MIT software license, see the accompanying
# file COPYING or http://www.opensource.org/licenses/mit-license.php.

""""
sysext

Small helpers for bytes, collections, strings, callbacks,
numbers, object members and time values.
"""

__author__ = 'SiumLhahah'
__version__ = '0.1.0'

import logging

from . import (
    binary,
    collection,
    delegate,
    numeric,
    reflection,
    strings,
    timeutil,
)
from .lib import *
from .lib.exceptions import (
    AlgorithmError,
    DecryptionFailed,
    InvalidArgument,
    InvalidKeyMaterial,
    MemberNotFound,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())
