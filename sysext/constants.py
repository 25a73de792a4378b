# Copyright (c) 2022-2023 SiumLhahah
# Distributed under the MIT software license, see the accompanying
# file COPYING or http://www.opensource.org/licenses/mit-license.php.

"""
sysext.constants

Constants for sysext.

"""

from datetime import timedelta

# Text encoding
ENCODING = 'utf-8'

# Bytes handed to the sink per write call
DEFAULT_CHUNK_SIZE = 4096

# AES block, key and initialization vector sizes in bytes
AES_BLOCK_SIZE = 16
AES_KEY_SIZES = (16, 24, 32)
AES_IV_SIZE = 16

# Integer ranges of the safe parsers
INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1
INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1

DAY = timedelta(days=1)

WEEKDAY_NAMES = (
    'Monday',
    'Tuesday',
    'Wednesday',
    'Thursday',
    'Friday',
    'Saturday',
    'Sunday',
)
