# Copyright (c) 2022-2023 SiumLhahah
# Distributed under the MIT software license, see the accompanying
# file COPYING or http://www.opensource.org/licenses/mit-license.php.

""""
sysext.lib

The library of sysext.
"""

__all__ = [
    'cipher',
    'exceptions',
]
