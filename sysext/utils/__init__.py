# Copyright (c) 2022-2023 SiumLhahah
# Distributed under the MIT software license, see the accompanying
# file COPYING or http://www.opensource.org/licenses/mit-license.php.

"""
sysext.utils

Sysext utilities.

"""

from collections.abc import Iterator
from ..constants import ENCODING


def as_bytes(material: str | bytes, encoding=ENCODING) -> bytes:
    """Encode text into bytes, pass bytes through."""
    if isinstance(material, str):
        return material.encode(encoding)
    return bytes(material)


def iter_chunks(data: bytes, size: int) -> Iterator[memoryview]:
    """Yield successive slices of data, the last one may be shorter.

    Slices are views into data, nothing is copied.

    """
    view = memoryview(data).cast('B')
    length = len(view)
    count, tail = divmod(length, size)
    for index in range(count):
        yield view[index * size:(index + 1) * size]
    if tail:
        yield view[count * size:]
