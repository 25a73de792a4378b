# Copyright (c) 2022-2023 SiumLhahah
# Distributed under the MIT software license, see the accompanying
# file COPYING or http://www.opensource.org/licenses/mit-license.php.

"""
sysext.binary

Helpers for byte sequences and binary sinks.

"""

import hashlib
import logging
from base64 import b64encode
from typing import Protocol
from .constants import DEFAULT_CHUNK_SIZE, ENCODING
from .lib.cipher import AESKey
from .lib.exceptions import InvalidArgument
from .utils import iter_chunks

logger = logging.getLogger(__name__)


class Sink(Protocol):

    """Anything with write() and flush(), e.g. BufferedIOBase."""

    def write(self, data: bytes, /) -> int | None: ...

    def flush(self) -> None: ...


def write_chunked(writer: Sink, data: bytes,
                  chunk_size: int = DEFAULT_CHUNK_SIZE) -> int:
    """Write data into writer chunk by chunk, flushing after each chunk.

    len(data) // chunk_size full chunks are written, followed by the
    remaining tail if any, so writer.flush() is called
    ceil(len(data) / chunk_size) times. Each chunk is handed over as
    bytes, the sink holds no view on data.

    Returns the number of bytes written.

    """
    if (not isinstance(chunk_size, int) or isinstance(chunk_size, bool)
            or chunk_size <= 0):
        raise InvalidArgument(
            f"Chunk size must be a positive integer, got {chunk_size!r}.")
    written = chunks = 0
    for chunk in iter_chunks(data, chunk_size):
        writer.write(bytes(chunk))
        writer.flush()
        written += len(chunk)
        chunks += 1
    logger.debug("Wrote %d bytes in %d chunks of %d", written, chunks,
                 chunk_size)
    return written


def to_aes(data: bytes, key: str | bytes, iv: str | bytes | None = None
           ) -> bytes:
    """Encrypt data with AES (CBC mode, PKCS7 padding).

    key and iv are UTF-8 encoded. When iv is omitted the key doubles as
    the initialization vector: a known weakness kept so existing
    ciphertexts stay readable.

    """
    with AESKey.from_text(key, iv) as aes:
        return aes.encrypt(data)


def from_aes(data: bytes, key: str | bytes, iv: str | bytes | None = None
             ) -> bytes:
    """Decrypt data encrypted by to_aes() with the same key and iv."""
    with AESKey.from_text(key, iv) as aes:
        return aes.decrypt(data)


def to_base64(data: bytes) -> str:
    """Encode data in Base64."""
    return b64encode(data).decode('ascii')


def to_hex(data: bytes) -> str:
    """Upper case hexadecimal, no separators."""
    return bytes(data).hex().upper()


def to_md5(data: bytes) -> bytes:
    """MD5 digest of data."""
    return hashlib.md5(data).digest()


def to_utf8(data: bytes) -> str:
    """Decode data as UTF-8, invalid sequences become U+FFFD."""
    return bytes(data).decode(ENCODING, errors='replace')
