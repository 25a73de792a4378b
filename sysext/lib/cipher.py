# Copyright (c) 2022-2023 SiumLhahah
# Distributed under the MIT software license, see the accompanying
# file COPYING or http://www.opensource.org/licenses/mit-license.php.

""""
sysext.lib.cipher

Provides symmetric encryption support for sysext.

Keys and initialization vectors are taken as they come: no key
derivation, no authentication and no nonce management is done here.

Example

>>> with AESKey.from_text('0123456789abcdef') as aes:
...     aes.decrypt(aes.encrypt(b'message'))
b'message'

"""

import logging
from abc import ABCMeta, abstractmethod
from secrets import token_bytes as random
from typing import Self
from cryptography.hazmat.primitives.ciphers import Cipher
from cryptography.hazmat.primitives.ciphers.algorithms import AES
from cryptography.hazmat.primitives.ciphers.modes import CBC
from cryptography.hazmat.primitives.padding import PKCS7
from ..constants import AES_BLOCK_SIZE, AES_IV_SIZE, AES_KEY_SIZES
from ..utils import as_bytes
from .exceptions import (
    AlgorithmError,
    DecryptionFailed,
    InvalidArgument,
    InvalidKeyMaterial,
)

logger = logging.getLogger(__name__)


class SymmetricKey(metaclass=ABCMeta):

    """Symmetric key."""

    name: str
    key_size: int | None

    def __init__(self, key: bytes):
        self._key = key

    @property
    def key(self) -> bytes:
        """Return the key bytes."""
        return self._key

    @abstractmethod
    def encrypt(self, plaintext: bytes) -> bytes:
        """Encrypt plaintext."""

    @abstractmethod
    def decrypt(self, ciphertext: bytes) -> bytes:
        """Decrypt ciphertext."""

    @abstractmethod
    def to_bytes(self) -> bytes:
        """Dump key to bytes."""

    @classmethod
    @abstractmethod
    def from_bytes(cls, key_bytes: bytes) -> Self:
        """Load key from bytes."""

    @classmethod
    @abstractmethod
    def generate(cls) -> Self:
        """Generate a new key."""


class AESKey(SymmetricKey):

    """AES symmetric key, CBC mode with PKCS7 padding.

    The key may be 16, 24 or 32 bytes long, the initialization
    vector must be 16 bytes long.

    An AESKey is a context manager, the cipher is released on exit
    and the key cannot be used afterwards.

    """

    name = 'aes'
    key_size = None
    block_size = AES_BLOCK_SIZE * 8

    def __init__(self, key: bytes, iv: bytes):
        super().__init__(key)
        sizes = AES_KEY_SIZES if self.key_size is None else (self.key_size,)
        if len(key) not in sizes:
            logger.debug("Rejected %d-byte AES key", len(key))
            raise InvalidKeyMaterial(
                f"Invalid key size ({len(key)} bytes) for {self.name}, "
                f"expected one of {sizes}.")
        if len(iv) != AES_IV_SIZE:
            logger.debug("Rejected %d-byte AES IV", len(iv))
            raise InvalidKeyMaterial(
                f"Invalid IV size ({len(iv)} bytes), "
                f"expected {AES_IV_SIZE}.")
        self._iv = iv
        try:
            self._cipher = Cipher(AES(key), CBC(iv))
        except ValueError as exc:
            raise InvalidKeyMaterial(str(exc)) from exc
        self._padding = PKCS7(self.block_size)
        logger.debug("AES-%d cipher set up", len(key) * 8)

    @classmethod
    def from_text(cls, key: str | bytes, iv: str | bytes | None = None
                  ) -> Self:
        """Return AESKey object from textual key material.

        Text is encoded with UTF-8. If iv is omitted the key is used
        as the initialization vector as well, which is weak and only
        kept for compatibility with existing ciphertexts.

        """
        key_bytes = as_bytes(key)
        iv_bytes = key_bytes if iv is None else as_bytes(iv)
        return cls(key_bytes, iv_bytes)

    @property
    def iv(self) -> bytes:
        """Return the initialization vector."""
        return self._iv

    @property
    def released(self) -> bool:
        """Whether the cipher has been released."""
        return self._cipher is None

    def _check(self):
        if self._cipher is None:
            raise InvalidArgument("AES key has been released.")

    def encrypt(self, plaintext: bytes) -> bytes:
        """AES-CBC encryption."""
        self._check()
        padder = self._padding.padder()
        plaintext = padder.update(plaintext) + padder.finalize()
        encryptor = self._cipher.encryptor()
        ciphertext = encryptor.update(plaintext) + encryptor.finalize()
        return ciphertext

    def decrypt(self, ciphertext: bytes) -> bytes:
        """AES-CBC decryption."""
        self._check()
        try:
            decryptor = self._cipher.decryptor()
            plaintext = decryptor.update(ciphertext) + decryptor.finalize()
            unpadder = self._padding.unpadder()
            plaintext = unpadder.update(plaintext) + unpadder.finalize()
        except ValueError as exc:
            logger.debug("AES decryption of %d bytes failed: %s",
                         len(ciphertext), exc)
            raise DecryptionFailed(
                f"Cannot decrypt {len(ciphertext)} bytes: {exc}") from exc
        return plaintext

    def release(self):
        """Drop the cipher context."""
        self._cipher = None
        self._padding = None

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *args):
        self.release()

    def to_bytes(self) -> bytes:
        """Return initialization vector and key."""
        return self._iv + self._key

    @classmethod
    def from_bytes(cls, key_bytes: bytes) -> Self:
        """Return AESKey object.

        key_bytes == iv + key

        """
        iv, key = key_bytes[:AES_IV_SIZE], key_bytes[AES_IV_SIZE:]
        return cls(key, iv)

    @classmethod
    def generate(cls) -> Self:
        """Generate AES key."""
        return cls(random(cls.key_size or AES_KEY_SIZES[-1]),
                   random(AES_IV_SIZE))


class AES128Key(AESKey):

    """AES-128 key."""

    name = 'aes128'
    key_size = 16


class AES192Key(AESKey):

    """AES-192 key."""

    name = 'aes192'
    key_size = 24


class AES256Key(AESKey):

    """AES-256 key."""

    name = 'aes256'
    key_size = 32


cipher_algorithms = {
    'aes': AESKey,
    'aes128': AES128Key,
    'aes192': AES192Key,
    'aes256': AES256Key,
}

algorithms = set(cipher_algorithms)


def get_cipher(algorithm: str) -> type[SymmetricKey]:
    """Get symmetric key class."""
    if cipher := cipher_algorithms.get(algorithm.lower()):
        return cipher
    raise AlgorithmError("Unsupported symmetric encryption algorithm")
