import pytest

from sysext.constants import AES_BLOCK_SIZE
from sysext.lib import cipher
from sysext.lib.cipher import (
    AES128Key,
    AES192Key,
    AES256Key,
    AESKey,
    get_cipher,
)
from sysext.lib.exceptions import (
    AlgorithmError,
    InvalidArgument,
    InvalidKeyMaterial,
)


def test_from_text_uses_key_as_iv_by_default() -> None:
    aes = AESKey.from_text("0123456789abcdef")

    assert aes.key == b"0123456789abcdef"
    assert aes.iv == b"0123456789abcdef"


def test_ciphertext_is_padded_to_the_block_size() -> None:
    with AESKey.from_text("0123456789abcdef") as aes:
        assert aes.block_size == AES_BLOCK_SIZE * 8
        assert len(aes.encrypt(b"")) == AES_BLOCK_SIZE
        assert len(aes.encrypt(b"x" * AES_BLOCK_SIZE)) == 2 * AES_BLOCK_SIZE


def test_context_manager_releases_cipher() -> None:
    with AESKey.from_text("0123456789abcdef") as aes:
        ciphertext = aes.encrypt(b"message")
        assert aes.decrypt(ciphertext) == b"message"

    assert aes.released
    with pytest.raises(InvalidArgument):
        aes.encrypt(b"message")


def test_cipher_is_released_when_the_block_raises() -> None:
    with pytest.raises(RuntimeError):
        with AESKey.from_text("0123456789abcdef") as aes:
            raise RuntimeError("boom")

    assert aes.released


@pytest.mark.parametrize(
    ("cls", "size"), [(AES128Key, 16), (AES192Key, 24), (AES256Key, 32)]
)
def test_generate_and_reload(cls: type[AESKey], size: int) -> None:
    key = cls.generate()

    assert len(key.key) == size
    assert len(key.iv) == 16
    assert len(key.to_bytes()) == 16 + size

    reloaded = cls.from_bytes(key.to_bytes())
    assert reloaded.decrypt(key.encrypt(b"data")) == b"data"


def test_fixed_size_key_rejects_other_sizes() -> None:
    with pytest.raises(InvalidKeyMaterial):
        AES128Key(bytes(32), bytes(16))
    assert len(AESKey(bytes(32), bytes(16)).key) == 32


def test_base_key_generates_aes_256() -> None:
    assert len(AESKey.generate().key) == 32


def test_get_cipher() -> None:
    assert get_cipher("AES128") is AES128Key
    assert get_cipher("aes") is AESKey
    assert cipher.algorithms == {"aes", "aes128", "aes192", "aes256"}


def test_get_cipher_unknown_algorithm() -> None:
    with pytest.raises(AlgorithmError) as excinfo:
        get_cipher("des")

    assert isinstance(excinfo.value, NotImplementedError)
    assert str(excinfo.value) == "Unsupported symmetric encryption algorithm"
