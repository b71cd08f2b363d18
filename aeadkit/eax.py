"""EAX authenticated encryption over AES (CMAC/OMAC1 plus CTR mode)."""

from __future__ import annotations

import hmac

from cryptography.hazmat.primitives import cmac
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from aeadkit.errors import AeadError, check_tag_size

A_MAX = 1 << 36
"""Maximum length of associated data."""

P_MAX = 1 << 36
"""Maximum length of plaintext."""

C_MAX = (1 << 36) + 16
"""Maximum length of ciphertext."""

BLOCK_SIZE = 16
NONCE_SIZE = BLOCK_SIZE
_KEY_SIZES = (16, 24, 32)


def _require_length(value: bytes, size: int, what: str) -> bytes:
    """Return ``value`` as bytes, raising ValueError unless it is ``size`` long."""
    value = bytes(value)
    if len(value) != size:
        raise ValueError(f"{what} must be {size} bytes, got {len(value)}")
    return value


def _check_tag(tag: bytes, size: int) -> bytes:
    """Return ``tag`` as bytes, raising AeadError unless it is ``size`` long."""
    tag = bytes(tag)
    if len(tag) != size:
        raise AeadError("tag has the wrong length")
    return tag


def _verify_tag(expected: bytes, tag: bytes) -> None:
    """Compare tags in constant time; raise AeadError when they differ."""
    if not hmac.compare_digest(expected, tag):
        raise AeadError("authentication failed")


def _join_tag(ciphertext: bytes, tag: bytes, tag_first: bool = False) -> bytes:
    """Join a ciphertext with its tag, the tag after it unless ``tag_first``."""
    return tag + ciphertext if tag_first else ciphertext + tag


def _split_tag(
    data: bytes, size: int, tag_first: bool = False
) -> tuple[bytes, bytes]:
    """Split combined ``data`` into ``(ciphertext, tag)``."""
    data = bytes(data)
    if len(data) < size:
        raise AeadError("ciphertext shorter than the tag")
    if tag_first:
        return data[size:], data[:size]
    split = len(data) - size
    return data[:split], data[split:]


def _omac(key: bytes, domain: int, data: bytes) -> bytes:
    """CMAC of ``data`` prefixed with ``domain`` encoded as a full block."""
    mac = cmac.CMAC(algorithms.AES(key))
    mac.update(bytes(BLOCK_SIZE - 1) + bytes([domain]))
    mac.update(data)
    return mac.finalize()


def _ctr(key: bytes, iv: bytes, data: bytes) -> bytes:
    """Apply the AES-CTR keystream (128-bit big-endian counter) to ``data``."""
    encryptor = Cipher(algorithms.AES(key), modes.CTR(iv)).encryptor()
    return encryptor.update(data) + encryptor.finalize()


def _xor3(a: bytes, b: bytes, c: bytes) -> bytes:
    return bytes(x ^ y ^ z for x, y, z in zip(a, b, c))


class Eax:
    """EAX AEAD cipher with a 16-byte nonce and a tag of 4 to 16 bytes."""

    def __init__(self, key: bytes, tag_size: int = 16) -> None:
        key = bytes(key)
        if len(key) not in _KEY_SIZES:
            raise ValueError(f"AES key must be 16, 24 or 32 bytes, got {len(key)}")
        self._key = key
        self.tag_size = check_tag_size(tag_size)

    def __repr__(self) -> str:
        return f"Eax(key_bits={len(self._key) * 8}, tag_size={self.tag_size})"

    def _full_tag(self, n: bytes, associated_data: bytes, ciphertext: bytes) -> bytes:
        h = _omac(self._key, 1, associated_data)
        c = _omac(self._key, 2, ciphertext)
        return _xor3(n, h, c)

    def encrypt_detached(
        self, nonce: bytes, associated_data: bytes, plaintext: bytes
    ) -> tuple[bytes, bytes]:
        """Encrypt ``plaintext``; return ``(ciphertext, tag)``."""
        nonce = _require_length(nonce, NONCE_SIZE, "nonce")
        associated_data = bytes(associated_data)
        plaintext = bytes(plaintext)
        if len(plaintext) > P_MAX or len(associated_data) > A_MAX:
            raise AeadError("input too long")

        n = _omac(self._key, 0, nonce)
        ciphertext = _ctr(self._key, n, plaintext)
        tag = self._full_tag(n, associated_data, ciphertext)[: self.tag_size]
        return ciphertext, tag

    def decrypt_detached(
        self, nonce: bytes, associated_data: bytes, ciphertext: bytes, tag: bytes
    ) -> bytes:
        """Verify ``tag`` and decrypt ``ciphertext``; raise AeadError on failure."""
        nonce = _require_length(nonce, NONCE_SIZE, "nonce")
        associated_data = bytes(associated_data)
        ciphertext = bytes(ciphertext)
        if len(ciphertext) > C_MAX or len(associated_data) > A_MAX:
            raise AeadError("input too long")
        tag = _check_tag(tag, self.tag_size)

        n = _omac(self._key, 0, nonce)
        _verify_tag(self._full_tag(n, associated_data, ciphertext)[: len(tag)], tag)
        return _ctr(self._key, n, ciphertext)

    def encrypt(
        self, nonce: bytes, plaintext: bytes, associated_data: bytes = b""
    ) -> bytes:
        """Encrypt and return the ciphertext followed by its tag."""
        ciphertext, tag = self.encrypt_detached(nonce, associated_data, plaintext)
        return _join_tag(ciphertext, tag)

    def decrypt(
        self, nonce: bytes, ciphertext: bytes, associated_data: bytes = b""
    ) -> bytes:
        """Decrypt a ciphertext followed by its tag."""
        body, tag = _split_tag(ciphertext, self.tag_size)
        return self.decrypt_detached(nonce, associated_data, body, tag)