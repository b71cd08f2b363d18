"""XSalsa20Poly1305 authenticated encryption (the NaCl ``crypto_secretbox``).

A 32-byte key, a 24-byte nonce and a 16-byte Poly1305 tag. The combined
ciphertext format puts the tag *before* the encrypted message, as NaCl does.
Associated data is not supported: any non-empty value is rejected.
"""

from __future__ import annotations

import secrets

from nacl import bindings
from nacl.exceptions import CryptoError

from aeadkit.eax import _check_tag, _join_tag, _require_length, _split_tag
from aeadkit.errors import AeadError

KEY_SIZE = 32
"""Size of an XSalsa20Poly1305 key in bytes."""

NONCE_SIZE = 24
"""Size of an XSalsa20Poly1305 nonce in bytes."""

TAG_SIZE = 16
"""Size of a Poly1305 tag in bytes."""


def generate_nonce() -> bytes:
    """Return a random nonce. Every message must use a different nonce."""
    return secrets.token_bytes(NONCE_SIZE)


class XSalsa20Poly1305:
    """XSalsa20Poly1305 (NaCl ``crypto_secretbox``) cipher."""

    tag_size = TAG_SIZE

    def __init__(self, key: bytes) -> None:
        self._key = _require_length(key, KEY_SIZE, "key")

    def __repr__(self) -> str:
        return "XSalsa20Poly1305(...)"

    @staticmethod
    def _check_inputs(nonce: bytes, associated_data: bytes) -> bytes:
        nonce = _require_length(nonce, NONCE_SIZE, "nonce")
        if bytes(associated_data):
            raise AeadError("XSalsa20Poly1305 does not support associated data")
        return nonce

    def encrypt(
        self, nonce: bytes, plaintext: bytes, associated_data: bytes = b""
    ) -> bytes:
        """Encrypt and return the tag followed by the ciphertext."""
        ciphertext, tag = self.encrypt_detached(nonce, associated_data, plaintext)
        return _join_tag(ciphertext, tag, tag_first=True)

    def decrypt(
        self, nonce: bytes, ciphertext: bytes, associated_data: bytes = b""
    ) -> bytes:
        """Decrypt a tag followed by its ciphertext."""
        body, tag = _split_tag(ciphertext, TAG_SIZE, tag_first=True)
        return self.decrypt_detached(nonce, associated_data, body, tag)

    def encrypt_detached(
        self, nonce: bytes, associated_data: bytes, plaintext: bytes
    ) -> tuple[bytes, bytes]:
        """Encrypt ``plaintext``; return ``(ciphertext, tag)``."""
        nonce = self._check_inputs(nonce, associated_data)
        boxed = bindings.crypto_secretbox(bytes(plaintext), nonce, self._key)
        return boxed[TAG_SIZE:], boxed[:TAG_SIZE]

    def decrypt_detached(
        self, nonce: bytes, associated_data: bytes, ciphertext: bytes, tag: bytes
    ) -> bytes:
        """Verify ``tag`` and decrypt ``ciphertext``; raise AeadError on failure."""
        nonce = self._check_inputs(nonce, associated_data)
        tag = _check_tag(tag, TAG_SIZE)
        try:
            return bindings.crypto_secretbox_open(
                tag + bytes(ciphertext), nonce, self._key
            )
        except CryptoError as exc:
            raise AeadError("authentication failed") from exc