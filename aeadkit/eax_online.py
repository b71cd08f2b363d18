"""Online EAX: encrypt or decrypt a message chunk by chunk.

Associated data and message bytes can be fed in as many pieces as needed.
Authentication only happens in ``finish``, which must always be called once
the stream is complete.
"""

from __future__ import annotations

import hmac

from cryptography.hazmat.primitives import cmac
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from aeadkit.eax import BLOCK_SIZE, NONCE_SIZE
from aeadkit.errors import AeadError, check_tag_size

_KEY_SIZES = (16, 24, 32)


def _prefixed_cmac(key: bytes, domain: int) -> cmac.CMAC:
    """A CMAC already fed with ``domain`` encoded as a full leading block."""
    mac = cmac.CMAC(algorithms.AES(key))
    mac.update(bytes(BLOCK_SIZE - 1) + bytes([domain]))
    return mac


class _EaxStream:
    """Shared state of an online EAX computation."""

    def __init__(self, key: bytes, nonce: bytes, tag_size: int) -> None:
        key = bytes(key)
        if len(key) not in _KEY_SIZES:
            raise ValueError(f"AES key must be 16, 24 or 32 bytes, got {len(key)}")
        nonce = bytes(nonce)
        if len(nonce) != NONCE_SIZE:
            raise ValueError(f"nonce must be {NONCE_SIZE} bytes, got {len(nonce)}")
        self.tag_size = check_tag_size(tag_size)

        nonce_mac = _prefixed_cmac(key, 0)
        nonce_mac.update(nonce)
        self._n = nonce_mac.finalize()
        self._data = _prefixed_cmac(key, 1)
        self._message = _prefixed_cmac(key, 2)
        self._ctr = Cipher(algorithms.AES(key), modes.CTR(self._n)).encryptor()
        self._finished = False

    def _ensure_open(self) -> None:
        if self._finished:
            raise RuntimeError("stream has already been finished")

    def update_assoc(self, data: bytes) -> None:
        """Process a piece of the associated data."""
        self._ensure_open()
        self._data.update(bytes(data))

    def tag_clone(self) -> bytes:
        """Tag of everything processed so far, leaving the stream usable."""
        self._ensure_open()
        return self._derive_tag(self._data.copy(), self._message.copy())

    def _take_tag(self) -> bytes:
        self._ensure_open()
        self._finished = True
        self._ctr.finalize()
        return self._derive_tag(self._data, self._message)

    def _derive_tag(self, data: cmac.CMAC, message: cmac.CMAC) -> bytes:
        h = data.finalize()
        c = message.finalize()
        full = bytes(a ^ b ^ d for a, b, d in zip(self._n, h, c))
        return full[: self.tag_size]


class EaxEncryptor(_EaxStream):
    """Online EAX encryption; call ``finish`` to obtain the tag."""

    def __init__(self, key: bytes, nonce: bytes, tag_size: int = 16) -> None:
        super().__init__(key, nonce, tag_size)

    def update_assoc(self, data: bytes) -> None:
        """Process a piece of the associated data."""
        super().update_assoc(data)

    def encrypt(self, data: bytes) -> bytes:
        """Encrypt the next chunk of plaintext and return its ciphertext."""
        self._ensure_open()
        ciphertext = self._ctr.update(bytes(data))
        self._message.update(ciphertext)
        return ciphertext

    def tag_clone(self) -> bytes:
        """Tag of the message so far; use ``finish`` when the stream is done."""
        return super().tag_clone()

    def finish(self) -> bytes:
        """End the stream and return the authentication tag."""
        return self._take_tag()


class EaxDecryptor(_EaxStream):
    """Online EAX decryption; ``finish`` verifies the tag."""

    def __init__(self, key: bytes, nonce: bytes, tag_size: int = 16) -> None:
        super().__init__(key, nonce, tag_size)

    def update_assoc(self, data: bytes) -> None:
        """Process a piece of the associated data."""
        super().update_assoc(data)

    def decrypt_unauthenticated_hazmat(self, data: bytes) -> bytes:
        """Decrypt the next chunk without authenticating it.

        The returned plaintext must not be trusted until ``finish`` has
        succeeded; releasing it earlier may expose the scheme to
        chosen-ciphertext attacks.
        """
        self._ensure_open()
        data = bytes(data)
        self._message.update(data)
        return self._ctr.update(data)

    def tag_clone(self) -> bytes:
        """Tag of the message so far; use ``finish`` when the stream is done."""
        return super().tag_clone()

    def finish(self, expected: bytes) -> None:
        """End the stream; raise AeadError if ``expected`` does not match."""
        expected = bytes(expected)
        if len(expected) != self.tag_size:
            self._take_tag()
            raise AeadError("tag has the wrong length")
        resulting = self._take_tag()[: len(expected)]
        if not hmac.compare_digest(resulting, expected):
            raise AeadError("authentication failed")