"""Multilinear Galois Mode (MGM) authenticated encryption.

MGM works over any 128-bit block cipher, given as a function that encrypts
one 16-byte block. Nonces are 16 bytes whose most significant bit must be
zero; tags are 16 bytes.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from itertools import chain

from aeadkit.eax import (
    _check_tag,
    _join_tag,
    _require_length,
    _split_tag,
    _verify_tag,
)
from aeadkit.errors import AeadError
from aeadkit.gf128 import Element

BLOCK_SIZE = 16
NONCE_SIZE = BLOCK_SIZE
TAG_SIZE = BLOCK_SIZE

_MASK64 = (1 << 64) - 1


def _increment_high(counter: int) -> int:
    """Add one to the upper 64-bit half of a 128-bit counter, wrapping."""
    high = ((counter >> 64) + 1) & _MASK64
    return (high << 64) | (counter & _MASK64)


def _increment_low(counter: int) -> int:
    """Add one to the lower 64-bit half of a 128-bit counter, wrapping."""
    low = ((counter & _MASK64) + 1) & _MASK64
    return (counter & (_MASK64 << 64)) | low


def _blocks(data: bytes) -> Iterator[bytes]:
    """Split ``data`` into 16-byte blocks; the last one may be shorter."""
    for start in range(0, len(data), BLOCK_SIZE):
        yield data[start : start + BLOCK_SIZE]


def _bit_length_block(associated_data: bytes, ciphertext: bytes) -> bytes:
    """Final block: the two lengths in bits, each as a wrapping 64-bit value."""
    return b"".join(
        ((8 * len(part)) & _MASK64).to_bytes(8, "big")
        for part in (associated_data, ciphertext)
    )


class Mgm:
    """MGM AEAD cipher over a 128-bit block cipher."""

    tag_size = TAG_SIZE

    def __init__(self, encrypt_block: Callable[[bytes], bytes]) -> None:
        if not callable(encrypt_block):
            raise TypeError("encrypt_block must be callable")
        self._encrypt_block = encrypt_block

    def __repr__(self) -> str:
        return f"Mgm({self._encrypt_block!r})"

    def _encrypt(self, block: bytes) -> bytes:
        out = bytes(self._encrypt_block(bytes(block)))
        if len(out) != BLOCK_SIZE:
            raise ValueError(
                f"block cipher must return {BLOCK_SIZE} bytes, got {len(out)}"
            )
        return out

    def _encrypt_counter(self, counter: int) -> bytes:
        return self._encrypt(counter.to_bytes(BLOCK_SIZE, "big"))

    def _counters(self, nonce: bytes) -> tuple[int, int]:
        """Initial encryption and authentication counters for ``nonce``."""
        nonce = _require_length(nonce, NONCE_SIZE, "nonce")
        if nonce[0] & 0x80:
            raise AeadError("first bit of the nonce must be zero")
        enc, tag = (
            int.from_bytes(self._encrypt(bytes([first]) + nonce[1:]), "big")
            for first in (nonce[0] & 0x7F, nonce[0] | 0x80)
        )
        return enc, tag

    def _apply_keystream(self, counter: int, data: bytes) -> bytes:
        out = bytearray()
        for chunk in _blocks(data):
            keystream = self._encrypt_counter(counter)
            out += bytes(a ^ b for a, b in zip(chunk, keystream))
            counter = _increment_low(counter)
        return bytes(out)

    def _compute_tag(
        self, counter: int, associated_data: bytes, ciphertext: bytes
    ) -> bytes:
        acc = Element()
        for block in chain(_blocks(associated_data), _blocks(ciphertext)):
            acc.mul_sum(self._encrypt_counter(counter), block.ljust(BLOCK_SIZE, b"\0"))
            counter = _increment_high(counter)
        acc.mul_sum(
            self._encrypt_counter(counter),
            _bit_length_block(associated_data, ciphertext),
        )
        return self._encrypt(acc.to_bytes())

    def encrypt_detached(
        self, nonce: bytes, associated_data: bytes, plaintext: bytes
    ) -> tuple[bytes, bytes]:
        """Encrypt ``plaintext``; return ``(ciphertext, tag)``."""
        enc_counter, tag_counter = self._counters(nonce)
        ciphertext = self._apply_keystream(enc_counter, bytes(plaintext))
        tag = self._compute_tag(tag_counter, bytes(associated_data), ciphertext)
        return ciphertext, tag

    def decrypt_detached(
        self, nonce: bytes, associated_data: bytes, ciphertext: bytes, tag: bytes
    ) -> bytes:
        """Verify ``tag`` and decrypt ``ciphertext``; raise AeadError on failure."""
        enc_counter, tag_counter = self._counters(nonce)
        ciphertext = bytes(ciphertext)
        tag = _check_tag(tag, TAG_SIZE)
        _verify_tag(
            self._compute_tag(tag_counter, bytes(associated_data), ciphertext), tag
        )
        return self._apply_keystream(enc_counter, ciphertext)

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
        body, tag = _split_tag(ciphertext, TAG_SIZE)
        return self.decrypt_detached(nonce, associated_data, body, tag)