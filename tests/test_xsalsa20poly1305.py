import pytest

from aeadkit.errors import AeadError
from aeadkit.xsalsa20poly1305 import (
    NONCE_SIZE,
    TAG_SIZE,
    XSalsa20Poly1305,
    generate_nonce,
)

KEY = bytes.fromhex(
    "1b27556473e985d462cd51197a9a46c7"
    "6009549eac6474f206c4ee0844f68389"
)

NONCE = bytes.fromhex("69696ee955b62b73cd62bda875fc73d68219e0036b7a0b37")

PLAINTEXT = bytes.fromhex(
    "be075fc53c81f2d5cf141316ebeb0c7b"
    "5228c52a4c62cbd44b66849b64244ffc"
    "e5ecbaaf33bd751a1ac728d45e6c6129"
    "6cdc3c01233561f41db66cce314adb31"
    "0e3be8250c46f06dceea3a7fa1348057"
    "e2f6556ad6b1318a024a838f21af1fde"
    "048977eb48f59ffd4924ca1c60902e52"
    "f0a089bc76897040e082f93776384864"
    "5e0705"
)

CIPHERTEXT = bytes.fromhex(
    "f3ffc7703f9400e52a7dfb4b3d3305d9"
    "8e993b9f48681273c29650ba32fc76ce"
    "48332ea7164d96a4476fb8c531a1186a"
    "c0dfc17c98dce87b4da7f011ec48c972"
    "71d2c20f9b928fe2270d6fb863d51738"
    "b48eeee314a7cc8ab932164548e526ae"
    "90224368517acfeabd6bb3732bc0e9da"
    "99832b61ca01b6de56244a9e88d5f9b3"
    "7973f622a43d14a6599b1f654cb45a74"
    "e355a5"
)


@pytest.fixture
def cipher():
    return XSalsa20Poly1305(KEY)


def test_encrypt(cipher):
    assert cipher.encrypt(NONCE, PLAINTEXT) == CIPHERTEXT


def test_decrypt(cipher):
    assert cipher.decrypt(NONCE, CIPHERTEXT) == PLAINTEXT


def test_decrypt_modified(cipher):
    tampered = bytearray(CIPHERTEXT)
    tampered[0] ^= 0xAA
    with pytest.raises(AeadError):
        cipher.decrypt(NONCE, bytes(tampered))


def test_encrypt_detached_splits_prefix_tag(cipher):
    ciphertext, tag = cipher.encrypt_detached(NONCE, b"", PLAINTEXT)
    assert tag == CIPHERTEXT[:TAG_SIZE]
    assert ciphertext == CIPHERTEXT[TAG_SIZE:]


def test_decrypt_detached(cipher):
    plaintext = cipher.decrypt_detached(
        NONCE, b"", CIPHERTEXT[TAG_SIZE:], CIPHERTEXT[:TAG_SIZE]
    )
    assert plaintext == PLAINTEXT


def test_decrypt_detached_modified_body(cipher):
    body = bytearray(CIPHERTEXT[TAG_SIZE:])
    body[-1] ^= 0x01
    with pytest.raises(AeadError):
        cipher.decrypt_detached(NONCE, b"", bytes(body), CIPHERTEXT[:TAG_SIZE])


def test_decrypt_detached_wrong_tag_length(cipher):
    with pytest.raises(AeadError):
        cipher.decrypt_detached(
            NONCE, b"", CIPHERTEXT[TAG_SIZE:], CIPHERTEXT[: TAG_SIZE - 1]
        )


def test_associated_data_rejected_on_encrypt(cipher):
    with pytest.raises(AeadError):
        cipher.encrypt(NONCE, PLAINTEXT, b"header")


def test_associated_data_rejected_on_decrypt(cipher):
    with pytest.raises(AeadError):
        cipher.decrypt(NONCE, CIPHERTEXT, b"header")


def test_decrypt_too_short(cipher):
    with pytest.raises(AeadError):
        cipher.decrypt(NONCE, CIPHERTEXT[: TAG_SIZE - 1])


def test_empty_round_trip(cipher):
    sealed = cipher.encrypt(NONCE, b"")
    assert len(sealed) == TAG_SIZE
    assert cipher.decrypt(NONCE, sealed) == b""


def test_wrong_nonce_fails(cipher):
    other = bytes(NONCE_SIZE)
    with pytest.raises(AeadError):
        cipher.decrypt(other, CIPHERTEXT)


@pytest.mark.parametrize("length", [0, 16, 31, 33])
def test_bad_key_length(length):
    with pytest.raises(ValueError):
        XSalsa20Poly1305(bytes(length))


@pytest.mark.parametrize("length", [0, 12, 23, 25])
def test_bad_nonce_length(cipher, length):
    with pytest.raises(ValueError):
        cipher.encrypt(bytes(length), PLAINTEXT)


def test_generate_nonce_length_and_uniqueness():
    nonces = {generate_nonce() for _ in range(32)}
    assert len(nonces) == 32
    assert all(len(n) == NONCE_SIZE for n in nonces)


def test_round_trip_with_generated_nonce(cipher):
    nonce = generate_nonce()
    message = b"plaintext message"
    assert cipher.decrypt(nonce, cipher.encrypt(nonce, message)) == message