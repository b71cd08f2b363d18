# aeadkit

Authenticated encryption with associated data (AEAD) for Python:

- **EAX** over AES (128, 192 or 256-bit keys), with tags from 4 to 16 bytes,
  in a one-shot form (`aeadkit.eax.Eax`) and an online, chunk-by-chunk form
  (`aeadkit.eax_online.EaxEncryptor` / `EaxDecryptor`). AES, CMAC and CTR
  come from the `cryptography` package.
- **MGM** (Multilinear Galois Mode) over any 128-bit block cipher you supply
  (`aeadkit.mgm.Mgm`), with its GF(2^128) arithmetic in `aeadkit.gf128`.
- **XSalsa20Poly1305**, the NaCl `crypto_secretbox` construction
  (`aeadkit.xsalsa20poly1305.XSalsa20Poly1305`), built on PyNaCl.

## Errors

- `aeadkit.errors.AeadError` is raised when authentication fails (wrong tag,
  tampered ciphertext or associated data), when a combined ciphertext is
  shorter than its tag, when a tag has the wrong length, when EAX input is
  over its size limits (`A_MAX`, `P_MAX`, `C_MAX` in `aeadkit.eax`), when an
  MGM nonce has its top bit set, and when XSalsa20Poly1305 is given non-empty
  associated data.
- A key or nonce of the wrong length raises `ValueError`, as does a tag size
  outside 4 to 16 bytes; a tag size that is not an `int` raises `TypeError`.

## Installation

```
pip install aeadkit
```

## EAX

```python
import os

from aeadkit.eax import Eax
from aeadkit.errors import AeadError

key = os.urandom(32)
nonce = b"my unique nonces"          # 16 bytes, unique per message

cipher = Eax(key, tag_size=16)
ciphertext = cipher.encrypt(nonce, b"plaintext message", associated_data=b"header")
plaintext = cipher.decrypt(nonce, ciphertext, associated_data=b"header")
assert plaintext == b"plaintext message"

# Detached form: ciphertext and tag come back separately.
short = Eax(key, tag_size=8)
body, tag = short.encrypt_detached(nonce, b"", b"plaintext message")
assert len(tag) == 8
assert short.decrypt_detached(nonce, b"", body, tag) == b"plaintext message"

try:
    cipher.decrypt(nonce, ciphertext, associated_data=b"tampered")
except AeadError:
    print("authentication failed")
```

The combined form is the ciphertext followed by the tag. The tag size must lie
between 4 and 16 bytes; `aeadkit.errors.check_tag_size` enforces this.

## Online EAX

Data may be fed in pieces of any size. `finish()` must always be called: on
the encrypting side it returns the tag, on the decrypting side it checks the
tag and raises `AeadError` if the data was tampered with. Once a stream is
finished, any further call on it raises `RuntimeError`.

```python
from aeadkit.eax_online import EaxDecryptor, EaxEncryptor

enc = EaxEncryptor(key, nonce, tag_size=16)
enc.update_assoc(b"my associated data")
parts = [enc.encrypt(b"plaintext"), enc.encrypt(b" message")]
tag = enc.finish()

dec = EaxDecryptor(key, nonce, tag_size=16)
dec.update_assoc(b"my associated data")
recovered = b"".join(dec.decrypt_unauthenticated_hazmat(p) for p in parts)
dec.finish(tag)                      # raises AeadError on mismatch
assert recovered == b"plaintext message"
```

`decrypt_unauthenticated_hazmat` hands back plaintext before it has been
authenticated. Do not act on that output until `finish` has succeeded.
`tag_clone()` gives the tag of everything processed so far without ending the
stream.

## MGM

`Mgm` takes a function that encrypts one 16-byte block and returns 16 bytes.
Any 128-bit block cipher works; here AES from the `cryptography` package is
used:

```python
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from aeadkit.mgm import Mgm

block_encryptor = Cipher(algorithms.AES(os.urandom(32)), modes.ECB()).encryptor()
mgm = Mgm(block_encryptor.update)

mgm_nonce = bytes.fromhex("1122334455667700ffeeddccbbaa9988")   # top bit must be 0
sealed = mgm.encrypt(mgm_nonce, b"plaintext message", associated_data=b"header")
assert mgm.decrypt(mgm_nonce, sealed, associated_data=b"header") == b"plaintext message"
```

The nonce is 16 bytes and its most significant bit must be zero; otherwise both
encryption and decryption raise `AeadError`. The tag is always 16 bytes and
follows the ciphertext in the combined form; `encrypt_detached` and
`decrypt_detached` work with it separately.

`aeadkit.gf128.Element` is the accumulator MGM uses: `mul_sum(a, b)` adds the
product of two 16-byte blocks in GF(2^128) (modulo x^128 + x^7 + x^2 + x + 1)
and `to_bytes()` returns the running sum as a 16-byte big-endian block.

## XSalsa20Poly1305

```python
from aeadkit.xsalsa20poly1305 import XSalsa20Poly1305, generate_nonce

box = XSalsa20Poly1305(os.urandom(32))
box_nonce = generate_nonce()         # 24 random bytes; never reuse one
sealed = box.encrypt(box_nonce, b"plaintext message", associated_data=b"")
assert box.decrypt(box_nonce, sealed, associated_data=b"") == b"plaintext message"
```

As in NaCl, the 16-byte Poly1305 tag comes *before* the ciphertext. This
construction does not support associated data: passing any non-empty
`associated_data` raises `AeadError`.

## What this package does not do

It is a library only: there is no command-line tool, no key management and no
file format. Keys and nonces are up to the caller; no block cipher is bundled
for MGM.

## Running the tests

```
pip install "aeadkit[test]"
pytest
```