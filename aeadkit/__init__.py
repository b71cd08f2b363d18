"""Authenticated encryption: EAX (one-shot and online), MGM with GF(2^128) arithmetic, and XSalsa20Poly1305."""

__version__ = "0.1.0"

__all__ = ["errors", "eax", "eax_online", "gf128", "mgm", "xsalsa20poly1305"]