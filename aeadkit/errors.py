"""Error type shared by the AEAD ciphers, and tag size validation."""

MIN_TAG_SIZE = 4
MAX_TAG_SIZE = 16


class AeadError(Exception):
    """Encryption or decryption failed: bad input size or failed authentication."""

    def __init__(self, message: str = "aead error") -> None:
        super().__init__(message)


def check_tag_size(tag_size: int) -> int:
    """Return ``tag_size`` if it is a valid tag length (4 to 16 bytes)."""
    if isinstance(tag_size, bool) or not isinstance(tag_size, int):
        raise TypeError(f"tag size must be an int, not {type(tag_size).__name__}")
    if not MIN_TAG_SIZE <= tag_size <= MAX_TAG_SIZE:
        raise ValueError(
            f"tag size must be between {MIN_TAG_SIZE} and {MAX_TAG_SIZE} bytes, "
            f"got {tag_size}"
        )
    return tag_size