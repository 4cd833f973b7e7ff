"""Feeding encoded data into a hash context."""

from __future__ import annotations

import hashlib


class HashEncoder:
    """An encoder whose output goes into a hash instead of a buffer."""

    def __init__(self, algorithm: str) -> None:
        self._hasher = hashlib.new(algorithm)
        self._digest: bytes | None = None

    @property
    def name(self) -> str:
        return self._hasher.name

    @property
    def digest_size(self) -> int:
        return self._hasher.digest_size

    def push_uint(self, value: int, width: int) -> HashEncoder:
        """Hash a big-endian unsigned number."""
        if width <= 0 or not 0 <= value < 1 << (8 * width):
            raise ValueError(f"{value} does not fit in {width} byte(s)")
        self._hasher.update(int(value).to_bytes(width, "big"))
        return self

    def write(self, data) -> HashEncoder:
        """Hash raw bytes."""
        self._hasher.update(bytes(data))
        return self

    def digest(self) -> bytes:
        """Return the digest; the first call fixes it."""
        if self._digest is None:
            self._digest = self._hasher.digest()
        return self._digest

    def hash_prefix(self) -> bytes:
        """Return the first two bytes of the digest."""
        return self.digest()[:2]


def sha1_encoder() -> HashEncoder:
    return HashEncoder("sha1")


def sha256_encoder() -> HashEncoder:
    return HashEncoder("sha256")