"""The user id packet body."""

from __future__ import annotations

from dataclasses import dataclass

from .codec import Decoder
from .enums import PacketTag


@dataclass(frozen=True)
class UserId:
    """A user id, usually a name and e-mail address."""

    id: str

    def __post_init__(self) -> None:
        if isinstance(self.id, (bytes, bytearray, memoryview)):
            object.__setattr__(self, "id", bytes(self.id).decode("utf-8", "surrogateescape"))

    @property
    def raw(self) -> bytes:
        return self.id.encode("utf-8", "surrogateescape")

    @classmethod
    def decode(cls, decoder: Decoder) -> UserId:
        """Take all remaining data as the user id."""
        return cls(decoder.read_bytes(len(decoder)))

    def tag(self) -> PacketTag:
        return PacketTag.USER_ID

    def size(self) -> int:
        return len(self.raw)

    def encode(self, writer) -> None:
        writer.write(self.raw)