"""Signature subpackets and the length-prefixed sets that hold them."""

from __future__ import annotations

from dataclasses import dataclass, field

from .codec import Decoder, ExpectedNumber, VariableNumber

_TYPE_WIDTH = 1
_SET_LENGTH_WIDTH = 2


def _framed_size(body_size: int) -> int:
    """Size of a subpacket whose type and body take ``body_size`` bytes."""
    return body_size + VariableNumber(body_size).size()


@dataclass(frozen=True)
class UnknownSubpacket:
    """A subpacket kept as its type and raw body.

    Two such subpackets compare equal when their bodies match.
    """

    type: int = field(compare=False)
    data: bytes = b""

    def __post_init__(self) -> None:
        if not 0 <= self.type <= 0xFF:
            raise ValueError(f"subpacket type {self.type} is not an octet")
        object.__setattr__(self, "data", bytes(self.data))

    @classmethod
    def decode(cls, type, decoder: Decoder) -> UnknownSubpacket:
        """Take all remaining data as the body of a subpacket of ``type``."""
        return cls(type, decoder.read_bytes(len(decoder)))

    def size(self) -> int:
        return _framed_size(_TYPE_WIDTH + len(self.data))

    def encode(self, writer) -> None:
        VariableNumber(_TYPE_WIDTH + len(self.data)).encode(writer)
        writer.push_uint(self.type, _TYPE_WIDTH)
        writer.write(self.data)


@dataclass(frozen=True)
class IssuerFingerprint:
    """The fingerprint of the key that made a signature."""

    TYPE = 33
    FINGERPRINT_SIZE = 20
    _VERSION = ExpectedNumber(4, 1)

    data: bytes

    def __post_init__(self) -> None:
        data = bytes(self.data)
        if len(data) != self.FINGERPRINT_SIZE:
            raise ValueError(
                f"a fingerprint holds {self.FINGERPRINT_SIZE} bytes, not {len(data)}"
            )
        object.__setattr__(self, "data", data)

    @property
    def type(self) -> int:
        return self.TYPE

    @property
    def version(self) -> int:
        return self._VERSION.value

    @classmethod
    def decode(cls, decoder: Decoder) -> IssuerFingerprint:
        cls._VERSION.decode(decoder)
        return cls(decoder.read_bytes(cls.FINGERPRINT_SIZE))

    def _body_size(self) -> int:
        return _TYPE_WIDTH + self._VERSION.size() + len(self.data)

    def size(self) -> int:
        return _framed_size(self._body_size())

    def encode(self, writer) -> None:
        VariableNumber(self._body_size()).encode(writer)
        writer.push_uint(self.TYPE, _TYPE_WIDTH)
        self._VERSION.encode(writer)
        writer.write(self.data)


@dataclass(frozen=True)
class SignatureSubpacketSet:
    """An ordered set of subpackets behind a two-octet length."""

    subpackets: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "subpackets", tuple(self.subpackets))

    @classmethod
    def decode(cls, decoder: Decoder) -> SignatureSubpacketSet:
        body = decoder.splice(decoder.read_uint(_SET_LENGTH_WIDTH))
        subpackets = []
        while len(body):
            length = int(VariableNumber.decode(body))
            if length < _TYPE_WIDTH:
                raise ValueError("subpacket length does not cover its type")
            subpacket_type = body.read_uint(_TYPE_WIDTH)
            subpackets.append(
                UnknownSubpacket.decode(subpacket_type, body.splice(length - _TYPE_WIDTH))
            )
        return cls(subpackets)

    def size(self) -> int:
        return _SET_LENGTH_WIDTH + sum(subpacket.size() for subpacket in self.subpackets)

    def encode(self, writer) -> None:
        writer.push_uint(self.size() - _SET_LENGTH_WIDTH, _SET_LENGTH_WIDTH)
        for subpacket in self.subpackets:
            subpacket.encode(writer)

    def __getitem__(self, index):
        return self.subpackets[index]

    def __iter__(self):
        return iter(self.subpackets)

    def __len__(self) -> int:
        return len(self.subpackets)