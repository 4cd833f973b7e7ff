"""Packet framing: the header with tag and length around a packet body."""

from __future__ import annotations

from dataclasses import dataclass, field

from .codec import Decoder, VariableNumber
from .enums import PacketTag, packet_tag_compatible_with_old_format
from .key import BasicKey
from .signature import Signature
from .user_id import UserId

_HEADER_OCTET = 1
_MAX_NEW_TAG = 0x3F
_MAX_LENGTH = 0xFFFFFFFF

# Old-format length types and the number of octets each one uses.
_OLD_LENGTH_WIDTHS = {0: 1, 1: 2, 2: 4}

_KEY_TAGS = frozenset(
    {
        PacketTag.PUBLIC_KEY,
        PacketTag.PUBLIC_SUBKEY,
        PacketTag.SECRET_KEY,
        PacketTag.SECRET_SUBKEY,
    }
)


def _as_tag(value) -> int:
    """Return a known tag as the enum, any other valid tag as a plain int."""
    try:
        return PacketTag(value)
    except ValueError:
        if not 0 <= int(value) <= _MAX_NEW_TAG:
            raise ValueError(f"packet tag {value} does not fit in six bits") from None
        return int(value)


def _old_length_type(size: int) -> int:
    if size > 0xFFFF:
        return 2
    if size > 0xFF:
        return 1
    return 0


@dataclass(frozen=True)
class UnknownPacket:
    """A packet whose body is not understood, kept as its tag and raw bytes."""

    number: int = PacketTag.RESERVED
    data: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "number", _as_tag(self.number))
        object.__setattr__(self, "data", bytes(self.data))

    @classmethod
    def decode(cls, number, decoder: Decoder) -> UnknownPacket:
        """Take all remaining data as the body of a packet with tag ``number``."""
        return cls(number, decoder.read_bytes(len(decoder)))

    def tag(self) -> int:
        return self.number

    def size(self) -> int:
        return len(self.data)

    def encode(self, writer) -> None:
        writer.write(self.data)


@dataclass(frozen=True)
class Packet:
    """A single packet: a header carrying tag and length, followed by the body."""

    body: object = field(default_factory=UnknownPacket)

    @classmethod
    def decode(cls, decoder: Decoder) -> Packet:
        """Read a packet header and decode its body according to the tag."""
        first = decoder.read_uint(_HEADER_OCTET)
        if not first & 0x80:
            raise ValueError("invalid packet header: the leading bit is not set")

        if first & 0x40:
            number = first & _MAX_NEW_TAG
            length = int(VariableNumber.decode(decoder))
        else:
            number = (first >> 2) & 0x0F
            length_type = first & 0x03
            width = _OLD_LENGTH_WIDTHS.get(length_type)
            if width is None:
                raise ValueError("packets of indeterminate length are not supported")
            length = decoder.read_uint(width)

        body = decoder.splice(length)
        number = _as_tag(number)

        if number == PacketTag.SIGNATURE:
            return cls(Signature.decode(body))
        if number == PacketTag.USER_ID:
            return cls(UserId.decode(body))
        if number in _KEY_TAGS:
            return cls(BasicKey.decode(body, number))
        return cls(UnknownPacket.decode(number, body))

    def tag(self) -> int:
        """Return the tag of the packet body."""
        body_tag = self.body.tag
        return _as_tag(body_tag() if callable(body_tag) else body_tag)

    def _body_size(self) -> int:
        size = self.body.size()
        if not 0 <= size <= _MAX_LENGTH:
            raise ValueError(f"packet body of {size} bytes does not fit a 32-bit length")
        return size

    def size(self) -> int:
        """Return the number of bytes of the encoded packet, header included."""
        body_size = self._body_size()
        if packet_tag_compatible_with_old_format(self.tag()):
            header = _HEADER_OCTET + _OLD_LENGTH_WIDTHS[_old_length_type(body_size)]
        else:
            header = _HEADER_OCTET + VariableNumber(body_size).size()
        return header + body_size

    def encode(self, writer) -> None:
        """Write the header followed by the body."""
        body_size = self._body_size()
        tag = int(self.tag())

        writer.insert_bits(1, 1)
        if packet_tag_compatible_with_old_format(tag):
            length_type = _old_length_type(body_size)
            writer.insert_bits(1, 0)
            writer.insert_bits(4, tag)
            writer.insert_bits(2, length_type)
            writer.push_uint(body_size, _OLD_LENGTH_WIDTHS[length_type])
        else:
            writer.insert_bits(1, 1)
            writer.insert_bits(6, tag)
            VariableNumber(body_size).encode(writer)

        self.body.encode(writer)