"""Binary reading and writing primitives for the OpenPGP wire format."""

from __future__ import annotations

from dataclasses import dataclass


def _uint_bytes(value: int, width: int) -> bytes:
    """Big-endian encoding of an unsigned number of the given byte width."""
    if width <= 0:
        raise ValueError(f"invalid number width {width}")
    if not 0 <= value < 1 << (8 * width):
        raise ValueError(f"{value} does not fit in {width} byte(s)")
    return int(value).to_bytes(width, "big")


class Decoder:
    """Reads big-endian numbers and raw bytes from a buffer."""

    __slots__ = ("_data", "_pos")

    def __init__(self, data) -> None:
        self._data = bytes(data)
        self._pos = 0

    def __len__(self) -> int:
        return len(self._data) - self._pos

    def _take(self, count: int) -> bytes:
        if count < 0:
            raise ValueError(f"cannot read a negative number of bytes ({count})")
        if count > len(self):
            raise ValueError(f"need {count} byte(s), only {len(self)} left")
        chunk = self._data[self._pos:self._pos + count]
        self._pos += count
        return chunk

    def peek_uint(self, width: int) -> int:
        """Return the next number without consuming it."""
        if width <= 0 or width > len(self):
            raise ValueError(f"need {width} byte(s), only {len(self)} left")
        return int.from_bytes(self._data[self._pos:self._pos + width], "big")

    def read_uint(self, width: int) -> int:
        """Consume and return a big-endian unsigned number."""
        if width <= 0:
            raise ValueError(f"invalid number width {width}")
        return int.from_bytes(self._take(width), "big")

    def read_bytes(self, count: int) -> bytes:
        """Consume and return ``count`` raw bytes."""
        return self._take(count)

    def splice(self, count: int) -> Decoder:
        """Consume ``count`` bytes and return a decoder over just those."""
        return Decoder(self._take(count))


class Encoder:
    """Collects big-endian numbers, raw bytes and bit fields into a buffer."""

    def __init__(self) -> None:
        self._buffer = bytearray()
        self._bits = 0
        self._bit_count = 0

    def __len__(self) -> int:
        return len(self._buffer)

    def _require_aligned(self) -> None:
        if self._bit_count:
            raise ValueError("cannot write whole bytes while a partial byte is pending")

    def push_uint(self, value: int, width: int) -> Encoder:
        """Append a big-endian unsigned number."""
        self._require_aligned()
        self._buffer += _uint_bytes(value, width)
        return self

    def write(self, data) -> Encoder:
        """Append raw bytes."""
        self._require_aligned()
        self._buffer += bytes(data)
        return self

    def insert_bits(self, count: int, value: int) -> Encoder:
        """Append the low ``count`` bits of ``value``, most significant first."""
        if count <= 0:
            raise ValueError(f"invalid bit count {count}")
        if not 0 <= value < 1 << count:
            raise ValueError(f"{value} does not fit in {count} bit(s)")
        self._bits = (self._bits << count) | value
        self._bit_count += count
        while self._bit_count >= 8:
            shift = self._bit_count - 8
            self._buffer.append((self._bits >> shift) & 0xFF)
            self._bits &= (1 << shift) - 1
            self._bit_count = shift
        return self

    def getvalue(self) -> bytes:
        """Return the complete bytes written so far."""
        return bytes(self._buffer)


@dataclass(frozen=True)
class VariableNumber:
    """A length field using one, two or five octets."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 0xFFFFFFFF:
            raise ValueError(f"{self.value} is outside the 32-bit range")

    def __int__(self) -> int:
        return self.value

    @classmethod
    def decode(cls, decoder: Decoder) -> VariableNumber:
        first = decoder.peek_uint(1)
        if first < 192:
            return cls(decoder.read_uint(1))
        if first < 224:
            return cls((decoder.read_uint(2) & 0x3FFF) + 192)
        if first == 255:
            decoder.read_uint(1)
            return cls(decoder.read_uint(4))
        raise ValueError("partial body lengths are not supported")

    def size(self) -> int:
        if self.value < 192:
            return 1
        if self.value < 8384:
            return 2
        return 5

    def encode(self, writer) -> None:
        if self.value < 192:
            writer.push_uint(self.value, 1)
        elif self.value < 8384:
            writer.push_uint(0xC000 | (self.value - 192), 2)
        else:
            writer.push_uint(0xFF, 1)
            writer.push_uint(self.value, 4)


@dataclass(frozen=True)
class ExpectedNumber:
    """A fixed number that must appear at a given place in the stream."""

    value: int
    width: int = 1

    def __post_init__(self) -> None:
        _uint_bytes(self.value, self.width)

    def decode(self, decoder: Decoder) -> ExpectedNumber:
        """Read the number and check that it has the expected value."""
        found = decoder.read_uint(self.width)
        if found != self.value:
            raise ValueError(
                f"expected {self.value}, found {found}: number outside of expected range"
            )
        return self

    def size(self) -> int:
        return self.width

    def encode(self, writer) -> None:
        writer.push_uint(self.value, self.width)


@dataclass(frozen=True)
class Mpi:
    """A multiprecision integer: a 16-bit bit count followed by the magnitude."""

    data: bytes = b""

    def __post_init__(self) -> None:
        stripped = bytes(self.data).lstrip(b"\x00")
        if len(stripped) > 8192:
            raise ValueError("multiprecision integer exceeds 65535 bits")
        object.__setattr__(self, "data", stripped)

    @classmethod
    def from_int(cls, value: int) -> Mpi:
        if value < 0:
            raise ValueError("multiprecision integers are unsigned")
        return cls(value.to_bytes((value.bit_length() + 7) // 8, "big"))

    def __int__(self) -> int:
        return int.from_bytes(self.data, "big")

    @property
    def bits(self) -> int:
        return int(self).bit_length()

    @classmethod
    def decode(cls, decoder: Decoder) -> Mpi:
        bits = decoder.read_uint(2)
        return cls(decoder.read_bytes((bits + 7) // 8))

    def size(self) -> int:
        return 2 + len(self.data)

    def encode(self, writer) -> None:
        writer.push_uint(self.bits, 2)
        writer.write(self.data)