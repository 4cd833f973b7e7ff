"""Version 4 key packets: creation time, algorithm and key material."""

from __future__ import annotations

from dataclasses import dataclass, field

from .codec import Decoder, ExpectedNumber
from .enums import KeyAlgorithm, PacketTag
from .hashing import sha1_encoder
from .key_material import RsaPublicKey, UnknownKey

_VERSION = ExpectedNumber(4, 1)
_FINGERPRINT_MAGIC = ExpectedNumber(0x99, 1)
_CREATION_TIME_WIDTH = 4
_ALGORITHM_WIDTH = 1

_PUBLIC_TAGS = frozenset({PacketTag.PUBLIC_KEY, PacketTag.PUBLIC_SUBKEY})

# Key material that can be read from a public key packet, by algorithm.
_PUBLIC_MATERIAL = {
    KeyAlgorithm.RSA_ENCRYPT_OR_SIGN: RsaPublicKey,
    KeyAlgorithm.RSA_ENCRYPT_ONLY: RsaPublicKey,
    KeyAlgorithm.RSA_SIGN_ONLY: RsaPublicKey,
}


def _as_algorithm(value) -> int:
    """Return a known algorithm as the enum, any other octet as a plain int."""
    try:
        return KeyAlgorithm(value)
    except ValueError:
        if not 0 <= int(value) <= 0xFF:
            raise ValueError(f"key algorithm {value} is not an octet") from None
        return int(value)


@dataclass(frozen=True)
class BasicKey:
    """A version 4 key: the common fields plus algorithm-specific material."""

    creation_time: int
    algorithm: int
    key: object = field(default_factory=UnknownKey)
    tag: PacketTag = PacketTag.PUBLIC_KEY

    def __post_init__(self) -> None:
        if not 0 <= self.creation_time <= 0xFFFFFFFF:
            raise ValueError(f"creation time {self.creation_time} is outside the 32-bit range")
        object.__setattr__(self, "algorithm", _as_algorithm(self.algorithm))
        object.__setattr__(self, "tag", PacketTag(self.tag))

    @property
    def version(self) -> int:
        return _VERSION.value

    @classmethod
    def decode(cls, decoder: Decoder, tag=PacketTag.PUBLIC_KEY) -> BasicKey:
        """Read a key; material for unsupported algorithms is left unread."""
        tag = PacketTag(tag)
        _VERSION.decode(decoder)
        creation_time = decoder.read_uint(_CREATION_TIME_WIDTH)
        algorithm = _as_algorithm(decoder.read_uint(_ALGORITHM_WIDTH))
        if tag in _PUBLIC_TAGS:
            material_type = _PUBLIC_MATERIAL.get(algorithm, UnknownKey)
        else:
            material_type = UnknownKey
        return cls(creation_time, algorithm, material_type.decode(decoder), tag)

    def _header_size(self) -> int:
        return _VERSION.size() + _CREATION_TIME_WIDTH + _ALGORITHM_WIDTH

    def size(self) -> int:
        return self._header_size() + self.key.size()

    def _encode_header(self, writer) -> None:
        _VERSION.encode(writer)
        writer.push_uint(self.creation_time, _CREATION_TIME_WIDTH)
        writer.push_uint(int(self.algorithm), _ALGORITHM_WIDTH)

    def hash(self, writer) -> None:
        """Write the key in the form used for fingerprints and signatures."""
        body_size = self._header_size() + self.key.size()
        _FINGERPRINT_MAGIC.encode(writer)
        writer.push_uint(body_size, 2)
        self._encode_header(writer)
        self.key.encode(writer)

    def fingerprint(self) -> bytes:
        """Return the 20-byte SHA-1 fingerprint."""
        encoder = sha1_encoder()
        self.hash(encoder)
        return encoder.digest()

    def key_id(self) -> bytes:
        """Return the key id: the last 8 bytes of the fingerprint."""
        return self.fingerprint()[12:]

    def encode(self, writer) -> None:
        self._encode_header(writer)
        self.key.encode(writer)