"""Version 4 signature packets and the embedded-signature subpacket."""

from __future__ import annotations

from dataclasses import dataclass, field

from .codec import Decoder, ExpectedNumber, VariableNumber
from .enums import HashAlgorithm, KeyAlgorithm, PacketTag, SignatureType
from .signature_data import (
    EcdsaSignature,
    EddsaSignature,
    RsaSignature,
    UnknownSignature,
)
from .subpackets import SignatureSubpacketSet

_VERSION = ExpectedNumber(4, 1)
_OCTET = 1
_HASH_PREFIX_WIDTH = 2

# Signature values that can be read, by public key algorithm.
_SIGNATURE_DATA = {
    KeyAlgorithm.RSA_ENCRYPT_OR_SIGN: RsaSignature,
    KeyAlgorithm.RSA_SIGN_ONLY: RsaSignature,
    KeyAlgorithm.EDDSA: EddsaSignature,
    KeyAlgorithm.ECDSA: EcdsaSignature,
}


def _as_enum(enum_type, value, what: str) -> int:
    """Return a known value as its enum member, any other octet as a plain int."""
    try:
        return enum_type(value)
    except ValueError:
        if not 0 <= int(value) <= 0xFF:
            raise ValueError(f"{what} {value} is not an octet") from None
        return int(value)


@dataclass(frozen=True)
class Signature:
    """A version 4 signature over hashed subpackets and algorithm-specific values."""

    type: int
    public_key_algorithm: int
    hashing_algorithm: int
    hashed_subpackets: SignatureSubpacketSet = field(default_factory=SignatureSubpacketSet)
    unhashed_subpackets: SignatureSubpacketSet = field(default_factory=SignatureSubpacketSet)
    hash_prefix: int = 0
    data: object = field(default_factory=UnknownSignature)

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", _as_enum(SignatureType, self.type, "signature type"))
        object.__setattr__(
            self,
            "public_key_algorithm",
            _as_enum(KeyAlgorithm, self.public_key_algorithm, "key algorithm"),
        )
        object.__setattr__(
            self,
            "hashing_algorithm",
            _as_enum(HashAlgorithm, self.hashing_algorithm, "hash algorithm"),
        )
        if not 0 <= self.hash_prefix <= 0xFFFF:
            raise ValueError(f"hash prefix {self.hash_prefix} does not fit in 16 bits")

    @property
    def version(self) -> int:
        return _VERSION.value

    @classmethod
    def decode(cls, decoder: Decoder) -> Signature:
        """Read a signature; values for unsupported algorithms are left unread."""
        _VERSION.decode(decoder)
        signature_type = decoder.read_uint(_OCTET)
        key_algorithm = _as_enum(KeyAlgorithm, decoder.read_uint(_OCTET), "key algorithm")
        hash_algorithm = decoder.read_uint(_OCTET)
        hashed = SignatureSubpacketSet.decode(decoder)
        unhashed = SignatureSubpacketSet.decode(decoder)
        hash_prefix = decoder.read_uint(_HASH_PREFIX_WIDTH)
        data_type = _SIGNATURE_DATA.get(key_algorithm, UnknownSignature)
        return cls(
            signature_type,
            key_algorithm,
            hash_algorithm,
            hashed,
            unhashed,
            hash_prefix,
            data_type.decode(decoder),
        )

    def tag(self) -> PacketTag:
        return PacketTag.SIGNATURE

    def size(self) -> int:
        return (
            _VERSION.size()
            + 3 * _OCTET
            + self.hashed_subpackets.size()
            + self.unhashed_subpackets.size()
            + _HASH_PREFIX_WIDTH
            + self.data.size()
        )

    def encode(self, writer) -> None:
        _VERSION.encode(writer)
        writer.push_uint(int(self.type), _OCTET)
        writer.push_uint(int(self.public_key_algorithm), _OCTET)
        writer.push_uint(int(self.hashing_algorithm), _OCTET)
        self.hashed_subpackets.encode(writer)
        self.unhashed_subpackets.encode(writer)
        writer.push_uint(self.hash_prefix, _HASH_PREFIX_WIDTH)
        self.data.encode(writer)


@dataclass(frozen=True)
class EmbeddedSignature:
    """A subpacket that carries a complete signature."""

    TYPE = 32

    signature: Signature

    @property
    def type(self) -> int:
        return self.TYPE

    @classmethod
    def decode(cls, decoder: Decoder) -> EmbeddedSignature:
        """Read the signature; the subpacket body must be consumed entirely."""
        signature = Signature.decode(decoder)
        if len(decoder):
            raise ValueError("incorrect subpacket type detected: data left after signature")
        return cls(signature)

    def _body_size(self) -> int:
        return self.signature.size() + _OCTET

    def size(self) -> int:
        body = self._body_size()
        return body + VariableNumber(body).size()

    def encode(self, writer) -> None:
        VariableNumber(self._body_size()).encode(writer)
        writer.push_uint(self.TYPE, _OCTET)
        self.signature.encode(writer)