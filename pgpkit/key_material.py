"""Algorithm-specific key fields and the string-to-key specifier."""

from __future__ import annotations

from dataclasses import dataclass

from .codec import Decoder, Mpi


class UnknownAlgorithmError(RuntimeError):
    """Raised when data for an unrecognised algorithm has to be sized or written."""


def _reject_unknown(action: str) -> None:
    """Raise the error for an operation that an unknown key cannot perform."""
    raise UnknownAlgorithmError(action)


@dataclass(frozen=True)
class UnknownKey:
    """Key material for an algorithm that is not understood.

    It carries no fields, so any two unknown keys compare equal.
    """

    @classmethod
    def decode(cls, decoder: Decoder) -> UnknownKey:
        """Consume nothing: the layout of the key is not known."""
        return cls()

    def size(self) -> int:
        """Always raise: the encoded size of an unknown key cannot be known."""
        _reject_unknown("unknown keys have an unknown size")
        return 0

    def encode(self, writer) -> None:
        """Always raise: an unknown key cannot be written."""
        _reject_unknown("failed to encode unknown key")


@dataclass(frozen=True)
class RsaPublicKey:
    """The public modulus ``n`` and encryption exponent ``e`` of an RSA key."""

    n: Mpi
    e: Mpi

    @classmethod
    def decode(cls, decoder: Decoder) -> RsaPublicKey:
        n = Mpi.decode(decoder)
        e = Mpi.decode(decoder)
        return cls(n, e)

    def size(self) -> int:
        return self.n.size() + self.e.size()

    def encode(self, writer) -> None:
        self.n.encode(writer)
        self.e.encode(writer)


@dataclass(frozen=True)
class DsaSecretKey:
    """The secret exponent ``x`` of a DSA key."""

    x: Mpi

    @classmethod
    def decode(cls, decoder: Decoder) -> DsaSecretKey:
        return cls(Mpi.decode(decoder))

    def size(self) -> int:
        return self.x.size()

    def encode(self, writer) -> None:
        self.x.encode(writer)


@dataclass(frozen=True)
class EcdhSecretKey:
    """The secret scalar ``k`` of an ECDH key."""

    k: Mpi

    @classmethod
    def decode(cls, decoder: Decoder) -> EcdhSecretKey:
        return cls(Mpi.decode(decoder))

    def size(self) -> int:
        return self.k.size()

    def encode(self, writer) -> None:
        self.k.encode(writer)


@dataclass(frozen=True)
class EcdsaSecretKey:
    """The secret scalar ``k`` of an ECDSA key."""

    k: Mpi

    @classmethod
    def decode(cls, decoder: Decoder) -> EcdsaSecretKey:
        return cls(Mpi.decode(decoder))

    def size(self) -> int:
        return self.k.size()

    def encode(self, writer) -> None:
        self.k.encode(writer)


@dataclass(frozen=True)
class StringToKey:
    """The string-to-key usage octet of a secret key.

    Only the convention octet itself is read; zero means the secret
    key material follows unprotected.
    """

    convention: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.convention <= 0xFF:
            raise ValueError(f"string-to-key convention {self.convention} is not an octet")

    @classmethod
    def decode(cls, decoder: Decoder) -> StringToKey:
        return cls(decoder.read_uint(1))

    def size(self) -> int:
        return 1

    def encode(self, writer) -> None:
        writer.push_uint(self.convention, 1)