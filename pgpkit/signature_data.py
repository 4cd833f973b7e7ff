"""Algorithm-specific signature values and their signing encoders."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NoReturn

from .codec import Decoder, Mpi
from .hashing import HashEncoder
from .key_material import UnknownAlgorithmError


def _reject(operation: str) -> NoReturn:
    """Raise the error for an operation that an unknown signature cannot perform."""
    raise UnknownAlgorithmError(f"unknown signatures {operation}")


@dataclass(frozen=True)
class UnknownSignature:
    """Signature values for an algorithm that is not understood.

    It carries no fields, so any two unknown signatures compare equal.
    """

    @classmethod
    def decode(cls, decoder: Decoder) -> UnknownSignature:
        """Consume nothing: the layout of the signature is not known."""
        return cls()

    def size(self) -> int:
        """Always fails: the encoded size of an unknown signature is not known."""
        _reject("have an unknown size")

    def encode(self, writer) -> None:
        """Always fails: an unknown signature cannot be written out."""
        _reject("cannot be encoded")


@dataclass(frozen=True)
class RsaSignature:
    """An RSA signature value ``s`` (m**d mod n)."""

    s: Mpi

    @classmethod
    def decode(cls, decoder: Decoder) -> RsaSignature:
        return cls(Mpi.decode(decoder))

    def size(self) -> int:
        return self.s.size()

    def encode(self, writer) -> None:
        self.s.encode(writer)


@dataclass(frozen=True)
class EcdsaSignature:
    """The ``r`` and ``s`` values of an ECDSA signature."""

    r: Mpi
    s: Mpi

    @classmethod
    def decode(cls, decoder: Decoder) -> EcdsaSignature:
        r = Mpi.decode(decoder)
        s = Mpi.decode(decoder)
        return cls(r, s)

    def size(self) -> int:
        return self.r.size() + self.s.size()

    def encode(self, writer) -> None:
        self.r.encode(writer)
        self.s.encode(writer)


@dataclass(frozen=True)
class EddsaSignature:
    """The ``r`` and ``s`` values of an EdDSA signature."""

    r: Mpi
    s: Mpi

    @classmethod
    def decode(cls, decoder: Decoder) -> EddsaSignature:
        r = Mpi.decode(decoder)
        s = Mpi.decode(decoder)
        return cls(r, s)

    def size(self) -> int:
        return self.r.size() + self.s.size()

    def encode(self, writer) -> None:
        self.r.encode(writer)
        self.s.encode(writer)


class UnknownSignatureEncoder(HashEncoder):
    """Accepts hashed data for an unknown key, but can never produce a signature."""

    def __init__(self, key=None) -> None:
        super().__init__("sha256")
        self.key = key

    def hash_prefix(self) -> bytes:
        raise UnknownAlgorithmError("unknown signatures cannot sign streamed data")

    def finalize(self) -> tuple:
        """Always fails: no signature can be made for an unknown key."""
        _reject("cannot sign streamed data")


class DsaSignatureEncoder(HashEncoder):
    """Signing encoder for DSA keys; creating DSA signatures is unsupported."""

    def __init__(self, key) -> None:
        raise UnknownAlgorithmError("generating DSA signatures is not supported")