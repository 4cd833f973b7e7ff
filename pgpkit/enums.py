"""Numeric identifiers used in OpenPGP packets."""

from __future__ import annotations

from enum import IntEnum


class SignatureType(IntEnum):
    BINARY_DOCUMENT = 0x00
    CANONICAL_TEXT_DOCUMENT = 0x01
    STANDALONE = 0x02
    GENERIC_USER_ID_AND_PUBLIC_KEY_CERTIFICATION = 0x10
    PERSONA_USER_ID_AND_PUBLIC_KEY_CERTIFICATION = 0x11
    CASUAL_USER_ID_AND_PUBLIC_KEY_CERTIFICATION = 0x12
    POSITIVE_USER_ID_AND_PUBLIC_KEY_CERTIFICATION = 0x13
    SUBKEY_BINDING = 0x18
    PRIMARY_KEY_BINDING = 0x19
    KEY_SIGNATURE = 0x1F
    KEY_REVOCATION = 0x20
    SUBKEY_REVOCATION = 0x28
    CERTIFICATION_REVOCATION = 0x30
    TIMESTAMP = 0x40
    THIRD_PARTY_CONFIRMATION = 0x50


class KeyAlgorithm(IntEnum):
    RSA_ENCRYPT_OR_SIGN = 1
    RSA_ENCRYPT_ONLY = 2
    RSA_SIGN_ONLY = 3
    ELGAMAL_ENCRYPT_ONLY = 16
    DSA = 17
    ECDH = 18
    ECDSA = 19
    EDDSA = 22


class HashAlgorithm(IntEnum):
    MD5 = 1
    SHA1 = 2
    RIPEMD160 = 3
    SHA256 = 8
    SHA384 = 9
    SHA512 = 10
    SHA224 = 11


class PacketTag(IntEnum):
    RESERVED = 0
    PUBLIC_KEY_ENCRYPTED_SESSION_KEY = 1
    SIGNATURE = 2
    SYMMETRIC_KEY_ENCRYPTED_SESSION_KEY = 3
    ONE_PASS_SIGNATURE = 4
    SECRET_KEY = 5
    PUBLIC_KEY = 6
    SECRET_SUBKEY = 7
    COMPRESSED_DATA = 8
    SYMMETRICALLY_ENCRYPTED_DATA = 9
    MARKER = 10
    LITERAL_DATA = 11
    TRUST = 12
    USER_ID = 13
    PUBLIC_SUBKEY = 14
    USER_ATTRIBUTE = 17
    SYM_ENCRYPTED_INTEGRITY_PROTECTED_DATA = 18
    MODIFICATION_DETECTION_CODE = 19


_SIGNATURE_DESCRIPTIONS = {
    SignatureType.BINARY_DOCUMENT: "binary document signature",
    SignatureType.CANONICAL_TEXT_DOCUMENT: "canonical text document signature",
    SignatureType.STANDALONE: "standalone signature",
    SignatureType.GENERIC_USER_ID_AND_PUBLIC_KEY_CERTIFICATION:
        "generic certification of user id and public-key packet",
    SignatureType.PERSONA_USER_ID_AND_PUBLIC_KEY_CERTIFICATION:
        "persona certification of user id and public-key packet",
    SignatureType.CASUAL_USER_ID_AND_PUBLIC_KEY_CERTIFICATION:
        "casual certification of user id and public-key packet",
    SignatureType.POSITIVE_USER_ID_AND_PUBLIC_KEY_CERTIFICATION:
        "positive certification of user id and public-key packet",
    SignatureType.SUBKEY_BINDING: "subkey binding signature",
    SignatureType.PRIMARY_KEY_BINDING: "primary key binding signature",
    SignatureType.KEY_SIGNATURE: "key signature",
    SignatureType.KEY_REVOCATION: "key recovation signature",
    SignatureType.SUBKEY_REVOCATION: "subkey revocation signature",
    SignatureType.CERTIFICATION_REVOCATION: "certification revocation signature",
    SignatureType.TIMESTAMP: "timestamp signature",
    SignatureType.THIRD_PARTY_CONFIRMATION: "third-party confirmation signature",
}


def signature_type_description(type) -> str:
    """Return a human-readable description of a signature type."""
    return _SIGNATURE_DESCRIPTIONS[SignatureType(type)]


def packet_tag_compatible_with_old_format(tag) -> bool:
    """Whether the tag fits in the four bits of an old-format header."""
    return int(tag) < 16