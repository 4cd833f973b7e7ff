import pytest

from pgpkit.enums import (
    HashAlgorithm,
    KeyAlgorithm,
    PacketTag,
    SignatureType,
    packet_tag_compatible_with_old_format,
    signature_type_description,
)


def test_signature_type_values_match_wire():
    assert SignatureType(0x13) is SignatureType.POSITIVE_USER_ID_AND_PUBLIC_KEY_CERTIFICATION
    assert SignatureType(0x18) is SignatureType.SUBKEY_BINDING


def test_descriptions():
    assert signature_type_description(SignatureType.BINARY_DOCUMENT) == "binary document signature"
    assert signature_type_description(0x50) == "third-party confirmation signature"


def test_every_signature_type_has_description():
    descriptions = [signature_type_description(t) for t in SignatureType]
    assert all(d.endswith(("signature", "packet")) for d in descriptions)
    assert len(set(descriptions)) == len(SignatureType)


def test_unknown_signature_type_description_fails():
    with pytest.raises(ValueError):
        signature_type_description(0x07)


def test_old_format_compatibility():
    assert packet_tag_compatible_with_old_format(PacketTag.USER_ID)
    assert packet_tag_compatible_with_old_format(PacketTag.PUBLIC_SUBKEY)
    assert not packet_tag_compatible_with_old_format(PacketTag.USER_ATTRIBUTE)


def test_enums_convert_from_wire_values():
    assert KeyAlgorithm(int(KeyAlgorithm.EDDSA)) is KeyAlgorithm.EDDSA
    assert HashAlgorithm(int(HashAlgorithm.SHA256)) is HashAlgorithm.SHA256
    with pytest.raises(ValueError):
        KeyAlgorithm(0)