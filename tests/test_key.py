import hashlib

import pytest

from pgpkit.codec import Decoder, Encoder, Mpi
from pgpkit.enums import KeyAlgorithm, PacketTag
from pgpkit.key import BasicKey
from pgpkit.key_material import RsaPublicKey, UnknownAlgorithmError, UnknownKey

N = Mpi(bytes([0xC5, 0x11, 0x42, 0x9A, 0x07, 0x33, 0xE1, 0x5F, 0x88, 0x21]))
E = Mpi(b"\x01\x00\x01")


def make_key(creation_time=1234, algorithm=KeyAlgorithm.RSA_ENCRYPT_OR_SIGN, n=N, e=E):
    return BasicKey(creation_time, algorithm, RsaPublicKey(n, e))


def encoded(obj):
    writer = Encoder()
    obj.encode(writer)
    return writer.getvalue()


def test_constructor():
    k = make_key()
    assert k.tag == PacketTag.PUBLIC_KEY
    assert k.creation_time == 1234
    assert k.algorithm == KeyAlgorithm.RSA_ENCRYPT_OR_SIGN
    assert k.version == 4
    assert k.key.n.data == N.data
    assert k.key.e.data == E.data


def test_encode_decode():
    k = make_key(5678)
    writer = Encoder()
    k.encode(writer)
    assert len(writer) == k.size()
    decoder = Decoder(writer.getvalue())
    k2 = BasicKey.decode(decoder)
    assert len(decoder) == 0
    assert k2 == k


def test_encoded_header_bytes():
    data = encoded(make_key(0x01020304))
    assert data[:6] == b"\x04\x01\x02\x03\x04\x01"
    assert data[6:] == encoded(RsaPublicKey(N, E))


def test_decode_keeps_tag():
    k = BasicKey.decode(Decoder(encoded(make_key())), PacketTag.PUBLIC_SUBKEY)
    assert k.tag == PacketTag.PUBLIC_SUBKEY
    assert isinstance(k.key, RsaPublicKey)


def test_decode_wrong_version():
    data = b"\x03" + encoded(make_key())[1:]
    with pytest.raises(ValueError):
        BasicKey.decode(Decoder(data))


def test_decode_truncated():
    with pytest.raises(ValueError):
        BasicKey.decode(Decoder(b"\x04\x00\x00"))


def test_decode_unknown_algorithm():
    decoder = Decoder(b"\x04\x00\x00\x04\xd2\x63\xaa")
    k = BasicKey.decode(decoder)
    assert k.algorithm == 99
    assert k.key == UnknownKey()
    assert len(decoder) == 1
    with pytest.raises(UnknownAlgorithmError):
        k.size()
    with pytest.raises(UnknownAlgorithmError):
        k.fingerprint()


def test_unknown_key_cannot_be_encoded():
    with pytest.raises(UnknownAlgorithmError):
        encoded(BasicKey(1, KeyAlgorithm.DSA))


def test_equality():
    k = make_key()
    assert k == make_key()
    assert k != make_key(creation_time=4321)
    assert k != make_key(algorithm=KeyAlgorithm.RSA_SIGN_ONLY)
    assert k != make_key(n=Mpi(b"\x07\x77"))


def test_invalid_creation_time():
    with pytest.raises(ValueError):
        make_key(creation_time=1 << 32)


def test_hash_layout():
    k = make_key()
    writer = Encoder()
    k.hash(writer)
    body = encoded(k)
    assert writer.getvalue() == b"\x99" + len(body).to_bytes(2, "big") + body


def test_fingerprint_and_key_id():
    k = make_key(1554103728)
    writer = Encoder()
    k.hash(writer)
    fingerprint = k.fingerprint()
    assert len(fingerprint) == 20
    assert fingerprint == hashlib.sha1(writer.getvalue()).digest()
    assert k.key_id() == fingerprint[-8:]
    assert len(k.key_id()) == 8


def test_fingerprint_depends_on_fields():
    assert make_key(1).fingerprint() != make_key(2).fingerprint()
    assert make_key(1).fingerprint() == make_key(1).fingerprint()