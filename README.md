# pgpkit

A pure-Python library for reading and writing the binary structures of
OpenPGP (RFC 4880): packet headers, version 4 key bodies, version 4
signatures, signature subpackets and user ids. It also computes key
fingerprints and key ids. It has no dependencies outside the standard
library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

- `pgpkit.codec`: `Decoder` (`read_uint`, `peek_uint`, `read_bytes`,
  `splice`, `len()` for the bytes left) and `Encoder` (`push_uint`,
  `write`, `insert_bits`, `getvalue`), plus the building blocks of the
  format: `VariableNumber` (the one-, two- or five-octet length number),
  `ExpectedNumber` (a fixed value such as a version octet, checked on
  decoding) and `Mpi` (multiprecision integers, with `Mpi.from_int`).
- `pgpkit.hashing`: `HashEncoder`, which accepts the same `push_uint` and
  `write` calls as an `Encoder` but feeds them to a `hashlib` hash, with
  `digest()` and `hash_prefix()` (the first two digest bytes).
  `sha1_encoder()` and `sha256_encoder()` build one.
- `pgpkit.enums`: `SignatureType`, `KeyAlgorithm`, `HashAlgorithm` and
  `PacketTag`, with `signature_type_description()` and
  `packet_tag_compatible_with_old_format()`.
- `pgpkit.user_id`: `UserId`.
- `pgpkit.key_material`: per-algorithm key fields: `RsaPublicKey`,
  `DsaSecretKey`, `EcdhSecretKey`, `EcdsaSecretKey`, the `StringToKey`
  usage octet, and `UnknownKey`. `UnknownAlgorithmError` is raised when
  data for an unknown algorithm has to be sized or written.
- `pgpkit.signature_data`: per-algorithm signature values
  (`RsaSignature`, `EcdsaSignature`, `EddsaSignature`,
  `UnknownSignature`) and the encoders `UnknownSignatureEncoder` and
  `DsaSignatureEncoder`.
- `pgpkit.key`: `BasicKey`, a version 4 key body with `fingerprint()`
  (SHA-1, 20 bytes) and `key_id()` (its last 8 bytes).
- `pgpkit.subpackets`: `SignatureSubpacketSet`, `UnknownSubpacket` and
  `IssuerFingerprint`.
- `pgpkit.signature`: `Signature` and the `EmbeddedSignature` subpacket.
- `pgpkit.packet`: `Packet`, which wraps a body in an old-format header
  (tags below 16) or a new-format header, and `UnknownPacket` for bodies
  that are kept as raw bytes.

Every structure offers the same operations:

- `decode(decoder)` reads it from a `Decoder` (a classmethod; `BasicKey`
  also takes the packet tag, `UnknownSubpacket` the subpacket type).
- `size()` gives the number of bytes of its encoded form.
- `encode(writer)` writes it to an `Encoder` or a `HashEncoder`.

## Examples

```python
from pgpkit.codec import Decoder, Encoder
from pgpkit.user_id import UserId

uid = UserId("yellow submarine")

writer = Encoder()
uid.encode(writer)
raw = writer.getvalue()
assert len(raw) == uid.size() == 16
assert UserId.decode(Decoder(raw)) == uid
```

Wrapping a body in a packet:

```python
from pgpkit.codec import Decoder, Encoder
from pgpkit.enums import PacketTag
from pgpkit.packet import Packet
from pgpkit.user_id import UserId

packet = Packet(UserId("abc"))
writer = Encoder()
packet.encode(writer)
assert len(writer.getvalue()) == packet.size()

decoded = Packet.decode(Decoder(writer.getvalue()))
assert decoded.tag() == PacketTag.USER_ID
assert decoded == packet
```

Computing a key id:

```python
from pgpkit.codec import Mpi
from pgpkit.enums import KeyAlgorithm
from pgpkit.key import BasicKey
from pgpkit.key_material import RsaPublicKey

key = BasicKey(
    1234,
    KeyAlgorithm.RSA_ENCRYPT_OR_SIGN,
    RsaPublicKey(Mpi.from_int(0xC0FFEE), Mpi.from_int(65537)),
)
assert len(key.fingerprint()) == 20
assert key.key_id() == key.fingerprint()[12:]
```

## Errors

Malformed or truncated input raises `ValueError` when it is decoded.
Unknown keys and unknown signatures raise `UnknownAlgorithmError` (a
`RuntimeError`) when they are sized or encoded.

## What it does not do

- It does not create signatures. `DsaSignatureEncoder` raises on
  construction and `UnknownSignatureEncoder` raises instead of producing
  a hash prefix or signature values.
- When decoding a key, only RSA public key material (in public key and
  public subkey packets) is read; for other algorithms and for secret
  key packets the material is left unread and held as `UnknownKey`.
- When decoding a subpacket set, every subpacket is kept as an
  `UnknownSubpacket` with its type and raw body.
- Partial body lengths and old-format packets of indeterminate length
  are not supported.
- It has no command-line tool and does no key storage or keyring
  management.