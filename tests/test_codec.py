import pytest

from pgpkit.codec import Decoder, Encoder, ExpectedNumber, Mpi, VariableNumber


def _encode(item) -> bytes:
    encoder = Encoder()
    item.encode(encoder)
    return encoder.getvalue()


def test_decoder_reads_big_endian_and_tracks_remaining():
    decoder = Decoder(b"\x01\x02\x03\x04\x05")
    assert len(decoder) == 5
    assert decoder.peek_uint(1) == 1
    assert decoder.read_uint(2) == 0x0102
    assert len(decoder) == 3
    assert decoder.read_bytes(3) == b"\x03\x04\x05"
    assert len(decoder) == 0


def test_decoder_truncated_read_raises():
    decoder = Decoder(b"\x01")
    with pytest.raises(ValueError):
        decoder.read_uint(2)
    with pytest.raises(ValueError):
        decoder.read_bytes(5)


def test_splice_consumes_from_parent():
    decoder = Decoder(b"abcdef")
    part = decoder.splice(4)
    assert part.read_bytes(len(part)) == b"abcd"
    assert decoder.read_bytes(len(decoder)) == b"ef"


def test_encoder_push_and_write_roundtrip():
    encoder = Encoder()
    encoder.push_uint(0x1234, 2).push_uint(7, 1).write(b"xyz")
    assert len(encoder) == 6
    decoder = Decoder(encoder.getvalue())
    assert decoder.read_uint(2) == 0x1234
    assert decoder.read_uint(1) == 7
    assert decoder.read_bytes(3) == b"xyz"


def test_encoder_rejects_out_of_range_number():
    with pytest.raises(ValueError):
        Encoder().push_uint(256, 1)
    with pytest.raises(ValueError):
        Encoder().push_uint(-1, 4)


def test_insert_bits_forms_bytes():
    encoder = Encoder()
    encoder.insert_bits(1, 1).insert_bits(1, 0).insert_bits(4, 13).insert_bits(2, 0)
    assert encoder.getvalue() == bytes([0xB4])


def test_byte_write_with_pending_bits_fails():
    encoder = Encoder()
    encoder.insert_bits(3, 5)
    with pytest.raises(ValueError):
        encoder.push_uint(1, 1)


@pytest.mark.parametrize(
    "value, size",
    [(0, 1), (191, 1), (192, 2), (8383, 2), (8384, 5), (0xFFFFFFFF, 5)],
)
def test_variable_number_roundtrip(value, size):
    number = VariableNumber(value)
    assert number.size() == size
    data = _encode(number)
    assert len(data) == size
    decoder = Decoder(data)
    assert int(VariableNumber.decode(decoder)) == value
    assert len(decoder) == 0


def test_variable_number_wire_format():
    assert _encode(VariableNumber(100)) == bytes([100])
    assert _encode(VariableNumber(192)) == b"\xc0\x00"


def test_variable_number_partial_length_rejected():
    with pytest.raises(ValueError):
        VariableNumber.decode(Decoder(b"\xe0\x00"))


def test_variable_number_range():
    with pytest.raises(ValueError):
        VariableNumber(1 << 32)


def test_expected_number_roundtrip_and_mismatch():
    version = ExpectedNumber(4)
    assert version.size() == 1
    data = _encode(version)
    assert version.decode(Decoder(data)).value == 4
    with pytest.raises(ValueError):
        version.decode(Decoder(bytes([3])))


def test_mpi_roundtrip():
    mpi = Mpi(b"\x01\x02\x04\x08\x03\x8f\x20\x5c")
    assert mpi.size() == 10
    data = _encode(mpi)
    assert len(data) == mpi.size()
    assert Mpi.decode(Decoder(data)) == mpi


def test_mpi_strips_leading_zeros_and_converts():
    mpi = Mpi(b"\x00\x00\x05")
    assert mpi.data == b"\x05"
    assert Mpi.from_int(int(mpi)) == mpi