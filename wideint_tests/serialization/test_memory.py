import pytest

from wideint.serialization import Deserializer, OutOfDataError, SerializationError, Serializer


def test_write_and_finalize() -> None:
    se = Serializer.build_memory_serializer()
    se.write_bytes(b'\x01\x02')
    se.write_bytes(memoryview(bytearray(b'\x03')))
    assert se.cur_pos() == 3
    assert se.finalize() == b'\x01\x02\x03'
    with pytest.raises(SerializationError):
        se.write_int64(1)


def test_read_fields_and_finalize() -> None:
    de = Deserializer.build_memory_deserializer(bytes.fromhex('0000000000000001ffffffffffffffff'))
    assert de.read_int64(endianness='BE') == 1
    assert not de.is_empty()
    assert de.read_uint64(endianness='BE') == '18446744073709551615'
    assert de.is_empty()
    de.finalize()


def test_errors() -> None:
    de = Deserializer.build_memory_deserializer(bytes(12))
    with pytest.raises(ValueError):
        de.read_bytes(-1)
    de.read_int64()
    with pytest.raises(OutOfDataError, match='need 8 bytes at position 8, only 4 left'):
        de.read_int64()
    with pytest.raises(SerializationError, match='4 trailing bytes'):
        de.finalize()


def test_input_buffer_is_not_kept() -> None:
    data = bytearray(8)
    de = Deserializer.build_memory_deserializer(data)
    data.extend(b'\xff' * 8)
    data[:8] = b'\xff' * 8
    assert de.read_int64() == 0
    de.finalize()
