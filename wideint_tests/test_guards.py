import mmap

import pytest
from structlog.testing import capture_logs

from wideint.constants import NULL
from wideint.exceptions import AccessViolation
from wideint.guards import check_region, is_null


def test_is_null() -> None:
    assert is_null(NULL)
    assert is_null(None)
    assert not is_null(b'')


def test_null_is_rejected_before_anything_else() -> None:
    with capture_logs() as logs:
        with pytest.raises(AccessViolation, match='read_int64: cannot read from NULL pointer'):
            check_region(NULL, 0, writable=False, op_name='read_int64')
    assert logs[0]['event'] == 'rejected NULL pointer access'
    assert logs[0]['log_level'] == 'debug'


def test_returns_exact_region() -> None:
    buf = bytearray(range(16))
    view = check_region(buf, 4, writable=True)
    assert len(view) == 8
    assert bytes(view) == bytes(range(4, 12))
    view[:] = bytes(8)
    assert buf[4:12] == bytes(8)


@pytest.mark.parametrize('offset', [-1, 1, 100])
def test_out_of_bounds(offset: int) -> None:
    with pytest.raises(AccessViolation, match='out of bounds'):
        check_region(bytearray(8), offset, writable=False)


def test_empty_buffer() -> None:
    with pytest.raises(AccessViolation):
        check_region(bytearray(), 0, writable=False)


def test_bad_offset_type() -> None:
    with pytest.raises(TypeError):
        check_region(bytearray(8), '0', writable=False)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        check_region(bytearray(8), True, writable=False)


def test_read_only() -> None:
    check_region(b'\x00' * 8, 0, writable=False)
    with pytest.raises(AccessViolation, match='read-only'):
        check_region(b'\x00' * 8, 0, writable=True)


def test_not_a_buffer() -> None:
    with pytest.raises(TypeError):
        check_region([0] * 8, 0, writable=False)


def test_mmap_region() -> None:
    with mmap.mmap(-1, 16) as mem:
        view = check_region(mem, 8, writable=True)
        view[:] = b'\x01' * 8
        view.release()
        assert mem[8:16] == b'\x01' * 8


def test_rejected_region_releases_buffer() -> None:
    buf = bytearray(8)
    for offset in (1, -1):
        with pytest.raises(AccessViolation) as excinfo:
            check_region(buf, offset, writable=True)
        assert 'out of bounds' in str(excinfo.value)
    with pytest.raises(TypeError):
        check_region(buf, '0', writable=True)
    buf.extend(b'\x00')


def test_rejected_cast_region_releases_buffer() -> None:
    import array

    arr = array.array('q', [0])
    with pytest.raises(AccessViolation):
        check_region(arr, 4, writable=True)
    arr.append(1)
    with check_region(arr, 8, writable=True) as view:
        view[:] = bytes(8)
    arr.append(2)
    assert arr.tolist() == [0, 0, 2]
