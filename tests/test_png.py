from chunktag import png
from chunktag.chunk_type import ChunkType


def test_critical():
    """Check the critical chunk types are flagged as such"""
    for chunk_type in png.CRITICAL:
        assert chunk_type.is_critical()
        assert chunk_type.is_public()
        assert chunk_type.is_valid()
        assert not chunk_type.is_safe_to_copy()


def test_ancillary():
    for chunk_type in png.ANCILLARY:
        assert not chunk_type.is_critical()
        assert chunk_type.is_public()
        assert chunk_type.is_valid()


def test_safe_to_copy():
    assert png.tEXt.is_safe_to_copy()
    assert png.zTXt.is_safe_to_copy()
    assert not png.gAMA.is_safe_to_copy()
    assert not png.tIME.is_safe_to_copy()


def test_header():
    assert png.IHDR == ChunkType(b'IHDR')
    assert str(png.IEND) == 'IEND'
