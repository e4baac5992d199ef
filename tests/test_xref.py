import io

import pytest

from pdfkiln.xref import (
    ROOT_GENERATION,
    Generation,
    ObjectStatus,
    XRefEntry,
    XRefError,
    XRefErrorKind,
    XRefTable,
)


def test_generation_enum():
    assert Generation.ROOT.as_u16() == ROOT_GENERATION
    assert Generation.NORMAL.as_u16() == 0


def test_generation_equality():
    assert Generation.ROOT == Generation.ROOT
    assert Generation.NORMAL == Generation.NORMAL
    assert Generation.ROOT != Generation.NORMAL
    assert Generation.ROOT.as_u16() != Generation.NORMAL.as_u16()


def test_cross_ref_error_types():
    table = XRefTable()
    table.add_entry(XRefEntry(-1, 10, ObjectStatus.IN_USE))
    with pytest.raises(XRefError) as info:
        table.serialize(io.BytesIO())
    assert info.value.kind == XRefErrorKind.INVALID_ROOT_ENTRY
    assert info.value.kind != XRefErrorKind.EMPTY_TABLE


def test_entry_formatting():
    entry = XRefEntry(1, 12345, ObjectStatus.IN_USE, Generation.NORMAL)
    assert entry.serialize() == b"0000012345 00000 n\r\n"
    assert len(entry.serialize()) == 20


def test_root_entry_formatting():
    entry = XRefEntry(0, 0, ObjectStatus.FREE, Generation.ROOT)
    assert entry.serialize() == f"0000000000 {ROOT_GENERATION} f\r\n".encode()


def test_large_offset_formatting():
    entry = XRefEntry(1, 9999999999, ObjectStatus.IN_USE, Generation.NORMAL)
    assert entry.serialize() == b"9999999999 00000 n\r\n"


def test_free_entry_formatting():
    entry = XRefEntry(2, 5, ObjectStatus.FREE, Generation.NORMAL)
    assert entry.serialize() == b"0000000005 00000 f\r\n"


def test_new_table_has_root_entry():
    table = XRefTable()
    out = io.BytesIO()
    table.serialize(out)
    data = out.getvalue()
    assert data.startswith(b"xref\r\n")
    assert b"0 1\r\n" in data
    assert f"0000000000 {ROOT_GENERATION} f".encode() in data


def test_add_multiple_entries_sorted_and_positioned():
    table = XRefTable()
    table.add_entry(XRefEntry(3, 300, ObjectStatus.IN_USE))
    table.add_entry(XRefEntry(1, 100, ObjectStatus.IN_USE))
    table.add_entry(XRefEntry(2, 200, ObjectStatus.IN_USE))
    out = io.BytesIO()
    out.write(b"%PDF-1.5\n")
    table.serialize(out)
    assert table.position == len(b"%PDF-1.5\n")
    data = out.getvalue()[table.position:]
    assert b"0 4\r\n" in data
    i100 = data.index(b"0000000100 00000 n")
    i200 = data.index(b"0000000200 00000 n")
    i300 = data.index(b"0000000300 00000 n")
    assert i100 < i200 < i300
    assert [e.object_number for e in table.entries] == [0, 1, 2, 3]


def test_invalid_root_entry_raises():
    table = XRefTable()
    table.add_entry(XRefEntry(-1, 10, ObjectStatus.IN_USE))
    with pytest.raises(XRefError) as info:
        table.serialize(io.BytesIO())
    assert info.value.kind is XRefErrorKind.INVALID_ROOT_ENTRY