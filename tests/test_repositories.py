from __future__ import annotations

from lush_lister.models import FileHandle
from lush_lister.repositories import ArchiveList, RecordCollection
from lush_lister.services.sequencer import create_batch


def test_records_keep_insertion_order_and_duplicates():
    col = RecordCollection()
    a = col.add_text("Bag A 10")
    b = col.add_text("Bag A 10")
    assert a is not None and b is not None
    assert [r.id for r in col] == [a.id, b.id]
    assert len(col) == 2


def test_blank_text_is_skipped():
    col = RecordCollection()
    assert col.add_text("   ") is None
    assert len(col) == 0


def test_remove_by_id():
    col = RecordCollection()
    a = col.add_text("first")
    b = col.add_text("second")
    assert a is not None and b is not None
    assert col.remove(a.id) is True
    assert col.remove(a.id) is False
    assert col.items() == [b]


def test_clear():
    col = RecordCollection()
    col.add_text("x")
    col.clear()
    assert len(col) == 0


def test_archive_list_newest_first():
    archives = ArchiveList()
    first = archives.add(create_batch("A", [FileHandle(name="a.png")]))
    second = archives.add(create_batch("B", [FileHandle(name="b.png")]))
    assert [b.sku for b in archives] == ["B", "A"]
    assert archives.get(first.id) is first
    assert archives.remove(second.id)
    assert [b.sku for b in archives] == ["A"]
