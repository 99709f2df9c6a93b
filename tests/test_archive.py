from __future__ import annotations

import io
import zipfile

import pytest

from lush_lister.exceptions import BatchError
from lush_lister.models import FileHandle
from lush_lister.savers import DirectorySaver, MemorySaver
from lush_lister.services.archive import save_archive_zip, save_batch_zip, zip_all, zip_batch
from lush_lister.services.sequencer import create_batch


def _batch(sku: str, *names: str):
    return create_batch(sku, [FileHandle(name=n, data=f"{sku}:{n}".encode()) for n in names])


def test_zip_batch_contents():
    batch = _batch("LG-25", "a.png", "b.jpg")
    with zipfile.ZipFile(io.BytesIO(zip_batch(batch))) as zf:
        assert zf.namelist() == ["LG-25 1.png", "LG-25 2.jpg"]
        assert zf.read("LG-25 2.jpg") == b"LG-25:b.jpg"


def test_zip_all_uses_folder_per_batch():
    batches = [_batch("A1", "x.png"), _batch("B2", "y.png", "z.png")]
    with zipfile.ZipFile(io.BytesIO(zip_all(batches))) as zf:
        assert sorted(zf.namelist()) == ["A1/A1 1.png", "B2/B2 1.png", "B2/B2 2.png"]


def test_save_batch_zip_name():
    saver = MemorySaver()
    name = save_batch_zip(_batch("LG-25", "a.png"), saver)
    assert name == "LUSH_LG-25.zip"
    assert saver.last[1] == name
    assert saver.last[2] == "application/zip"


def test_save_archive_zip(tmp_path):
    saver = DirectorySaver(tmp_path)
    name = save_archive_zip([_batch("A1", "x.png")], saver)
    assert name.startswith("LUSH_ARCHIVE_MASTER_") and name.endswith(".zip")
    assert (tmp_path / name).exists()


def test_save_archive_zip_requires_batches():
    saver = MemorySaver()
    with pytest.raises(BatchError):
        save_archive_zip([], saver)
    assert saver.files == []


def test_zip_all_same_sku_writes_each_name_once():
    older = _batch("A", "x.png")
    newer = _batch("A", "y.png", "z.png")
    with zipfile.ZipFile(io.BytesIO(zip_all([newer, older]))) as zf:
        assert sorted(zf.namelist()) == ["A/A 1.png", "A/A 2.png"]
        assert zf.read("A/A 1.png") == b"A:x.png"
        assert zf.read("A/A 2.png") == b"A:z.png"
