from __future__ import annotations

import pytest

from lush_lister.exceptions import BatchError
from lush_lister.models import FileHandle
from lush_lister.services.sequencer import create_batch, file_extension, sequence, stage_images


def _files(*names: str) -> list[FileHandle]:
    return [FileHandle(name=n, data=n.encode()) for n in names]


def test_sequence_names_in_order():
    files = _files("a.png", "b.jpeg", "c")
    named = sequence("LG-25", files)
    assert [n.new_name for n in named] == ["LG-25 1.png", "LG-25 2.jpeg", "LG-25 3.jpg"]
    assert [n.source for n in named] == files


def test_identifier_is_trimmed():
    named = sequence("  LG-25 ", _files("x.JPG"))
    assert named[0].new_name == "LG-25 1.JPG"


@pytest.mark.parametrize(
    "name,ext",
    [("photo.webp", "webp"), ("archive.tar.gz", "gz"), ("noext", "jpg"), ("trailing.", "jpg")],
)
def test_file_extension(name, ext):
    assert file_extension(name) == ext


@pytest.mark.parametrize("sku", ["", "   "])
def test_blank_identifier_fails(sku):
    with pytest.raises(BatchError):
        sequence(sku, _files("a.png"))


def test_no_files_fails():
    with pytest.raises(BatchError):
        sequence("LG-25", [])


def test_stage_images_skips_non_images():
    files = [
        FileHandle(name="a.png"),
        FileHandle(name="notes.txt"),
        FileHandle(name="blob", content_type="image/heic"),
        FileHandle(name="b.jpg", content_type="application/octet-stream"),
    ]
    assert [f.name for f in stage_images(files)] == ["a.png", "blob"]


def test_create_batch():
    batch = create_batch(" SKU9 ", _files("1.png", "2.png"))
    assert batch.sku == "SKU9"
    assert [f.new_name for f in batch.files] == ["SKU9 1.png", "SKU9 2.png"]
    assert batch.timestamp > 0
