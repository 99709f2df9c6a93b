"""Rename a batch of images as ``"<SKU> <n>.<ext>"`` in the order given."""

from __future__ import annotations

import logging
import mimetypes
from typing import Iterable, List, Sequence

from lush_lister.config import DEFAULT_EXTENSION
from lush_lister.exceptions import BatchError
from lush_lister.models import ArchiveBatch, FileHandle, NamedFile


logger = logging.getLogger(__name__)


def file_extension(name: str) -> str:
    """Text after the last dot of ``name``, or ``jpg`` when there is none."""
    _, dot, ext = name.rpartition(".")
    return ext if dot and ext else DEFAULT_EXTENSION


def is_image(handle: FileHandle) -> bool:
    ctype = handle.content_type or mimetypes.guess_type(handle.name)[0] or ""
    return ctype.startswith("image/")


def stage_images(files: Iterable[FileHandle]) -> List[FileHandle]:
    staged: List[FileHandle] = []
    for f in files:
        if is_image(f):
            staged.append(f)
        else:
            logger.debug("Skipping non-image file %s", f.name)
    return staged


def sequence(identifier: str, files: Sequence[FileHandle]) -> List[NamedFile]:
    sku = (identifier or "").strip()
    if not sku:
        logger.warning("Rename requested without a SKU")
        raise BatchError("Please enter a SKU Code!")
    if not files:
        logger.warning("Rename requested for %s with no files", sku)
        raise BatchError("Please drop some images first!")
    return [
        NamedFile(source=f, new_name=f"{sku} {i + 1}.{file_extension(f.name)}")
        for i, f in enumerate(files)
    ]


def create_batch(identifier: str, files: Sequence[FileHandle]) -> ArchiveBatch:
    named = sequence(identifier, files)
    batch = ArchiveBatch(sku=identifier.strip(), files=named)
    logger.info("Created batch %s with %d files", batch.sku, len(named))
    return batch
