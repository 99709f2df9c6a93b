"""Zip renamed batches for download."""

from __future__ import annotations

import io
import logging
import zipfile
from typing import Dict, Optional, Sequence

from lush_lister.config import ARCHIVE_ZIP_PREFIX, BATCH_ZIP_PREFIX, ZIP_MEDIA_TYPE
from lush_lister.exceptions import BatchError
from lush_lister.models import ArchiveBatch
from lush_lister.savers import SaveTarget
from lush_lister.utils.ids import now_ms


logger = logging.getLogger(__name__)


def zip_batch(batch: ArchiveBatch) -> bytes:
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", zipfile.ZIP_DEFLATED) as zf:
        for f in batch.files:
            zf.writestr(f.new_name, f.source.data)
    return buf.getvalue()


def zip_all(batches: Sequence[ArchiveBatch]) -> bytes:
    """One folder per batch, named after its SKU."""
    # Batches sharing a SKU share a folder; the one listed last wins a name clash.
    entries: Dict[str, bytes] = {}
    for batch in batches:
        for f in batch.files:
            entries[f"{batch.sku}/{f.new_name}"] = f.source.data
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", zipfile.ZIP_DEFLATED) as zf:
        for name, data in entries.items():
            zf.writestr(name, data)
    return buf.getvalue()


def batch_zip_name(batch: ArchiveBatch) -> str:
    return f"{BATCH_ZIP_PREFIX}{batch.sku}.zip"


def archive_zip_name(ts: Optional[int] = None) -> str:
    return f"{ARCHIVE_ZIP_PREFIX}{ts if ts is not None else now_ms()}.zip"


def save_batch_zip(batch: ArchiveBatch, save: SaveTarget) -> str:
    name = batch_zip_name(batch)
    save(zip_batch(batch), name, ZIP_MEDIA_TYPE)
    logger.info("Packed %d files into %s", len(batch.files), name)
    return name


def save_archive_zip(batches: Sequence[ArchiveBatch], save: SaveTarget) -> str:
    if not batches:
        raise BatchError("Archive is empty!")
    name = archive_zip_name()
    save(zip_all(batches), name, ZIP_MEDIA_TYPE)
    logger.info("Packed %d batches into %s", len(batches), name)
    return name
