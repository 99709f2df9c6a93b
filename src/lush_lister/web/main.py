from __future__ import annotations

import logging
from typing import List, Optional
from urllib.parse import quote

from fastapi import FastAPI, File, Form, UploadFile
from fastapi.responses import JSONResponse, Response

from lush_lister.exceptions import ConfirmationRequired, IdentificationError, LushError
from lush_lister.models import ArchiveBatch, FileHandle, ListingRecord
from lush_lister.repositories import ArchiveList, RecordCollection
from lush_lister.savers import MemorySaver
from lush_lister.services.archive import save_archive_zip, save_batch_zip
from lush_lister.services.exporter import export_records
from lush_lister.services.identifier import ProductIdentifier
from lush_lister.services.sequencer import create_batch, stage_images


logger = logging.getLogger(__name__)

app = FastAPI(title="Lush Lister")
records = RecordCollection()
archives = ArchiveList()
identifier = ProductIdentifier()


def _error(e: Exception, status_code: int = 400) -> JSONResponse:
    return JSONResponse({"error": str(e)}, status_code=status_code)


def _not_found(what: str) -> JSONResponse:
    return JSONResponse({"error": f"Unknown {what}."}, status_code=404)


def _download(saver: MemorySaver) -> Response:
    payload, filename, media_type = saver.last
    headers = {"Content-Disposition": f"attachment; filename*=UTF-8''{quote(filename)}"}
    return Response(content=payload, media_type=media_type, headers=headers)


def _record_view(r: ListingRecord) -> dict:
    data = r.model_dump()
    data["link_count"] = r.link_count
    return data


def _batch_view(b: ArchiveBatch) -> dict:
    return {
        "id": b.id,
        "sku": b.sku,
        "timestamp": b.timestamp,
        "files": [f.new_name for f in b.files],
    }


def _require_confirm(confirm: Optional[bool], what: str) -> None:
    if not confirm:
        raise ConfirmationRequired(what)


@app.get("/records")
def list_records() -> JSONResponse:
    return JSONResponse({"count": len(records), "records": [_record_view(r) for r in records]})


@app.post("/records")
def add_record(text: str = Form("")) -> JSONResponse:
    record = records.add_text(text)
    if record is None:
        return JSONResponse({"error": "Nothing to add."}, status_code=400)
    return JSONResponse(_record_view(record), status_code=201)


@app.delete("/records/{record_id}")
def remove_record(record_id: str) -> JSONResponse:
    if not records.remove(record_id):
        return _not_found("record")
    return JSONResponse({"ok": True})


@app.post("/records/clear")
def clear_records(confirm: Optional[bool] = Form(False)) -> JSONResponse:
    try:
        _require_confirm(confirm, "scroll")
    except LushError as e:
        return _error(e)
    records.clear()
    return JSONResponse({"ok": True})


@app.get("/records/export")
def export_csv() -> Response:
    saver = MemorySaver()
    try:
        export_records(records, saver)
    except LushError as e:
        return _error(e)
    return _download(saver)


@app.post("/batches")
def add_batch(sku: str = Form(""), files: Optional[List[UploadFile]] = File(None)) -> JSONResponse:
    handles = [FileHandle(name=f.filename or "", data=f.file.read(), content_type=f.content_type) for f in files or []]
    try:
        batch = create_batch(sku, stage_images(handles))
    except LushError as e:
        return _error(e)
    archives.add(batch)
    return JSONResponse(_batch_view(batch), status_code=201)


@app.get("/batches")
def list_batches() -> JSONResponse:
    return JSONResponse({"count": len(archives), "batches": [_batch_view(b) for b in archives]})


@app.get("/batches/zip")
def zip_all_batches() -> Response:
    saver = MemorySaver()
    try:
        save_archive_zip(archives.items(), saver)
    except LushError as e:
        return _error(e)
    return _download(saver)


@app.get("/batches/{batch_id}/zip")
def zip_one_batch(batch_id: str) -> Response:
    batch = archives.get(batch_id)
    if batch is None:
        return _not_found("batch")
    saver = MemorySaver()
    save_batch_zip(batch, saver)
    return _download(saver)


@app.delete("/batches/{batch_id}")
def remove_batch(batch_id: str) -> JSONResponse:
    if not archives.remove(batch_id):
        return _not_found("batch")
    return JSONResponse({"ok": True})


@app.post("/batches/clear")
def clear_batches(confirm: Optional[bool] = Form(False)) -> JSONResponse:
    try:
        _require_confirm(confirm, "archive")
    except LushError as e:
        return _error(e)
    archives.clear()
    return JSONResponse({"ok": True})


@app.post("/identify")
def identify(image: UploadFile = File(...)) -> JSONResponse:
    data = image.file.read()
    try:
        options = identifier.identify(data, image.content_type)
    except IdentificationError as e:
        logger.warning("Identification failed: %s", e)
        return JSONResponse({"error": "Failed to read the image. Try again."}, status_code=502)
    return JSONResponse({"options": options})
