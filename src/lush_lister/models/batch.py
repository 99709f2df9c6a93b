"""Data models for image files renamed under a SKU."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from lush_lister.utils.ids import new_id, now_ms


class FileHandle(BaseModel):
    """An image file as received from disk or an upload form."""

    model_config = ConfigDict(frozen=True)

    name: str
    data: bytes = b""
    content_type: Optional[str] = None


class NamedFile(BaseModel):
    model_config = ConfigDict(frozen=True)

    source: FileHandle
    new_name: str


class ArchiveBatch(BaseModel):
    """A group of files renamed in one pass, ready to be zipped."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    sku: str
    files: List[NamedFile]
    timestamp: int = Field(default_factory=now_ms)
