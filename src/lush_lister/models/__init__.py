"""Data models for parsed listings and renamed image batches."""

from .listing import LINK_SLOTS, ListingRecord
from .batch import ArchiveBatch, FileHandle, NamedFile

__all__ = ["LINK_SLOTS", "ListingRecord", "ArchiveBatch", "FileHandle", "NamedFile"]
