"""Service layer: parsing, export, renaming and packaging."""

from .parser import parse
from .exporter import build_csv, export_records
from .sequencer import create_batch, sequence, stage_images

__all__ = ["parse", "build_csv", "export_records", "create_batch", "sequence", "stage_images"]
