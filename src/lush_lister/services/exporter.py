"""Serialize collected listing records into the marketplace bulk-upload CSV."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from lush_lister.config import CSV_FILE_PREFIX, CSV_MEDIA_TYPE, CsvConstants
from lush_lister.exceptions import EmptyExportError
from lush_lister.models import LINK_SLOTS, ListingRecord
from lush_lister.savers import SaveTarget
from lush_lister.utils.ids import now_ms


logger = logging.getLogger(__name__)

HEADER: List[str] = [
    "Category",
    "Sub Category",
    "Title",
    "Description",
    "Quantity",
    "Type",
    "Price",
    "Shipping Profile",
    "Offerable",
    "Hazmat",
    "Condition",
    "Cost Per Item",
    "SKU",
] + [f"Image URL {i}" for i in range(1, LINK_SLOTS + 1)]


def quote_title(title: str) -> str:
    return '"' + title.replace('"', '""') + '"'


def build_row(record: ListingRecord, constants: CsvConstants) -> List[str]:
    return [
        constants.category,
        constants.sub_category,
        quote_title(record.title),
        constants.description,
        constants.quantity,
        constants.type,
        constants.price,
        constants.shipping,
        constants.offerable,
        constants.hazmat,
        constants.condition,
        record.cost,
        record.sku,
        *record.links,
    ]


def build_csv(records: Sequence[ListingRecord], constants: Optional[CsvConstants] = None) -> str:
    """Return the CSV text for ``records``: a header line plus one line per record.

    Only the title is quoted; every other value is written as-is.
    """
    if not records:
        raise EmptyExportError()
    constants = constants or CsvConstants()
    lines = [",".join(HEADER)]
    lines.extend(",".join(build_row(r, constants)) for r in records)
    return "\n".join(lines) + "\n"


def export_filename(ts: Optional[int] = None) -> str:
    return f"{CSV_FILE_PREFIX}{ts if ts is not None else now_ms()}.csv"


def export_records(
    records: Iterable[ListingRecord],
    save: SaveTarget,
    constants: Optional[CsvConstants] = None,
) -> str:
    """Build the CSV and hand it to ``save``. Returns the file name used."""
    items = list(records)
    if not items:
        logger.warning("Export requested with no records")
        raise EmptyExportError()
    payload = build_csv(items, constants)
    filename = export_filename()
    save(payload.encode("utf-8"), filename, CSV_MEDIA_TYPE)
    logger.info("Exported %d records to %s", len(items), filename)
    return filename
