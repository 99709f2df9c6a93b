"""Turn a pasted line like ``Gucci Bag (LG25) 350 https://drive...`` into a record.

Extraction runs as a pipeline of small steps, each trimming the text the next
step sees:

1. split the line at the first URL into metadata and links text
2. take a trailing number off the metadata as the cost
3. take a trailing parenthesized group off what is left as the SKU
4. rebuild the title, re-appending the SKU
5. normalize Google Drive links to direct-view URLs and pad to 8 slots

Nothing here raises on odd input; the worst case is a record whose title is
the whole line.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Tuple

from lush_lister.config import DEFAULT_COST
from lush_lister.models import LINK_SLOTS, ListingRecord


logger = logging.getLogger(__name__)

URL_MARKER_RE = re.compile(r"https?://")
URL_RE = re.compile(r"https?://[^\s,]+")
COST_RE = re.compile(r"\s+(\d+(?:\.\d*)?|\.\d+)$", re.ASCII)
SKU_RE = re.compile(r"\s*\(([^()]*)\)$")
DRIVE_PATH_RE = re.compile(r"/file/d/([A-Za-z0-9_-]+)")
DRIVE_QUERY_RE = re.compile(r"[?&]id=([A-Za-z0-9_-]+)")

DRIVE_VIEW_URL = "https://drive.google.com/uc?export=view&id={id}"


def split_links(text: str) -> Tuple[str, str]:
    """Return ``(metadata, links)`` split at the first http(s) marker."""
    m = URL_MARKER_RE.search(text)
    if not m:
        return text.strip(), ""
    return text[: m.start()].strip(), text[m.start():]


def extract_cost(meta: str) -> Tuple[str, Optional[str]]:
    m = COST_RE.search(meta)
    if not m:
        return meta, None
    return meta[: m.start()].strip(), m.group(1)


def extract_sku(meta: str) -> Tuple[str, Optional[str]]:
    m = SKU_RE.search(meta)
    if not m:
        return meta, None
    return meta[: m.start()].strip(), m.group(1)


def compose_title(base: str, sku: str, fallback: str) -> str:
    base = base.strip()
    if sku:
        return f"{base} ({sku})" if base else f"({sku})"
    return base or fallback


def drive_file_id(url: str) -> Optional[str]:
    # The /file/d/<id> form wins when both are present.
    m = DRIVE_PATH_RE.search(url) or DRIVE_QUERY_RE.search(url)
    return m.group(1) if m else None


def normalize_links(text: str) -> List[str]:
    out: List[str] = []
    for url in URL_RE.findall(text):
        file_id = drive_file_id(url)
        if file_id:
            out.append(DRIVE_VIEW_URL.format(id=file_id))
        else:
            logger.debug("Dropping link without a Drive file id: %s", url)
    return out


def pad_links(links: List[str], slots: int = LINK_SLOTS) -> List[str]:
    return (list(links) + [""] * slots)[:slots]


def parse(raw: str) -> Optional[ListingRecord]:
    """Parse one pasted line into a ``ListingRecord``.

    Returns ``None`` for blank input so callers can skip it; any other input
    yields a best-effort record.
    """
    text = (raw or "").strip()
    if not text:
        return None

    meta, links_text = split_links(text)
    meta, cost = extract_cost(meta)
    meta, sku = extract_sku(meta)
    title = compose_title(meta, sku or "", fallback=text)
    links = pad_links(normalize_links(links_text))

    return ListingRecord(title=title, sku=sku or "", cost=cost or DEFAULT_COST, links=links)
