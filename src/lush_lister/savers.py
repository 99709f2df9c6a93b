"""Save-file collaborators.

Anything with the ``SaveTarget`` call signature can receive an exported
payload; the core never decides where files end up.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Protocol, Tuple


logger = logging.getLogger(__name__)


class SaveTarget(Protocol):
    def __call__(self, payload: bytes, filename: str, media_type: str) -> None: ...


def safe_filename(filename: str) -> str:
    """Flatten path separators so a name can never leave its directory."""
    name = filename.replace("/", "_").replace("\\", "_")
    return name if name not in ("", ".", "..") else "_"


class DirectorySaver:
    """Writes each payload into a directory under its suggested name.

    ``saved`` lists the paths written, in order.
    """

    def __init__(self, directory: Path | str) -> None:
        self.directory = Path(directory)
        self.saved: List[Path] = []

    def __call__(self, payload: bytes, filename: str, media_type: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.directory / safe_filename(filename)
        path.write_bytes(payload)
        self.saved.append(path)
        logger.debug("Wrote %d bytes (%s) to %s", len(payload), media_type, path)


@dataclass
class MemorySaver:
    """Keeps payloads in memory, e.g. to stream them back as a download."""

    files: List[Tuple[bytes, str, str]] = field(default_factory=list)

    def __call__(self, payload: bytes, filename: str, media_type: str) -> None:
        self.files.append((payload, filename, media_type))

    @property
    def last(self) -> Tuple[bytes, str, str]:
        return self.files[-1]
