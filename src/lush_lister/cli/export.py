from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from lush_lister.config import Settings
from lush_lister.exceptions import LushError
from lush_lister.repositories import RecordCollection
from lush_lister.savers import DirectorySaver
from lush_lister.services.exporter import export_records
from lush_lister.utils.log import configure_logging


def read_lines(source: str) -> List[str]:
    if source == "-":
        return sys.stdin.read().splitlines()
    return Path(source).read_text(encoding="utf-8").splitlines()


def main(argv: Optional[List[str]] = None) -> int:
    settings = Settings()
    parser = argparse.ArgumentParser(description="Build a bulk-upload CSV from pasted listing lines")
    parser.add_argument("file", help="Text file with one listing per line, or - for stdin")
    parser.add_argument("--output-dir", type=Path, default=Path(settings.output_dir))
    args = parser.parse_args(argv)
    configure_logging(settings.log_level)

    records = RecordCollection()
    for line in read_lines(args.file):
        records.add_text(line)

    saver = DirectorySaver(args.output_dir)
    try:
        export_records(records, saver)
    except LushError as e:
        print(str(e), file=sys.stderr)
        return 1
    print(f"Wrote {len(records)} listings to {saver.saved[-1]}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
