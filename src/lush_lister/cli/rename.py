from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from lush_lister.config import Settings
from lush_lister.exceptions import LushError
from lush_lister.models import FileHandle
from lush_lister.savers import DirectorySaver
from lush_lister.services.archive import save_batch_zip
from lush_lister.services.sequencer import create_batch, stage_images
from lush_lister.utils.log import configure_logging


def main(argv: Optional[List[str]] = None) -> int:
    settings = Settings()
    parser = argparse.ArgumentParser(description="Rename images as '<SKU> <n>.<ext>' and zip them")
    parser.add_argument("sku", help="SKU code used as the file name stem")
    parser.add_argument("files", nargs="*", type=Path, help="Image files, in order")
    parser.add_argument("--output-dir", type=Path, default=Path(settings.output_dir))
    args = parser.parse_args(argv)
    configure_logging(settings.log_level)

    handles = [FileHandle(name=p.name, data=p.read_bytes()) for p in args.files]
    saver = DirectorySaver(args.output_dir)
    try:
        batch = create_batch(args.sku, stage_images(handles))
    except LushError as e:
        print(str(e), file=sys.stderr)
        return 1
    save_batch_zip(batch, saver)
    print(f"Packed {len(batch.files)} images into {saver.saved[-1]}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
