from .memory import ArchiveList, RecordCollection

__all__ = ["ArchiveList", "RecordCollection"]
