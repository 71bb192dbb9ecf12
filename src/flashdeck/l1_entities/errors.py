"""Domain error types."""


class SourceReadError(Exception):
    """Raised when a file or URL source cannot be read or decoded."""


class SnapshotDecodeError(Exception):
    """Raised when a persisted deck snapshot is corrupt."""


class DuplicateEntryError(Exception):
    """Raised when a deck mutation would repeat an entry id."""
