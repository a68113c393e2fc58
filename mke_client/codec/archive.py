"""
Zip archive walking with per-entry failure collection.

The same walk is used for the client bundle archive and for the docker
bundle archive nested inside it. Failing to open an archive aborts the walk
with BundleArchiveError; a failing entry handler is recorded in the
ArchiveOutcome and the walk moves on to the next entry.
"""

import io
import zipfile
import zlib
from collections.abc import Callable, Mapping

import structlog

from mke_client.exceptions import (
    BundleArchiveError,
    ClientBundleError,
    ClientBundleRetrievalError,
)

logger = structlog.get_logger(__name__)

EntryHandler = Callable[[bytes], None]

# Errors an entry can raise while being read or decoded. Anything else is a bug.
_ENTRY_ERRORS = (
    ClientBundleError,
    zipfile.BadZipFile,
    zlib.error,
    UnicodeDecodeError,
    EOFError,
    OSError,
    NotImplementedError,  # unsupported compression method
    RuntimeError,  # encrypted entry
)


class ArchiveOutcome:
    """
    Failures recorded while walking one or more archives.

    Entries are recorded in the order they are encountered; that order is kept
    in the aggregated error.
    """

    def __init__(self) -> None:
        self.failures: list[tuple[str, Exception]] = []

    @property
    def ok(self) -> bool:
        return not self.failures

    def record(self, entry: str, error: Exception) -> None:
        logger.warning("Client bundle entry failed to decode", entry=entry, error=str(error))
        self.failures.append((entry, error))

    def raise_for_failures(self) -> None:
        """
        Raises:
            ClientBundleRetrievalError: If any failure was recorded.
        """
        if self.failures:
            raise ClientBundleRetrievalError(list(self.failures))


def open_archive(data: bytes, size_hint: int | None = None) -> zipfile.ZipFile:
    """
    Open in-memory bytes as a zip archive.

    Args:
        data: Archive bytes.
        size_hint: Declared archive size; defaults to ``len(data)``.

    Returns:
        Open archive reader.

    Raises:
        BundleArchiveError: If the size hint does not fit the data or the bytes
            are not a zip archive.
    """
    size = len(data) if size_hint is None else size_hint
    if size < 0 or size > len(data):
        msg = f"Archive size hint {size} does not match {len(data)} bytes received"
        raise BundleArchiveError(msg)

    try:
        return zipfile.ZipFile(io.BytesIO(data[:size]))
    except (zipfile.BadZipFile, zipfile.LargeZipFile, ValueError, OSError) as e:
        msg = f"Could not read zip archive: {e}"
        raise BundleArchiveError(msg) from e


def walk_archive(
    data: bytes,
    handlers: Mapping[str, EntryHandler],
    outcome: ArchiveOutcome,
    *,
    size_hint: int | None = None,
) -> str:
    """
    Dispatch every entry of an archive to the handler registered for its name.

    Names are matched exactly; entries without a handler are skipped.
    Handlers may walk nested archives with the same ``outcome``.

    Args:
        data: Archive bytes.
        handlers: Entry name to handler taking the entry's bytes.
        outcome: Collector for entry failures.
        size_hint: Declared archive size.

    Returns:
        The archive comment.

    Raises:
        BundleArchiveError: If this archive, or one a handler opens, cannot be read.
    """
    with open_archive(data, size_hint) as archive:
        for info in archive.infolist():
            handler = handlers.get(info.filename)
            if handler is None:
                logger.debug("Skipping archive entry", entry=info.filename)
                continue

            try:
                handler(archive.read(info))
            except BundleArchiveError:
                raise
            except _ENTRY_ERRORS as e:
                outcome.record(info.filename, e)

        return archive.comment.decode("utf-8", errors="replace")
