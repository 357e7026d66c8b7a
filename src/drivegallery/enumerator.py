# Folder walk — collect every file below a Drive folder.
# Created: 2026-10-19

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from drivegallery.integrations.gdrive import DriveClient, FileEntry

logger = logging.getLogger(__name__)


@dataclass
class TraversalResult:
    """Files found under a folder, plus the listings that failed on the way."""

    files: list[FileEntry] = field(default_factory=list)
    failures: dict[str, str] = field(default_factory=dict)  # folder id -> reason
    root_failed: bool = False

    @property
    def skipped_folders(self) -> int:
        """Number of subfolders whose contents are missing from ``files``."""
        return len(self.failures) - (1 if self.root_failed else 0)


async def walk_folder(folder_id: str, client: DriveClient | None = None) -> TraversalResult:
    """Depth-first walk of the folder tree rooted at *folder_id*.

    Folders are listed one at a time, in the order they are met. A folder is
    descended into as soon as it appears in its parent's listing, so the
    files come back in the same order a recursive descent would produce. A
    failed listing drops that branch only; the walk carries on with its
    siblings.

    The tree is assumed to be acyclic.
    """
    result = TraversalResult()
    client = client or DriveClient()

    async with client:
        root = await client.list_children(folder_id)
        if not root.ok:
            result.failures[folder_id] = root.error
            result.root_failed = True
            return result

        stack: list[Iterator[FileEntry]] = [iter(root.entries)]
        while stack:
            entry = next(stack[-1], None)
            if entry is None:
                stack.pop()
                continue

            if not entry.is_folder:
                result.files.append(entry)
                continue

            listing = await client.list_children(entry.id)
            if listing.ok:
                stack.append(iter(listing.entries))
            else:
                logger.warning("Skipping folder %s: %s", entry.id, listing.error)
                result.failures[entry.id] = listing.error

    logger.debug(
        "Walked folder %s: %d files, %d failed listings",
        folder_id,
        len(result.files),
        len(result.failures),
    )
    return result


async def list_all_files_recursive(
    folder_id: str, client: DriveClient | None = None
) -> list[FileEntry]:
    """Every non-folder entry below *folder_id*, in discovery order."""
    return (await walk_folder(folder_id, client)).files
