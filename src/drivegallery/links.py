"""Folder link parsing and image URL derivation."""

from __future__ import annotations

import re
from collections.abc import Iterable

from drivegallery.integrations.gdrive import FileEntry

FOLDER_LINK_PATTERN = re.compile(
    r"https://drive\.google\.com/drive/folders/([\w-]+)(\?[^\r\n\u2028\u2029]*)?",
    re.ASCII,
)

IMAGE_URL_TEMPLATE = "https://drive.google.com/uc?id={file_id}"

EMPTY_LINK_MESSAGE = "Please enter a folder link"
INVALID_LINK_MESSAGE = "Please enter a valid Google Drive folder link"
EXTRACTION_FAILED_MESSAGE = "Could not extract folder ID from link."


class FolderLinkError(ValueError):
    """The input is not a usable folder link. ``str(e)`` is shown to the user."""


def extract_folder_id(link: str) -> str:
    """Return the folder ID of a Drive folder link.

    The link is trimmed first and must match the whole pattern.

    Raises:
        FolderLinkError: with the message to show next to the form.
    """
    value = link.strip()
    if not value:
        raise FolderLinkError(EMPTY_LINK_MESSAGE)

    match = FOLDER_LINK_PATTERN.fullmatch(value)
    if match is None:
        raise FolderLinkError(INVALID_LINK_MESSAGE)

    folder_id = match.group(1)
    if not folder_id:
        raise FolderLinkError(EXTRACTION_FAILED_MESSAGE)
    return folder_id


def image_url(file_id: str) -> str:
    return IMAGE_URL_TEMPLATE.format(file_id=file_id)


def image_urls(entries: Iterable[FileEntry]) -> list[str]:
    """Display URLs for the image entries, keeping their order."""
    return [image_url(entry.id) for entry in entries if entry.is_image]
