# Google Drive Client — read-only listing client for the Drive v3 API.
# Created: 2026-10-19
#
# Public folders only: requests are authenticated with an API key passed as
# the ``key`` query parameter, no OAuth.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from drivegallery.config import Settings, get_settings

logger = logging.getLogger(__name__)

FOLDER_MIME_TYPE = "application/vnd.google-apps.folder"

_LIST_FIELDS = "nextPageToken, files(id, name, mimeType)"


@dataclass(frozen=True)
class FileEntry:
    """One item of a Drive folder listing."""

    id: str
    mime_type: str = ""
    name: str = ""

    @property
    def is_folder(self) -> bool:
        return self.mime_type == FOLDER_MIME_TYPE

    @property
    def is_image(self) -> bool:
        return self.mime_type.startswith("image/")

    @classmethod
    def from_api(cls, item: dict[str, Any]) -> FileEntry:
        """Build an entry from one ``files`` item.

        Raises:
            ValueError: if ``id``, ``mimeType`` or ``name`` is not a string.
        """
        fields = {
            "id": item.get("id"),
            "mimeType": item.get("mimeType") or "",
            "name": item.get("name") or "",
        }
        for key, value in fields.items():
            if not isinstance(value, str):
                raise ValueError(f"file entry has a non-string {key!r}")
        return cls(id=fields["id"], mime_type=fields["mimeType"], name=fields["name"])


@dataclass(frozen=True)
class ListingResult:
    """Outcome of a single folder listing.

    ``ok`` with an empty ``entries`` tuple is an empty folder, not an error.
    """

    entries: tuple[FileEntry, ...] = ()
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, entries: list[FileEntry] | tuple[FileEntry, ...]) -> ListingResult:
        return cls(entries=tuple(entries))

    @classmethod
    def failure(cls, reason: str) -> ListingResult:
        return cls(error=reason)


def parse_files(data: Any) -> list[FileEntry]:
    """Extract file entries from a ``files.list`` response body.

    Items without an ``id`` are skipped.

    Raises:
        ValueError: if the body has no ``files`` list or an item has
            non-string fields.
    """
    if not isinstance(data, dict) or not isinstance(data.get("files"), list):
        raise ValueError("response has no 'files' list")
    return [
        FileEntry.from_api(item)
        for item in data["files"]
        if isinstance(item, dict) and item.get("id")
    ]


class DriveClient:
    """HTTP client for the Drive v3 ``files.list`` endpoint.

    Can be used as an async context manager to share one connection pool
    across many listings (e.g. a whole folder walk). Outside a ``with``
    block every call opens its own ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._settings = settings or get_settings()
        self._client = http_client
        self._owns_client = False
        self._depth = 0  # nested ``async with`` blocks

    async def __aenter__(self) -> DriveClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._settings.request_timeout)
            self._owns_client = True
        self._depth += 1
        return self

    async def __aexit__(self, *exc_info) -> None:
        self._depth -= 1
        if self._depth == 0 and self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None
            self._owns_client = False

    async def _get(self, url: str, params: dict[str, Any]) -> httpx.Response:
        if self._client is not None:
            return await self._client.get(url, params=params)
        async with httpx.AsyncClient(timeout=self._settings.request_timeout) as client:
            return await client.get(url, params=params)

    async def list_children(self, folder_id: str) -> ListingResult:
        """List the direct children of a folder.

        Only the first page of results is used; when Drive reports more
        pages a warning is logged and the rest are ignored.

        Args:
            folder_id: Drive folder ID.

        Returns:
            ``ListingResult.success`` with the entries in API order, or
            ``ListingResult.failure`` with a short reason. Never raises for
            network, HTTP status or decoding problems.
        """
        if not self._settings.api_key_configured:
            logger.error("Cannot list folder %s: no Google API key configured", folder_id)
            return ListingResult.failure("API key not configured")

        params: dict[str, Any] = {
            "q": f"'{folder_id}' in parents",
            "key": self._settings.google_api_key.get_secret_value(),
            "pageSize": self._settings.page_size,
            "fields": _LIST_FIELDS,
        }

        try:
            resp = await self._get(f"{self._settings.drive_api_base}/files", params)
            resp.raise_for_status()
            data = resp.json()
            entries = parse_files(data)
        except httpx.HTTPStatusError as e:
            logger.warning(
                "Error fetching files for folder %s: HTTP %s",
                folder_id,
                e.response.status_code,
            )
            return ListingResult.failure(f"HTTP {e.response.status_code}")
        except httpx.HTTPError as e:
            logger.warning("Error fetching files for folder %s: %s", folder_id, e)
            return ListingResult.failure(str(e) or type(e).__name__)
        except ValueError as e:
            logger.warning("Error decoding file list for folder %s: %s", folder_id, e)
            return ListingResult.failure(f"invalid response: {e}")

        if data.get("nextPageToken"):
            logger.warning(
                "Folder %s has more than %d children; only the first page is shown",
                folder_id,
                self._settings.page_size,
            )

        return ListingResult.success(entries)
