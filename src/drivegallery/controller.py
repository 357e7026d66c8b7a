# Page Controller — state machine behind the gallery page.
# Created: 2026-10-19
#
# idle -> editing -> validating -> validated -> (1 s pause) -> fetching -> resolved
#
# One controller per loaded page. All mutation happens on the event loop,
# from the API handlers and the fetch task they schedule.

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from drivegallery.enumerator import TraversalResult, walk_folder
from drivegallery.links import FolderLinkError, extract_folder_id, image_urls

logger = logging.getLogger(__name__)

FETCHING_MESSAGE = "Fetching images from folder: {folder_id}"
FETCH_FAILED_MESSAGE = "Failed to fetch images from the folder."
FETCHED_MESSAGE = "Images fetched successfully!"
NO_IMAGES_MESSAGE = "No images found in this folder."

DEFAULT_FETCH_DELAY = 1.0

Walker = Callable[[str], Awaitable[TraversalResult]]


class PageState(str, Enum):
    IDLE = "idle"
    EDITING = "editing"
    VALIDATING = "validating"
    VALIDATED = "validated"
    FETCHING = "fetching"
    RESOLVED = "resolved"


_TRANSITIONS: dict[PageState, frozenset[PageState]] = {
    PageState.IDLE: frozenset({PageState.EDITING, PageState.VALIDATING}),
    PageState.EDITING: frozenset({PageState.EDITING, PageState.VALIDATING}),
    PageState.VALIDATING: frozenset({PageState.EDITING, PageState.VALIDATED}),
    PageState.VALIDATED: frozenset({PageState.FETCHING}),
    PageState.FETCHING: frozenset({PageState.RESOLVED, PageState.EDITING}),
    PageState.RESOLVED: frozenset({PageState.EDITING, PageState.VALIDATING}),
}


class InvalidTransition(RuntimeError):
    """Raised when an event is not allowed in the current state."""

    def __init__(self, current: PageState, target: PageState | str):
        self.current = current
        self.target = target
        name = target.value if isinstance(target, PageState) else target
        super().__init__(f"Cannot go from {current.value} to {name}")


@dataclass
class UIState:
    """Everything the page renders."""

    folder_link: str = ""
    images: list[str] = field(default_factory=list)
    is_validated: bool = False
    error: str | None = None
    success: str | None = None
    folder_id: str | None = None
    skipped_folders: int = 0


class PageController:
    """Drives one gallery page from link input to image grid.

    Args:
        walker: coroutine function returning a ``TraversalResult`` for a
            folder ID. Defaults to ``walk_folder`` with a fresh Drive client.
        fetch_delay: seconds to wait between a successful validation and the
            start of the walk.
    """

    def __init__(self, walker: Walker | None = None, fetch_delay: float = DEFAULT_FETCH_DELAY):
        self._walker = walker or walk_folder
        self.fetch_delay = fetch_delay
        self.state = PageState.IDLE
        self.ui = UIState()

    # -- derived view --

    @property
    def view(self) -> str:
        return "grid" if self.ui.images else "form"

    @property
    def can_submit(self) -> bool:
        return not self.ui.is_validated and self.view == "form"

    def snapshot(self) -> dict[str, Any]:
        """Serialize for the API."""
        return {
            "state": self.state.value,
            "view": self.view,
            "can_submit": self.can_submit,
            "folder_link": self.ui.folder_link,
            "folder_id": self.ui.folder_id,
            "images": list(self.ui.images),
            "is_validated": self.ui.is_validated,
            "error": self.ui.error,
            "success": self.ui.success,
            "skipped_folders": self.ui.skipped_folders,
        }

    # -- transitions --

    def _go(self, target: PageState) -> None:
        if target not in _TRANSITIONS[self.state]:
            raise InvalidTransition(self.state, target)
        if self.state is PageState.RESOLVED and self.ui.images:
            # The grid replaces the form for good.
            raise InvalidTransition(self.state, target)
        logger.debug("Page state %s -> %s", self.state.value, target.value)
        self.state = target

    def handle_input(self, value: str) -> None:
        """User typed in the link field."""
        if self.view == "grid":
            raise InvalidTransition(self.state, "input")
        self.ui.folder_link = value
        self.ui.error = None
        if self.state not in (PageState.VALIDATED, PageState.FETCHING):
            self._go(PageState.EDITING)

    def submit(self) -> str | None:
        """Validate the current link.

        Returns:
            The extracted folder ID, or None when validation failed (the
            message is in ``ui.error``). The caller starts the fetch.

        Raises:
            InvalidTransition: if the submit control is disabled.
        """
        if not self.can_submit:
            raise InvalidTransition(self.state, PageState.VALIDATING)
        self._go(PageState.VALIDATING)

        try:
            folder_id = extract_folder_id(self.ui.folder_link)
        except FolderLinkError as e:
            self.ui.error = str(e)
            self.ui.is_validated = False
            self._go(PageState.EDITING)
            return None

        self.ui.folder_id = folder_id
        self.ui.is_validated = True
        self.ui.error = None
        self.ui.success = FETCHING_MESSAGE.format(folder_id=folder_id)
        self._go(PageState.VALIDATED)
        return folder_id

    async def fetch(self, folder_id: str) -> None:
        """Walk the folder and show what was found."""
        self._go(PageState.FETCHING)
        try:
            result = await self._walker(folder_id)
            images = image_urls(result.files)
        except Exception as e:
            logger.exception("Walk of folder %s failed", folder_id)
            result = TraversalResult(failures={folder_id: str(e)}, root_failed=True)

        if result.root_failed:
            self.ui.success = None
            self.ui.skipped_folders = 0
            self.ui.is_validated = False
            self.ui.error = FETCH_FAILED_MESSAGE
            self.ui.images = []
            self._go(PageState.EDITING)
            return

        self.ui.skipped_folders = result.skipped_folders
        self.ui.images = images
        if images:
            self.ui.success = FETCHED_MESSAGE
        else:
            self.ui.success = NO_IMAGES_MESSAGE
            self.ui.is_validated = False
        self._go(PageState.RESOLVED)
        logger.info(
            "Folder %s: %d images (%d files, %d folders skipped)",
            folder_id,
            len(images),
            len(result.files),
            self.ui.skipped_folders,
        )

    async def fetch_after_delay(self, folder_id: str) -> None:
        """Pause for ``fetch_delay`` seconds, then ``fetch``."""
        await asyncio.sleep(self.fetch_delay)
        await self.fetch(folder_id)
