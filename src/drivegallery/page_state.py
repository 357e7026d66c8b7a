"""In-memory registry of live gallery pages.

Each page load gets its own ``PageController``. Nothing is persisted: the
registry keeps the most recent ``max_pages`` pages and forgets the oldest.
Background fetch tasks are held here until they finish so they are not
garbage-collected mid-walk.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from collections import OrderedDict

from drivegallery.config import get_settings
from drivegallery.controller import PageController

logger = logging.getLogger(__name__)

_pages: OrderedDict[str, PageController] = OrderedDict()
_fetch_tasks: set[asyncio.Task] = set()


def create_page() -> tuple[str, PageController]:
    """Register a new page and return its ID and controller."""
    settings = get_settings()
    page_id = uuid.uuid4().hex
    controller = PageController(fetch_delay=settings.fetch_delay)
    _pages[page_id] = controller

    while len(_pages) > settings.max_pages:
        evicted, _ = _pages.popitem(last=False)
        logger.debug("Evicted page %s", evicted)

    return page_id, controller


def get_page(page_id: str) -> PageController | None:
    controller = _pages.get(page_id)
    if controller is not None:
        _pages.move_to_end(page_id)
    return controller


def start_fetch(controller: PageController, folder_id: str) -> asyncio.Task:
    """Schedule the delayed fetch for a validated page."""
    task = asyncio.create_task(controller.fetch_after_delay(folder_id))
    _fetch_tasks.add(task)
    task.add_done_callback(_on_fetch_done)
    return task


def _on_fetch_done(task: asyncio.Task) -> None:
    _fetch_tasks.discard(task)
    if not task.cancelled() and task.exception() is not None:
        logger.error("Fetch task failed", exc_info=task.exception())


def clear() -> None:
    """Forget every page. Used by tests."""
    _pages.clear()
    _fetch_tasks.clear()
