# Gallery page schemas.
# Created: 2026-10-19

from __future__ import annotations

from pydantic import BaseModel, Field

from drivegallery.api.v1.schemas.common import APIResponse


class PageStateResponse(APIResponse):
    """Current state of one gallery page."""

    page_id: str
    state: str
    view: str = "form"  # "form" | "grid"
    can_submit: bool = True
    folder_link: str = ""
    folder_id: str | None = None
    images: list[str] = []
    is_validated: bool = False
    error: str | None = None
    success: str | None = None
    skipped_folders: int = 0


class FolderLinkInput(BaseModel):
    """Current value of the link field."""

    folder_link: str = Field(default="", max_length=2048)
