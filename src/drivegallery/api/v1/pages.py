# Pages router — create a gallery page, type, submit, poll.
# Created: 2026-10-19

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from drivegallery import page_state
from drivegallery.api.v1.schemas.common import ErrorResponse
from drivegallery.api.v1.schemas.pages import FolderLinkInput, PageStateResponse
from drivegallery.controller import InvalidTransition, PageController

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Pages"], responses={404: {"model": ErrorResponse}})


def _response(page_id: str, controller: PageController) -> PageStateResponse:
    return PageStateResponse(page_id=page_id, **controller.snapshot())


def _get_or_404(page_id: str) -> PageController:
    controller = page_state.get_page(page_id)
    if controller is None:
        raise HTTPException(status_code=404, detail="Page not found")
    return controller


@router.post("/pages", response_model=PageStateResponse, status_code=201)
async def create_page():
    """Start a new gallery page."""
    page_id, controller = page_state.create_page()
    return _response(page_id, controller)


@router.get("/pages/{page_id}", response_model=PageStateResponse)
async def get_page(page_id: str):
    """Current page state. Poll this while a fetch is running."""
    return _response(page_id, _get_or_404(page_id))


@router.post(
    "/pages/{page_id}/input",
    response_model=PageStateResponse,
    responses={409: {"model": ErrorResponse}},
)
async def update_input(page_id: str, body: FolderLinkInput):
    """Record the link field's new value and clear any error."""
    controller = _get_or_404(page_id)
    try:
        controller.handle_input(body.folder_link)
    except InvalidTransition as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _response(page_id, controller)


@router.post(
    "/pages/{page_id}/submit",
    response_model=PageStateResponse,
    responses={409: {"model": ErrorResponse}},
)
async def submit_link(page_id: str, body: FolderLinkInput | None = None):
    """Validate the link; when valid, the fetch starts after a short pause.

    A ``folder_link`` in the body is recorded first, so the link that gets
    validated is the one on screen even if an earlier input call is late.
    """
    controller = _get_or_404(page_id)
    try:
        sent_link = body is not None and "folder_link" in body.model_fields_set
        if sent_link and controller.can_submit:
            controller.handle_input(body.folder_link)
        folder_id = controller.submit()
    except InvalidTransition as e:
        raise HTTPException(status_code=409, detail=str(e))

    if folder_id is not None:
        page_state.start_fetch(controller, folder_id)
        logger.info("Page %s: fetching folder %s", page_id, folder_id)

    return _response(page_id, controller)
