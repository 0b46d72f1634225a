"""Admin HTTP routes for the SEO settings form.

Endpoints:
- GET /admin/seo: render the settings form
- POST /admin/seo: save submitted settings (action=save_seo_settings), re-render
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse

from cms_seo.admin.form import handle_admin_request
from cms_seo.app.container import build_container
from cms_seo.domain.errors import SettingsStoreError
from cms_seo.ports import SettingsStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["seo"])


def get_settings_store() -> SettingsStore:
    return build_container().store


@router.get("/seo", response_class=HTMLResponse)
def show_seo_settings(store: SettingsStore = Depends(get_settings_store)) -> HTMLResponse:
    return HTMLResponse(handle_admin_request(store, method="GET"))


@router.post("/seo", response_class=HTMLResponse)
async def save_seo_settings(
    request: Request,
    store: SettingsStore = Depends(get_settings_store),
) -> HTMLResponse:
    form = await request.form()
    try:
        # store I/O is blocking file access; keep it off the event loop
        page = await run_in_threadpool(handle_admin_request, store, method="POST", form=form)
    except SettingsStoreError as e:
        logger.error("Saving SEO settings failed: %s", e)
        raise HTTPException(status_code=500, detail="Could not save SEO settings") from e
    return HTMLResponse(page)
