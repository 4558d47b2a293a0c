"""Static HTML pages for the browser front end."""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse, RedirectResponse

STATIC_DIR = Path(__file__).resolve().parents[2] / "static"
HTML_DIR = STATIC_DIR / "html"

router = APIRouter(tags=["pages"], include_in_schema=False)


@router.get("/")
async def index() -> RedirectResponse:
    return RedirectResponse(url="/contacts")


@router.get("/contacts")
async def contacts_page() -> FileResponse:
    return FileResponse(HTML_DIR / "contacts.html")


@router.get("/contacts/new")
async def new_contact_page() -> FileResponse:
    return FileResponse(HTML_DIR / "new-contact.html")


@router.get("/contacts/manage")
async def manage_contacts_page() -> FileResponse:
    return FileResponse(HTML_DIR / "manage-contacts.html")
