from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Form, Request
from fastapi.responses import PlainTextResponse, RedirectResponse, Response
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from photo_catalog.api import jinja_filters
from photo_catalog.catalog import CatalogService
from photo_catalog.core.env import CatalogConfig, configure_logging, load_dotenv_if_present
from photo_catalog.core.formatting import parse_id, photo_label
from photo_catalog.core.models import Photo
from photo_catalog.store import CatalogStoreError, build_store

logger = logging.getLogger(__name__)

load_dotenv_if_present()
configure_logging()

config = CatalogConfig.from_env()
store = build_store(config)
# The web front end never enforces ownership; see CATALOG_ENFORCE_OWNERSHIP
# for the console client.
service = CatalogService(store)

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATE_DIR))
jinja_filters.register_all(templates)

INVALID_PHOTO_ID = "Error: Invalid Photo ID."
MISSING_FIELDS_ERROR = "Update failed: Title and Description are required."
UPDATE_FAILED_ERROR = "Update failed. The photo ID could not be found or updated."
UPDATE_SYSTEM_ERROR = "A system error occurred during the update."


@asynccontextmanager
async def lifespan(_: FastAPI):
    try:
        store.connect()
    except CatalogStoreError:
        logger.exception("Catalog store unavailable at startup; will retry on first request")
    yield
    store.close()


app = FastAPI(title="Photo Catalog", lifespan=lifespan)


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def album_list(request: Request) -> Response:
    try:
        albums = service.find_all_albums()
    except CatalogStoreError:
        logger.exception("Error retrieving albums")
        return PlainTextResponse(
            "An error occurred while loading the album catalog.", status_code=500
        )
    return templates.TemplateResponse(
        request, "index.html", {"title": "Digital Media Catalog", "albums": albums}
    )


@app.get("/album/{album_id}")
def album_details(request: Request, album_id: str) -> Response:
    parsed_id = parse_id(album_id)
    if parsed_id is None:
        return PlainTextResponse("Error: Invalid Album ID.", status_code=404)
    try:
        album = service.find_album_by_id(parsed_id)
    except CatalogStoreError:
        logger.exception("Error retrieving album %s", parsed_id)
        return PlainTextResponse(
            "An error occurred while loading the album details.", status_code=500
        )
    if album is None:
        return PlainTextResponse("Album not found.", status_code=404)
    photo_count = len(album.photos or [])
    return templates.TemplateResponse(
        request,
        "album-details.html",
        {"album": album, "photo_count": photo_count, "photo_label": photo_label(photo_count)},
    )


@app.get("/photo-details/{photo_id}")
def photo_details(request: Request, photo_id: str) -> Response:
    parsed_id = parse_id(photo_id)
    if parsed_id is None:
        return PlainTextResponse(INVALID_PHOTO_ID, status_code=404)
    try:
        photo = service.find_photo_by_id(parsed_id)
    except CatalogStoreError:
        logger.exception("Error retrieving photo %s", parsed_id)
        return PlainTextResponse(
            "An error occurred while loading the photo details.", status_code=500
        )
    if photo is None:
        return PlainTextResponse("Photo not found.", status_code=404)
    return templates.TemplateResponse(request, "photo-details.html", {"photo": photo})


def render_edit_photo_page(
    request: Request,
    photo_id: int,
    error_message: Optional[str] = None,
    submitted: Optional[Photo] = None,
) -> Response:
    """Render the edit form with the photo's current values and an optional error.

    ``submitted`` holds the values from a rejected form post; it fills the form
    when the photo itself can no longer be found.
    """
    try:
        photo = service.find_photo_by_id(photo_id)
    except CatalogStoreError:
        logger.exception("Error loading edit form for photo %s", photo_id)
        return PlainTextResponse("A server error occurred.", status_code=500)
    photo = photo or submitted
    if photo is None:
        return PlainTextResponse("Photo not found.", status_code=404)
    return templates.TemplateResponse(
        request, "edit-photo.html", {"photo": photo, "error_message": error_message}
    )


@app.get("/edit-photo")
def edit_photo_form(request: Request, pid: Optional[str] = None) -> Response:
    photo_id = parse_id(pid)
    if photo_id is None:
        return PlainTextResponse(INVALID_PHOTO_ID, status_code=404)
    return render_edit_photo_page(request, photo_id)


@app.post("/edit-photo")
def edit_photo_submit(
    request: Request,
    photo_id_field: str = Form("", alias="photoId"),
    title: str = Form(""),
    description: str = Form(""),
) -> Response:
    photo_id = parse_id(photo_id_field)
    if photo_id is None:
        return PlainTextResponse(INVALID_PHOTO_ID, status_code=404)

    new_title = title.strip()
    new_description = description.strip()
    submitted = Photo(id=photo_id, title=new_title, description=new_description)
    if not new_title or not new_description:
        return render_edit_photo_page(request, photo_id, MISSING_FIELDS_ERROR, submitted)

    try:
        updated = service.update_photo_details(
            photo_id, {"title": new_title, "description": new_description}
        )
    except CatalogStoreError:
        logger.exception("Error updating photo %s", photo_id)
        return render_edit_photo_page(request, photo_id, UPDATE_SYSTEM_ERROR, submitted)

    if updated is None:
        return render_edit_photo_page(request, photo_id, UPDATE_FAILED_ERROR, submitted)
    return RedirectResponse(url=f"/photo-details/{photo_id}", status_code=303)


# Static mounts go last so the catch-all public mount never shadows a route.
if config.photos_dir.is_dir():
    app.mount("/photos", StaticFiles(directory=config.photos_dir), name="photos")
if config.public_dir.is_dir():
    app.mount("/", StaticFiles(directory=config.public_dir), name="public")
