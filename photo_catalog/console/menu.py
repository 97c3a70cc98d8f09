from __future__ import annotations

import logging
from typing import Callable, Optional

from photo_catalog.catalog import CatalogService
from photo_catalog.core.formatting import format_long_date, join_values, parse_id
from photo_catalog.core.models import Photo, User
from photo_catalog.store import CatalogStoreError

logger = logging.getLogger(__name__)

MENU = """
=== Main Menu ===
1. Find Photo by ID
2. Update Photo Details
3. Find Album by Name
4. Exit"""


class CatalogConsole:
    """Interactive text menu over a ``CatalogService``.

    ``prompt`` and ``output`` default to ``input`` and ``print`` so tests can
    script a session.
    """

    def __init__(
        self,
        service: CatalogService,
        *,
        prompt: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ):
        self.service = service
        self.prompt = prompt
        self.output = output
        self.user: Optional[User] = None

    def print_photo(self, photo: Photo) -> None:
        self.output(f"Photo ID: {photo.id}")
        self.output(f"Filename: {photo.filename}")
        self.output(f"   Title: {photo.title}")
        self.output(f"    Date: {format_long_date(photo.date)}")
        self.output(f"  Albums: {join_values(photo.albums)}")
        self.output(f"    Tags: {join_values(photo.tags)}")

    def login(self) -> bool:
        username = self.prompt("Username: ")
        password = self.prompt("Password: ")
        self.user = self.service.login(username, password)
        if self.user is None:
            self.output("Invalid username or password.")
            return False
        self.output(f"Welcome, {self.user.username}.")
        return True

    def find_photo(self) -> None:
        photo_id = parse_id(self.prompt("Photo ID? "))
        photo = None
        if photo_id is not None:
            photo = self.service.find_photo_by_id(photo_id, self.user)
        if photo is None:
            self.output("Photo does not exist.")
            return
        self.print_photo(photo)

    def update_photo(self) -> None:
        photo_id = parse_id(self.prompt("Enter photo ID to update: "))
        title = self.prompt("Enter new title (blank to keep): ")
        description = self.prompt("Enter new description (blank to keep): ")
        fields = {
            key: value for key, value in (("title", title), ("description", description)) if value
        }
        if not fields:
            self.output("Nothing to update.")
            return
        updated = None
        if photo_id is not None:
            updated = self.service.update_photo_details(photo_id, fields, self.user)
        if updated is None:
            self.output("Photo not found or could not be updated.")
            return
        self.output("Photo updated successfully.")
        self.print_photo(updated)

    def find_album(self) -> None:
        name = self.prompt("What is the name of the album? ")
        album = self.service.find_album_by_name(name)
        if album is None or not album.photos:
            self.output("Album not found or has no photos.")
            return
        self.output("filename,resolution,tags")
        for photo in album.photos:
            self.output(f"{photo.filename},{photo.resolution},{join_values(photo.tags, ':')}")

    def run(self) -> int:
        """Show the menu until the user exits; returns a process exit code."""
        if self.service.enforce_ownership and not self.login():
            return 1
        actions = {"1": self.find_photo, "2": self.update_photo, "3": self.find_album}
        while True:
            self.output(MENU)
            choice = self.prompt("Enter choice: ").strip()
            if choice == "4":
                self.output("Goodbye!")
                return 0
            action = actions.get(choice)
            if action is None:
                self.output("Invalid choice, please try again.")
                continue
            try:
                action()
            except CatalogStoreError as exc:
                logger.exception("Catalog store error during menu action %s", choice)
                self.output(f"Error: {exc}")
