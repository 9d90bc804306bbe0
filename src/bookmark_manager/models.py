from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel


class StoreError(Exception):
    """Base class for problems locating or reading the bookmark store."""


class ConfigPathError(StoreError):
    pass


class MalformedStoreError(StoreError):
    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"could not parse bookmark store {path}: {reason}")


class Bookmark(BaseModel):
    name: str
    url: str


class Store(BaseModel):
    bookmarks: List[Bookmark]

    def find(self, name: str) -> Optional[Bookmark]:
        """Returns the first bookmark called `name`, in stored order."""
        for bookmark in self.bookmarks:
            if bookmark.name == name:
                return bookmark
        return None

    def add(self, name: str, url: str) -> Bookmark:
        bookmark = Bookmark(name=name, url=url)
        self.bookmarks.append(bookmark)
        return bookmark

    def remove(self, name: str) -> Optional[Bookmark]:
        """
        Removes the first bookmark called `name` and returns it.
        Returns None and leaves the store untouched when nothing matches.
        """
        for idx, bookmark in enumerate(self.bookmarks):
            if bookmark.name == name:
                return self.bookmarks.pop(idx)
        return None

    def sorted_names(self) -> List[str]:
        ordered = sorted(self.bookmarks, key=lambda b: b.name)
        return [bookmark.name for bookmark in ordered]
