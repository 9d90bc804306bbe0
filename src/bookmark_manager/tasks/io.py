import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from bookmark_manager.models import ConfigPathError, MalformedStoreError, Store

logger = logging.getLogger(__name__)

CONFIG_PATH = Path(".config") / "bm" / "config.json"


def config_path() -> Path:
    """Resolves the store location under the user's HOME directory."""
    home = os.environ.get("HOME")
    if home is None:
        raise ConfigPathError("HOME is not set, cannot locate the bookmark store")
    return Path(home) / CONFIG_PATH


def load_store(filepath: Path) -> Store:
    """
    Loads the bookmark store from a JSON file.

    A file that cannot be read yields an empty store. A file that can be read
    but does not hold a valid store raises MalformedStoreError.
    """
    try:
        with open(filepath, "rb") as f:
            raw = f.read()
    except OSError as e:
        logger.debug(f"Could not read {filepath} ({e}), starting with an empty store")
        return Store(bookmarks=[])

    try:
        store = Store.model_validate_json(raw)
    except ValidationError as e:
        raise MalformedStoreError(filepath, str(e)) from e

    logger.debug(f"Loaded {len(store.bookmarks)} bookmarks from {filepath}")
    return store


def save_store(store: Store, filepath: Path) -> None:
    """Writes the whole store to a JSON file, creating parent directories."""
    filepath.parent.mkdir(parents=True, exist_ok=True)
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(store.model_dump(mode="json"), f, indent=2, ensure_ascii=False)
    logger.debug(f"Saved {len(store.bookmarks)} bookmarks to {filepath}")
