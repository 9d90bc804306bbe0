import logging
from pathlib import Path
from typing import Tuple

import typer
from rich.console import Console
from rich.logging import RichHandler

from bookmark_manager.models import Store, StoreError
from bookmark_manager.tasks.io import config_path, load_store, save_store
from bookmark_manager.tasks.opener import get_opener

logger = logging.getLogger(__name__)

app = typer.Typer(
    no_args_is_help=True, help="Keep a small list of named URL bookmarks."
)


def setup_logging(verbose: bool = False) -> None:
    """Sends package logs to stderr through rich, once per process."""
    package_logger = logging.getLogger("bookmark_manager")
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True), show_time=False, show_path=False
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _open_store() -> Tuple[Path, Store]:
    """Locates and loads the store, aborting the command if either fails."""
    try:
        filepath = config_path()
        return filepath, load_store(filepath)
    except StoreError as e:
        logger.error(str(e))
        raise typer.Exit(code=1)


def _persist(store: Store, filepath: Path) -> None:
    try:
        save_store(store, filepath)
    except OSError as e:
        logger.error(f"Could not save bookmarks to {filepath}: {e}")
        raise typer.Exit(code=1)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log what the tool is doing to stderr."
    ),
):
    setup_logging(verbose)


@app.command()
def add(
    name: str = typer.Argument(..., help="Label to store the bookmark under."),
    url: str = typer.Argument(..., help="The URL to bookmark."),
):
    """
    Append a bookmark. Names are not required to be unique.
    """
    filepath, store = _open_store()
    store.add(name, url)
    logger.info(f"Added {name!r} -> {url}")
    _persist(store, filepath)


@app.command("list")
def list_bookmarks():
    """
    Print bookmark names, sorted, one per line.
    """
    _, store = _open_store()
    for name in store.sorted_names():
        typer.echo(name)


@app.command("open")
def open_bookmark(
    name: str = typer.Argument(..., help="Name of the bookmark to open."),
):
    """
    Open a bookmark's URL with the system's default handler.
    """
    _, store = _open_store()
    bookmark = store.find(name)
    if bookmark is None:
        typer.echo(f'could not find "{name}"')
        return
    logger.info(f"Opening {bookmark.url}")
    get_opener().open(bookmark.url)


@app.command()
def remove(
    name: str = typer.Argument(..., help="Name of the bookmark to remove."),
):
    """
    Remove the first bookmark with the given name. Does nothing if there is none.
    """
    filepath, store = _open_store()
    removed = store.remove(name)
    if removed is None:
        logger.debug(f"No bookmark named {name!r}, nothing to remove")
        return
    logger.info(f"Removed {removed.name!r} -> {removed.url}")
    _persist(store, filepath)


if __name__ == "__main__":
    app()
