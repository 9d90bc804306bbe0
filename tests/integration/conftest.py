import json
from typing import List

import pytest

from bookmark_manager.tasks.opener import UrlOpener

CONFIG_FILE = "/home/tester/.config/bm/config.json"


class RecordingOpener(UrlOpener):
    def __init__(self):
        self.opened: List[str] = []

    def open(self, url: str) -> None:
        self.opened.append(url)


@pytest.fixture
def write_config(fs, home):
    """
    Writes raw bookmark dicts to the config file under the fake HOME.
    """

    def _write(bookmarks):
        fs.create_file(CONFIG_FILE, contents=json.dumps({"bookmarks": bookmarks}))

    return _write


@pytest.fixture
def read_config():
    def _read():
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            return json.load(f)

    return _read


@pytest.fixture
def fake_opener(mocker) -> RecordingOpener:
    """
    Replaces the system URL opener with one that only records URLs.
    """
    opener = RecordingOpener()
    mocker.patch("bookmark_manager.main.get_opener", return_value=opener)
    return opener
