import pytest

from bookmark_manager.models import Store


@pytest.fixture
def duplicate_store() -> Store:
    """
    Provides a store holding two bookmarks that share the name "a",
    in the order [{a,u1}, {b,u2}, {a,u3}].
    """
    return Store.model_validate(
        {
            "bookmarks": [
                {"name": "a", "url": "http://example.com/u1"},
                {"name": "b", "url": "http://example.com/u2"},
                {"name": "a", "url": "http://example.com/u3"},
            ]
        }
    )


@pytest.fixture
def home(fs, monkeypatch):
    """
    Points HOME at an empty directory on the fake filesystem.
    """
    fs.create_dir("/home/tester")
    monkeypatch.setenv("HOME", "/home/tester")
    return "/home/tester"
