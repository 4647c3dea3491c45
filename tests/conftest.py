"""Shared fixtures for pybig tests."""

import pytest


@pytest.fixture(autouse=True)
def clean_locale_env(monkeypatch):
    """Keep the host LANG from leaking into the tests."""
    monkeypatch.delenv("LANG", raising=False)


@pytest.fixture
def sized_tree(tmp_path):
    """Create a directory with files of 10, 2048 and 5_000_000 bytes."""
    root = tmp_path / "data"
    nested = root / "nested"
    nested.mkdir(parents=True)
    (root / "small.txt").write_bytes(b"x" * 10)
    (root / "medium.log").write_bytes(b"x" * 2048)
    with open(nested / "large.bin", "wb") as f:
        f.truncate(5_000_000)
    return root
