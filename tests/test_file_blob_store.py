"""Tests for the directory-backed blob store."""

from diet_ledger.adapters.file_blob_store import FileBlobStore


def test_read_missing_key_returns_none(tmp_path) -> None:
    store = FileBlobStore(tmp_path / "data")

    assert store.read("goals") is None


def test_write_creates_directory_and_overwrites(tmp_path) -> None:
    store = FileBlobStore(tmp_path / "data")

    store.write("goals", '{"4": 12}')
    store.write("goals", '{"4": 10}')

    assert store.read("goals") == '{"4": 10}'
    assert sorted(path.name for path in (tmp_path / "data").iterdir()) == [
        "goals.json"
    ]
