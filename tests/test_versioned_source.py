import pytest

from autops.common.errors import InvalidPathOrUrlError
from autops.common.versioned_source import VersionedSource


def test_new_versioned_source_invalid_path():
    with pytest.raises(InvalidPathOrUrlError):
        VersionedSource("Invalid file path", 1)


def test_fork():
    path = "/path/to/file.zip"
    source = VersionedSource(path, 18)
    assert source.version == 18
    assert source.source_path == path

    forked = source.fork_with_new_version("/new/path/to/file")
    assert forked.version == 19
    assert forked.source_path == "/new/path/to/file"
    assert source.version == 18
    assert source.source_path == path


def test_fork_invalid_path():
    source = VersionedSource("/path/to/file.zip", 18)
    with pytest.raises(InvalidPathOrUrlError):
        source.fork_with_new_version("invalid file path")


def test_url_source_and_setter():
    source = VersionedSource("https://example.com/repo.zip", 1)
    assert source.source_path == "https://example.com/repo.zip"
    source.source_path = "local/file.yml"
    assert source.source_path == "local/file.yml"
    with pytest.raises(InvalidPathOrUrlError):
        source.source_path = "bad path"
    assert source.source_path == "local/file.yml"