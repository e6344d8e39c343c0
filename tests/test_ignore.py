"""
Tests for the ignore rules.
"""
import pytest

from s3upload.ignore import IgnoreFilter

@pytest.fixture
def ignore_filter():
    return IgnoreFilter({"node_modules", "Thumbs.db"}, recursive=True)

def test_never_descends_when_not_recursive():
    assert not IgnoreFilter(recursive=False).should_descend("photos")

@pytest.mark.parametrize("name", [".git", ".cache", "_drafts", "node_modules", "lost+found"])
def test_excluded_directories(ignore_filter, name):
    assert not ignore_filter.should_descend(name)

def test_descends_into_plain_directory(ignore_filter):
    assert ignore_filter.should_descend("photos")
    assert ignore_filter.should_descend("lost+found2")

def test_skip_file_only_for_exact_ignore_names(ignore_filter):
    assert ignore_filter.should_skip_file("Thumbs.db")
    assert not ignore_filter.should_skip_file("thumbs.db")
    assert not ignore_filter.should_skip_file(".hidden.txt")
