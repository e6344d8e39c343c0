"""
Tests for building the remote snapshot.
"""
from unittest.mock import MagicMock, call

import pytest

from s3upload.exceptions import TransportError
from s3upload.models import ListPage, RemoteObjectRecord
from s3upload.remote_index import RemoteIndex

def page(keys, truncated):
    return ListPage(
        records=[RemoteObjectRecord(key=k, etag=f'"{k}-etag"') for k in keys],
        is_truncated=truncated
    )

def test_follows_marker_until_not_truncated():
    transport = MagicMock()
    transport.list_objects.side_effect = [
        page(["a", "b"], True),
        page(["c", "d"], True),
        page(["e"], False),
    ]
    
    index = RemoteIndex.build(transport, prefix="backups/", page_size=2)
    
    assert len(index) == 5
    assert index.get("c") == '"c-etag"'
    assert transport.list_objects.call_args_list == [
        call(prefix="backups/", marker="", max_keys=2),
        call(prefix="backups/", marker="b", max_keys=2),
        call(prefix="backups/", marker="d", max_keys=2),
    ]

def test_default_page_size_is_1000():
    transport = MagicMock()
    transport.list_objects.return_value = page([], False)
    
    index = RemoteIndex.build(transport)
    
    assert len(index) == 0
    transport.list_objects.assert_called_once_with(prefix="", marker="", max_keys=1000)

def test_page_failure_aborts_build():
    transport = MagicMock()
    transport.list_objects.side_effect = [
        page(["a"], True),
        TransportError("boom"),
    ]
    
    with pytest.raises(TransportError):
        RemoteIndex.build(transport)

def test_truncated_empty_page_is_an_error():
    transport = MagicMock()
    transport.list_objects.return_value = page([], True)
    
    with pytest.raises(TransportError):
        RemoteIndex.build(transport)

def test_paginates_real_listing(s3_transport, mock_aws):
    for i in range(5):
        mock_aws.put_object(Bucket='test-bucket', Key=f"backups/f{i}.txt", Body=b"x")
    mock_aws.put_object(Bucket='test-bucket', Key="elsewhere/g.txt", Body=b"x")
    
    index = RemoteIndex.build(s3_transport, prefix="backups/", page_size=2)
    
    assert sorted(index) == [f"backups/f{i}.txt" for i in range(5)]
    assert "elsewhere/g.txt" not in index
    assert index.get("backups/f0.txt") == '"9dd4e461268c8034f5c8564e155c67a6"'
