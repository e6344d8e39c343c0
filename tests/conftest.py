"""
Test fixtures for the sync tool.
"""
import pytest
import boto3
from moto import mock_aws as moto_mock_aws

from s3upload.models import SyncConfig
from s3upload.transport import S3Transport

@pytest.fixture(autouse=True)
def aws_credentials(monkeypatch):
    """Fake credentials so no test can reach a real account."""
    monkeypatch.setenv('AWS_ACCESS_KEY_ID', 'testing')
    monkeypatch.setenv('AWS_SECRET_ACCESS_KEY', 'testing')
    monkeypatch.setenv('AWS_SECURITY_TOKEN', 'testing')
    monkeypatch.setenv('AWS_SESSION_TOKEN', 'testing')
    monkeypatch.setenv('AWS_DEFAULT_REGION', 'us-east-1')

@pytest.fixture
def tmp_upload_dir(tmp_path):
    """Create a temporary directory for test files."""
    upload_dir = tmp_path / "uploads"
    upload_dir.mkdir()
    return upload_dir

@pytest.fixture
def mock_aws():
    """Mock S3 client using moto."""
    with moto_mock_aws():
        s3 = boto3.client('s3', region_name='us-east-1')
        # Create test bucket
        s3.create_bucket(Bucket='test-bucket')
        yield s3

@pytest.fixture
def s3_transport(mock_aws):
    """Create a transport bound to the mocked test bucket."""
    return S3Transport('test-bucket', client=mock_aws)

@pytest.fixture
def make_config(tmp_upload_dir):
    """Build a SyncConfig for the temporary upload directory."""
    def _make(**overrides):
        values = {
            'bucket': 'test-bucket',
            'local_dir': tmp_upload_dir,
            'recursive': True,
        }
        values.update(overrides)
        return SyncConfig(**values)
    return _make

@pytest.fixture
def source_tree(tmp_upload_dir):
    """Create a small nested tree of uploadable files."""
    files = {
        "index.html": "<html></html>",
        "notes.txt": "top level",
        "a/b.txt": "nested",
        "a/deeper/c.css": "body {}",
    }
    for rel_path, content in files.items():
        file_path = tmp_upload_dir / rel_path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content)
    return tmp_upload_dir
