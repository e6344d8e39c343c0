"""
Module deciding whether a local file differs from the object in the bucket.
"""
import hashlib
import logging

from .models import SyncDecision
from .remote_index import RemoteIndex

logger = logging.getLogger(__name__)


def compute_etag(data: bytes) -> str:
    """Return the S3 ETag of a single-part upload of ``data``.
    
    The value is the lowercase hex MD5 digest wrapped in double quotes,
    the exact form S3 reports in listings.
    """
    return f'"{hashlib.md5(data).hexdigest()}"'


class UploadDecider:
    """Compares local content against a RemoteIndex snapshot."""
    
    def __init__(self, remote_index: RemoteIndex):
        self.remote_index = remote_index
        
    def decide(self, s3_key: str, data: bytes) -> SyncDecision:
        """Decide whether a file must be uploaded.
        
        Args:
            s3_key: Destination key of the file
            data: Full file contents
            
        Returns:
            SyncDecision.UPLOAD_REQUIRED when the key is missing or its ETag
            differs, SyncDecision.SKIP when the contents are identical
        """
        remote_etag = self.remote_index.get(s3_key)
        if remote_etag is None:
            logger.debug(f"Not found in S3 bucket: {s3_key}")
            return SyncDecision.UPLOAD_REQUIRED
            
        local_etag = compute_etag(data)
        if local_etag != remote_etag:
            logger.debug(
                f"Need to upload {s3_key}: expected ETag = {local_etag}, "
                f"actual = {remote_etag}"
            )
            return SyncDecision.UPLOAD_REQUIRED
            
        return SyncDecision.SKIP
