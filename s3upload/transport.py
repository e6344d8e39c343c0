"""
Module wrapping the S3 client calls used by the sync run.
"""
import logging
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception,
    before_log,
    after_log
)

from .exceptions import TransportError
from .models import DEFAULT_ACL, ListPage, RemoteObjectRecord

logger = logging.getLogger(__name__)

LIST_PAGE_SIZE = 1000


def is_retryable_error(exception: BaseException) -> bool:
    """Check if an exception should trigger a retry.
    
    Args:
        exception: The exception to check
        
    Returns:
        True if the error is retryable, False otherwise
    """
    if isinstance(exception, ClientError):
        error_code = exception.response.get('Error', {}).get('Code')
        return error_code in {
            'RequestTimeout',
            'RequestTimeoutException',
            'PriorRequestNotComplete',
            'ConnectionError',
            'ThrottlingException',
            'ThrottledException',
            'ServiceUnavailable',
            'SlowDown',
            'Throttling',
            '5XX'
        }
    return False


class S3Transport:
    """Lists and stores objects in a single S3 bucket."""
    
    def __init__(self, bucket: str, region: Optional[str] = None,
                 endpoint_url: Optional[str] = None, client=None):
        """Initialize the transport.
        
        Args:
            bucket: S3 bucket name
            region: AWS region; resolved from the environment when None
            endpoint_url: Alternative endpoint for S3-compatible stores
            client: Pre-built boto3 S3 client, mainly for tests
        """
        self.bucket = bucket
        if client is None:
            try:
                client = boto3.client('s3', region_name=region,
                                      endpoint_url=endpoint_url)
            except (BotoCoreError, ClientError) as e:
                raise TransportError(f"Could not create S3 client: {e}") from e
        self.s3_client = client
        
    @retry(
        retry=retry_if_exception(is_retryable_error),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=4, max=10),
        before=before_log(logger, logging.DEBUG),
        after=after_log(logger, logging.DEBUG),
        reraise=True
    )
    def _list_objects(self, prefix: str, marker: str, max_keys: int) -> dict:
        params = {'Bucket': self.bucket, 'MaxKeys': max_keys}
        if prefix:
            params['Prefix'] = prefix
        if marker:
            params['Marker'] = marker
        return self.s3_client.list_objects(**params)
        
    @retry(
        retry=retry_if_exception(is_retryable_error),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=4, max=10),
        before=before_log(logger, logging.DEBUG),
        after=after_log(logger, logging.DEBUG),
        reraise=True
    )
    def _put_object(self, key: str, data: bytes, content_type: str,
                    acl: str) -> dict:
        return self.s3_client.put_object(
            Bucket=self.bucket,
            Key=key,
            Body=data,
            ContentType=content_type,
            ACL=acl
        )
        
    def list_objects(self, prefix: str = "", marker: str = "",
                     max_keys: int = LIST_PAGE_SIZE) -> ListPage:
        """Fetch one page of the flat (delimiter-less) bucket listing.
        
        Args:
            prefix: Only keys starting with this prefix are listed
            marker: Listing starts after this key
            max_keys: Maximum number of entries in the page
            
        Returns:
            ListPage with the entries and the truncation flag
            
        Raises:
            TransportError: If the request fails
        """
        try:
            response = self._list_objects(prefix, marker, max_keys)
        except (BotoCoreError, ClientError) as e:
            raise TransportError(
                f"Error listing s3://{self.bucket}/{prefix} after '{marker}': {e}"
            ) from e
            
        records = [
            RemoteObjectRecord(key=item['Key'], etag=item['ETag'])
            for item in response.get('Contents', [])
        ]
        return ListPage(records=records,
                        is_truncated=bool(response.get('IsTruncated')))
        
    def put_object(self, key: str, data: bytes, content_type: str,
                   acl: str = DEFAULT_ACL) -> None:
        """Store an object, replacing any existing object with the same key.
        
        Args:
            key: S3 object key
            data: Object contents
            content_type: Content-Type stored with the object
            acl: Canned ACL for the object
            
        Raises:
            TransportError: If the upload fails
        """
        try:
            self._put_object(key, data, content_type, acl)
        except (BotoCoreError, ClientError) as e:
            raise TransportError(
                f"Error uploading s3://{self.bucket}/{key}: {e}"
            ) from e
