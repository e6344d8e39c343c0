"""
Module for building the snapshot of objects already in the bucket.
"""
import logging
from typing import Dict, Iterator, Optional

from .exceptions import TransportError
from .transport import LIST_PAGE_SIZE, S3Transport

logger = logging.getLogger(__name__)


class RemoteIndex:
    """Read-only map of object key to ETag, taken once before any upload."""
    
    def __init__(self, etags: Optional[Dict[str, str]] = None):
        self._etags: Dict[str, str] = dict(etags or {})
        
    @classmethod
    def build(cls, transport: S3Transport, prefix: str = "",
              page_size: int = LIST_PAGE_SIZE) -> "RemoteIndex":
        """List every object under a prefix, following the marker until the
        listing is no longer truncated.
        
        Args:
            transport: Transport used for the listing requests
            prefix: Key prefix the listing is scoped to
            page_size: Number of entries requested per page
            
        Returns:
            The populated RemoteIndex
            
        Raises:
            TransportError: If any page request fails; no partial index is returned
        """
        etags: Dict[str, str] = {}
        marker = ""
        while True:
            page = transport.list_objects(prefix=prefix, marker=marker,
                                          max_keys=page_size)
            for record in page.records:
                etags[record.key] = record.etag
                marker = record.key
                
            logger.debug(f"{len(etags)} objects loaded")
            
            if not page.is_truncated:
                break
            if not page.records:
                raise TransportError(
                    f"Listing after '{marker}' was truncated but returned no objects"
                )
                
        return cls(etags)
        
    def get(self, key: str) -> Optional[str]:
        """Return the ETag stored for a key, or None if the key is absent."""
        return self._etags.get(key)
        
    def __contains__(self, key: str) -> bool:
        return key in self._etags
        
    def __len__(self) -> int:
        return len(self._etags)
        
    def __iter__(self) -> Iterator[str]:
        return iter(self._etags)
