"""
Module resolving the Content-Type an object is stored with.
"""
import mimetypes
import os
from typing import Dict, Iterable, Optional, Tuple, Union

DEFAULT_BINARY_TYPE = "application/octet-stream"


class ContentTypeResolver:
    """Maps file extensions to MIME types."""
    
    def __init__(self, include_unknown: bool = False,
                 extra_types: Optional[Union[Dict[str, str], Iterable[Tuple[str, str]]]] = None):
        """Initialize the resolver.
        
        Args:
            include_unknown: Fall back to application/octet-stream for
                extensions with no known type instead of returning None
            extra_types: Extension to MIME type overrides, e.g. {".md": "text/markdown"}
        """
        self.include_unknown = include_unknown
        # Private table built from Python's defaults only; host mime.types
        # files are not read.
        self._types = dict(mimetypes.MimeTypes().types_map[True])
        for ext, content_type in dict(extra_types or ()).items():
            if not ext.startswith('.'):
                ext = '.' + ext
            self._types[ext] = content_type
            self._types[ext.lower()] = content_type
            
    def resolve(self, file_name: str) -> Optional[str]:
        """Return the Content-Type for a file name, or None if it must not be uploaded."""
        ext = os.path.splitext(file_name)[1]
        content_type = None
        if ext:
            content_type = self._types.get(ext) or self._types.get(ext.lower())
            
        if content_type is None and self.include_unknown:
            return DEFAULT_BINARY_TYPE
        return content_type
