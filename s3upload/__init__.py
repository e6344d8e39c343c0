from .content_type import ContentTypeResolver
from .decider import UploadDecider, compute_etag
from .exceptions import ConfigurationError, FilesystemError, SyncError, TransportError
from .ignore import IgnoreFilter
from .models import SyncConfig, SyncDecision, SyncSummary
from .remote_index import RemoteIndex
from .scanner import TreeWalker
from .syncer import DirectorySync
from .transport import S3Transport

__version__ = "0.1.0"

__all__ = [
    "ContentTypeResolver",
    "UploadDecider",
    "compute_etag",
    "ConfigurationError",
    "FilesystemError",
    "SyncError",
    "TransportError",
    "IgnoreFilter",
    "SyncConfig",
    "SyncDecision",
    "SyncSummary",
    "RemoteIndex",
    "TreeWalker",
    "DirectorySync",
    "S3Transport",
]
