"""
Module containing data models for the sync tool.
"""
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Mapping, FrozenSet, Tuple, Union

from .exceptions import ConfigurationError

DEFAULT_ACL = "private"

ContentTypePairs = Tuple[Tuple[str, str], ...]


def _freeze_content_types(value: Union[Mapping[str, str], ContentTypePairs, None]) -> ContentTypePairs:
    """Check an extension to MIME type mapping and return it as sorted pairs."""
    if not value:
        return ()
    if isinstance(value, Mapping):
        items = list(value.items())
    elif isinstance(value, (list, tuple)) and all(
            isinstance(pair, (list, tuple)) and len(pair) == 2 for pair in value):
        items = [tuple(pair) for pair in value]
    else:
        raise ConfigurationError(
            f"content_types must map extensions to mime types, got {value!r}"
        )
    for ext, content_type in items:
        if not isinstance(ext, str) or not isinstance(content_type, str):
            raise ConfigurationError(
                f"content_types entries must be strings, got {ext!r}: {content_type!r}"
            )
    return tuple(sorted(items))


@dataclass(frozen=True)
class SyncConfig:
    """Settings for a single sync run."""
    bucket: str
    local_dir: Path
    recursive: bool = False
    include_unknown_mime_types: bool = False
    ignore_names: FrozenSet[str] = frozenset()
    s3_prefix: str = ""
    region: Optional[str] = None
    endpoint_url: Optional[str] = None
    acl: str = DEFAULT_ACL
    extra_content_types: ContentTypePairs = ()

    def __post_init__(self):
        """Validate the configuration and normalize the key prefix."""
        if not self.bucket:
            raise ConfigurationError("bucket cannot be empty")
        if not str(self.local_dir):
            raise ConfigurationError("local_dir cannot be empty")
        for name in ('region', 'endpoint_url'):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise ConfigurationError(f"{name} must be a string, got {value!r}")
        if not isinstance(self.acl, str) or not self.acl:
            raise ConfigurationError(f"acl must be a non-empty string, got {self.acl!r}")

        object.__setattr__(self, 'local_dir', Path(self.local_dir))
        object.__setattr__(self, 'ignore_names', frozenset(self.ignore_names))
        object.__setattr__(self, 'extra_content_types',
                           _freeze_content_types(self.extra_content_types))
        if self.s3_prefix and not self.s3_prefix.endswith('/'):
            object.__setattr__(self, 's3_prefix', self.s3_prefix + '/')


@dataclass(frozen=True)
class RemoteObjectRecord:
    """An object already present in the bucket."""
    key: str
    etag: str


@dataclass(frozen=True)
class LocalFileEntry:
    """A directory entry found while walking the local tree."""
    relative_path: str
    absolute_path: Path
    is_directory: bool
    is_symlink: bool


@dataclass(frozen=True)
class LocalFile:
    """A regular file selected for comparison, with its destination key."""
    entry: LocalFileEntry
    s3_key: str

    @property
    def name(self) -> str:
        return self.entry.absolute_path.name


class SyncDecision(Enum):
    UPLOAD_REQUIRED = "upload_required"
    SKIP = "skip"


@dataclass(frozen=True)
class ListPage:
    """One page of a bucket listing."""
    records: List[RemoteObjectRecord]
    is_truncated: bool


@dataclass
class SyncSummary:
    """Represents a summary of a sync run."""
    files_examined: int = 0
    uploaded: List[str] = field(default_factory=list)
    skipped_identical: int = 0
    skipped_unknown_type: List[str] = field(default_factory=list)

    @property
    def uploaded_count(self) -> int:
        return len(self.uploaded)
