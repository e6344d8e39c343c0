"""
Module for running a one-way sync of a local directory into a bucket.
"""
import logging
from typing import Optional

from .content_type import ContentTypeResolver
from .decider import UploadDecider
from .ignore import IgnoreFilter
from .models import LocalFile, SyncConfig, SyncDecision, SyncSummary
from .remote_index import RemoteIndex
from .scanner import TreeWalker
from .transport import S3Transport

logger = logging.getLogger(__name__)


class DirectorySync:
    """Uploads missing or changed files and skips identical ones."""
    
    def __init__(self, config: SyncConfig, transport: Optional[S3Transport] = None):
        """Initialize the sync run.
        
        Args:
            config: Settings for this run
            transport: Transport to use; built from the config when None
        """
        self.config = config
        self.transport = transport or S3Transport(
            config.bucket,
            region=config.region,
            endpoint_url=config.endpoint_url
        )
        self.walker = TreeWalker(
            IgnoreFilter(config.ignore_names, recursive=config.recursive)
        )
        self.resolver = ContentTypeResolver(
            include_unknown=config.include_unknown_mime_types,
            extra_types=config.extra_content_types
        )
        
    def run(self) -> SyncSummary:
        """Snapshot the bucket, then walk the local tree and upload what differs.
        
        Returns:
            SyncSummary for the run
            
        Raises:
            TransportError: If listing or an upload fails
            FilesystemError: If a directory or file cannot be read
        """
        if self.config.s3_prefix:
            logger.debug(f"s3 prefix = '{self.config.s3_prefix}'")
            
        logger.debug(f"Listing objects in bucket {self.config.bucket}")
        remote_index = RemoteIndex.build(self.transport, self.config.s3_prefix)
        decider = UploadDecider(remote_index)
        
        summary = SyncSummary()
        for local_file in self.walker.walk(self.config.local_dir,
                                           self.config.s3_prefix):
            summary.files_examined += 1
            self._process_file(local_file, decider, summary)
            
        logger.info(
            f"Sync of {self.config.local_dir} to s3://{self.config.bucket}/"
            f"{self.config.s3_prefix} complete: {summary.uploaded_count} uploaded, "
            f"{summary.skipped_identical} identical, "
            f"{len(summary.skipped_unknown_type)} skipped with unknown mime type"
        )
        return summary
        
    def _process_file(self, local_file: LocalFile, decider: UploadDecider,
                      summary: SyncSummary) -> None:
        data = self.walker.read_file(local_file)
        
        if decider.decide(local_file.s3_key, data) is SyncDecision.SKIP:
            logger.debug(
                f"Identical file, no upload required: {local_file.entry.absolute_path}"
            )
            summary.skipped_identical += 1
            return
            
        content_type = self.resolver.resolve(local_file.name)
        if content_type is None:
            logger.debug(f"Unknown mime type, not uploading: {local_file.s3_key}")
            summary.skipped_unknown_type.append(local_file.s3_key)
            return
            
        self.transport.put_object(local_file.s3_key, data, content_type,
                                  acl=self.config.acl)
        logger.info(f"Uploaded {local_file.s3_key}")
        summary.uploaded.append(local_file.s3_key)
