"""
Module for walking the local directory tree and mapping files to S3 keys.
"""
import logging
import os
from pathlib import Path
from typing import Iterator, List, Tuple

from .exceptions import FilesystemError
from .ignore import IgnoreFilter
from .models import LocalFile, LocalFileEntry

logger = logging.getLogger(__name__)


class TreeWalker:
    """Walks a local tree depth-first and yields the files to compare."""
    
    def __init__(self, ignore_filter: IgnoreFilter):
        """Initialize the tree walker.
        
        Args:
            ignore_filter: Rules for directories to enter and files to skip
        """
        self.ignore_filter = ignore_filter
        
    def list_directory(self, directory: Path, relative_dir: str = "") -> List[LocalFileEntry]:
        """List the immediate entries of a directory with a single scandir call.
        
        Args:
            directory: Directory to list
            relative_dir: Path of the directory relative to the walk root
            
        Returns:
            Entries in the order the filesystem returned them
            
        Raises:
            FilesystemError: If the directory cannot be listed
        """
        try:
            with os.scandir(directory) as it:
                return [
                    LocalFileEntry(
                        relative_path=f"{relative_dir}{entry.name}",
                        absolute_path=Path(entry.path),
                        is_directory=entry.is_dir(follow_symlinks=False),
                        is_symlink=entry.is_symlink()
                    )
                    for entry in it
                ]
        except OSError as e:
            raise FilesystemError(f"Error listing directory {directory}: {e}") from e
            
    def walk(self, directory: Path, s3_key_prefix: str = "") -> Iterator[LocalFile]:
        """Yield every non-ignored regular file below a directory.
        
        Directories are taken from an explicit stack of
        (directory, key prefix, relative path) triples. Symlinks are never
        followed or yielded.
        
        Args:
            directory: Root of the walk
            s3_key_prefix: Key prefix for files directly inside the root
            
        Raises:
            FilesystemError: If a directory cannot be listed
        """
        stack: List[Tuple[Path, str, str]] = [(Path(directory), s3_key_prefix, "")]
        
        while stack:
            current, key_prefix, relative_dir = stack.pop()
            logger.debug(f"Processing directory {current}")
            
            subdirs = []
            for entry in self.list_directory(current, relative_dir):
                name = entry.absolute_path.name
                
                if entry.is_symlink:
                    logger.debug(f"Skipping symlink {entry.absolute_path}")
                    continue
                    
                if entry.is_directory:
                    if self.ignore_filter.should_descend(name):
                        subdirs.append((entry.absolute_path,
                                        f"{key_prefix}{name}/",
                                        f"{entry.relative_path}/"))
                    continue
                    
                if not entry.absolute_path.is_file():
                    logger.debug(f"Skipping special file {entry.absolute_path}")
                    continue
                    
                if self.ignore_filter.should_skip_file(name):
                    logger.debug(f"Ignoring file {entry.absolute_path}")
                    continue
                    
                yield LocalFile(entry=entry, s3_key=f"{key_prefix}{name}")
                
            # Reversed so sub-directories come off the stack in listing order
            stack.extend(reversed(subdirs))
            
    @staticmethod
    def read_file(local_file: LocalFile) -> bytes:
        """Read the full contents of a file into memory.
        
        Raises:
            FilesystemError: If the file cannot be read
        """
        try:
            return local_file.entry.absolute_path.read_bytes()
        except OSError as e:
            raise FilesystemError(
                f"Error reading file {local_file.entry.absolute_path}: {e}"
            ) from e
