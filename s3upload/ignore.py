"""
Rules deciding which local directories and files take part in a sync.
"""
from typing import Iterable

LOST_AND_FOUND = "lost+found"


class IgnoreFilter:
    """Pure predicates over entry names."""
    
    def __init__(self, ignore_names: Iterable[str] = (), recursive: bool = False):
        self.ignore_names = frozenset(ignore_names)
        self.recursive = recursive
        
    def should_descend(self, directory_name: str) -> bool:
        """Check whether the walker may enter a sub-directory."""
        if not self.recursive:
            return False
        if directory_name.startswith(('.', '_')):
            return False
        if directory_name in self.ignore_names:
            return False
        if directory_name == LOST_AND_FOUND:
            return False
        return True
        
    def should_skip_file(self, file_name: str) -> bool:
        return file_name in self.ignore_names
