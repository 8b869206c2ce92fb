"""Stash implementation for Twig."""

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List

from twig.core.errors import MetadataCorrupted
from twig.core.index import IndexEntry

logger = logging.getLogger(__name__)


@dataclass
class StashEntry:
    """A saved copy of the index, with the time it was saved."""
    timestamp: str
    files: List[IndexEntry] = field(default_factory=list)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'timestamp': self.timestamp,
            'files': [entry.to_dict() for entry in self.files],
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'StashEntry':
        """Create from dictionary."""
        return cls(
            timestamp=data['timestamp'],
            files=[IndexEntry.from_dict(item) for item in data['files']],
        )
    
    def __repr__(self) -> str:
        return f"StashEntry({self.timestamp}, files={len(self.files)})"


class StashManager:
    """
    Append-only stash log for a repository.
    
    Pushing saves the staged entries to .twig/stash and empties the index.
    HEAD and the object store are not touched, so every stashed digest
    stays resolvable.
    """
    
    def __init__(self, repo):
        """
        Initialize stash manager.
        
        Args:
            repo: Repository instance
        """
        self.repo = repo
        self.stash_file = repo.stash_file
    
    def load(self) -> List[StashEntry]:
        """
        Read the stash log, oldest first.
        
        Raises:
            MetadataCorrupted: If the log cannot be parsed
        """
        data = self.repo.read_json(self.stash_file)
        try:
            return [StashEntry.from_dict(entry) for entry in data]
        except (TypeError, KeyError) as e:
            raise MetadataCorrupted(self.stash_file, str(e)) from e
    
    def _save(self, stashes: List[StashEntry]) -> None:
        data = [entry.to_dict() for entry in stashes]
        self.repo.write_metadata(self.stash_file, json.dumps(data))
    
    def push(self) -> StashEntry:
        """
        Save the current index to the stash log and clear the index.
        
        Returns:
            StashEntry: The appended entry (may have no files)
        """
        index = self.repo.index
        entry = StashEntry(
            timestamp=datetime.now(timezone.utc).isoformat(),
            files=index.read_all(),
        )
        
        stashes = self.load()
        stashes.append(entry)
        self._save(stashes)
        index.clear()
        
        logger.debug("stashed %d file entries, log size %d", len(entry.files), len(stashes))
        return entry
    
    def __len__(self) -> int:
        return len(self.load())
