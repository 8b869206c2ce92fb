"""Index (staging area) implementation."""

import json
import logging
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from .errors import MetadataCorrupted

logger = logging.getLogger(__name__)

POLICY_APPEND = 'append'
POLICY_REPLACE = 'replace'
POLICIES = (POLICY_APPEND, POLICY_REPLACE)


@dataclass(frozen=True)
class IndexEntry:
    """A staged file: its path relative to the work tree and its blob digest."""
    path: str
    hash: str
    
    def to_dict(self) -> dict:
        return asdict(self)
    
    @classmethod
    def from_dict(cls, data: dict) -> 'IndexEntry':
        return cls(path=data['path'], hash=data['hash'])
    
    def __repr__(self) -> str:
        return f"IndexEntry({self.hash[:7]} {self.path})"


class Index:
    """
    Twig index (staging area).
    
    The index is an ordered list of entries stored as JSON in .twig/index.
    Each operation reads the file and, when mutating, rewrites it in full.
    
    Repeated adds of the same path follow the staging policy:
    - append: every add appends a new entry, duplicates survive into the commit
    - replace: earlier entries for the path are dropped, the new one goes last
    """
    
    def __init__(self, repo, policy: str = POLICY_APPEND):
        """
        Initialize index view.
        
        Args:
            repo: Repository instance
            policy: Staging policy ('append' or 'replace')
        """
        if policy not in POLICIES:
            raise ValueError(f"Unknown index policy: {policy}")
        self.repo = repo
        self.policy = policy
        self.index_file = repo.index_file
    
    def load(self) -> List[IndexEntry]:
        """
        Read staged entries from disk.
        
        Raises:
            RepositoryNotInitialized: If the index file is missing
            MetadataCorrupted: If the file is not a list of entries
        """
        data = self.repo.read_json(self.index_file)
        try:
            return [IndexEntry.from_dict(item) for item in data]
        except (TypeError, KeyError) as e:
            raise MetadataCorrupted(self.index_file, str(e)) from e
    
    def save(self, entries: Iterable[IndexEntry]) -> None:
        """Rewrite the index file with entries."""
        data = [entry.to_dict() for entry in entries]
        self.repo.write_metadata(self.index_file, json.dumps(data))
    
    def read_all(self) -> List[IndexEntry]:
        """Staged entries in insertion order."""
        return self.load()
    
    def stage(self, path: str, digest: str) -> IndexEntry:
        """
        Stage a single path.
        
        The blob for digest must already be stored.
        
        Args:
            path: Path relative to the work tree
            digest: Digest of the stored blob
            
        Returns:
            IndexEntry: The new entry
        """
        return self.stage_many([(path, digest)])[0]
    
    def stage_many(self, items: Iterable[tuple]) -> List[IndexEntry]:
        """Stage several (path, digest) pairs with a single index write."""
        entries = self.load()
        staged = []
        
        for path, digest in items:
            entry = IndexEntry(path=path, hash=digest)
            if self.policy == POLICY_REPLACE:
                entries = [e for e in entries if e.path != path]
            entries.append(entry)
            staged.append(entry)
            logger.debug("staged %s as %s", path, digest)
        
        self.save(entries)
        return staged
    
    def clear(self) -> None:
        """Remove all entries."""
        self.save([])
        logger.debug("index cleared")
    
    def _store_file(self, rel_path: str) -> str:
        from .objects import Blob
        return self.repo.store.put_object(Blob(self.repo.read_working_file(rel_path)))
    
    def add_file(self, filepath) -> IndexEntry:
        """
        Store a working-tree file and stage it.
        
        Args:
            filepath: Path to file (absolute or relative to the work tree)
            
        Returns:
            IndexEntry: The staged entry
            
        Raises:
            PathNotFound: If the path is not an existing regular file
        """
        rel_path = self.repo.relative_path(filepath)
        digest = self._store_file(rel_path)
        return self.stage(rel_path, digest)
    
    def add_all(
        self,
        list_files: Optional[Callable[[Path], Iterable[str]]] = None
    ) -> List[IndexEntry]:
        """
        Stage every trackable file in the work tree.
        
        Args:
            list_files: Work-tree lister, root -> relative paths, same shape
                as the repository's own (which is used when omitted)
            
        Returns:
            List of staged entries, in listing order
        """
        if list_files is None:
            paths = self.repo.list_files()
        else:
            paths = list(list_files(self.repo.work_tree))
        
        items = []
        for rel_path in paths:
            digest = self._store_file(rel_path)
            items.append((rel_path, digest))
        
        if not items:
            return []
        return self.stage_many(items)
    
    def paths(self) -> List[str]:
        """Distinct staged paths, in first-staged order."""
        seen = {}
        for entry in self.load():
            seen.setdefault(entry.path, None)
        return list(seen)
    
    def __len__(self) -> int:
        return len(self.load())
    
    def __repr__(self) -> str:
        return f"Index(path={self.index_file}, policy={self.policy})"
