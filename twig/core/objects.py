"""Twig objects: file blobs and commit records."""

import json
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import List, Optional

from .hash import hash_object, is_digest
from .index import IndexEntry


class TwigObject(ABC):
    """Base class for all objects kept in the object store."""
    
    def __init__(self):
        self._hash: Optional[str] = None
    
    @abstractmethod
    def serialize(self) -> bytes:
        """
        Serialize object to bytes.
        
        Returns:
            bytes: Exact bytes written to the object store
        """
        pass
    
    @abstractmethod
    def deserialize(self, data: bytes) -> None:
        """
        Deserialize object from bytes.
        
        Args:
            data: Bytes read from the object store
        """
        pass
    
    @property
    def type(self) -> str:
        """Object type name (blob, commit)."""
        return self.__class__.__name__.lower()
    
    def compute_hash(self) -> str:
        """
        Compute and cache object hash.
        
        The digest covers the serialized bytes only, so a blob's digest is
        the digest of the file content itself.
        
        Returns:
            str: 40-character SHA-1 hash
        """
        if self._hash is None:
            self._hash = hash_object(self.serialize())
        return self._hash
    
    @property
    def hash(self) -> str:
        """Object digest."""
        return self.compute_hash()


class Blob(TwigObject):
    """
    Represents file content.
    
    A blob stores the raw bytes of a file without its name or any metadata.
    """
    
    def __init__(self, data: Optional[bytes] = None):
        super().__init__()
        self.data = data or b''
    
    def serialize(self) -> bytes:
        return self.data
    
    def deserialize(self, data: bytes) -> None:
        self.data = data
        self._hash = None
    
    def text(self) -> str:
        """Content decoded as UTF-8, undecodable bytes replaced."""
        return self.data.decode('utf-8', errors='replace')
    
    def __repr__(self) -> str:
        return f"Blob(hash={self.hash[:7]}, size={len(self.data)})"


class Commit(TwigObject):
    """
    Represents a commit.
    
    A commit is a full snapshot of the staged file list, not a change set:
    - timestamp: ISO-8601 creation time (UTC)
    - message: Commit message
    - files: Every staged entry, in staging order
    - parent: Digest of the previous commit, None for the first one
    
    Stored as compact JSON in the same namespace as file blobs.
    """
    
    def __init__(self):
        super().__init__()
        self.timestamp: str = ''
        self.message: str = ''
        self.files: List[IndexEntry] = []
        self.parent: Optional[str] = None
    
    def to_dict(self) -> dict:
        return {
            'timestamp': self.timestamp,
            'message': self.message,
            'files': [entry.to_dict() for entry in self.files],
            'parent': self.parent,
        }
    
    def serialize(self) -> bytes:
        """
        Serialize commit to JSON.
        
        Format:
        {"timestamp":...,"message":...,"files":[{"path":...,"hash":...}],"parent":...}
        
        Returns:
            bytes: UTF-8 encoded JSON
        """
        return json.dumps(self.to_dict(), separators=(',', ':')).encode('utf-8')
    
    def deserialize(self, data: bytes) -> None:
        """
        Deserialize commit from JSON.
        
        Raises:
            ValueError: If data is not a commit record
        """
        try:
            record = json.loads(data.decode('utf-8'))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ValueError(f"Not a commit record: {e}")
        
        if not isinstance(record, dict) or not {'timestamp', 'message', 'files'} <= record.keys():
            raise ValueError("Not a commit record: missing fields")
        
        try:
            self.files = [IndexEntry.from_dict(item) for item in record['files']]
        except (TypeError, KeyError) as e:
            raise ValueError(f"Not a commit record: bad file entry {e}")
        
        parent = record.get('parent') or None
        if parent is not None and not (isinstance(parent, str) and is_digest(parent)):
            raise ValueError(f"Not a commit record: bad parent {parent!r}")
        
        self.timestamp = record['timestamp']
        self.message = record['message']
        self.parent = parent
        self._hash = None
    
    @classmethod
    def create(
        cls,
        message: str,
        files: List[IndexEntry],
        parent: Optional[str] = None,
        timestamp: Optional[str] = None
    ) -> 'Commit':
        """
        Create a new commit.
        
        Args:
            message: Commit message
            files: Staged entries, copied verbatim
            parent: Parent commit digest (None for the first commit)
            timestamp: ISO-8601 timestamp (defaults to now, UTC)
            
        Returns:
            Commit: New commit object
        """
        commit = cls()
        commit.message = message
        commit.files = list(files)
        commit.parent = parent or None
        
        if timestamp is None:
            timestamp = datetime.now(timezone.utc).isoformat()
        commit.timestamp = timestamp
        
        return commit
    
    @classmethod
    def from_bytes(cls, data: bytes) -> 'Commit':
        commit = cls()
        commit.deserialize(data)
        return commit
    
    def entry_for(self, path: str) -> Optional[IndexEntry]:
        """Last entry recorded for path, or None."""
        for entry in reversed(self.files):
            if entry.path == path:
                return entry
        return None
    
    def file_map(self) -> dict:
        """Map of path -> digest; later entries win."""
        return {entry.path: entry.hash for entry in self.files}
    
    def __repr__(self) -> str:
        parent_info = f", parent={self.parent[:7]}" if self.parent else ""
        msg_preview = self.message.split('\n')[0][:50]
        return f"Commit(hash={self.hash[:7]}{parent_info}, msg='{msg_preview}')"
