"""Content-addressable object store for Twig."""

import os
import logging
import tempfile
from pathlib import Path

from .errors import ObjectNotFound, StoreWriteError
from .hash import hash_object, is_digest

logger = logging.getLogger(__name__)


class ObjectStore:
    """
    Content-addressed, write-once storage for blobs and commit records.
    
    Every object lives at objects/<digest>, holding the verbatim bytes it
    was stored with. Identical content always maps to the same file, so a
    repeated put is a no-op. Nothing is ever deleted.
    """
    
    def __init__(self, objects_dir: Path):
        """
        Initialize object store.
        
        Args:
            objects_dir: Path to the objects directory
        """
        self.objects_dir = Path(objects_dir)
    
    def object_path(self, digest: str) -> Path:
        """Filesystem path for an object digest."""
        return self.objects_dir / digest
    
    def put(self, content: bytes) -> str:
        """
        Store content and return its digest.
        
        Args:
            content: Bytes to store
            
        Returns:
            str: 40-character SHA-1 digest of content
            
        Raises:
            StoreWriteError: If the object file cannot be written
        """
        digest = hash_object(content)
        path = self.object_path(digest)
        
        if path.exists():
            logger.debug("object %s already stored", digest)
            return digest
        
        try:
            self._write_atomic(path, content)
        except OSError as e:
            raise StoreWriteError(path, e.strerror or str(e)) from e
        
        logger.debug("stored object %s (%d bytes)", digest, len(content))
        return digest
    
    def _write_atomic(self, path: Path, content: bytes) -> None:
        """Write to a temp file in objects/, then rename it onto path."""
        fd, tmp_path = tempfile.mkstemp(dir=self.objects_dir, prefix='.tmp_')
        try:
            with os.fdopen(fd, 'wb') as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, path)
        except Exception:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
    
    def put_object(self, obj) -> str:
        """Store a Blob or Commit under the digest of its serialized form."""
        return self.put(obj.serialize())
    
    def get(self, digest: str) -> bytes:
        """
        Read stored content.
        
        Args:
            digest: 40-character SHA-1 digest
            
        Returns:
            bytes: Stored content
            
        Raises:
            ObjectNotFound: If no object exists for digest
        """
        if not is_digest(digest):
            raise ObjectNotFound(digest, "malformed digest")
        
        path = self.object_path(digest)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            raise ObjectNotFound(digest) from None
        except OSError as e:
            raise ObjectNotFound(digest, e.strerror or str(e)) from e
    
    def exists(self, digest: str) -> bool:
        """Check whether an object is stored."""
        return is_digest(digest) and self.object_path(digest).is_file()
    
    def find_prefix(self, prefix: str) -> list:
        """Digests of stored objects starting with prefix."""
        prefix = prefix.lower()
        if not self.objects_dir.is_dir():
            return []
        return sorted(
            path.name for path in self.objects_dir.iterdir()
            if path.name.startswith(prefix) and is_digest(path.name)
        )
    
    def count(self) -> int:
        """Number of stored objects."""
        if not self.objects_dir.is_dir():
            return 0
        return sum(1 for path in self.objects_dir.iterdir() if is_digest(path.name))
    
    def __repr__(self) -> str:
        return f"ObjectStore(path={self.objects_dir})"
