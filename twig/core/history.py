"""Commit graph: creating commits, walking history, resolving files."""

import logging
from typing import Iterator, Optional, Tuple

from .errors import ObjectNotFound
from .hash import is_digest
from .objects import Commit

logger = logging.getLogger(__name__)

MIN_PREFIX_LENGTH = 4


class CommitGraph:
    """
    Linear commit history stored in the object store.
    
    HEAD holds the digest of the tip commit, or is empty before the first
    commit. Each commit points at its parent; the first commit has none.
    HEAD only ever moves forward, through commit().
    """
    
    def __init__(self, repo):
        """
        Initialize commit graph.
        
        Args:
            repo: Repository instance
        """
        self.repo = repo
        self.store = repo.store
        self.head_file = repo.head_file
    
    def head(self) -> Optional[str]:
        """Digest HEAD points to, or None."""
        content = self.repo.read_metadata(self.head_file).strip()
        return content or None
    
    def set_head(self, digest: str) -> None:
        self.repo.write_metadata(self.head_file, digest)
        logger.debug("HEAD -> %s", digest)
    
    def read_commit(self, digest: str) -> Commit:
        """
        Load a commit object.
        
        Raises:
            ObjectNotFound: If the digest is unknown or not a commit
        """
        data = self.store.get(digest)
        try:
            return Commit.from_bytes(data)
        except ValueError as e:
            raise ObjectNotFound(digest, f"not a commit: {e}") from None
    
    def head_commit(self) -> Optional[Commit]:
        digest = self.head()
        return self.read_commit(digest) if digest else None
    
    def commit(self, message: str) -> str:
        """
        Record the staged entries as a new commit.
        
        Order of writes: commit object, HEAD, then the cleared index. If the
        process dies before the index is cleared, the next commit repeats the
        already-committed entries rather than losing them.
        
        Args:
            message: Commit message
            
        Returns:
            str: Digest of the new commit
        """
        index = self.repo.index
        entries = index.read_all()
        parent = self.head()
        
        commit = Commit.create(message=message, files=entries, parent=parent)
        digest = self.store.put_object(commit)
        
        self.set_head(digest)
        index.clear()
        
        logger.debug("committed %s with %d file(s), parent %s", digest, len(entries), parent)
        return digest
    
    def log(self) -> Iterator[Tuple[str, Commit]]:
        """
        Walk history from HEAD to the first commit, newest first.
        
        Yields:
            (digest, commit) pairs
            
        Raises:
            ObjectNotFound: When a commit on the chain is missing
        """
        digest = self.head()
        seen = set()
        
        while digest:
            if digest in seen:
                # Only possible with a hand-edited object store
                logger.warning("history cycle at %s, stopping", digest)
                return
            seen.add(digest)
            
            commit = self.read_commit(digest)
            yield digest, commit
            digest = commit.parent
    
    def resolve_file_at(self, commit: Commit, path: str) -> Optional[bytes]:
        """
        Content of path as recorded in commit.
        
        Returns:
            Blob bytes, or None if the commit has no entry for path
        """
        entry = commit.entry_for(path)
        if entry is None:
            return None
        return self.store.get(entry.hash)
    
    def resolve(self, ref: str) -> str:
        """
        Resolve a user-supplied commit reference to a full digest.
        
        Accepts 'HEAD', a full digest, or a unique prefix of at least
        MIN_PREFIX_LENGTH characters.
        
        Raises:
            ObjectNotFound: If nothing or more than one object matches
        """
        if ref == 'HEAD':
            digest = self.head()
            if not digest:
                raise ObjectNotFound('HEAD', 'no commits yet')
            return digest
        
        ref = ref.strip().lower()
        if is_digest(ref):
            if not self.store.exists(ref):
                raise ObjectNotFound(ref)
            return ref
        
        if len(ref) < MIN_PREFIX_LENGTH:
            raise ObjectNotFound(ref, f"prefix shorter than {MIN_PREFIX_LENGTH} characters")
        
        matches = self.store.find_prefix(ref)
        if not matches:
            raise ObjectNotFound(ref)
        if len(matches) > 1:
            raise ObjectNotFound(ref, f"ambiguous prefix, {len(matches)} objects match")
        return matches[0]
