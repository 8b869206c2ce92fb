"""Repository management for Twig."""

import json
import logging
from pathlib import Path
from typing import Callable, List, Optional

from .errors import MetadataCorrupted, PathNotFound, RepositoryNotInitialized, StoreWriteError
from .store import ObjectStore

logger = logging.getLogger(__name__)

TWIG_DIR = '.twig'

FileReader = Callable[[str], bytes]


class Repository:
    """
    Represents a Twig repository.
    
    A repository is the explicit context every operation runs against. It
    owns the paths of the .twig directory, the object store, and the two
    work-tree capabilities the core needs:
    - list_files: root -> relative paths of trackable files
    - read_file: relative path -> bytes
    
    Both default to the real filesystem (honouring .twigignore) and can be
    replaced, e.g. with an in-memory file set in tests.
    """
    
    def __init__(
        self,
        path: str = '.',
        list_files: Optional[Callable[[Path], List[str]]] = None,
        read_file: Optional[FileReader] = None
    ):
        """
        Initialize repository.
        
        Args:
            path: Path to repository root (defaults to current directory)
            list_files: Optional work-tree lister
            read_file: Optional work-tree reader
        """
        self.work_tree = Path(path).resolve()
        self.twig_dir = self.work_tree / TWIG_DIR
        self.objects_dir = self.twig_dir / 'objects'
        self.head_file = self.twig_dir / 'HEAD'
        self.index_file = self.twig_dir / 'index'
        self.stash_file = self.twig_dir / 'stash'
        self.config_file = self.twig_dir / 'config'
        self.lock_file = self.twig_dir / 'lock'
        
        self._list_files = list_files
        self._read_file = read_file
        
        self._store = None
        self._config = None
        self._index = None
        self._commits = None
        self._stash = None
        self._status = None
        self._diff = None
    
    @property
    def store(self) -> ObjectStore:
        """Get ObjectStore instance."""
        if self._store is None:
            self._store = ObjectStore(self.objects_dir)
        return self._store
    
    @property
    def config(self):
        """Get Config instance."""
        if self._config is None:
            from .config import get_config
            self._config = get_config(self)
        return self._config
    
    @property
    def index(self):
        """Get Index instance using the configured staging policy."""
        if self._index is None:
            from .index import Index
            self._index = Index(self, policy=self.config.index_policy())
        return self._index
    
    @property
    def commits(self):
        """Get CommitGraph instance."""
        if self._commits is None:
            from .history import CommitGraph
            self._commits = CommitGraph(self)
        return self._commits
    
    @property
    def stash(self):
        """Get StashManager instance."""
        if self._stash is None:
            from twig.operations.stash import StashManager
            self._stash = StashManager(self)
        return self._stash
    
    @property
    def status(self):
        """Get StatusEngine instance."""
        if self._status is None:
            from twig.operations.status import StatusEngine
            self._status = StatusEngine(self)
        return self._status
    
    @property
    def diff(self):
        """Get DiffEngine instance."""
        if self._diff is None:
            from twig.operations.diff import DiffEngine
            self._diff = DiffEngine(self)
        return self._diff
    
    def init(self) -> bool:
        """
        Initialize the repository layout.
        
        Creates whatever is missing of:
        .twig/
        ├── objects/   # Object store
        ├── HEAD       # Tip commit digest (empty until the first commit)
        ├── index      # Staging area, JSON list
        ├── stash      # Stash log, JSON list
        └── config     # Repository configuration
        
        Existing files are left untouched.
        
        Returns:
            bool: True if anything was created, False if already initialized
        """
        from .config import write_default_config
        
        created = False
        try:
            if not self.objects_dir.is_dir():
                self.objects_dir.mkdir(parents=True, exist_ok=True)
                created = True
            
            for path, content in ((self.head_file, ''),
                                  (self.index_file, '[]'),
                                  (self.stash_file, '[]')):
                if not path.exists():
                    path.write_text(content)
                    created = True
            
            if not self.config_file.exists():
                write_default_config(self.config_file)
                created = True
        except OSError as e:
            raise StoreWriteError(self.twig_dir, e.strerror or str(e)) from e
        
        if created:
            logger.debug("initialized repository at %s", self.twig_dir)
        return created
    
    def is_initialized(self) -> bool:
        """Check the .twig layout is complete."""
        return (self.objects_dir.is_dir()
                and self.head_file.is_file()
                and self.index_file.is_file()
                and self.stash_file.is_file())
    
    def require_initialized(self) -> 'Repository':
        """
        Raises:
            RepositoryNotInitialized: If the layout is incomplete
        """
        if not self.is_initialized():
            raise RepositoryNotInitialized(self.work_tree)
        return self
    
    @classmethod
    def find_repository(cls, path: str = '.', **kwargs) -> Optional['Repository']:
        """
        Find repository by searching up the directory tree.
        
        Args:
            path: Starting path for search
            
        Returns:
            Repository if found, None otherwise
        """
        current = Path(path).resolve()
        
        while True:
            if (current / TWIG_DIR).is_dir():
                return cls(str(current), **kwargs)
            
            if current == current.parent:
                return None
            
            current = current.parent
    
    @classmethod
    def open(cls, path: str = '.', **kwargs) -> 'Repository':
        """
        Find an initialized repository or fail.
        
        Raises:
            RepositoryNotInitialized: If no complete repository is found
        """
        repo = cls.find_repository(path, **kwargs)
        if repo is None:
            raise RepositoryNotInitialized(Path(path).resolve())
        return repo.require_initialized()
    
    def read_metadata(self, path: Path) -> str:
        """
        Read HEAD, index or stash.
        
        Raises:
            RepositoryNotInitialized: If the file is missing
        """
        try:
            return Path(path).read_text(encoding='utf-8')
        except FileNotFoundError:
            raise RepositoryNotInitialized(self.work_tree) from None
    
    def write_metadata(self, path: Path, content: str) -> None:
        """
        Rewrite a metadata file in full.
        
        Raises:
            StoreWriteError: On any I/O failure
        """
        try:
            Path(path).write_text(content, encoding='utf-8')
        except OSError as e:
            raise StoreWriteError(path, e.strerror or str(e)) from e
    
    def read_json(self, path: Path):
        """Read a JSON metadata file (index, stash)."""
        try:
            return json.loads(self.read_metadata(path))
        except json.JSONDecodeError as e:
            raise MetadataCorrupted(path, str(e)) from e
    
    def relative_path(self, filepath) -> str:
        """
        Path relative to the work tree, '/'-separated.
        
        Relative inputs are taken relative to the work tree.
        
        Raises:
            PathNotFound: If the path lies outside the work tree
        """
        path = Path(filepath)
        if not path.is_absolute():
            path = self.work_tree / path
        
        try:
            rel = path.resolve().relative_to(self.work_tree)
        except ValueError:
            raise PathNotFound(filepath, 'outside repository') from None
        
        if rel.parts and rel.parts[0] == TWIG_DIR:
            raise PathNotFound(filepath, 'inside the repository directory')
        return rel.as_posix()
    
    def read_working_file(self, rel_path: str) -> bytes:
        """
        Read a work-tree file.
        
        Raises:
            PathNotFound: If the path is not an existing, readable regular file
        """
        if self._read_file is not None:
            try:
                return self._read_file(rel_path)
            except (KeyError, FileNotFoundError):
                raise PathNotFound(rel_path) from None
            except OSError as e:
                raise PathNotFound(rel_path, e.strerror or str(e)) from e
        
        full = self.work_tree / rel_path
        if not full.exists():
            raise PathNotFound(rel_path)
        if not full.is_file():
            raise PathNotFound(rel_path, 'not a regular file')
        try:
            return full.read_bytes()
        except FileNotFoundError:
            raise PathNotFound(rel_path) from None
        except OSError as e:
            raise PathNotFound(rel_path, e.strerror or str(e)) from e
    
    def list_files(self) -> List[str]:
        """Relative paths of all trackable files in the work tree."""
        if self._list_files is None:
            from twig.utils.files import make_file_lister
            from twig.utils.ignore import get_ignore_matcher
            
            matcher = get_ignore_matcher(self.work_tree)
            self._list_files = make_file_lister(matcher.is_ignored)
        return list(self._list_files(self.work_tree))
    
    def lock(self):
        """Advisory lock for a mutating command (see core.lock)."""
        from .lock import RepositoryLock
        return RepositoryLock(self.lock_file, enabled=self.config.get_bool('core', 'lock', True))
    
    def __repr__(self) -> str:
        return f"Repository(path={self.work_tree})"
