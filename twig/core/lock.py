"""Advisory repository lock for mutating commands."""

import os
import logging
from pathlib import Path

from .errors import RepositoryLocked, StoreWriteError

logger = logging.getLogger(__name__)


class RepositoryLock:
    """
    Exclusive lock file held while add, commit or stash runs.
    
    The lock is .twig/lock created with O_EXCL. A second process finding the
    file fails immediately with RepositoryLocked. A lock left behind by a
    crashed process has to be removed by hand.
    
    Usage:
        with RepositoryLock(repo.lock_file):
            ...
    """
    
    def __init__(self, lock_path: Path, enabled: bool = True):
        self.lock_path = Path(lock_path)
        self.enabled = enabled
        self._held = False
    
    def acquire(self) -> None:
        if not self.enabled or self._held:
            return
        
        try:
            fd = os.open(str(self.lock_path), os.O_CREAT | os.O_EXCL | os.O_WRONLY)
        except FileExistsError:
            raise RepositoryLocked(self.lock_path) from None
        except OSError as e:
            raise StoreWriteError(self.lock_path, e.strerror or str(e)) from e
        
        with os.fdopen(fd, 'w') as f:
            f.write(f"{os.getpid()}\n")
        
        self._held = True
        logger.debug("acquired %s", self.lock_path)
    
    def release(self) -> None:
        if not self._held:
            return
        
        try:
            self.lock_path.unlink()
        except FileNotFoundError:
            logger.warning("lock file %s vanished before release", self.lock_path)
        
        self._held = False
        logger.debug("released %s", self.lock_path)
    
    @property
    def held(self) -> bool:
        return self._held
    
    def __enter__(self) -> 'RepositoryLock':
        self.acquire()
        return self
    
    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()
