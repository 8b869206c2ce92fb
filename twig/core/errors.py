"""Exceptions raised by the Twig core."""


class TwigError(Exception):
    """Base class for all Twig errors."""


class StoreWriteError(TwigError):
    """Raised when a blob or metadata file cannot be written."""
    
    def __init__(self, path, reason):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Failed to write {self.path}: {reason}")


class ObjectNotFound(TwigError):
    """Raised when a digest has no backing object in the store."""
    
    def __init__(self, digest: str, detail: str = ''):
        self.digest = digest
        message = f"Object {digest} not found"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class RepositoryNotInitialized(TwigError):
    """Raised when a command runs outside an initialized repository."""
    
    def __init__(self, path):
        self.path = str(path)
        super().__init__(f"Not a twig repository: {self.path} (run 'twig init' first)")


class PathNotFound(TwigError):
    """Raised when a work-tree path is missing or cannot be read."""
    
    def __init__(self, path, reason: str = 'file not found'):
        self.path = str(path)
        super().__init__(f"Cannot read {self.path}: {reason}")


class RepositoryLocked(TwigError):
    """Raised when another process holds the repository lock."""
    
    def __init__(self, lock_path):
        self.path = str(lock_path)
        super().__init__(
            f"Repository is locked ({self.path} exists). "
            "If no other twig process is running, remove the file and retry."
        )


class MetadataCorrupted(TwigError):
    """Raised when HEAD, index or stash content cannot be parsed."""
    
    def __init__(self, path, reason):
        self.path = str(path)
        super().__init__(f"Corrupted metadata file {self.path}: {reason}")
