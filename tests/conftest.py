"""Shared pytest fixtures for Twig tests."""

import pytest
import tempfile
import shutil
from pathlib import Path
from click.testing import CliRunner
from twig.core.config import Config
from twig.core.repository import Repository


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory, monkeypatch):
    """Keep tests away from ~/.twigconfig and TWIG_* variables."""
    home = tmp_path_factory.mktemp('home')
    monkeypatch.setattr(Config, 'GLOBAL_CONFIG_PATH', home / '.twigconfig')
    for key in ('TWIG_CORE_INDEX_POLICY', 'TWIG_CORE_LOCK', 'TWIG_CORE_VERBOSE'):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir).resolve()
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def repo(temp_dir):
    """Create an initialized repository."""
    repo = Repository(str(temp_dir))
    repo.init()
    return repo


@pytest.fixture
def write_file(repo):
    """Write a file into the work tree and return its path."""
    def _write(rel_path, content):
        path = repo.work_tree / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content)
        return path
    return _write


@pytest.fixture
def runner():
    """Create CLI runner."""
    return CliRunner()


@pytest.fixture
def cli_repo(repo, monkeypatch):
    """Initialized repository that is also the current directory."""
    monkeypatch.chdir(repo.work_tree)
    return repo


class FakeWorkTree:
    """In-memory work tree: a dict of relative path -> bytes."""
    
    def __init__(self, files=None):
        self.files = dict(files or {})
    
    def list_files(self, root):
        return sorted(self.files)
    
    def read_file(self, rel_path):
        return self.files[rel_path]


@pytest.fixture
def fake_tree():
    return FakeWorkTree()


@pytest.fixture
def fake_repo(temp_dir, fake_tree):
    """Repository whose work tree is the in-memory fake_tree."""
    repo = Repository(
        str(temp_dir),
        list_files=fake_tree.list_files,
        read_file=fake_tree.read_file,
    )
    repo.init()
    return repo
