"""Integration tests for init and error handling."""

import errno
import pytest
from pathlib import Path
from twig import __version__
from twig.cli.main import cli
from twig.core.repository import Repository


class TestInitCommand:
    """Tests for twig init."""
    
    def test_init_creates_layout(self, runner, temp_dir, monkeypatch):
        monkeypatch.chdir(temp_dir)
        
        result = runner.invoke(cli, ['init'])
        
        assert result.exit_code == 0
        assert 'Initialized empty Twig repository' in result.output
        twig_dir = temp_dir / '.twig'
        assert (twig_dir / 'objects').is_dir()
        assert (twig_dir / 'HEAD').read_text() == ''
        assert (twig_dir / 'index').read_text() == '[]'
        assert (twig_dir / 'stash').read_text() == '[]'
        assert (twig_dir / 'config').is_file()
    
    def test_init_new_directory(self, runner, temp_dir, monkeypatch):
        monkeypatch.chdir(temp_dir)
        
        result = runner.invoke(cli, ['init', 'project'])
        
        assert result.exit_code == 0
        assert Repository(str(temp_dir / 'project')).is_initialized()
    
    def test_init_twice_is_harmless(self, runner, cli_repo, write_file):
        write_file('a.txt', 'hello')
        cli_repo.index.add_file('a.txt')
        
        result = runner.invoke(cli, ['init'])
        
        assert result.exit_code == 0
        assert 'already initialized' in result.output
        assert len(cli_repo.index.read_all()) == 1


class TestErrors:
    """Commands fail with a message and a non-zero exit status."""
    
    @pytest.mark.parametrize('args', [
        ['add', 'a.txt'],
        ['commit', 'message'],
        ['log'],
        ['show'],
        ['status'],
        ['stash'],
    ])
    def test_outside_repository(self, runner, temp_dir, monkeypatch, args):
        monkeypatch.chdir(temp_dir)
        
        result = runner.invoke(cli, args)
        
        assert result.exit_code == 1
        assert 'Not a twig repository' in result.output
    
    def test_locked_repository(self, runner, cli_repo, write_file):
        write_file('a.txt', 'hello')
        cli_repo.lock_file.write_text('999\n')
        
        result = runner.invoke(cli, ['add', 'a.txt'])
        
        assert result.exit_code == 1
        assert 'locked' in result.output
        assert cli_repo.index.read_all() == []
    
    def test_corrupted_index(self, runner, cli_repo, write_file):
        write_file('a.txt', 'hello')
        cli_repo.index_file.write_text('{not json')
        
        result = runner.invoke(cli, ['add', 'a.txt'])
        
        assert result.exit_code == 1
        assert 'Corrupted metadata' in result.output
    
    def test_version(self, runner):
        result = runner.invoke(cli, ['--version'])
        assert result.exit_code == 0
        assert __version__ in result.output
    
    def test_help_shows_commands(self, runner):
        result = runner.invoke(cli, ['--help'])
        assert result.exit_code == 0
        for name in ('init', 'add', 'commit', 'log', 'show', 'status', 'stash'):
            assert name in result.output


class TestUnreadableFiles:
    """Read failures in the work tree are reported, not raised."""
    
    @pytest.fixture
    def unreadable(self, monkeypatch):
        """Make a.txt unreadable; every other file reads normally."""
        real_read_bytes = Path.read_bytes
        
        def read_bytes(path):
            if path.name == 'a.txt':
                raise PermissionError(errno.EACCES, 'Permission denied')
            return real_read_bytes(path)
        
        monkeypatch.setattr(Path, 'read_bytes', read_bytes)
    
    def test_add_unreadable_file(self, runner, cli_repo, write_file, unreadable):
        write_file('a.txt', 'hello')
        
        result = runner.invoke(cli, ['add', 'a.txt'])
        
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert 'add failed' in result.output
        assert 'Permission denied' in result.output
        assert cli_repo.index.read_all() == []
        assert not cli_repo.lock_file.exists()
    
    def test_status_with_unreadable_tracked_file(self, runner, cli_repo, write_file, request):
        write_file('a.txt', 'hello')
        cli_repo.index.add_file('a.txt')
        cli_repo.commits.commit('first')
        request.getfixturevalue('unreadable')
        
        result = runner.invoke(cli, ['status'])
        
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert 'status failed' in result.output
        assert 'Permission denied' in result.output
