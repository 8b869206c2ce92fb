"""Configuration management for Twig.

Settings live in INI files read with configparser. Lookups walk a fixed
chain of sources and stop at the first one that defines the key:

1. Environment variables (TWIG_<SECTION>_<KEY>)
2. Repository config (.twig/config)
3. Global config (~/.twigconfig)
4. The caller's fallback, then the built-in DEFAULTS
"""

import os
import configparser
import logging
from pathlib import Path
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)

TRUE_VALUES = ('1', 'true', 'yes', 'on')
FALSE_VALUES = ('0', 'false', 'no', 'off')

DEFAULTS = {
    'core': {
        'index_policy': 'append',
        'lock': 'true',
        'verbose': 'false',
    },
}


def env_key(section: str, key: str) -> str:
    return f"TWIG_{section.upper()}_{key.upper()}"


class Config:
    """
    Layered view over the environment, the repository config file and the
    global config file.

    Files are parsed on first use and cached per instance; set() writes
    through to disk and updates the cache.
    """

    GLOBAL_CONFIG_PATH = Path.home() / '.twigconfig'

    def __init__(self, repo_config_path: Optional[Path] = None):
        """
        Args:
            repo_config_path: Path to .twig/config, or None outside a repository
        """
        self.repo_config_path = Path(repo_config_path) if repo_config_path else None
        self._parsers: Dict[Path, configparser.ConfigParser] = {}

    def _parser(self, path: Path) -> configparser.ConfigParser:
        if path not in self._parsers:
            parser = configparser.ConfigParser()
            if path.exists():
                parser.read(path)
            self._parsers[path] = parser
        return self._parsers[path]

    def _file_layers(self) -> List[configparser.ConfigParser]:
        """Config files in lookup order, repository first."""
        paths = [self.GLOBAL_CONFIG_PATH]
        if self.repo_config_path:
            paths.insert(0, self.repo_config_path)
        return [self._parser(path) for path in paths]

    def get(self, section: str, key: str, fallback: Optional[str] = None) -> Optional[str]:
        """
        Look a key up through every layer.

        Args:
            section: Config section (e.g., 'core')
            key: Config key (e.g., 'index_policy')
            fallback: Used when no layer defines the key

        Returns:
            The value, the fallback, or the built-in default
        """
        value = os.environ.get(env_key(section, key))
        if value is not None:
            return value

        for parser in self._file_layers():
            if parser.has_option(section, key):
                return parser.get(section, key)

        if fallback is not None:
            return fallback
        return DEFAULTS.get(section, {}).get(key)

    def get_bool(self, section: str, key: str, fallback: bool = False) -> bool:
        """Get a boolean value; unrecognised strings fall back."""
        value = self.get(section, key)
        if value is None:
            return fallback

        value = value.strip().lower()
        if value in TRUE_VALUES:
            return True
        if value in FALSE_VALUES:
            return False

        logger.warning("ignoring invalid boolean %s.%s = %r", section, key, value)
        return fallback

    def set(self, section: str, key: str, value: str, global_config: bool = False) -> None:
        """
        Write a value to the repository config, or the global one.

        Raises:
            ValueError: If the repository scope is requested outside a repository
        """
        if global_config:
            path = self.GLOBAL_CONFIG_PATH
        elif self.repo_config_path:
            path = self.repo_config_path
        else:
            raise ValueError("No repository config path available")

        parser = self._parser(path)
        if not parser.has_section(section):
            parser.add_section(section)
        parser.set(section, key, value)

        with open(path, 'w') as f:
            parser.write(f)
        logger.debug("config %s.%s = %r written to %s", section, key, value, path)

    def index_policy(self) -> str:
        """Staging policy for repeated adds of one path."""
        from .index import POLICIES, POLICY_APPEND

        policy = self.get('core', 'index_policy').strip().lower()
        if policy not in POLICIES:
            logger.warning("unknown core.index_policy %r, using %r", policy, POLICY_APPEND)
            return POLICY_APPEND
        return policy


def write_default_config(path: Path) -> None:
    """Write the [core] defaults to a new repository config file."""
    config = configparser.ConfigParser()
    config.read_dict(DEFAULTS)
    with open(path, 'w') as f:
        config.write(f)


def get_config(repo=None) -> Config:
    """Config for a repository, or global-only when repo is None."""
    if repo:
        return Config(repo.config_file)
    return Config()
