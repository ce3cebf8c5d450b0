'''Global configuration system supporting JSON5 and YAML files'''

import logging
import os
from pathlib import Path
from typing import Any

import json5
import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

ENV_CONFIG_PATH = 'BEHAVIORABLE_CONFIG'


class Config:
    '''Global configuration singleton'''

    _instance = None
    _initialized = False

    # Default configuration values
    _defaults = {
        'native_set_priority': True,
        'detach_clears_owner': True,
        'reattach_moves_behavior': True,
    }

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self._config = self._defaults.copy()
            self._initialized = True

    @staticmethod
    def parse_file(filepath: Path) -> dict:
        '''Parse a JSON5 or YAML config file into a dict'''
        with open(filepath, 'r', encoding = 'utf-8') as f:
            content = f.read()

        if filepath.suffix.lower() in ('.yaml', '.yml'):
            data = yaml.safe_load(content)
        else:
            data = json5.loads(content)

        if data is None:
            return {}

        if not isinstance(data, dict):
            raise ConfigError(f'{filepath}: top level must be a mapping, got {type(data).__name__}')

        unknown = set(data) - set(Config._defaults)
        if unknown:
            raise ConfigError(f'{filepath}: unknown option(s) {", ".join(sorted(unknown))}')

        return data

    def load_file(self, filepath: str | Path, strict: bool = False) -> bool:
        '''Load configuration from a JSON5 or YAML file'''
        filepath = Path(filepath)
        if not filepath.exists():
            if strict:
                raise ConfigError(f'Config file not found: {filepath}')
            return False

        try:
            data = self.parse_file(filepath)

        except (OSError, ValueError, yaml.YAMLError, ConfigError) as e:
            if strict:
                if isinstance(e, ConfigError):
                    raise
                raise ConfigError(f'Failed to load config from {filepath}: {e}') from e

            logger.warning('Failed to load config from %s: %s', filepath, e)
            return False

        self._config.update(data)
        logger.debug('Loaded config from %s', filepath)
        return True

    def load_defaults(self):
        '''Load the config file named by the environment, if any'''
        path = os.environ.get(ENV_CONFIG_PATH)
        if path:
            self.load_file(path)

    def get(self, key: str, default: Any = None) -> Any:
        '''Get configuration value'''
        return self._config.get(key, default)

    def set(self, key: str, value: Any):
        '''Set configuration value at runtime'''
        if key not in self._defaults:
            raise ConfigError(f'Unknown option: {key}')

        self._config[key] = value

    def reset(self):
        '''Restore built-in defaults'''
        self._config = self._defaults.copy()

    @property
    def native_set_priority(self) -> bool:
        '''Assign existing native attributes before consulting behaviors'''
        return bool(self.get('native_set_priority'))

    @property
    def detach_clears_owner(self) -> bool:
        '''Clear a behavior's owner when it leaves the owner's mapping'''
        return bool(self.get('detach_clears_owner'))

    @property
    def reattach_moves_behavior(self) -> bool:
        '''Remove a behavior from its previous owner before attaching it elsewhere'''
        return bool(self.get('reattach_moves_behavior'))


# Global config instance
_config = Config()


def get_config() -> Config:
    '''Get global config instance'''
    return _config


def init_config(path: str | Path = None, strict: bool = True):
    '''Initialize configuration system'''
    _config.reset()
    _config.load_defaults()
    if path is not None:
        _config.load_file(path, strict = strict)


# Auto-load defaults on import
_config.load_defaults()
