from __future__ import annotations
from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from pokex.enums import Environment

import shutil
import logging
import importlib.resources
from pathlib import Path
from dataclasses import dataclass, asdict, fields

from pokex.utils.utils import load_yaml_file, dump_yaml_file
from pokex.const.paths import (
    PROJ_NAME,
    LOG_PATH,
    CONFIG_FILE_PATH,
    LOGGING_CONFIG_FILE_PATH,
)

__all__ = [
    'get_config',
    'configure',
]


DEFAULT_BASE_URL = 'https://www.okex.com'


@dataclass
class Configuration:
    '''User settings, persisted in CONFIG_FILE_PATH'''
    log_path: Path = LOG_PATH
    logging_config_file_path: Path = LOGGING_CONFIG_FILE_PATH
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 10.0
    retries: int = 0
    debug: bool = False

    # NOTE: without type annotation, it is a class attribute instead of a dataclass field
    _instance = None

    def __post_init__(self):
        # overrides of logging.yml, set by configure() and never written to the config file
        self._logging_config: dict = {}
        self._apply()

    @classmethod
    def get_instance(cls) -> Configuration:
        if cls._instance is None:
            cls._instance = cls.load()
        return cls._instance

    @classmethod
    def load(cls) -> Configuration:
        '''
        Reads the config file, missing fields get their defaults and unknown fields are dropped.
        The file is (re)written when its fields differ from the current ones.
        '''
        defaults = {f.name: f.default for f in fields(cls)}
        saved = load_yaml_file(CONFIG_FILE_PATH) if CONFIG_FILE_PATH.is_file() else {}
        config = cls(**{**defaults, **{k: v for k, v in saved.items() if k in defaults}})
        if set(saved) != set(defaults):
            config.dump()
        return config

    def dump(self):
        dump_yaml_file(CONFIG_FILE_PATH, asdict(self))

    @staticmethod
    def load_env_file(env: Environment | str):
        '''Loads e.g. .env.paper into os.environ, searching upwards from the current working directory'''
        from dotenv import find_dotenv, load_dotenv
        filename = f'.env.{env.lower()}'
        if env_file_path := find_dotenv(filename=filename, usecwd=True):
            load_dotenv(env_file_path, override=True)
            logging.getLogger(PROJ_NAME).debug(f'loaded {env_file_path}')

    @property
    def logging_config(self) -> dict:
        return self._logging_config

    @logging_config.setter
    def logging_config(self, value: dict):
        self._logging_config = value

    def _apply(self):
        # values from the YAML file or the CLI may come in as strings
        self.log_path = Path(self.log_path)
        self.logging_config_file_path = Path(self.logging_config_file_path)
        self.base_url = str(self.base_url).rstrip('/')
        self.timeout = float(self.timeout)
        self.retries = int(self.retries)
        if not self.logging_config_file_path.exists():
            self.logging_config_file_path.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy(importlib.resources.files(PROJ_NAME) / 'logging.yml', self.logging_config_file_path)
        if self.debug:
            self.enable_debug_mode()

    def enable_debug_mode(self):
        '''Prints DEBUG logs to the console, takes effect when loggers are set up'''
        handlers = self._logging_config.setdefault('handlers', {})
        handlers.setdefault('stream_handler', {})['level'] = 'DEBUG'


def configure(
    log_path: str | None = None,
    logging_config_file_path: str | None = None,
    logging_config: dict | None = None,
    base_url: str | None = None,
    timeout: float | None = None,
    retries: int | None = None,
    debug: bool | None = None,
    write: bool = False,
) -> Configuration:
    '''Updates the global config, None values are left unchanged.
    Args:
        logging_config: overrides merged into logging.yml when loggers are set up
        write: If True, the config will be saved to the config file.
    '''
    config = get_config()
    updates = {
        'log_path': log_path,
        'logging_config_file_path': logging_config_file_path,
        'base_url': base_url,
        'timeout': timeout,
        'retries': retries,
        'debug': debug,
    }
    for name, value in updates.items():
        if value is not None:
            setattr(config, name, value)
    if logging_config is not None:
        config.logging_config = logging_config
    config._apply()
    if write:
        config.dump()
    return config


def get_config() -> Configuration:
    return Configuration.get_instance()
