import copy
from pathlib import Path

from pokex.utils.utils import load_yaml_file


def deep_update(default_dict: dict, override_dict: dict, raise_if_key_not_exist=False):
    '''Merges override_dict into default_dict in place, nested dicts are merged key by key.'''
    for key, value in override_dict.items():
        if raise_if_key_not_exist and key not in default_dict:
            raise KeyError(f"Key '{key}' is not supported in logging config.")
        # 'debug' -> 'DEBUG'
        if key == 'level' and isinstance(value, str):
            value = value.upper()
        if isinstance(value, dict) and isinstance(default_dict.get(key), dict):
            deep_update(default_dict[key], value)
        else:
            default_dict[key] = value


def load_logging_config(log_path: Path, logging_config_file_path: Path, user_logging_config: dict | None=None) -> dict:
    '''
    Returns the dictConfig schema from logging.yml with the user's overrides merged in.
    Handler filenames are relative to log_path, e.g. "pokex.log" -> <log_path>/pokex.log
    '''
    logging_config: dict = load_yaml_file(logging_config_file_path)
    if user_logging_config:
        deep_update(logging_config, copy.deepcopy(user_logging_config))
    log_path = Path(log_path)
    log_path.mkdir(parents=True, exist_ok=True)
    for handler_config in logging_config.get('handlers', {}).values():
        if filename := handler_config.get('filename'):
            handler_config['filename'] = str(log_path / filename)
    return logging_config
