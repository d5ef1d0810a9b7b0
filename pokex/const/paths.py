from pathlib import Path

from platformdirs import user_config_path, user_log_path


PROJ_NAME = Path(__file__).resolve().parents[1].name

CONFIG_PATH = user_config_path(PROJ_NAME, appauthor=False)
CONFIG_FILE_PATH = CONFIG_PATH / 'config.yml'
LOGGING_CONFIG_FILE_PATH = CONFIG_PATH / 'logging.yml'
LOG_PATH = user_log_path(PROJ_NAME, appauthor=False)
