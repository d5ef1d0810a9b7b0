import logging
import logging.config

from pokex.const.paths import PROJ_NAME


def set_up_loggers() -> logging.Logger:
    '''Configures the "pokex" logger from logging.yml and the overrides set by configure()'''
    from pokex.config import get_config
    from pokex._logging.config import load_logging_config
    config = get_config()
    logging_config = load_logging_config(
        config.log_path,
        config.logging_config_file_path,
        user_logging_config=config.logging_config,
    )
    logging.config.dictConfig(logging_config)
    return logging.getLogger(PROJ_NAME)
