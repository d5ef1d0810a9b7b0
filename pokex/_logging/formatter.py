import copy
import logging


class ColoredFormatter(logging.Formatter):
    '''Colors the level name of WARNING and above records'''
    COLORS = {
        logging.WARNING: '\033[1;93m',   # bold yellow
        logging.ERROR: '\033[1;91m',     # bold red
        logging.CRITICAL: '\033[1;95m',  # bold magenta
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelno)
        if color is None:
            return super().format(record)
        # the same record is passed to other handlers, e.g. the file handler
        record = copy.copy(record)
        record.levelname = f'{color}{record.levelname}{self.RESET}'
        return super().format(record)
