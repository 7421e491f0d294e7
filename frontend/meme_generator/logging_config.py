# frontend/meme_generator/logging_config.py

import logging
import logging.config
import os

from .config import config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
LOG_FILE_NAME = 'meme_generator.log'
LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUPS = 5

# Loggers of Gradio's HTTP stack; they are chatty at INFO.
QUIET_LOGGERS = ('httpx', 'urllib3', 'gradio_client')


def build_logging_config(log_file_path, level):
    """Returns the dictConfig schema: stdout plus a size-rotated log file."""
    handlers = {
        'console': {
            'class': 'logging.StreamHandler',
            'stream': 'ext://sys.stdout',
        },
        'rotating_file': {
            'class': 'logging.handlers.RotatingFileHandler',
            'filename': log_file_path,
            'maxBytes': LOG_FILE_MAX_BYTES,
            'backupCount': LOG_FILE_BACKUPS,
            'encoding': 'utf-8',
        },
    }
    for handler in handlers.values():
        handler.update(formatter='meme', level=level)

    loggers = {name: {'level': 'WARNING'} for name in QUIET_LOGGERS}
    loggers[''] = {'handlers': list(handlers), 'level': level}

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {'meme': {'format': LOG_FORMAT, 'datefmt': LOG_DATE_FORMAT}},
        'handlers': handlers,
        'loggers': loggers,
    }


def setup_logging(log_dir=None, level=None):
    """
    Configures logging for the meme generator and returns the log file path.
    The log directory is created if missing.
    """
    log_dir = log_dir or config.LOG_DIR
    level = (level or config.LOG_LEVEL).upper()
    os.makedirs(log_dir, exist_ok=True)
    log_file_path = os.path.join(log_dir, LOG_FILE_NAME)

    logging.config.dictConfig(build_logging_config(log_file_path, level))
    logger = logging.getLogger(__name__)
    logger.info(f"Logging initialized at level {level}, writing to {log_file_path}")
    return log_file_path
