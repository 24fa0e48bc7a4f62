"""
Logging setup shared by the CLI and the library.

Handlers are attached once, to the 'docsolver' application logger;
'docsolver.*' module loggers carry no handlers and propagate to it. The log
file lives under the project directory and is created on the first write,
not at import.
"""
import logging
import logging.handlers
from pathlib import Path
from .constants import (
    LOG_LEVEL, LOG_FORMAT, LOG_FILE,
    LOG_MAX_SIZE_MB, LOG_BACKUP_COUNT
)

APP_LOGGER_NAME = 'docsolver'
PROJECT_DIR = Path(__file__).resolve().parent.parent


def resolve_log_file(log_file: str = LOG_FILE) -> Path:
    """Relative log paths are anchored at the project directory, not the cwd."""
    path = Path(log_file)
    return path if path.is_absolute() else PROJECT_DIR / path


class LazyRotatingFileHandler(logging.handlers.RotatingFileHandler):
    """RotatingFileHandler that creates its directory when the file is first opened."""

    def __init__(self, filename: Path, **kwargs):
        super().__init__(str(filename), delay=True, **kwargs)

    def _open(self):
        Path(self.baseFilename).parent.mkdir(parents=True, exist_ok=True)
        return super()._open()


def setup_logger(name: str = None) -> logging.Logger:
    """
    Return the logger called name, configuring it on first request.

        logger = setup_logger(__name__)
        logger.info("Extracted 412 chars")

    The application logger ('docsolver', the default) and stand-alone names
    get a console handler at INFO and a rotating file handler at DEBUG.
    Names under 'docsolver.' are returned untouched.
    """
    logger = logging.getLogger(name or APP_LOGGER_NAME)

    if logger.handlers or logger.name.startswith(APP_LOGGER_NAME + '.'):
        return logger

    logger.setLevel(getattr(logging, LOG_LEVEL))
    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setLevel(logging.INFO)
    console.setFormatter(formatter)
    logger.addHandler(console)

    file_handler = LazyRotatingFileHandler(
        resolve_log_file(),
        maxBytes=LOG_MAX_SIZE_MB * 1024 * 1024,
        backupCount=LOG_BACKUP_COUNT
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    return logger


def get_logger(name: str = None) -> logging.Logger:
    """Same as setup_logger; the name modules import."""
    return setup_logger(name)


# Configure the application logger at import so module loggers have a parent
logger = setup_logger(APP_LOGGER_NAME)
