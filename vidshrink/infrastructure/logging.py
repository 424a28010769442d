import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

def setup_logging(log_file: Optional[Path] = None, debug: bool = False) -> logging.Logger:
    """Configures the package logger.

    With a log file everything goes there. Without one, records reach stderr
    only in debug mode so the progress spinner stays readable.
    """
    logger = logging.getLogger("vidshrink")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handler: logging.Handler
    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file)
    elif debug:
        handler = logging.StreamHandler(sys.stderr)
    else:
        handler = logging.NullHandler()

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.propagate = False
    return logger
