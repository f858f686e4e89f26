"""Log zdarzeń w LOGPATH/cleanup.log.

Każda linia ma prefiks "czas - poziom - ", np.
"2024-05-01 03:00:00,123 - INFO - Deleting folder: /srv/cam1/day1/0800".
"""
import logging
import os
import time

LOG_FILE_NAME = "cleanup.log"
MAX_LOG_AGE = 7 * 24 * 60 * 60  # tydzień
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

logger = logging.getLogger("disk_manage")
logger.propagate = False


class StrictFileHandler(logging.FileHandler):
    """Błąd zapisu do logu przerywa działanie zamiast trafić na stderr."""

    def handleError(self, record):
        raise


def log_file_path(log_dir):
    return os.path.join(log_dir, LOG_FILE_NAME)


def setup_logging(log_dir, debug=False):
    """Podpina cleanup.log z katalogu log_dir jako jedyny plik logu.

    Plik otwierany jest od razu, więc brak katalogu kończy się wyjątkiem.
    """
    path = os.path.abspath(log_file_path(log_dir))
    for handler in list(logger.handlers):
        if getattr(handler, "baseFilename", None) == path:
            return logger
        logger.removeHandler(handler)
        handler.close()

    handler = StrictFileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    return logger


def close_logging(path=None):
    """Odpina handlery (wszystkie albo tylko te piszące do path)."""
    for handler in list(logger.handlers):
        if path is not None and getattr(handler, "baseFilename", None) != os.path.abspath(path):
            continue
        logger.removeHandler(handler)
        handler.close()


def log_info(msg, level=logging.INFO):
    print(msg, flush=True)
    logger.log(level, msg)


def log_message(log_dir, message, level=logging.INFO):
    setup_logging(log_dir)
    log_info(message, level)


def clean_log(log_dir, now=None):
    """Usuwa cleanup.log, jeśli nie był modyfikowany od ponad tygodnia.

    Błąd odczytu metadanych oznacza "nic nie rób", błąd usuwania leci dalej.
    """
    path = log_file_path(log_dir)
    try:
        modified = os.path.getmtime(path)
    except OSError:
        return False

    if now is None:
        now = time.time()
    if now - modified <= MAX_LOG_AGE:
        return False

    close_logging(path)
    os.remove(path)
    return True
