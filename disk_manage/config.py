import os
from collections import namedtuple
from dotenv import dotenv_values

ENV_FILE = ".env"

Config = namedtuple("Config", [
    "base_dir",
    "log_dir",
    "start_percent",
    "stop_percent",
    "max_sweeps",
    "folder_age",
    "longest_mount_match",
    "show_progress",
    "debug",
])

FOLDER_AGE_CHOICES = ("created", "modified")


def load_config(env_file=ENV_FILE):
    """Wczytuje konfigurację z pliku .env.

    Zmienne ustawione już w środowisku procesu mają pierwszeństwo przed plikiem.
    """
    if not os.path.isfile(env_file):
        raise ValueError(f"Failed to read {env_file} file")
    values = dotenv_values(env_file)

    def get(key, default=None):
        value = os.environ.get(key)
        if value is None:
            value = values.get(key)
        return default if value in (None, "") else value

    def flag(key):
        return get(key, "False").lower() == "true"

    def number(key, default, cast=float):
        raw = get(key, default)
        try:
            return cast(raw)
        except ValueError:
            raise ValueError(f"{key} must be a number, got {raw!r}") from None

    base_dir = get("DIRPATH")
    if base_dir is None:
        raise ValueError(f"DIRPATH not set in {env_file}")
    log_dir = get("LOGPATH")
    if log_dir is None:
        raise ValueError(f"LOGPATH not set in {env_file}")

    start_percent = number("CLEANUP_START_PERCENT", "20")
    stop_percent = number("CLEANUP_STOP_PERCENT", "25")
    if not 0 <= start_percent <= stop_percent <= 100:
        raise ValueError(
            "Thresholds must satisfy 0 <= CLEANUP_START_PERCENT <= CLEANUP_STOP_PERCENT <= 100, "
            f"got {start_percent:g} and {stop_percent:g}"
        )

    max_sweeps = number("MAX_SWEEPS", "0", cast=int)
    if max_sweeps < 0:
        raise ValueError(f"MAX_SWEEPS must not be negative, got {max_sweeps}")

    folder_age = get("FOLDER_AGE", "created").lower()
    if folder_age not in FOLDER_AGE_CHOICES:
        raise ValueError(f"FOLDER_AGE must be one of {', '.join(FOLDER_AGE_CHOICES)}, got {folder_age!r}")

    return Config(
        base_dir=base_dir,
        log_dir=log_dir,
        start_percent=start_percent,
        stop_percent=stop_percent,
        max_sweeps=max_sweeps,
        folder_age=folder_age,
        longest_mount_match=flag("LONGEST_MOUNT_MATCH"),
        show_progress=flag("SHOW_PROGRESS"),
        debug=flag("DEBUG"),
    )
