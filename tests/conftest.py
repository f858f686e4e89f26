import os

import pytest

from disk_manage.config import Config
from disk_manage.log import close_logging

ENV_KEYS = (
    "DIRPATH", "LOGPATH", "CLEANUP_START_PERCENT", "CLEANUP_STOP_PERCENT", "MAX_SWEEPS",
    "FOLDER_AGE", "LONGEST_MOUNT_MATCH", "SHOW_PROGRESS", "DEBUG",
)


@pytest.fixture(autouse=True)
def clean_env_and_logging(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    yield
    close_logging()


@pytest.fixture
def dirs(tmp_path):
    base = tmp_path / "base"
    logs = tmp_path / "logs"
    base.mkdir()
    logs.mkdir()
    return base, logs


@pytest.fixture
def config(dirs):
    base, logs = dirs
    return Config(
        base_dir=str(base),
        log_dir=str(logs),
        start_percent=20.0,
        stop_percent=25.0,
        max_sweeps=0,
        folder_age="modified",
        longest_mount_match=False,
        show_progress=False,
        debug=False,
    )


def make_folder(path, mtime):
    path.mkdir(parents=True)
    os.utime(path, (mtime, mtime))
    return path


def read_messages(log_dir):
    with open(os.path.join(str(log_dir), "cleanup.log"), encoding="utf-8") as f:
        return [line.rstrip("\n").split(" - ", 2)[2] for line in f]


def probe_returning(*values):
    """Sonda zwracająca kolejne wartości, zapamiętuje wywołania."""
    remaining = list(values)
    calls = []

    def probe(base_dir, longest_match=False):
        calls.append(base_dir)
        return remaining.pop(0)

    probe.calls = calls
    return probe
