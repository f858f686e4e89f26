import os
import psutil

from disk_manage.log import logger


def calculate_percentage(total, available):
    return available / total * 100.0


def find_volumes(base_dir, longest_match=False):
    """Zwraca partycje, których punkt montowania jest prefiksem base_dir.

    Domyślnie w kolejności zwróconej przez system (wygrywa pierwsza), przy
    longest_match najpierw najdłuższy punkt montowania.
    """
    path = os.path.abspath(str(base_dir))
    volumes = [
        part for part in psutil.disk_partitions(all=False)
        if part.mountpoint and path.startswith(part.mountpoint)
    ]
    if longest_match:
        volumes.sort(key=lambda part: len(part.mountpoint), reverse=True)
    return volumes


def check_storage(base_dir, longest_match=False):
    """Procent wolnego miejsca na dysku z base_dir albo None, gdy dysku nie znaleziono."""
    for part in find_volumes(base_dir, longest_match):
        usage = psutil.disk_usage(part.mountpoint)
        if usage.total == 0:
            logger.debug("Skipping %s mounted at %s: zero capacity", part.device, part.mountpoint)
            continue
        logger.debug("Using %s mounted at %s for %s", part.device, part.mountpoint, base_dir)
        return calculate_percentage(usage.total, usage.free)
    return None
