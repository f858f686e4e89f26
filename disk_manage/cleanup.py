import logging
import os
from tqdm import tqdm

from disk_manage.config import ENV_FILE, load_config
from disk_manage.folders import TIMESTAMP_SOURCES, delete_folder, get_oldest_folder, list_subfolders
from disk_manage.log import clean_log, log_message, logger, setup_logging
from disk_manage.storage import check_storage


def sweep(config):
    """Jedno przejście po drzewie base/kategoria/grupa.

    Z każdej grupy usuwa dokładnie jeden, najstarszy podkatalog.
    """
    timestamp = TIMESTAMP_SOURCES[config.folder_age]
    deleted = []
    for category in list_subfolders(config.base_dir):
        item_groups = list_subfolders(category)
        if not item_groups:
            log_message(config.log_dir, f"No subfolders found in: {category}")
            continue

        for item_group in tqdm(item_groups, desc=os.path.basename(category), unit="dir",
                               leave=False, disable=not config.show_progress):
            oldest_folder = get_oldest_folder(item_group, timestamp)
            if oldest_folder is None:
                log_message(config.log_dir, f"No subfolders found in: {item_group}")
                continue
            log_message(config.log_dir, f"Deleting folder: {oldest_folder}")
            delete_folder(oldest_folder)
            deleted.append(oldest_folder)
    return deleted


def clean_disk(config, probe=check_storage):
    """Czyści, dopóki wolne miejsce nie przekroczy progu stop_percent.

    Nieznaleziony dysk traktujemy jak 100% wolnego. Bez MAX_SWEEPS pętla
    nie ma limitu przejść. Zwraca liczbę wykonanych przejść.
    """
    sweeps = 0
    deleted = 0
    while True:
        free_space_percentage = probe(config.base_dir, config.longest_mount_match)
        if free_space_percentage is None:
            free_space_percentage = 100.0

        if free_space_percentage > config.stop_percent:
            log_message(config.log_dir, f"Free space is above {config.stop_percent:g}%. Exiting cleanup.")
            break

        if config.max_sweeps and sweeps >= config.max_sweeps:
            log_message(
                config.log_dir,
                f"Sweep limit of {config.max_sweeps} reached with {free_space_percentage:.2f}% free "
                f"after deleting {deleted} folders. Stopping cleanup.",
                logging.WARNING,
            )
            break

        log_message(config.log_dir, f"Free space is below {config.stop_percent:g}%. Cleaning up...")
        deleted += len(sweep(config))
        sweeps += 1
    return sweeps


def main(env_file=ENV_FILE, probe=check_storage):
    config = load_config(env_file)
    clean_log(config.log_dir)
    setup_logging(config.log_dir, config.debug)
    logger.debug("Configuration: %s", config)

    free_space_percentage = probe(config.base_dir, config.longest_mount_match)
    if free_space_percentage is None:
        log_message(config.log_dir, "Disk not found for the base directory.")
        return

    log_message(config.log_dir, f"Current free space: {free_space_percentage:.2f}%")
    if free_space_percentage < config.start_percent:
        log_message(config.log_dir, "Free space below threshold. Starting cleanup...")
        clean_disk(config, probe)
    else:
        log_message(config.log_dir, "Sufficient free space. No cleanup needed.")


if __name__ == "__main__":
    main()
