import os
import shutil


def creation_time(path, stat=os.stat):
    """Czas utworzenia katalogu.

    Linux nie podaje st_birthtime przez os.stat, wtedy bierzemy czas modyfikacji.
    Uwaga: mtime katalogu zmienia się przy każdym dodaniu/usunięciu wpisu, więc
    katalog, do którego wciąż coś się nagrywa, wygląda na nowszy niż jest
    i zostanie usunięty później niż starsze, już zamknięte katalogi.
    """
    st = stat(path)
    birth = getattr(st, "st_birthtime", None)
    if birth is None:
        return st.st_mtime
    return birth


def modification_time(path, stat=os.stat):
    return stat(path).st_mtime


TIMESTAMP_SOURCES = {
    "created": creation_time,
    "modified": modification_time,
}


def list_subfolders(dir_path):
    """Bezpośrednie podkatalogi dir_path, posortowane po nazwie. Pliki są pomijane.

    Dowiązania do katalogów też się liczą (is_dir idzie za dowiązaniem).
    """
    with os.scandir(dir_path) as entries:
        return [entry.path for entry in sorted(entries, key=lambda e: e.name) if entry.is_dir()]


def get_oldest_folder(dir_path, timestamp=creation_time):
    """Zwraca najstarszy podkatalog dir_path albo None, gdy nie ma żadnego.

    Przy równych czasach wygrywa pierwszy napotkany.
    """
    oldest_folder = None
    oldest_time = None
    for folder in list_subfolders(dir_path):
        folder_time = timestamp(folder)
        if oldest_time is None or folder_time < oldest_time:
            oldest_time = folder_time
            oldest_folder = folder
    return oldest_folder


def delete_folder(folder_path):
    """Usuwa katalog z zawartością; dowiązanie usuwamy samo, bez celu."""
    if os.path.islink(folder_path):
        os.unlink(folder_path)
    else:
        shutil.rmtree(folder_path)
