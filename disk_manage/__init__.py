"""Pilnuje wolnego miejsca na dysku z katalogami nagrań / backupów."""

__version__ = "0.1.0"
