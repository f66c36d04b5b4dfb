class SaveFileError(Exception):
    """A save file could not be written or read back."""


class SaveDataError(SaveFileError, ValueError):
    """The save file was read but its contents are unusable."""
