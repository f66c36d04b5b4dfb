"""Save-file persistence for Kwazam games."""

from .codec import LoadedGame, deserialize, serialize
from .errors import SaveDataError, SaveFileError
from .storage import read_save_file, write_save_file

__all__ = [
    "LoadedGame",
    "SaveDataError",
    "SaveFileError",
    "deserialize",
    "read_save_file",
    "serialize",
    "write_save_file",
]
