from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Union

from loguru import logger

from .errors import SaveFileError

PathLike = Union[str, Path]


def write_save_file(path: PathLike, text: str) -> Path:
    """Write ``text`` to ``path`` via a temporary sibling and an atomic rename."""
    target = Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as handle:
                handle.write(text)
            os.replace(tmp_name, target)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
    except OSError as exc:
        raise SaveFileError(f"Failed to save {target}: {exc}") from exc
    logger.info("Game state saved to {}", target)
    return target


def read_save_file(path: PathLike) -> str:
    source = Path(path)
    if not source.is_file():
        raise SaveFileError(f"File not found: {source}")
    try:
        return source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SaveFileError(f"Failed to load {source}: {exc}") from exc
